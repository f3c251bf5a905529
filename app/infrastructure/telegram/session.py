from collections.abc import AsyncGenerator
from enum import Enum
from typing import Any

import httpx
from aiogram import Bot
from aiogram.client.session.base import BaseSession
from aiogram.client.telegram import TelegramAPIServer
from aiogram.exceptions import TelegramNetworkError
from aiogram.methods import TelegramMethod
from aiogram.methods.base import TelegramType

from app.infrastructure.config.config import APP_CONFIG


class HttpxSession(BaseSession):
    """
    Сессия aiogram поверх общего httpx.AsyncClient приложения.

    Клиентом владеет приложение (lifespan), поэтому close() его не закрывает.
    """

    def __init__(self, http_client: httpx.AsyncClient, **kwargs: Any):
        kwargs.setdefault("api", TelegramAPIServer.from_base(APP_CONFIG.TELEGRAM_API_URL.rstrip("/")))
        kwargs.setdefault("timeout", APP_CONFIG.TELEGRAM_TIMEOUT)
        super().__init__(**kwargs)
        self.http_client = http_client

    def build_form_data(self, bot: Bot, method: TelegramMethod[TelegramType]) -> dict[str, str]:
        data = {}
        for key, value in method.model_dump(warnings=False).items():
            value = self.prepare_value(value, bot=bot, files={})
            if not value:
                continue
            # ParseMode и другие str-перечисления отдаются как есть
            data[key] = value.value if isinstance(value, Enum) else value
        return data

    async def make_request(
        self,
        bot: Bot,
        method: TelegramMethod[TelegramType],
        timeout: int | None = None,
    ) -> TelegramType:
        url = self.api.api_url(token=bot.token, method=method.__api_method__)
        try:
            response = await self.http_client.post(
                url,
                data=self.build_form_data(bot, method),
                timeout=self.timeout if timeout is None else timeout,
            )
        except httpx.HTTPError as exc:
            raise TelegramNetworkError(method=method, message=f"{type(exc).__name__}: {exc}") from exc

        checked = self.check_response(
            bot=bot,
            method=method,
            status_code=response.status_code,
            content=response.text,
        )
        return checked.result

    async def stream_content(
        self,
        url: str,
        headers: dict[str, Any] | None = None,
        timeout: int = 30,
        chunk_size: int = 65536,
        raise_for_status: bool = True,
    ) -> AsyncGenerator[bytes, None]:
        async with self.http_client.stream("GET", url, headers=headers, timeout=timeout) as response:
            if raise_for_status:
                response.raise_for_status()
            async for chunk in response.aiter_bytes(chunk_size):
                yield chunk

    async def close(self) -> None:
        pass
