import httpx
from aiogram import Bot
from aiogram.client.default import DefaultBotProperties
from aiogram.enums import ParseMode
from aiogram.utils.token import TokenValidationError

from app.infrastructure.logging import get_logger
from app.infrastructure.telegram.session import HttpxSession


logger = get_logger(__name__)


def create_bot(http_client: httpx.AsyncClient, bot_token: str | None) -> Bot | None:
    """Bot для токена из настроек. None, если токена нет или он не похож на токен бота."""
    if not bot_token:
        return None
    try:
        return Bot(
            token=bot_token,
            session=HttpxSession(http_client),
            default=DefaultBotProperties(parse_mode=ParseMode.HTML),
        )
    except TokenValidationError:
        logger.warning("telegram_bot_token_invalid")
        return None
