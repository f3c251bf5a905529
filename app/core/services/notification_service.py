import asyncio

import httpx
from aiogram import Bot
from aiogram.exceptions import AiogramError

from app.core.dto.booking import BookingRequestModel
from app.core.dto.subscriber import SubscriberModel
from app.core.dto.telegram import DeliveryReport, DeliveryResult
from app.core.repositories.settings_repository import SettingsRepository
from app.core.repositories.subscriber_repository import SubscriberRepository
from app.infrastructure.config.config import APP_CONFIG
from app.infrastructure.errors.telegram_errors import BotTokenNotConfigured, NoSubscribers, TelegramRequestFailed
from app.infrastructure.logging import get_logger
from app.infrastructure.telegram.bot import create_bot
from app.infrastructure.telegram.messages import build_request_message, build_test_message


logger = get_logger(__name__)


class NotificationService:
    """
    Рассылка уведомлений всем подписчикам бота.

    Каждому подписчику - отдельная задача; ошибка доставки одному
    подписчику логируется и не мешает остальным. Повторов нет.
    """

    def __init__(
        self,
        settings_repository: SettingsRepository,
        subscriber_repository: SubscriberRepository,
        http_client: httpx.AsyncClient,
    ):
        self.settings_repository = settings_repository
        self.subscriber_repository = subscriber_repository
        self.http_client = http_client

    async def get_bot_token(self) -> str | None:
        settings = await self.settings_repository.get()
        return settings.bot_token or None

    def get_bot(self, bot_token: str | None) -> Bot | None:
        return create_bot(self.http_client, bot_token)

    async def _deliver(self, bot: Bot, subscriber: SubscriberModel, text: str) -> DeliveryResult:
        try:
            await bot.send_message(chat_id=subscriber.chat_id, text=text)
        except Exception as exc:
            # граница изоляции: любая ошибка одного получателя - только его неудача
            logger.error(
                "telegram_delivery_failed",
                chat_id=subscriber.chat_id,
                error=str(exc),
                error_type=type(exc).__name__,
            )
            return DeliveryResult(chat_id=subscriber.chat_id, success=False, error=str(exc))

        logger.info(
            "telegram_message_sent",
            chat_id=subscriber.chat_id,
            recipient=subscriber.first_name or subscriber.username or subscriber.chat_id,
        )
        return DeliveryResult(chat_id=subscriber.chat_id, success=True)

    async def broadcast(self, text: str) -> DeliveryReport:
        bot = self.get_bot(await self.get_bot_token())
        if not bot:
            logger.warning("telegram_broadcast_skipped", reason="bot_token_not_configured")
            return DeliveryReport()

        subscribers = await self.subscriber_repository.get_all_items()
        if not subscribers:
            logger.warning("telegram_broadcast_skipped", reason="no_subscribers")
            return DeliveryReport()

        logger.info("telegram_broadcast_started", subscribers=len(subscribers))
        results = await asyncio.gather(
            *(self._deliver(bot, subscriber, text) for subscriber in subscribers)
        )

        report = DeliveryReport(
            total=len(results),
            delivered=sum(1 for result in results if result.success),
            results=list(results),
        )
        logger.info("telegram_broadcast_finished", total=report.total, delivered=report.delivered)
        return report

    async def notify_new_request(self, request: BookingRequestModel) -> None:
        try:
            await self.broadcast(build_request_message(request))
        except Exception as exc:
            logger.error("request_notification_failed", request_id=request.id, error=str(exc), exc_info=True)

    async def send_test_message(self) -> DeliveryReport:
        settings = await self.settings_repository.get()
        if not self.get_bot(settings.bot_token):
            raise BotTokenNotConfigured()
        if not await self.subscriber_repository.get_all_items():
            raise NoSubscribers()
        return await self.broadcast(build_test_message(settings.master_name))

    async def register_webhook(self, url: str) -> None:
        bot = self.get_bot(await self.get_bot_token())
        if not bot:
            raise BotTokenNotConfigured()
        try:
            await bot.set_webhook(
                url=url,
                secret_token=APP_CONFIG.TELEGRAM_WEBHOOK_SECRET,
                allowed_updates=["message"],
            )
        except AiogramError as exc:
            logger.error("telegram_webhook_setup_failed", url=url, error=str(exc))
            raise TelegramRequestFailed(f"Не удалось установить webhook: {exc}") from exc
        logger.info("telegram_webhook_registered", url=url)
