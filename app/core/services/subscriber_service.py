from typing import Any

from aiogram.exceptions import AiogramError
from aiogram.types import Update
from pydantic import ValidationError

from app.core.dto.subscriber import SubscriberCreateModel, SubscriberModel
from app.core.repositories.subscriber_repository import SubscriberRepository
from app.core.services.notification_service import NotificationService
from app.infrastructure.errors.base import ConflictError
from app.infrastructure.logging import get_logger
from app.infrastructure.telegram.messages import build_welcome_message


logger = get_logger(__name__)

START_COMMAND = "/start"


class SubscriberService:

    def __init__(
        self,
        repository: SubscriberRepository,
        notification_service: NotificationService,
    ):
        self.repository = repository
        self.notification_service = notification_service

    async def get_subscribers(self) -> list[SubscriberModel]:
        return await self.repository.get_all_items()

    async def create_subscriber(self, data: SubscriberCreateModel) -> SubscriberModel:
        subscriber = await self.repository.add_item(data.model_dump())
        logger.info("subscriber_created", chat_id=subscriber.chat_id)
        return subscriber

    async def delete_subscriber(self, subscriber_id: str) -> None:
        await self.repository.delete_item(subscriber_id)
        logger.info("subscriber_deleted", subscriber_id=subscriber_id)

    @staticmethod
    def is_start_command(text: str | None) -> bool:
        parts = (text or "").split()
        if not parts:
            return False
        # /start, /start <payload>, /start@bot_name
        return parts[0].split("@", 1)[0] == START_COMMAND

    @staticmethod
    def parse_update(payload: dict[str, Any]) -> Update | None:
        try:
            return Update.model_validate(payload)
        except ValidationError as exc:
            logger.warning("telegram_update_invalid", update_id=payload.get("update_id"), errors=exc.error_count())
            return None

    async def handle_update(self, payload: dict[str, Any]) -> SubscriberModel | None:
        """Регистрирует подписчика по команде /start. Повторный /start ничего не создаёт."""
        update = self.parse_update(payload)
        message = update.message if update else None
        if not message or not self.is_start_command(message.text):
            return None

        chat_id = str(message.chat.id)
        if await self.repository.get_by_chat_id(chat_id):
            logger.info("subscriber_already_registered", chat_id=chat_id)
            return None

        sender = message.from_user
        try:
            subscriber = await self.create_subscriber(
                SubscriberCreateModel(
                    chat_id=chat_id,
                    username=sender.username if sender else None,
                    first_name=sender.first_name if sender else None,
                    last_name=sender.last_name if sender else None,
                )
            )
        except ConflictError:
            # параллельный /start того же чата успел раньше
            logger.info("subscriber_already_registered", chat_id=chat_id)
            return None

        await self._send_welcome(chat_id)
        return subscriber

    async def _send_welcome(self, chat_id: str) -> None:
        settings = await self.notification_service.settings_repository.get()
        bot = self.notification_service.get_bot(settings.bot_token)
        if not bot:
            logger.warning("welcome_message_skipped", chat_id=chat_id, reason="bot_token_not_configured")
            return

        try:
            await bot.send_message(chat_id=chat_id, text=build_welcome_message(settings.master_name), parse_mode=None)
        except AiogramError as exc:
            logger.error("welcome_message_failed", chat_id=chat_id, error=str(exc))
