from datetime import datetime, timezone
from html import escape
from zoneinfo import ZoneInfo

from app.core.dto.booking import BookingRequestModel
from app.infrastructure.config.config import APP_CONFIG
from app.utils.enums import SERVICE_SENTINEL_LABELS


def format_local_time(moment: datetime | None = None) -> str:
    moment = moment or datetime.now(timezone.utc)
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(ZoneInfo(APP_CONFIG.TIMEZONE)).strftime("%d.%m.%Y, %H:%M:%S")


def service_display_name(service: str) -> str:
    return SERVICE_SENTINEL_LABELS.get(service, service)


def build_request_message(request: BookingRequestModel) -> str:
    lines = [
        "🔔 <b>Новая заявка!</b>",
        "",
        f"👤 <b>Имя:</b> {escape(request.name)}",
        f"📞 <b>Телефон:</b> {escape(request.phone)}",
        f"💅 <b>Услуга:</b> {escape(service_display_name(request.service))}",
    ]
    if request.comment:
        lines.append(f"💬 <b>Комментарий:</b> {escape(request.comment)}")
    lines += [
        "",
        f"⏰ <b>Время:</b> {format_local_time(request.created_at)}",
    ]
    return "\n".join(lines)


def build_test_message(master_name: str) -> str:
    return "\n".join(
        [
            "🔔 <b>Тестовое уведомление!</b>",
            "",
            f"Это тестовое сообщение от {escape(master_name)}.",
            "Если вы его получили, значит настройка работает правильно!",
            "",
            f"⏰ <b>Время:</b> {format_local_time()}",
        ]
    )


def build_welcome_message(master_name: str) -> str:
    return (
        "Добро пожаловать! Теперь вы будете получать уведомления "
        f"о новых заявках от {master_name}."
    )
