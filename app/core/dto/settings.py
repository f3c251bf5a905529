from pydantic import Field, field_validator

from app.core.dto.base import CamelModel, forbid_null


class PublicSettingsModel(CamelModel):
    id: str
    master_name: str
    master_phone: str
    master_signature: str
    master_description: str
    master_photo: str | None = None

    experience_years: str | None = None
    experience_text: str | None = None
    satisfied_clients: str | None = None
    clients_text: str | None = None

    telegram_enabled: bool = False
    telegram_username: str | None = None
    whatsapp_enabled: bool = False
    whatsapp_phone: str | None = None
    instagram_enabled: bool = False
    instagram_username: str | None = None

    copyright: str | None = None


class AdminSettingsModel(PublicSettingsModel):
    bot_token: str | None = None


class SettingsModel(AdminSettingsModel):
    """Полная запись настроек, как она лежит в хранилище."""

    admin_password: str


class SettingsUpdateModel(CamelModel):
    master_name: str | None = Field(None, min_length=1)
    master_phone: str | None = Field(None, min_length=1)
    master_signature: str | None = None
    master_description: str | None = None
    master_photo: str | None = None

    experience_years: str | None = None
    experience_text: str | None = None
    satisfied_clients: str | None = None
    clients_text: str | None = None

    telegram_enabled: bool | None = None
    telegram_username: str | None = None
    whatsapp_enabled: bool | None = None
    whatsapp_phone: str | None = None
    instagram_enabled: bool | None = None
    instagram_username: str | None = None

    bot_token: str | None = None
    copyright: str | None = None
    admin_password: str | None = None

    reject_null = field_validator(
        "master_name",
        "master_phone",
        "master_signature",
        "master_description",
        "telegram_enabled",
        "whatsapp_enabled",
        "instagram_enabled",
    )(forbid_null)
