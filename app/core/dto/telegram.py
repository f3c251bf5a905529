from pydantic import BaseModel, Field

from app.core.dto.base import CamelModel


class DeliveryResult(BaseModel):
    chat_id: str
    success: bool
    error: str | None = None


class DeliveryReport(BaseModel):
    total: int = 0
    delivered: int = 0
    results: list[DeliveryResult] = []


class TelegramTestResultModel(CamelModel):
    success: bool = True
    message: str
    delivered: int
    total: int


class WebhookSetupModel(BaseModel):
    url: str = Field(..., min_length=1)
