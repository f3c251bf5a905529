from app.core.repositories.base import JsonRepository
from app.core.repositories.block_repository import BlockRepository
from app.core.repositories.booking_repository import BookingRequestRepository
from app.core.repositories.image_repository import ImageRepository
from app.core.repositories.review_repository import ReviewRepository
from app.core.repositories.service_repository import ServiceRepository
from app.core.repositories.settings_repository import SettingsRepository
from app.core.repositories.subscriber_repository import SubscriberRepository


__all__ = [
    "JsonRepository",
    "BlockRepository",
    "BookingRequestRepository",
    "ImageRepository",
    "ReviewRepository",
    "ServiceRepository",
    "SettingsRepository",
    "SubscriberRepository",
]
