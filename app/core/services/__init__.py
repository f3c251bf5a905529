from app.core.services.auth_service import AuthService
from app.core.services.block_service import BlockService
from app.core.services.booking_service import BookingService
from app.core.services.catalog_service import CatalogService
from app.core.services.image_service import ImageService
from app.core.services.notification_service import NotificationService
from app.core.services.review_service import ReviewService
from app.core.services.settings_service import SettingsService
from app.core.services.subscriber_service import SubscriberService


__all__ = [
    "AuthService",
    "BlockService",
    "BookingService",
    "CatalogService",
    "ImageService",
    "NotificationService",
    "ReviewService",
    "SettingsService",
    "SubscriberService",
]
