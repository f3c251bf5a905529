from enum import Enum


class BlockTypeEnum(str, Enum):
    ABOUT = "about"
    SERVICES = "services"
    REVIEWS = "reviews"
    CONTACTS = "contacts"
    CUSTOM = "custom"

    @classmethod
    def fixed(cls) -> frozenset[str]:
        return frozenset({cls.ABOUT.value, cls.SERVICES.value, cls.REVIEWS.value, cls.CONTACTS.value})


class ServiceSentinelEnum(str, Enum):
    CONSULTATION = "consultation"
    OTHER = "other"


SERVICE_SENTINEL_LABELS = {
    ServiceSentinelEnum.CONSULTATION.value: "Консультация",
    ServiceSentinelEnum.OTHER.value: "Другое",
}


class CollectionEnum(str, Enum):
    SETTINGS = "settings"
    BLOCKS = "blocks"
    SERVICES = "services"
    REVIEWS = "reviews"
    REQUESTS = "requests"
    SUBSCRIBERS = "subscribers"
    IMAGES = "images"
