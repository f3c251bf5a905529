import json
from uuid import uuid4

from app.infrastructure.config.config import APP_CONFIG
from app.infrastructure.database.adapters.base import StorageConnection
from app.infrastructure.logging.logger import get_logger
from app.infrastructure.security.passwords import hash_password
from app.utils.enums import CollectionEnum


logger = get_logger(__name__)


def default_settings() -> dict:
    return {
        "id": str(uuid4()),
        "masterName": "Анна Петрова",
        "masterPhone": "+7 (950) 123-45-67",
        "masterSignature": "Мастер маникюра и nail-дизайна",
        "masterDescription": (
            "Создаю красивые и здоровые ногти уже более 5 лет. "
            "Индивидуальный подход к каждому клиенту."
        ),
        "masterPhoto": None,
        "experienceYears": "5+",
        "experienceText": "лет опыта",
        "satisfiedClients": "500+",
        "clientsText": "довольных клиентов",
        "telegramEnabled": False,
        "telegramUsername": None,
        "whatsappEnabled": False,
        "whatsappPhone": None,
        "instagramEnabled": False,
        "instagramUsername": None,
        "botToken": None,
        "copyright": "© 2024 Все права защищены",
        "adminPassword": hash_password(APP_CONFIG.DEFAULT_ADMIN_PASSWORD),
    }


def _block(block_type: str, title: str, content: str, order: int, stats: list[dict] | None = None) -> dict:
    return {
        "id": str(uuid4()),
        "blockType": block_type,
        "enabled": True,
        "title": title,
        "content": content,
        "image": None,
        "images": None,
        "stats": json.dumps(stats, ensure_ascii=False) if stats else None,
        "order": order,
    }


def default_blocks() -> list[dict]:
    return [
        _block(
            "about",
            "Обо мне",
            "Меня зовут Анна, и я занимаюсь nail-индустрией уже более 5 лет. "
            "Моя страсть - создавать красивые и здоровые ногти, которые подчеркивают "
            "индивидуальность каждой клиентки.",
            0,
            stats=[
                {"label": "5+", "value": "лет опыта"},
                {"label": "500+", "value": "довольных клиентов"},
            ],
        ),
        _block(
            "services",
            "Мои услуги",
            "Профессиональный уход за ногтями с использованием качественных материалов",
            1,
        ),
        _block("reviews", "Отзывы клиентов", "Что говорят о моей работе довольные клиентки", 2),
        _block("contacts", "Контакты", "Свяжитесь со мной для записи на маникюр", 3),
    ]


def default_services() -> list[dict]:
    services = [
        ("Классический маникюр", "Базовый уход за ногтями и кутикулой", "1500", "💅"),
        ("Покрытие гель-лаком", "Долговременное покрытие с дизайном", "2500", "✨"),
        ("Наращивание ногтей", "Создание идеальной формы и длины", "3500", "🌟"),
    ]
    return [
        {
            "id": str(uuid4()),
            "name": name,
            "description": description,
            "price": price,
            "icon": icon,
            "image": None,
        }
        for name, description, price, icon in services
    ]


COLLECTION_DEFAULTS = {
    CollectionEnum.BLOCKS.value: default_blocks,
    CollectionEnum.SERVICES.value: default_services,
    CollectionEnum.REVIEWS.value: list,
    CollectionEnum.REQUESTS.value: list,
    CollectionEnum.SUBSCRIBERS.value: list,
    CollectionEnum.IMAGES.value: list,
}


async def init_settings(connection: StorageConnection) -> None:
    if await connection.exists(CollectionEnum.SETTINGS.value):
        logger.info("settings_already_exist")
        return

    await connection.write(CollectionEnum.SETTINGS.value, default_settings())
    logger.info("settings_created")


async def init_collection(connection: StorageConnection, name: str) -> None:
    if await connection.exists(name):
        logger.info("collection_already_exists", collection=name)
        return

    items = COLLECTION_DEFAULTS[name]()
    await connection.write(name, items)
    logger.info("collection_created", collection=name, count=len(items))


async def init_storage(connection: StorageConnection) -> None:
    try:
        await init_settings(connection)
        for name in COLLECTION_DEFAULTS:
            await init_collection(connection, name)
        logger.info("storage_initialized", backend=type(connection).__name__)
    except Exception as e:
        logger.error("storage_initialization_failed", error=str(e), exc_info=True)
        raise
