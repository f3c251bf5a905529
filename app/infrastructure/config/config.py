from pydantic_settings import BaseSettings, SettingsConfigDict


class AppConfig(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    APP_NAME: str = "Nail Studio"
    DEBUG: bool = False
    CORS_ALLOWED_ORIGINS: str = "http://localhost:5173,http://localhost:3000"

    # file | memory
    STORAGE_BACKEND: str = "file"
    DATA_DIR: str = "data"
    UPLOADS_DIR: str = "uploads"
    UPLOADS_URL: str = "/uploads"
    MAX_IMAGE_SIZE_MB: int = 5

    TIMEZONE: str = "Europe/Moscow"
    DEFAULT_ADMIN_PASSWORD: str = "admin123"

    TELEGRAM_API_URL: str = "https://api.telegram.org"
    TELEGRAM_TIMEOUT: float = 10.0
    TELEGRAM_WEBHOOK_SECRET: str | None = None

    LOG_LEVEL: str = "INFO"
    # console | json
    LOG_FORMAT: str = "console"


class JWTConfig(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_prefix="JWT_", extra="ignore")

    SECRET_KEY: str = "change-me-in-production-use-a-long-random-secret"
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 12
    # Старые клиенты присылают пароль как bearer-токен
    ALLOW_PASSWORD_BEARER: bool = True


APP_CONFIG = AppConfig()
JWT_CONFIG = JWTConfig()
