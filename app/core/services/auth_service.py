from datetime import datetime, timedelta, timezone

import jwt

from app.core.dto.auth import LoginModel, LoginResponseModel
from app.core.dto.settings import SettingsModel
from app.core.repositories.settings_repository import SettingsRepository
from app.infrastructure.config.config import JWT_CONFIG
from app.infrastructure.errors.auth_errors import InvalidCredentials
from app.infrastructure.logging import get_logger
from app.infrastructure.security.passwords import hash_fingerprint, verify_password


logger = get_logger(__name__)


class AuthService:
    def __init__(self, repository: SettingsRepository):
        self.repository = repository

    def _create_access_token(self, settings: SettingsModel) -> str:
        expire = datetime.now(timezone.utc) + timedelta(minutes=JWT_CONFIG.ACCESS_TOKEN_EXPIRE_MINUTES)
        to_encode = {
            "sub": "admin",
            "type": "access",
            "pwh": hash_fingerprint(settings.admin_password),
            "exp": expire,
        }
        return jwt.encode(to_encode, JWT_CONFIG.SECRET_KEY, algorithm=JWT_CONFIG.ALGORITHM)

    def _decode_access_token(self, token: str, settings: SettingsModel) -> bool:
        try:
            payload = jwt.decode(token, JWT_CONFIG.SECRET_KEY, algorithms=[JWT_CONFIG.ALGORITHM])
        except jwt.InvalidTokenError:
            return False
        return (
            payload.get("type") == "access"
            and payload.get("pwh") == hash_fingerprint(settings.admin_password)
        )

    async def validate_password(self, password: str | None) -> bool:
        settings = await self.repository.get()
        return verify_password(password or "", settings.admin_password)

    async def login(self, form: LoginModel) -> LoginResponseModel:
        settings = await self.repository.get()
        if not verify_password(form.password or "", settings.admin_password):
            logger.warning("admin_login_failed")
            raise InvalidCredentials()

        logger.info("admin_logged_in")
        return LoginResponseModel(token=self._create_access_token(settings))

    async def verify_token(self, token: str | None) -> None:
        """Проверка bearer-значения на каждом запросе, без сессий."""
        if not token:
            raise InvalidCredentials()

        settings = await self.repository.get()
        if self._decode_access_token(token, settings):
            return
        if JWT_CONFIG.ALLOW_PASSWORD_BEARER and verify_password(token, settings.admin_password):
            return
        raise InvalidCredentials()
