import hashlib

from passlib.context import CryptContext


pwd_context = CryptContext(schemes=["argon2"], deprecated="auto")


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str | None) -> bool:
    if not plain_password or not hashed_password:
        return False
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except (ValueError, TypeError):
        # в хранилище лежит не хеш
        return False


def is_password_hash(value: str) -> bool:
    return pwd_context.identify(value) is not None


def hash_fingerprint(hashed_password: str) -> str:
    """Короткий отпечаток хеша: токены старого пароля перестают проходить проверку."""
    return hashlib.sha256(hashed_password.encode("utf-8")).hexdigest()[:16]
