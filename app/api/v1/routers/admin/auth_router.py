from typing import Annotated
from fastapi import APIRouter, Depends

from app.api.v1.dependencies import get_auth_service
from app.core.dto.auth import LoginModel, LoginResponseModel
from app.core.services.auth_service import AuthService
from app.infrastructure.errors.auth_errors import InvalidCredentials
from app.utils.error_extra import error_response


router = APIRouter()


@router.post(
    "/login",
    responses={**error_response(InvalidCredentials)}
)
async def login(
    form: LoginModel,
    auth_service: Annotated[AuthService, Depends(get_auth_service)]
) -> LoginResponseModel:
    """
    Вход в админ-панель по паролю мастера.

    Если пароль верен, возвращает access-токен, который передаётся
    в заголовке Authorization: Bearer <token> при обращении к
    защищённым методам. Смена пароля делает старые токены недействительными.

    Args:
        form (LoginModel): Пароль администратора.

    Returns:
        LoginResponseModel: success, JWT-токен и его тип (bearer).

    Raises:
        InvalidCredentials (401): Если пароль неверен или не передан.
    """
    return await auth_service.login(form)
