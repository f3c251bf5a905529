from pydantic import BaseModel

from app.core.dto.base import CamelModel


class LoginModel(BaseModel):
    password: str | None = None


class LoginResponseModel(CamelModel):
    success: bool = True
    token: str
    token_type: str = "bearer"
