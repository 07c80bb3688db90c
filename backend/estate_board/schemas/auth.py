# backend/estate_board/schemas/auth.py
from .base import BaseSchema


class LoginRequest(BaseSchema):
    password: str


class TokenResponse(BaseSchema):
    token: str
    token_type: str = "bearer"
    expires_in: int
