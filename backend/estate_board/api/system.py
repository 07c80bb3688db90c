# backend/estate_board/api/system.py
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, HTTPException

from .dependencies import get_app_settings
from ..config import Settings
from ..schemas.auth import LoginRequest, TokenResponse
from ..services.auth import check_password, create_access_token
from ..utils.logging import api_logger

router = APIRouter(prefix="/api", tags=["system"])


@router.get("/health")
async def health(settings: Settings = Depends(get_app_settings)):
    return {
        "ok": True,
        "service": settings.SERVICE_NAME,
        "ts": datetime.now(timezone.utc).isoformat()
    }


@router.post("/login", response_model=TokenResponse)
async def login(credentials: LoginRequest, settings: Settings = Depends(get_app_settings)):
    if not settings.APP_PASSWORD:
        api_logger.error("Login attempted but APP_PASSWORD is not configured")

    if not check_password(credentials.password, settings):
        api_logger.warning("Login failed")
        raise HTTPException(
            status_code=401,
            detail="invalid_credentials",
            headers={"WWW-Authenticate": "Bearer"}
        )

    api_logger.info("Login succeeded")
    return TokenResponse(
        token=create_access_token(settings),
        expires_in=settings.TOKEN_EXPIRE_HOURS * 3600
    )
