# backend/estate_board/api/dependencies.py
from typing import Optional

from fastapi import Depends, HTTPException, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from ..config import Settings
from ..models import Project
from ..services.auth import AuthError, verify_token
from ..services.cleanup import CleanupService
from ..services.storage import FileStorage
from ..utils.logging import api_logger

bearer_scheme = HTTPBearer(auto_error=False)


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_storage(request: Request) -> FileStorage:
    return request.app.state.storage


def get_cleanup_service(storage: FileStorage = Depends(get_storage)) -> CleanupService:
    return CleanupService(storage)


def require_auth(
        credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
        settings: Settings = Depends(get_app_settings)
) -> dict:
    if credentials is None or credentials.scheme.lower() != "bearer":
        raise HTTPException(
            status_code=401,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"}
        )
    try:
        return verify_token(credentials.credentials, settings)
    except AuthError as e:
        api_logger.warning("Rejected bearer token", extra={"reason": str(e)})
        raise HTTPException(
            status_code=401,
            detail=str(e),
            headers={"WWW-Authenticate": "Bearer"}
        )


def get_project_or_404(db: Session, project_id: int) -> Project:
    project = db.query(Project).filter(Project.id == project_id).first()
    if not project:
        api_logger.warning("Project not found", extra={"project_id": project_id})
        raise HTTPException(status_code=404, detail="Project not found")
    return project
