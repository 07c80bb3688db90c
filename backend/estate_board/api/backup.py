# backend/estate_board/api/backup.py
from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from .dependencies import get_cleanup_service
from ..database import get_db
from ..schemas.backup import BackupImportResult, BackupPayload
from ..services.backup import export_snapshot, restore_snapshot
from ..services.cleanup import CleanupService
from ..utils.logging import api_logger

router = APIRouter(prefix="/api/backup", tags=["backup"])


@router.get("")
async def export_backup(db: Session = Depends(get_db)):
    api_logger.info("Starting backup export")

    try:
        snapshot = export_snapshot(db)
    except Exception as e:
        api_logger.error("Backup export failed", extra={"error": str(e)}, exc_info=True)
        raise HTTPException(status_code=500, detail="failed_to_export_backup")

    filename = f"backup-{snapshot.exported_at.strftime('%Y%m%d-%H%M%S')}.json"
    api_logger.info("Backup export successful", extra={"project_count": snapshot.project_count})
    return JSONResponse(
        content=snapshot.model_dump(mode="json", by_alias=True),
        headers={"Content-Disposition": f'attachment; filename="{filename}"'}
    )


@router.post("", response_model=BackupImportResult)
async def import_backup(
        payload: BackupPayload,
        db: Session = Depends(get_db),
        cleanup: CleanupService = Depends(get_cleanup_service)
):
    """Destructive restore: replaces all projects with the snapshot in a single transaction"""
    api_logger.info("Starting backup import", extra={"project_count": len(payload.projects)})

    try:
        imported, stored_names = restore_snapshot(db, payload)
        db.commit()
    except Exception as e:
        db.rollback()
        api_logger.error("Backup import failed, previous data kept", extra={"error": str(e)}, exc_info=True)
        raise HTTPException(status_code=500, detail="failed_to_import_backup")

    removed = cleanup.delete_stored_files(stored_names)
    api_logger.info("Backup import successful", extra={
        "imported_projects": imported,
        "stored_files_removed": removed
    })
    return BackupImportResult(imported_projects=imported)
