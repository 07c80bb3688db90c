# backend/estate_board/api/files.py
from typing import List, Optional

from fastapi import APIRouter, Depends, File, HTTPException, Response, UploadFile
from fastapi.responses import FileResponse
from sqlalchemy.orm import Session

from .dependencies import get_app_settings, get_cleanup_service, get_project_or_404, get_storage
from ..config import Settings
from ..database import get_db
from ..models import ProjectFile
from ..schemas.project_file import ProjectFile as ProjectFileSchema
from ..services.cleanup import CleanupService
from ..services.storage import FileStorage
from ..utils.filenames import content_disposition, recover_filename
from ..utils.files import FileTooLargeError, generate_stored_name
from ..utils.logging import api_logger

router = APIRouter(prefix="/api", tags=["files"])


def _get_file_or_404(db: Session, file_id: int) -> ProjectFile:
    db_file = db.query(ProjectFile).filter(ProjectFile.id == file_id).first()
    if not db_file:
        api_logger.warning("File not found", extra={"file_id": file_id})
        raise HTTPException(status_code=404, detail="File not found")
    return db_file


@router.get("/projects/{project_id}/files", response_model=List[ProjectFileSchema])
async def list_files(project_id: int, db: Session = Depends(get_db)):
    get_project_or_404(db, project_id)
    return db.query(ProjectFile) \
        .filter(ProjectFile.project_id == project_id) \
        .order_by(ProjectFile.created_at.desc(), ProjectFile.id.desc()) \
        .all()


@router.post("/projects/{project_id}/files", response_model=ProjectFileSchema, status_code=201)
async def upload_file(
        project_id: int,
        file: Optional[UploadFile] = File(None),
        db: Session = Depends(get_db),
        storage: FileStorage = Depends(get_storage),
        cleanup: CleanupService = Depends(get_cleanup_service),
        settings: Settings = Depends(get_app_settings)
):
    """Store one uploaded file, then record its metadata"""
    if file is None:
        raise HTTPException(status_code=400, detail="file_required")

    original_name = recover_filename(file.filename or "file")
    api_logger.info("Uploading file", extra={
        "project_id": project_id,
        "file_name": original_name,
        "content_type": file.content_type,
        "file_size": file.size
    })

    get_project_or_404(db, project_id)

    if file.size is not None and file.size > settings.MAX_UPLOAD_BYTES:
        api_logger.warning("Upload rejected, file too large", extra={"file_size": file.size})
        raise HTTPException(status_code=413, detail="file_too_large")

    stored_name = generate_stored_name(original_name)
    try:
        size = storage.save(stored_name, file.file, settings.MAX_UPLOAD_BYTES)
    except FileTooLargeError:
        api_logger.warning("Upload rejected, file too large", extra={"file_name": original_name})
        raise HTTPException(status_code=413, detail="file_too_large")
    except Exception as e:
        api_logger.error("Failed to store uploaded file", extra={
            "project_id": project_id,
            "stored_name": stored_name,
            "error": str(e)
        }, exc_info=True)
        raise HTTPException(status_code=500, detail="failed_to_store_file")

    try:
        db_file = ProjectFile(
            project_id=project_id,
            original_name=original_name,
            stored_name=stored_name,
            mime_type=file.content_type,
            size=size
        )
        db.add(db_file)
        db.commit()
        db.refresh(db_file)
    except Exception as e:
        db.rollback()
        api_logger.error("Failed to save file metadata", extra={
            "project_id": project_id,
            "stored_name": stored_name,
            "error": str(e)
        }, exc_info=True)
        cleanup.delete_stored_file(stored_name)
        raise HTTPException(status_code=500, detail="failed_to_save_file")

    api_logger.info("File uploaded successfully", extra={
        "file_id": db_file.id,
        "project_id": project_id,
        "size": size
    })
    return db_file


@router.get("/files/{file_id}")
async def download_file(
        file_id: int,
        db: Session = Depends(get_db),
        storage: FileStorage = Depends(get_storage)
):
    db_file = _get_file_or_404(db, file_id)

    try:
        path = storage.open(db_file.stored_name)
    except FileNotFoundError:
        api_logger.error("Stored content missing for file", extra={
            "file_id": file_id,
            "stored_name": db_file.stored_name
        })
        raise HTTPException(status_code=404, detail="File content not found")

    api_logger.info("Streaming file", extra={"file_id": file_id, "size": db_file.size})
    return FileResponse(
        path,
        media_type=db_file.mime_type or "application/octet-stream",
        headers={"Content-Disposition": content_disposition(db_file.original_name)}
    )


@router.delete("/files/{file_id}", status_code=204)
async def delete_file(
        file_id: int,
        db: Session = Depends(get_db),
        cleanup: CleanupService = Depends(get_cleanup_service)
):
    api_logger.info("Deleting file", extra={"file_id": file_id})
    db_file = _get_file_or_404(db, file_id)

    # content removal is best effort, the row goes regardless
    cleanup.delete_stored_file(db_file.stored_name)

    try:
        db.delete(db_file)
        db.commit()
    except Exception as e:
        db.rollback()
        api_logger.error(f"Failed to delete file: {str(e)}", extra={"file_id": file_id}, exc_info=True)
        raise HTTPException(status_code=500, detail="failed_to_delete_file")

    api_logger.info(f"Successfully deleted file {file_id}")
    return Response(status_code=204)
