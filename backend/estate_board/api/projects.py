# backend/estate_board/api/projects.py
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Response
from sqlalchemy.orm import Session

from .dependencies import get_app_settings, get_cleanup_service, get_project_or_404
from ..config import Settings
from ..database import get_db
from ..models import Assignment, Contact, ListKind, Project, ProjectFile
from ..schemas.assignment import Assignment as AssignmentSchema
from ..schemas.contact import Contact as ContactSchema
from ..schemas.project import (
    Project as ProjectSchema,
    ProjectCreate,
    ProjectCreateResult,
    ProjectDetail,
    ProjectListItem,
    ProjectUpdate,
)
from ..services.cleanup import CleanupService
from ..services.listing import clamp_limit, find_projects, latest_assignments, shape_project_list
from ..services.remaining import remaining_for_create, remaining_for_patch
from ..utils.logging import api_logger

router = APIRouter(prefix="/api/projects", tags=["projects"])


def parse_list_kind(value: Optional[str]) -> ListKind:
    """Board selector; anything unrecognised falls back to the negotiation board"""
    if value:
        try:
            return ListKind(value.strip().upper())
        except ValueError:
            api_logger.debug("Unknown list kind, using default", extra={"list": value})
    return ListKind.NEGOTIATION


def newest_first(items):
    return sorted(items, key=lambda item: (item.created_at, item.id), reverse=True)


@router.get("", response_model=List[ProjectListItem])
async def list_projects(
        list_param: Optional[str] = Query(None, alias="list"),
        search: Optional[str] = None,
        limit: Optional[int] = None,
        db: Session = Depends(get_db),
        settings: Settings = Depends(get_app_settings)
):
    """List projects on one board, newest first, with their latest task"""
    list_kind = parse_list_kind(list_param)
    capped = clamp_limit(limit, settings.LIST_DEFAULT_LIMIT, settings.LIST_MAX_LIMIT)

    api_logger.info("Listing projects", extra={
        "list_kind": list_kind.value,
        "search": search,
        "limit": capped
    })

    try:
        projects = find_projects(db, list_kind, search, capped)
        latest = latest_assignments(db, [p.id for p in projects])
        result = shape_project_list(projects, latest)

        api_logger.info(f"Found {len(result)} projects", extra={"list_kind": list_kind.value})
        return result
    except Exception as e:
        api_logger.error("Failed to list projects", extra={"error": str(e)}, exc_info=True)
        raise HTTPException(status_code=500, detail="failed_to_list_projects")


@router.get("/{project_id}", response_model=ProjectDetail)
async def get_project(project_id: int, db: Session = Depends(get_db)):
    api_logger.info("Fetching project", extra={"project_id": project_id})

    try:
        project = get_project_or_404(db, project_id)

        detail = ProjectDetail.model_validate(project)
        detail.assignments = newest_first(detail.assignments)
        detail.contacts = newest_first(detail.contacts)

        api_logger.info("Project retrieved successfully", extra={
            "project_id": project_id,
            "assignment_count": len(detail.assignments),
            "contact_count": len(detail.contacts)
        })
        return detail
    except HTTPException:
        raise
    except Exception as e:
        api_logger.error("Failed to get project", extra={
            "project_id": project_id,
            "error": str(e)
        }, exc_info=True)
        raise HTTPException(status_code=500, detail="failed_to_load_project")


@router.post("", response_model=ProjectCreateResult, status_code=201)
async def create_project(project: ProjectCreate, db: Session = Depends(get_db)):
    """Create a project together with its optional first task and contacts, atomically"""
    api_logger.info("Creating new project", extra={
        "project_name": project.name,
        "has_initial_assignment": project.initial_assignment is not None,
        "initial_contact_count": len(project.initial_contacts)
    })

    try:
        fields = project.model_dump(exclude={"initial_assignment", "initial_contacts"})
        fields["remaining"] = remaining_for_create(fields)

        db_project = Project(**fields)
        db.add(db_project)
        db.flush()

        db_assignment = None
        if project.initial_assignment:
            db_assignment = Assignment(project_id=db_project.id, **project.initial_assignment.model_dump())
            db.add(db_assignment)

        db_contacts = [
            Contact(project_id=db_project.id, **contact.model_dump())
            for contact in project.initial_contacts
        ]
        db.add_all(db_contacts)

        db.commit()
        db.refresh(db_project)

        api_logger.info("Project created successfully", extra={
            "project_id": db_project.id,
            "project_name": db_project.name
        })
        return ProjectCreateResult(
            project=ProjectSchema.model_validate(db_project),
            initial_assignment=AssignmentSchema.model_validate(db_assignment) if db_assignment else None,
            initial_contacts=[ContactSchema.model_validate(c) for c in db_contacts]
        )
    except Exception as e:
        db.rollback()
        api_logger.error("Failed to create project", extra={
            "project_name": project.name,
            "error": str(e)
        }, exc_info=True)
        raise HTTPException(status_code=500, detail="failed_to_create_project")


@router.patch("/{project_id}", response_model=ProjectSchema)
async def update_project(project_id: int, project: ProjectUpdate, db: Session = Depends(get_db)):
    patch = project.model_dump(exclude_unset=True)
    api_logger.info("Updating project", extra={
        "project_id": project_id,
        "update_fields": list(patch.keys())
    })

    try:
        db_project = get_project_or_404(db, project_id)

        remaining = remaining_for_patch(patch, db_project.scope_value, db_project.execution)
        if remaining is not None:
            patch["remaining"] = remaining

        # explicit nulls clear the column
        for field, value in patch.items():
            setattr(db_project, field, value)

        db.commit()
        db.refresh(db_project)

        api_logger.info("Project updated successfully", extra={"project_id": project_id})
        return db_project
    except HTTPException:
        raise
    except Exception as e:
        db.rollback()
        api_logger.error("Failed to update project", extra={
            "project_id": project_id,
            "error": str(e)
        }, exc_info=True)
        raise HTTPException(status_code=500, detail="failed_to_update_project")


@router.delete("/{project_id}", status_code=204)
async def delete_project(
        project_id: int,
        db: Session = Depends(get_db),
        cleanup: CleanupService = Depends(get_cleanup_service)
):
    """Delete a project; its assignments, contacts and file rows go with it via ON DELETE CASCADE"""
    api_logger.info("Deleting project", extra={"project_id": project_id})

    try:
        project = get_project_or_404(db, project_id)
        stored_names = [
            row.stored_name
            for row in db.query(ProjectFile.stored_name).filter(ProjectFile.project_id == project_id)
        ]

        db.delete(project)
        db.commit()
    except HTTPException:
        raise
    except Exception as e:
        db.rollback()
        api_logger.error(f"Failed to delete project: {str(e)}", extra={"project_id": project_id}, exc_info=True)
        raise HTTPException(status_code=500, detail="failed_to_delete_project")

    removed = cleanup.delete_stored_files(stored_names)
    api_logger.info(f"Successfully deleted project {project_id}", extra={
        "stored_files": len(stored_names),
        "stored_files_removed": removed
    })
    return Response(status_code=204)
