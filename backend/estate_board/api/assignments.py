# backend/estate_board/api/assignments.py
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response
from sqlalchemy.orm import Session

from .dependencies import get_project_or_404
from ..database import get_db
from ..models import Assignment
from ..schemas.assignment import Assignment as AssignmentSchema, AssignmentCreate, AssignmentUpdate
from ..utils.logging import api_logger

router = APIRouter(prefix="/api", tags=["assignments"])


@router.get("/projects/{project_id}/assignments", response_model=List[AssignmentSchema])
async def list_assignments(project_id: int, db: Session = Depends(get_db)):
    get_project_or_404(db, project_id)
    return db.query(Assignment) \
        .filter(Assignment.project_id == project_id) \
        .order_by(Assignment.created_at.desc(), Assignment.id.desc()) \
        .all()


@router.post("/projects/{project_id}/assignments", response_model=AssignmentSchema, status_code=201)
async def create_assignment(project_id: int, assignment: AssignmentCreate, db: Session = Depends(get_db)):
    api_logger.info("Creating assignment", extra={
        "project_id": project_id,
        "title": assignment.title
    })

    try:
        get_project_or_404(db, project_id)

        db_assignment = Assignment(project_id=project_id, **assignment.model_dump())
        db.add(db_assignment)
        db.commit()
        db.refresh(db_assignment)

        api_logger.info("Assignment created successfully", extra={
            "assignment_id": db_assignment.id,
            "project_id": project_id
        })
        return db_assignment
    except HTTPException:
        raise
    except Exception as e:
        db.rollback()
        api_logger.error("Failed to create assignment", extra={
            "project_id": project_id,
            "error": str(e)
        }, exc_info=True)
        raise HTTPException(status_code=500, detail="failed_to_create_assignment")


@router.patch("/assignments/{assignment_id}", response_model=AssignmentSchema)
async def update_assignment(assignment_id: int, assignment: AssignmentUpdate, db: Session = Depends(get_db)):
    patch = assignment.model_dump(exclude_unset=True)
    api_logger.info("Updating assignment", extra={
        "assignment_id": assignment_id,
        "update_fields": list(patch.keys())
    })

    try:
        db_assignment = db.query(Assignment).filter(Assignment.id == assignment_id).first()
        if not db_assignment:
            api_logger.warning("Assignment not found for update", extra={"assignment_id": assignment_id})
            raise HTTPException(status_code=404, detail="Assignment not found")

        for field, value in patch.items():
            setattr(db_assignment, field, value)

        db.commit()
        db.refresh(db_assignment)
        return db_assignment
    except HTTPException:
        raise
    except Exception as e:
        db.rollback()
        api_logger.error("Failed to update assignment", extra={
            "assignment_id": assignment_id,
            "error": str(e)
        }, exc_info=True)
        raise HTTPException(status_code=500, detail="failed_to_update_assignment")


@router.delete("/assignments/{assignment_id}", status_code=204)
async def delete_assignment(assignment_id: int, db: Session = Depends(get_db)):
    api_logger.info("Deleting assignment", extra={"assignment_id": assignment_id})

    try:
        db_assignment = db.query(Assignment).filter(Assignment.id == assignment_id).first()
        if not db_assignment:
            api_logger.warning("Assignment already gone", extra={"assignment_id": assignment_id})
            raise HTTPException(status_code=404, detail="Assignment not found")

        db.delete(db_assignment)
        db.commit()

        api_logger.info(f"Successfully deleted assignment {assignment_id}")
        return Response(status_code=204)
    except HTTPException:
        raise
    except Exception as e:
        db.rollback()
        api_logger.error(f"Failed to delete assignment: {str(e)}", exc_info=True)
        raise HTTPException(status_code=500, detail="failed_to_delete_assignment")
