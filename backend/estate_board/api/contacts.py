# backend/estate_board/api/contacts.py
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response
from sqlalchemy.orm import Session

from .dependencies import get_project_or_404
from ..database import get_db
from ..models import Contact
from ..schemas.contact import Contact as ContactSchema, ContactCreate
from ..utils.logging import api_logger

router = APIRouter(prefix="/api", tags=["contacts"])


@router.get("/projects/{project_id}/contacts", response_model=List[ContactSchema])
async def list_contacts(project_id: int, db: Session = Depends(get_db)):
    get_project_or_404(db, project_id)
    return db.query(Contact) \
        .filter(Contact.project_id == project_id) \
        .order_by(Contact.created_at.desc(), Contact.id.desc()) \
        .all()


@router.post("/projects/{project_id}/contacts", response_model=ContactSchema, status_code=201)
async def create_contact(project_id: int, contact: ContactCreate, db: Session = Depends(get_db)):
    api_logger.info("Creating contact", extra={"project_id": project_id})

    try:
        get_project_or_404(db, project_id)

        db_contact = Contact(project_id=project_id, **contact.model_dump())
        db.add(db_contact)
        db.commit()
        db.refresh(db_contact)

        api_logger.info("Contact created successfully", extra={
            "contact_id": db_contact.id,
            "project_id": project_id
        })
        return db_contact
    except HTTPException:
        raise
    except Exception as e:
        db.rollback()
        api_logger.error("Failed to create contact", extra={
            "project_id": project_id,
            "error": str(e)
        }, exc_info=True)
        raise HTTPException(status_code=500, detail="failed_to_create_contact")


@router.delete("/contacts/{contact_id}", status_code=204)
async def delete_contact(contact_id: int, db: Session = Depends(get_db)):
    api_logger.info("Deleting contact", extra={"contact_id": contact_id})

    try:
        db_contact = db.query(Contact).filter(Contact.id == contact_id).first()
        if not db_contact:
            api_logger.warning("Contact already gone", extra={"contact_id": contact_id})
            raise HTTPException(status_code=404, detail="Contact not found")

        db.delete(db_contact)
        db.commit()
        return Response(status_code=204)
    except HTTPException:
        raise
    except Exception as e:
        db.rollback()
        api_logger.error(f"Failed to delete contact: {str(e)}", exc_info=True)
        raise HTTPException(status_code=500, detail="failed_to_delete_contact")
