# backend/estate_board/models/project.py
from sqlalchemy import Column, Integer, String, Text, DateTime, Date, Enum
from sqlalchemy.orm import relationship

from ..database import Base
from .base import utcnow
from .enums import ListKind, ProjectStatus


class Project(Base):
    __tablename__ = "projects"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    developer = Column(String(255), nullable=True)
    list_kind = Column(Enum(ListKind), nullable=False, default=ListKind.NEGOTIATION, index=True)
    status = Column(Enum(ProjectStatus), nullable=False, default=ProjectStatus.ACTIVE)
    standard = Column(Text, nullable=True)
    units = Column(Integer, nullable=True)
    scope_value = Column(String(255), nullable=True)
    start_date = Column(Date, nullable=True)
    execution = Column(Integer, nullable=True)
    remaining = Column(String(255), nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)

    # Children are removed by the ON DELETE CASCADE foreign keys, not by the ORM
    assignments = relationship(
        "Assignment",
        back_populates="project",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
    contacts = relationship(
        "Contact",
        back_populates="project",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
    files = relationship(
        "ProjectFile",
        back_populates="project",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
