# backend/estate_board/models/assignment.py
from sqlalchemy import Column, Integer, String, Text, DateTime, Date, Enum, ForeignKey
from sqlalchemy.orm import relationship

from ..database import Base
from .base import utcnow
from .enums import AssignmentStatus


class Assignment(Base):
    __tablename__ = "assignments"

    id = Column(Integer, primary_key=True, index=True)
    project_id = Column(Integer, ForeignKey("projects.id", ondelete="CASCADE"), nullable=False, index=True)
    title = Column(String(255), nullable=False)
    notes = Column(Text, nullable=True)
    assignee_name = Column(String(255), nullable=True)  # free text, not a user reference
    due_date = Column(Date, nullable=True)
    status = Column(Enum(AssignmentStatus), nullable=False, default=AssignmentStatus.TODO)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)

    project = relationship("Project", back_populates="assignments")
