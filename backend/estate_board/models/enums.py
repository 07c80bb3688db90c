# backend/estate_board/models/enums.py
import enum


class ListKind(str, enum.Enum):
    NEGOTIATION = "NEGOTIATION"
    SIGNED = "SIGNED"
    ARCHIVE = "ARCHIVE"


class ProjectStatus(str, enum.Enum):
    ACTIVE = "ACTIVE"
    ON_HOLD = "ON_HOLD"
    COMPLETED = "COMPLETED"
    QUOTE_GIVEN = "QUOTE_GIVEN"


class AssignmentStatus(str, enum.Enum):
    TODO = "TODO"
    IN_PROGRESS = "IN_PROGRESS"
    DONE = "DONE"
