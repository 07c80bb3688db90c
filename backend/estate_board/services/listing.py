# backend/estate_board/services/listing.py
from typing import Dict, Iterable, List, Optional

from sqlalchemy import func, or_
from sqlalchemy.orm import Session

from ..models import Assignment, Project, ListKind
from ..schemas.project import ProjectListItem


def escape_like(term: str) -> str:
    return term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def clamp_limit(limit: Optional[int], default: int, maximum: int) -> int:
    if limit is None:
        return default
    return max(1, min(maximum, limit))


def find_projects(db: Session, list_kind: ListKind, search: Optional[str], limit: int) -> List[Project]:
    """Projects on one board, newest first, optionally filtered by a case-insensitive substring"""
    query = db.query(Project).filter(Project.list_kind == list_kind)

    term = (search or "").strip()
    if term:
        pattern = f"%{escape_like(term.lower())}%"
        columns = (Project.name, Project.developer, Project.scope_value)
        query = query.filter(or_(*[func.lower(col).like(pattern, escape="\\") for col in columns]))

    return query.order_by(Project.created_at.desc(), Project.id.desc()).limit(limit).all()


def latest_assignments(db: Session, project_ids: Iterable[int]) -> Dict[int, Assignment]:
    """Most recently created assignment per project"""
    ids = list(project_ids)
    if not ids:
        return {}

    ranked = db.query(
        Assignment.id.label("id"),
        func.row_number().over(
            partition_by=Assignment.project_id,
            order_by=(Assignment.created_at.desc(), Assignment.id.desc())
        ).label("position")
    ).filter(Assignment.project_id.in_(ids)).subquery()

    rows = db.query(Assignment) \
        .join(ranked, Assignment.id == ranked.c.id) \
        .filter(ranked.c.position == 1) \
        .all()
    return {assignment.project_id: assignment for assignment in rows}


def shape_project_list(projects: List[Project], latest: Dict[int, Assignment]) -> List[ProjectListItem]:
    items = []
    for project in projects:
        last = latest.get(project.id)
        items.append(ProjectListItem(
            id=project.id,
            name=project.name,
            developer=project.developer,
            list_kind=project.list_kind,
            status=project.status,
            scope_value=project.scope_value,
            units=project.units,
            standard=project.standard,
            execution=project.execution,
            remaining=project.remaining,
            start_date=project.start_date,
            last_task_title=last.title if last else None,
            last_handler_name=last.assignee_name if last else None,
            # due date is preferred over creation date
            last_task_date=(last.due_date or last.created_at) if last else None,
            created_at=project.created_at,
        ))
    return items
