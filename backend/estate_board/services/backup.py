# backend/estate_board/services/backup.py
"""Full JSON snapshot of projects with their assignments and contacts.

Attachments (metadata and bytes) are not part of a snapshot.
"""
from datetime import datetime, timezone
from typing import List, Tuple

from sqlalchemy.orm import Session, selectinload

from ..models import Assignment, Contact, Project, ProjectFile
from ..schemas.backup import BackupExport, BackupPayload, BackupProject, BackupProjectOut

BACKUP_VERSION = 1


def _newest_first(items):
    return sorted(items, key=lambda item: (item.created_at, item.id), reverse=True)


def export_snapshot(db: Session) -> BackupExport:
    projects = db.query(Project) \
        .options(selectinload(Project.assignments), selectinload(Project.contacts)) \
        .order_by(Project.created_at.desc(), Project.id.desc()) \
        .all()

    exported = []
    for project in projects:
        item = BackupProjectOut.model_validate(project)
        item.assignments = _newest_first(item.assignments)
        item.contacts = _newest_first(item.contacts)
        exported.append(item)

    return BackupExport(
        version=BACKUP_VERSION,
        exported_at=datetime.now(timezone.utc),
        project_count=len(exported),
        projects=exported,
    )


def _insert_project(db: Session, data: BackupProject) -> Project:
    fields = data.model_dump(exclude={"assignments", "contacts"})
    project = Project(**fields)
    db.add(project)
    db.flush()

    for assignment in data.assignments:
        db.add(Assignment(project_id=project.id, **assignment.model_dump()))
    for contact in data.contacts:
        db.add(Contact(project_id=project.id, **contact.model_dump()))
    return project


def restore_snapshot(db: Session, payload: BackupPayload) -> Tuple[int, List[str]]:
    """Replace every project, assignment, contact and file row with the snapshot's projects.

    The wipe and the re-insert share the session's transaction: the caller commits once,
    and a rollback at any point brings back the data as it was before the import.
    Returns the number of imported projects and the stored names of the removed files,
    whose durable content the caller may clean up after committing.
    """
    stored_names = [row.stored_name for row in db.query(ProjectFile.stored_name).all()]

    db.query(Assignment).delete(synchronize_session=False)
    db.query(Contact).delete(synchronize_session=False)
    db.query(ProjectFile).delete(synchronize_session=False)
    db.query(Project).delete(synchronize_session=False)

    for data in payload.projects:
        _insert_project(db, data)

    db.flush()
    return len(payload.projects), stored_names
