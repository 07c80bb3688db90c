# tests/services/test_listing.py
from datetime import datetime, timezone

from estate_board.models import Assignment, Project
from estate_board.services.listing import clamp_limit, escape_like, latest_assignments


def add_assignment(db_session, project, title, created_at):
    assignment = Assignment(project_id=project.id, title=title, created_at=created_at)
    db_session.add(assignment)
    db_session.commit()
    return assignment


def test_latest_assignments_picks_newest_per_project(db_session):
    first = Project(name="First")
    second = Project(name="Second")
    empty = Project(name="Empty")
    db_session.add_all([first, second, empty])
    db_session.commit()

    early = datetime(2025, 1, 1, tzinfo=timezone.utc)
    late = datetime(2025, 6, 1, tzinfo=timezone.utc)
    add_assignment(db_session, first, "newest", late)
    add_assignment(db_session, first, "older", early)
    add_assignment(db_session, second, "tie, lower id", late)
    tie_winner = add_assignment(db_session, second, "tie, higher id", late)

    latest = latest_assignments(db_session, [first.id, second.id, empty.id])

    assert set(latest) == {first.id, second.id}
    assert latest[first.id].title == "newest"
    assert latest[second.id].id == tie_winner.id


def test_latest_assignments_without_ids(db_session):
    assert latest_assignments(db_session, []) == {}


def test_clamp_limit():
    assert clamp_limit(None, 200, 500) == 200
    assert clamp_limit(0, 200, 500) == 1
    assert clamp_limit(10_000, 200, 500) == 500


def test_escape_like():
    assert escape_like("50%_off\\") == "50\\%\\_off\\\\"
