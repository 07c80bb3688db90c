# tests/conftest.py
from datetime import date

import pytest
from fastapi.testclient import TestClient

from estate_board.config import Settings
from estate_board.main import create_app
from estate_board.models import Assignment, Contact, ListKind, Project, ProjectStatus
from estate_board.services.auth import create_access_token

TEST_PASSWORD = "test-password"


@pytest.fixture
def settings(tmp_path):
    """Per-test settings: in-memory database and a temporary storage directory"""
    return Settings(
        DATABASE_URL="sqlite://",
        STORAGE_PATH=tmp_path / "storage",
        APP_PASSWORD=TEST_PASSWORD,
        JWT_SECRET="test-secret",
        MAX_UPLOAD_BYTES=1024,
        LIST_DEFAULT_LIMIT=50,
        LIST_MAX_LIMIT=100,
    )


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def anon_client(app):
    """Test client without credentials"""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def client(app, settings):
    """Test client carrying a valid bearer token"""
    headers = {"Authorization": f"Bearer {create_access_token(settings)}"}
    with TestClient(app, headers=headers) as test_client:
        yield test_client


@pytest.fixture
def db_session(app, client):
    """Session on the same database the running app uses"""
    session = app.state.database.session_factory()
    yield session
    session.close()


@pytest.fixture
def storage(app, client):
    return app.state.storage


@pytest.fixture
def sample_project(db_session):
    """Create a sample project"""
    project = Project(
        name="Alpha Tower",
        developer="Acme Development",
        list_kind=ListKind.NEGOTIATION,
        status=ProjectStatus.ACTIVE,
        standard="HIGH, rooftop pool",
        units=40,
        scope_value="₪1,000,000",
        start_date=date(2025, 1, 15),
        execution=30,
        remaining="700000",
    )
    db_session.add(project)
    db_session.commit()
    db_session.refresh(project)
    return project


@pytest.fixture
def sample_assignment(db_session, sample_project):
    """Create a sample assignment"""
    assignment = Assignment(
        project_id=sample_project.id,
        title="Send proposal",
        notes="Include the revised schedule",
        assignee_name="Dana",
        due_date=date(2025, 3, 1),
    )
    db_session.add(assignment)
    db_session.commit()
    db_session.refresh(assignment)
    return assignment


@pytest.fixture
def sample_contact(db_session, sample_project):
    """Create a sample contact"""
    contact = Contact(
        project_id=sample_project.id,
        name="Noa Levi",
        phone="050-1234567",
    )
    db_session.add(contact)
    db_session.commit()
    db_session.refresh(contact)
    return contact
