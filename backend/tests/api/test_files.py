# tests/api/test_files.py
import io
from urllib.parse import quote

from fastapi import status

from estate_board.models import ProjectFile


def upload(client, project_id, filename="plan.pdf", content=b"%PDF-1.4 fake", content_type="application/pdf"):
    return client.post(
        f"/api/projects/{project_id}/files",
        files={"file": (filename, io.BytesIO(content), content_type)}
    )


def test_upload_file(client, sample_project, storage):
    """Test uploading an attachment"""
    response = upload(client, sample_project.id)

    assert response.status_code == status.HTTP_201_CREATED
    data = response.json()
    assert data["projectId"] == sample_project.id
    assert data["originalName"] == "plan.pdf"
    assert data["mimeType"] == "application/pdf"
    assert data["size"] == len(b"%PDF-1.4 fake")
    assert data["storedName"].endswith(".pdf")
    assert data["storedName"] != "plan.pdf"
    assert storage.exists(data["storedName"])


def test_upload_gives_unique_stored_names(client, sample_project):
    first = upload(client, sample_project.id).json()
    second = upload(client, sample_project.id).json()
    assert first["storedName"] != second["storedName"]


def test_upload_recovers_mojibake_filename(client, sample_project):
    garbled = "חוזה.pdf".encode("utf-8").decode("latin-1")
    response = upload(client, sample_project.id, filename=garbled)

    assert response.status_code == status.HTTP_201_CREATED
    assert response.json()["originalName"] == "חוזה.pdf"


def test_upload_too_large_is_rejected(client, sample_project, db_session, storage):
    response = upload(client, sample_project.id, content=b"x" * 2048)

    assert response.status_code == status.HTTP_413_REQUEST_ENTITY_TOO_LARGE
    assert db_session.query(ProjectFile).count() == 0
    assert list(storage.root.iterdir()) == []


def test_upload_without_file_field(client, sample_project):
    response = client.post(f"/api/projects/{sample_project.id}/files", data={"other": "value"})
    assert response.status_code == status.HTTP_400_BAD_REQUEST


def test_upload_to_missing_project(client, storage):
    response = upload(client, 99999)

    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert list(storage.root.iterdir()) == []


def test_list_files(client, sample_project):
    upload(client, sample_project.id, filename="a.pdf")
    upload(client, sample_project.id, filename="b.pdf")

    response = client.get(f"/api/projects/{sample_project.id}/files")

    assert response.status_code == status.HTTP_200_OK
    assert [f["originalName"] for f in response.json()] == ["b.pdf", "a.pdf"]


def test_download_file(client, sample_project):
    content = b"binary \x00\x01 content"
    file_id = upload(client, sample_project.id, filename="תוכנית.pdf", content=content).json()["id"]

    response = client.get(f"/api/files/{file_id}")

    assert response.status_code == status.HTTP_200_OK
    assert response.content == content
    assert response.headers["content-type"].startswith("application/pdf")
    disposition = response.headers["content-disposition"]
    assert disposition.startswith("attachment;")
    assert 'filename="______.pdf"' in disposition
    assert f"filename*=UTF-8''{quote('תוכנית.pdf', safe='')}" in disposition


def test_download_missing_file(client):
    assert client.get("/api/files/99999").status_code == status.HTTP_404_NOT_FOUND


def test_delete_file(client, sample_project, storage):
    data = upload(client, sample_project.id).json()

    response = client.delete(f"/api/files/{data['id']}")

    assert response.status_code == status.HTTP_204_NO_CONTENT
    assert not storage.exists(data["storedName"])
    assert client.get(f"/api/projects/{sample_project.id}/files").json() == []


def test_delete_file_when_content_already_gone(client, sample_project, storage):
    data = upload(client, sample_project.id).json()
    storage.delete(data["storedName"])

    response = client.delete(f"/api/files/{data['id']}")

    assert response.status_code == status.HTTP_204_NO_CONTENT
    assert client.get(f"/api/files/{data['id']}").status_code == status.HTTP_404_NOT_FOUND


def test_delete_project_removes_files(client, sample_project, storage, db_session):
    data = upload(client, sample_project.id).json()

    assert client.delete(f"/api/projects/{sample_project.id}").status_code == status.HTTP_204_NO_CONTENT

    db_session.expire_all()
    assert db_session.query(ProjectFile).count() == 0
    assert not storage.exists(data["storedName"])
