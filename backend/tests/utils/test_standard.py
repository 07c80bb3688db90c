# tests/utils/test_standard.py
from estate_board.utils.standard import join_standard, normalize_standard, split_standard


def test_split_standard_separates_leading_options():
    tokens, note = split_standard("comfort +, Smart 1, SMART 1, large balconies, SMART 2")
    assert tokens == ["COMFORT +", "SMART 1"]
    assert note == "large balconies, SMART 2"


def test_split_standard_keeps_note_commas():
    tokens, note = split_standard("COMFORT, 3,5 rooms, 1,200 sqm")
    assert tokens == ["COMFORT"]
    assert note == "3,5 rooms, 1,200 sqm"


def test_join_standard():
    assert join_standard(["PRESTIGE 5"], "marble floors") == "PRESTIGE 5, marble floors"
    assert join_standard([], "  ") is None


def test_normalize_standard():
    assert normalize_standard("prestige  6 ,  custom kitchen") == "PRESTIGE 6, custom kitchen"
    assert normalize_standard("HIGH, rooftop pool") == "HIGH, rooftop pool"
    assert normalize_standard("smart 3") == "SMART 3"
    assert normalize_standard("") is None
    assert normalize_standard(None) is None


def test_standard_is_normalized_on_create(client):
    response = client.post("/api/projects", json={"name": "Std", "standard": "smart 2, glass facade"})
    assert response.json()["project"]["standard"] == "SMART 2, glass facade"


def test_standard_note_is_stored_verbatim(client):
    response = client.post("/api/projects", json={"name": "S", "standard": "COMFORT, 3,5 rooms, 1,200 sqm"})
    project = response.json()["project"]
    assert project["standard"] == "COMFORT, 3,5 rooms, 1,200 sqm"

    response = client.patch(f"/api/projects/{project['id']}", json={"standard": "comfort, 3,5 rooms,1,200 sqm"})
    assert response.json()["standard"] == "COMFORT, 3,5 rooms,1,200 sqm"
