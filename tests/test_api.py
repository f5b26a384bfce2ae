import pytest
from fastapi.testclient import TestClient
from main import app
from services.backend_client import InMemoryBackendClient, get_backend_client


ADMIN_SECRET = "test-admin-secret"


@pytest.fixture
def client(monkeypatch):
    monkeypatch.setenv("ADMIN_API_SECRET", ADMIN_SECRET)
    backend_client = InMemoryBackendClient()
    app.dependency_overrides[get_backend_client] = lambda: backend_client
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_default_slot(client):
    # Act
    response = client.post(
        "/availability/default-slot",
        json={"existing_slots": [{"start": "07:00", "end": "08:00"}]}
    )

    # Assert
    assert response.status_code == 200
    assert response.json() == {"start": "08:00", "end": "09:00"}


def test_validate_day(client):
    # Act
    response = client.post(
        "/availability/validate-day",
        json={"slots": [
            {"start": "07:00", "end": "09:00"},
            {"start": "08:00", "end": "10:00"},
        ]}
    )

    # Assert
    assert response.json() == {"valid": False}


def test_malformed_time_is_unprocessable(client):
    # Act
    response = client.post(
        "/availability/validate-day",
        json={"slots": [{"start": "7am", "end": "08:00"}]}
    )

    # Assert
    assert response.status_code == 422


def test_rejected_update_returns_notification(client):
    # Arrange
    schedule = {"monday": {"enabled": True, "slots": [
        {"start": "07:00", "end": "08:00"},
        {"start": "09:00", "end": "10:00"},
    ]}}

    # Act
    response = client.post("/availability/update-slot", json={
        "schedule": schedule,
        "day": "monday",
        "slot_index": 1,
        "field": "start",
        "value": "07:30",
    })

    # Assert
    body = response.json()
    assert response.status_code == 200
    assert body["result"] == "rejected"
    assert body["notification"]["title"] == "Time Slot Overlap"
    assert body["schedule"] == schedule


def test_save_and_load_availability(client):
    # Arrange
    schedule = {"thursday": {"enabled": True, "slots": [
        {"start": "12:00", "end": "13:00"}]}}

    # Act
    save_response = client.put("/trainers/trainer-1/availability", json=schedule)
    load_response = client.get("/trainers/trainer-1/availability")

    # Assert
    assert save_response.json() == {"result": "saved", "error": None}
    loaded = load_response.json()
    assert loaded["thursday"] == schedule["thursday"]
    assert loaded["monday"] == {"enabled": False, "slots": []}


def test_resolve_visibility(client):
    # Act
    response = client.get("/visibility/gallery_images/liked")

    # Assert
    assert response.json()["visibility_state"] == "blurred"


def test_admin_defaults_require_token(client):
    # Act
    missing = client.get("/admin/visibility-defaults")
    wrong = client.get(
        "/admin/visibility-defaults",
        headers={"Authorization": "Bearer nope"}
    )

    # Assert
    assert missing.status_code in (401, 403)
    assert wrong.status_code == 401


def test_admin_override_changes_resolved_visibility(client):
    # Arrange
    headers = {"Authorization": f"Bearer {ADMIN_SECRET}"}
    matrix = {"defaults": [{
        "content_type": "pricing_discovery_call",
        "stage_group": "browsing",
        "visibility_state": "visible",
    }]}

    # Act
    save_response = client.put(
        "/admin/visibility-defaults", json=matrix, headers=headers)
    resolved = client.get("/visibility/pricing_discovery_call/browsing")

    # Assert
    assert save_response.json()["result"] == "saved"
    assert resolved.json()["visibility_state"] == "visible"


def test_invalid_schedule_is_not_saved(client):
    # Arrange
    schedule = {"monday": {"enabled": True, "slots": [
        {"start": "10:00", "end": "08:00"},
        {"start": "07:00", "end": "09:00"},
        {"start": "08:00", "end": "10:00"},
    ]}}

    # Act
    save_response = client.put("/trainers/trainer-2/availability", json=schedule)
    load_response = client.get("/trainers/trainer-2/availability")

    # Assert
    assert save_response.status_code == 200
    assert save_response.json()["result"] == "rejected"
    assert load_response.json()["monday"] == {"enabled": False, "slots": []}
