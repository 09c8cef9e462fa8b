import pytest
from fastapi.testclient import TestClient

from workshop_queue.client import ApiError, WorkshopClient
from workshop_queue.core.config import Settings
from workshop_queue.main import create_app
from workshop_queue.services.job_service import JobService
from workshop_queue.services.user_service import UserService


def make_workshop_client() -> WorkshopClient:
    app = create_app(
        Settings(seed_demo_data=True),
        job_service=JobService(),
        user_service=UserService(),
    )
    return WorkshopClient(base_url="http://testserver/api/v1", http=TestClient(app))


def test_authenticated_call_without_token_fails_locally():
    client = make_workshop_client()
    with pytest.raises(ApiError) as excinfo:
        client.my_statistics()
    assert excinfo.value.status_code == 401
    assert excinfo.value.message == "No access token found"


def test_bad_login_surfaces_server_message():
    client = make_workshop_client()
    with pytest.raises(ApiError) as excinfo:
        client.login("sarah@autoflow.com", "wrong")
    assert excinfo.value.status_code == 401
    assert excinfo.value.message == "Invalid credentials"
    assert client.access_token is None


def test_job_lifecycle_through_client():
    client = make_workshop_client()
    user = client.login("sarah@autoflow.com", "password123")
    assert client.access_token == user["accessToken"]

    created = client.create_job(
        {
            "regNumber": "GW-2020-24",
            "customerName": "Yaw D.",
            "serviceType": "Oil Change",
            "brand": "Toyota",
            "status": "checked-in",
            "branch": user["branch"],
        }
    )
    assert created["queueNumber"] == 14

    updated = client.update_job(created["id"], {"status": "in-diagnostics", "isPriority": True})
    assert updated["isPriority"] is True

    stats = client.my_statistics()["data"]
    assert stats["serviceStatusCounts"]["in-diagnostics"] == 2
    assert stats["priorityCount"] == 2

    client.delete_job(created["id"])
    assert created["id"] not in [job["id"] for job in client.list_my_branch_jobs()]


def test_validation_error_is_raised_with_field():
    client = make_workshop_client()
    with pytest.raises(ApiError) as excinfo:
        client.create_job({"customerName": "A"})
    assert excinfo.value.status_code == 400
    assert excinfo.value.data["field"]


def test_logout_revokes_token_on_server():
    client = make_workshop_client()
    client.login("sarah@autoflow.com", "password123")
    token = client.access_token

    client.logout()
    assert client.access_token is None

    client.access_token = token
    with pytest.raises(ApiError) as excinfo:
        client.list_my_branch_jobs()
    assert excinfo.value.status_code == 401
