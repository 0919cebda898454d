"""
Tests for employee HTTP endpoints.

The app lifespan runs against an in-memory SQLite database.
"""
import pytest
from fastapi.testclient import TestClient

from app.config import settings
from app.main import app


EMPLOYEE_PAYLOAD = {
    "name": "John Doe",
    "job_role": "Software Engineer",
    "salary": 5000.5,
    "employee_registration": 123456,
}


@pytest.fixture
def client(monkeypatch):
    monkeypatch.setattr(settings, "database_url", "sqlite+aiosqlite:///:memory:")
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def created(client):
    response = client.post("/api/employees", json=EMPLOYEE_PAYLOAD)
    assert response.status_code == 201
    return response.json()


class TestCreateEmployee:

    def test_create_returns_serialized_employee(self, created):
        assert created["id"]
        assert created["name"] == "John Doe"
        assert created["job_role"] == "Software Engineer"
        assert created["salary"] == 5000.5
        assert created["employee_registration"] == 123456
        assert created["created_at"]
        assert created["updated_at"]

    def test_duplicate_registration_conflict(self, client, created):
        response = client.post("/api/employees", json={**EMPLOYEE_PAYLOAD, "name": "Jane Roe"})

        assert response.status_code == 409
        assert response.json() == {
            "error": "Employee with this registration already exists",
            "kind": "duplicate_registration",
        }
        assert len(client.get("/api/employees").json()) == 1

    def test_short_name_rejected(self, client):
        response = client.post("/api/employees", json={**EMPLOYEE_PAYLOAD, "name": "J"})

        assert response.status_code == 400
        assert response.json()["kind"] == "invalid_name"
        assert response.json()["error"] == "Employee name must be at least 2 characters long"

    def test_five_digit_registration_rejected(self, client):
        response = client.post("/api/employees", json={**EMPLOYEE_PAYLOAD, "employee_registration": 12345})

        assert response.status_code == 400
        assert response.json()["kind"] == "invalid_registration"

    def test_zero_salary_rejected(self, client):
        response = client.post("/api/employees", json={**EMPLOYEE_PAYLOAD, "salary": 0})

        assert response.status_code == 400
        assert response.json() == {"error": "Salary cannot be zero", "kind": "invalid_salary"}

    def test_salary_with_three_decimals_rejected(self, client):
        response = client.post("/api/employees", json={**EMPLOYEE_PAYLOAD, "salary": 1000.123})

        assert response.status_code == 400
        assert response.json()["kind"] == "invalid_salary"

    def test_missing_field_is_request_validation_error(self, client):
        payload = {k: v for k, v in EMPLOYEE_PAYLOAD.items() if k != "salary"}
        response = client.post("/api/employees", json=payload)

        assert response.status_code == 422


class TestReadEmployees:

    def test_list_empty(self, client):
        response = client.get("/api/employees")

        assert response.status_code == 200
        assert response.json() == []

    def test_get_by_id(self, client, created):
        response = client.get(f"/api/employees/{created['id']}")

        assert response.status_code == 200
        assert response.json() == created

    def test_get_missing(self, client):
        response = client.get("/api/employees/missing")

        assert response.status_code == 404
        assert response.json() == {"error": "Employee missing not found", "kind": "not_found"}


class TestUpdateEmployee:

    def test_partial_update(self, client, created):
        response = client.patch(f"/api/employees/{created['id']}", json={"job_role": "Tech Lead"})

        assert response.status_code == 200
        body = response.json()
        assert body["job_role"] == "Tech Lead"
        assert body["name"] == "John Doe"
        assert body["salary"] == 5000.5
        assert body["created_at"] == created["created_at"]

    def test_put_behaves_as_partial_update(self, client, created):
        response = client.put(f"/api/employees/{created['id']}", json={"name": "Jane Doe", "salary": 6000})

        assert response.status_code == 200
        assert response.json()["name"] == "Jane Doe"
        assert response.json()["salary"] == 6000

    def test_registration_change_rejected(self, client, created):
        response = client.patch(f"/api/employees/{created['id']}", json={"employee_registration": 654321})

        assert response.status_code == 400
        assert response.json()["kind"] == "invalid_registration"
        stored = client.get(f"/api/employees/{created['id']}").json()
        assert stored["employee_registration"] == 123456

    def test_invalid_job_role_rejected(self, client, created):
        response = client.patch(f"/api/employees/{created['id']}", json={"job_role": "Lead!"})

        assert response.status_code == 400
        assert response.json()["kind"] == "invalid_job_role"

    def test_unknown_field_rejected(self, client, created):
        response = client.patch(f"/api/employees/{created['id']}", json={"id": "other"})

        assert response.status_code == 422

    def test_update_missing(self, client):
        response = client.patch("/api/employees/missing", json={"name": "Jane Doe"})

        assert response.status_code == 404


class TestSalaryIncrease:

    def test_increase(self, client, created):
        response = client.post(
            f"/api/employees/{created['id']}/salary-increase", json={"percentage": 10}
        )

        assert response.status_code == 200
        assert response.json()["salary"] == 5500.55

    def test_percentage_over_100_rejected(self, client, created):
        response = client.post(
            f"/api/employees/{created['id']}/salary-increase", json={"percentage": 101}
        )

        assert response.status_code == 400
        assert response.json() == {
            "error": "Percentage cannot be greater than 100",
            "kind": "invalid_percentage",
        }


class TestDeleteEmployee:

    def test_delete(self, client, created):
        response = client.delete(f"/api/employees/{created['id']}")

        assert response.status_code == 204
        assert client.get(f"/api/employees/{created['id']}").status_code == 404

    def test_delete_missing(self, client):
        response = client.delete("/api/employees/missing")

        assert response.status_code == 404
        assert response.json()["kind"] == "not_found"


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_root_reports_version(client):
    from app.version import __version__

    assert client.get("/").json()["version"] == __version__
