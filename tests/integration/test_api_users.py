"""
Integration tests for the users API endpoint.
Runs the full app (lifespan included) on the in-memory storage backend.
"""
from unittest.mock import AsyncMock

import pytest

pytestmark = pytest.mark.integration
from fastapi.testclient import TestClient

from user_service.application.use_cases.user.create_user import CreateUserUseCase
from user_service.domain.exceptions import StorageError
from user_service.domain.repositories.user_repository import UserRepository
from user_service.main import create_application


@pytest.fixture
def application(memory_settings):
    return create_application(memory_settings)


@pytest.fixture
def client(application):
    """Create test client; the lifespan builds an in-memory container."""
    with TestClient(application) as c:
        yield c


class TestCreateUserAPI:
    """Tests for POST /api/v1/users"""

    def test_create_success(self, client):
        response = client.post(
            "/api/v1/users",
            json={"email": "john@example.com", "name": "Jo"},
        )
        assert response.status_code == 201
        data = response.json()
        assert set(data) == {"id", "email", "name", "createdAt", "updatedAt"}
        assert data["id"].startswith("user_")
        assert data["email"] == "john@example.com"
        assert data["name"] == "Jo"
        assert data["createdAt"].endswith("Z")
        assert data["createdAt"] == data["updatedAt"]

    def test_created_user_is_persisted(self, client, application):
        response = client.post(
            "/api/v1/users",
            json={"email": "john@example.com", "name": "John Doe"},
        )
        repository = application.state.container.get(UserRepository)
        assert repository.count() == 1
        assert repository._users[response.json()["id"]].name == "John Doe"

    def test_email_echoed_back_unchanged(self, client, application):
        response = client.post(
            "/api/v1/users",
            json={"email": "John@EXAMPLE.COM", "name": "John"},
        )
        assert response.status_code == 201
        assert response.json()["email"] == "John@EXAMPLE.COM"
        repository = application.state.container.get(UserRepository)
        assert repository._users[response.json()["id"]].email == "John@EXAMPLE.COM"

    @pytest.mark.parametrize("email", ["john@example.test", "john@corp.local"])
    def test_special_use_domain_accepted(self, client, email):
        response = client.post("/api/v1/users", json={"email": email, "name": "John"})
        assert response.status_code == 201
        assert response.json()["email"] == email

    def test_duplicate_email_returns_409(self, client, application):
        payload = {"email": "john@example.com", "name": "John Doe"}
        assert client.post("/api/v1/users", json=payload).status_code == 201

        response = client.post("/api/v1/users", json=payload)

        assert response.status_code == 409
        assert response.json()["detail"] == "User with this email already exists"
        assert application.state.container.get(UserRepository).count() == 1

    @pytest.mark.parametrize(
        "payload",
        [
            {"email": "bad-email", "name": "John"},
            {"email": "john@example.com", "name": "J"},
            {"email": "john@example.com", "name": "a" * 101},
            {"email": "john@example.com", "name": "   "},
            {"email": "john@example.com", "name": 42},
            {"email": "john@example.com"},
            {"name": "John"},
            {"email": "john@example.com", "name": "John", "role": "admin"},
        ],
    )
    def test_invalid_body_returns_400(self, client, application, payload):
        response = client.post("/api/v1/users", json=payload)
        assert response.status_code == 400
        assert application.state.container.get(UserRepository).count() == 0

    def test_storage_failure_returns_500(self, client, application):
        use_case = AsyncMock(spec=CreateUserUseCase)
        use_case.execute.side_effect = StorageError("connection refused", operation="create")
        application.state.container.register_factory(CreateUserUseCase, lambda: use_case)

        response = client.post(
            "/api/v1/users",
            json={"email": "john@example.com", "name": "John"},
        )

        assert response.status_code == 500
        assert "connection refused" not in response.json()["detail"]

    def test_docs_served_under_prefix(self, client):
        assert client.get("/api/v1/docs").status_code == 200
        assert client.get("/api/v1/openapi.json").status_code == 200


class TestApiPrefix:
    """Tests for the configurable route prefix"""

    def test_custom_prefix(self, mock_env, monkeypatch):
        from user_service.core.config import Settings

        monkeypatch.setenv("API_PREFIX", "api/v2")
        application = create_application(Settings())
        with TestClient(application) as c:
            response = c.post("/api/v2/users", json={"email": "john@example.com", "name": "John"})
            assert response.status_code == 201
            assert c.post("/api/v1/users", json={"email": "jane@example.com", "name": "Jane"}).status_code == 404
