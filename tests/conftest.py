"""
Pytest fixtures for program tracker tests.

Every API test runs against the real app factory with the three
repositories swapped for in-memory fakes, so the full request path
(auth guard, validation, services, error handlers) is exercised without
a database.
"""

from typing import Any, Dict, Generator

import pytest
from fastapi.testclient import TestClient

from api.deps import get_exercise_repo, get_program_repo, get_settings, get_user_repo
from backend.main import create_app
from backend.settings import Settings
from tests.fakes import FakeExerciseRepository, FakeProgramRepository, FakeUserRepository


TEST_JWT_SECRET = "test-secret-for-program-tracker"
TEST_PASSWORD = "password"


# ---------------------------------------------------------------------------
# Test App and Settings
# ---------------------------------------------------------------------------


@pytest.fixture(scope="session")
def test_settings() -> Settings:
    """Test settings with minimal configuration."""
    return Settings(
        environment="test",
        jwt_secret=TEST_JWT_SECRET,
        _env_file=None,
    )


@pytest.fixture(scope="session")
def app(test_settings):
    """Create test application instance."""
    return create_app(settings=test_settings)


# ---------------------------------------------------------------------------
# Fake Repositories
# ---------------------------------------------------------------------------


@pytest.fixture
def user_repo() -> FakeUserRepository:
    return FakeUserRepository()


@pytest.fixture
def exercise_repo() -> FakeExerciseRepository:
    return FakeExerciseRepository()


@pytest.fixture
def program_repo() -> FakeProgramRepository:
    return FakeProgramRepository()


@pytest.fixture
def client(
    app, test_settings, user_repo, exercise_repo, program_repo
) -> Generator[TestClient, None, None]:
    """
    Per-test FastAPI TestClient backed by fresh fake repositories.
    Properly cleans up dependency overrides after each test.
    """
    app.dependency_overrides[get_settings] = lambda: test_settings
    app.dependency_overrides[get_user_repo] = lambda: user_repo
    app.dependency_overrides[get_exercise_repo] = lambda: exercise_repo
    app.dependency_overrides[get_program_repo] = lambda: program_repo
    yield TestClient(app)
    app.dependency_overrides.clear()


# ---------------------------------------------------------------------------
# Auth Helpers
# ---------------------------------------------------------------------------


def register(client: TestClient, user_name: str, password: str = TEST_PASSWORD) -> Dict[str, Any]:
    """Register a user through the API and return the response body."""
    response = client.post(
        "/users/register",
        json={
            "firstName": "Test",
            "lastName": "User",
            "userName": user_name,
            "password": password,
        },
    )
    assert response.status_code == 201, response.text
    return response.json()


def login(client: TestClient, user_name: str, password: str = TEST_PASSWORD) -> str:
    """Log in through the API and return the bearer token."""
    response = client.post(
        "/auth/login", json={"username": user_name, "password": password}
    )
    assert response.status_code == 200, response.text
    return response.json()["authToken"]


def bearer(token: str) -> Dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def auth_user(client) -> Dict[str, Any]:
    """A registered user "authuser" with a valid token under "token"."""
    user = register(client, "authuser")
    return {**user, "token": login(client, "authuser")}


@pytest.fixture
def auth_headers(auth_user) -> Dict[str, str]:
    return bearer(auth_user["token"])


# ---------------------------------------------------------------------------
# Domain Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def catalog(exercise_repo) -> Dict[str, str]:
    """Seed the exercise catalog; maps exercise name to ID."""
    rows = exercise_repo.seed([{"name": "Squat"}, {"name": "Running"}, {"name": "Bench Press"}])
    return {row["name"]: row["id"] for row in rows}


@pytest.fixture
def program_payload(catalog) -> Dict[str, Any]:
    """Valid create payload with one entry of each schedule shape."""
    return {
        "programName": "My Program",
        "categories": ["legs", "cardio"],
        "schedule": [
            {
                "name": "Day 1",
                "exercises": [
                    {"exercise": catalog["Squat"], "sets": 3, "reps": 10},
                    {"exercise": catalog["Running"], "distance": 5, "time": 30},
                ],
            }
        ],
    }
