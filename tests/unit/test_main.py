"""
Unit tests for the app factory and its error handlers in backend/main.py
"""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from api.deps import get_exercise_repo, get_program_repo, get_settings, get_user_repo
from application.exceptions import InternalError
from backend.main import _format_validation_errors, create_app
from backend.settings import Settings

pytestmark = pytest.mark.unit


class TestCreateApp:
    def test_returns_fastapi_app(self):
        app = create_app(settings=Settings(environment="test", _env_file=None))

        assert isinstance(app, FastAPI)
        assert app.title == "Program Tracker API"

    def test_routes_registered(self):
        app = create_app(settings=Settings(environment="test", _env_file=None))
        paths = {route.path for route in app.routes}

        for path in (
            "/health",
            "/users/register",
            "/users/me",
            "/auth/login",
            "/auth/refresh",
            "/exercises",
            "/exercises/{exercise_id}",
            "/programs",
            "/programs/{program_id}",
        ):
            assert path in paths

    def test_production_refuses_default_secret(self):
        with pytest.raises(RuntimeError, match="JWT_SECRET"):
            create_app(settings=Settings(environment="production", _env_file=None))

    def test_production_with_secret_starts(self):
        app = create_app(
            settings=Settings(environment="production", jwt_secret="real-secret", _env_file=None)
        )

        assert isinstance(app, FastAPI)


class TestServerErrors:
    """Store failures never leak their message to clients."""

    def test_internal_error_is_generic_500(self, client, auth_headers, program_payload, app):
        class BrokenProgramRepository:
            def create(self, data):
                raise InternalError("connection reset by peer at db-7")

        app.dependency_overrides[get_program_repo] = lambda: BrokenProgramRepository()

        response = client.post("/programs", json=program_payload, headers=auth_headers)

        assert response.status_code == 500
        assert response.json() == {"error": "Internal server error"}

    def test_unexpected_exception_is_generic_500(self, auth_headers, user_repo, test_settings):
        class ExplodingExerciseRepository:
            def get_all(self):
                raise RuntimeError("unexpected")

        app = create_app(settings=test_settings)
        app.dependency_overrides[get_settings] = lambda: test_settings
        app.dependency_overrides[get_user_repo] = lambda: user_repo
        app.dependency_overrides[get_exercise_repo] = lambda: ExplodingExerciseRepository()

        response = TestClient(app, raise_server_exceptions=False).get(
            "/exercises", headers=auth_headers
        )

        assert response.status_code == 500
        assert response.json() == {"error": "Internal server error"}


class TestFormatValidationErrors:
    def test_drops_location_prefix(self):
        errors = [{"loc": ("body", "userName"), "msg": "Field required"}]

        assert _format_validation_errors(errors) == "userName: Field required"

    def test_keeps_nested_path(self):
        errors = [
            {"loc": ("body", "schedule", 0, "exercises", 1), "msg": "Input should be a valid dictionary"},
            {"loc": ("query", "author"), "msg": "bad"},
        ]

        assert _format_validation_errors(errors) == (
            "schedule.0.exercises.1: Input should be a valid dictionary; author: bad"
        )

    def test_whole_body_missing(self):
        assert _format_validation_errors([{"loc": ("body",), "msg": "Field required"}]) == (
            "body: Field required"
        )
