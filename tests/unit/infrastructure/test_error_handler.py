"""
Unit tests for error translation.
"""

from fastapi import FastAPI
from fastapi.testclient import TestClient

from timekeeper.domain.models.base import (
    AuthenticationError,
    DuplicateEntityError,
    IncompleteInputError,
    OverlapConflictError,
)
from timekeeper.infrastructure.web.middleware import ErrorHandlerMiddleware, register_exception_handlers


def build_client(debug=False):
    app = FastAPI()
    register_exception_handlers(app)
    app.add_middleware(ErrorHandlerMiddleware, debug=debug)

    @app.get("/incomplete")
    def incomplete():
        raise IncompleteInputError("All fields are required", "date")

    @app.get("/overlap")
    def overlap():
        raise OverlapConflictError(conflicting_id=3)

    @app.get("/duplicate")
    def duplicate():
        raise DuplicateEntityError("Account", "employee_id", "EMP-1")

    @app.get("/expired")
    def expired():
        raise AuthenticationError("Token has expired", AuthenticationError.TOKEN_EXPIRED)

    @app.get("/crash")
    def crash():
        raise RuntimeError("database exploded")

    return TestClient(app)


class TestErrorHandler:
    """Test cases for domain exception translation."""

    def setup_method(self):
        self.client = build_client()

    def test_validation_error_body(self):
        response = self.client.get("/incomplete")

        assert response.status_code == 400
        assert response.json() == {
            "error": "Bad Request",
            "message": "All fields are required",
            "code": "INCOMPLETE_INPUT",
            "status_code": 400,
            "field": "date",
        }

    def test_conflicts_share_status_not_code(self):
        overlap = self.client.get("/overlap")
        duplicate = self.client.get("/duplicate")

        assert overlap.status_code == duplicate.status_code == 409
        assert overlap.json()["code"] == "OVERLAP_CONFLICT"
        assert duplicate.json()["code"] == "DUPLICATE_ENTITY"

    def test_authentication_error(self):
        response = self.client.get("/expired")

        assert response.status_code == 401
        assert response.json()["code"] == "TOKEN_EXPIRED"
        assert response.headers["WWW-Authenticate"] == "Bearer"

    def test_unhandled_error_is_generic(self):
        response = self.client.get("/crash")

        assert response.status_code == 500
        assert response.json()["code"] == "INTERNAL_ERROR"
        assert "database exploded" not in response.text

    def test_debug_adds_details(self):
        response = build_client(debug=True).get("/crash")

        assert response.json()["debug"]["exception_type"] == "RuntimeError"

    def test_unknown_path(self):
        response = self.client.get("/missing")

        assert response.status_code == 404
        assert response.json()["code"] == "HTTP_404"
        assert response.json()["error"] == "Not Found"
