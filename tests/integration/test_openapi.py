"""
Integration tests for OpenAPI documentation.

Verifies OpenAPI schema is correctly generated for all endpoints.
"""

import pytest
from fastapi.testclient import TestClient

from src.api.main import app


@pytest.fixture
def client() -> TestClient:
    """Create test client for the application."""
    return TestClient(app)


class TestOpenAPISchema:
    """Tests for OpenAPI schema generation."""

    def test_openapi_schema_accessible(self, client: TestClient) -> None:
        """OpenAPI schema is accessible at /openapi.json."""
        response = client.get("/openapi.json")
        assert response.status_code == 200
        schema = response.json()
        assert "openapi" in schema
        assert "info" in schema
        assert "paths" in schema

    def test_openapi_title_and_description(self, client: TestClient) -> None:
        """OpenAPI schema has correct title and description."""
        schema = client.get("/openapi.json").json()
        assert schema["info"]["title"] == "signup"
        assert "SignUp API" in schema["info"]["description"]
        assert schema["info"]["version"] == "0.1.0"

    def test_v1_signup_endpoint_in_schema(self, client: TestClient) -> None:
        """POST /v1/signup endpoint is documented in schema."""
        schema = client.get("/openapi.json").json()
        assert "/v1/signup" in schema["paths"]
        signup = schema["paths"]["/v1/signup"]
        assert "post" in signup
        assert signup["post"]["summary"] == "Sign up a new account"

    def test_signup_documents_error_responses(self, client: TestClient) -> None:
        """400 and 500 responses are documented with ErrorResponse."""
        schema = client.get("/openapi.json").json()
        responses = schema["paths"]["/v1/signup"]["post"]["responses"]
        assert "400" in responses
        assert "500" in responses
        assert "ErrorResponse" in schema["components"]["schemas"]

    def test_signup_request_schema_uses_wire_names(self, client: TestClient) -> None:
        """Request schema exposes passwordConfirmation by its wire name."""
        schema = client.get("/openapi.json").json()
        properties = schema["components"]["schemas"]["SignUpRequestBody"]["properties"]
        assert set(properties) == {"name", "email", "password", "passwordConfirmation"}

    def test_account_response_schema_has_no_password(self, client: TestClient) -> None:
        """AccountResponse schema does not expose the password."""
        schema = client.get("/openapi.json").json()
        properties = schema["components"]["schemas"]["AccountResponse"]["properties"]
        assert set(properties) == {"id", "name", "email"}

    def test_health_endpoint_tagged(self, client: TestClient) -> None:
        """GET /health is grouped under the health tag."""
        schema = client.get("/openapi.json").json()
        assert schema["paths"]["/health"]["get"]["tags"] == ["health"]
        assert {"name": "health", "description": "Liveness and database connectivity"} in schema[
            "tags"
        ]
