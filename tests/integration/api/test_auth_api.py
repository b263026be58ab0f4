"""
Integration tests for the authentication endpoints.
"""

from timekeeper.infrastructure.db.models import AccountModel
from tests.conftest import TEST_PASSWORD, auth_headers, make_account, register


class TestRegisterAndLogin:
    """Test cases for /api/auth/register and /api/auth/login."""

    def test_register_returns_token_and_profile(self, client):
        response = register(client)

        assert response.status_code == 201
        body = response.json()
        assert body["message"] == "User registered successfully"
        assert body["token_type"] == "bearer"
        assert body["username"] == "alice"
        assert body["is_admin"] is False
        assert body["user"]["employee_id"] == "EMP-001"
        assert "password" not in body["user"]
        assert "password_hash" not in body["user"]

    def test_register_accepts_camel_case(self, client):
        response = client.post("/api/auth/register", json={
            "username": "bob",
            "password": TEST_PASSWORD,
            "position": "rider",
            "employeeId": "R-01",
        })

        assert response.status_code == 201
        assert response.json()["position"] == "rider"

    def test_register_missing_field(self, client):
        response = client.post("/api/auth/register", json={"username": "alice", "password": TEST_PASSWORD})

        assert response.status_code == 400
        assert response.json()["code"] == "INCOMPLETE_INPUT"

    def test_register_bad_position(self, client):
        response = register(client, position="chef")

        assert response.status_code == 400
        assert response.json()["code"] == "INVALID_FORMAT"
        assert response.json()["field"] == "position"

    def test_duplicate_employee_id(self, client, database):
        register(client, username="alice", employee_id="EMP-001")

        response = register(client, username="bob", employee_id="EMP-001")

        assert response.status_code == 409
        assert response.json()["code"] == "DUPLICATE_ENTITY"
        with database.session() as session:
            assert session.query(AccountModel).count() == 1

    def test_duplicate_username(self, client):
        register(client, username="alice", employee_id="EMP-001")

        response = register(client, username="alice", employee_id="EMP-002")

        assert response.status_code == 409

    def test_login(self, client):
        register(client)

        response = client.post("/api/auth/login", json={"username": "alice", "password": TEST_PASSWORD})

        assert response.status_code == 200
        assert response.json()["employee_id"] == "EMP-001"
        assert response.json()["token"]

    def test_login_wrong_password(self, client):
        register(client)

        response = client.post("/api/auth/login", json={"username": "alice", "password": "wrong-one"})

        assert response.status_code == 401
        assert response.json()["code"] == "INVALID_CREDENTIALS"

    def test_login_unknown_user(self, client):
        response = client.post("/api/auth/login", json={"username": "ghost", "password": TEST_PASSWORD})

        assert response.status_code == 401
        assert response.json()["code"] == "INVALID_CREDENTIALS"

    def test_login_missing_password(self, client):
        response = client.post("/api/auth/login", json={"username": "alice"})

        assert response.status_code == 400
        assert response.json()["code"] == "INCOMPLETE_INPUT"


class TestCurrentAccount:
    """Test cases for token resolution through /api/auth/me."""

    def test_me(self, client, worker_token):
        response = client.get("/api/auth/me", headers=auth_headers(worker_token))

        assert response.status_code == 200
        assert response.json()["username"] == "alice"

    def test_missing_token(self, client):
        response = client.get("/api/auth/me")

        assert response.status_code == 401
        assert response.json()["code"] == "MISSING_TOKEN"
        assert response.headers["WWW-Authenticate"] == "Bearer"

    def test_invalid_token(self, client):
        response = client.get("/api/auth/me", headers=auth_headers("garbage"))

        assert response.status_code == 401
        assert response.json()["code"] == "INVALID_TOKEN"

    def test_expired_token(self, client, app, worker_token):
        handler = app.state.jwt_handler
        account_id = int(handler.verify_token(worker_token)["sub"])
        expired = handler.create_access_token(make_account(account_id=account_id), expires_minutes=-1)

        response = client.get("/api/auth/me", headers=auth_headers(expired))

        assert response.status_code == 401
        assert response.json()["code"] == "TOKEN_EXPIRED"

    def test_token_of_deleted_account(self, client, database, worker_token):
        with database.session() as session:
            session.query(AccountModel).delete()
            session.commit()

        response = client.get("/api/auth/me", headers=auth_headers(worker_token))

        assert response.status_code == 401
        assert response.json()["code"] == "ACCOUNT_NOT_FOUND"


class TestCreateAdmin:
    """Test cases for /api/auth/create-admin."""

    payload = {
        "username": "boss2",
        "password": TEST_PASSWORD,
        "position": "worker",
        "employee_id": "ADM-002",
    }

    def test_first_admin(self, client, admin_token):
        response = client.get("/api/auth/me", headers=auth_headers(admin_token))

        assert response.json()["is_admin"] is True

    def test_second_admin_without_token(self, client, admin_token):
        response = client.post("/api/auth/create-admin", json=self.payload)

        assert response.status_code == 401
        assert response.json()["code"] == "MISSING_TOKEN"

    def test_second_admin_by_worker(self, client, admin_token, worker_token):
        response = client.post("/api/auth/create-admin", json=self.payload, headers=auth_headers(worker_token))

        assert response.status_code == 403
        assert response.json()["code"] == "FORBIDDEN"

    def test_second_admin_by_admin(self, client, admin_token):
        response = client.post("/api/auth/create-admin", json=self.payload, headers=auth_headers(admin_token))

        assert response.status_code == 201
        assert response.json()["is_admin"] is True


class TestServiceEndpoints:
    """Test cases for root, health and unknown paths."""

    def test_health(self, client):
        response = client.get("/api/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_root(self, client):
        assert client.get("/").json()["health"] == "/api/health"

    def test_unknown_path(self, client):
        response = client.get("/api/nowhere")

        assert response.status_code == 404
        assert response.json()["code"] == "HTTP_404"
