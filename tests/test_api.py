"""Health and authentication endpoint tests."""

from riderwatch.models.user import User


def test_health_check(client):
    """Test health check endpoint."""
    response = client.get("/api/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"
    assert "timestamp" in response.json()


def test_unknown_endpoint(client):
    response = client.get("/api/does-not-exist")
    assert response.status_code == 404
    assert response.json() == {"error": "Endpoint not found"}


def test_register_user(client):
    """Test user registration."""
    response = client.post(
        "/api/auth/register",
        json={"name": "New Rider", "email": "  NewRider@Example.com ", "password": "secret1"},
    )
    assert response.status_code == 201
    data = response.json()
    assert data["token"]
    assert data["user"]["email"] == "newrider@example.com"
    assert data["user"]["name"] == "New Rider"
    assert "password_hash" not in data["user"]


def test_register_duplicate_email_is_case_insensitive(client, auth_headers, db):
    """Registering an existing email in another case is a conflict."""
    response = client.post(
        "/api/auth/register",
        json={"name": "Duplicate", "email": "TEST@example.com", "password": "password123"},
    )
    assert response.status_code == 409
    assert "already exists" in response.json()["error"]
    assert db.query(User).count() == 1


def test_register_validation_reports_every_field(client):
    response = client.post(
        "/api/auth/register",
        json={"name": "A", "email": "not-an-email", "password": "123"},
    )
    assert response.status_code == 400
    body = response.json()
    assert body["error"] == "Validation failed"
    details = " ".join(body["details"])
    assert "name" in details
    assert "email" in details
    assert "password" in details


def test_login(client, auth_headers):
    """Test user login."""
    response = client.post(
        "/api/auth/login", json={"email": "Test@Example.com", "password": "testpass123"}
    )
    assert response.status_code == 200
    assert response.json()["token"]
    assert response.json()["user"]["id"] == auth_headers.user_id


def test_login_wrong_password(client, auth_headers):
    """Test login with wrong password."""
    response = client.post(
        "/api/auth/login", json={"email": auth_headers.email, "password": "wrongpass"}
    )
    assert response.status_code == 401
    assert response.json()["error"] == "Invalid email or password"


def test_login_unknown_email(client):
    response = client.post(
        "/api/auth/login", json={"email": "nobody@example.com", "password": "whatever"}
    )
    assert response.status_code == 401


def test_login_missing_fields(client):
    response = client.post("/api/auth/login", json={"email": "test@example.com"})
    assert response.status_code == 400


def test_get_current_user(client, auth_headers):
    """Test getting current user info."""
    response = client.get("/api/auth/me", headers=auth_headers)
    assert response.status_code == 200
    assert response.json()["email"] == auth_headers.email
    assert response.json()["id"] == auth_headers.user_id


def test_protected_route_requires_token(client):
    response = client.get("/api/auth/me")
    assert response.status_code == 401
    assert "error" in response.json()


def test_protected_route_rejects_invalid_token(client):
    response = client.get("/api/trips", headers={"Authorization": "Bearer not-a-jwt"})
    assert response.status_code == 401
    assert response.json()["error"] == "Invalid or expired token. Please login again."


def test_token_for_deleted_user_is_rejected(client, auth_headers, db):
    db.query(User).filter(User.id == auth_headers.user_id).delete()
    db.commit()

    response = client.get("/api/trips", headers=auth_headers)
    assert response.status_code == 401


def test_me_for_deleted_user_is_not_found(client, auth_headers, db):
    db.query(User).filter(User.id == auth_headers.user_id).delete()
    db.commit()

    response = client.get("/api/auth/me", headers=auth_headers)
    assert response.status_code == 404
    assert response.json()["error"] == "User not found"
