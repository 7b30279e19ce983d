from tests.factories import register


def test_register_returns_token_and_user(client):
    body = register(client, email="Carol@Mail.com", name="Carol")
    assert body["token_type"] == "bearer"
    assert body["access_token"]
    assert body["user"]["email"] == "carol@mail.com"
    assert body["user"]["name"] == "Carol"


def test_register_rejects_duplicate_email(client):
    register(client)
    response = client.post(
        "/api/auth/register",
        json={"name": "Again", "email": "alice@mail.com", "password": "another1"},
    )
    assert response.status_code == 400
    assert response.json()["detail"] == "User already exists"


def test_register_validates_body(client):
    response = client.post(
        "/api/auth/register",
        json={"name": "Short", "email": "short@mail.com", "password": "123"},
    )
    assert response.status_code == 422


def test_login_and_profile(client):
    register(client)
    response = client.post(
        "/api/auth/login", json={"email": "alice@mail.com", "password": "secret123"}
    )
    assert response.status_code == 200
    token = response.json()["access_token"]

    profile = client.get("/api/auth/profile", headers={"Authorization": f"Bearer {token}"})
    assert profile.status_code == 200
    assert profile.json()["email"] == "alice@mail.com"


def test_login_with_wrong_password(client):
    register(client)
    response = client.post(
        "/api/auth/login", json={"email": "alice@mail.com", "password": "wrong-one"}
    )
    assert response.status_code == 400
    assert response.json()["detail"] == "Invalid credentials"


def test_protected_routes_need_token(client):
    assert client.get("/api/auth/profile").status_code == 401
    assert client.get("/api/summary/").status_code == 401
    assert client.get("/api/transactions/").status_code == 401


def test_garbage_token_is_rejected(client):
    response = client.get("/api/auth/profile", headers={"Authorization": "Bearer not-a-jwt"})
    assert response.status_code == 401
    assert response.headers["www-authenticate"] == "Bearer"
