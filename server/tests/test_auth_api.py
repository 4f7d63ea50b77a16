# server/tests/test_auth_api.py


def test_join(client):
    res = client.post("/api/v1/users/join", json={"username": "alice", "password": "pw1"})

    assert res.status_code == 200
    body = res.json()
    assert body["status"] == "success"
    assert body["data"]["username"] == "alice"
    assert "hashed_password" not in body["data"]


def test_join_duplicate_returns_409(client):
    client.post("/api/v1/users/join", json={"username": "alice", "password": "pw1"})
    res = client.post("/api/v1/users/join", json={"username": "alice", "password": "pw1"})

    assert res.status_code == 409
    assert res.json()["code"] == "DUPLICATED_USER_NAME"


def test_join_rejects_empty_username(client):
    res = client.post("/api/v1/users/join", json={"username": "", "password": "pw1"})
    assert res.status_code == 422


def test_login_returns_token(client):
    client.post("/api/v1/users/join", json={"username": "alice", "password": "pw1"})
    res = client.post("/api/v1/users/login", json={"username": "alice", "password": "pw1"})

    assert res.status_code == 200
    data = res.json()["data"]
    assert data["access_token"]
    assert data["token_type"] == "bearer"


def test_login_unknown_user_returns_404(client):
    res = client.post("/api/v1/users/login", json={"username": "ghost", "password": "pw1"})

    assert res.status_code == 404
    assert res.json() == {"status": "error", "code": "USER_NOT_FOUND", "message": "User ghost not found"}


def test_login_wrong_password_returns_401(client):
    client.post("/api/v1/users/join", json={"username": "alice", "password": "pw1"})
    res = client.post("/api/v1/users/login", json={"username": "alice", "password": "nope"})

    assert res.status_code == 401
    assert res.json()["code"] == "INVALID_PASSWORD"


def test_oauth2_token_form(client):
    client.post("/api/v1/users/join", json={"username": "alice", "password": "pw1"})
    res = client.post("/api/v1/users/token", data={"username": "alice", "password": "pw1"})

    assert res.status_code == 200
    token = res.json()["access_token"]
    me = client.get("/api/v1/users/me", headers={"Authorization": f"Bearer {token}"})
    assert me.json()["data"]["username"] == "alice"


def test_me_requires_authentication(client):
    res = client.get("/api/v1/users/me")

    assert res.status_code == 401
    assert res.json() == {"status": "error", "code": "INVALID_TOKEN", "message": "Not authenticated"}


def test_me_rejects_invalid_token(client):
    res = client.get("/api/v1/users/me", headers={"Authorization": "Bearer garbage"})

    assert res.status_code == 401
    assert res.json()["code"] == "INVALID_TOKEN"
    assert res.headers["WWW-Authenticate"] == "Bearer"


def test_me_for_token_of_missing_user_returns_404(client, token_issuer):
    token = token_issuer.issue("ghost")
    res = client.get("/api/v1/users/me", headers={"Authorization": f"Bearer {token}"})
    assert res.status_code == 404


def test_health(client):
    assert client.get("/health").json()["status"] == "healthy"
