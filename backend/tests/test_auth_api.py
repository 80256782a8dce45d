from blog_api.services.validation import PASSWORD_UPPERCASE_MESSAGE

STRONG_PASSWORD = "Passw0rd!"


def test_register_returns_user_without_password(client):
    response = client.post("/auth/register", json={"username": "alice", "password": STRONG_PASSWORD})

    assert response.status_code == 201
    body = response.json()
    assert body["username"] == "alice"
    assert set(body) == {"id", "username", "createdAt"}
    assert STRONG_PASSWORD not in response.text


def test_register_validation_errors_are_aggregated(client):
    response = client.post("/auth/register", json={"username": "bad name", "password": "alllowercase1!"})

    assert response.status_code == 400
    error = response.json()["error"]
    assert error["code"] == "VALIDATION_ERROR"
    fields = {(d["field"], d["message"]) for d in error["details"]}
    assert ("password", PASSWORD_UPPERCASE_MESSAGE) in fields
    assert any(field == "username" for field, _ in fields)


def test_register_missing_fields(client):
    response = client.post("/auth/register", json={})

    assert response.status_code == 400
    fields = {d["field"] for d in response.json()["error"]["details"]}
    assert fields == {"username", "password"}


def test_register_duplicate_username(client):
    payload = {"username": "alice", "password": STRONG_PASSWORD}
    assert client.post("/auth/register", json=payload).status_code == 201

    response = client.post("/auth/register", json=payload)
    assert response.status_code == 409
    assert response.json()["error"]["message"] == "Username already taken"


def test_login_returns_access_token(client):
    client.post("/auth/register", json={"username": "alice", "password": STRONG_PASSWORD})
    response = client.post("/auth/login", json={"username": "alice", "password": STRONG_PASSWORD})

    assert response.status_code == 200
    body = response.json()
    assert body["accessToken"]
    assert body["tokenType"] == "bearer"


def test_login_failures_are_indistinguishable(client):
    client.post("/auth/register", json={"username": "alice", "password": STRONG_PASSWORD})

    wrong_password = client.post("/auth/login", json={"username": "alice", "password": "Wr0ngPass!"})
    unknown_user = client.post("/auth/login", json={"username": "nobody", "password": STRONG_PASSWORD})

    assert wrong_password.status_code == unknown_user.status_code == 401
    assert wrong_password.json() == unknown_user.json()
    assert wrong_password.headers["www-authenticate"] == "Bearer"


def test_profile_requires_token(client):
    response = client.get("/auth/profile")
    assert response.status_code == 401


def test_profile_rejects_bad_token(client):
    response = client.get("/auth/profile", headers={"Authorization": "Bearer not-a-token"})
    assert response.status_code == 401


def test_profile_returns_current_user(client, register_and_login):
    headers = register_and_login("alice")
    response = client.get("/auth/profile", headers=headers)

    assert response.status_code == 200
    assert response.json()["username"] == "alice"


def test_health(client):
    assert client.get("/health").json() == {"status": "healthy"}
