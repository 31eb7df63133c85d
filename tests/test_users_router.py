# tests/test_users_router.py
"""HTTP tests for the user and login endpoints."""


class TestUserEndpoints:
    def test_create_list_get(self, client):
        resp = client.post("/api/v1/users", json={"username": "operator", "password": "pw"})
        assert resp.status_code == 201
        body = resp.json()
        assert body["role"] == "USER"
        assert "password" not in body and "password_hash" not in body

        assert [u["username"] for u in client.get("/api/v1/users").json()] == ["operator"]
        assert client.get(f"/api/v1/users/{body['id']}").json()["username"] == "operator"

    def test_duplicate_username_is_409(self, client):
        client.post("/api/v1/users", json={"username": "operator", "password": "pw"})
        resp = client.post("/api/v1/users", json={"username": "operator", "password": "pw2"})
        assert resp.status_code == 409

    def test_update_change_password_delete(self, client):
        user = client.post("/api/v1/users", json={"username": "operator", "password": "pw"}).json()

        resp = client.put(f"/api/v1/users/{user['id']}", json={"username": "op2", "role": "ADMIN"})
        assert resp.status_code == 200
        assert resp.json()["role"] == "ADMIN"

        resp = client.patch(f"/api/v1/users/{user['id']}/password",
                            json={"old_password": "wrong", "new_password": "pw2"})
        assert resp.status_code == 400

        resp = client.patch(f"/api/v1/users/{user['id']}/password",
                            json={"old_password": "pw", "new_password": "pw2"})
        assert resp.status_code == 200

        assert client.delete(f"/api/v1/users/{user['id']}").status_code == 204
        assert client.get(f"/api/v1/users/{user['id']}").status_code == 404


class TestLogin:
    def test_login_success(self, client):
        client.post("/api/v1/users", json={"username": "boss", "password": "pw", "role": "ADMIN"})
        resp = client.post("/api/v1/auth/login", json={"username": "boss", "password": "pw"})
        assert resp.status_code == 200
        assert resp.json()["role"] == "ADMIN"
        assert resp.json()["message"] == "Login successful"

    def test_wrong_password_is_401(self, client):
        client.post("/api/v1/users", json={"username": "boss", "password": "pw"})
        resp = client.post("/api/v1/auth/login", json={"username": "boss", "password": "nope"})
        assert resp.status_code == 401
        assert resp.json()["detail"] == "Invalid username or password"

    def test_missing_credentials_is_400(self, client):
        resp = client.post("/api/v1/auth/login", json={"username": "boss"})
        assert resp.status_code == 400
        assert "password" in resp.json()["errors"]


class TestUsernameConflicts:
    def test_lost_races_map_to_409(self, client, monkeypatch):
        from app.services import user_service
        monkeypatch.setattr(user_service, "_username_taken", lambda db, username: False)

        assert client.post("/api/v1/users", json={"username": "op", "password": "pw"}).status_code == 201
        resp = client.post("/api/v1/users", json={"username": "op", "password": "pw"})
        assert resp.status_code == 409
        assert resp.json()["detail"] == "Username op already exists"

        other = client.post("/api/v1/users", json={"username": "b", "password": "pw"}).json()
        resp = client.put(f"/api/v1/users/{other['id']}", json={"username": "op", "role": "USER"})
        assert resp.status_code == 409
