"""API resource tests."""

from falcon.testing import TestClient


class TestRoles:
    """GET/POST /v1/roles and GET/DELETE /v1/roles/{id}."""

    def test_list_roles_anonymous(self, client: TestClient) -> None:
        result = client.simulate_get("/v1/roles")
        assert result.status_code == 200
        ids = [r["id"] for r in result.json["items"]]
        assert ids == ["admin", "editor", "empty", "viewer"]

    def test_get_role_anonymous(self, client: TestClient) -> None:
        result = client.simulate_get("/v1/roles/editor")
        assert result.status_code == 200
        assert result.json == {"id": "editor", "permissions": ["edit", "publish"]}

    def test_get_role_not_found(self, client: TestClient) -> None:
        assert client.simulate_get("/v1/roles/missing").status_code == 404

    def test_create_role(self, client: TestClient, admin_headers) -> None:
        result = client.simulate_post(
            "/v1/roles",
            json={"id": "author", "permissions": ["write", "write", "read"]},
            headers=admin_headers,
        )
        assert result.status_code == 201
        assert result.json == {"id": "author", "permissions": ["read", "write"]}
        assert client.simulate_get("/v1/roles/author").status_code == 200

    def test_create_role_generates_id(self, client: TestClient, admin_headers) -> None:
        result = client.simulate_post(
            "/v1/roles", json={"permissions": "read"}, headers=admin_headers
        )
        assert result.status_code == 201
        assert result.json["id"]

    def test_create_role_requires_identity(self, client: TestClient) -> None:
        result = client.simulate_post("/v1/roles", json={"permissions": []})
        assert result.status_code == 401

    def test_create_role_forbidden(self, client: TestClient) -> None:
        result = client.simulate_post(
            "/v1/roles", json={"permissions": []}, headers={"X-User-Id": "u1"}
        )
        assert result.status_code == 403

    def test_create_role_duplicate(self, client: TestClient, admin_headers) -> None:
        result = client.simulate_post(
            "/v1/roles", json={"id": "editor", "permissions": []}, headers=admin_headers
        )
        assert result.status_code == 409

    def test_create_role_invalid_permissions(self, client: TestClient, admin_headers) -> None:
        result = client.simulate_post(
            "/v1/roles", json={"permissions": [1, 2]}, headers=admin_headers
        )
        assert result.status_code == 400

    def test_create_role_missing_permissions(self, client: TestClient, admin_headers) -> None:
        result = client.simulate_post("/v1/roles", json={"id": "x"}, headers=admin_headers)
        assert result.status_code == 400

    def test_delete_role(self, client: TestClient, admin_headers) -> None:
        assert client.simulate_delete("/v1/roles/viewer", headers=admin_headers).status_code == 204
        assert client.simulate_get("/v1/roles/viewer").status_code == 404
        assert client.simulate_delete("/v1/roles/viewer", headers=admin_headers).status_code == 404

    def test_delete_role_forbidden(self, client: TestClient) -> None:
        result = client.simulate_delete("/v1/roles/viewer", headers={"X-User-Id": "u1"})
        assert result.status_code == 403


class TestUserRole:
    """PUT /v1/users/{user_id}/role."""

    def test_assign_role(self, client: TestClient, admin_headers) -> None:
        result = client.simulate_put(
            "/v1/users/u5/role", json={"role_id": "viewer"}, headers=admin_headers
        )
        assert result.status_code == 200
        assert result.json == {"id": "u5", "role_id": "viewer"}
        can = client.simulate_get(
            "/v1/me/can", params={"permission": "read"}, headers={"X-User-Id": "u5"}
        )
        assert can.json == {"allowed": True}

    def test_assign_null_role(self, client: TestClient, admin_headers) -> None:
        result = client.simulate_put(
            "/v1/users/u1/role", json={"role_id": None}, headers=admin_headers
        )
        assert result.status_code == 200
        assert result.json["role_id"] is None

    def test_assign_unknown_role(self, client: TestClient, admin_headers) -> None:
        result = client.simulate_put(
            "/v1/users/u1/role", json={"role_id": "missing"}, headers=admin_headers
        )
        assert result.status_code == 404
        me = client.simulate_get("/v1/me/role", headers={"X-User-Id": "u1"})
        assert me.json["user"]["role_id"] == "editor"

    def test_assign_bad_body(self, client: TestClient, admin_headers) -> None:
        assert client.simulate_put(
            "/v1/users/u1/role", json={}, headers=admin_headers
        ).status_code == 400
        assert client.simulate_put(
            "/v1/users/u1/role", json={"role_id": 5}, headers=admin_headers
        ).status_code == 400

    def test_assign_forbidden(self, client: TestClient) -> None:
        result = client.simulate_put(
            "/v1/users/u1/role", json={"role_id": "admin"}, headers={"X-User-Id": "u1"}
        )
        assert result.status_code == 403

    def test_assign_requires_identity(self, client: TestClient) -> None:
        result = client.simulate_put("/v1/users/u1/role", json={"role_id": "admin"})
        assert result.status_code == 401


class TestMe:
    """GET /v1/me/role and GET /v1/me/can."""

    def test_own_role(self, client: TestClient) -> None:
        result = client.simulate_get("/v1/me/role", headers={"X-User-Id": "u1"})
        assert result.status_code == 200
        assert result.json == {
            "role": {"id": "editor", "permissions": ["edit", "publish"]},
            "user": {"id": "u1", "role_id": "editor"},
        }

    def test_own_role_anonymous(self, client: TestClient) -> None:
        result = client.simulate_get("/v1/me/role")
        assert result.status_code == 200
        assert result.json == {"role": None, "user": None}

    def test_own_role_stale(self, client: TestClient) -> None:
        result = client.simulate_get("/v1/me/role", headers={"X-User-Id": "u3"})
        assert result.json == {"role": None, "user": {"id": "u3", "role_id": "ghost"}}

    def test_can_all_of(self, client: TestClient) -> None:
        headers = {"X-User-Id": "u1"}
        ok = client.simulate_get(
            "/v1/me/can", query_string="permission=edit&permission=publish", headers=headers
        )
        denied = client.simulate_get(
            "/v1/me/can", query_string="permission=edit&permission=delete", headers=headers
        )
        assert ok.json == {"allowed": True}
        assert denied.json == {"allowed": False}

    def test_can_anonymous(self, client: TestClient) -> None:
        assert client.simulate_get(
            "/v1/me/can", params={"permission": "edit"}
        ).json == {"allowed": False}
        assert client.simulate_get("/v1/me/can").json == {"allowed": True}


class TestCors:
    def test_allowed_origin_echoed(self, client: TestClient) -> None:
        result = client.simulate_get("/v1/roles", headers={"Origin": "http://app.local"})
        assert result.headers["Access-Control-Allow-Origin"] == "http://app.local"

    def test_other_origin_ignored(self, client: TestClient) -> None:
        result = client.simulate_get("/v1/roles", headers={"Origin": "http://evil.local"})
        assert "Access-Control-Allow-Origin" not in result.headers

    def test_preflight(self, client: TestClient) -> None:
        result = client.simulate_options(
            "/v1/roles/editor", headers={"Origin": "http://app.local"}
        )
        assert result.status_code == 204
        assert "PUT" in result.headers["Access-Control-Allow-Methods"]
