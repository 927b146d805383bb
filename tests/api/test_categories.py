"""Tests for category API endpoints."""

from fastapi.testclient import TestClient


class TestListCategories:
    """Tests for GET /api/v1/public/categories."""

    def test_list_is_public(self, client: TestClient) -> None:
        """Should list categories without authentication."""
        response = client.get("/api/v1/public/categories")
        assert response.status_code == 200

        data = response.json()
        assert data["total"] == 11
        assert [c["code"] for c in data["categories"]][:3] == ["C", "L", "B"]

    def test_category_shape(self, client: TestClient) -> None:
        response = client.get("/api/v1/public/categories")
        conveyor = response.json()["categories"][0]
        assert conveyor["name"] == "Conveyor Components"
        assert conveyor["slug"] == "conveyor-components"
        assert conveyor["sort_order"] == 1
        assert conveyor["sub_categories"][12] == {
            "code": "C-013",
            "name": "Side guide accessories",
            "slug": "side-guide-accessories",
            "sort_order": 13,
        }

    def test_request_id_header(self, client: TestClient) -> None:
        """Request ID is echoed back."""
        response = client.get(
            "/api/v1/public/categories", headers={"X-Request-ID": "req-123"}
        )
        assert response.headers["X-Request-ID"] == "req-123"


class TestGetCategory:
    """Tests for GET /api/v1/public/categories/{slug_or_code}."""

    def test_by_code(self, client: TestClient) -> None:
        response = client.get("/api/v1/public/categories/b")
        assert response.status_code == 200
        data = response.json()
        assert data["code"] == "B"
        assert len(data["sub_categories"]) == 8

    def test_by_slug(self, client: TestClient) -> None:
        response = client.get("/api/v1/public/categories/wear-strips")
        assert response.status_code == 200
        assert response.json()["code"] == "W"

    def test_not_found(self, client: TestClient) -> None:
        response = client.get("/api/v1/public/categories/nonexistent")
        assert response.status_code == 404
        data = response.json()
        assert data["error_code"] == "CATEGORY_NOT_FOUND"
        assert data["request_id"]


class TestGetSubCategory:
    """Tests for GET /api/v1/public/categories/{category}/{sub_category}."""

    def test_by_slugs(self, client: TestClient) -> None:
        response = client.get(
            "/api/v1/public/categories/levelling-feet/fixed-feet"
        )
        assert response.status_code == 200
        data = response.json()
        assert data["code"] == "L-001"
        assert data["category"] == {
            "code": "L",
            "name": "Levelling Feet",
            "slug": "levelling-feet",
        }

    def test_by_codes(self, client: TestClient) -> None:
        response = client.get("/api/v1/public/categories/g/g-007")
        assert response.status_code == 200
        assert response.json()["name"] == 'Electric motors "Hygienic"'

    def test_unknown_category(self, client: TestClient) -> None:
        response = client.get("/api/v1/public/categories/zz/bases")
        assert response.status_code == 404
        assert response.json()["error_code"] == "CATEGORY_NOT_FOUND"

    def test_unknown_sub_category(self, client: TestClient) -> None:
        response = client.get("/api/v1/public/categories/c/fixed-feet")
        assert response.status_code == 404
        assert response.json()["error_code"] == "SUBCATEGORY_NOT_FOUND"


class TestPlanMigration:
    """Tests for POST /api/v1/categories/migrations/plan."""

    def test_requires_auth(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/categories/migrations/plan",
            json={"records": [{"category_code": "CONV"}]},
        )
        assert response.status_code == 401
        assert response.json()["error_code"] == "UNAUTHORIZED"

    def test_invalid_api_key(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/categories/migrations/plan",
            json={"records": [{"category_code": "CONV"}]},
            headers={"Authorization": "Bearer wrong"},
        )
        assert response.status_code == 401
        assert response.json()["error_code"] == "INVALID_API_KEY"

    def test_plan(self, auth_client: TestClient) -> None:
        response = auth_client.post(
            "/api/v1/categories/migrations/plan",
            json={
                "records": [
                    {
                        "category_code": "MOD",
                        "sub_category_code": "1IN_HEAVY",
                        "sub_category_name": "1in heavy",
                    },
                    {"category_code": "B", "sub_category_code": "B-004"},
                    {"category_code": "NOPE"},
                ]
            },
        )
        assert response.status_code == 200

        data = response.json()
        assert data["total"] == 3
        assert data["changed"] == 1
        assert data["unchanged"] == 1
        assert data["unresolved"] == 1

        first = data["results"][0]
        assert first["category_code"] == "M"
        assert first["sub_category_code"] == "M-005"
        assert first["category_rule"] == "table"
        assert first["sub_category_rule"] == "table"

    def test_empty_records_rejected(self, auth_client: TestClient) -> None:
        response = auth_client.post(
            "/api/v1/categories/migrations/plan", json={"records": []}
        )
        assert response.status_code == 422
