"""Integration tests for category endpoints."""

from uuid import uuid4

from fastapi.testclient import TestClient


class TestListCategories:
    def test_system_categories_first(
        self,
        test_client: TestClient,
        api_v1_prefix: str,
        user_params: dict,
        system_categories,
    ):
        test_client.post(
            f"{api_v1_prefix}/categories",
            params=user_params,
            json={"name": "Allowance", "type": "INCOME"},
        )

        response = test_client.get(f"{api_v1_prefix}/categories", params=user_params)

        assert response.status_code == 200
        names = [c["name"] for c in response.json()]
        assert names == [
            "Entertainment",
            "Food & Dining",
            "Freelance",
            "Salary",
            "Transportation",
            "Allowance",
        ]

    def test_filter_by_type(
        self,
        test_client: TestClient,
        api_v1_prefix: str,
        user_params: dict,
        system_categories,
    ):
        response = test_client.get(
            f"{api_v1_prefix}/categories",
            params={**user_params, "type": "INCOME"},
        )

        assert response.status_code == 200
        assert [c["name"] for c in response.json()] == ["Freelance", "Salary"]
        assert all(c["isSystem"] for c in response.json())

    def test_user_categories_are_private(
        self,
        test_client: TestClient,
        api_v1_prefix: str,
        user_params: dict,
    ):
        test_client.post(
            f"{api_v1_prefix}/categories",
            params=user_params,
            json={"name": "Pets", "type": "EXPENSE"},
        )

        response = test_client.get(
            f"{api_v1_prefix}/categories", params={"user_id": "someone-else"},
        )

        assert response.json() == []


class TestCreateCategory:
    def test_create(
        self, test_client: TestClient, api_v1_prefix: str, user_params: dict,
    ):
        response = test_client.post(
            f"{api_v1_prefix}/categories",
            params=user_params,
            json={"name": "Pets", "type": "EXPENSE", "icon": "🐶", "color": "#a855f7"},
        )

        assert response.status_code == 201
        data = response.json()
        assert data["name"] == "Pets"
        assert data["type"] == "EXPENSE"
        assert data["icon"] == "🐶"
        assert data["color"] == "#a855f7"
        assert data["isSystem"] is False

    def test_invalid_color(
        self, test_client: TestClient, api_v1_prefix: str, user_params: dict,
    ):
        response = test_client.post(
            f"{api_v1_prefix}/categories",
            params=user_params,
            json={"name": "Pets", "type": "EXPENSE", "color": "purple"},
        )

        assert response.status_code == 400
        assert response.json()["fields"] == ["color"]

    def test_blank_name(
        self, test_client: TestClient, api_v1_prefix: str, user_params: dict,
    ):
        response = test_client.post(
            f"{api_v1_prefix}/categories",
            params=user_params,
            json={"name": "   ", "type": "EXPENSE"},
        )

        assert response.status_code == 400
        assert response.json()["fields"] == ["name"]


class TestDeleteCategory:
    def test_delete_removes_category_and_its_budgets(
        self,
        test_client: TestClient,
        api_v1_prefix: str,
        user_params: dict,
        create_transaction,
    ):
        pets = test_client.post(
            f"{api_v1_prefix}/categories",
            params=user_params,
            json={"name": "Pets", "type": "EXPENSE"},
        ).json()
        test_client.post(
            f"{api_v1_prefix}/budgets",
            params=user_params,
            json={"categoryId": pets["id"], "amount": 100, "month": "2024-06-01"},
        )
        txn = create_transaction(pets["id"], 25, "2024-06-03T10:00:00Z")

        response = test_client.delete(
            f"{api_v1_prefix}/categories/{pets['id']}", params=user_params,
        )

        assert response.status_code == 200
        assert response.json() == {"message": "Category deleted successfully"}
        assert test_client.get(
            f"{api_v1_prefix}/budgets", params=user_params,
        ).json() == []

        # The transaction survives without its category
        kept = test_client.get(
            f"{api_v1_prefix}/transactions/{txn['id']}", params=user_params,
        ).json()
        assert kept["categoryId"] == pets["id"]
        assert kept["category"] is None

    def test_system_category_is_protected(
        self,
        test_client: TestClient,
        api_v1_prefix: str,
        user_params: dict,
        system_categories,
    ):
        response = test_client.delete(
            f"{api_v1_prefix}/categories/{system_categories['Salary']}",
            params=user_params,
        )

        assert response.status_code == 403
        assert response.json()["code"] == "SYSTEM_CATEGORY_PROTECTED"

    def test_delete_missing_returns_404(
        self, test_client: TestClient, api_v1_prefix: str, user_params: dict,
    ):
        response = test_client.delete(
            f"{api_v1_prefix}/categories/{uuid4()}", params=user_params,
        )

        assert response.status_code == 404
        assert response.json()["code"] == "CATEGORY_NOT_FOUND"
