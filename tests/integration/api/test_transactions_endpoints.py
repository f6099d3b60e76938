"""Integration tests for transaction endpoints."""

from uuid import uuid4

from fastapi.testclient import TestClient


class TestCreateTransaction:
    def test_create_returns_camel_case_with_category(
        self, system_categories, create_transaction,
    ):
        data = create_transaction(
            system_categories["Food & Dining"],
            45.50,
            "2024-06-12T18:30:00Z",
            description="  Dinner  ",
        )

        assert set(data) == {
            "id",
            "type",
            "amount",
            "categoryId",
            "category",
            "date",
            "description",
            "createdAt",
        }
        assert data["type"] == "EXPENSE"
        assert data["amount"] == 45.5
        assert data["description"] == "Dinner"
        assert data["category"]["name"] == "Food & Dining"
        assert data["category"]["isSystem"] is True
        assert data["date"].startswith("2024-06-12T18:30:00")

    def test_create_rejects_non_positive_amount(
        self,
        test_client: TestClient,
        api_v1_prefix: str,
        user_params: dict,
        system_categories,
    ):
        response = test_client.post(
            f"{api_v1_prefix}/transactions",
            params=user_params,
            json={
                "type": "EXPENSE",
                "amount": -5,
                "categoryId": system_categories["Food & Dining"],
            },
        )

        assert response.status_code == 400
        body = response.json()
        assert body["code"] == "INVALID_AMOUNT"
        assert body["fields"] == ["amount"]

    def test_sub_cent_amount_is_rejected_and_ledger_stays_readable(
        self,
        test_client: TestClient,
        api_v1_prefix: str,
        user_params: dict,
        system_categories,
    ):
        response = test_client.post(
            f"{api_v1_prefix}/transactions",
            params=user_params,
            json={
                "type": "EXPENSE",
                "amount": 0.001,
                "categoryId": system_categories["Food & Dining"],
                "date": "2024-06-12T18:30:00Z",
            },
        )

        assert response.status_code == 400
        body = response.json()
        assert body["code"] == "INVALID_AMOUNT"
        assert body["fields"] == ["amount"]

        listing = test_client.get(f"{api_v1_prefix}/transactions", params=user_params)
        stats = test_client.get(
            f"{api_v1_prefix}/analytics/stats",
            params={**user_params, "month": "2024-06"},
        )
        assert listing.status_code == 200
        assert listing.json() == []
        assert stats.status_code == 200

    def test_update_rejects_sub_cent_amount(
        self,
        test_client: TestClient,
        api_v1_prefix: str,
        user_params: dict,
        system_categories,
        create_transaction,
    ):
        created = create_transaction(
            system_categories["Food & Dining"], 10, "2024-06-12T18:30:00Z",
        )

        response = test_client.put(
            f"{api_v1_prefix}/transactions/{created['id']}",
            params=user_params,
            json={"amount": 1.005},
        )

        assert response.status_code == 400
        assert response.json()["code"] == "INVALID_AMOUNT"

    def test_create_rejects_unknown_category(
        self, test_client: TestClient, api_v1_prefix: str, user_params: dict,
    ):
        response = test_client.post(
            f"{api_v1_prefix}/transactions",
            params=user_params,
            json={"type": "INCOME", "amount": 10, "categoryId": str(uuid4())},
        )

        assert response.status_code == 400
        assert response.json()["code"] == "INVALID_CATEGORY"

    def test_create_rejects_unknown_type(
        self,
        test_client: TestClient,
        api_v1_prefix: str,
        user_params: dict,
        system_categories,
    ):
        response = test_client.post(
            f"{api_v1_prefix}/transactions",
            params=user_params,
            json={
                "type": "TRANSFER",
                "amount": 10,
                "categoryId": system_categories["Salary"],
            },
        )

        assert response.status_code == 400
        body = response.json()
        assert body["code"] == "VALIDATION_ERROR"
        assert body["fields"] == ["type"]

    def test_other_users_category_is_rejected(
        self,
        test_client: TestClient,
        api_v1_prefix: str,
        user_params: dict,
    ):
        foreign = test_client.post(
            f"{api_v1_prefix}/categories",
            params={"user_id": "someone-else"},
            json={"name": "Hobby", "type": "EXPENSE"},
        ).json()

        response = test_client.post(
            f"{api_v1_prefix}/transactions",
            params=user_params,
            json={"type": "EXPENSE", "amount": 10, "categoryId": foreign["id"]},
        )

        assert response.status_code == 400
        assert response.json()["code"] == "INVALID_CATEGORY"


class TestReadTransactions:
    def test_get_by_id(
        self,
        test_client: TestClient,
        api_v1_prefix: str,
        user_params: dict,
        system_categories,
        create_transaction,
    ):
        created = create_transaction(
            system_categories["Salary"], 5000, "2024-06-01T09:00:00Z", type_="INCOME",
        )

        response = test_client.get(
            f"{api_v1_prefix}/transactions/{created['id']}", params=user_params,
        )

        assert response.status_code == 200
        assert response.json()["amount"] == 5000.0

    def test_get_missing_returns_404(
        self, test_client: TestClient, api_v1_prefix: str, user_params: dict,
    ):
        response = test_client.get(
            f"{api_v1_prefix}/transactions/{uuid4()}", params=user_params,
        )

        assert response.status_code == 404
        assert response.json()["code"] == "TRANSACTION_NOT_FOUND"

    def test_other_user_cannot_read(
        self,
        test_client: TestClient,
        api_v1_prefix: str,
        system_categories,
        create_transaction,
    ):
        created = create_transaction(
            system_categories["Salary"], 1, "2024-06-01T09:00:00Z", type_="INCOME",
        )

        response = test_client.get(
            f"{api_v1_prefix}/transactions/{created['id']}",
            params={"user_id": "intruder"},
        )

        assert response.status_code == 404

    def test_list_newest_first_with_filters(
        self,
        test_client: TestClient,
        api_v1_prefix: str,
        user_params: dict,
        system_categories,
        create_transaction,
    ):
        food = system_categories["Food & Dining"]
        create_transaction(food, 10, "2024-05-31T23:00:00Z")
        create_transaction(food, 20, "2024-06-05T12:00:00Z")
        create_transaction(system_categories["Transportation"], 30, "2024-06-07T08:00:00Z")
        create_transaction(
            system_categories["Salary"], 3000, "2024-06-01T09:00:00Z", type_="INCOME",
        )
        url = f"{api_v1_prefix}/transactions"

        everything = test_client.get(url, params=user_params).json()
        assert [t["amount"] for t in everything] == [30.0, 20.0, 3000.0, 10.0]

        all_types = test_client.get(url, params={**user_params, "type": "ALL"}).json()
        assert len(all_types) == 4

        expenses = test_client.get(url, params={**user_params, "type": "EXPENSE"}).json()
        assert {t["type"] for t in expenses} == {"EXPENSE"}
        assert len(expenses) == 3

        food_only = test_client.get(
            url, params={**user_params, "category_id": food},
        ).json()
        assert [t["amount"] for t in food_only] == [20.0, 10.0]

        june = test_client.get(
            url,
            params={
                **user_params,
                "start_date": "2024-06-01T00:00:00Z",
                "end_date": "2024-06-30T23:59:59Z",
            },
        ).json()
        assert [t["amount"] for t in june] == [30.0, 20.0, 3000.0]


class TestUpdateTransaction:
    def test_partial_update_keeps_other_fields(
        self,
        test_client: TestClient,
        api_v1_prefix: str,
        user_params: dict,
        system_categories,
        create_transaction,
    ):
        created = create_transaction(
            system_categories["Food & Dining"],
            45.50,
            "2024-06-12T18:30:00Z",
            description="Dinner",
        )

        response = test_client.put(
            f"{api_v1_prefix}/transactions/{created['id']}",
            params=user_params,
            json={"amount": 50, "categoryId": system_categories["Entertainment"]},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["amount"] == 50.0
        assert data["category"]["name"] == "Entertainment"
        assert data["description"] == "Dinner"
        assert data["createdAt"] == created["createdAt"]

    def test_empty_description_clears_it(
        self,
        test_client: TestClient,
        api_v1_prefix: str,
        user_params: dict,
        system_categories,
        create_transaction,
    ):
        created = create_transaction(
            system_categories["Food & Dining"],
            45.50,
            "2024-06-12T18:30:00Z",
            description="Dinner",
        )

        response = test_client.put(
            f"{api_v1_prefix}/transactions/{created['id']}",
            params=user_params,
            json={"description": ""},
        )

        assert response.status_code == 200
        assert response.json()["description"] is None
        assert response.json()["amount"] == 45.5

    def test_update_missing_returns_404(
        self, test_client: TestClient, api_v1_prefix: str, user_params: dict,
    ):
        response = test_client.put(
            f"{api_v1_prefix}/transactions/{uuid4()}",
            params=user_params,
            json={"amount": 1},
        )

        assert response.status_code == 404

    def test_update_rejects_zero_amount(
        self,
        test_client: TestClient,
        api_v1_prefix: str,
        user_params: dict,
        system_categories,
        create_transaction,
    ):
        created = create_transaction(
            system_categories["Food & Dining"], 12, "2024-06-12T18:30:00Z",
        )

        response = test_client.put(
            f"{api_v1_prefix}/transactions/{created['id']}",
            params=user_params,
            json={"amount": 0},
        )

        assert response.status_code == 400
        assert response.json()["code"] == "INVALID_AMOUNT"

        unchanged = test_client.get(
            f"{api_v1_prefix}/transactions/{created['id']}", params=user_params,
        )
        assert unchanged.json()["amount"] == 12.0


class TestDeleteTransaction:
    def test_delete(
        self,
        test_client: TestClient,
        api_v1_prefix: str,
        user_params: dict,
        system_categories,
        create_transaction,
    ):
        created = create_transaction(
            system_categories["Food & Dining"], 12, "2024-06-12T18:30:00Z",
        )
        url = f"{api_v1_prefix}/transactions/{created['id']}"

        response = test_client.delete(url, params=user_params)

        assert response.status_code == 200
        assert response.json() == {"message": "Transaction deleted successfully"}
        assert test_client.get(url, params=user_params).status_code == 404

    def test_delete_missing_returns_404(
        self, test_client: TestClient, api_v1_prefix: str, user_params: dict,
    ):
        response = test_client.delete(
            f"{api_v1_prefix}/transactions/{uuid4()}", params=user_params,
        )

        assert response.status_code == 404
        assert response.json()["code"] == "TRANSACTION_NOT_FOUND"
