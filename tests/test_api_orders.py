"""
Tests for the orders API endpoints.

Routes run end to end on in-memory repositories.
Validates request validation, response envelopes, and error mapping.
"""

from uuid import uuid4

import pytest
from fastapi.testclient import TestClient

USER_ID = "0b7e4a4c-2f3a-4d38-bb9e-3f5d9c6a1e22"
PRODUCT_ID = "a3c0f7d2-5b1e-4e0a-9f6c-2d8b7e1a4c55"


def _create(client: TestClient, quantity: int = 2, price: float = 10.0, user_id: str = USER_ID) -> dict:
    response = client.post(
        "/orders",
        json={
            "userId": user_id,
            "items": [{"productId": PRODUCT_ID, "quantity": quantity, "price": price}],
        },
    )
    assert response.status_code == 201, response.text
    return response.json()["data"]


def _set_status(client: TestClient, order_id: str, status: str):
    return client.patch(f"/orders/{order_id}/status", json={"status": status})


class TestCreateOrder:
    """Tests for POST /orders."""

    def test_created_order_shape(self, client: TestClient) -> None:
        response = client.post(
            "/orders",
            json={
                "userId": USER_ID,
                "items": [{"productId": PRODUCT_ID, "quantity": 3, "price": 33.33}],
            },
        )

        assert response.status_code == 201
        body = response.json()
        assert body["success"] is True
        assert "error" not in body
        order = body["data"]
        assert order["status"] == "pending"
        assert order["total"] == 99.99
        assert order["userId"] == USER_ID
        assert order["items"] == [{"productId": PRODUCT_ID, "quantity": 3, "price": 33.33}]
        assert {"id", "createdAt", "updatedAt"} <= order.keys()

    def test_total_sums_every_line(self, client: TestClient) -> None:
        response = client.post(
            "/orders",
            json={
                "userId": USER_ID,
                "items": [
                    {"productId": PRODUCT_ID, "quantity": 2, "price": 25},
                    {"productId": PRODUCT_ID, "quantity": 1, "price": 49.99},
                ],
            },
        )

        assert response.status_code == 201
        order = response.json()["data"]
        assert order["total"] == 99.99
        assert len(order["items"]) == 2

    def test_total_below_one_rejected(self, client: TestClient) -> None:
        response = client.post(
            "/orders",
            json={"userId": USER_ID, "items": [{"productId": PRODUCT_ID, "quantity": 1, "price": 0.5}]},
        )
        assert response.status_code == 400
        error = response.json()["error"]
        assert error["code"] == "VALIDATION_ERROR"
        assert error["message"] == "Order total must be at least $1"

    def test_more_than_100_units_rejected(self, client: TestClient) -> None:
        response = client.post(
            "/orders",
            json={"userId": USER_ID, "items": [{"productId": PRODUCT_ID, "quantity": 101, "price": 1}]},
        )
        assert response.status_code == 400
        assert response.json()["error"]["message"] == "Maximum 100 items per order"

    @pytest.mark.parametrize(
        "payload",
        [
            {"userId": USER_ID, "items": []},
            {"userId": "not-a-uuid", "items": [{"productId": PRODUCT_ID, "quantity": 1, "price": 5}]},
            {"userId": USER_ID, "items": [{"productId": PRODUCT_ID, "quantity": 0, "price": 5}]},
            {"userId": USER_ID, "items": [{"productId": PRODUCT_ID, "quantity": 1, "price": -5}]},
            {"items": [{"productId": PRODUCT_ID, "quantity": 1, "price": 5}]},
        ],
    )
    def test_invalid_body_rejected(self, client: TestClient, payload: dict) -> None:
        response = client.post("/orders", json=payload)
        assert response.status_code == 400
        body = response.json()
        assert body["success"] is False
        assert body["error"]["code"] == "VALIDATION_ERROR"
        assert body["error"]["message"] == "Validation failed"
        assert isinstance(body["error"]["details"], list)

    def test_malformed_json_rejected(self, client: TestClient) -> None:
        response = client.post(
            "/orders", content=b"{not json", headers={"Content-Type": "application/json"}
        )
        assert response.status_code == 400
        assert response.json()["error"]["code"] == "VALIDATION_ERROR"


class TestGetOrder:
    """Tests for GET /orders/{id}."""

    def test_get_existing_order(self, client: TestClient) -> None:
        created = _create(client)
        response = client.get(f"/orders/{created['id']}")
        assert response.status_code == 200
        assert response.json()["data"] == created

    def test_unknown_order_is_not_found(self, client: TestClient) -> None:
        order_id = str(uuid4())
        response = client.get(f"/orders/{order_id}")
        assert response.status_code == 404
        assert response.json() == {
            "success": False,
            "error": {"code": "NOT_FOUND", "message": f"Order with id '{order_id}' not found"},
        }

    def test_invalid_uuid_rejected(self, client: TestClient) -> None:
        response = client.get("/orders/not-a-uuid")
        assert response.status_code == 400
        error = response.json()["error"]
        assert error["code"] == "VALIDATION_ERROR"
        assert error["message"] == "Invalid path parameters"


class TestListOrders:
    """Tests for GET /orders."""

    def test_pagination_meta(self, client: TestClient) -> None:
        for _ in range(3):
            _create(client)

        body = client.get("/orders", params={"page": 1, "limit": 2}).json()

        assert body["success"] is True
        assert len(body["data"]) == 2
        assert body["meta"] == {"page": 1, "limit": 2, "total": 3, "count": 2}

    def test_newest_first(self, client: TestClient) -> None:
        first = _create(client)
        second = _create(client)
        ids = [order["id"] for order in client.get("/orders").json()["data"]]
        assert ids == [second["id"], first["id"]]

    def test_filters(self, client: TestClient) -> None:
        other_user = str(uuid4())
        mine = _create(client)
        _create(client, user_id=other_user)
        _set_status(client, mine["id"], "confirmed")

        by_user = client.get("/orders", params={"userId": other_user}).json()
        assert [o["userId"] for o in by_user["data"]] == [other_user]

        by_status = client.get("/orders", params={"status": "confirmed"}).json()
        assert [o["id"] for o in by_status["data"]] == [mine["id"]]
        assert by_status["meta"]["total"] == 1

    @pytest.mark.parametrize("params", [{"limit": 101}, {"limit": 0}, {"page": 0}, {"status": "lost"}])
    def test_invalid_query_rejected(self, client: TestClient, params: dict) -> None:
        response = client.get("/orders", params=params)
        assert response.status_code == 400
        assert response.json()["error"]["message"] == "Invalid query parameters"


class TestStatusTransitions:
    """Tests for PATCH /orders/{id}/status and POST /orders/{id}/cancel."""

    def test_full_lifecycle(self, client: TestClient) -> None:
        order_id = _create(client)["id"]
        for status in ("confirmed", "shipped", "delivered"):
            response = _set_status(client, order_id, status)
            assert response.status_code == 200
            assert response.json()["data"]["status"] == status

    def test_delivered_to_pending_rejected(self, client: TestClient) -> None:
        order_id = _create(client)["id"]
        for status in ("confirmed", "shipped", "delivered"):
            _set_status(client, order_id, status)

        response = _set_status(client, order_id, "pending")

        assert response.status_code == 400
        assert response.json()["error"] == {
            "code": "VALIDATION_ERROR",
            "message": "Cannot transition from 'delivered' to 'pending'",
        }

    def test_unknown_status_value_rejected(self, client: TestClient) -> None:
        order_id = _create(client)["id"]
        response = _set_status(client, order_id, "teleported")
        assert response.status_code == 400

    def test_transition_on_missing_order(self, client: TestClient) -> None:
        response = _set_status(client, str(uuid4()), "confirmed")
        assert response.status_code == 404

    def test_cancel_pending_order(self, client: TestClient) -> None:
        order_id = _create(client)["id"]
        response = client.post(f"/orders/{order_id}/cancel")
        assert response.status_code == 200
        assert response.json()["data"]["status"] == "cancelled"

    def test_cancel_shipped_order_rejected(self, client: TestClient) -> None:
        order_id = _create(client)["id"]
        _set_status(client, order_id, "confirmed")
        _set_status(client, order_id, "shipped")

        response = client.post(f"/orders/{order_id}/cancel")

        assert response.status_code == 400
        assert response.json()["error"]["message"] == "Cannot transition from 'shipped' to 'cancelled'"


class TestDeleteOrder:
    """Tests for DELETE /orders/{id}."""

    def test_delete_pending_order(self, client: TestClient) -> None:
        order_id = _create(client)["id"]

        response = client.delete(f"/orders/{order_id}")

        assert response.status_code == 200
        assert response.json() == {"success": True, "data": {"deleted": True}}
        assert client.get(f"/orders/{order_id}").status_code == 404

    def test_delete_confirmed_order_rejected(self, client: TestClient) -> None:
        order_id = _create(client)["id"]
        _set_status(client, order_id, "confirmed")

        response = client.delete(f"/orders/{order_id}")

        assert response.status_code == 400
        assert response.json()["error"]["message"] == "Only pending orders can be deleted"

    def test_delete_missing_order(self, client: TestClient) -> None:
        assert client.delete(f"/orders/{uuid4()}").status_code == 404


class TestUnexpectedFailures:
    """Repository failures surface as INTERNAL_ERROR."""

    def test_repository_crash_maps_to_500(self, client: TestClient, order_repository) -> None:
        async def broken(*args, **kwargs):
            raise RuntimeError("connection refused")

        order_repository.find_by_id = broken

        response = client.get(f"/orders/{uuid4()}")

        assert response.status_code == 500
        assert response.json() == {
            "success": False,
            "error": {"code": "INTERNAL_ERROR", "message": "connection refused"},
        }

    def test_crash_response_keeps_security_headers(self, client: TestClient, order_repository) -> None:
        async def broken(*args, **kwargs):
            raise RuntimeError("connection refused")

        order_repository.find_by_id = broken

        response = client.get(f"/orders/{uuid4()}")

        assert response.status_code == 500
        assert response.headers["X-Frame-Options"] == "DENY"
        assert response.headers["X-Content-Type-Options"] == "nosniff"
