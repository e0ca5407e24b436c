"""
Tests for the widgets API endpoints.
"""

from uuid import uuid4

from fastapi.testclient import TestClient


def _create(client: TestClient, name: str) -> dict:
    response = client.post("/widgets", json={"name": name})
    assert response.status_code == 201, response.text
    return response.json()["data"]


class TestWidgetCrud:
    """Create, read, rename and delete."""

    def test_create_trims_name(self, client: TestClient) -> None:
        widget = _create(client, "  Demo  ")
        assert widget["name"] == "Demo"
        assert {"id", "createdAt", "updatedAt"} <= widget.keys()

    def test_get_widget(self, client: TestClient) -> None:
        widget = _create(client, "Demo")
        response = client.get(f"/widgets/{widget['id']}")
        assert response.status_code == 200
        assert response.json() == {"success": True, "data": widget}

    def test_rename_widget(self, client: TestClient) -> None:
        widget = _create(client, "Demo")
        response = client.patch(f"/widgets/{widget['id']}", json={"name": " Gadget "})
        assert response.status_code == 200
        assert response.json()["data"]["name"] == "Gadget"

    def test_delete_widget(self, client: TestClient) -> None:
        widget = _create(client, "Demo")
        response = client.delete(f"/widgets/{widget['id']}")
        assert response.json() == {"success": True, "data": {"deleted": True}}
        assert client.get(f"/widgets/{widget['id']}").status_code == 404


class TestWidgetErrors:
    def test_unknown_widget_is_not_found(self, client: TestClient) -> None:
        response = client.get(f"/widgets/{uuid4()}")
        assert response.status_code == 404
        assert response.json()["error"]["code"] == "NOT_FOUND"

    def test_rename_unknown_widget(self, client: TestClient) -> None:
        response = client.patch(f"/widgets/{uuid4()}", json={"name": "x"})
        assert response.status_code == 404

    def test_delete_unknown_widget(self, client: TestClient) -> None:
        assert client.delete(f"/widgets/{uuid4()}").status_code == 404

    def test_whitespace_only_name_rejected(self, client: TestClient) -> None:
        response = client.post("/widgets", json={"name": "   "})
        assert response.status_code == 400
        assert response.json()["error"] == {
            "code": "VALIDATION_ERROR",
            "message": "Widget name cannot be empty",
        }

    def test_empty_name_rejected(self, client: TestClient) -> None:
        response = client.post("/widgets", json={"name": ""})
        assert response.status_code == 400
        assert response.json()["error"]["message"] == "Validation failed"

    def test_overlong_name_rejected(self, client: TestClient) -> None:
        response = client.post("/widgets", json={"name": "x" * 201})
        assert response.status_code == 400


class TestListWidgets:
    def test_name_filter_is_case_insensitive(self, client: TestClient) -> None:
        _create(client, "Blue Gadget")
        _create(client, "Red Widget")

        body = client.get("/widgets", params={"name": "gadget"}).json()

        assert [w["name"] for w in body["data"]] == ["Blue Gadget"]
        assert body["meta"] == {"page": 1, "limit": 20, "total": 1, "count": 1}

    def test_second_page(self, client: TestClient) -> None:
        for name in ("a", "b", "c"):
            _create(client, name)

        body = client.get("/widgets", params={"page": 2, "limit": 2}).json()

        assert [w["name"] for w in body["data"]] == ["a"]
        assert body["meta"]["count"] == 1
        assert body["meta"]["total"] == 3
