"""API tests for todo endpoints."""

from fastapi.testclient import TestClient


class TestTodoAPI:
    """Test suite for Todo API endpoints."""

    def test_root_and_health(self, client: TestClient) -> None:
        response = client.get("/")
        assert response.status_code == 200
        assert response.json()["message"] == "Todo Store API"
        assert client.get("/health").json() == {"status": "ok"}

    def test_request_id_echoed(self, client: TestClient) -> None:
        response = client.get("/health", headers={"X-Request-ID": "req-1"})
        assert response.headers["X-Request-ID"] == "req-1"
        assert client.get("/health").headers["X-Request-ID"]

    def test_get_todos_empty(self, client: TestClient) -> None:
        response = client.get("/api/todos")
        assert response.status_code == 200
        assert response.json() == []

    def test_create_todo_success(self, client: TestClient) -> None:
        response = client.post("/api/todos", json={"title": "Test todo"})
        assert response.status_code == 201

        todo = response.json()
        assert todo["title"] == "Test todo"
        assert todo["completed"] is False
        assert isinstance(todo["id"], int)

    def test_create_todo_invalid(self, client: TestClient) -> None:
        assert client.post("/api/todos", json={"title": ""}).status_code == 400
        assert client.post("/api/todos", json={"completed": True}).status_code == 422

    def test_get_todo_by_id(self, client: TestClient) -> None:
        todo_id = client.post("/api/todos", json={"title": "Test"}).json()["id"]

        response = client.get(f"/api/todos/{todo_id}")
        assert response.status_code == 200
        assert response.json()["id"] == todo_id

        assert client.get("/api/todos/99999").status_code == 404

    def test_filter_by_completed(self, client: TestClient) -> None:
        client.post("/api/todos", json={"title": "Open"})
        client.post("/api/todos", json={"title": "Done", "completed": True})

        response = client.get("/api/todos", params={"completed": "true"})
        assert [todo["title"] for todo in response.json()] == ["Done"]

    def test_update_todo(self, client: TestClient) -> None:
        todo_id = client.post("/api/todos", json={"title": "Original"}).json()["id"]

        response = client.put(f"/api/todos/{todo_id}", json={"title": "Updated", "completed": True})
        assert response.status_code == 200
        assert response.json()["title"] == "Updated"
        assert response.json()["completed"] is True

        assert client.put(f"/api/todos/{todo_id}", json={"title": " "}).status_code == 400
        assert client.put("/api/todos/99999", json={"title": "x"}).status_code == 404

    def test_update_null_completed_rejected(self, client: TestClient) -> None:
        todo_id = client.post("/api/todos", json={"title": "Keep"}).json()["id"]

        response = client.put(f"/api/todos/{todo_id}", json={"completed": None})
        assert response.status_code == 400

        listing = client.get("/api/todos")
        assert listing.status_code == 200
        assert listing.json()[0]["completed"] is False

    def test_delete_todo(self, client: TestClient) -> None:
        todo_id = client.post("/api/todos", json={"title": "To delete"}).json()["id"]

        assert client.delete(f"/api/todos/{todo_id}").status_code == 204
        assert client.get(f"/api/todos/{todo_id}").status_code == 404
        assert client.delete(f"/api/todos/{todo_id}").status_code == 404

    def test_bulk_operations(self, client: TestClient) -> None:
        client.post("/api/todos", json={"title": "A"})
        client.post("/api/todos", json={"title": "B"})

        toggled = client.post("/api/todos/toggle-all", json={"completed": True}).json()
        assert all(todo["completed"] for todo in toggled)
        assert client.get("/api/todos/count").json() == {"active": 0, "completed": 2, "total": 2}

        assert client.post("/api/todos/clear-completed").json() == {"removed": 2}

        client.post("/api/todos", json={"title": "C"})
        assert client.delete("/api/todos").status_code == 204
        assert client.get("/api/todos").json() == []
