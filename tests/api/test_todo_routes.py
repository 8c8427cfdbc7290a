"""Todo Routes — end-to-end CRUD over the ASGI app.

Invariants:
    - Status codes: list/get/update 200, create 201, delete 204
    - Missing todos → 404 text/plain "Todo with id {id} not found"
    - Missing title → 400 VALIDATION_ERROR envelope
    - Routes and the store fixture share one TodoStore
"""

from uuid import uuid4

import pytest

from todo_service.core.domain_types import Todo, TodoId
from todo_service.core.todo_store import TodoStore
from todo_service.main import create_app


async def test_list_empty_store_returns_empty_array(client):
    res = await client.get("/todos")
    assert res.status_code == 200
    assert res.json() == []


async def test_list_returns_stored_todos(client, store):
    store.create("title")
    res = await client.get("/todos")
    assert res.status_code == 200
    todos = res.json()
    assert len(todos) == 1
    assert set(todos[0]) == {"id", "title", "completed"}


async def test_create_returns_201_with_new_todo(client, store):
    res = await client.post("/todos", json={"title": "x"})
    assert res.status_code == 201
    body = res.json()
    assert body["id"]
    assert body["title"] == "x"
    assert body["completed"] is False
    assert [t.id for t in store.list_all()] == [body["id"]]


async def test_create_then_list_has_one_todo(client):
    created = (await client.post("/todos", json={"title": "x"})).json()
    res = await client.get("/todos")
    assert res.json() == [created]


async def test_create_accepts_empty_title(client):
    res = await client.post("/todos", json={"title": ""})
    assert res.status_code == 201
    assert res.json()["title"] == ""


async def test_create_ignores_client_supplied_fields(client):
    res = await client.post(
        "/todos", json={"title": "x", "id": "mine", "completed": True},
    )
    body = res.json()
    assert body["id"] != "mine"
    assert body["completed"] is False


async def test_create_without_title_returns_400(client, store):
    res = await client.post("/todos", json={})
    assert res.status_code == 400
    error = res.json()["error"]
    assert error["code"] == "VALIDATION_ERROR"
    assert error["details"][0]["field"] == "body.title"
    assert len(store) == 0


async def test_get_returns_todo(client):
    created = (await client.post("/todos", json={"title": "x"})).json()
    res = await client.get(f"/todos/{created['id']}")
    assert res.status_code == 200
    assert res.json() == created


async def test_update_changes_title_only(client):
    created = (await client.post("/todos", json={"title": "x"})).json()
    res = await client.put(f"/todos/{created['id']}", json={"title": "y"})
    assert res.status_code == 200
    assert res.json() == {"id": created["id"], "title": "y", "completed": False}


@pytest.mark.parametrize(
    "store", [TodoStore([Todo(id=TodoId("done"), title="old", completed=True)])],
)
async def test_update_preserves_completed(client):
    res = await client.put("/todos/done", json={"title": "new"})
    assert res.json() == {"id": "done", "title": "new", "completed": True}


async def test_create_with_malformed_json_returns_400(client):
    res = await client.post(
        "/todos", content=b"{not json",
        headers={"content-type": "application/json"},
    )
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "VALIDATION_ERROR"


async def test_update_without_title_returns_400(client):
    created = (await client.post("/todos", json={"title": "x"})).json()
    res = await client.put(f"/todos/{created['id']}", json={"name": "y"})
    assert res.status_code == 400
    assert (await client.get(f"/todos/{created['id']}")).json()["title"] == "x"


async def test_delete_returns_204_and_empty_body(client, store):
    created = (await client.post("/todos", json={"title": "x"})).json()
    res = await client.delete(f"/todos/{created['id']}")
    assert res.status_code == 204
    assert res.content == b""
    assert len(store) == 0


async def test_get_after_delete_returns_404(client):
    created = (await client.post("/todos", json={"title": "x"})).json()
    await client.delete(f"/todos/{created['id']}")
    res = await client.get(f"/todos/{created['id']}")
    assert res.status_code == 404
    assert res.text == f"Todo with id {created['id']} not found"


async def test_second_delete_returns_404(client):
    created = (await client.post("/todos", json={"title": "x"})).json()
    assert (await client.delete(f"/todos/{created['id']}")).status_code == 204
    assert (await client.delete(f"/todos/{created['id']}")).status_code == 404


@pytest.mark.parametrize("method,kwargs", [
    ("GET", {}),
    ("PUT", {"json": {"title": "y"}}),
    ("DELETE", {}),
])
async def test_unknown_id_on_empty_store_returns_plain_text_404(
    client, store, method, kwargs,
):
    missing = str(uuid4())
    res = await client.request(method, f"/todos/{missing}", **kwargs)
    assert res.status_code == 404
    assert res.headers["content-type"].startswith("text/plain")
    assert res.text == f"Todo with id {missing} not found"
    assert store.list_all() == []


async def test_update_unknown_id_leaves_collection_unchanged(client, store):
    store.create("a")
    before = store.list_all()
    res = await client.put(f"/todos/{uuid4()}", json={"title": "y"})
    assert res.status_code == 404
    assert store.list_all() == before


async def test_each_app_has_its_own_store(client):
    other = create_app()
    await client.post("/todos", json={"title": "x"})
    assert len(other.state.todo_store) == 0
