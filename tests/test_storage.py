from concurrent.futures import ThreadPoolExecutor
from unittest import mock

import pytest

from todo_rest import models
from todo_rest.database import make_engine
from todo_rest.errors import NotFoundError, NotSupportedError, QueryError, StoreConnectionError
from todo_rest.storage import TodoStore


def test_create_then_get(store):
    todo_id = store.create("buy milk")
    todo = store.get(todo_id)
    assert todo.id == todo_id
    assert todo.name == "buy milk"


def test_get_all_empty_is_list(store):
    assert store.get_all() == []


def test_get_all_ordered_by_id(store):
    ids = [store.create(name) for name in ("a", "b", "c")]
    assert [t.id for t in store.get_all()] == ids
    assert [t.name for t in store.get_all()] == ["a", "b", "c"]


def test_get_missing(store):
    with pytest.raises(NotFoundError):
        store.get(42)


def test_update_changes_name_only(store):
    todo_id = store.create("buy milk")
    updated = store.update(todo_id, "buy bread")
    assert updated.id == todo_id
    assert updated.name == "buy bread"
    assert store.get(todo_id).name == "buy bread"


def test_update_missing(store):
    with pytest.raises(NotFoundError):
        store.update(42, "nothing")


def test_delete(store):
    todo_id = store.create("buy milk")
    store.delete(todo_id)
    with pytest.raises(NotFoundError):
        store.get(todo_id)


def test_delete_missing(store):
    with pytest.raises(NotFoundError):
        store.delete(42)


def test_delete_all(store):
    for name in ("a", "b"):
        store.create(name)
    store.delete_all()
    assert store.get_all() == []


def test_concurrent_creates_get_unique_ids(store):
    with ThreadPoolExecutor(max_workers=8) as pool:
        ids = list(pool.map(lambda i: store.create(f"todo {i}"), range(40)))
    assert len(set(ids)) == 40
    assert len(store.get_all()) == 40


def test_missing_table_is_query_error(engine, store):
    models.Base.metadata.drop_all(bind=engine)
    with pytest.raises(QueryError) as excinfo:
        store.get(1)
    assert excinfo.value.__cause__ is not None


def test_unreachable_store_is_connection_error(tmp_path):
    engine = make_engine(f"sqlite:///{tmp_path / 'missing' / 'dir' / 'todos.db'}")
    store = TodoStore(engine)
    with pytest.raises(StoreConnectionError):
        store.get_all()


def test_create_without_reported_id_is_not_supported():
    engine = mock.MagicMock()
    conn = engine.connect.return_value
    conn.execute.return_value.inserted_primary_key = (None,)
    with pytest.raises(NotSupportedError):
        TodoStore(engine).create("buy milk")


def test_id_beyond_column_range_is_query_error(store):
    with pytest.raises(QueryError):
        store.get(2**70)
