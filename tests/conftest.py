import pytest
from fastapi.testclient import TestClient

from todo_rest import models
from todo_rest.database import make_engine
from todo_rest.main import create_app
from todo_rest.storage import TodoStore


@pytest.fixture
def engine(tmp_path):
    engine = make_engine(f"sqlite:///{tmp_path / 'todos.db'}")
    models.Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def store(engine):
    return TodoStore(engine)


@pytest.fixture
def client(engine):
    with TestClient(create_app(engine)) as c:
        yield c
