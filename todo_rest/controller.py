import re
from typing import List

from fastapi import Response

from . import schemas
from .errors import BadRequestError
from .storage import TodoStore

_ID_RE = re.compile(r"[0-9]+")

# largest value a BIGINT primary key can hold
MAX_ID = 2**63 - 1


def parse_id(raw: str) -> int:
    """Path ids are non-negative decimal integers."""
    if not _ID_RE.fullmatch(raw or ""):
        raise BadRequestError(f"invalid todo id {raw!r}")
    todo_id = int(raw)
    if todo_id > MAX_ID:
        raise BadRequestError(f"todo id {raw} out of range")
    return todo_id


class TodoController:
    def __init__(self, store: TodoStore):
        self.store = store

    def get_all(self) -> List[schemas.TodoRead]:
        return self.store.get_all()

    def get_by_id(self, todo_id: str) -> schemas.TodoRead:
        return self.store.get(parse_id(todo_id))

    def create(self, todo: schemas.TodoCreate) -> int:
        return self.store.create(todo.name)

    def update(self, todo_id: str, todo: schemas.TodoCreate) -> schemas.TodoRead:
        # the path id wins, the body only contributes the name
        return self.store.update(parse_id(todo_id), todo.name)

    def delete_by_id(self, todo_id: str) -> Response:
        self.store.delete(parse_id(todo_id))
        return Response(status_code=200)

    def delete_all(self) -> Response:
        self.store.delete_all()
        return Response(status_code=200)
