import logging
from typing import Any, Callable, Dict, List

from sqlalchemy import exc, insert, text
from sqlalchemy.engine import Engine

from . import models
from .errors import NotFoundError, NotSupportedError, QueryError, StoreConnectionError
from .schemas import TodoRead

logger = logging.getLogger(__name__)


class TodoStore:
    """Parameterized SQL against the ``todos`` table.

    Every statement runs in its own connection and transaction, committed on
    success. Driver failures are translated into the error taxonomy here so
    callers never see SQLAlchemy exceptions.
    """

    def __init__(self, engine: Engine):
        self.engine = engine

    def _run(self, op: str, sql: Any, params: Dict[str, Any], consume: Callable[[Any], Any]) -> Any:
        logger.debug("TodoStore.%s() %s %s", op, sql, params)
        try:
            conn = self.engine.connect()
        except exc.SQLAlchemyError as e:
            raise StoreConnectionError(f"TodoStore.{op}() connection error: {e}") from e
        with conn:
            try:
                with conn.begin():
                    if isinstance(sql, str):
                        sql = text(sql)
                    result = conn.execute(sql, params)
                    return consume(result)
            except exc.DBAPIError as e:
                if e.connection_invalidated:
                    raise StoreConnectionError(f"TodoStore.{op}() connection lost: {e}") from e
                raise QueryError(f"TodoStore.{op}() error: {e.orig}") from e
            except exc.SQLAlchemyError as e:
                raise QueryError(f"TodoStore.{op}() error: {e}") from e
            except OverflowError as e:
                raise QueryError(f"TodoStore.{op}() error: {e}") from e

    def create(self, name: str) -> int:
        last_id = self._run(
            "create",
            insert(models.Todo.__table__).values(name=name),
            {},
            lambda r: r.inserted_primary_key[0] if r.inserted_primary_key else None,
        )
        if last_id is None:
            raise NotSupportedError("TodoStore.create() error: driver did not report the inserted id")
        return int(last_id)

    def get(self, todo_id: int) -> TodoRead:
        row = self._run(
            "get",
            "SELECT id, name FROM todos WHERE id = :id",
            {"id": todo_id},
            lambda r: r.mappings().first(),
        )
        if row is None:
            raise NotFoundError(f"todo {todo_id} not found")
        return TodoRead(id=row["id"], name=row["name"])

    def get_all(self) -> List[TodoRead]:
        rows = self._run(
            "get_all",
            "SELECT id, name FROM todos ORDER BY id",
            {},
            lambda r: r.mappings().all(),
        )
        return [TodoRead(id=row["id"], name=row["name"]) for row in rows]

    def update(self, todo_id: int, name: str) -> TodoRead:
        affected = self._run(
            "update",
            "UPDATE todos SET name = :name WHERE id = :id",
            {"id": todo_id, "name": name},
            lambda r: r.rowcount,
        )
        if affected == 0:
            raise NotFoundError(f"todo {todo_id} not found")
        return TodoRead(id=todo_id, name=name)

    def delete(self, todo_id: int) -> None:
        affected = self._run(
            "delete",
            "DELETE FROM todos WHERE id = :id",
            {"id": todo_id},
            lambda r: r.rowcount,
        )
        if affected == 0:
            raise NotFoundError(f"todo {todo_id} not found")

    def delete_all(self) -> None:
        # sqlite has no TRUNCATE
        if self.engine.dialect.name == "sqlite":
            sql = "DELETE FROM todos"
        else:
            sql = "TRUNCATE TABLE todos"
        self._run("delete_all", sql, {}, lambda r: None)
