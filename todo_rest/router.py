from typing import List

from fastapi import APIRouter, Request

from . import schemas
from .controller import TodoController

REST_PREFIX = "/rest/"

ERROR_RESPONSES = {
    400: {"model": schemas.ErrorResponse},
    404: {"model": schemas.ErrorResponse},
    409: {"model": schemas.ErrorResponse},
    503: {"model": schemas.ErrorResponse},
}


async def common_headers(request: Request, call_next):
    response = await call_next(request)
    if request.url.path.startswith(REST_PREFIX):
        response.headers["Content-Type"] = "application/json"
    return response


def add_todo_routes(router: APIRouter, controller: TodoController) -> APIRouter:
    router.add_api_route(
        "/rest/todos/",
        controller.get_all,
        methods=["GET"],
        response_model=List[schemas.TodoRead],
        summary="Get all todos.",
        description="fetch every todo available.",
    )
    router.add_api_route(
        "/rest/todos/{todo_id}",
        controller.get_by_id,
        methods=["GET"],
        response_model=schemas.TodoRead,
        summary="Get one todo.",
        description="gets one todo.",
    )
    router.add_api_route(
        "/rest/todos/",
        controller.create,
        methods=["POST"],
        response_model=int,
        summary="Create one todo.",
        description="creates one todo and returns its id.",
    )
    router.add_api_route(
        "/rest/todos/{todo_id}",
        controller.delete_by_id,
        methods=["DELETE"],
        summary="Delete one todo.",
        description="delete one todo.",
    )
    router.add_api_route(
        "/rest/todos/{todo_id}",
        controller.update,
        methods=["PUT"],
        response_model=schemas.TodoRead,
        summary="Update one todo.",
        description="updates the name of one todo.",
    )
    router.add_api_route(
        "/rest/todos/",
        controller.delete_all,
        methods=["DELETE"],
        summary="Delete all todos.",
        description="delete all todos.",
    )
    return router


def build_router(controller: TodoController) -> APIRouter:
    return add_todo_routes(APIRouter(tags=["todos"], responses=ERROR_RESPONSES), controller)
