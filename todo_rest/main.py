import os
import logging
from typing import Optional

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.engine import Engine

from . import models
from .controller import TodoController
from .database import make_engine
from .errors import INTERNAL_ERROR_MESSAGE, INTERNAL_ERROR_STATUS, BadRequestError, TodoError
from .router import build_router, common_headers
from .storage import TodoStore

load_dotenv(override=False)

logger = logging.getLogger("todo_rest")


def configure_logging(level: Optional[str] = None) -> None:
    level = (level or os.getenv("LOG_LEVEL", "INFO")).upper()
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
        logger.addHandler(handler)
    logger.setLevel(level)


def cors_origins() -> list[str]:
    raw = os.getenv("CORS_ORIGINS", "*")
    return [o.strip() for o in raw.split(",") if o.strip()]


def _error_response(request: Request, status_code: int, message: str, exc: Exception) -> JSONResponse:
    logger.warning(
        "%s %s failed with %d: %r",
        request.method,
        request.url.path,
        status_code,
        exc,
        exc_info=exc,
    )
    return JSONResponse({"error": message}, status_code=status_code)


async def handle_todo_error(request: Request, exc: TodoError) -> JSONResponse:
    return _error_response(request, exc.status_code, exc.public_message, exc)


async def handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    err = BadRequestError(f"invalid request: {exc.errors()}")
    return _error_response(request, err.status_code, err.public_message, exc)


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    return _error_response(request, INTERNAL_ERROR_STATUS, INTERNAL_ERROR_MESSAGE, exc)


def create_app(engine: Optional[Engine] = None) -> FastAPI:
    """Wire engine -> store -> controller -> router into a FastAPI app."""
    configure_logging()
    if engine is None:
        engine = make_engine()
    models.Base.metadata.create_all(bind=engine)

    store = TodoStore(engine)
    controller = TodoController(store)

    app = FastAPI(title="Todo REST service")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins(),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.middleware("http")(common_headers)
    app.add_exception_handler(TodoError, handle_todo_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(Exception, handle_unexpected_error)
    app.include_router(build_router(controller))
    app.state.store = store
    return app


def run() -> None:
    import uvicorn

    host = os.getenv("HOST", "0.0.0.0")
    port = int(os.getenv("PORT", "8080"))
    uvicorn.run(create_app(), host=host, port=port)
