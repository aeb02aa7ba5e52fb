import os
from typing import Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine

DEFAULT_DB_URL = "sqlite:///./todos.db"


def database_url() -> str:
    _env_url = (os.getenv("DATABASE_URL", "") or "").strip()
    return _env_url or DEFAULT_DB_URL


def make_engine(url: Optional[str] = None) -> Engine:
    url = url or database_url()
    connect_args = {}
    if url.startswith("sqlite"):
        connect_args = {"check_same_thread": False}
    return create_engine(url, connect_args=connect_args)
