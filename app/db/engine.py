# app/db/engine.py

from functools import lru_cache

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.pool import StaticPool

from app.config import settings


def is_sqlite_memory(url: str) -> bool:
    parsed = make_url(url)
    return parsed.get_backend_name() == "sqlite" and parsed.database in (None, "", ":memory:")


def build_engine(url: str, echo: bool = False) -> Engine:
    if not url.startswith("sqlite"):
        return create_engine(url, echo=echo)

    # seeding workers share the pool across threads
    connect_args = {"check_same_thread": False}
    if is_sqlite_memory(url):
        # one connection, otherwise every thread opens its own empty database
        return create_engine(url, echo=echo, connect_args=connect_args, poolclass=StaticPool)
    return create_engine(url, echo=echo, connect_args=connect_args)


@lru_cache(maxsize=1)
def get_engine() -> Engine:
    return build_engine(settings.database_url, echo=settings.database_echo)
