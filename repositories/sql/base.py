from typing import Any

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.pool import StaticPool

IN_MEMORY_URLS = {'sqlite://', 'sqlite:///:memory:'}


class Base(DeclarativeBase):
    pass


def create_db_engine(url: str) -> Engine:
    options: dict[str, Any] = {}

    # An in-memory SQLite database lives only as long as its connection, so every
    # thread shares the same one. Sessions are not isolated from each other there,
    # which limits in-memory mode to tests and single-threaded development.
    if url in IN_MEMORY_URLS:
        options['poolclass'] = StaticPool
        options['connect_args'] = {'check_same_thread': False}

    engine = create_engine(url, **options)
    Base.metadata.create_all(engine)
    return engine
