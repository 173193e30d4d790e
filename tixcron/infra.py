"""Database connection with schema migration."""

from __future__ import annotations

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from tixcron.constants import RpcCode
from tixcron.errors import ErrorStd
from tixcron.logutil import log_error
from tixcron.models import TodoList


def database_connect(dsn: str) -> Engine:
    """Open the database at ``dsn`` and make sure the to-do table exists."""
    try:
        engine = create_engine(dsn)
        with engine.connect():
            pass
    except (SQLAlchemyError, ImportError, ValueError) as err:
        log_error(err)
        raise ErrorStd(
            500, RpcCode.INTERNAL.value, "database can't connected, please check"
        ) from err

    try:
        TodoList.__table__.create(engine, checkfirst=True)
    except SQLAlchemyError as err:
        log_error(err)
        raise ErrorStd(500, RpcCode.INTERNAL.value, "migration error") from err

    return engine