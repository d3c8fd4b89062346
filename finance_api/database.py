"""
Database engine, session factory and schema bootstrap.
"""

import logging
from pathlib import Path
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import DeclarativeBase, sessionmaker

from finance_api.config import settings

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    pass


def build_engine(database_url: str, echo: bool = False) -> Engine:
    """Create an engine for the given URL, preparing SQLite files when needed."""
    url = make_url(database_url)
    connect_args = {}
    if url.get_backend_name() == "sqlite":
        connect_args["check_same_thread"] = False
        if url.database and url.database != ":memory:":
            Path(url.database).parent.mkdir(parents=True, exist_ok=True)
    return create_engine(database_url, echo=echo, connect_args=connect_args)


engine = build_engine(settings.database_url, echo=settings.sql_echo)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def init_db(bind: Engine, strict: bool = False) -> bool:
    """
    Create the transactions table if it does not exist.

    Returns False when creation failed and ``strict`` is off; with ``strict``
    the error is raised so startup aborts.
    """
    # Register models on the metadata
    from finance_api import models  # noqa: F401

    try:
        Base.metadata.create_all(bind=bind)
    except SQLAlchemyError as e:
        if strict:
            raise
        logger.error(f"Schema bootstrap failed, continuing without it: {e}")
        return False

    logger.info("Transactions table verified/created")
    return True
