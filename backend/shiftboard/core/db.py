from typing import Any

from sqlalchemy.engine import Engine
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, create_engine

from shiftboard.core.config import settings
from shiftboard.core.observability import get_logger

logger = get_logger(__name__)


def create_db_engine(url: str) -> Engine:
    """Build an engine for the given URL with pool settings for its backend."""
    engine_kwargs: dict[str, Any] = {}
    if url.startswith("sqlite"):
        # Sessions are opened on FastAPI's worker threads
        engine_kwargs["connect_args"] = {"check_same_thread": False}
        if ":memory:" in url or url == "sqlite://":
            engine_kwargs["poolclass"] = StaticPool
    else:
        engine_kwargs.update(
            pool_pre_ping=settings.DATABASE_POOL_PRE_PING,
            pool_recycle=settings.DATABASE_POOL_RECYCLE,
            pool_size=10,
            max_overflow=20,
        )
    return create_engine(url, **engine_kwargs)


engine = create_db_engine(settings.SQLALCHEMY_DATABASE_URI)


def init_db(db_engine: Engine) -> None:
    """Create any missing tables."""
    # Tables must be registered on SQLModel.metadata before create_all
    from shiftboard.infrastructure.database import models  # noqa: F401

    SQLModel.metadata.create_all(db_engine)
    logger.info("Database initialized", url=db_engine.url.render_as_string())
