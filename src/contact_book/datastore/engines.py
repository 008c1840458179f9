"""Async engine factory for the configured backend.

``DatabaseConfig.engine`` decides how the engine is built. A networked
PostgreSQL server gets a sized, pre-pinged connection pool; SQLite is a
local file (or memory) and keeps SQLAlchemy's default pool for its driver.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from sqlalchemy.engine import make_url
from sqlalchemy.exc import ArgumentError
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

from contact_book.config.settings import DatabaseEngine
from contact_book.errors import ConfigError

if TYPE_CHECKING:
    from contact_book.config.settings import DatabaseConfig


def _pool_options(config: DatabaseConfig) -> dict[str, Any]:
    if config.engine is DatabaseEngine.SQLITE:
        return {}
    return {
        "pool_size": config.max_idle_connections,
        "max_overflow": max(config.max_open_connections - config.max_idle_connections, 0),
        "pool_pre_ping": True,
    }


def create_engine(config: DatabaseConfig) -> AsyncEngine:
    """Build the async engine described by *config*.

    Raises:
        ConfigError: The DSN cannot be parsed, or it names a different
            backend than ``config.engine``.
    """
    try:
        url = make_url(config.dsn)
    except ArgumentError as exc:
        msg = f"invalid database dsn: {exc}"
        raise ConfigError(msg) from exc

    backend = url.get_backend_name()
    if backend != config.engine:
        msg = (
            f"database engine is {config.engine.value!r} "
            f"but the dsn {url.render_as_string()} is for {backend!r}"
        )
        raise ConfigError(msg)

    return create_async_engine(url, echo=config.debug_sql, **_pool_options(config))
