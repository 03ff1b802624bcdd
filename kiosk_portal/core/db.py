"""Database engine and session helpers."""

from __future__ import annotations

from collections.abc import Generator

from sqlmodel import Session, create_engine

from kiosk_portal.core.config import settings

_connect_args = (
    {"check_same_thread": False, "timeout": settings.db_timeout}
    if settings.db_url.startswith("sqlite")
    else {}
)
engine = create_engine(settings.db_url, connect_args=_connect_args, pool_pre_ping=True)


def get_session() -> Generator[Session, None, None]:
    """Yield a database session scoped to one request."""
    with Session(engine) as session:
        yield session
