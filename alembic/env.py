"""Alembic environment for the Kiosk Portal schema."""

from __future__ import annotations

import importlib
import pkgutil
import sys
from logging.config import fileConfig
from pathlib import Path

from alembic import context
from sqlalchemy import pool
from sqlmodel import SQLModel, create_engine

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from kiosk_portal.core.config import settings
import kiosk_portal.models


def _register_tables() -> None:
    """Import every kiosk_portal.models module so its tables join the metadata."""

    package = kiosk_portal.models
    for module_info in pkgutil.walk_packages(package.__path__, package.__name__ + "."):
        importlib.import_module(module_info.name)


_register_tables()

config = context.config
if config.config_file_name is not None:
    fileConfig(config.config_file_name)
config.set_main_option("sqlalchemy.url", settings.db_url)

IS_SQLITE = settings.db_url.startswith("sqlite")
MIGRATION_OPTIONS = {
    "target_metadata": SQLModel.metadata,
    "compare_type": True,
    # SQLite cannot ALTER most columns in place.
    "render_as_batch": IS_SQLITE,
}


def run_offline() -> None:
    """Emit the migration SQL without a database connection."""

    context.configure(
        url=settings.db_url,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        **MIGRATION_OPTIONS,
    )
    with context.begin_transaction():
        context.run_migrations()


def run_online() -> None:
    """Apply migrations against the configured database."""

    connect_args = (
        {"check_same_thread": False, "timeout": settings.db_timeout} if IS_SQLITE else {}
    )
    connectable = create_engine(
        settings.db_url, connect_args=connect_args, poolclass=pool.NullPool
    )
    with connectable.connect() as connection:
        context.configure(connection=connection, **MIGRATION_OPTIONS)
        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_offline()
else:
    run_online()
