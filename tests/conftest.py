from __future__ import annotations

from typing import Generator

import pytest
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

import kiosk_portal.models  # noqa: F401  registers tables
from kiosk_portal.core.identity import SpecialAccounts

HEARTLAND_ADMIN = 100
GLOBAL_RESTAURANT_ADMIN = 200
MOBILEBYTES_DEMO = 300
PLATFORM_DEALER = -8888


@pytest.fixture()
def special_accounts() -> SpecialAccounts:
    return SpecialAccounts(
        heartland_admin=HEARTLAND_ADMIN,
        global_restaurant_admin=GLOBAL_RESTAURANT_ADMIN,
        mobilebytes_demo=MOBILEBYTES_DEMO,
        platform_dealer=PLATFORM_DEALER,
    )


@pytest.fixture()
def db_engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    yield engine
    SQLModel.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture()
def session(db_engine) -> Generator[Session, None, None]:
    with Session(db_engine) as session:
        yield session
