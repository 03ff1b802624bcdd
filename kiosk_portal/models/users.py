"""SQLModel declarations for portal users and their account metadata."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import Column, ForeignKey, Integer
from sqlmodel import Field

from .base import BaseModel, UTCDateTime, utcnow


class User(BaseModel, table=True):
    """Represents a portal login; ``group_id`` carries the user's role."""

    id: int | None = Field(default=None, primary_key=True)
    username: str = Field(max_length=200, index=True)
    group_id: int = Field(sa_column_kwargs={"nullable": False})
    created_at: datetime = Field(
        default_factory=utcnow, sa_column=Column(UTCDateTime(), nullable=False)
    )


class UserMeta(BaseModel, table=True):
    """Binds a user to the account it acts for."""

    user_id: int = Field(
        sa_column=Column(
            Integer, ForeignKey("user.id", ondelete="CASCADE"), primary_key=True
        ),
    )
    account_id: int = Field(foreign_key="account.id", index=True)
    account_admin: bool = Field(default=False, sa_column_kwargs={"nullable": False})
