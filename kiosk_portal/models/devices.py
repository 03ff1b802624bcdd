"""SQLModel declarations for authorized kiosk devices."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import Column
from sqlmodel import Field

from .base import BaseModel, UTCDateTime, utcnow

KIOSK_GROUP_ID = 1


class AuthorizedKioskDevice(BaseModel, table=True):
    """The single authorization record kept for a kiosk device."""

    device_id: str = Field(primary_key=True, index=True, max_length=100)
    location_id: int = Field(foreign_key="location.id", index=True)
    user_id: int = Field(foreign_key="user.id")
    group_id: int = Field(sa_column_kwargs={"nullable": False})
    # Epoch seconds; 0 means the authorization never expires.
    auth_expiration: int = Field(default=0, sa_column_kwargs={"nullable": False})
    disabled: bool = Field(default=False, sa_column_kwargs={"nullable": False})
    ip_address: str | None = Field(default=None, max_length=64)
    hardware: str | None = Field(default=None, max_length=200)
    software: str | None = Field(default=None, max_length=200)
    version: str | None = Field(default=None, max_length=50)
    device_name: str | None = Field(default=None, max_length=200)
    orig_device_hash: str | None = Field(default=None, max_length=200)
    created_when: datetime = Field(
        default_factory=utcnow, sa_column=Column(UTCDateTime(), nullable=False)
    )
    updated_when: datetime | None = Field(
        default=None, sa_column=Column(UTCDateTime(), nullable=True)
    )
    time_zone: str = Field(default="CST", max_length=10)
    setup_version: int = Field(default=0, sa_column_kwargs={"nullable": False})
