"""SQLModel declaration for the kiosk authentication audit log."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import Column
from sqlmodel import Field

from .base import BaseModel, UTCDateTime, utcnow


class DeviceAuthLog(BaseModel, table=True):
    """One kiosk login attempt; rows are append-only."""

    id: int | None = Field(default=None, primary_key=True)
    device_id: str = Field(max_length=100, index=True)
    location_id: int = Field(index=True)
    ip_address: str = Field(default="", max_length=64)
    hardware: str = Field(default="", max_length=200)
    version: str = Field(default="", max_length=50)
    os: str = Field(default="", max_length=200)
    created_when: datetime = Field(
        default_factory=utcnow, sa_column=Column(UTCDateTime(), nullable=False)
    )
    device_name: str = Field(default="", max_length=200)
    orig_device_hash: str = Field(default="", max_length=200)
    auth_expiration: int = Field(default=0, sa_column_kwargs={"nullable": False})
