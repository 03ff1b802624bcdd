"""Request and response shapes exchanged with kiosk clients."""

from __future__ import annotations

from enum import IntEnum

from pydantic import BaseModel, ConfigDict, Field


class KioskAuthStatus(IntEnum):
    """Outcome of a kiosk login, valued as the matching HTTP status code."""

    BadRequest = 400
    Unauthorized = 401
    Ok = 200


class KioskDeviceVersion(BaseModel):
    app: str | None = None
    os: str | None = None


class KioskDeviceLogin(BaseModel):
    """Client-reported details sent along with a kiosk login."""

    ip: str | None = None
    hw: str | None = None
    v: KioskDeviceVersion | None = None
    name: str | None = None
    hid: str | None = None


class Restaurant(BaseModel):
    """A location as presented to the kiosk."""

    id: int
    name: str
    address: str


class KioskLoginResponse(BaseModel):
    status: KioskAuthStatus
    locations: list[Restaurant] = Field(default_factory=list)
    message: str | None = None


class KioskLoginRequest(BaseModel):
    """Body of ``POST /kiosk/login``."""

    model_config = ConfigDict(populate_by_name=True)

    user_id: int = Field(alias="userId")
    device_id: str = Field(alias="deviceId", min_length=1)
    support: bool = False
    device: KioskDeviceLogin = Field(default_factory=KioskDeviceLogin)


__all__ = [
    "KioskAuthStatus",
    "KioskDeviceLogin",
    "KioskDeviceVersion",
    "KioskLoginRequest",
    "KioskLoginResponse",
    "Restaurant",
]
