"""Helpers for recording kiosk authentication attempts."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from sqlmodel import Session

from kiosk_portal.core.schemas import KioskDeviceLogin
from kiosk_portal.models.auth_log import DeviceAuthLog

NULL_DEVICE_HASH = "(null)"


@dataclass(frozen=True)
class DeviceAuthEntry:
    """Normalised details of one kiosk login; absent values are empty strings."""

    device_id: str
    location_id: int
    ip_address: str
    hardware: str
    version: str
    os: str
    created_updated_when: datetime
    device_name: str
    orig_device_hash: str
    auth_expiration: int = 0

    @classmethod
    def from_login(
        cls,
        *,
        device_id: str,
        location_id: int,
        login: KioskDeviceLogin,
        timestamp: datetime,
        auth_expiration: int = 0,
    ) -> "DeviceAuthEntry":
        """Build an entry from the client payload.

        iOS clients report a missing device hash as the literal ``"(null)"``.
        """

        version = login.v
        device_hash = login.hid if login.hid and login.hid != NULL_DEVICE_HASH else ""
        return cls(
            device_id=device_id,
            location_id=location_id,
            ip_address=login.ip or "",
            hardware=login.hw or "",
            version=(version.app if version else None) or "",
            os=(version.os if version else None) or "",
            created_updated_when=timestamp,
            device_name=login.name or "",
            orig_device_hash=device_hash,
            auth_expiration=auth_expiration,
        )


def log_device_auth(
    session: Session,
    entry: DeviceAuthEntry,
    *,
    commit: bool = False,
) -> DeviceAuthLog:
    """Persist a ``DeviceAuthLog`` row and optionally commit the transaction.

    Parameters
    ----------
    session:
        The open database session that will persist the log entry.
    entry:
        The normalised login details to record.
    commit:
        When ``True`` the helper commits the session after adding the log.

    Returns
    -------
    DeviceAuthLog
        The instance that was added to the session.
    """

    log = DeviceAuthLog(
        device_id=entry.device_id,
        location_id=entry.location_id,
        ip_address=entry.ip_address,
        hardware=entry.hardware,
        version=entry.version,
        os=entry.os,
        created_when=entry.created_updated_when,
        device_name=entry.device_name,
        orig_device_hash=entry.orig_device_hash,
        auth_expiration=entry.auth_expiration,
    )

    session.add(log)

    if commit:
        session.commit()

    return log


class AuditLog:
    """Append-only sink for kiosk authentication attempts."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def append(self, entry: DeviceAuthEntry) -> DeviceAuthLog:
        return log_device_auth(self.session, entry, commit=True)


__all__ = ["AuditLog", "DeviceAuthEntry", "log_device_auth"]
