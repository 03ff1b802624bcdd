"""Kiosk device quota checks and authorization records."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlmodel import Session, select

from kiosk_portal.core.audit_log import AuditLog, DeviceAuthEntry
from kiosk_portal.core.config import settings
from kiosk_portal.core.errors import NotFound, PersistenceFailure
from kiosk_portal.core.identity import LocationUser, SpecialAccounts
from kiosk_portal.core.schemas import KioskDeviceLogin
from kiosk_portal.models.accounts import Account
from kiosk_portal.models.devices import KIOSK_GROUP_ID, AuthorizedKioskDevice
from kiosk_portal.models.locations import Location

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BillingTypeInfo:
    """Billing attributes of the account owning a location."""

    num_terminals_kiosk: int
    account_id: int
    is_dealer: bool
    is_demo: bool


class DeviceAuthStore:
    """Persistence for :class:`AuthorizedKioskDevice` rows, keyed by device id."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def billing_info(self, location_id: int) -> list[BillingTypeInfo]:
        rows = self.session.exec(
            select(
                Location.num_terminals_kiosk,
                Location.account_id,
                Account.is_dealer,
                Account.is_demo,
            )
            .join(Account, Account.id == Location.account_id)
            .where(Location.id == location_id)
        ).all()
        return [
            BillingTypeInfo(
                num_terminals_kiosk=num_terminals,
                account_id=account_id,
                is_dealer=bool(is_dealer),
                is_demo=bool(is_demo),
            )
            for num_terminals, account_id, is_dealer, is_demo in rows
        ]

    def count_kiosk_devices(self, location_id: int, *, excluding_device_id: str) -> int:
        """Count enabled, non-expiring kiosk-tier devices bound to ``location_id``."""

        statement = (
            select(func.count(AuthorizedKioskDevice.device_id))
            .where(AuthorizedKioskDevice.location_id == location_id)
            .where(AuthorizedKioskDevice.group_id == KIOSK_GROUP_ID)
            .where(AuthorizedKioskDevice.auth_expiration == 0)
            .where(AuthorizedKioskDevice.device_id != excluding_device_id)
            .where(AuthorizedKioskDevice.disabled == False)  # noqa: E712
        )
        return self.session.exec(statement).one()

    def upsert(
        self,
        device_id: str,
        *,
        location_id: int,
        user_id: int,
        group_id: int,
        when: datetime,
        auth_expiration: int,
    ) -> AuthorizedKioskDevice:
        """Create the device row, or rebind the existing one.

        A concurrent insert for the same device id loses on the primary key and
        is replayed as an update. Storage errors surface as
        :class:`PersistenceFailure`.
        """

        try:
            device = self.session.get(AuthorizedKioskDevice, device_id)
            if device is None:
                device = AuthorizedKioskDevice(
                    device_id=device_id,
                    location_id=location_id,
                    user_id=user_id,
                    group_id=group_id,
                    created_when=when,
                    auth_expiration=auth_expiration,
                    time_zone=settings.default_time_zone,
                    setup_version=0,
                )
                self.session.add(device)
                try:
                    self.session.commit()
                except IntegrityError:
                    self.session.rollback()
                    device = self.session.get(AuthorizedKioskDevice, device_id)
                    if device is None:
                        raise
                else:
                    self.session.refresh(device)
                    return device

            device.location_id = location_id
            device.user_id = user_id
            device.group_id = group_id
            device.auth_expiration = auth_expiration
            device.updated_when = when
            self.session.add(device)
            self.session.commit()
            self.session.refresh(device)
            return device
        except SQLAlchemyError as exc:
            self.session.rollback()
            raise PersistenceFailure(f"Could not store authorization for {device_id}") from exc

    def refresh(self, entry: DeviceAuthEntry) -> AuthorizedKioskDevice:
        """Copy the latest login details onto the device row and re-enable it."""

        device = self.session.get(AuthorizedKioskDevice, entry.device_id)
        if device is None:
            raise NotFound(f"Authorized device {entry.device_id} not found")

        device.ip_address = entry.ip_address
        device.hardware = entry.hardware
        device.version = entry.version
        device.device_name = entry.device_name
        device.software = entry.os
        device.updated_when = entry.created_updated_when
        device.orig_device_hash = entry.orig_device_hash
        device.auth_expiration = entry.auth_expiration
        device.disabled = False
        self.session.add(device)
        self.session.commit()
        self.session.refresh(device)
        return device


class DeviceAuthorizationEngine:
    """Decide, record and audit kiosk device authorizations."""

    def __init__(
        self,
        store: DeviceAuthStore,
        audit_log: AuditLog,
        special: SpecialAccounts | None = None,
        *,
        special_account_bypass: bool | None = None,
    ) -> None:
        self.store = store
        self.audit_log = audit_log
        self.special = special or SpecialAccounts.from_settings()
        if special_account_bypass is None:
            special_account_bypass = settings.special_account_bypass
        self.special_account_bypass = special_account_bypass

    def can_authorize(self, device_id: str, location_id: int) -> bool:
        """Return ``True`` when the location has room for another kiosk device."""

        exempt, billing = self.is_authorized_by_account_type(location_id)
        if exempt:
            return True

        quota = billing.num_terminals_kiosk if billing is not None else 0
        return self.is_authorized_by_kiosk_count(device_id, location_id, quota)

    def is_authorized_by_kiosk_count(
        self, device_id: str, location_id: int, num_kiosk_terminals: int
    ) -> bool:
        existing = self.store.count_kiosk_devices(location_id, excluding_device_id=device_id)
        return existing < num_kiosk_terminals

    def is_authorized_by_account_type(
        self, location_id: int
    ) -> tuple[bool, BillingTypeInfo | None]:
        """Return whether the owning account is quota exempt, plus its billing info.

        Anything other than exactly one billing row is treated as unknown.
        """

        infos = self.store.billing_info(location_id)
        if len(infos) != 1:
            logger.warning(
                "Expected one billing row for location %s, found %s", location_id, len(infos)
            )
            return False, None

        info = infos[0]
        exempt = self.is_special_account(info.account_id) or self.is_dealer_or_demo(
            info.is_dealer, info.is_demo
        )
        return exempt, info

    def is_special_account(self, account_id: int) -> bool:
        # The legacy check returned before comparing ids; keep that unless enabled.
        if not self.special_account_bypass:
            return False
        return account_id in self.special.quota_exempt

    @staticmethod
    def is_dealer_or_demo(is_dealer: bool, is_demo: bool) -> bool:
        return is_dealer or is_demo

    def authorize(
        self,
        device_id: str,
        location_id: int,
        user: LocationUser,
        created_at: datetime,
        auth_expiration: int,
    ) -> bool:
        """Bind ``device_id`` to ``location_id`` for ``user``.

        Returns ``False`` when the record could not be stored. Callers cannot
        tell a storage outage apart from a refusal.
        """

        try:
            self.store.upsert(
                device_id,
                location_id=location_id,
                user_id=user.id,
                group_id=user.group_id,
                when=created_at,
                auth_expiration=auth_expiration,
            )
        except PersistenceFailure:
            logger.warning("Authorization for device %s failed", device_id, exc_info=True)
            return False
        return True

    def log_authenticate(
        self,
        location_id: int,
        device_id: str,
        login: KioskDeviceLogin,
        timestamp: datetime,
        auth_expiration: int = 0,
    ) -> None:
        """Record the login in the audit log, then refresh the device row."""

        entry = DeviceAuthEntry.from_login(
            device_id=device_id,
            location_id=location_id,
            login=login,
            timestamp=timestamp,
            auth_expiration=auth_expiration,
        )
        self.audit_log.append(entry)
        self.store.refresh(entry)
        logger.info("Kiosk device %s authenticated at location %s", device_id, location_id)


__all__ = ["BillingTypeInfo", "DeviceAuthStore", "DeviceAuthorizationEngine"]
