"""Kiosk login decision."""

from __future__ import annotations

import calendar
import logging
from collections.abc import Callable
from datetime import datetime

from kiosk_portal.core.config import settings
from kiosk_portal.core.device_auth import DeviceAuthorizationEngine
from kiosk_portal.core.directory import UserDirectory
from kiosk_portal.core.locations import LocationResolver
from kiosk_portal.core.schemas import (
    KioskAuthStatus,
    KioskDeviceLogin,
    KioskLoginResponse,
)
from kiosk_portal.models.base import utcnow

logger = logging.getLogger(__name__)

NO_LOCATIONS_MESSAGE = "No locations found"
DEVICE_LIMIT_MESSAGE = (
    "Max Device Limit Reached. Please contact your local reseller to change your billing plan"
)
NOT_AUTHENTICATED_MESSAGE = "Could not authenticate"


def auth_expiration_for(support: bool, now: datetime, *, support_duration: int | None = None) -> int:
    """Return the epoch expiry for a login; 0 means the device never expires."""

    if support_duration is None:
        support_duration = settings.support_duration_seconds
    duration = support_duration if support else 0
    if duration == 0:
        return 0
    return calendar.timegm(now.utctimetuple()) + duration


class KioskLoginOrchestrator:
    """Combine user, location and device checks into a single login result.

    ``now`` supplies the current time. ``record_login`` receives the audit
    call for a successful authorization and defaults to running
    :meth:`DeviceAuthorizationEngine.log_authenticate` inline; the HTTP layer
    passes one that queues it as a background task.
    """

    def __init__(
        self,
        directory: UserDirectory,
        resolver: LocationResolver,
        engine: DeviceAuthorizationEngine,
        *,
        now: Callable[[], datetime] = utcnow,
        record_login: Callable[[int, str, KioskDeviceLogin, datetime, int], None] | None = None,
    ) -> None:
        self.directory = directory
        self.resolver = resolver
        self.engine = engine
        self.now = now
        self.record_login = record_login or engine.log_authenticate

    def login(
        self,
        user_id: int,
        device_id: str,
        support: bool,
        login: KioskDeviceLogin,
    ) -> KioskLoginResponse:
        user = self.directory.find_by_id(user_id)
        locations = self.resolver.resolve(user)

        if not locations:
            return KioskLoginResponse(
                status=KioskAuthStatus.BadRequest,
                message=NO_LOCATIONS_MESSAGE,
                locations=[],
            )

        if len(locations) > 1:
            return KioskLoginResponse(status=KioskAuthStatus.Ok, locations=locations)

        location_id = locations[0].id
        now = self.now()
        auth_expiration = auth_expiration_for(support, now)

        # Denies when there *is* quota headroom; kept as the legacy client expects.
        if (
            user.is_above_base_tier
            and not support
            and self.engine.can_authorize(device_id, location_id)
        ):
            logger.info("Device %s refused at location %s: device limit", device_id, location_id)
            return KioskLoginResponse(
                status=KioskAuthStatus.Unauthorized,
                locations=locations,
                message=DEVICE_LIMIT_MESSAGE,
            )

        if self.engine.authorize(device_id, location_id, user, now, auth_expiration):
            self.record_login(
                location_id,
                device_id,
                login,
                now,
                auth_expiration,
            )
            return KioskLoginResponse(status=KioskAuthStatus.Ok, locations=locations)

        return KioskLoginResponse(
            status=KioskAuthStatus.Unauthorized,
            message=NOT_AUTHENTICATED_MESSAGE,
            locations=[],
        )


__all__ = [
    "DEVICE_LIMIT_MESSAGE",
    "KioskLoginOrchestrator",
    "NOT_AUTHENTICATED_MESSAGE",
    "NO_LOCATIONS_MESSAGE",
    "auth_expiration_for",
]
