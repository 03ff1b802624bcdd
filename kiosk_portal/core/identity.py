"""Role and identity types shared by the access control components."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from kiosk_portal.core.config import settings

BASE_TIER_GROUP_ID = 1


class Role(IntEnum):
    """Closed set of roles, keyed by the user's group id."""

    OTHER = 0
    ADMIN = 1
    MEMBER = 2
    DEALER = 3

    @classmethod
    def from_group_id(cls, group_id: int) -> "Role":
        """Return the role for ``group_id``, falling back to ``OTHER``."""

        try:
            return cls(group_id)
        except ValueError:
            return cls.OTHER


@dataclass(frozen=True)
class SpecialAccounts:
    """Account ids that receive hard-wired treatment."""

    heartland_admin: int
    global_restaurant_admin: int
    mobilebytes_demo: int
    platform_dealer: int

    @classmethod
    def from_settings(cls) -> "SpecialAccounts":
        return cls(
            heartland_admin=settings.heartland_admin_account_id,
            global_restaurant_admin=settings.global_restaurant_admin_account_id,
            mobilebytes_demo=settings.mobilebytes_demo_account_id,
            platform_dealer=settings.platform_dealer_id,
        )

    @property
    def quota_exempt(self) -> frozenset[int]:
        return frozenset(
            {self.heartland_admin, self.global_restaurant_admin, self.mobilebytes_demo}
        )


@dataclass(frozen=True)
class LocationUser:
    """Immutable view of a user taken at the start of a login decision."""

    id: int
    group_id: int
    account_id: int
    account_admin: bool

    @property
    def role(self) -> Role:
        return Role.from_group_id(self.group_id)

    @property
    def is_above_base_tier(self) -> bool:
        """Return ``True`` for users whose group outranks the kiosk tier."""

        return self.group_id > BASE_TIER_GROUP_ID


__all__ = ["BASE_TIER_GROUP_ID", "LocationUser", "Role", "SpecialAccounts"]
