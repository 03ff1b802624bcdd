"""SQLModel table declarations for the kiosk portal."""

from .accounts import Account, DealerSupportAccess, ResellerPermission
from .auth_log import DeviceAuthLog
from .devices import AuthorizedKioskDevice
from .locations import Location, UserPermission
from .users import User, UserMeta

__all__ = [
    "Account",
    "AuthorizedKioskDevice",
    "DealerSupportAccess",
    "DeviceAuthLog",
    "Location",
    "ResellerPermission",
    "User",
    "UserMeta",
    "UserPermission",
]
