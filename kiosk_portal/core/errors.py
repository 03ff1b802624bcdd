"""Domain errors raised by the access control core."""

from __future__ import annotations


class KioskPortalError(Exception):
    """Base class for errors raised while deciding a kiosk login."""

    def __init__(self, code: str, message: str, *, status_code: int = 400) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.detail = {"code": code, "message": message}


class NotFound(KioskPortalError):
    """Raised when a user (or its account metadata) cannot be located."""

    def __init__(self, message: str) -> None:
        super().__init__("not_found", message, status_code=404)


class InvalidRoleConfiguration(KioskPortalError):
    """Raised when a role is attached to an account it cannot belong to."""

    def __init__(self, message: str) -> None:
        super().__init__("invalid_role_configuration", message, status_code=403)


class RoleMismatch(KioskPortalError):
    """Raised when a role-specific lookup is invoked for a user of another role."""

    def __init__(self, message: str) -> None:
        super().__init__("role_mismatch", message, status_code=403)


class PersistenceFailure(KioskPortalError):
    """Wraps a storage error raised while writing an authorization record."""

    def __init__(self, message: str) -> None:
        super().__init__("persistence_failure", message, status_code=503)


__all__ = [
    "InvalidRoleConfiguration",
    "KioskPortalError",
    "NotFound",
    "PersistenceFailure",
    "RoleMismatch",
]
