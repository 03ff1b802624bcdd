"""User lookups for the kiosk login flow."""

from __future__ import annotations

from sqlmodel import Session, select

from kiosk_portal.core.errors import NotFound
from kiosk_portal.core.identity import LocationUser
from kiosk_portal.models.users import User, UserMeta


class UserDirectory:
    """Resolve user ids to the role and account attributes of the user."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def find_by_id(self, user_id: int) -> LocationUser:
        """Return the :class:`LocationUser` for ``user_id``.

        Users without an account metadata row are treated as unknown.
        """

        row = self.session.exec(
            select(User.id, User.group_id, UserMeta.account_id, UserMeta.account_admin)
            .join(UserMeta, UserMeta.user_id == User.id)
            .where(User.id == user_id)
        ).first()
        if row is None:
            raise NotFound(f"User {user_id} not found")

        found_id, group_id, account_id, account_admin = row
        return LocationUser(
            id=found_id,
            group_id=group_id,
            account_id=account_id,
            account_admin=bool(account_admin),
        )


__all__ = ["UserDirectory"]
