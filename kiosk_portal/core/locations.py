"""Location visibility rules for kiosk users."""

from __future__ import annotations

from sqlalchemy import and_, or_
from sqlalchemy.orm import aliased
from sqlmodel import Session, select

from kiosk_portal.core.errors import InvalidRoleConfiguration, RoleMismatch
from kiosk_portal.core.identity import LocationUser, Role, SpecialAccounts
from kiosk_portal.core.schemas import Restaurant
from kiosk_portal.models.accounts import Account, DealerSupportAccess, ResellerPermission
from kiosk_portal.models.locations import Location, UserPermission


def _visible_locations(location_id: int | None):
    """Return the base select shared by every access pattern."""

    statement = (
        select(Location)
        .join(Account, Account.id == Location.account_id)
        .where(Location.is_active == True)  # noqa: E712
        .where(Location.pos_active == True)  # noqa: E712
    )
    if location_id is not None:
        statement = statement.where(Location.id == location_id)
    return statement


class LocationStore:
    """Named read queries over active, POS-active locations.

    Every query accepts an optional ``location_id`` restricting the result to
    that single location.
    """

    def __init__(self, session: Session) -> None:
        self.session = session

    def _fetch(self, statement) -> list[Location]:
        return list(self.session.exec(statement.order_by(Location.name)).all())

    def all_locations(self, location_id: int | None = None) -> list[Location]:
        return self._fetch(_visible_locations(location_id))

    def dealer_chain_locations(
        self, dealer_id: int, location_id: int | None = None
    ) -> list[Location]:
        """Return locations resold by ``dealer_id`` directly or one level down."""

        dealer = aliased(Account)
        statement = (
            _visible_locations(location_id)
            .join(dealer, dealer.id == Account.dealer_id)
            .where(or_(Account.dealer_id == dealer_id, dealer.dealer_id == dealer_id))
        )
        return self._fetch(statement)

    def dealer_owned_locations(
        self,
        account_id: int,
        location_id: int | None = None,
        *,
        reseller_user_id: int | None = None,
    ) -> list[Location]:
        """Return locations of ``account_id`` and of the accounts it resells."""

        statement = _visible_locations(location_id).where(
            or_(Account.id == account_id, Account.dealer_id == account_id)
        )
        if reseller_user_id is not None:
            statement = statement.join(
                ResellerPermission,
                and_(
                    ResellerPermission.account_id == Account.id,
                    ResellerPermission.user_id == reseller_user_id,
                ),
            )
        return self._fetch(statement)

    def support_access_locations(
        self,
        dealer_id: int,
        location_id: int | None = None,
        *,
        reseller_user_id: int | None = None,
    ) -> list[Location]:
        """Return non-demo locations delegated to ``dealer_id`` for support."""

        statement = (
            _visible_locations(location_id)
            .join(
                DealerSupportAccess,
                DealerSupportAccess.support_dealer_id == Account.dealer_id,
            )
            .where(DealerSupportAccess.dealer_id == dealer_id)
            .where(Account.is_demo == False)  # noqa: E712
        )
        if reseller_user_id is not None:
            statement = statement.join(
                ResellerPermission,
                and_(
                    ResellerPermission.account_id == Account.id,
                    ResellerPermission.user_id == reseller_user_id,
                ),
            )
        return self._fetch(statement)

    def account_locations(
        self, account_id: int, location_id: int | None = None
    ) -> list[Location]:
        return self._fetch(
            _visible_locations(location_id).where(Location.account_id == account_id)
        )

    def permitted_locations(
        self, user_id: int, account_id: int, location_id: int | None = None
    ) -> list[Location]:
        """Return locations of ``account_id`` explicitly granted to ``user_id``."""

        statement = (
            _visible_locations(location_id)
            .join(UserPermission, UserPermission.location_id == Location.id)
            .where(Location.account_id == account_id)
            .where(UserPermission.user_id == user_id)
        )
        return self._fetch(statement)


class LocationResolver:
    """Decide which locations a user may pick on a kiosk."""

    def __init__(self, store: LocationStore, special: SpecialAccounts | None = None) -> None:
        self.store = store
        self.special = special or SpecialAccounts.from_settings()

    def resolve(self, user: LocationUser, location_id: int | None = None) -> list[Restaurant]:
        """Return the locations visible to ``user`` ordered by name."""

        match user.role:
            case Role.ADMIN:
                locations = self.admin_locations(user, location_id)
            case Role.DEALER:
                locations = self.dealer_locations(user, location_id)
            case Role.MEMBER:
                locations = self.member_locations(user, location_id)
            case Role.OTHER:
                locations = []
        return [
            Restaurant(id=location.id, name=location.name, address=location.full_address)
            for location in locations
        ]

    def admin_locations(self, user: LocationUser, location_id: int | None) -> list[Location]:
        _guard_role(user, Role.ADMIN)

        locations = self._special_account_locations(user, location_id)
        if locations is None:
            raise InvalidRoleConfiguration(
                "An admin must be a Global Restaurant Admin or a Heartland Admin"
            )
        return locations

    def dealer_locations(self, user: LocationUser, location_id: int | None) -> list[Location]:
        _guard_role(user, Role.DEALER)

        locations = self._special_account_locations(user, location_id)
        if locations is not None:
            return locations

        reseller_user_id = None if user.account_admin else user.id
        owned = self.store.dealer_owned_locations(
            user.account_id, location_id, reseller_user_id=reseller_user_id
        )
        supported = self.store.support_access_locations(
            user.account_id, location_id, reseller_user_id=reseller_user_id
        )
        return sorted(owned + supported, key=lambda location: location.name)

    def member_locations(self, user: LocationUser, location_id: int | None) -> list[Location]:
        _guard_role(user, Role.MEMBER)

        if user.account_admin:
            return self.store.account_locations(user.account_id, location_id)
        return self.store.permitted_locations(user.id, user.account_id, location_id)

    def _special_account_locations(
        self, user: LocationUser, location_id: int | None
    ) -> list[Location] | None:
        """Return the global views for the designated admin accounts, else ``None``."""

        if user.account_id == self.special.global_restaurant_admin:
            return self.store.dealer_chain_locations(self.special.platform_dealer, location_id)
        if user.account_id == self.special.heartland_admin:
            return self.store.all_locations(location_id)
        return None


def _guard_role(user: LocationUser, intended: Role) -> None:
    if user.role != intended:
        raise RoleMismatch(
            f"Unauthorized: Passed in user must have {intended.name.lower()} role"
        )


__all__ = ["LocationResolver", "LocationStore"]
