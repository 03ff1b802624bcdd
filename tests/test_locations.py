import pytest
from sqlmodel import Session

from kiosk_portal.core.errors import InvalidRoleConfiguration, RoleMismatch
from kiosk_portal.core.identity import LocationUser, Role
from kiosk_portal.core.locations import LocationResolver, LocationStore
from kiosk_portal.models.accounts import Account, DealerSupportAccess, ResellerPermission
from kiosk_portal.models.locations import Location, UserPermission

from .conftest import GLOBAL_RESTAURANT_ADMIN, HEARTLAND_ADMIN, PLATFORM_DEALER

PLATFORM_RESELLER = 10
SUB_RESELLER = 11
OTHER_RESELLER = 12


def _seed_locations(session: Session) -> None:
    session.add_all(
        [
            Account(id=HEARTLAND_ADMIN, name="Heartland Admin"),
            Account(id=GLOBAL_RESTAURANT_ADMIN, name="Global Restaurant Admin"),
            Account(id=PLATFORM_RESELLER, name="Platform Reseller", dealer_id=PLATFORM_DEALER, is_dealer=True),
            Account(id=SUB_RESELLER, name="Sub Reseller", dealer_id=PLATFORM_RESELLER, is_dealer=True),
            Account(id=OTHER_RESELLER, name="Other Reseller", dealer_id=99, is_dealer=True),
            Account(id=20, name="Diner Co", dealer_id=PLATFORM_RESELLER),
            Account(id=21, name="Cafe Co", dealer_id=SUB_RESELLER),
            Account(id=22, name="Taco Co", dealer_id=OTHER_RESELLER),
            Account(id=23, name="Demo Co", dealer_id=OTHER_RESELLER, is_demo=True),
            DealerSupportAccess(dealer_id=SUB_RESELLER, support_dealer_id=OTHER_RESELLER),
        ]
    )
    session.add_all(
        [
            Location(id=1, name="Alpha Diner", address="1 Main St", city="Austin", state="TX", postal_code="78701", account_id=20),
            Location(id=8, name="Hotel Diner", account_id=20),
            Location(id=2, name="Bravo Cafe", account_id=21),
            Location(id=3, name="Charlie Tacos", account_id=22),
            Location(id=4, name="Delta Demo", account_id=23),
            Location(id=5, name="Echo Closed", account_id=21, is_active=False),
            Location(id=6, name="Foxtrot Offline", account_id=21, pos_active=False),
            Location(id=7, name="Golf Reseller HQ", account_id=SUB_RESELLER),
        ]
    )
    session.commit()


@pytest.fixture()
def resolver(session: Session, special_accounts) -> LocationResolver:
    _seed_locations(session)
    return LocationResolver(LocationStore(session), special_accounts)


def _names(locations) -> list[str]:
    return [location.name for location in locations]


def test_resolve_returns_nothing_for_unknown_role(resolver: LocationResolver):
    user = LocationUser(id=1, group_id=7, account_id=HEARTLAND_ADMIN, account_admin=True)

    assert user.role is Role.OTHER
    assert resolver.resolve(user) == []


def test_heartland_admin_sees_every_active_location(resolver: LocationResolver):
    user = LocationUser(id=1, group_id=Role.ADMIN, account_id=HEARTLAND_ADMIN, account_admin=False)

    locations = resolver.resolve(user)

    assert _names(locations) == [
        "Alpha Diner",
        "Bravo Cafe",
        "Charlie Tacos",
        "Delta Demo",
        "Golf Reseller HQ",
        "Hotel Diner",
    ]
    assert locations[0].address == "1 Main St Austin, TX 78701"


def test_global_restaurant_admin_sees_platform_dealer_chain(resolver: LocationResolver):
    user = LocationUser(
        id=2, group_id=Role.ADMIN, account_id=GLOBAL_RESTAURANT_ADMIN, account_admin=False
    )

    assert _names(resolver.resolve(user)) == ["Alpha Diner", "Golf Reseller HQ", "Hotel Diner"]


def test_admin_outside_special_accounts_is_misconfigured(resolver: LocationResolver):
    user = LocationUser(id=3, group_id=Role.ADMIN, account_id=20, account_admin=True)

    with pytest.raises(InvalidRoleConfiguration):
        resolver.resolve(user)


def test_dealer_on_special_account_matches_admin_view(resolver: LocationResolver):
    dealer = LocationUser(id=4, group_id=Role.DEALER, account_id=HEARTLAND_ADMIN, account_admin=False)
    admin = LocationUser(id=5, group_id=Role.ADMIN, account_id=HEARTLAND_ADMIN, account_admin=False)

    assert resolver.resolve(dealer) == resolver.resolve(admin)


def test_account_admin_dealer_sees_owned_resold_and_supported(resolver: LocationResolver):
    user = LocationUser(id=50, group_id=Role.DEALER, account_id=SUB_RESELLER, account_admin=True)

    # Demo accounts reached through support access are left out.
    assert _names(resolver.resolve(user)) == ["Bravo Cafe", "Charlie Tacos", "Golf Reseller HQ"]


def test_dealer_without_account_admin_needs_reseller_grants(
    resolver: LocationResolver, session: Session
):
    user = LocationUser(id=51, group_id=Role.DEALER, account_id=SUB_RESELLER, account_admin=False)

    assert resolver.resolve(user) == []

    session.add(ResellerPermission(user_id=51, account_id=21))
    session.commit()
    assert _names(resolver.resolve(user)) == ["Bravo Cafe"]

    session.add(ResellerPermission(user_id=51, account_id=22))
    session.add(ResellerPermission(user_id=52, account_id=SUB_RESELLER))
    session.commit()
    assert _names(resolver.resolve(user)) == ["Bravo Cafe", "Charlie Tacos"]


def test_account_admin_member_sees_own_account(resolver: LocationResolver):
    user = LocationUser(id=60, group_id=Role.MEMBER, account_id=20, account_admin=True)

    assert _names(resolver.resolve(user)) == ["Alpha Diner", "Hotel Diner"]


def test_member_without_grant_does_not_see_location(resolver: LocationResolver, session: Session):
    user = LocationUser(id=61, group_id=Role.MEMBER, account_id=20, account_admin=False)

    assert resolver.resolve(user) == []

    session.add(UserPermission(user_id=61, location_id=8))
    # A grant on another account's location is ignored.
    session.add(UserPermission(user_id=61, location_id=2))
    session.commit()

    assert _names(resolver.resolve(user)) == ["Hotel Diner"]


def test_location_filter_restricts_to_single_location(resolver: LocationResolver):
    user = LocationUser(id=1, group_id=Role.ADMIN, account_id=HEARTLAND_ADMIN, account_admin=False)

    assert _names(resolver.resolve(user, 3)) == ["Charlie Tacos"]
    # Inactive locations stay hidden even when asked for directly.
    assert resolver.resolve(user, 5) == []


def test_role_specific_lookup_rejects_other_roles(resolver: LocationResolver):
    user = LocationUser(id=60, group_id=Role.MEMBER, account_id=20, account_admin=True)

    with pytest.raises(RoleMismatch):
        resolver.dealer_locations(user, None)
    with pytest.raises(RoleMismatch):
        resolver.admin_locations(user, None)
