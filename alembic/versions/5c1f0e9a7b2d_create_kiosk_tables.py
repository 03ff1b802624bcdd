"""create kiosk tables

Revision ID: 5c1f0e9a7b2d
Revises: 
Create Date: 2026-10-18 09:12:31.118204

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '5c1f0e9a7b2d'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""

    op.create_table(
        "account",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("name", sa.String(length=200), nullable=False),
        sa.Column("dealer_id", sa.Integer(), nullable=True),
        sa.Column("is_dealer", sa.Boolean(), nullable=False, server_default=sa.text("0")),
        sa.Column("is_demo", sa.Boolean(), nullable=False, server_default=sa.text("0")),
    )
    op.create_index("ix_account_dealer_id", "account", ["dealer_id"], unique=False)

    op.create_table(
        "user",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("username", sa.String(length=200), nullable=False),
        sa.Column("group_id", sa.Integer(), nullable=False),
        sa.Column(
            "created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()
        ),
    )
    op.create_index("ix_user_username", "user", ["username"], unique=False)

    op.create_table(
        "usermeta",
        sa.Column("user_id", sa.Integer(), primary_key=True),
        sa.Column("account_id", sa.Integer(), nullable=False),
        sa.Column(
            "account_admin", sa.Boolean(), nullable=False, server_default=sa.text("0")
        ),
        sa.ForeignKeyConstraint(["user_id"], ["user.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["account_id"], ["account.id"]),
    )
    op.create_index("ix_usermeta_account_id", "usermeta", ["account_id"], unique=False)

    op.create_table(
        "dealersupportaccess",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("dealer_id", sa.Integer(), nullable=False),
        sa.Column("support_dealer_id", sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(["dealer_id"], ["account.id"]),
        sa.ForeignKeyConstraint(["support_dealer_id"], ["account.id"]),
    )
    op.create_index(
        "ix_dealersupportaccess_dealer_id", "dealersupportaccess", ["dealer_id"], unique=False
    )
    op.create_index(
        "ix_dealersupportaccess_support_dealer_id",
        "dealersupportaccess",
        ["support_dealer_id"],
        unique=False,
    )

    op.create_table(
        "resellerpermission",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.Column("account_id", sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(["user_id"], ["user.id"]),
        sa.ForeignKeyConstraint(["account_id"], ["account.id"]),
    )
    op.create_index(
        "ix_resellerpermission_user_id", "resellerpermission", ["user_id"], unique=False
    )
    op.create_index(
        "ix_resellerpermission_account_id", "resellerpermission", ["account_id"], unique=False
    )

    op.create_table(
        "location",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("name", sa.String(length=200), nullable=False),
        sa.Column("address", sa.String(length=200), nullable=False, server_default=""),
        sa.Column("city", sa.String(length=100), nullable=False, server_default=""),
        sa.Column("state", sa.String(length=50), nullable=False, server_default=""),
        sa.Column("postal_code", sa.String(length=20), nullable=False, server_default=""),
        sa.Column("account_id", sa.Integer(), nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.text("1")),
        sa.Column("pos_active", sa.Boolean(), nullable=False, server_default=sa.text("1")),
        sa.Column(
            "num_terminals_kiosk", sa.Integer(), nullable=False, server_default=sa.text("0")
        ),
        sa.ForeignKeyConstraint(["account_id"], ["account.id"]),
    )
    op.create_index("ix_location_name", "location", ["name"], unique=False)
    op.create_index("ix_location_account_id", "location", ["account_id"], unique=False)

    op.create_table(
        "userpermission",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.Column("location_id", sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(["user_id"], ["user.id"]),
        sa.ForeignKeyConstraint(["location_id"], ["location.id"]),
    )
    op.create_index("ix_userpermission_user_id", "userpermission", ["user_id"], unique=False)
    op.create_index(
        "ix_userpermission_location_id", "userpermission", ["location_id"], unique=False
    )

    op.create_table(
        "authorizedkioskdevice",
        sa.Column("device_id", sa.String(length=100), primary_key=True),
        sa.Column("location_id", sa.Integer(), nullable=False),
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.Column("group_id", sa.Integer(), nullable=False),
        sa.Column(
            "auth_expiration", sa.Integer(), nullable=False, server_default=sa.text("0")
        ),
        sa.Column("disabled", sa.Boolean(), nullable=False, server_default=sa.text("0")),
        sa.Column("ip_address", sa.String(length=64), nullable=True),
        sa.Column("hardware", sa.String(length=200), nullable=True),
        sa.Column("software", sa.String(length=200), nullable=True),
        sa.Column("version", sa.String(length=50), nullable=True),
        sa.Column("device_name", sa.String(length=200), nullable=True),
        sa.Column("orig_device_hash", sa.String(length=200), nullable=True),
        sa.Column(
            "created_when", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()
        ),
        sa.Column("updated_when", sa.DateTime(timezone=True), nullable=True),
        sa.Column("time_zone", sa.String(length=10), nullable=False, server_default="CST"),
        sa.Column(
            "setup_version", sa.Integer(), nullable=False, server_default=sa.text("0")
        ),
        sa.ForeignKeyConstraint(["location_id"], ["location.id"]),
        sa.ForeignKeyConstraint(["user_id"], ["user.id"]),
    )
    op.create_index(
        "ix_authorizedkioskdevice_device_id", "authorizedkioskdevice", ["device_id"], unique=False
    )
    op.create_index(
        "ix_authorizedkioskdevice_location_id",
        "authorizedkioskdevice",
        ["location_id"],
        unique=False,
    )

    op.create_table(
        "deviceauthlog",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("device_id", sa.String(length=100), nullable=False),
        sa.Column("location_id", sa.Integer(), nullable=False),
        sa.Column("ip_address", sa.String(length=64), nullable=False, server_default=""),
        sa.Column("hardware", sa.String(length=200), nullable=False, server_default=""),
        sa.Column("version", sa.String(length=50), nullable=False, server_default=""),
        sa.Column("os", sa.String(length=200), nullable=False, server_default=""),
        sa.Column(
            "created_when", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()
        ),
        sa.Column("device_name", sa.String(length=200), nullable=False, server_default=""),
        sa.Column(
            "orig_device_hash", sa.String(length=200), nullable=False, server_default=""
        ),
        sa.Column(
            "auth_expiration", sa.Integer(), nullable=False, server_default=sa.text("0")
        ),
    )
    op.create_index("ix_deviceauthlog_device_id", "deviceauthlog", ["device_id"], unique=False)
    op.create_index(
        "ix_deviceauthlog_location_id", "deviceauthlog", ["location_id"], unique=False
    )


def downgrade() -> None:
    """Downgrade schema."""

    op.drop_index("ix_deviceauthlog_location_id", table_name="deviceauthlog")
    op.drop_index("ix_deviceauthlog_device_id", table_name="deviceauthlog")
    op.drop_table("deviceauthlog")

    op.drop_index("ix_authorizedkioskdevice_location_id", table_name="authorizedkioskdevice")
    op.drop_index("ix_authorizedkioskdevice_device_id", table_name="authorizedkioskdevice")
    op.drop_table("authorizedkioskdevice")

    op.drop_index("ix_userpermission_location_id", table_name="userpermission")
    op.drop_index("ix_userpermission_user_id", table_name="userpermission")
    op.drop_table("userpermission")

    op.drop_index("ix_location_account_id", table_name="location")
    op.drop_index("ix_location_name", table_name="location")
    op.drop_table("location")

    op.drop_index("ix_resellerpermission_account_id", table_name="resellerpermission")
    op.drop_index("ix_resellerpermission_user_id", table_name="resellerpermission")
    op.drop_table("resellerpermission")

    op.drop_index(
        "ix_dealersupportaccess_support_dealer_id", table_name="dealersupportaccess"
    )
    op.drop_index("ix_dealersupportaccess_dealer_id", table_name="dealersupportaccess")
    op.drop_table("dealersupportaccess")

    op.drop_index("ix_usermeta_account_id", table_name="usermeta")
    op.drop_table("usermeta")

    op.drop_index("ix_user_username", table_name="user")
    op.drop_table("user")

    op.drop_index("ix_account_dealer_id", table_name="account")
    op.drop_table("account")
