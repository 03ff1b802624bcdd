"""SQLModel declarations for billing accounts and reseller grants."""

from __future__ import annotations

from sqlmodel import Field

from .base import BaseModel


class Account(BaseModel, table=True):
    """A billing account; ``dealer_id`` points at the reselling dealer account."""

    id: int | None = Field(default=None, primary_key=True)
    name: str = Field(max_length=200)
    dealer_id: int | None = Field(default=None, index=True)
    is_dealer: bool = Field(default=False, sa_column_kwargs={"nullable": False})
    is_demo: bool = Field(default=False, sa_column_kwargs={"nullable": False})


class DealerSupportAccess(BaseModel, table=True):
    """Lets ``dealer_id`` support the accounts resold by ``support_dealer_id``."""

    id: int | None = Field(default=None, primary_key=True)
    dealer_id: int = Field(foreign_key="account.id", index=True)
    support_dealer_id: int = Field(foreign_key="account.id", index=True)


class ResellerPermission(BaseModel, table=True):
    """Grants a dealer user access to one of the accounts they resell."""

    id: int | None = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="user.id", index=True)
    account_id: int = Field(foreign_key="account.id", index=True)
