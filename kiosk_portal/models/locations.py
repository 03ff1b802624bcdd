"""SQLModel declarations for restaurant locations."""

from __future__ import annotations

from sqlmodel import Field

from .base import BaseModel


class Location(BaseModel, table=True):
    """A restaurant location owned by an account."""

    id: int | None = Field(default=None, primary_key=True)
    name: str = Field(max_length=200, index=True)
    address: str = Field(default="", max_length=200)
    city: str = Field(default="", max_length=100)
    state: str = Field(default="", max_length=50)
    postal_code: str = Field(default="", max_length=20)
    account_id: int = Field(foreign_key="account.id", index=True)
    is_active: bool = Field(default=True, sa_column_kwargs={"nullable": False})
    pos_active: bool = Field(default=True, sa_column_kwargs={"nullable": False})
    num_terminals_kiosk: int = Field(default=0, sa_column_kwargs={"nullable": False})

    @property
    def full_address(self) -> str:
        """Return the single-line address shown on the kiosk picker."""

        return f"{self.address} {self.city}, {self.state} {self.postal_code}"


class UserPermission(BaseModel, table=True):
    """Grants a member user access to a single location."""

    id: int | None = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="user.id", index=True)
    location_id: int = Field(foreign_key="location.id", index=True)
