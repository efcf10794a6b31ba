"""Domain models for dashboard users and credentials."""

from dataclasses import dataclass
from enum import StrEnum

from pydantic import ConfigDict, Field

from hoarding_dashboard.domain.envelope import ApiModel


class UserRole(StrEnum):
    """Roles that decide navigation and route access."""

    OWNER = "owner"
    PHOTOGRAPHER = "photographer"
    CLIENT = "client"


class UserRecord(ApiModel):
    """Represents a dashboard user as returned by the backend."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(alias="_id")
    name: str
    email: str
    role: UserRole
    avatar: str | None = None
    phone: str | None = None
    location: str | None = None
    company_name: str | None = None
    website: str | None = None
    address: str | None = None


@dataclass(frozen=True)
class PersistedCredential:
    """Token and login email kept across restarts."""

    token: str
    email: str


@dataclass(frozen=True)
class RegisterData:
    """Fields submitted by the registration form."""

    name: str
    email: str
    password: str
    role: UserRole
    avatar: bytes | None = None
    avatar_filename: str = "avatar.png"
    phone: str | None = None
    location: str | None = None
