"""Pydantic models for dashboard request bodies."""

from pydantic import Base64Bytes, BaseModel

from hoarding_dashboard.domain.models import RegisterData, UserRole
from hoarding_dashboard.domain.search import SearchCategory


class LoginRequest(BaseModel):
    """Credentials submitted from the login form."""

    email: str
    password: str


class RegisterRequest(BaseModel):
    """Registration form; the avatar travels base64 encoded."""

    name: str
    email: str
    password: str
    role: UserRole
    phone: str | None = None
    location: str | None = None
    avatar: Base64Bytes | None = None
    avatar_filename: str = "avatar.png"

    def to_register_data(self) -> RegisterData:
        return RegisterData(
            name=self.name,
            email=self.email,
            password=self.password,
            role=self.role,
            avatar=self.avatar,
            avatar_filename=self.avatar_filename,
            phone=self.phone,
            location=self.location,
        )


class LiveSearchRequest(BaseModel):
    query: str


class SearchSelection(BaseModel):
    """A hit chosen from the search panel."""

    category: SearchCategory
    id: str
