"""
User entity: identity plus the onboarding profile (name, age).

The password is stored exactly as given; it must never leave the API, so
responses are built from ``UserPublic``.
"""

from typing import Optional

from pydantic import Field

from domain.models.base import DomainModel, PatchModel


class UserCreate(DomainModel):
    """Payload for onboarding a new user."""

    username: str = Field(..., min_length=1, description="Unique login name")
    password: str = Field(..., min_length=1, description="Opaque password string")
    age: int = Field(..., ge=0, le=130, description="Age in years")
    name: str = Field(..., min_length=1, description="Display name")


class User(UserCreate):
    """A stored user."""

    id: int = Field(..., ge=1)

    def public(self) -> "UserPublic":
        """Return a copy safe to send to clients (no password)."""
        return UserPublic.model_validate(self.model_dump(exclude={"password"}))


class UserPublic(DomainModel):
    """User as exposed over the API."""

    id: int
    username: str
    age: int
    name: str


class UserPatch(PatchModel):
    """Mutable user fields; anything omitted is left unchanged."""

    username: Optional[str] = Field(default=None, min_length=1)
    password: Optional[str] = Field(default=None, min_length=1)
    age: Optional[int] = Field(default=None, ge=0, le=130)
    name: Optional[str] = Field(default=None, min_length=1)
