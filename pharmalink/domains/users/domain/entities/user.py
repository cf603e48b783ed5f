"""
User Entity

The identity anchor shared by every domain. Users are keyed by phone number
when the identity provider supplies one, otherwise by the provider uid.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from pharmalink.core.domain import AuthenticationException, Entity, isoformat


class UserRole(str, Enum):
    """Closed set of roles; every authorization checkpoint matches on these."""

    CUSTOMER = "customer"
    PARTNER = "partner"
    AGENT = "agent"

    @classmethod
    def from_claim(cls, value: str | None) -> "UserRole":
        """
        Parse the role claim of a verified token.

        A missing claim means customer; an unknown one is rejected.
        """
        if not value:
            return cls.CUSTOMER
        try:
            return cls(value.lower())
        except ValueError:
            raise AuthenticationException(f"Unknown role '{value}'") from None


@dataclass(frozen=True)
class Identity:
    """What the identity verifier vouches for."""

    uid: str
    phone: str | None = None
    role: UserRole = UserRole.CUSTOMER
    email: str | None = None
    name: str | None = None

    @property
    def user_id(self) -> str:
        return self.phone or self.uid


# Profile keys a partner may edit on their own record
EDITABLE_PROFILE_FIELDS = (
    "bio",
    "languages",
    "qualification",
    "experience",
    "regNumber",
    "stateCouncil",
    "additionalQuals",
    "socialLinks",
    "profileImage",
    "address",
)


@dataclass(eq=False)
class User(Entity):
    """Registered user of any role."""

    phone: str | None = None
    email: str | None = None
    name: str = ""
    role: UserRole = UserRole.CUSTOMER
    pharmacy_id: str | None = None
    profile: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_identity(cls, identity: Identity) -> "User":
        return cls(
            id=identity.user_id,
            phone=identity.phone,
            email=identity.email,
            name=identity.name or "",
            role=identity.role,
        )

    @property
    def has_pharmacy(self) -> bool:
        return self.role == UserRole.PARTNER and bool(self.pharmacy_id)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "phone": self.phone,
            "email": self.email,
            "name": self.name,
            "role": self.role.value,
            "pharmacyId": self.pharmacy_id,
            **self.profile,
            "createdAt": isoformat(self.created_at),
            "updatedAt": isoformat(self.updated_at),
        }
