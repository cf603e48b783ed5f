"""
Users API Schemas
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class SocialLinks(BaseModel):
    linkedin: str | None = None
    instagram: str | None = None
    facebook: str | None = None
    x: str | None = None


class UpdateProfileBody(BaseModel):
    """Partner profile update; unknown keys are dropped."""

    model_config = ConfigDict(extra="ignore")

    name: str | None = Field(default=None, min_length=2, max_length=100)
    email: EmailStr | None = None
    phone: str | None = Field(default=None, min_length=10, max_length=15)
    bio: str | None = Field(default=None, max_length=1000)
    languages: str | None = Field(default=None, max_length=200)
    qualification: str | None = None
    experience: float | None = None
    regNumber: str | None = None
    stateCouncil: str | None = None
    additionalQuals: list[str] | None = None
    socialLinks: SocialLinks | None = None
    profileImage: str | None = None
    address: str | None = Field(default=None, min_length=5, max_length=500)

    def to_fields(self) -> dict[str, Any]:
        return self.model_dump(exclude_none=True)
