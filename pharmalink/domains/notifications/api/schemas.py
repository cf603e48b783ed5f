"""
Notifications API Schemas
"""

from pydantic import AliasChoices, BaseModel, Field


class DeviceTokenBody(BaseModel):
    token: str = Field(..., min_length=1, validation_alias=AliasChoices("token", "fcmToken"))
