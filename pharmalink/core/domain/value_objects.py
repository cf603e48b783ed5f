"""
Value Objects

Status enums are stored and sent over the wire as their lowercase string
value. Input from clients and legacy rows is matched ignoring case and
surrounding whitespace, by value or by member name.
"""

from enum import Enum
from typing import Self


class StatusEnum(str, Enum):
    """String-valued enum shared by every status and type field."""

    def __str__(self) -> str:
        return self.value

    @classmethod
    def values(cls) -> list[str]:
        return [member.value for member in cls]

    @classmethod
    def from_string(cls, value: str) -> Self:
        """
        Parse a client- or database-supplied value.

        Raises:
            ValueError: If nothing matches; the message lists accepted values
        """
        key = value.strip().lower()
        for member in cls:
            if key in (member.value.lower(), member.name.lower()):
                return member
        raise ValueError(f"Invalid {cls.__name__} '{value}', expected one of: {', '.join(cls.values())}")
