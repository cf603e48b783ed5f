"""
Base Entity

Every persisted document has an opaque string id and UTC timestamps. Ids are
assigned by the factory methods on each entity, not by the database.
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import uuid4


def utc_now() -> datetime:
    """Timezone-aware current time; the single clock used by the domain."""
    return datetime.now(UTC)


def generate_id() -> str:
    return uuid4().hex


def isoformat(value: datetime | None) -> str | None:
    return value.isoformat() if value else None


@dataclass
class Entity:
    """Identity-based equality; two unsaved entities are never equal."""

    id: str | None = field(default=None)
    created_at: datetime = field(default_factory=utc_now)
    updated_at: datetime = field(default_factory=utc_now)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Entity) or self.id is None:
            return False
        return type(self) is type(other) and self.id == other.id

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.id)) if self.id is not None else id(self)

    def touch(self, now: datetime | None = None) -> None:
        self.updated_at = now or utc_now()
