"""Domain entities — pure Python business objects, no framework dependencies."""

from dataclasses import dataclass, field
from datetime import datetime, timezone


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Article:
    """Core domain entity representing a published article."""

    title: str
    body: str
    id: int | None = None
    created_at: datetime = field(default_factory=_utcnow)
    updated_at: datetime | None = None

    def __post_init__(self) -> None:
        # A fresh article has never been modified.
        if self.updated_at is None:
            self.updated_at = self.created_at
