"""
Comment Data Models.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class Comment:
    """A comment posted on a gift, tagged with its sentiment label."""
    author: str
    comment: str
    sentiment: str
    created_at: datetime = field(default_factory=_utc_now)

    def to_dict(self) -> dict[str, Any]:
        return {
            "author": self.author,
            "comment": self.comment,
            "sentiment": self.sentiment,
            "createdAt": self.created_at.isoformat(),
        }
