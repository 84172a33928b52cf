"""
Comment Stores - Where tagged comments are persisted.

The GiftLink backend keeps comments inside each gift document; this
interface mirrors that shape without binding to a database driver.
"""

from abc import ABC, abstractmethod
from typing import Iterable, Optional

from .models import Comment


class CommentStore(ABC):
    """Abstract comment persistence."""

    @abstractmethod
    async def append(self, gift_id: str, comment: Comment) -> bool:
        """Add a comment to a gift. Returns False if the gift is unknown."""
        pass

    @abstractmethod
    async def get_comments(self, gift_id: str) -> Optional[list[Comment]]:
        """Comments of a gift, oldest first. None if the gift is unknown."""
        pass


class InMemoryCommentStore(CommentStore):
    """Dictionary-backed store for tests and local runs."""

    def __init__(self, gift_ids: Iterable[str] = ()) -> None:
        self._comments: dict[str, list[Comment]] = {gift_id: [] for gift_id in gift_ids}

    def add_gift(self, gift_id: str) -> None:
        self._comments.setdefault(gift_id, [])

    async def append(self, gift_id: str, comment: Comment) -> bool:
        if gift_id not in self._comments:
            return False
        self._comments[gift_id].append(comment)
        return True

    async def get_comments(self, gift_id: str) -> Optional[list[Comment]]:
        comments = self._comments.get(gift_id)
        return list(comments) if comments is not None else None
