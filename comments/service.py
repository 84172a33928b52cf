"""
Comment Service - Tags and persists gift comments.

============================================================
DESIGN PRINCIPLES
============================================================
- The write path never waits on sentiment availability
- A failed classification stores "neutral"
- Validation happens before the sentiment call

============================================================
"""

import logging

from .client import SentimentClient
from .exceptions import GiftNotFoundError
from .models import Comment
from .store import CommentStore


logger = logging.getLogger(__name__)


class CommentService:
    """
    Adds comments to gifts with a sentiment label.

    Args:
        store: Comment persistence
        client: Sentiment service client
    """

    def __init__(
        self,
        store: CommentStore,
        client: SentimentClient,
    ) -> None:
        self._store = store
        self._client = client

    async def add_comment(
        self,
        gift_id: str,
        author: str,
        comment: str,
    ) -> Comment:
        """
        Label and store a new comment.

        Raises:
            ValueError: If author or comment is empty
            GiftNotFoundError: If the gift does not exist
        """
        if not author or not comment:
            raise ValueError("Author and comment are required")

        sentiment = await self._client.analyze(comment)

        new_comment = Comment(
            author=author,
            comment=comment,
            sentiment=sentiment,
        )

        if not await self._store.append(gift_id, new_comment):
            raise GiftNotFoundError(gift_id)

        logger.info(f"Comment by {author} on gift {gift_id} stored as {sentiment}")
        return new_comment

    async def list_comments(self, gift_id: str) -> list[Comment]:
        """
        Comments for a gift.

        Raises:
            GiftNotFoundError: If the gift does not exist
        """
        comments = await self._store.get_comments(gift_id)
        if comments is None:
            raise GiftNotFoundError(gift_id)
        return comments
