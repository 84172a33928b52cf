"""
Comments - GiftLink comment storage with sentiment tagging.

Usage:
    from comments import CommentService, InMemoryCommentStore, SentimentClient

    service = CommentService(
        store=InMemoryCommentStore(gift_ids=["1"]),
        client=SentimentClient("http://localhost:3000"),
    )
    comment = await service.add_comment("1", "alice", "Love it, thanks!")

If the sentiment service is unreachable the comment is still stored,
labelled "neutral".
"""

from .client import DEFAULT_SENTIMENT, SentimentClient
from .exceptions import GiftNotFoundError
from .models import Comment
from .service import CommentService
from .store import CommentStore, InMemoryCommentStore


__all__ = [
    "SentimentClient",
    "DEFAULT_SENTIMENT",
    "CommentService",
    "CommentStore",
    "InMemoryCommentStore",
    "Comment",
    "GiftNotFoundError",
]
