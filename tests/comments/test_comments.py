"""
Tests for the comment-side sentiment caller.

============================================================
PURPOSE
============================================================
The comment write path must never depend on sentiment
availability.

TEST PRINCIPLES:
- Every upstream failure degrades to "neutral"
- SentimentClient.analyze NEVER raises
- Comments are always stored for known gifts

============================================================
"""

import json

import httpx
import pytest
from unittest.mock import AsyncMock

from comments import (
    Comment,
    CommentService,
    GiftNotFoundError,
    InMemoryCommentStore,
    SentimentClient,
)
from sentiment import SentimentClassifier, ServiceConfig, StaticLexicon
from service import create_app


BASE_URL = "http://sentiment.test"


def make_client(handler) -> SentimentClient:
    return SentimentClient(BASE_URL, timeout_seconds=1.0, transport=httpx.MockTransport(handler))


# ============================================================
# FIXTURES
# ============================================================

@pytest.fixture
def store():
    return InMemoryCommentStore(gift_ids=["872"])


@pytest.fixture
def live_client():
    """Client wired to a real app instance through ASGI."""
    classifier = SentimentClassifier(StaticLexicon({}))
    app = create_app(classifier=classifier, config=ServiceConfig())
    return SentimentClient(BASE_URL, transport=httpx.ASGITransport(app=app))


# ============================================================
# TEST: SentimentClient
# ============================================================

class TestSentimentClient:

    @pytest.mark.asyncio
    async def test_returns_service_label(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["url"] = str(request.url)
            seen["body"] = json.loads(request.content)
            return httpx.Response(200, json={"sentimentScore": -0.5, "sentiment": "negative"})

        client = make_client(handler)

        assert await client.analyze("too small") == "negative"
        assert seen["url"] == f"{BASE_URL}/sentiment"
        assert seen["body"] == {"sentence": "too small"}
        assert client.get_stats()["successful"] == 1

    @pytest.mark.asyncio
    async def test_timeout_falls_back_to_neutral(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("timed out", request=request)

        client = make_client(handler)

        assert await client.analyze("I love it") == "neutral"
        assert client.get_stats()["fallbacks"] == 1

    @pytest.mark.asyncio
    async def test_connection_refused_falls_back_to_neutral(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        assert await make_client(handler).analyze("I love it") == "neutral"

    @pytest.mark.asyncio
    async def test_server_error_falls_back_to_neutral(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(500, json={"message": "Error performing sentiment analysis"})

        assert await make_client(handler).analyze("I hate it") == "neutral"

    @pytest.mark.asyncio
    async def test_bad_request_falls_back_to_neutral(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(400, json={"error": "No sentence provided"})

        assert await make_client(handler).analyze("") == "neutral"

    @pytest.mark.asyncio
    async def test_malformed_json_falls_back_to_neutral(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, content=b"<html>oops</html>")

        assert await make_client(handler).analyze("great") == "neutral"

    @pytest.mark.asyncio
    async def test_unknown_label_falls_back_to_neutral(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json={"sentiment": "ecstatic"})

        assert await make_client(handler).analyze("great") == "neutral"

    @pytest.mark.asyncio
    async def test_against_real_app(self, live_client):
        assert await live_client.analyze("it's too small for my room") == "negative"
        assert await live_client.analyze("This is amazing! I love it!") == "positive"
        assert await live_client.analyze("Is this still available?") == "neutral"

    def test_trailing_slash_stripped(self):
        client = SentimentClient("http://localhost:3000/")

        assert client.url == "http://localhost:3000/sentiment"


# ============================================================
# TEST: CommentService
# ============================================================

class TestCommentService:

    @pytest.mark.asyncio
    async def test_comment_stored_with_label(self, store):
        client = AsyncMock(spec=SentimentClient)
        client.analyze.return_value = "positive"
        service = CommentService(store, client)

        comment = await service.add_comment("872", "alice", "Love it, thanks!")

        assert comment.sentiment == "positive"
        assert await service.list_comments("872") == [comment]
        client.analyze.assert_awaited_once_with("Love it, thanks!")

    @pytest.mark.asyncio
    async def test_comment_stored_when_service_down(self, store):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        service = CommentService(store, make_client(handler))

        comment = await service.add_comment("872", "bob", "I hate this")

        assert comment.sentiment == "neutral"
        assert len(await service.list_comments("872")) == 1

    @pytest.mark.asyncio
    @pytest.mark.parametrize("author,text", [("", "nice"), ("alice", ""), (None, "nice")])
    async def test_author_and_comment_required(self, store, author, text):
        client = AsyncMock(spec=SentimentClient)
        service = CommentService(store, client)

        with pytest.raises(ValueError):
            await service.add_comment("872", author, text)

        client.analyze.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_unknown_gift(self, store):
        client = AsyncMock(spec=SentimentClient)
        client.analyze.return_value = "neutral"
        service = CommentService(store, client)

        with pytest.raises(GiftNotFoundError) as exc_info:
            await service.add_comment("missing", "alice", "hello")

        assert exc_info.value.gift_id == "missing"

        with pytest.raises(GiftNotFoundError):
            await service.list_comments("missing")

    @pytest.mark.asyncio
    async def test_no_comments_yet(self, store):
        service = CommentService(store, AsyncMock(spec=SentimentClient))

        assert await service.list_comments("872") == []


class TestCommentModel:

    def test_to_dict(self):
        comment = Comment(author="alice", comment="thanks", sentiment="positive")

        data = comment.to_dict()

        assert data["author"] == "alice"
        assert data["sentiment"] == "positive"
        assert data["createdAt"].endswith("+00:00")
