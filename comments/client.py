"""
Sentiment Client - Caller side of the sentiment service.

SAFETY: Sentiment is a tag, not a gate. A comment is never rejected
because the sentiment service is down; analyze() falls back to
"neutral" and NEVER raises.
"""

import logging
from typing import Any, Optional

import httpx

from sentiment import SentimentLabel, UpstreamUnavailableError


logger = logging.getLogger(__name__)


DEFAULT_SENTIMENT = SentimentLabel.NEUTRAL.value

VALID_SENTIMENTS = frozenset(label.value for label in SentimentLabel)


class SentimentClient:
    """
    Async HTTP client for POST /sentiment.

    Args:
        base_url: Service root, e.g. http://localhost:3000
        timeout_seconds: Per-request timeout
        transport: Optional httpx transport (tests use MockTransport)
    """

    DEFAULT_TIMEOUT = 5.0

    def __init__(
        self,
        base_url: str = "http://localhost:3000",
        timeout_seconds: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout_seconds = timeout_seconds or self.DEFAULT_TIMEOUT
        self._transport = transport

        self._stats = {
            "total_requests": 0,
            "successful": 0,
            "fallbacks": 0,
        }

    @property
    def url(self) -> str:
        return f"{self.base_url}/sentiment"

    def get_stats(self) -> dict[str, Any]:
        return dict(self._stats)

    async def analyze(self, text: str) -> str:
        """
        Label a comment.

        Returns:
            'positive', 'negative' or 'neutral' (the fallback)
        """
        self._stats["total_requests"] += 1
        try:
            sentiment = await self._request(text)
        except UpstreamUnavailableError as e:
            logger.error(f"Error analyzing sentiment: {e.message}")
            self._stats["fallbacks"] += 1
            return DEFAULT_SENTIMENT

        self._stats["successful"] += 1
        return sentiment

    async def _request(self, text: str) -> str:
        """
        Call the service once.

        Raises:
            UpstreamUnavailableError: On any transport, status or payload problem
        """
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout_seconds,
                transport=self._transport,
            ) as client:
                response = await client.post(self.url, json={"sentence": text})
        except httpx.TimeoutException as e:
            raise UpstreamUnavailableError(
                f"Sentiment service timed out after {self.timeout_seconds}s",
                url=self.url,
            ) from e
        except httpx.HTTPError as e:
            raise UpstreamUnavailableError(
                f"Sentiment service unreachable: {e}",
                url=self.url,
            ) from e

        if response.status_code != 200:
            raise UpstreamUnavailableError(
                f"Sentiment service error: {response.status_code}",
                url=self.url,
                status_code=response.status_code,
            )

        try:
            data = response.json()
        except ValueError as e:
            raise UpstreamUnavailableError(
                "Sentiment service returned invalid JSON",
                url=self.url,
                status_code=response.status_code,
            ) from e

        sentiment = data.get("sentiment") if isinstance(data, dict) else None
        if sentiment not in VALID_SENTIMENTS:
            raise UpstreamUnavailableError(
                f"Sentiment service returned unknown label: {sentiment!r}",
                url=self.url,
                status_code=response.status_code,
            )

        return sentiment
