"""
Sentiment Service Exceptions - Custom error hierarchy.

The classifier itself only raises ClassifierFaultError.
InvalidInputError is raised by the HTTP layer, UpstreamUnavailableError
by callers of the HTTP service; neither crosses its own boundary.
"""

from datetime import datetime, timezone
from typing import Any, Optional


# Longest input preview kept on an error for diagnosis
MAX_INPUT_PREVIEW = 100


class SentimentServiceError(Exception):
    """Base exception for all sentiment service errors."""

    def __init__(
        self,
        message: str,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        self.message = message
        self.details = details or {}
        self.timestamp = datetime.now(timezone.utc)
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "details": self.details,
            "timestamp": self.timestamp.isoformat(),
        }


class InvalidInputError(SentimentServiceError):
    """Request is missing the text to analyse."""

    def __init__(
        self,
        message: str = "No sentence provided",
        field_name: str = "sentence",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(message, details)
        self.field_name = field_name

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data["field_name"] = self.field_name
        return data


class ClassifierFaultError(SentimentServiceError):
    """Unexpected failure during lexicon lookup or pattern evaluation."""

    def __init__(
        self,
        message: str,
        text: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(message, details)
        self.text_preview = text[:MAX_INPUT_PREVIEW] if text else None

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data["text_preview"] = self.text_preview
        return data


class UpstreamUnavailableError(SentimentServiceError):
    """The sentiment service could not be reached or answered badly."""

    def __init__(
        self,
        message: str,
        url: Optional[str] = None,
        status_code: Optional[int] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(message, details)
        self.url = url
        self.status_code = status_code

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data.update({
            "url": self.url,
            "status_code": self.status_code,
        })
        return data
