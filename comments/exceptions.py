"""
Comment Exceptions.
"""

from typing import Any, Optional

from sentiment import SentimentServiceError


class GiftNotFoundError(SentimentServiceError):
    """No gift with the requested id."""

    def __init__(
        self,
        gift_id: str,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(f"Gift not found: {gift_id}", details)
        self.gift_id = gift_id

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data["gift_id"] = self.gift_id
        return data
