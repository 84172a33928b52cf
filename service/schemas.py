"""
Pydantic schemas for the Sentiment Service API.

Wire format uses camelCase keys, as the GiftLink backend expects.
"""
from typing import List, Optional, Dict

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

# =======================
# REQUESTS
# =======================

class SentimentRequest(BaseModel):
    sentence: Optional[str] = None

# =======================
# RESPONSES
# =======================

class SentimentDebug(CamelModel):
    base_score: float
    pattern_adjustment: float

class SentimentResponse(CamelModel):
    sentiment_score: float
    sentiment: str  # positive, negative, neutral
    debug: SentimentDebug

class MatchedPattern(CamelModel):
    pattern: str
    polarity: str  # negative, positive
    weight: float

class SentimentTestResponse(CamelModel):
    sentence: str
    base_score: float
    pattern_adjustment: float
    final_score: float
    sentiment: str
    matched_patterns: List[MatchedPattern]
    threshold: Dict[str, str]

# =======================
# ERRORS
# =======================

class ErrorResponse(BaseModel):
    error: str

class MessageResponse(BaseModel):
    message: str
