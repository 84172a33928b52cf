from typing import Optional
import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from sentiment import (
    ClassifierFaultError,
    InvalidInputError,
    SentimentClassifier,
    threshold_description,
)
from service.schemas import (
    ErrorResponse,
    MatchedPattern,
    MessageResponse,
    SentimentDebug,
    SentimentRequest,
    SentimentResponse,
    SentimentTestResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/sentiment", tags=["Sentiment"])

ANALYSIS_ERROR_MESSAGE = "Error performing sentiment analysis"


def get_classifier(request: Request) -> SentimentClassifier:
    return request.app.state.classifier


def _require_sentence(payload: Optional[SentimentRequest]) -> str:
    if payload is None or not payload.sentence or not payload.sentence.strip():
        raise InvalidInputError()
    return payload.sentence


@router.post(
    "",
    response_model=SentimentResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": MessageResponse}},
)
def analyze_sentiment(
    payload: Optional[SentimentRequest] = None,
    classifier: SentimentClassifier = Depends(get_classifier),
):
    """
    Classify a comment as positive, negative or neutral.
    """
    sentence = _require_sentence(payload)

    try:
        result = classifier.classify(sentence)
    except ClassifierFaultError as e:
        logger.error(f"{ANALYSIS_ERROR_MESSAGE}: {e.message} (input: {e.text_preview!r})")
        return JSONResponse(status_code=500, content={"message": ANALYSIS_ERROR_MESSAGE})

    logger.info(f'Analyzing: "{sentence}"')
    logger.info(f"Base score: {result.base_score}, Pattern adjustment: {result.pattern_adjustment}")
    logger.info(f"Final score: {result.final_score}, Sentiment: {result.sentiment}")

    return SentimentResponse(
        sentiment_score=result.final_score,
        sentiment=result.sentiment,
        debug=SentimentDebug(
            base_score=result.base_score,
            pattern_adjustment=result.pattern_adjustment,
        ),
    )


@router.post(
    "/test",
    response_model=SentimentTestResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def explain_sentiment(
    payload: Optional[SentimentRequest] = None,
    classifier: SentimentClassifier = Depends(get_classifier),
):
    """
    Full score breakdown for a sentence, for diagnosing labels.
    """
    sentence = _require_sentence(payload)

    try:
        result = classifier.classify(sentence)
    except ClassifierFaultError as e:
        logger.error(f"Error in test endpoint: {e.message} (input: {e.text_preview!r})")
        return JSONResponse(status_code=500, content={"error": e.message})

    return SentimentTestResponse(
        sentence=sentence,
        base_score=result.base_score,
        pattern_adjustment=result.pattern_adjustment,
        final_score=result.final_score,
        sentiment=result.sentiment,
        matched_patterns=[
            MatchedPattern(
                pattern=m.pattern,
                polarity=m.polarity.value,
                weight=m.weight,
            )
            for m in result.matches
        ],
        threshold=threshold_description(),
    )
