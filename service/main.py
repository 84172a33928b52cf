import logging
import time
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from sentiment import (
    AfinnLexicon,
    InvalidInputError,
    SentimentClassifier,
    ServiceConfig,
)
from service.routers import analysis

logger = logging.getLogger(__name__)


def build_classifier(config: ServiceConfig) -> SentimentClassifier:
    """Load the lexicon once and wrap it in a classifier."""
    lexicon = AfinnLexicon(
        language=config.lexicon_language,
        normalize_by_token_count=config.normalize_by_token_count,
    )
    return SentimentClassifier(lexicon)


def create_app(
    classifier: Optional[SentimentClassifier] = None,
    config: Optional[ServiceConfig] = None,
) -> FastAPI:
    """
    Build the sentiment service.

    The classifier is created once here and shared by every request.
    """
    if config is None:
        config = ServiceConfig.from_env()
    if classifier is None:
        classifier = build_classifier(config)

    app = FastAPI(
        title="GiftLink Sentiment API",
        description="Labels marketplace comments as positive, negative or neutral.",
        version="1.0.0",
    )
    app.state.classifier = classifier
    app.state.config = config

    # CORS (frontend and backend run on other ports)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - start) * 1000
        logger.info(
            f"{request.method} {request.url.path} -> {response.status_code} ({elapsed_ms:.1f}ms)"
        )
        return response

    @app.exception_handler(InvalidInputError)
    async def invalid_input_handler(request: Request, exc: InvalidInputError):
        logger.error(exc.message)
        return JSONResponse(status_code=400, content={"error": exc.message})

    # Malformed bodies count as a missing sentence
    @app.exception_handler(RequestValidationError)
    async def validation_handler(request: Request, exc: RequestValidationError):
        return await invalid_input_handler(request, InvalidInputError())

    app.include_router(analysis.router)

    @app.get("/")
    def root():
        return {"status": "ok", "message": "Sentiment API is running"}

    return app


if __name__ == "__main__":
    import uvicorn
    from sentiment import setup_logging

    config = ServiceConfig.from_env()
    setup_logging(config.log_level)
    uvicorn.run(create_app(config=config), host=config.host, port=config.port)
