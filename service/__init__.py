"""
Sentiment Service Package.

HTTP wrapper around the sentiment classifier, called by the GiftLink
backend whenever a comment is posted.

Modules:
- main: FastAPI application factory
- routers/: POST /sentiment and POST /sentiment/test
- schemas: Request and response models
"""

from .main import create_app

__all__ = ["create_app"]
