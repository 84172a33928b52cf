"""
Sentiment Service API Routers.
"""
from . import analysis

__all__ = ["analysis"]
