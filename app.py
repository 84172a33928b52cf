#!/usr/bin/env python3
"""
GiftLink Sentiment Service - Main Application Entry Point.

============================================================
USAGE
============================================================
Direct execution:
    python app.py --port 3000

Environment-based configuration:
    PORT=3000 LOG_LEVEL=DEBUG python app.py

The GiftLink backend reaches the service through
SENTIMENT_SERVICE_URL (default http://localhost:3000).

============================================================
"""

import argparse
import logging
import sys
from typing import List, Optional

import uvicorn

from sentiment import ServiceConfig, setup_logging
from sentiment.config import VALID_LOG_LEVELS
from service.main import create_app


logger = logging.getLogger("app")


# ============================================================
# CLI ARGUMENT PARSER
# ============================================================

def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="giftlink-sentiment",
        description="Comment sentiment service for the GiftLink marketplace",
    )

    parser.add_argument(
        "--host",
        type=str,
        default=None,
        help="Interface to bind (env: HOST, default 0.0.0.0)",
    )

    parser.add_argument(
        "--port",
        type=int,
        default=None,
        help="Port to listen on (env: PORT, default 3000)",
    )

    parser.add_argument(
        "--log-level",
        type=str,
        choices=VALID_LOG_LEVELS,
        default=None,
        help="Logging level (env: LOG_LEVEL, default INFO)",
    )

    parser.add_argument(
        "--normalize",
        action="store_true",
        help="Divide the lexicon score by the token count (env: SENTIMENT_NORMALIZE)",
    )

    return parser


def build_config(args: argparse.Namespace) -> ServiceConfig:
    """Environment configuration overridden by CLI arguments."""
    config = ServiceConfig.from_env()

    if args.host is not None:
        config.host = args.host
    if args.port is not None:
        config.port = args.port
    if args.log_level is not None:
        config.log_level = args.log_level
    if args.normalize:
        config.normalize_by_token_count = True

    return config


# ============================================================
# MAIN
# ============================================================

def main(argv: Optional[List[str]] = None) -> int:
    """Run the sentiment service."""
    parser = create_parser()
    args = parser.parse_args(argv)
    config = build_config(args)

    errors = config.validate()
    if errors:
        for error in errors:
            print(f"Configuration error: {error}", file=sys.stderr)
        return 1

    setup_logging(config.log_level)
    logger.info(f"Server running on port {config.port}")

    uvicorn.run(
        create_app(config=config),
        host=config.host,
        port=config.port,
        log_level=config.log_level.lower(),
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
