#!/usr/bin/env python
"""
Run the Notebox API server.

Usage:
    uv run python run_api.py
    uv run python run_api.py --reload             # Development mode
    uv run python run_api.py --log-level debug
"""

import argparse
import sys
import uvicorn

from shared.config import get_settings
from shared.exceptions import ConfigurationError


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the Notebox API server")
    parser.add_argument("--reload", action="store_true", help="Restart on code changes")
    parser.add_argument("--host", type=str, help="Interface to bind (default from HOST)")
    parser.add_argument("--port", type=int, help="Port to bind (default from PORT)")
    parser.add_argument("--log-level", type=str, help="Log level (default from LOG_LEVEL)")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    settings = get_settings()

    try:
        settings.require_jwt_secret()
    except ConfigurationError as e:
        print(f"Cannot start: {e.message}", file=sys.stderr)
        sys.exit(2)

    uvicorn.run(
        "api:app",
        host=args.host or settings.host,
        port=args.port or settings.port,
        reload=args.reload or settings.reload,
        log_level=(args.log_level or settings.log_level).lower(),
    )


if __name__ == "__main__":
    main()
