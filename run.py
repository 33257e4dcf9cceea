#!/usr/bin/env python3
"""
HoldemSync - Relay Server Startup Script

Usage:
    python run.py [--host HOST] [--port PORT] [--reload]
                  [--buy-in N] [--small-blind N] [--big-blind N]
"""

import argparse
import os
import uvicorn

from holdemsync.core.rules import DEFAULT_BUY_IN, DEFAULT_SMALL_BLIND, DEFAULT_BIG_BLIND
from holdemsync.server.config import BUY_IN_ENV, SMALL_BLIND_ENV, BIG_BLIND_ENV


def main():
    parser = argparse.ArgumentParser(description="HoldemSync Relay Server")
    parser.add_argument("--host", default="0.0.0.0", help="Host to bind to")
    parser.add_argument("--port", type=int, default=8000, help="Port to bind to")
    parser.add_argument("--reload", action="store_true", help="Enable auto-reload")
    parser.add_argument("--buy-in", type=int, default=DEFAULT_BUY_IN, help="Chips per new player")
    parser.add_argument("--small-blind", type=int, default=DEFAULT_SMALL_BLIND, help="Small blind")
    parser.add_argument("--big-blind", type=int, default=DEFAULT_BIG_BLIND, help="Big blind")
    args = parser.parse_args()

    # The app reads its table defaults from the environment.
    os.environ[BUY_IN_ENV] = str(args.buy_in)
    os.environ[SMALL_BLIND_ENV] = str(args.small_blind)
    os.environ[BIG_BLIND_ENV] = str(args.big_blind)

    uvicorn.run(
        "holdemsync.server.app:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
    )


if __name__ == "__main__":
    main()
