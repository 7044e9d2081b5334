#!/usr/bin/env python3
"""
minipoker - Server Startup Script

Serves the poker mini-game over HTTP (one endpoint per round action:
/init_round, /draw, /bet, /fold, /deal_flop, /deal_turn, /deal_river,
/state, /winner) and pushes round state to clients joined on /ws.

Usage:
    python run.py [--host HOST] [--port PORT] [--reload]
"""

import argparse
import uvicorn


def main():
    parser = argparse.ArgumentParser(
        description="Run the minipoker round server (HTTP actions plus WebSocket state push)"
    )
    parser.add_argument("--host", default="0.0.0.0", help="Host to bind to")
    parser.add_argument("--port", type=int, default=8000, help="Port to bind to")
    parser.add_argument("--reload", action="store_true", help="Enable auto-reload")
    args = parser.parse_args()

    uvicorn.run(
        "minipoker.server.app:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
    )


if __name__ == "__main__":
    main()
