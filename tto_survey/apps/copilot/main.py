"""Run the copilot proxy under Uvicorn.

Usage:
    tto-copilot --host 0.0.0.0 --port 8000
"""

from __future__ import annotations

import argparse
from typing import Optional, Sequence

import uvicorn

APP_PATH = "tto_survey.apps.copilot.app:app"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Serve the TTO AI copilot proxy.")
    parser.add_argument("--host", default="127.0.0.1", help="Bind address (default: 127.0.0.1)")
    parser.add_argument("--port", type=int, default=8000, help="Bind port (default: 8000)")
    parser.add_argument("--reload", action="store_true", help="Restart on code changes")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = build_parser().parse_args(argv)
    uvicorn.run(APP_PATH, host=args.host, port=args.port, reload=args.reload, log_config=None)


if __name__ == "__main__":
    main()
