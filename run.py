#!/usr/bin/env python3
"""
Grammar Fix - development launcher

Starts the FastAPI backend with uvicorn.

Usage:
    python run.py                    # localhost:8000 with auto-reload
    python run.py --host 0.0.0.0     # Network accessible
    python run.py --port 9000        # Custom port
    python run.py --no-reload        # Disable auto-reload

Environment Variables:
    - OPENAI_API_KEY: Required for corrections (the feature reports itself
      unavailable without it)
    - LOG_LEVEL: Defaults to info
"""

import argparse
import subprocess
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parent
BACKEND_DIR = ROOT / "backend"

DEFAULT_HOST = "localhost"
DEFAULT_BACKEND_PORT = 8000


def create_argument_parser() -> argparse.ArgumentParser:
    """Create and configure the argument parser."""
    parser = argparse.ArgumentParser(
        description="Grammar Fix - development launcher",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--host",
        type=str,
        default=DEFAULT_HOST,
        choices=["localhost", "0.0.0.0"],
        help=f"Host to bind to (default: {DEFAULT_HOST}). Use 0.0.0.0 for network access",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=DEFAULT_BACKEND_PORT,
        help=f"Backend port (default: {DEFAULT_BACKEND_PORT})",
    )
    parser.add_argument(
        "--no-reload",
        action="store_true",
        help="Disable uvicorn auto-reload",
    )
    return parser


def build_backend_command(host: str, port: int, reload: bool = True) -> list[str]:
    """Build the uvicorn command line for the backend."""
    cmd = [
        sys.executable,
        "-m", "uvicorn",
        "grammarfix.main:app",
        "--port", str(port),
        "--host", host,
    ]
    if reload:
        cmd.append("--reload")
    return cmd


def main() -> int:
    args = create_argument_parser().parse_args()
    cmd = build_backend_command(args.host, args.port, reload=not args.no_reload)
    print(f"Starting backend on http://{args.host}:{args.port}...")
    try:
        return subprocess.run(cmd, cwd=str(BACKEND_DIR)).returncode
    except KeyboardInterrupt:
        return 0


if __name__ == "__main__":
    sys.exit(main())
