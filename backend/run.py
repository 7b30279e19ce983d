#!/usr/bin/env python3
"""
Entry point for running the Personal Finance Tracker server.

Usage:
    python run.py [--port PORT] [--host HOST] [--reload] [--qr]
"""

import argparse
import qrcode
import uvicorn

from finance_tracker.config import get_settings
from finance_tracker.logging_config import configure_logging


def print_qr_code(url: str) -> None:
    """Print a QR code to the terminal."""
    qr = qrcode.QRCode(
        version=1,
        error_correction=qrcode.constants.ERROR_CORRECT_L,
        box_size=1,
        border=1,
    )
    qr.add_data(url)
    qr.make(fit=True)

    # Print QR code using ASCII
    qr.print_ascii(invert=True)


def main():
    parser = argparse.ArgumentParser(description="Personal Finance Tracker")
    parser.add_argument("--port", type=int, default=8000, help="Port to run on")
    parser.add_argument("--host", default="127.0.0.1", help="Host to bind to")
    parser.add_argument("--reload", action="store_true", help="Reload on code changes")
    parser.add_argument("--qr", action="store_true", help="Print a QR code for the API docs URL")
    args = parser.parse_args()

    settings = get_settings()
    configure_logging(settings.LOG_LEVEL)

    url = f"http://{args.host}:{args.port}"

    print("\n" + "=" * 50)
    print("  Personal Finance Tracker")
    print("=" * 50)
    print(f"\n  API:  {url}/api")
    print(f"  Docs: {url}/docs\n")

    if args.qr:
        print_qr_code(f"{url}/docs")

    print("\n  Press Ctrl+C to stop the server\n")
    print("=" * 50 + "\n")

    uvicorn.run(
        "finance_tracker.main:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level=settings.LOG_LEVEL.lower()
    )


if __name__ == "__main__":
    main()
