#!/usr/bin/env python3
"""Show how an image request would be rewritten for Thumbor.

Usage:
  python scripts/image_rewrite.py http://example.com/logo.png --size 200x100 \
    --host http://thumbor.local/
  python scripts/image_rewrite.py http://example.com/logo.png --always --json

Notes:
- Loads .env from the nearest parent directory (python-dotenv).
- THUMBOR_HOST / THUMBOR_SECURITY_KEY are used unless --host / --key are given.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

from image_rewrite_api import rewrite
from image_rewrite_api.core.receipts import build_receipt, write_receipt
from image_rewrite_api.core.utils import parse_size


def _find_repo_dotenv() -> Path | None:
    current = Path(__file__).resolve()
    for parent in (current.parent, *current.parents):
        dotenv_path = parent / ".env"
        if dotenv_path.exists():
            return dotenv_path
    return None


def _load_repo_dotenv() -> Path | None:
    dotenv_path = _find_repo_dotenv()
    if dotenv_path is not None:
        load_dotenv(dotenv_path=dotenv_path, override=False)
    return dotenv_path


def _configure_callback(filters: list[str]):
    if not filters:
        return None

    def configure(builder) -> None:
        builder.filter(*filters)

    return configure


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Rewrite an image request to use Thumbor.")
    parser.add_argument("uri", help="Image URI to request")
    parser.add_argument("--size", default=None, help="Target size, e.g. 200x100")
    group = parser.add_mutually_exclusive_group()
    group.add_argument("--center-inside", action="store_true", help="Fit within the target size")
    group.add_argument("--center-crop", action="store_true", help="Crop to fill the target size")
    parser.add_argument(
        "--always",
        action="store_true",
        default=None,
        help="Rewrite even when no size is set.",
    )
    parser.add_argument("--host", default=None, help="Thumbor host (default: $THUMBOR_HOST)")
    parser.add_argument("--key", default=None, help="Thumbor security key (default: $THUMBOR_SECURITY_KEY)")
    parser.add_argument(
        "--format-capability",
        default=None,
        choices=["always", "never", "pillow"],
        help="Whether to request WebP output (default: pillow)",
    )
    parser.add_argument(
        "--filter",
        action="append",
        default=[],
        help="Extra Thumbor filter, e.g. quality(80) (repeatable)",
    )
    parser.add_argument("--json", action="store_true", help="Print a JSON receipt instead of the URI.")
    parser.add_argument("--receipt", default=None, help="Write a JSON receipt to this path.")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging.")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    _load_repo_dotenv()

    width = height = None
    if args.size:
        try:
            width, height = parse_size(args.size)
        except ValueError as exc:
            parser.error(str(exc))

    try:
        outcome = rewrite(
            uri=args.uri,
            width=width,
            height=height,
            center_inside=args.center_inside,
            center_crop=args.center_crop,
            host=args.host,
            key=args.key,
            always_transform=args.always,
            format_capability=args.format_capability,
            configure=_configure_callback(args.filter),
        )
    except (ValueError, RuntimeError) as exc:
        print(f"Rewrite failed: {exc}", file=sys.stderr)
        return 1

    receipt = build_receipt(outcome)
    if args.receipt:
        write_receipt(Path(args.receipt).expanduser(), receipt)
    if args.json:
        print(json.dumps(receipt, indent=2))
    else:
        print(outcome.request.uri)
        for warning in outcome.warnings:
            print(f"note: {warning}", file=sys.stderr)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
