"""Command line entrypoint for scanning a single page."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv

from clearfind import InvalidURLError, ScanError, configure_logging, scan_url
from clearfind.config import load_scan_config
from clearfind.logging_config import resolve_level


def _positive_float(value: str) -> float:
    try:
        parsed = float(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"Invalid timeout '{value}'.") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError(f"Timeout must be positive, got '{value}'.")
    return parsed


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Analyse a page for SEO and AEO signals")
    parser.add_argument("url", help="Absolute http(s) URL of the page to scan.")
    parser.add_argument("--log-level", default="WARNING", help="Python logging level (default: WARNING)")
    parser.add_argument(
        "--timeout",
        type=_positive_float,
        help="Request timeout in seconds. Overrides CLEARFIND_TIMEOUT.",
    )
    parser.add_argument(
        "--output",
        type=Path,
        help="Write the JSON result to this file instead of stdout.",
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    load_dotenv()
    args = parse_args(argv)
    configure_logging(
        level=resolve_level(args.log_level, logging.WARNING),
        stream=logging.StreamHandler(sys.stderr),
    )

    config = load_scan_config()
    if args.timeout is not None:
        config.timeout = args.timeout

    try:
        result = scan_url(args.url, config=config)
    except InvalidURLError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    except ScanError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    if args.output:
        result.to_json(args.output)
    else:
        print(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
