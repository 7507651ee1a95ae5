"""
freesound-downloader - Command Line Entry Point

Usage:
    python -m freesound_downloader search "wind chimes" --page-size 5
    python -m freesound_downloader advanced-search guitar --filter "type:wav" --sort score
    python -m freesound_downloader download 12345 ./sound.wav

Or via the installed command:
    freesound-downloader ...

Exit codes: 0 success, 1 operation failed, 2 configuration error.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from .application.freesound import FreesoundClient, DEFAULT_PAGE, DEFAULT_PAGE_SIZE
from .core.config import FreesoundSettings
from .domain.exceptions import FreesoundConfigError
from .domain.models import FreesoundResult
from .runtime.bootstrap import configure_logging

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_CONFIG = 2


def _positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be a positive integer: {value}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="freesound-downloader",
        description="Search and download sounds from Freesound.org",
    )
    parser.add_argument("--token", help="API token (default: FREESOUND_API_KEY)")
    parser.add_argument("--config", help="JSON settings file")
    parser.add_argument("--timeout", type=float, help="Request timeout in seconds")
    parser.add_argument("--log-file", help="Also write DEBUG logs to this file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")

    sub = parser.add_subparsers(dest="command", required=True)

    search = sub.add_parser("search", help="Simple text search")
    search.add_argument("query")
    search.add_argument("--page", type=_positive_int, default=DEFAULT_PAGE)
    search.add_argument("--page-size", type=_positive_int, default=DEFAULT_PAGE_SIZE)

    advanced = sub.add_parser("advanced-search", help="Search with filter, sort and weights")
    advanced.add_argument("query")
    advanced.add_argument("--filter", help='e.g. "duration:[0 TO 30] type:wav"')
    advanced.add_argument("--sort", help='e.g. "score" or "num_downloads_desc"')
    advanced.add_argument("--page", type=_positive_int, default=DEFAULT_PAGE)
    advanced.add_argument("--page-size", type=_positive_int, default=DEFAULT_PAGE_SIZE)
    advanced.add_argument("--group-by-pack", action="store_true")
    advanced.add_argument("--weights", help='e.g. "tag:4,description:3"')

    download = sub.add_parser("download", help="Download a sound by id")
    download.add_argument("sound_id", type=_positive_int)
    download.add_argument("output")

    return parser


def _load_settings(args: argparse.Namespace) -> FreesoundSettings:
    settings = FreesoundSettings.load(args.config) if args.config else FreesoundSettings()
    # flags > environment > config file
    settings = FreesoundSettings.from_env(base=settings)
    return settings.merged_with(api_key=args.token, timeout=args.timeout)


def _run_command(client: FreesoundClient, args: argparse.Namespace) -> FreesoundResult:
    if args.command == "search":
        return client.search_sounds(args.query, page=args.page, page_size=args.page_size)
    if args.command == "advanced-search":
        return client.advanced_search(
            args.query,
            filter=args.filter,
            sort=args.sort,
            page=args.page,
            page_size=args.page_size,
            group_by_pack=args.group_by_pack,
            weights=args.weights,
        )
    return client.download_sound(args.sound_id, args.output)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    Main entry point.

    Returns:
        int: Exit code
    """
    args = build_parser().parse_args(argv)
    configure_logging(logging.DEBUG if args.verbose else logging.WARNING, args.log_file)

    try:
        client = FreesoundClient.from_settings(_load_settings(args))
    except (FreesoundConfigError, ValueError, OSError) as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return EXIT_CONFIG
    logger.debug(f"Using {client!r}")

    try:
        result = _run_command(client, args)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_FAILED

    if not result:
        print(f"Error: {result.error}", file=sys.stderr)
        return EXIT_FAILED

    print(result.value)
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
