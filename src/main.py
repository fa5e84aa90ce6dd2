# src/main.py — v2
"""CLI entry point: analyze, describe, guidance commands.

Usage:
    altdecision analyze <image> [--context TEXT] [--format FMT]
    altdecision describe <image>
    altdecision guidance

<image> is either a data URL or a path to an image file.
"""

from __future__ import annotations

import argparse
import base64
import json
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from altdecision.config.settings import ConfigurationError, load_settings
from altdecision.version import __version__

logger = logging.getLogger(__name__)

# Mapping of extensions to MIME subtypes
_MIME_MAP: dict[str, str] = {
    ".png": "png",
    ".jpg": "jpeg",
    ".jpeg": "jpeg",
    ".gif": "gif",
    ".webp": "webp",
    ".svg": "svg+xml",
}

_FORMATS = ["png", "jpg", "jpeg", "gif", "webp"]


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    try:
        _setup_logging(args.verbose)
    except (ConfigurationError, ValidationError) as exc:
        print(f"Invalid configuration: {exc}", file=sys.stderr)
        return 1

    if not hasattr(args, "func"):
        parser.print_help()
        return 1

    try:
        return args.func(args)
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        return 130
    except Exception as exc:
        logger.error("Fatal error: %s", exc, exc_info=args.verbose)
        return 1


def _build_parser() -> argparse.ArgumentParser:
    """Build CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="altdecision",
        description=f"altdecision v{__version__}: W3C alt-text decision tree",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command")

    # --- analyze ---
    p_analyze = subparsers.add_parser(
        "analyze", help="Generate alt text for an image",
    )
    p_analyze.add_argument("image", help="Data URL or path to an image file")
    p_analyze.add_argument(
        "-c", "--context", default=None,
        help="Context or purpose of the image on the page",
    )
    p_analyze.add_argument(
        "-f", "--format", dest="image_format", choices=_FORMATS, default=None,
        help="Image format hint",
    )
    p_analyze.set_defaults(func=_cmd_analyze)

    # --- describe ---
    p_describe = subparsers.add_parser(
        "describe", help="Show the metadata and description derived from an image",
    )
    p_describe.add_argument("image", help="Data URL or path to an image file")
    p_describe.set_defaults(func=_cmd_describe)

    # --- guidance ---
    p_guidance = subparsers.add_parser(
        "guidance", help="Print the alt-text decision guide",
    )
    p_guidance.set_defaults(func=_cmd_guidance)

    return parser


def _cmd_analyze(args: argparse.Namespace) -> int:
    """Run the decision tree on one image and print the JSON response."""
    from altdecision.api.facade import analyze_image
    from altdecision.api.models import AnalysisRequest

    settings = load_settings()
    image_data = _resolve_image(args.image)
    if image_data is None:
        return 1

    request = AnalysisRequest(
        image_data=image_data,
        context=args.context,
        image_format=args.image_format,
    )
    response = analyze_image(request, settings)
    _print_json(response.to_wire(), settings.output_indent)
    return 0


def _cmd_describe(args: argparse.Namespace) -> int:
    """Print the heuristic metadata and description for an image."""
    from altdecision.api.errors import InvalidFormatError
    from altdecision.extraction.image_metadata import summarize

    image_data = _resolve_image(args.image)
    if image_data is None:
        return 1

    try:
        metadata, description = summarize(image_data)
    except InvalidFormatError as exc:
        logger.error("%s", exc)
        return 1

    payload = {
        "metadata": metadata.model_dump(by_alias=True),
        "description": description,
    }
    _print_json(payload, 2)
    return 0


def _cmd_guidance(args: argparse.Namespace) -> int:
    """Print the static guidance document."""
    from altdecision.api.guidance import get_guidance

    _print_json(get_guidance().model_dump(by_alias=True), 2)
    return 0


def _resolve_image(value: str) -> str | None:
    """Return a data URL, reading and encoding the file if given a path."""
    if value.startswith("data:"):
        return value

    path = Path(value)
    if not path.is_file():
        logger.error("File not found: %s", path)
        return None

    subtype = _MIME_MAP.get(path.suffix.lower())
    if subtype is None:
        logger.error("Unsupported image extension: %s", path.suffix)
        return None

    payload = base64.b64encode(path.read_bytes()).decode("ascii")
    return f"data:image/{subtype};base64,{payload}"


def _print_json(payload: object, indent: int) -> None:
    print(json.dumps(payload, indent=indent or None, ensure_ascii=False))


def _setup_logging(verbose: bool) -> None:
    """Configure logging for CLI usage from settings; --verbose forces DEBUG."""
    from altdecision.logging.logger import setup_logging

    settings = load_settings()
    setup_logging(
        level="DEBUG" if verbose else settings.log_level,
        log_format=settings.log_format,
        log_file=settings.log_file,
        rotation=settings.log_rotation,
        retention=settings.log_retention,
    )


if __name__ == "__main__":
    sys.exit(main())
