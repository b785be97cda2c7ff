"""Command-line entry point."""
from __future__ import annotations

import argparse
import logging
import sys
from typing import NoReturn, Sequence

from .config import settings
from .logging_conf import configure_logging
from .services.errors import ServiceError, err_invalid_arguments
from .services.generator import QRIconGenerator

logger = logging.getLogger("qricon.cli")

EXAMPLE = "Example: qricon https://example.com logo.png output.png"


class _ArgumentParser(argparse.ArgumentParser):
    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stderr)
        print(EXAMPLE, file=sys.stderr)
        raise err_invalid_arguments(message)


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="qricon",
        description="Render a QR code with an icon in its centre.",
        epilog=EXAMPLE,
    )
    parser.add_argument("payload", help="Text or URL to encode")
    parser.add_argument("icon_path", help="Image placed in the middle of the code")
    parser.add_argument("output_path", help="Destination file; the extension selects the format")
    return parser


def parse_arguments(argv: list[str]) -> argparse.Namespace:
    """Parse the three positionals; any payload text is accepted, including a leading dash."""

    parser = build_parser()
    if len(argv) == 3:
        return parser.parse_args(["--", *argv])
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    configure_logging(settings)

    try:
        args = parse_arguments(sys.argv[1:] if argv is None else list(argv))
        QRIconGenerator().generate(args.payload, args.icon_path, args.output_path)
    except ServiceError as exc:
        print(f"Error: {exc.message}", file=sys.stderr)
        return exc.exit_code
    except Exception as exc:
        logger.exception("unhandled exception")
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print(f"QR code with icon generated successfully: {args.output_path}")
    return 0
