"""CLI entrypoint for skillindex."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from skillindex import __version__
from skillindex.cli.handlers import handle_build, handle_serve, handle_validate_config
from skillindex.constants.branding import CLI_DESCRIPTION
from skillindex.constants.validation import PORT_MAX, PORT_MIN


def build_parser() -> argparse.ArgumentParser:
    """Build top-level CLI parser."""
    parser = argparse.ArgumentParser(
        prog="skillindex",
        description=CLI_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command", required=True)

    build = subparsers.add_parser("build", help="Write the skills index JSON")
    _add_common_arguments(build)
    build.add_argument(
        "-o",
        "--output",
        default=None,
        help="Output file relative to root, or '-' for stdout (default: <skills-dir>/index.json)",
    )
    build.add_argument(
        "--indent",
        type=_non_negative_int,
        default=None,
        help="Pretty-print with this indent (default: compact)",
    )

    serve = subparsers.add_parser("serve", help="Serve the skills index over HTTP")
    _add_common_arguments(serve)
    serve.add_argument("--host", default=None, help="Bind address (default: 127.0.0.1)")
    serve.add_argument("--port", type=_port, default=None, help="Bind port (default: 8000)")

    validate = subparsers.add_parser("validate-config", help="Validate configuration without building")
    validate.add_argument("-r", "--root", type=Path, default=Path("."), help="Project root path")
    validate.add_argument("-c", "--config", type=Path, help="Explicit config file")

    return parser


def _add_common_arguments(subparser: argparse.ArgumentParser) -> None:
    subparser.add_argument("-r", "--root", type=Path, default=Path("."), help="Project root path")
    subparser.add_argument(
        "-s",
        "--skills-dir",
        default=None,
        help="Skills directory relative to root (default: public/.well-known/skills)",
    )
    subparser.add_argument("-c", "--config", type=Path, help="Explicit config file")
    subparser.add_argument(
        "--fail-on-unreadable",
        action="store_true",
        help="Fail instead of skipping bundles whose files cannot be listed",
    )
    subparser.add_argument("-v", "--verbose", action="store_true", help="Show per-bundle diagnostics")


def _non_negative_int(raw: str) -> int:
    value = _parse_int(raw)
    if value < 0:
        raise argparse.ArgumentTypeError(f"must be a non-negative integer, got {value}")
    return value


def _port(raw: str) -> int:
    value = _parse_int(raw)
    if not PORT_MIN <= value <= PORT_MAX:
        raise argparse.ArgumentTypeError(f"must be between {PORT_MIN} and {PORT_MAX}, got {value}")
    return value


def _parse_int(raw: str) -> int:
    try:
        return int(raw)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {raw!r}") from None


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)

    level = logging.DEBUG if getattr(args, "verbose", False) else logging.INFO
    logging.basicConfig(level=level, format="%(levelname)s %(message)s")

    if args.command == "build":
        return handle_build(args)
    if args.command == "serve":
        return handle_serve(args)
    if args.command == "validate-config":
        return handle_validate_config(args)

    parser.error(f"Unsupported command: {args.command}")
    return 2


if __name__ == "__main__":
    raise SystemExit(main())
