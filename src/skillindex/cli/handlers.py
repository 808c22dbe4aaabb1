"""CLI subcommand handlers."""

from __future__ import annotations

import argparse
import logging
import sys

import uvicorn

from skillindex.config import SkillIndexConfig, load_config
from skillindex.exceptions import ConfigError
from skillindex.exceptions.validation import format_errors
from skillindex.io import render_index_json, write_index_atomic
from skillindex.scanner import build_skill_index
from skillindex.validation import preflight_validate
from skillindex.web import create_app

logger = logging.getLogger(__name__)

STDOUT_OUTPUT: str = "-"


def handle_build(args: argparse.Namespace) -> int:
    """Scan the skills directory and write or print the index."""
    config = _resolve_config(args)
    if config is None:
        return 2

    try:
        index = build_skill_index(config.skills_path, fail_on_unreadable_bundles=config.fail_on_unreadable_bundles)
    except OSError as exc:
        print(f"Scanner error: {exc}", file=sys.stderr)
        return 1

    if args.output == STDOUT_OUTPUT:
        print(render_index_json(index, indent=config.indent))
        return 0

    destination = config.output_path
    try:
        write_index_atomic(destination, index, indent=config.indent)
    except OSError as exc:
        print(f"Failed to write {destination}: {exc}", file=sys.stderr)
        return 1

    logger.info("Wrote %d skill(s) to %s", len(index.skills), destination)
    if index.skipped:
        logger.info("Skipped %d bundle(s) with invalid SKILL.md", len(index.skipped))
    return 0


def handle_serve(args: argparse.Namespace) -> int:
    """Serve the index over HTTP until interrupted."""
    config = _resolve_config(args)
    if config is None:
        return 2

    app = create_app(config.skills_path, fail_on_unreadable_bundles=config.fail_on_unreadable_bundles)
    logger.info("Serving skills index for %s on http://%s:%d", config.skills_path, config.host, config.port)
    uvicorn.run(app, host=config.host, port=config.port)
    return 0


def handle_validate_config(args: argparse.Namespace) -> int:
    """Run config validation and report results."""
    errors = preflight_validate(root=args.root, config_path=args.config)
    if errors:
        print(format_errors(errors), file=sys.stderr)
        return 2

    print("Configuration is valid.")
    return 0


def _resolve_config(args: argparse.Namespace) -> SkillIndexConfig | None:
    """Validate and load config, then apply CLI overrides. ``None`` means exit 2."""
    errors = preflight_validate(root=args.root, config_path=args.config)
    if errors:
        print(format_errors(errors), file=sys.stderr)
        return None

    try:
        config = load_config(args.root, args.config)
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return None

    output = getattr(args, "output", None)
    return config.with_overrides(
        skills_dir=args.skills_dir,
        output=None if output == STDOUT_OUTPUT else output,
        indent=getattr(args, "indent", None),
        fail_on_unreadable_bundles=True if getattr(args, "fail_on_unreadable", False) else None,
        host=getattr(args, "host", None),
        port=getattr(args, "port", None),
    )
