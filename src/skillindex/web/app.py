"""FastAPI application serving the skills discovery index."""

from __future__ import annotations

import logging
from pathlib import Path

from fastapi import FastAPI, HTTPException, Response

from skillindex import __version__
from skillindex.constants.serving import APP_TITLE, INDEX_FAILURE_DETAIL, INDEX_ROUTE
from skillindex.io import render_index_json
from skillindex.scanner import build_skill_index

logger = logging.getLogger(__name__)


def create_app(skills_dir: Path, *, fail_on_unreadable_bundles: bool = False) -> FastAPI:
    """Build an app that rescans *skills_dir* on every request."""
    app = FastAPI(title=APP_TITLE, version=__version__)

    @app.get(INDEX_ROUTE)
    def skills_index() -> Response:
        try:
            index = build_skill_index(skills_dir, fail_on_unreadable_bundles=fail_on_unreadable_bundles)
        except OSError as exc:
            logger.exception("Failed to build skills index from %s", skills_dir)
            raise HTTPException(status_code=500, detail=INDEX_FAILURE_DETAIL) from exc
        return Response(content=render_index_json(index), media_type="application/json")

    return app
