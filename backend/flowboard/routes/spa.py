"""
FlowBoard Backend: Single-Page App Fallback Route
=================================================

What:  Serves the marketing site itself for every GET the API does not handle.
How:   If the path names a file under STATIC_ROOT (scripts, styles, images),
       that file is returned. Anything else, including client-side routes like
       /pricing, gets STATIC_ROOT/index.html so the front end can route it.
Who:   Browsers. Registered last in create_app() so /api routes win.

Paths that resolve outside STATIC_ROOT (../ tricks) are answered with
index.html, never with the outside file.
"""

import logging
from pathlib import Path

from fastapi import APIRouter
from fastapi.responses import FileResponse, JSONResponse
from starlette.responses import Response

from flowboard.config import settings

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Site"])

INDEX_FILE = "index.html"


def resolve_static_file(static_root: Path, requested: str) -> Path:
    """Return the asset for `requested`, or the index page when there is none."""
    root = static_root.resolve()
    if requested:
        candidate = (root / requested).resolve()
        if candidate.is_relative_to(root) and candidate.is_file():
            return candidate
    return root / INDEX_FILE


@router.get("/{full_path:path}", include_in_schema=False)
async def serve_site(full_path: str) -> Response:
    target = resolve_static_file(Path(settings.static_root), full_path)
    if not target.is_file():
        logger.warning("Static index missing at %s", target)
        return JSONResponse(status_code=404, content={"error": "Not found"})
    return FileResponse(path=str(target))
