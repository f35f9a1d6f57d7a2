"""Flask Blueprint serving files from an ordered list of roots."""

from __future__ import annotations

import logging
from pathlib import Path, PurePosixPath
from typing import Optional

from flask import Blueprint, abort, redirect, request, send_file
from werkzeug.security import safe_join

from .config import GatewayConfig, ServingRoot
from .mime import guess_content_type

logger = logging.getLogger(__name__)

INDEX_FILE = "index.html"


def find_file(root: ServingRoot, filename: str) -> Optional[Path]:
    """Locate filename under root, or return None.

    Paths escaping the root, lexically or through symlinks, never match.
    Directory requests resolve to INDEX_FILE only when the root has index
    serving enabled. A path the filesystem refuses to check (name too long
    and the like) does not match either.
    """
    if filename:
        joined = safe_join(str(root.path), filename)
        if joined is None:
            return None
        candidate = Path(joined)
    else:
        candidate = root.path

    try:
        if candidate.is_dir():
            if not root.index:
                return None
            candidate = candidate / INDEX_FILE

        if not candidate.is_file():
            return None
        if not candidate.resolve().is_relative_to(root.path.resolve()):
            return None
    except OSError:
        return None
    return candidate


def is_directory_hit(path: Path, filename: str) -> bool:
    """True when path is an index file found for a directory request."""
    return path.name == INDEX_FILE and PurePosixPath(filename).name != INDEX_FILE


def create_blueprint(config: GatewayConfig, name="devserve"):
    """Create and return the static serving Blueprint.

    Args:
        config: Gateway config; roots are tried in order, first match wins.
        name: Blueprint name (used for url_for namespacing).

    Returns:
        A Flask Blueprint answering GET/HEAD for any path. Directory
        requests without a trailing slash are redirected (308) to the
        slashed form so relative links in the index page resolve.
    """
    bp = Blueprint(name, __name__)

    def serve_path(filename):
        for root in config.roots:
            path = find_file(root, filename)
            if path is None:
                continue
            if filename and not filename.endswith("/") and is_directory_hit(path, filename):
                location = request.path + "/"
                if request.query_string:
                    location += "?" + request.query_string.decode("latin-1")
                return redirect(location, code=308)
            mimetype = guess_content_type(path.name, config.mime_overrides)
            try:
                return send_file(path, mimetype=mimetype)
            except OSError as e:
                logger.error("[Gateway] Could not read %s: %s", path, e)
                abort(500)
        abort(404)

    @bp.route("/")
    def index():
        return serve_path("")

    @bp.route("/<path:filename>")
    def static_files(filename):
        return serve_path(filename)

    return bp
