"""Content-type lookup with an override table."""

from __future__ import annotations

import mimetypes
import posixpath
from typing import Mapping, Optional

DEFAULT_CONTENT_TYPE = "application/octet-stream"


def guess_content_type(filename: str, overrides: Optional[Mapping[str, str]] = None) -> str:
    """Return the content type for filename.

    Checks the override table (keyed by lowercase extension without the dot),
    then the stdlib mimetypes table, then falls back to octet-stream.
    """
    ext = posixpath.splitext(filename)[1].lstrip(".").lower()
    if overrides and ext in overrides:
        return overrides[ext]
    guessed, _ = mimetypes.guess_type(filename)
    return guessed or DEFAULT_CONTENT_TYPE
