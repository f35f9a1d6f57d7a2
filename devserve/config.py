"""Configuration for the wasm dev server."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Mapping, Optional, Tuple

logger = logging.getLogger(__name__)

PROJECT_ROOT = Path(__file__).resolve().parent.parent  # devserve/config.py → devserve/ → project/

# Server port
SERVER_PORT = 8080

# Bind address (all interfaces)
DEFAULT_HOST = "0.0.0.0"

# Build output location, relative to the harness directory
DEFAULT_BUILD_ROOT = "../../../target/wasm32-unknown-unknown/release"

# Content types that win over the stdlib table
WASM_MIME_OVERRIDES = MappingProxyType({"wasm": "application/wasm"})

# Variant name → (harness directory, MIME overrides)
VARIANTS = {
    "wasm": (PROJECT_ROOT / "wasm", WASM_MIME_OVERRIDES),
    "ui": (PROJECT_ROOT / "ui", MappingProxyType({})),
}


@dataclass(frozen=True)
class ServingRoot:
    """A directory exposed for static lookup.

    ``index`` enables serving ``index.html`` for directory requests.
    """

    path: Path
    index: bool = False


@dataclass(frozen=True)
class GatewayConfig:
    roots: Tuple[ServingRoot, ...]
    mime_overrides: Mapping[str, str]
    host: str = DEFAULT_HOST
    port: int = SERVER_PORT


def build_config(
    variant: str,
    build_root: Optional[str] = None,
    harness_root: Optional[str] = None,
    host: str = DEFAULT_HOST,
    port: int = SERVER_PORT,
) -> GatewayConfig:
    """Build the immutable gateway config for a variant.

    Args:
        variant: One of VARIANTS ("wasm" or "ui").
        build_root: Build output directory. Relative paths resolve against
            the current working directory. Defaults to DEFAULT_BUILD_ROOT
            under the harness directory.
        harness_root: Directory holding the launch script and index.html.
            Defaults to the variant's directory in the project.

    Returns:
        GatewayConfig with the build root first, harness root second.
    """
    if variant not in VARIANTS:
        raise ValueError(
            f"Unknown variant {variant!r}, expected one of {sorted(VARIANTS)}"
        )
    default_harness, overrides = VARIANTS[variant]

    harness = Path(harness_root or default_harness).resolve()
    if build_root is None:
        build = (harness / DEFAULT_BUILD_ROOT).resolve()
    else:
        build = Path(build_root).resolve()

    roots = (ServingRoot(build, index=False), ServingRoot(harness, index=True))
    for root in roots:
        if not root.path.is_dir():
            logger.warning("[Gateway] %s is not a directory, nothing will be served from it", root.path)

    return GatewayConfig(
        roots=roots,
        mime_overrides=MappingProxyType(dict(overrides)),
        host=host,
        port=port,
    )
