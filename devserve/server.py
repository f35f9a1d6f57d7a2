"""Bind the gateway to its port and serve until interrupted."""

import logging

from werkzeug.serving import make_server

from . import create_app
from .config import DEFAULT_HOST, SERVER_PORT, build_config

logger = logging.getLogger(__name__)


def serve(app, host=DEFAULT_HOST, port=SERVER_PORT):
    try:
        server = make_server(host, port, app, threaded=True)
    except (OSError, SystemExit) as e:
        # werkzeug exits on its own for EADDRINUSE, after printing the cause
        cause = e if isinstance(e, OSError) else e.__context__ or "address unavailable"
        logger.error("[Gateway] Could not bind %s:%d: %s", host, port, cause)
        raise SystemExit(1) from e

    print(f"[Gateway] Serving at http://{host}:{port}")
    try:
        server.serve_forever()
    except KeyboardInterrupt:
        print("\n[Gateway] Stopped")
    finally:
        server.server_close()


def run(variant, build_root=None, harness_root=None):
    """Build the config for a variant and serve it on SERVER_PORT."""
    config = build_config(variant, build_root=build_root, harness_root=harness_root)
    for root in config.roots:
        logger.info("[Gateway] Root %s (index: %s)", root.path, root.index)
    serve(create_app(config), host=config.host, port=config.port)
