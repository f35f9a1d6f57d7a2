"""Local static file server for wasm build output — Flask application."""

from flask import Flask

from .blueprint import create_blueprint
from .config import build_config


def create_app(config=None, variant="wasm"):
    if config is None:
        config = build_config(variant)
    app = Flask(__name__, static_folder=None)
    app.register_blueprint(create_blueprint(config), url_prefix="/")
    return app
