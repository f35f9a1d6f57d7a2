import pytest

from devserve import create_app
from devserve.config import build_config


@pytest.fixture
def roots(tmp_path):
    build = tmp_path / "target" / "release"
    harness = tmp_path / "harness"
    build.mkdir(parents=True)
    harness.mkdir()
    return build, harness


@pytest.fixture
def make_client():
    def _make(build, harness, variant="wasm"):
        config = build_config(variant, build_root=str(build), harness_root=str(harness))
        app = create_app(config)
        app.config["TESTING"] = True
        return app.test_client()

    return _make


@pytest.fixture
def client(roots, make_client):
    return make_client(*roots)
