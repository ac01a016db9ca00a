import os
import sys
from pathlib import Path

import pytest


# Ensure the project root (repo folder) is importable when running pytest under uv.
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))


def _clear_import_cache(prefix: str) -> None:
    for name in list(sys.modules.keys()):
        if name == prefix or name.startswith(prefix + "."):
            del sys.modules[name]


def _clear_module(name: str) -> None:
    if name in sys.modules:
        del sys.modules[name]


@pytest.fixture(scope="session")
def app(tmp_path_factory):
    """Create a Flask app configured to log into a temp folder.

    The application is defined as a global in ean13_gen/__init__.py and reads
    configuration from environment variables at import time.
    """

    data_dir = tmp_path_factory.mktemp("ean13_gen_data")

    os.environ["APP_MODE"] = "config.DevConfig"
    os.environ["SECRET_KEY"] = "test-secret-key"
    os.environ["APP_SERVER_OS"] = "Linux"
    os.environ["KEEP_LABEL_ON_WEIGHT"] = "true"

    # Force temp log location so tests never touch the developer's real data.
    os.environ["EAN13_GEN_FOLDER"] = str(data_dir)
    os.environ["EAN13_GEN_LOG_FILE"] = str(Path(data_dir) / "test.log")

    _clear_import_cache("ean13_gen")
    # APP_MODE points at the top-level module "config", so ensure it reloads with our env.
    _clear_module("config")
    _clear_module("app")

    import ean13_gen  # noqa: E402

    return ean13_gen.app


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def forms(app):
    from ean13_gen.generator import forms as forms_module

    return forms_module


@pytest.fixture()
def pipeline(app):
    from ean13_gen.generator import pipeline as pipeline_module

    return pipeline_module


class RecordingClipboard:
    def __init__(self):
        self.copied: list[str] = []

    def copy(self, text: str) -> None:
        self.copied.append(text)


@pytest.fixture()
def clipboard():
    return RecordingClipboard()
