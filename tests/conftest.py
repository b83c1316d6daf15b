"""Shared fixtures for natsize tests."""

import base64
import io
import logging

import pytest
from PIL import Image


def png_bytes(width: int, height: int) -> bytes:
    """Encode a blank PNG of the given size."""
    buffer = io.BytesIO()
    Image.new("RGB", (width, height), "white").save(buffer, format="PNG")
    return buffer.getvalue()


def png_data_url(width: int, height: int) -> str:
    encoded = base64.b64encode(png_bytes(width, height)).decode("ascii")
    return f"data:image/png;base64,{encoded}"


@pytest.fixture
def sink():
    """Logger that propagates to the root logger so caplog sees it."""
    logger = logging.getLogger("natsize_test")
    logger.setLevel(logging.DEBUG)
    return logger


@pytest.fixture
def make_png(tmp_path):
    """Factory writing a PNG of the given size under tmp_path."""

    def _make(name: str, width: int, height: int):
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(png_bytes(width, height))
        return path

    return _make


@pytest.fixture(name="png_data_url")
def png_data_url_fixture():
    """Factory building a base64 PNG data URL of the given size."""
    return png_data_url


@pytest.fixture(autouse=True)
def reset_natsize_logger():
    """Rebuild the natsize logger per test so it writes to the captured streams."""
    from natsize import logging as natsize_logging

    natsize_logging._logger = None
    logging.getLogger(natsize_logging.LOGGER_NAME).handlers.clear()
    yield
    natsize_logging._logger = None
