import io
import base64

import pytest
import pytesseract
from PIL import Image
from fastapi.testclient import TestClient

from digit_ocr.main import create_app

IMAGE_SIZE = (48, 24)


class FakeTesseract:
    """Stands in for pytesseract.image_to_string and records its calls."""

    def __init__(self):
        self.text = ""
        self.error = None
        self.calls = []

    def __call__(self, image, lang=None, config="", **kwargs):
        self.calls.append({"image": image, "lang": lang, "config": config})
        if self.error is not None:
            raise self.error
        return self.text


@pytest.fixture
def fake_tesseract(monkeypatch):
    fake = FakeTesseract()
    monkeypatch.setattr(pytesseract, "image_to_string", fake)
    return fake


@pytest.fixture
def image_size():
    return IMAGE_SIZE


@pytest.fixture
def png_base64():
    buffer = io.BytesIO()
    Image.new("RGB", IMAGE_SIZE, "white").save(buffer, format="PNG")
    return base64.b64encode(buffer.getvalue()).decode("ascii")


@pytest.fixture
def data_uri(png_base64):
    return f"data:image/png;base64,{png_base64}"


@pytest.fixture
def client():
    return TestClient(create_app())
