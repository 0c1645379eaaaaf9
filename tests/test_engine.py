"""Tests for Tesseract detection and config assembly."""
import pytesseract

from digit_ocr.core import engine
from digit_ocr.core.config import settings


class TestBuildEngineConfig:

    def test_default_whitelist(self):
        assert engine.build_engine_config() == "-c tessedit_char_whitelist=0123456789"

    def test_page_segmentation_mode(self, monkeypatch):
        monkeypatch.setattr(settings, "TESSERACT_PSM", 7)
        assert engine.build_engine_config() == "--psm 7 -c tessedit_char_whitelist=0123456789"


class TestGetEngineInfo:

    def test_available(self, monkeypatch):
        monkeypatch.setattr(pytesseract, "get_tesseract_version", lambda: "5.3.0")
        monkeypatch.setattr(pytesseract, "get_languages", lambda config="": ["osd", "eng"])

        info = engine.get_engine_info()

        assert info == {"available": True, "version": "5.3.0", "languages": ["eng", "osd"]}

    def test_binary_missing(self, monkeypatch):
        def missing():
            raise pytesseract.TesseractNotFoundError()

        monkeypatch.setattr(pytesseract, "get_tesseract_version", missing)

        info = engine.get_engine_info()

        assert info["available"] is False
        assert info["version"] is None


class TestConfigureEngine:

    def test_explicit_binary(self, monkeypatch):
        monkeypatch.setattr(settings, "TESSERACT_CMD", "/opt/tesseract/bin/tesseract")
        monkeypatch.setattr(pytesseract.pytesseract, "tesseract_cmd", "tesseract")

        engine.configure_engine()

        assert pytesseract.pytesseract.tesseract_cmd == "/opt/tesseract/bin/tesseract"
