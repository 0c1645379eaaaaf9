import logging

import pytesseract

from digit_ocr.core.config import settings

logger = logging.getLogger(__name__)


def configure_engine():
    """Point pytesseract at an explicit binary when one is configured."""
    if settings.TESSERACT_CMD:
        pytesseract.pytesseract.tesseract_cmd = settings.TESSERACT_CMD


def get_engine_info() -> dict:
    """Detect the Tesseract binary, its version and installed languages."""
    info = {
        "available": False,
        "version": None,
        "languages": [],
    }

    try:
        info["version"] = str(pytesseract.get_tesseract_version())
        info["available"] = True
    except (pytesseract.TesseractNotFoundError, OSError) as e:
        logger.warning(f"Tesseract binary not reachable: {e}")
        return info

    try:
        info["languages"] = sorted(pytesseract.get_languages(config=""))
    except (pytesseract.TesseractError, OSError) as e:
        logger.warning(f"Could not list Tesseract languages: {e}")

    return info


def build_engine_config() -> str:
    """Assemble the Tesseract config string restricting output to the whitelist."""
    parts = []
    if settings.TESSERACT_PSM is not None:
        parts.append(f"--psm {settings.TESSERACT_PSM}")
    parts.append(f"-c tessedit_char_whitelist={settings.OCR_CHAR_WHITELIST}")
    return " ".join(parts)
