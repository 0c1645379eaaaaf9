import io
import re
import base64
import binascii
import logging

import pytesseract
from PIL import Image, UnidentifiedImageError
from starlette.concurrency import run_in_threadpool

from digit_ocr.core.config import settings
from digit_ocr.core.engine import build_engine_config
from digit_ocr.core.errors import (
    ImageDecodeError,
    InsufficientDigitsError,
    InvalidImageDataError,
    MissingImageDataError,
    RecognitionEngineError,
)

logger = logging.getLogger(__name__)

DATA_URI_MARKER = ";base64,"
NON_DIGITS = re.compile(r"[^0-9]")


class TesseractService:
    def __init__(self):
        self.language = settings.OCR_LANGUAGE
        self.digit_count = settings.OCR_DIGIT_COUNT

    @staticmethod
    def extract_payload(image_data: str | None) -> str:
        """Return the base64 part of `image_data`, dropping any data URI prefix."""
        if not image_data:
            raise MissingImageDataError()

        payload = image_data.split(DATA_URI_MARKER)[-1]
        if not payload:
            raise InvalidImageDataError()
        return payload

    @staticmethod
    def decode_image(payload: str) -> Image.Image:
        # Browsers and canvas exports often drop the trailing padding
        payload = "".join(payload.split())
        payload += "=" * (-len(payload) % 4)

        try:
            raw = base64.b64decode(payload)
            image = Image.open(io.BytesIO(raw))
            image.load()
        except (binascii.Error, ValueError, UnidentifiedImageError, Image.DecompressionBombError, OSError) as e:
            raise ImageDecodeError(str(e)) from e
        return image

    def process_image(self, image: Image.Image) -> str:
        try:
            return pytesseract.image_to_string(
                image,
                lang=self.language,
                config=build_engine_config(),
            )
        except Exception as e:
            raise RecognitionEngineError(str(e)) from e

    def clean_digits(self, text: str) -> str:
        return NON_DIGITS.sub("", text)[: self.digit_count]

    async def recognize(self, image_data: str | None) -> str:
        """Run the whole pipeline: validate, decode, recognize, sanitize.

        Raises an `OCRError` subclass for every failure; the engine call runs
        in the thread pool since Tesseract blocks.
        """
        payload = self.extract_payload(image_data)
        image = self.decode_image(payload)

        raw_text = await run_in_threadpool(self.process_image, image)
        logger.debug(f"Tesseract returned {raw_text!r}")

        digits = self.clean_digits(raw_text)
        if len(digits) != self.digit_count:
            raise InsufficientDigitsError(digits, self.digit_count)
        return digits

tesseract_service = TesseractService()
