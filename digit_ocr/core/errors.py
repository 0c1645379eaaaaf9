from enum import Enum


class ErrorKind(str, Enum):
    MISSING_INPUT = "missing_input"
    INVALID_INPUT = "invalid_input"
    DECODE = "decode"
    ENGINE = "engine"
    INSUFFICIENT_DIGITS = "insufficient_digits"


class OCRError(Exception):
    """Base for every failure of the recognition pipeline.

    Each subclass fixes a `kind` and the HTTP status it maps to, so callers
    can branch on the kind rather than on the message.
    """

    kind: ErrorKind
    status_code: int = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class MissingImageDataError(OCRError):
    kind = ErrorKind.MISSING_INPUT
    status_code = 400

    def __init__(self):
        super().__init__("Missing imageData")


class InvalidImageDataError(OCRError):
    kind = ErrorKind.INVALID_INPUT
    status_code = 400

    def __init__(self, message: str = "Invalid imageData format"):
        super().__init__(message)


class ImageDecodeError(OCRError):
    kind = ErrorKind.DECODE


class RecognitionEngineError(OCRError):
    kind = ErrorKind.ENGINE


class InsufficientDigitsError(OCRError):
    kind = ErrorKind.INSUFFICIENT_DIGITS

    def __init__(self, partial: str, expected: int = 4):
        super().__init__(f"OCR failed to recognize {expected} digits. Recognized: {partial}")
        self.partial = partial
        self.expected = expected
