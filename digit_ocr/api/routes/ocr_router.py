import logging
from fastapi import APIRouter

from digit_ocr.schemas.ocr import OCRRequest, OCRResponse, error_response
from digit_ocr.services.tesseract_service import tesseract_service
from digit_ocr.core.errors import ErrorKind, OCRError

logger = logging.getLogger(__name__)

router = APIRouter()

REJECTED_METHODS = ["GET", "PUT", "DELETE", "PATCH", "HEAD"]


@router.post("", response_model=OCRResponse, response_model_exclude_none=True)
async def recognize_digits(request: OCRRequest | None = None):
    # No body and a JSON null body both mean imageData is absent
    image_data = request.imageData if request else None

    try:
        text = await tesseract_service.recognize(image_data)
    except OCRError as e:
        if e.kind in (ErrorKind.DECODE, ErrorKind.ENGINE):
            logger.error(f"OCR Error ({e.kind.value}): {e.message}", exc_info=e)
        else:
            logger.warning(f"OCR rejected ({e.kind.value}): {e.message}")
        return error_response(e.status_code, e.message)
    except Exception as e:
        logger.exception("OCR Error: unexpected failure")
        return error_response(500, str(e) or "An unexpected error occurred during OCR processing.")

    return OCRResponse(success=True, text=text)


# OPTIONS never gets here, the CORS interceptor answers preflight first
@router.api_route("", methods=REJECTED_METHODS, include_in_schema=False)
async def method_not_allowed():
    return error_response(405, "Method Not Allowed", headers={"Allow": "POST, OPTIONS"})
