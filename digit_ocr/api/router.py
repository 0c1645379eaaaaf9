from fastapi import APIRouter
from digit_ocr.api.routes import ocr_router

api_router = APIRouter()
api_router.include_router(ocr_router.router, prefix="/ocr", tags=["Digit OCR"])
