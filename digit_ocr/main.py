import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError

from digit_ocr.api.router import api_router
from digit_ocr.schemas.ocr import error_response
from digit_ocr.core.config import settings
from digit_ocr.core.cors import CORSInterceptor
from digit_ocr.core.engine import configure_engine, get_engine_info
from digit_ocr.core.errors import InvalidImageDataError

logger = logging.getLogger(__name__)


def configure_logging(level: str = settings.LOG_LEVEL):
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_engine()
    engine = get_engine_info()
    if engine["available"]:
        logger.info(f"Tesseract {engine['version']} ready, languages: {', '.join(engine['languages'])}")
        if settings.OCR_LANGUAGE not in engine["languages"]:
            logger.warning(f"Language '{settings.OCR_LANGUAGE}' is not installed for Tesseract")
    else:
        logger.warning("Tesseract is not available, recognition requests will fail")
    yield


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    # Malformed bodies share the envelope of every other input failure
    errors = exc.errors()
    error = InvalidImageDataError(errors[0]["msg"] if errors else "Invalid request body")
    logger.warning(f"OCR rejected ({error.kind.value}): {error.message}")
    return error_response(error.status_code, error.message)


def create_app() -> FastAPI:
    configure_logging()

    app = FastAPI(title=settings.PROJECT_NAME, lifespan=lifespan)

    app.add_middleware(
        CORSInterceptor,
        headers=settings.cors_headers(),
        path_prefix=settings.API_PREFIX,
    )
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.include_router(api_router, prefix=settings.API_PREFIX)

    @app.get("/health")
    def health():
        return {"status": "ok", "engine": get_engine_info()}

    return app


app = create_app()


def run():
    uvicorn.run("digit_ocr.main:app", host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    run()
