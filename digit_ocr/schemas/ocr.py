from pydantic import BaseModel
from fastapi.responses import JSONResponse

class OCRRequest(BaseModel):
    imageData: str | None = None # Raw base64, or a data URI such as data:image/png;base64,...

class OCRResponse(BaseModel):
    success: bool
    text: str | None = None
    error: str | None = None

    def to_content(self) -> dict:
        # Envelope omits fields that are not set rather than sending null
        return self.model_dump(exclude_none=True)


def error_response(status_code: int, message: str, headers: dict | None = None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=OCRResponse(success=False, error=message).to_content(),
        headers=headers,
    )
