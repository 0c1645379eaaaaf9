from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    PROJECT_NAME: str = "Digit OCR Service"
    API_PREFIX: str = "/api"  # Also the path prefix the CORS interceptor matches

    OCR_LANGUAGE: str = "eng"
    OCR_CHAR_WHITELIST: str = "0123456789"
    OCR_DIGIT_COUNT: int = 4
    TESSERACT_CMD: str | None = None  # Falls back to `tesseract` on PATH
    TESSERACT_PSM: int | None = None

    CORS_ALLOW_ORIGIN: str = "*"
    CORS_ALLOW_METHODS: list[str] = ["GET", "POST", "OPTIONS"]
    CORS_ALLOW_HEADERS: list[str] = [
        "Content-Type",
        "Authorization",
        "X-CSRF-Token",
        "X-Requested-With",
        "Accept",
        "Accept-Version",
        "Content-Length",
        "Content-MD5",
        "Date",
        "X-Api-Version",
    ]
    CORS_MAX_AGE: int = 86400  # 24 hours

    LOG_LEVEL: str = "INFO"
    HOST: str = "0.0.0.0"
    PORT: int = 8000

    def cors_headers(self) -> dict[str, str]:
        return {
            "Access-Control-Allow-Origin": self.CORS_ALLOW_ORIGIN,
            "Access-Control-Allow-Methods": ", ".join(self.CORS_ALLOW_METHODS),
            "Access-Control-Allow-Headers": ", ".join(self.CORS_ALLOW_HEADERS),
            "Access-Control-Max-Age": str(self.CORS_MAX_AGE),
        }


settings = Settings()
