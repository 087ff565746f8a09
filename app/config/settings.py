from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    host: str = "0.0.0.0"
    port: int = 8000
    cors_allow_origins: list[str] = ["http://localhost:3000"]

    max_upload_bytes: int = 10 * 1024 * 1024
    strategy_timeout_seconds: float = 30.0
    strategy_max_workers: int = 4

    ocr_languages: str = "eng+hin+ben+tam+tel+mar+guj+kan+mal+pan+ori+asm+urd"
    tesseract_cmd: str = ""

    pdf_normalization_profile: str = "indic"
    image_normalization_profile: str = "passthrough"
