from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

PKG_DIR = Path(__file__).resolve().parent
ENV_PATH = PKG_DIR / ".env"

FESTIVALS_SHEET_ID = "1LjfPpLzpuQEkeb34MYrrTFad_PM1wjiS4vPS67sNML0"


class Settings(BaseSettings):
    # App
    app_env: str = "dev"
    cors_allow_origins: list[str] = Field(
        default_factory=lambda: ["*"], validation_alias="CORS_ALLOW_ORIGINS"
    )

    # Data source
    use_google_sheets: bool = Field(
        False, validation_alias="USE_GOOGLE_SHEETS"
    )
    google_sheet_id: str = Field(
        FESTIVALS_SHEET_ID, validation_alias="GOOGLE_SHEET_ID"
    )
    google_api_key: str | None = Field(
        default=None, validation_alias="GOOGLE_API_KEY"
    )
    events_tab: str = Field("Events", validation_alias="EVENTS_TAB")

    # Snapshot cache
    cache_ttl_seconds: float = Field(
        300.0, validation_alias="CACHE_TTL_SECONDS"
    )

    # HTTP client
    http_timeout_seconds: float = Field(
        8.0, validation_alias="HTTP_TIMEOUT_SECONDS"
    )
    http_max_retries: int = Field(
        3, validation_alias="HTTP_MAX_RETRIES"
    )

    model_config = SettingsConfigDict(
        env_file=str(ENV_PATH),
        env_file_encoding="utf-8",
        extra="ignore",
    )


settings = Settings()
