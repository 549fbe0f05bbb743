from pydantic_settings import BaseSettings
from pydantic import Field
import os
from pathlib import Path
from typing import List
import dotenv

# Always load apps/.env (relative to this file), regardless of where the process is started.
_APPS_DIR = Path(__file__).resolve().parents[1]
dotenv.load_dotenv(dotenv_path=_APPS_DIR / ".env", override=False)


def split_csv(value: str) -> List[str]:
    """Split a comma-separated setting into its non-empty, stripped parts."""
    return [part.strip() for part in (value or "").split(",") if part.strip()]


class Settings(BaseSettings):
    APP_HOST: str = Field(default=os.getenv("APP_HOST", "0.0.0.0"))
    APP_PORT: int = Field(default=int(os.getenv("APP_PORT", "8000")))
    LOG_LEVEL: str = Field(default=os.getenv("LOG_LEVEL", "INFO"))

    # Browser shell allowed to call the API (CORS).
    FRONTEND_BASE_URL: str = Field(default=os.getenv("FRONTEND_BASE_URL", "http://localhost:5173"))

    # Subdirectory names skipped when scanning an addon for usages.
    # The translation tables live there, and they would otherwise count as usages.
    EXCLUDED_SUBDIRS: str = Field(default=os.getenv("EXCLUDED_SUBDIRS", "Localization"))

    # Translation-table files, relative to the addon root unless absolute.
    DEFINITION_FILES: str = Field(
        default=os.getenv(
            "DEFINITION_FILES",
            "Localization/Localization.lua,Localization/LocalizationPost.lua",
        )
    )

    # Console report truncation.
    REPORT_KEY_LIMIT: int = Field(default=int(os.getenv("REPORT_KEY_LIMIT", "50")))
    REPORT_CONCAT_LIMIT: int = Field(default=int(os.getenv("REPORT_CONCAT_LIMIT", "20")))
    REPORT_LOCATION_LIMIT: int = Field(default=int(os.getenv("REPORT_LOCATION_LIMIT", "5")))

    class Config:
        env_file = ".env"
        extra = "ignore"

    @property
    def excluded_subdirs(self) -> List[str]:
        return split_csv(self.EXCLUDED_SUBDIRS)

    @property
    def definition_files(self) -> List[str]:
        return split_csv(self.DEFINITION_FILES)


settings = Settings()
