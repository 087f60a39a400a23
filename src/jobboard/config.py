from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field
from pathlib import Path

# Get the absolute path to the project root
PROJECT_ROOT = Path(__file__).parent.parent.parent
DEFAULT_STORE_PATH = str(PROJECT_ROOT / "data" / "jobboard.db")

class Settings(BaseSettings):
    """
    Centralized runtime configuration for the job board service.
    All defaults are sensible for dev-mode; ops override via ENV.
    """
    # --- Store ---
    store_path: str = Field(default=DEFAULT_STORE_PATH, validation_alias="JOBBOARD_STORE_PATH")
    seed_on_startup: bool = Field(default=True, validation_alias="JOBBOARD_SEED_ON_STARTUP")

    # --- Simulated transport ---
    api_delay_seconds: float = Field(default=0.5, ge=0, validation_alias="JOBBOARD_API_DELAY_SECONDS")

    # --- Listing ---
    default_page_size: int = Field(default=6, ge=1, validation_alias="JOBBOARD_DEFAULT_PAGE_SIZE")

    # --- HTTP ---
    host: str = Field(default="0.0.0.0", validation_alias="JOBBOARD_HOST")
    port: int = Field(default=8000, validation_alias="JOBBOARD_PORT")
    cors_origins: List[str] = Field(default=["*"], validation_alias="JOBBOARD_CORS_ORIGINS")

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        populate_by_name=True,
        extra="ignore",
    )

# Create a singleton instance
settings = Settings()
