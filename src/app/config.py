"""Configuration management using Pydantic settings."""

from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

from layersearch.feeds.hurricane import NHC_ACTIVE_STORMS_URL
from layersearch.feeds.wildfire import NIFC_WILDFIRE_URL


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "HIFLD Layer Search"
    debug: bool = False

    # Server
    host: str = "0.0.0.0"
    port: int = 8000

    # Catalog CSV, loaded once at startup
    catalog_path: Optional[Path] = Path("./data/hifld_catalog.csv")

    # Emergency presets
    preset_layers_per_term: int = 2   # mappable layers taken per preset search term

    # Live event feeds (storm / fire trackers)
    feeds_enabled: bool = True
    feed_timeout: float = 15.0        # seconds
    hurricane_feed_url: str = NHC_ACTIVE_STORMS_URL
    wildfire_feed_url: str = NIFC_WILDFIRE_URL
    wildfire_limit: int = 20


settings = Settings()
