"""
Configuration management for pw_effects.

Uses pydantic-settings for environment variable loading and validation.
"""

from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="PW_EFFECTS_",
        env_file=".env",
        env_file_encoding="utf-8",
    )

    # Upstream services
    catalog_url: str = Field(
        default="http://tripbot.tripsit.me/api/tripsit/getAllDrugs",
        description="TripSit endpoint returning every catalogued drug",
    )
    wiki_api_url: str = Field(
        default="https://psychonautwiki.org/w/api.php",
        description="PsychonautWiki MediaWiki API endpoint",
    )
    user_agent: str = Field(
        default="pw-effects/0.1 (+https://psychonautwiki.org)",
        description="User-Agent header sent with every request",
    )
    request_timeout: float = Field(default=30.0, gt=0, description="HTTP timeout in seconds")

    # Pipeline limits
    name_limit: int = Field(default=150, gt=0, description="Maximum number of candidate names")
    # Keep this low, the wiki is a community-run service
    batch_size: int = Field(default=5, gt=0, description="Concurrent lookups per resolution wave")
    extract_concurrency: int | None = Field(
        default=None,
        gt=0,
        description="Cap on concurrent effect queries (None = one per matched name)",
    )

    # Output
    output_path: Path = Field(default=Path("elist.json"), description="Where the effect map is written")

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        description="Logging level",
    )

    def summary(self) -> dict[str, str]:
        """Return the effective configuration as display strings."""
        return {
            "catalog_url": self.catalog_url,
            "wiki_api_url": self.wiki_api_url,
            "output_path": str(self.output_path),
            "name_limit": str(self.name_limit),
            "batch_size": str(self.batch_size),
            "extract_concurrency": str(self.extract_concurrency or "unbounded"),
            "request_timeout": f"{self.request_timeout:g}s",
            "log_level": self.log_level,
        }

