# ============================================================================
# APPLICATION CONFIGURATION
# ============================================================================
# STATUS: Configuration - composition root
# PURPOSE: Compose storage, output format and logging settings
# EXPORTS: AppConfig
# INTERFACES: Pydantic BaseModel
# PYDANTIC_MODELS: AppConfig
# DEPENDENCIES: pydantic, os, config.storage_config
# SOURCE: Environment variables (API_FORMATS, LOG_LEVEL, DEBUG_LOGGING)
# ============================================================================

"""
Application Configuration.

Usage:
    config = AppConfig.from_environment()
    config.formats        # ["json"]
    config.storage.destination
"""

import os
from typing import List

from pydantic import BaseModel, Field, field_validator

from .defaults import AppDefaults
from .storage_config import StorageConfig


def _split_formats(value: str) -> List[str]:
    return [name.strip() for name in value.split(",") if name.strip()]


class AppConfig(BaseModel):
    """Application configuration - composition of domain configs."""

    storage: StorageConfig = Field(
        default_factory=StorageConfig,
        description="Output destination"
    )

    formats: List[str] = Field(
        default_factory=lambda: _split_formats(AppDefaults.FORMATS),
        description="Output format names for metadata and collection documents",
        examples=[["json"]]
    )

    log_level: str = Field(
        default=AppDefaults.LOG_LEVEL,
        description="Logging level for application diagnostics",
        examples=["DEBUG", "INFO", "WARNING", "ERROR"]
    )

    debug_logging: bool = Field(
        default=AppDefaults.DEBUG_LOGGING,
        description="Force DEBUG level logging (DEBUG_LOGGING=true)"
    )

    @field_validator("formats", mode="before")
    @classmethod
    def _parse_formats(cls, value):
        if isinstance(value, str):
            return _split_formats(value)
        return value

    def debug_dict(self) -> dict:
        """Sanitized configuration for logging."""
        return {
            "storage": self.storage.debug_dict(),
            "formats": self.formats,
            "log_level": self.log_level,
            "debug_logging": self.debug_logging,
        }

    # ========================================================================
    # Factory Methods
    # ========================================================================

    @classmethod
    def from_environment(cls):
        """Load all configs from environment."""
        return cls(
            storage=StorageConfig.from_environment(),
            formats=os.environ.get("API_FORMATS") or AppDefaults.FORMATS,
            log_level=os.environ.get("LOG_LEVEL", AppDefaults.LOG_LEVEL),
            debug_logging=os.environ.get(
                "DEBUG_LOGGING", str(AppDefaults.DEBUG_LOGGING).lower()
            ).lower() == "true",
        )
