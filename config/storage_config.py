# ============================================================================
# STORAGE CONFIGURATION
# ============================================================================
# STATUS: Configuration - output destination
# PURPOSE: Select and describe where generated documents are written
# EXPORTS: StorageDestination, StorageConfig
# INTERFACES: Pydantic BaseModel
# PYDANTIC_MODELS: StorageConfig
# DEPENDENCIES: pydantic, os, enum, exceptions
# SOURCE: Environment variables (FILE_DESTINATION, AZURE_STORAGE_*)
# ============================================================================

"""
Output Storage Configuration.

Two destinations are supported:
- FILE: a local directory (FILE_DESTINATION)
- AZURE_BLOB: a blob container, authenticated either with a connection
  string (AZURE_STORAGE_CONNECTION_STRING) or with DefaultAzureCredential
  against an account (AZURE_STORAGE_ACCOUNT_NAME)

A file destination wins when both are configured.

Usage:
    from config import get_config
    storage = get_config().storage
    if storage.destination == StorageDestination.FILE:
        ...
"""

import os
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from exceptions import ConfigurationError

from .defaults import StorageDefaults


class StorageDestination(str, Enum):
    """Kind of document sink."""
    FILE = "file"
    AZURE_BLOB = "azure_blob"


class StorageConfig(BaseModel):
    """
    Output destination settings.

    ``destination`` is derived, not configured: it raises ConfigurationError
    when neither destination is complete.
    """

    file_destination: Optional[str] = Field(
        default=None,
        description="Directory the documents are written under"
    )

    azure_connection_string: Optional[str] = Field(
        default=None,
        description="Azure Storage connection string (secret)"
    )

    azure_account_name: Optional[str] = Field(
        default=None,
        description="Storage account used with DefaultAzureCredential when no connection string is set"
    )

    azure_container: Optional[str] = Field(
        default=None,
        description="Blob container the documents are written to"
    )

    azure_prefix: str = Field(
        default=StorageDefaults.AZURE_BLOBS_PREFIX,
        description="Blob name prefix; a trailing '/' is added when missing"
    )

    @field_validator("azure_prefix", mode="before")
    @classmethod
    def _normalize_prefix(cls, value: Optional[str]) -> str:
        if not value:
            return ""
        value = value.strip("/")
        return f"{value}/" if value else ""

    @property
    def azure_configured(self) -> bool:
        return bool(self.azure_container and (self.azure_connection_string or self.azure_account_name))

    @property
    def azure_account_url(self) -> Optional[str]:
        if not self.azure_account_name:
            return None
        return StorageDefaults.AZURE_ACCOUNT_URL_TEMPLATE.format(self.azure_account_name)

    @property
    def destination(self) -> StorageDestination:
        """
        Raises:
            ConfigurationError: neither a file destination nor a complete Azure configuration
        """
        if self.file_destination:
            return StorageDestination.FILE
        if self.azure_configured:
            return StorageDestination.AZURE_BLOB
        raise ConfigurationError(
            "no output destination configured: set FILE_DESTINATION, or "
            "AZURE_STORAGE_CONTAINER with AZURE_STORAGE_CONNECTION_STRING or AZURE_STORAGE_ACCOUNT_NAME"
        )

    def debug_dict(self) -> dict:
        """Return debug-friendly configuration with secrets masked."""
        return {
            "file_destination": self.file_destination,
            "azure_connection_string": '***MASKED***' if self.azure_connection_string else None,
            "azure_account_name": self.azure_account_name,
            "azure_container": self.azure_container,
            "azure_prefix": self.azure_prefix,
        }

    @classmethod
    def from_environment(cls):
        """Load from environment variables."""
        return cls(
            file_destination=os.environ.get("FILE_DESTINATION") or None,
            azure_connection_string=os.environ.get("AZURE_STORAGE_CONNECTION_STRING") or None,
            azure_account_name=os.environ.get("AZURE_STORAGE_ACCOUNT_NAME") or None,
            azure_container=os.environ.get("AZURE_STORAGE_CONTAINER") or None,
            azure_prefix=os.environ.get("AZURE_STORAGE_BLOBS_PREFIX", StorageDefaults.AZURE_BLOBS_PREFIX),
        )
