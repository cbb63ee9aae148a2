# ============================================================================
# CONFIGURATION DEFAULTS
# ============================================================================
# STATUS: Configuration - single source of default values
# PURPOSE: Default values for storage, output formats and logging
# EXPORTS: StorageDefaults, AppDefaults
# DEPENDENCIES: None
# ============================================================================
"""
Configuration Defaults - Single source of truth for all default values.

Organization:
    - StorageDefaults: output destination settings
    - AppDefaults: requested formats, logging

Usage:
    from config.defaults import StorageDefaults

    # In Pydantic Field definitions:
    azure_prefix: str = Field(default=StorageDefaults.AZURE_BLOBS_PREFIX, ...)
"""


class StorageDefaults:
    """Output destination defaults."""

    # Blob name prefix under the container, "" writes at the container root
    AZURE_BLOBS_PREFIX = ""

    # Account endpoint used with DefaultAzureCredential when no connection string is set
    AZURE_ACCOUNT_URL_TEMPLATE = "https://{}.blob.core.windows.net"


class AppDefaults:
    """Application-wide defaults."""

    # Comma separated output format names
    FORMATS = "json"

    LOG_LEVEL = "INFO"
    DEBUG_LOGGING = False

    # Capacity of the producer queue between generation and writing
    DOCUMENT_QUEUE_SIZE = 5
