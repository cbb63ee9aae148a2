# ============================================================================
# CONFIG PACKAGE INIT
# ============================================================================
# STATUS: Configuration - package exports and singleton
# PURPOSE: Configuration package exports
# EXPORTS: AppConfig, StorageConfig, StorageDestination, get_config, debug_config, reset_config
# INTERFACES: Pydantic BaseModel
# PYDANTIC_MODELS: AppConfig, StorageConfig
# DEPENDENCIES: domain config modules
# PATTERNS: Singleton, composition
# ENTRY_POINTS: from config import get_config
# ============================================================================

"""
Configuration Package.

Structure:
    config/
    ├── __init__.py              # This file - exports and singleton
    ├── app_config.py            # Main config (composes domain configs)
    ├── storage_config.py        # Output destination (file, Azure Blob)
    └── defaults.py              # Default values

Usage:
    from config import get_config
    config = get_config()
    formats = config.formats

    # Debug output
    from config import debug_config
    info = debug_config()  # Secrets masked
"""

from typing import Optional

from .storage_config import StorageConfig, StorageDestination
from .app_config import AppConfig


# ============================================================================
# SINGLETON PATTERN
# ============================================================================

_config_instance: Optional[AppConfig] = None


def get_config() -> AppConfig:
    """
    Get global configuration singleton.

    Returns:
        AppConfig instance loaded from environment
    """
    global _config_instance
    if _config_instance is None:
        _config_instance = AppConfig.from_environment()
    return _config_instance


def reset_config() -> None:
    """Drop the singleton so the next get_config() re-reads the environment."""
    global _config_instance
    _config_instance = None


def debug_config() -> dict:
    """
    Get sanitized configuration for debugging (masks sensitive values).

    Returns:
        Dictionary with configuration values, secrets masked
    """
    try:
        return get_config().debug_dict()
    except Exception as e:
        return {'error': f'Configuration validation failed: {e}'}


# ============================================================================
# EXPORTS
# ============================================================================

__all__ = [
    'AppConfig',
    'StorageConfig',
    'StorageDestination',
    'get_config',
    'reset_config',
    'debug_config',
]
