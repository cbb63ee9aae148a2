# ============================================================================
# WRITER FACTORY
# ============================================================================
# STATUS: Infrastructure - central factory for output sinks
# PURPOSE: Create the document writer selected by the storage configuration
# EXPORTS: WriterFactory
# INTERFACES: Creates instances implementing IDocumentWriter
# DEPENDENCIES: config, infrastructure writers
# PATTERNS: Factory pattern, Dependency Injection
# ENTRY_POINTS: WriterFactory.create_writer()
# ============================================================================

"""
Writer Factory - Central Creation Point.

Imports of the Azure SDK are deferred to the blob branch so file output works
without touching it.
"""

from typing import Optional

from config import StorageConfig, StorageDestination, get_config
from util_logger import LoggerFactory, ComponentType

from .interface_repository import IDocumentWriter

logger = LoggerFactory.create_logger(ComponentType.FACTORY, "WriterFactory")


class WriterFactory:
    """Factory for document writers."""

    @staticmethod
    def create_writer(storage: Optional[StorageConfig] = None) -> IDocumentWriter:
        """
        Writer for the configured destination.

        Args:
            storage: Storage configuration (uses get_config().storage if not provided)

        Raises:
            ConfigurationError: no destination configured
        """
        storage = storage or get_config().storage
        destination = storage.destination

        if destination == StorageDestination.FILE:
            from .filesystem import FileDocumentWriter
            logger.info(f"Writing documents to directory {storage.file_destination}")
            return FileDocumentWriter(storage.file_destination)

        from .blob import BlobDocumentWriter
        logger.info(f"Writing documents to blob container {storage.azure_container} (prefix '{storage.azure_prefix}')")
        return BlobDocumentWriter(
            container=storage.azure_container,
            connection_string=storage.azure_connection_string,
            account_url=storage.azure_account_url,
            prefix=storage.azure_prefix
        )
