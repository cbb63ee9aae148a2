# ============================================================================
# AZURE BLOB DOCUMENT WRITER
# ============================================================================
# STATUS: Infrastructure - Azure Blob Storage output sink
# PURPOSE: Upload generated documents to a blob container
# EXPORTS: BlobDocumentWriter
# INTERFACES: IDocumentWriter
# DEPENDENCIES: azure-storage-blob, azure-identity, azure-core
# SOURCE: StorageConfig (connection string or account name, container, prefix)
# ============================================================================
"""
Azure Blob Storage Document Writer.

Authentication:
    - Connection string when provided
    - DefaultAzureCredential against the account URL otherwise

Blob name = prefix + document path. Each blob gets the document's media type
as its Content-Type, so the container can be served directly.

Usage:
    writer = BlobDocumentWriter(container="styles", connection_string=conn, prefix="v1/")
    writer.write("styles.json", content, "application/json")
"""

from typing import Optional

# Azure SDK imports - These will fail fast if not installed
from azure.core.exceptions import AzureError
from azure.identity import DefaultAzureCredential
from azure.storage.blob import BlobServiceClient, ContainerClient, ContentSettings

from exceptions import ConfigurationError, WriterError
from util_logger import LoggerFactory, ComponentType

from .interface_repository import IDocumentWriter

logger = LoggerFactory.create_logger(ComponentType.ADAPTER, "BlobDocumentWriter")


class BlobDocumentWriter(IDocumentWriter):
    """
    Uploads documents to one container.

    A ready ContainerClient may be injected (tests, shared clients); otherwise
    one is built from the connection string or the account URL.
    """

    def __init__(
        self,
        container: str,
        connection_string: Optional[str] = None,
        account_url: Optional[str] = None,
        prefix: str = "",
        container_client: Optional[ContainerClient] = None
    ):
        self.container = container
        self.prefix = prefix
        self.blob_service: Optional[BlobServiceClient] = None

        if container_client is not None:
            self.container_client = container_client
            return

        if connection_string:
            logger.info("Initializing BlobDocumentWriter with connection string")
            self.blob_service = BlobServiceClient.from_connection_string(connection_string)
        elif account_url:
            logger.info(f"Initializing BlobDocumentWriter with DefaultAzureCredential for {account_url}")
            self.blob_service = BlobServiceClient(
                account_url=account_url,
                credential=DefaultAzureCredential()
            )
        else:
            raise ConfigurationError("blob writer needs a connection string or an account url")

        self.container_client = self.blob_service.get_container_client(container)

    def blob_name(self, path: str) -> str:
        return f"{self.prefix}{path}"

    def write(self, path: str, content: bytes, media_type: str) -> None:
        blob_name = self.blob_name(path)
        try:
            self.container_client.upload_blob(
                name=blob_name,
                data=content,
                overwrite=True,
                content_settings=ContentSettings(content_type=media_type)
            )
        except AzureError as e:
            logger.error(f"Failed to write blob {self.container}/{blob_name}: {e}")
            raise WriterError(f"could not write blob {self.container}/{blob_name}: {e}", path=path) from e
        logger.debug(f"Wrote blob: {self.container}/{blob_name} ({len(content)} bytes)")

    def close(self) -> None:
        if self.blob_service is not None:
            self.blob_service.close()
