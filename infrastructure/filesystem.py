# ============================================================================
# FILESYSTEM DOCUMENT WRITER
# ============================================================================
# STATUS: Infrastructure - local output sink
# PURPOSE: Write generated documents under a local destination directory
# EXPORTS: FileDocumentWriter
# INTERFACES: IDocumentWriter
# DEPENDENCIES: pathlib, exceptions, util_logger
# ============================================================================
"""
Filesystem Document Writer.

    writer = FileDocumentWriter("/srv/styles")
    writer.write("styles/night/metadata.json", b"{...}", "application/json")
    # -> /srv/styles/styles/night/metadata.json

Parent directories are created as needed. The media type is not stored.
"""

from pathlib import Path, PurePosixPath
from typing import Union

from exceptions import WriterError
from util_logger import LoggerFactory, ComponentType

from .interface_repository import IDocumentWriter

logger = LoggerFactory.create_logger(ComponentType.ADAPTER, "FileDocumentWriter")


class FileDocumentWriter(IDocumentWriter):
    """Writes documents as files below ``destination``."""

    def __init__(self, destination: Union[str, Path]):
        self.destination = Path(destination)

    def _target(self, path: str) -> Path:
        relative = PurePosixPath(path)
        if relative.is_absolute() or ".." in relative.parts:
            raise WriterError(f"document path {path} escapes destination {self.destination}", path=path)
        return self.destination.joinpath(*relative.parts)

    def write(self, path: str, content: bytes, media_type: str) -> None:
        target = self._target(path)
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_bytes(content)
        except OSError as e:
            logger.error(f"Failed to write {target}: {e}")
            raise WriterError(f"could not write document {target}: {e}", path=path) from e
        logger.debug(f"Wrote {target} ({len(content)} bytes, {media_type})")
