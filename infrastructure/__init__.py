"""
Infrastructure Package - Lazy Loading Implementation.

Output sinks for generated documents. Imports are deferred until a name is
accessed so that using the file writer never imports the Azure SDK.

Exports:
    WriterFactory, IDocumentWriter, FileDocumentWriter, BlobDocumentWriter
"""

from typing import TYPE_CHECKING

# For type checking only - doesn't actually import at runtime
if TYPE_CHECKING:
    from .factory import WriterFactory as _WriterFactory
    from .interface_repository import IDocumentWriter as _IDocumentWriter
    from .filesystem import FileDocumentWriter as _FileDocumentWriter
    from .blob import BlobDocumentWriter as _BlobDocumentWriter


def __getattr__(name: str):
    """
    Lazy import mechanism - only imports when actually accessed.
    """
    if name == "WriterFactory":
        from .factory import WriterFactory
        return WriterFactory
    elif name == "IDocumentWriter":
        from .interface_repository import IDocumentWriter
        return IDocumentWriter
    elif name == "FileDocumentWriter":
        from .filesystem import FileDocumentWriter
        return FileDocumentWriter
    elif name == "BlobDocumentWriter":
        from .blob import BlobDocumentWriter
        return BlobDocumentWriter
    else:
        raise AttributeError(f"module '{__name__}' has no attribute '{name}'")


__all__ = [
    "WriterFactory",
    "IDocumentWriter",
    "FileDocumentWriter",
    "BlobDocumentWriter",
]
