"""
Document Writer Abstract Base Class - Single Point of Truth.

Enforces the exact write signature across all output sinks. The generator
hands every Document to one ``write(path, content, media_type)`` call and
treats any raised WriterError as fatal.

Exports:
    IDocumentWriter: Output sink interface
"""

from abc import ABC, abstractmethod


class IDocumentWriter(ABC):
    """
    Output sink for generated documents.

    ``path`` is relative to the destination root, uses ``/`` separators and
    already carries its extension.
    """

    @abstractmethod
    def write(self, path: str, content: bytes, media_type: str) -> None:
        """
        Store one document, replacing any previous one at ``path``.

        Raises:
            WriterError: the sink rejected the document
        """
        pass

    def close(self) -> None:
        """Release sink resources; the default sink holds none."""
        pass

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False
