# ============================================================================
# OGC STYLES DOCUMENT GENERATION SERVICE
# ============================================================================
# STATUS: Business logic - catalog to OGC API Styles document set
# PURPOSE: Walk the style catalog, resolve links, render assets and serialize resources
# EXPORTS: StylesGenerator, DocumentProducer, resolve_requested_formats,
#          generate_documents, stream_documents
# DEPENDENCIES: ogc_styles.*, exceptions, util_logger
# ============================================================================
"""
OGC Styles Document Generation Service.

Produces, in this order:
- one passthrough document per file matched by ``additional-assets``
- per style (catalog order):
    - preview/preload assets declared in the style's links
    - one rendered stylesheet per declared encoding
    - the style metadata, once per requested format
- the styles collection, once per requested format

The collection entry of a style lists its metadata links (``self`` relabeled
``describedby``), a synthesized describedby link when the catalog declares no
self link, then its stylesheet links.

The input catalog is never modified. Every resolved link and the style
metadata that is published are copies.

Usage:
    documents = generate_documents(catalog, "assets", ["json"])

    for document in stream_documents(catalog, "assets"):
        if document.is_error:
            raise document.error
        writer.write(document.path, document.content, document.media_type)
"""

import queue
import threading
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Sequence, Union

from config.defaults import AppDefaults
from exceptions import AssetError, ContractViolationError, ResolutionError, StylesGeneratorError
from util_logger import LoggerFactory, ComponentType

from .assets import AssetRenderer
from .enums import LinkRelation
from .formats import JSON_FORMAT, get_format
from .links import (
    STYLE_METADATA_RESOURCE,
    STYLES_RESOURCE,
    link_to_path,
    relation_to_url,
    update_href,
)
from .models import Document, Format, Link, Style, StyleMetadata, Styles, StyleSheet, StylesConfig
from .serializer import render
from .validator import validate_catalog

logger = LoggerFactory.create_logger(ComponentType.SERVICE, "StylesGenerator")

SELF_LINK_TITLE = "Style Metadata for {}"
DEFAULT_ASSET_MEDIA_TYPE = "application/octet-stream"
DEFAULT_QUEUE_SIZE = AppDefaults.DOCUMENT_QUEUE_SIZE
PUT_POLL_SECONDS = 0.1

ASSET_RELATIONS = frozenset({LinkRelation.PREVIEW, LinkRelation.PRELOAD})


def resolve_requested_formats(names: Optional[Iterable[str]]) -> List[Format]:
    """
    Built-in formats for the requested short names, in request order.

    ``None`` or an empty request means JSON. Unknown names are logged and
    ignored; duplicates are dropped.
    """
    if not names:
        return [JSON_FORMAT]

    formats: List[Format] = []
    for name in names:
        name = name.strip()
        if not name:
            continue
        fmt = get_format(name)
        if fmt is None:
            logger.info(f"Ignoring unknown output format: {name}")
            continue
        if fmt not in formats:
            formats.append(fmt)
    return formats


class StylesGenerator:
    """
    Generates the OGC API Styles document set of one catalog.

    The catalog must already be validated; see ``generate_documents`` for the
    validating entry point.
    """

    def __init__(
        self,
        catalog: StylesConfig,
        asset_dir: Union[str, Path],
        formats: Optional[Sequence[Format]] = None
    ):
        if not isinstance(catalog, StylesConfig):
            raise ContractViolationError(
                f"catalog must be StylesConfig, got {type(catalog).__name__}"
            )
        self.catalog = catalog
        self.asset_dir = Path(asset_dir)
        self.formats = list(formats) if formats is not None else [JSON_FORMAT]
        self.assets = AssetRenderer(self.asset_dir, catalog)

    @property
    def base_resource(self) -> str:
        return self.catalog.base_resource

    def documents(self) -> Iterator[Document]:
        """
        Documents in output order.

        Raises:
            StylesGeneratorError: first failure, no further documents follow
        """
        logger.info(
            f"Generating documents for {len(self.catalog.styles)} style(s) "
            f"in formats {[f.name for f in self.formats]}"
        )
        yield from self._additional_asset_documents()

        collection: List[Style] = []
        for metadata in self.catalog.styles:
            style = yield from self._style_documents(metadata)
            collection.append(style)

        styles = Styles(default=self.catalog.default, styles=collection)
        for fmt in self.formats:
            yield render(styles, STYLES_RESOURCE, fmt)

    # ------------------------------------------------------------------
    # Additional assets
    # ------------------------------------------------------------------

    def _additional_asset_documents(self) -> Iterator[Document]:
        for path, media_type in self.assets.expand(self.catalog.additional_assets):
            yield Document(path=path, media_type=media_type, content=self.assets.read(path))

    # ------------------------------------------------------------------
    # Per-style generation
    # ------------------------------------------------------------------

    def _style_documents(self, metadata: StyleMetadata):
        """Yields the documents of one style; returns its collection entry."""
        dims = {"custom_dimensions": {"style_id": metadata.id}}
        logger.debug(f"Processing style {metadata.id}", extra=dims)

        metadata_links: List[Link] = []
        entry_links: List[Link] = []
        has_self = False

        for link in metadata.links:
            if link.rel == LinkRelation.STYLESHEET:
                logger.warning(
                    f"stylesheet link found in metadata links of style {metadata.id}, skipping",
                    extra=dims
                )
                continue

            if link.rel == LinkRelation.SELF:
                resolved = self._self_link(link, metadata.id)
                has_self = True
                metadata_links.append(resolved)
                entry_links.append(resolved.with_relation(LinkRelation.DESCRIBEDBY))
                continue

            if link.rel in ASSET_RELATIONS:
                resolved, document = self._asset_link(link, metadata.id)
                yield document
            else:
                resolved = self._decoration_link(link, metadata.id)
            metadata_links.append(resolved)
            entry_links.append(resolved)

        if not has_self:
            self_link = self.synthesize_self_link(metadata.id)
            metadata_links.append(self_link)
            entry_links.append(self_link.with_relation(LinkRelation.DESCRIBEDBY))

        stylesheets: List[StyleSheet] = []
        for stylesheet in metadata.stylesheets:
            resolved, document = self._stylesheet(stylesheet.link, metadata.id)
            yield document
            stylesheets.append(stylesheet.model_copy(update={"link": resolved}))
            entry_links.append(resolved)

        published = metadata.model_copy(
            update={"links": metadata_links, "stylesheets": stylesheets},
            deep=True
        )
        for fmt in self.formats:
            yield render(published, STYLE_METADATA_RESOURCE.format(metadata.id), fmt)

        return Style(id=metadata.id, title=metadata.title, links=entry_links)

    def synthesize_self_link(self, style_id: str) -> Link:
        """Self link of a style whose catalog entry declares none."""
        return Link(
            href=relation_to_url(LinkRelation.DESCRIBEDBY, self.base_resource, style_id),
            rel=LinkRelation.SELF,
            title=SELF_LINK_TITLE.format(style_id)
        )

    def _self_link(self, link: Link, style_id: str) -> Link:
        """Declared self link, pointed at the style metadata resource."""
        resolved = update_href(
            link.with_relation(LinkRelation.DESCRIBEDBY),
            self.base_resource,
            style_id,
            self.catalog.additional_formats
        )
        return resolved.with_relation(LinkRelation.SELF)

    def _asset_link(self, link: Link, style_id: str):
        """Resolve a preview/preload link and load its asset unchanged."""
        filename = self._require_asset_filename(link, style_id)
        resolved = update_href(
            link,
            self.base_resource,
            filename,
            self.catalog.additional_formats,
            with_extension=True
        )
        document = Document(
            path=link_to_path(link, filename, self.catalog.additional_formats),
            media_type=link.type or DEFAULT_ASSET_MEDIA_TYPE,
            content=self.assets.render(filename, templated=False)
        )
        return resolved, document

    def _decoration_link(self, link: Link, style_id: str) -> Link:
        """Link-only relations are published as declared."""
        if link.href is None:
            rel = link.rel.value if link.rel else None
            raise ResolutionError(
                f"link with relation {rel} of style {style_id} has no href",
                relation=rel,
                identifier=style_id
            )
        return link.model_copy()

    def _stylesheet(self, link: Link, style_id: str):
        """Resolve a stylesheet link and render its templated asset."""
        filename = self._require_asset_filename(link, style_id)
        resolved = update_href(
            link,
            self.base_resource,
            style_id,
            self.catalog.additional_formats,
            with_query=True
        )
        document = Document(
            path=link_to_path(link, style_id, self.catalog.additional_formats),
            media_type=link.type or DEFAULT_ASSET_MEDIA_TYPE,
            content=self.assets.render(filename, templated=True)
        )
        return resolved, document

    @staticmethod
    def _require_asset_filename(link: Link, style_id: str) -> str:
        if not link.asset_filename:
            rel = link.rel.value if link.rel else None
            raise AssetError(f"asset-filename not specified for {rel} link of style {style_id}")
        return link.asset_filename


# ============================================================================
# ENTRY POINTS
# ============================================================================

def generate_documents(
    catalog: StylesConfig,
    asset_dir: Union[str, Path],
    formats: Optional[Iterable[str]] = None,
    validate: bool = True
) -> List[Document]:
    """
    Complete ordered document set of a catalog.

    Args:
        catalog: Parsed style catalog
        asset_dir: Directory holding stylesheet and preview assets
        formats: Requested output format names (default ``["json"]``)
        validate: Run catalog validation first

    Raises:
        CatalogValidationError: catalog invariants failed
        StylesGeneratorError: first generation failure
    """
    if validate:
        validate_catalog(catalog)
    generator = StylesGenerator(catalog, asset_dir, resolve_requested_formats(formats))
    documents = list(generator.documents())
    logger.info(f"Generated {len(documents)} document(s)")
    return documents


def stream_documents(
    catalog: StylesConfig,
    asset_dir: Union[str, Path],
    formats: Optional[Iterable[str]] = None,
    validate: bool = True
) -> Iterator[Document]:
    """
    Documents of a catalog, one at a time.

    A failure is yielded as one final ``Document`` carrying the error, after
    which the stream ends.
    """
    try:
        if validate:
            validate_catalog(catalog)
        generator = StylesGenerator(catalog, asset_dir, resolve_requested_formats(formats))
        yield from generator.documents()
    except StylesGeneratorError as e:
        logger.error(f"Document generation failed: {e}")
        yield Document.failed(e)


class DocumentProducer:
    """
    Runs ``stream_documents`` on a background thread.

    Documents are put on a bounded queue (blocking, never dropped) followed
    by a sentinel. Iterating the producer drains the queue. A consumer that
    stops early must call ``stop`` so the thread can exit; using the
    producer as a context manager does that:

        with DocumentProducer(catalog, "assets") as producer:
            for document in producer:
                ...
    """

    _SENTINEL = object()

    def __init__(
        self,
        catalog: StylesConfig,
        asset_dir: Union[str, Path],
        formats: Optional[Iterable[str]] = None,
        validate: bool = True,
        maxsize: int = DEFAULT_QUEUE_SIZE
    ):
        self.catalog = catalog
        self.asset_dir = asset_dir
        self.formats = list(formats) if formats is not None else None
        self.validate = validate
        self.queue: "queue.Queue" = queue.Queue(maxsize=maxsize)
        self._stopped = threading.Event()
        self._thread = threading.Thread(target=self._produce, name="styles-document-producer", daemon=True)

    def start(self) -> "DocumentProducer":
        self._thread.start()
        return self

    def join(self, timeout: Optional[float] = None) -> None:
        if self._thread.ident is not None:
            self._thread.join(timeout)

    def stop(self, timeout: Optional[float] = None) -> None:
        """Abandon the remaining documents and wait for the thread to exit."""
        self._stopped.set()
        self.join(timeout)

    @property
    def is_running(self) -> bool:
        return self._thread.is_alive()

    def __enter__(self) -> "DocumentProducer":
        return self.start()

    def __exit__(self, exc_type, exc_val, exc_tb) -> bool:
        self.stop()
        return False

    def _put(self, item) -> bool:
        """Blocking put that gives up once the consumer has stopped."""
        while not self._stopped.is_set():
            try:
                self.queue.put(item, timeout=PUT_POLL_SECONDS)
                return True
            except queue.Full:
                continue
        return False

    def _produce(self) -> None:
        try:
            for document in stream_documents(self.catalog, self.asset_dir, self.formats, self.validate):
                if not self._put(document):
                    logger.info("Document producer stopped by consumer")
                    return
        except Exception as e:
            logger.error(f"Document producer stopped unexpectedly: {e}", exc_info=True)
            self._put(Document.failed(e))
        finally:
            self._put(self._SENTINEL)

    def __iter__(self) -> Iterator[Document]:
        while True:
            item = self.queue.get()
            if item is self._SENTINEL:
                return
            yield item
