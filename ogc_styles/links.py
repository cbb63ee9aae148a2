# ============================================================================
# OGC STYLES LINK RESOLVER
# ============================================================================
# STATUS: Core - canonical paths and hrefs
# PURPOSE: Map link relations and identifiers to resource paths and URLs
# EXPORTS: resource path templates, PATH_RELATIONS, relation_to_path,
#          relation_to_url, link_to_path, update_href
# DEPENDENCIES: ogc_styles.formats, ogc_styles.models, exceptions, util_logger
# ============================================================================
"""
Link Relation Resolver.

Only relations for which the generator emits a concrete resource have a
path. Every other relation (alternate, enclosure, start, ...) is a link-only
decoration and asking for its path is an error.

    styles relation -> styles
    stylesheet      -> styles/<id>
    describedby     -> styles/<id>/metadata
    preview/preload -> resources/<id>

The resources/<id> layout is not fixed by OGC API Styles; it follows the
examples of the standard.
"""

from typing import Iterable, Optional

from exceptions import ResolutionError
from util_logger import LoggerFactory, ComponentType

from .enums import LinkRelation
from .formats import format_to_query, resolve_format
from .models import Format, Link

logger = LoggerFactory.create_logger(ComponentType.SERVICE, "LinkResolver")

STYLES_RESOURCE = "styles"
STYLE_RESOURCE = "styles/{}"
STYLE_METADATA_RESOURCE = "styles/{}/metadata"
RESOURCE_RESOURCE = "resources/{}"

PATH_RELATIONS = frozenset({
    LinkRelation.STYLES,
    LinkRelation.STYLESHEET,
    LinkRelation.DESCRIBEDBY,
    LinkRelation.PREVIEW,
    LinkRelation.PRELOAD,
})


def relation_to_path(relation: Optional[LinkRelation], identifier: str) -> str:
    """
    Resource path of a relation for one identifier.

    Raises:
        ResolutionError: relation has no known path
    """
    if relation == LinkRelation.STYLES:
        return STYLES_RESOURCE
    if relation == LinkRelation.STYLESHEET:
        return STYLE_RESOURCE.format(identifier)
    if relation == LinkRelation.DESCRIBEDBY:
        return STYLE_METADATA_RESOURCE.format(identifier)
    if relation in (LinkRelation.PREVIEW, LinkRelation.PRELOAD):
        return RESOURCE_RESOURCE.format(identifier)

    value = relation.value if isinstance(relation, LinkRelation) else relation
    raise ResolutionError(
        f"no path known for link relation: {value}",
        relation=value,
        identifier=identifier
    )


def relation_to_url(relation: Optional[LinkRelation], base_resource: str, identifier: str) -> str:
    """``<base_resource>/<path>``."""
    return f"{base_resource}/{relation_to_path(relation, identifier)}"


def link_to_path(link: Link, identifier: str,
                 additional_formats: Optional[Iterable[Format]] = None) -> str:
    """
    Output path of the resource a link points to.

    The unversioned format extension of the link's media type is appended
    unless the path already ends with it: a stylesheet of type
    application/vnd.mapbox.style+json for ``night`` lives at
    ``styles/night.mapbox.json``.
    """
    path = relation_to_path(link.rel, identifier)
    extension = resolve_format(link.type, additional_formats, versioned=False).extension
    if extension and not path.endswith(f".{extension}"):
        path = f"{path}.{extension}"
    return path


def update_href(
    link: Link,
    base_resource: str,
    identifier: str,
    additional_formats: Optional[Iterable[Format]] = None,
    with_query: bool = False,
    with_extension: bool = False
) -> Link:
    """
    Copy of ``link`` with its canonical href.

    Args:
        link: Link to resolve (left untouched)
        base_resource: Base URL of the published API
        identifier: Style id or asset name the relation path is built from
        additional_formats: Catalog-declared formats
        with_query: Append ``?f=<versioned name>``
        with_extension: Append ``.<extension>`` unless already present

    Returns:
        New Link with ``href`` set

    Raises:
        ResolutionError: both formatting options requested, or relation has no path
    """
    if with_query and with_extension:
        raise ResolutionError(
            "href may not contain both a format query parameter and extension",
            relation=link.rel.value if link.rel else None,
            identifier=identifier
        )

    url = relation_to_url(link.rel, base_resource, identifier)
    fmt = resolve_format(link.type, additional_formats, versioned=True)
    if with_query:
        query = format_to_query(fmt)
        if query:
            url = f"{url}?{query}"
    elif with_extension:
        if fmt.extension and not url.endswith(f".{fmt.extension}"):
            url = f"{url}.{fmt.extension}"

    if link.href is not None and link.href != url:
        logger.warning(f"link href `{link.href}` not empty, overwriting with: `{url}`")
    return link.model_copy(update={"href": url})
