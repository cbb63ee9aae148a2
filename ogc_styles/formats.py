# ============================================================================
# OGC STYLES FORMAT REGISTRY
# ============================================================================
# STATUS: Core - media type resolution
# PURPOSE: Map media types (with ;version=... parameters) to short names and extensions
# EXPORTS: Built-in media types and formats, split_params, resolve_format,
#          format_to_query, get_format
# DEPENDENCIES: ogc_styles.models, util_logger
# ============================================================================
"""
Media-Type / Format Registry.

A Format is the triple (media type, short name, file extension). Short names
are used for the ``?f=`` query parameter of hrefs, extensions for output
paths.

Precedence: built-in formats first, then the catalog's ``additional-formats``
in declaration order. The first format whose media type equals the root of
the requested media type wins.

Examples:
    resolve_format("application/vnd.ogc.sld+xml;version=1.0", [], versioned=True)
        -> Format(name="sld10", extension="sld")
    format_to_query(MAPBOX_FORMAT) -> "f=mapbox"
"""

import re
from typing import Dict, Iterable, Optional, Tuple

from util_logger import LoggerFactory, ComponentType

from .models import Format

logger = LoggerFactory.create_logger(ComponentType.SERVICE, "FormatRegistry")

JSON_MEDIA_TYPE = "application/json"
HTML_MEDIA_TYPE = "text/html"
SLD_MEDIA_TYPE = "application/vnd.ogc.sld+xml"
MAPBOX_MEDIA_TYPE = "application/vnd.mapbox.style+json"
PNG_MEDIA_TYPE = "image/png"

JSON_FORMAT = Format(media_type=JSON_MEDIA_TYPE, name="json", extension="json")
HTML_FORMAT = Format(media_type=HTML_MEDIA_TYPE, name="html", extension="html")
SLD_FORMAT = Format(media_type=SLD_MEDIA_TYPE, name="sld", extension="sld")
MAPBOX_FORMAT = Format(media_type=MAPBOX_MEDIA_TYPE, name="mapbox", extension="mapbox.json")
PNG_FORMAT = Format(media_type=PNG_MEDIA_TYPE, name="png", extension="png")

BUILTIN_FORMATS: Tuple[Format, ...] = (JSON_FORMAT, HTML_FORMAT, SLD_FORMAT, MAPBOX_FORMAT, PNG_FORMAT)

EMPTY_FORMAT = Format()

_MEDIA_TYPE_SEPARATOR = ";"
_PARAM_SEPARATOR = "="
_VERSION_DIGITS = re.compile(r"\d+")


def split_params(media_type: str) -> Tuple[str, Dict[str, str]]:
    """
    Split a media type into its root and parameters.

    ``application/vnd.ogc.sld+xml;version=1.0`` ->
    (``application/vnd.ogc.sld+xml``, {"version": "1.0"}). A parameter
    without ``=`` maps to ``""``; a parameter with more than one ``=`` is
    logged and ignored.
    """
    parts = media_type.split(_MEDIA_TYPE_SEPARATOR)
    params: Dict[str, str] = {}
    for part in parts[1:]:
        key_value = part.split(_PARAM_SEPARATOR)
        if len(key_value) == 1:
            params[key_value[0]] = ""
        elif len(key_value) == 2:
            params[key_value[0]] = key_value[1]
        else:
            logger.warning(f"mediatype {media_type} has unknown params")
    return parts[0], params


def resolve_format(
    media_type: Optional[str],
    additional_formats: Optional[Iterable[Format]] = None,
    versioned: bool = False
) -> Format:
    """
    Resolve a media type to its Format.

    Args:
        media_type: Media type, optionally with ``;key=value`` parameters
        additional_formats: Catalog-declared formats, consulted after the built-ins
        versioned: Append the digits of the ``version`` parameter to the name

    Returns:
        The matching Format, or EMPTY_FORMAT when nothing matches
    """
    if not media_type:
        return EMPTY_FORMAT

    root, params = split_params(media_type)
    candidates = list(BUILTIN_FORMATS) + list(additional_formats or [])
    resolved = next((f for f in candidates if f.media_type == root), EMPTY_FORMAT)

    if versioned and not resolved.is_empty and "version" in params:
        digits = "".join(_VERSION_DIGITS.findall(params["version"]))
        resolved = resolved.model_copy(update={"name": f"{resolved.name}{digits}"})
    return resolved


def format_to_query(fmt: Format) -> str:
    """``f=<name>``, or an empty string for the empty Format."""
    if fmt.is_empty:
        return ""
    return f"f={fmt.name}"


def get_format(name: str) -> Optional[Format]:
    """Built-in format by short name (``json``, ``html``, ...)."""
    for fmt in BUILTIN_FORMATS:
        if fmt.name == name:
            return fmt
    return None
