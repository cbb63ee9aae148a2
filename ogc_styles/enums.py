# ============================================================================
# OGC STYLES ENUMERATIONS
# ============================================================================
# STATUS: Data models - closed vocabularies of the style catalog
# PURPOSE: Link relations and geometry types accepted in a catalog
# EXPORTS: LinkRelation, GeometryType, OGC_REL_PREFIX
# DEPENDENCIES: Standard library only
# ============================================================================
"""
OGC API Styles Enumerations.

Both are closed sets: a catalog carrying any other value is rejected
when it is parsed, never defaulted at generation time.

Link relations are taken from OGC API - Styles, section 5.2. Not every
relation has a resource path; see ogc_styles.links for the ones the
generator materializes.
"""

from enum import Enum

OGC_REL_PREFIX = "http://www.opengis.net/def/rel/ogc/1.0/"


class LinkRelation(str, Enum):
    """Link relation types known to the generator."""
    ALTERNATE = "alternate"          # Representation using another media type
    COLLECTION = "collection"        # Collection resource for the context
    DESCRIBEDBY = "describedby"      # Style metadata
    ENCLOSURE = "enclosure"          # Downloadable sample data
    PREVIEW = "preview"              # Thumbnail
    SELF = "self"
    SERVICE_DESC = "service-desc"
    SERVICE_DOC = "service-doc"
    START = "start"                  # First resource of an OGC API Features collection
    STYLESHEET = "stylesheet"        # Style encoding
    PRELOAD = "preload"              # Fonts, sprites
    SCHEMA = OGC_REL_PREFIX + "schema"
    STYLES = OGC_REL_PREFIX + "styles"
    CONFORMANCE = OGC_REL_PREFIX + "conformance"
    TILESETS_VECTOR = OGC_REL_PREFIX + "tilesets-vector"
    TILESET_COVERAGE = OGC_REL_PREFIX + "tileset-coverage"


class GeometryType(str, Enum):
    """Geometry type of a layer in the style metadata."""
    POINTS = "points"
    LINES = "lines"
    POLYGONS = "polygons"
    SOLIDS = "solids"
    ANY = "any"
