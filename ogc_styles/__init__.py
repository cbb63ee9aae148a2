# ============================================================================
# OGC API STYLES GENERATOR MODULE
# ============================================================================
# STATUS: Core package - static OGC API Styles generation
# PURPOSE: Turn a declarative style catalog into OGC API Styles documents
# EXPORTS: CatalogRepository, validate_catalog, StylesGenerator, DocumentProducer,
#          generate_documents, stream_documents, models
# DEPENDENCIES: pydantic, PyYAML, Jinja2
# ============================================================================
"""
OGC API Styles Generator.

Generates the resources of OGC API Styles from a YAML catalog:
- styles collection                  styles.json
- style metadata                     styles/{id}/metadata.json
- stylesheets (templated assets)     styles/{id}.{ext}
- previews / preloads                resources/{asset}
- additional assets                  copied by relative path

Usage:
    from ogc_styles import load_catalog, generate_documents

    catalog = load_catalog("config.yaml")
    for document in generate_documents(catalog, "assets"):
        writer.write(document.path, document.content, document.media_type)
"""

from .models import (
    AdditionalAsset,
    Document,
    Format,
    Layer,
    Link,
    Style,
    StyleMetadata,
    Styles,
    StyleSheet,
    StylesConfig,
)
from .enums import GeometryType, LinkRelation
from .repository import CatalogRepository, load_catalog
from .validator import CatalogValidator, validate_catalog
from .service import (
    DocumentProducer,
    StylesGenerator,
    generate_documents,
    resolve_requested_formats,
    stream_documents,
)

__all__ = [
    "AdditionalAsset",
    "Document",
    "Format",
    "Layer",
    "Link",
    "Style",
    "StyleMetadata",
    "Styles",
    "StyleSheet",
    "StylesConfig",
    "GeometryType",
    "LinkRelation",
    "CatalogRepository",
    "load_catalog",
    "CatalogValidator",
    "validate_catalog",
    "DocumentProducer",
    "StylesGenerator",
    "generate_documents",
    "resolve_requested_formats",
    "stream_documents",
]
