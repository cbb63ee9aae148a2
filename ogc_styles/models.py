# ============================================================================
# OGC STYLES PYDANTIC MODELS
# ============================================================================
# STATUS: Data models - style catalog input and OGC API Styles output
# PURPOSE: Define type-safe models for the catalog and the generated resources
# EXPORTS: Link, Format, AdditionalAsset, Layer, StyleSheet, StyleMetadata,
#          StylesConfig, Style, Styles, Document
# DEPENDENCIES: pydantic
# ============================================================================
"""
OGC API Styles Pydantic Models.

Defines schemas for:
- The style catalog (YAML input, kebab-case keys, unknown keys rejected)
- OGC API Styles resources (styles collection, style metadata)
- Generated output documents

Input keys follow the catalog convention (``point-of-contact``); output keys
follow OGC API Styles (``pointOfContact``). Python code uses the snake_case
field names.

Output omission rules:
- ``None`` fields are omitted (dump with ``exclude_none=True``)
- ``Link.href`` is always present
- Empty ``keywords``/``stylesheets``/``layers``/``links`` lists of a
  StyleMetadata are omitted; ``Style.links`` and ``Styles.styles`` are not
"""

from dataclasses import dataclass
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_serializer

from .enums import GeometryType, LinkRelation


def _scalar_to_str(value: Any) -> Any:
    """YAML turns ``version: 1.0`` into a float; catalog scalars are strings."""
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return value


class CatalogModel(BaseModel):
    """Base for catalog models: strict keys, aliases for YAML input."""
    model_config = ConfigDict(extra="forbid", populate_by_name=True)


# ============================================================================
# LINK / FORMAT MODELS
# ============================================================================

class Link(CatalogModel):
    """
    OGC API link object.

    ``asset_filename`` names the local source of the linked resource and is
    never serialized. For relations the generator resolves, ``href`` is
    computed and any catalog value is overwritten.
    """
    href: Optional[str] = None
    rel: Optional[LinkRelation] = None
    type: Optional[str] = None
    title: Optional[str] = None
    hreflang: Optional[str] = None
    length: Optional[int] = None
    asset_filename: Optional[str] = Field(
        default=None,
        validation_alias="asset-filename",
        exclude=True
    )

    @field_validator("title", mode="before")
    @classmethod
    def _coerce_title(cls, value: Any) -> Any:
        return _scalar_to_str(value)

    def with_relation(self, relation: LinkRelation) -> "Link":
        """Copy of this link carrying another relation."""
        return self.model_copy(update={"rel": relation})

    @model_serializer(mode="wrap")
    def _serialize(self, handler):
        data = handler(self)
        return {"href": self.href, **{k: v for k, v in data.items() if k != "href"}}


class Format(CatalogModel):
    """
    Media type with its short name and file extension.

    The empty Format (all fields blank) stands for "no known format": no
    query parameter or extension applies.
    """
    model_config = ConfigDict(frozen=True)

    media_type: str = Field(default="", validation_alias="media-type")
    name: str = ""
    extension: str = ""

    @property
    def is_empty(self) -> bool:
        return not self.name


class AdditionalAsset(CatalogModel):
    """Static assets copied verbatim; ``path`` is a glob relative to the asset directory."""
    path: str
    type: str


# ============================================================================
# STYLE METADATA MODELS
# ============================================================================

class PropertiesSchema(BaseModel):
    """Schema of a layer's feature properties, passed through as declared."""
    model_config = ConfigDict(extra="allow")


class Layer(CatalogModel):
    """Layer descriptor in the style metadata."""
    id: str
    geometry_type: Optional[GeometryType] = Field(
        default=None,
        validation_alias="type",
        serialization_alias="geometryType"
    )
    sample_data: Optional[Link] = Field(
        default=None,
        validation_alias="sample-data",
        serialization_alias="sampleData"
    )
    properties_schema: Optional[PropertiesSchema] = Field(
        default=None,
        validation_alias="properties-schema",
        serialization_alias="propertiesSchema"
    )

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, value: Any) -> Any:
        return _scalar_to_str(value)


class StyleSheet(CatalogModel):
    """One encoding of a style; its link must carry relation ``stylesheet``."""
    title: Optional[str] = None
    version: Optional[str] = None
    specification: Optional[str] = None
    native: Optional[bool] = None
    link: Link = Field(default_factory=Link)

    @field_validator("title", "version", "specification", mode="before")
    @classmethod
    def _coerce_scalars(cls, value: Any) -> Any:
        return _scalar_to_str(value)


_OMIT_WHEN_EMPTY = ("keywords", "stylesheets", "layers", "links")


class StyleMetadata(CatalogModel):
    """
    Style metadata record (OGC API Styles, requirement class core).

    One entry of the catalog's ``styles`` list; also the body of the
    ``styles/<id>/metadata`` resource.
    """
    id: str
    title: Optional[str] = None
    description: Optional[str] = None
    keywords: List[str] = Field(default_factory=list)
    point_of_contact: Optional[str] = Field(
        default=None,
        validation_alias="point-of-contact",
        serialization_alias="pointOfContact"
    )
    license: Optional[str] = None
    created: Optional[str] = None
    updated: Optional[str] = None
    scope: Optional[str] = None
    version: Optional[str] = None
    stylesheets: List[StyleSheet] = Field(default_factory=list)
    layers: List[Layer] = Field(default_factory=list)
    links: List[Link] = Field(default_factory=list)

    @field_validator(
        "id", "title", "description", "point_of_contact", "license",
        "created", "updated", "scope", "version", mode="before"
    )
    @classmethod
    def _coerce_scalars(cls, value: Any) -> Any:
        return _scalar_to_str(value)

    @field_validator("keywords", mode="before")
    @classmethod
    def _coerce_keywords(cls, value: Any) -> Any:
        if isinstance(value, list):
            return [_scalar_to_str(v) for v in value]
        return value

    @model_serializer(mode="wrap")
    def _serialize(self, handler):
        data = handler(self)
        return {k: v for k, v in data.items() if not (k in _OMIT_WHEN_EMPTY and v == [])}


class StylesConfig(CatalogModel):
    """
    Root of the style catalog.

    ``additional_formats`` is ordered; built-in formats always take priority
    over it when a media type is resolved.
    """
    base_resource: str = Field(validation_alias="base-resource")
    default: Optional[str] = None
    additional_formats: List[Format] = Field(
        default_factory=list,
        validation_alias="additional-formats"
    )
    additional_assets: List[AdditionalAsset] = Field(
        default_factory=list,
        validation_alias="additional-assets"
    )
    styles: List[StyleMetadata] = Field(default_factory=list)

    @field_validator("base_resource")
    @classmethod
    def _strip_slashes(cls, value: str) -> str:
        return value.strip("/")

    @field_validator("default", mode="before")
    @classmethod
    def _empty_default_is_none(cls, value: Any) -> Any:
        value = _scalar_to_str(value)
        return value or None


# ============================================================================
# OGC API STYLES RESPONSE MODELS
# ============================================================================

class Style(BaseModel):
    """Entry of the styles collection (OGC API Styles requirement 3B)."""
    id: str
    title: Optional[str] = None
    links: List[Link] = Field(default_factory=list)


class Styles(BaseModel):
    """
    The styles collection resource.

    Relation http://www.opengis.net/def/rel/ogc/1.0/styles.
    """
    default: Optional[str] = None
    styles: List[Style] = Field(default_factory=list)


# ============================================================================
# OUTPUT DOCUMENT
# ============================================================================

@dataclass
class Document:
    """
    One generated resource, or the terminal error of a streamed run.

    ``path`` is relative to the output root and already carries its
    extension.
    """
    path: str = ""
    media_type: str = ""
    content: bytes = b""
    error: Optional[Exception] = None

    @classmethod
    def failed(cls, error: Exception) -> "Document":
        return cls(error=error)

    @property
    def is_error(self) -> bool:
        return self.error is not None
