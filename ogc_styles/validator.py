# ============================================================================
# OGC STYLES CATALOG VALIDATOR
# ============================================================================
# STATUS: Core - gate before generation
# PURPOSE: Check catalog-wide invariants and report every violation at once
# EXPORTS: CatalogValidator, validate_catalog
# DEPENDENCIES: ogc_styles.models, exceptions, util_logger
# ============================================================================
"""
Style Catalog Validator.

Checks (OGC API Styles requirement numbers):
    3D - the id of each style is unique
    3G - the default, if provided, is the id of one of the styles
    3E - each style has at least one stylesheet link with a media type

All checks run; failures are joined in the order above (per-style checks in
catalog order) and raised as one CatalogValidationError.
"""

from collections import Counter
from typing import List, Optional

from exceptions import CatalogValidationError
from util_logger import LoggerFactory, ComponentType

from .enums import LinkRelation
from .models import StyleMetadata, StylesConfig


class CatalogValidator:
    """Runs the catalog invariants against one StylesConfig."""

    def __init__(self, catalog: StylesConfig):
        self.catalog = catalog
        self.logger = LoggerFactory.create_logger(ComponentType.VALIDATOR, "CatalogValidator")

    def collect_errors(self) -> List[str]:
        """All violation messages, empty when the catalog is valid."""
        errors: List[str] = []
        for message in (self.check_unique_ids(), self.check_default_style()):
            if message:
                errors.append(message)
        for metadata in self.catalog.styles:
            message = self.check_style_encoding(metadata)
            if message:
                errors.append(message)
        return errors

    def validate(self) -> None:
        """
        Raises:
            CatalogValidationError: one or more invariants failed
        """
        errors = self.collect_errors()
        if errors:
            self.logger.error(f"Catalog validation failed with {len(errors)} error(s)")
            raise CatalogValidationError(errors)
        self.logger.info(f"Catalog valid: {len(self.catalog.styles)} style(s)")

    def check_unique_ids(self) -> Optional[str]:
        """Requirement 3D: the id member of each style SHALL be unique."""
        counts = Counter(metadata.id for metadata in self.catalog.styles)
        duplicates = [style_id for style_id, count in counts.items() if count > 1]
        if duplicates:
            return f"requirement 3D fails; found styles with duplicate ids: {', '.join(duplicates)}"
        return None

    def check_default_style(self) -> Optional[str]:
        """Requirement 3G: the default member SHALL, if provided, be the id of one of the styles."""
        default = self.catalog.default
        if default is None:
            return None
        if any(metadata.id == default for metadata in self.catalog.styles):
            return None
        return f"requirement 3G fails; default {default} not found in styles"

    @staticmethod
    def check_style_encoding(metadata: StyleMetadata) -> Optional[str]:
        """
        Requirement 3E: each style SHALL have at least one link to a style
        encoding (relation stylesheet) stating the media type of the encoding.
        """
        for stylesheet in metadata.stylesheets:
            if stylesheet.link.rel == LinkRelation.STYLESHEET and stylesheet.link.type is not None:
                return None
        return f"requirement 3E fails; style {metadata.id} stylesheet definition incorrect"


def validate_catalog(catalog: StylesConfig) -> None:
    """Validate a catalog, raising CatalogValidationError on any violation."""
    CatalogValidator(catalog).validate()
