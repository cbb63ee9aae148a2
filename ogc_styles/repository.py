# ============================================================================
# OGC STYLES CATALOG REPOSITORY
# ============================================================================
# STATUS: Data access - style catalog loading
# PURPOSE: Parse the YAML style catalog strictly into a StylesConfig
# EXPORTS: CatalogRepository, CatalogLoader, load_catalog
# DEPENDENCIES: PyYAML, pydantic, ogc_styles.models, exceptions, util_logger
# ============================================================================
"""
OGC Styles Catalog Repository.

Reads the declarative style catalog. Parsing is strict:
- duplicate mapping keys are rejected
- unknown keys and unknown link relations are rejected (pydantic ``extra="forbid"``)
- timestamps stay strings (``created: 2019-01-01T10:05:00Z`` is published as written)

Every failure surfaces as ConfigurationError naming the catalog path.

Usage:
    catalog = CatalogRepository().load("config.yaml")
"""

from pathlib import Path
from typing import Any, Dict, Union

import yaml
from pydantic import ValidationError
from yaml.constructor import ConstructorError

from exceptions import ConfigurationError
from util_logger import LoggerFactory, ComponentType

from .models import StylesConfig

_TIMESTAMP_TAG = "tag:yaml.org,2002:timestamp"


class CatalogLoader(yaml.SafeLoader):
    """SafeLoader without timestamp resolution that rejects duplicate keys."""

    def construct_mapping(self, node, deep=False):
        seen = set()
        for key_node, _ in node.value:
            key = self.construct_object(key_node, deep=deep)
            if key in seen:
                raise ConstructorError(
                    "while constructing a mapping", node.start_mark,
                    f"found duplicate key {key!r}", key_node.start_mark
                )
            seen.add(key)
        return super().construct_mapping(node, deep=deep)


CatalogLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag != _TIMESTAMP_TAG]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


class CatalogRepository:
    """Loads style catalogs from the filesystem."""

    def __init__(self):
        self.logger = LoggerFactory.create_logger(ComponentType.REPOSITORY, "CatalogRepository")

    def load(self, path: Union[str, Path]) -> StylesConfig:
        """
        Parse a catalog file.

        Raises:
            ConfigurationError: file unreadable, malformed YAML, or schema violation
        """
        path = Path(path)
        data = self._read_yaml(path)
        try:
            catalog = StylesConfig.model_validate(data)
        except ValidationError as e:
            raise ConfigurationError(
                f"could not parse config file {path}: {e}",
                path=str(path)
            ) from e

        self.logger.info(f"Loaded catalog {path} with {len(catalog.styles)} style(s)")
        return catalog

    def _read_yaml(self, path: Path) -> Dict[str, Any]:
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = yaml.load(f, Loader=CatalogLoader)
        except OSError as e:
            raise ConfigurationError(
                f"could not read config file {path}: {e}",
                path=str(path)
            ) from e
        except yaml.YAMLError as e:
            raise ConfigurationError(
                f"could not parse config file {path}: {e}",
                path=str(path)
            ) from e

        if not isinstance(data, dict):
            raise ConfigurationError(
                f"config file {path} must contain a mapping, got {type(data).__name__}",
                path=str(path)
            )
        return data


def load_catalog(path: Union[str, Path]) -> StylesConfig:
    """Parse a catalog file with a default repository."""
    return CatalogRepository().load(path)
