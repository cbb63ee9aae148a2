"""
Catalog repository: strict YAML parsing into StylesConfig.
"""

import textwrap

import pytest

from exceptions import ConfigurationError
from ogc_styles.enums import GeometryType, LinkRelation
from ogc_styles.repository import CatalogRepository, load_catalog


def _write(tmp_path, text: str):
    path = tmp_path / "config.yaml"
    path.write_text(textwrap.dedent(text))
    return path


class TestLoadCatalog:
    def test_full_catalog(self, config_path):
        catalog = CatalogRepository().load(config_path)

        assert len(catalog.styles) == 1
        assert len(catalog.styles[0].stylesheets) == 3
        assert len(catalog.styles[0].links) == 1
        assert catalog.default == "night"
        assert catalog.additional_formats[0].name == "custom"
        assert catalog.additional_assets[0].path == "fonts/*.pbf"

    def test_base_resource_slashes_stripped(self, catalog):
        assert catalog.base_resource == "https://example.org/catalog/1.0"

    def test_scalars_kept_as_strings(self, catalog):
        metadata = catalog.styles[0]
        assert metadata.created == "2019-01-01T10:05:00Z"
        assert metadata.stylesheets[0].version == "8"
        assert metadata.stylesheets[1].version == "1.0"

    def test_kebab_case_fields(self, catalog):
        metadata = catalog.styles[0]
        assert metadata.point_of_contact == "John Doe"
        assert metadata.links[0].asset_filename == "thumbnail.png"
        assert metadata.layers[0].geometry_type == GeometryType.POLYGONS
        assert metadata.layers[0].sample_data.rel == LinkRelation.START

    def test_minimal_catalog(self, minimal_catalog):
        assert minimal_catalog.default is None
        assert minimal_catalog.additional_formats == []
        assert minimal_catalog.styles[0].stylesheets == []

    def test_empty_default(self, tmp_path):
        path = _write(tmp_path, """
            base-resource: https://example.org
            default: ""
            styles: []
        """)
        assert load_catalog(path).default is None


class TestStrictParsing:
    def test_unknown_key_rejected(self, tmp_path):
        path = _write(tmp_path, """
            base-resource: https://example.org
            styles:
              - id: night
                colour: dark
        """)
        with pytest.raises(ConfigurationError) as exc_info:
            load_catalog(path)
        assert exc_info.value.path == str(path)

    def test_unknown_relation_rejected(self, tmp_path):
        path = _write(tmp_path, """
            base-resource: https://example.org
            styles:
              - id: night
                links:
                  - rel: thumbnail
        """)
        with pytest.raises(ConfigurationError):
            load_catalog(path)

    def test_unknown_geometry_type_rejected(self, tmp_path):
        path = _write(tmp_path, """
            base-resource: https://example.org
            styles:
              - id: night
                layers:
                  - id: roads
                    type: polygon
        """)
        with pytest.raises(ConfigurationError):
            load_catalog(path)

    def test_duplicate_key_rejected(self, tmp_path):
        path = _write(tmp_path, """
            base-resource: https://example.org
            base-resource: https://example.com
            styles: []
        """)
        with pytest.raises(ConfigurationError, match="duplicate key"):
            load_catalog(path)

    def test_missing_base_resource(self, tmp_path):
        path = _write(tmp_path, """
            styles: []
        """)
        with pytest.raises(ConfigurationError):
            load_catalog(path)

    def test_malformed_yaml(self, tmp_path):
        path = _write(tmp_path, """
            base-resource: [unclosed
        """)
        with pytest.raises(ConfigurationError, match="could not parse config file"):
            load_catalog(path)

    def test_not_a_mapping(self, tmp_path):
        path = _write(tmp_path, """
            - just
            - a list
        """)
        with pytest.raises(ConfigurationError, match="must contain a mapping"):
            load_catalog(path)

    def test_missing_file(self, tmp_path):
        path = tmp_path / "absent.yaml"
        with pytest.raises(ConfigurationError, match="could not read config file") as exc_info:
            load_catalog(path)
        assert exc_info.value.path == str(path)
