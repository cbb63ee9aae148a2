"""
Link relation resolver: paths, urls and href updates.
"""

import logging

import pytest

from exceptions import ResolutionError
from ogc_styles.enums import LinkRelation
from ogc_styles.links import link_to_path, relation_to_path, relation_to_url, update_href
from ogc_styles.models import Format, Link

BASE = "https://example.org/catalog/1.0"
CUSTOM = Format(media_type="application/vnd.custom.style+json", name="custom", extension="custom.json")


class TestRelationToPath:
    @pytest.mark.parametrize("relation,expected", [
        (LinkRelation.STYLES, "styles"),
        (LinkRelation.STYLESHEET, "styles/night"),
        (LinkRelation.DESCRIBEDBY, "styles/night/metadata"),
        (LinkRelation.PREVIEW, "resources/night"),
        (LinkRelation.PRELOAD, "resources/night"),
    ])
    def test_known_relations(self, relation, expected):
        assert relation_to_path(relation, "night") == expected

    @pytest.mark.parametrize("relation", [
        LinkRelation.ENCLOSURE, LinkRelation.SELF, LinkRelation.START, LinkRelation.ALTERNATE,
    ])
    def test_link_only_relations_fail(self, relation):
        with pytest.raises(ResolutionError) as exc_info:
            relation_to_path(relation, "night")
        assert str(exc_info.value) == f"no path known for link relation: {relation.value}"
        assert exc_info.value.relation == relation.value
        assert exc_info.value.identifier == "night"

    def test_relation_to_url(self):
        assert relation_to_url(LinkRelation.DESCRIBEDBY, BASE, "night") == f"{BASE}/styles/night/metadata"


class TestLinkToPath:
    def test_mapbox_extension(self):
        link = Link(rel=LinkRelation.STYLESHEET, type="application/vnd.mapbox.style+json")
        assert link_to_path(link, "night") == "styles/night.mapbox.json"

    def test_versioned_media_type_uses_plain_extension(self):
        link = Link(rel=LinkRelation.STYLESHEET, type="application/vnd.ogc.sld+xml;version=1.0")
        assert link_to_path(link, "night") == "styles/night.sld"

    def test_additional_format_extension(self):
        link = Link(rel=LinkRelation.STYLESHEET, type=CUSTOM.media_type)
        assert link_to_path(link, "night", [CUSTOM]) == "styles/night.custom.json"

    def test_unknown_media_type_has_no_extension(self):
        link = Link(rel=LinkRelation.STYLESHEET, type="application/x-unknown")
        assert link_to_path(link, "night") == "styles/night"

    def test_extension_not_duplicated(self):
        link = Link(rel=LinkRelation.PREVIEW, type="image/png")
        assert link_to_path(link, "thumbnail.png") == "resources/thumbnail.png"

    def test_extension_appended_to_bare_name(self):
        link = Link(rel=LinkRelation.PREVIEW, type="image/png")
        assert link_to_path(link, "thumbnail") == "resources/thumbnail.png"

    def test_extension_text_without_dot_still_appended(self):
        link = Link(rel=LinkRelation.PREVIEW, type="image/png")
        assert link_to_path(link, "logo_png") == "resources/logo_png.png"


class TestUpdateHref:
    def test_query_with_versioned_name(self):
        link = Link(rel=LinkRelation.STYLESHEET, type="application/vnd.ogc.sld+xml;version=1.0")
        updated = update_href(link, BASE, "night", with_query=True)
        assert updated.href == f"{BASE}/styles/night?f=sld10"

    def test_query_with_additional_format(self):
        link = Link(rel=LinkRelation.STYLESHEET, type=CUSTOM.media_type)
        assert update_href(link, BASE, "night", [CUSTOM], with_query=True).href == f"{BASE}/styles/night?f=custom"

    def test_query_omitted_for_unknown_format(self):
        link = Link(rel=LinkRelation.STYLESHEET, type="application/x-unknown")
        assert update_href(link, BASE, "night", with_query=True).href == f"{BASE}/styles/night"

    def test_extension(self):
        link = Link(rel=LinkRelation.PREVIEW, type="image/png")
        assert update_href(link, BASE, "night", with_extension=True).href == f"{BASE}/resources/night.png"

    def test_extension_skipped_when_present(self):
        link = Link(rel=LinkRelation.PREVIEW, type="image/png")
        updated = update_href(link, BASE, "thumbnail.png", with_extension=True)
        assert updated.href == f"{BASE}/resources/thumbnail.png"

    def test_plain_url(self):
        link = Link(rel=LinkRelation.DESCRIBEDBY, type="application/json")
        assert update_href(link, BASE, "night").href == f"{BASE}/styles/night/metadata"

    def test_query_and_extension_conflict(self):
        link = Link(rel=LinkRelation.STYLESHEET, type="application/vnd.mapbox.style+json")
        with pytest.raises(ResolutionError, match="both a format query parameter and extension"):
            update_href(link, BASE, "night", with_query=True, with_extension=True)

    def test_unsupported_relation(self):
        with pytest.raises(ResolutionError):
            update_href(Link(rel=LinkRelation.ENCLOSURE, href="https://x"), BASE, "night")

    def test_overwrites_existing_href_with_warning(self, caplog):
        link = Link(rel=LinkRelation.STYLESHEET, type="application/vnd.mapbox.style+json", href="https://old/x")
        with caplog.at_level(logging.WARNING):
            updated = update_href(link, BASE, "night", with_query=True)
        assert updated.href == f"{BASE}/styles/night?f=mapbox"
        assert "overwriting" in caplog.text

    def test_input_link_not_mutated(self):
        link = Link(rel=LinkRelation.STYLESHEET, type="application/vnd.mapbox.style+json", asset_filename="m.json")
        updated = update_href(link, BASE, "night", with_query=True)
        assert link.href is None
        assert updated is not link
        assert updated.asset_filename == "m.json"

    def test_deterministic(self):
        link = Link(rel=LinkRelation.STYLESHEET, type="application/vnd.ogc.sld+xml;version=1.0")
        hrefs = {update_href(link, BASE, "night", with_query=True).href for _ in range(3)}
        paths = {link_to_path(link, "night") for _ in range(3)}
        assert len(hrefs) == 1
        assert len(paths) == 1
