"""
Tests for the CMS shape normalizer
"""

import pytest

from marketing_site.cms.normalize import (
    absolute_media_url,
    extract_image_alt,
    extract_image_url,
    extract_section,
    extract_text,
    first_item,
    get_property,
    to_array,
    unwrap_entry,
)
from marketing_site.config import settings

CMS = "https://cms.example.com"


class TestExtractSection:
    def test_flat(self):
        assert extract_section({"heroSection": {"a": 1}}, "heroSection") == {"a": 1}

    def test_attributes(self):
        assert extract_section({"attributes": {"heroSection": {"a": 1}}}, "heroSection") == {"a": 1}

    def test_data_attributes(self):
        payload = {"data": {"id": 1, "attributes": {"heroSection": {"a": 1}}}}
        assert extract_section(payload, "heroSection") == {"a": 1}

    def test_missing(self):
        assert extract_section({}, "heroSection") is None

    @pytest.mark.parametrize("payload", [None, [], "text", 42, {"attributes": None}, {"data": []}])
    def test_unexpected_payloads(self, payload):
        assert extract_section(payload, "heroSection") is None

    def test_flat_wins_over_nested(self):
        payload = {"heroSection": "flat", "attributes": {"heroSection": "nested"}}
        assert extract_section(payload, "heroSection") == "flat"

    def test_none_value_falls_through(self):
        payload = {"heroSection": None, "attributes": {"heroSection": {"a": 1}}}
        assert extract_section(payload, "heroSection") == {"a": 1}

    def test_falsy_but_present_value_returned(self):
        assert extract_section({"trustPoints": []}, "trustPoints") == []


class TestExtractText:
    def test_string(self):
        assert extract_text("Hello") == "Hello"

    @pytest.mark.parametrize(
        "field,expected",
        [
            ({"text": "a", "content": "b"}, "a"),
            ({"content": "b", "value": "c"}, "b"),
            ({"value": "c"}, "c"),
        ],
    )
    def test_property_order(self, field, expected):
        assert extract_text(field, "fallback") == expected

    @pytest.mark.parametrize("field", [None, "", {}, [], 12, {"text": ""}, {"text": {"nested": "x"}}])
    def test_fallback(self, field):
        assert extract_text(field, "fallback") == "fallback"

    def test_default_fallback_is_empty(self):
        assert extract_text(None) == ""


class TestToArray:
    def test_none(self):
        assert to_array(None) == []

    def test_object(self):
        assert to_array({"x": 1}) == [{"x": 1}]

    def test_list(self):
        items = [{"x": 1}, {"x": 2}]
        assert to_array(items) is items

    def test_data_list(self):
        assert to_array({"data": [{"x": 1}]}) == [{"x": 1}]

    @pytest.mark.parametrize("field", ["text", 3, True])
    def test_scalars(self, field):
        assert to_array(field) == []

    def test_first_item(self):
        assert first_item([{"x": 1}, {"x": 2}]) == {"x": 1}
        assert first_item({"x": 1}) == {"x": 1}
        assert first_item([]) is None
        assert first_item(None) is None


class TestExtractImageUrl:
    def test_relative_string(self):
        assert extract_image_url("/x.jpg", CMS) == f"{CMS}/x.jpg"

    def test_relative_string_without_slash(self):
        assert extract_image_url("uploads/x.jpg", CMS) == f"{CMS}/uploads/x.jpg"

    def test_absolute_string(self):
        assert extract_image_url("https://y/z.png", CMS) == "https://y/z.png"

    def test_none(self):
        assert extract_image_url(None) is None

    def test_relation_single(self):
        field = {"data": {"id": 1, "attributes": {"url": "/uploads/a.png"}}}
        assert extract_image_url(field, CMS) == f"{CMS}/uploads/a.png"

    def test_relation_list(self):
        field = {"data": [{"attributes": {"url": "https://cdn/a.png"}}, {"attributes": {"url": "/b.png"}}]}
        assert extract_image_url(field, CMS) == "https://cdn/a.png"

    def test_attributes(self):
        assert extract_image_url({"attributes": {"url": "/c.png"}}, CMS) == f"{CMS}/c.png"

    def test_flat_url(self):
        assert extract_image_url({"id": 3, "url": "/d.png"}, CMS) == f"{CMS}/d.png"

    def test_empty_relation_falls_back_to_flat_url(self):
        assert extract_image_url({"data": None, "url": "/e.png"}, CMS) == f"{CMS}/e.png"

    @pytest.mark.parametrize("field", ["", {}, [], {"data": []}, {"data": {"attributes": {}}}, 7])
    def test_unknown_shapes(self, field):
        assert extract_image_url(field, CMS) is None

    def test_uses_configured_base_url(self):
        expected = settings.cms_base_url.rstrip("/") + "/x.jpg"
        assert extract_image_url("/x.jpg") == expected

    def test_absolute_media_url_trailing_slash_base(self):
        assert absolute_media_url("/x.jpg", CMS + "/") == f"{CMS}/x.jpg"


class TestExtractImageAlt:
    def test_relation(self):
        assert extract_image_alt({"data": {"attributes": {"alternativeText": "Lisbon"}}}) == "Lisbon"

    def test_attributes_alt(self):
        assert extract_image_alt({"attributes": {"alt": "Porto"}}) == "Porto"

    def test_flat(self):
        assert extract_image_alt({"url": "/a.png", "alternativeText": "Faro"}) == "Faro"

    def test_flat_prefers_alt(self):
        assert extract_image_alt({"url": "/a.png", "alt": "Sintra", "alternativeText": "Faro"}) == "Sintra"

    def test_attributes_prefer_alternative_text(self):
        assert extract_image_alt({"attributes": {"alt": "Sintra", "alternativeText": "Faro"}}) == "Faro"

    @pytest.mark.parametrize("field", [None, "/a.png", {}, {"data": None}])
    def test_missing(self, field):
        assert extract_image_alt(field) == ""


class TestHelpers:
    def test_unwrap_entry_nested(self):
        assert unwrap_entry({"id": 1, "attributes": {"title": "T"}}) == {"title": "T"}

    def test_unwrap_entry_flat(self):
        entry = {"id": 1, "title": "T"}
        assert unwrap_entry(entry) is entry

    def test_unwrap_entry_none(self):
        assert unwrap_entry(None) is None

    def test_get_property(self):
        obj = {"seo": [{"openGraph": {"ogTitle": "OG"}}]}
        assert get_property(obj, "seo.0.openGraph.ogTitle") == "OG"

    def test_get_property_fallback(self):
        assert get_property({"a": None}, "a.b", "x") == "x"
        assert get_property(None, "a", "x") == "x"
        assert get_property({"a": [1]}, "a.5", "x") == "x"
