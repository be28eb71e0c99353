"""
Tests for the locale registry and Accept-Language parsing
"""

import pytest

from marketing_site.i18n.locale import (
    DEFAULT_LOCALE,
    SUPPORTED_LOCALES,
    from_cms_locale,
    get_language_info,
    is_supported_locale,
    normalize_locale,
    og_locale,
    parse_accept_language,
    preferred_locale,
    site_locale_for,
    to_cms_locale,
)


class TestLocaleRegistry:
    def test_supported_locales(self):
        assert SUPPORTED_LOCALES == ("en", "pt", "fr")

    def test_default_locale_is_supported(self):
        assert DEFAULT_LOCALE == "pt"
        assert DEFAULT_LOCALE in SUPPORTED_LOCALES

    @pytest.mark.parametrize("locale", ["en", "pt", "fr"])
    def test_is_supported(self, locale):
        assert is_supported_locale(locale) is True

    @pytest.mark.parametrize("locale", ["de", "EN", "pt-PT", "", None, 1])
    def test_is_not_supported(self, locale):
        assert is_supported_locale(locale) is False

    def test_normalize_unknown_to_default(self):
        assert normalize_locale("de") == DEFAULT_LOCALE
        assert normalize_locale(None) == DEFAULT_LOCALE
        assert normalize_locale("fr") == "fr"

    def test_og_locale_mapping(self):
        assert og_locale("pt") == "pt_PT"
        assert og_locale("fr") == "fr_FR"
        assert og_locale("en") == "en_US"

    def test_language_info(self):
        info = get_language_info("pt")
        assert info["code"] == "pt"
        assert info["name"] == "Português"
        assert info["is_default"] is True
        assert info["og_locale"] == "pt_PT"

    def test_language_info_unknown_code(self):
        info = get_language_info("xx")
        assert info["name"] == "xx"
        assert info["is_default"] is False


class TestAcceptLanguage:
    def test_exact_match(self):
        assert parse_accept_language("fr") == "fr"

    def test_region_subtag_stripped(self):
        assert parse_accept_language("fr-FR,fr;q=0.9,en;q=0.8") == "fr"

    def test_header_order_wins_over_quality(self):
        """Tags are read in header order; q-values are ignored."""
        assert parse_accept_language("en;q=0.1,fr;q=0.9") == "en"

    def test_skips_unsupported_tags(self):
        assert parse_accept_language("de-DE,de;q=0.9,pt-BR;q=0.8") == "pt"

    def test_case_insensitive(self):
        assert parse_accept_language("EN-us") == "en"

    def test_no_match(self):
        assert parse_accept_language("de,ja") is None

    @pytest.mark.parametrize("header", ["", None, ",,,", ";q=0.5", "*"])
    def test_malformed_header(self, header):
        assert parse_accept_language(header) is None

    def test_preferred_locale_falls_back_to_default(self):
        assert preferred_locale("ja") == DEFAULT_LOCALE
        assert preferred_locale(None) == DEFAULT_LOCALE
        assert preferred_locale("en-GB") == "en"


class TestCmsLocaleMapping:
    def test_site_locale_sent_unchanged(self):
        assert to_cms_locale("fr") == "fr"

    def test_unknown_site_locale_sent_as_default(self):
        assert to_cms_locale("de") == DEFAULT_LOCALE

    @pytest.mark.parametrize(
        "cms_locale,expected",
        [("pt-BR", "pt"), ("pt-PT", "pt"), ("fr-CA", "fr"), ("fr-FR", "fr"), ("en", "en"), ("es", "pt"), (None, "pt")],
    )
    def test_from_cms_locale(self, cms_locale, expected):
        assert from_cms_locale(cms_locale) == expected

    @pytest.mark.parametrize("cms_locale,expected", [("pt-PT", "pt"), ("FR-ca", "fr"), ("en", "en")])
    def test_site_locale_for_served(self, cms_locale, expected):
        assert site_locale_for(cms_locale) == expected

    @pytest.mark.parametrize("cms_locale", ["de", "es", "", None, 3])
    def test_site_locale_for_unserved(self, cms_locale):
        assert site_locale_for(cms_locale) is None
