from __future__ import annotations

import pytest
from pydantic import ValidationError

from recipe_site.content.i18n import SUPPORTED_LANGUAGES, TRANSLATIONS, translate
from recipe_site.content.instagram import MOCK_POSTS, InstagramSettings, get_feed
from recipe_site.content.pages import DEFAULT_PAGE_CONTENT, PageContentStore


class TestPageContent:
    def test_seeded_with_default_copy(self):
        store = PageContentStore()
        assert store.section_map("home") == DEFAULT_PAGE_CONTENT["home"]

    def test_rows_sorted_by_section_then_key(self):
        rows = PageContentStore().get_page("home")
        keys = [(r.section_name, r.content_key) for r in rows]
        assert keys == sorted(keys)
        assert len(rows) == 6

    def test_update_is_an_upsert(self):
        store = PageContentStore()
        store.update("home", "hero", "title", "Cook Something New")
        store.update("home", "hero", "title", "Cook Something Great")
        rows = [r for r in store.get_page("home") if r.section_name == "hero" and r.content_key == "title"]
        assert len(rows) == 1
        assert rows[0].content_text == "Cook Something Great"

    def test_new_section_on_new_page(self):
        store = PageContentStore()
        store.update("about", "intro", "body", "We love food.")
        assert store.section_map("about") == {"intro": {"body": "We love food."}}

    def test_empty_store_falls_back_to_defaults(self):
        store = PageContentStore(seed={})
        assert store.get_page("all-recipes") == []
        assert store.section_map("all-recipes") == DEFAULT_PAGE_CONTENT["all-recipes"]
        assert store.section_map("unknown") == {}


class TestTranslations:
    def test_languages(self):
        assert SUPPORTED_LANGUAGES == ["en", "es", "fr"]

    def test_every_language_has_the_same_keys(self):
        keys = set(TRANSLATIONS["en"])
        for language in SUPPORTED_LANGUAGES:
            assert set(TRANSLATIONS[language]) == keys

    def test_translate(self):
        assert translate("nav.home") == "Home"
        assert translate("nav.home", "es") == "Inicio"
        assert translate("nav.home", "fr") == "Accueil"

    def test_missing_key_or_language(self):
        assert translate("nope.missing", "es") == "nope.missing"
        assert translate("nope.missing", "es", fallback="Hi") == "Hi"
        assert translate("nav.home", "de") == "nav.home"


class TestInstagramFeed:
    def test_default_shows_six(self):
        assert get_feed(InstagramSettings()) == MOCK_POSTS[:6]

    def test_display_count_limits_feed(self):
        assert len(get_feed(InstagramSettings(display_count=12))) == 12
        assert len(get_feed(InstagramSettings(display_count=2))) == 2

    def test_disabled_feed_is_empty(self):
        assert get_feed(InstagramSettings(enabled=False)) == []

    @pytest.mark.parametrize("count", [0, 13])
    def test_display_count_bounds(self, count):
        with pytest.raises(ValidationError):
            InstagramSettings(display_count=count)
