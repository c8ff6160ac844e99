"""Tests for reading translations with fallbacks."""

import pytest

from json_locale.errors import InvalidLocale
from json_locale.resolution import ANY, matches, read_translation

LOCALES = ["es", "en", "de"]


def read(translations, locale="en", **kwargs):
    return read_translation(translations, locale, available_locales=LOCALES, **kwargs)


class TestMatches:
    def test_presence(self):
        t = {"es": "Nombre", "en": "", "de": None}
        assert matches(t, "es", True)
        assert not matches(t, "en", True)
        assert not matches(t, "de", True)
        assert not matches(t, "fr", True)

    def test_existence(self):
        t = {"es": "Nombre", "en": "", "de": None}
        assert matches(t, "en", False)
        assert matches(t, "de", False)
        assert not matches(t, "fr", False)


class TestReadTranslation:
    def test_primary_value(self):
        assert read({"en": "Name"}) == "Name"

    def test_none_map(self):
        assert read(None, fallback=ANY) is None

    def test_invalid_locale(self):
        with pytest.raises(InvalidLocale):
            read({"fr": "Nom"}, "fr")

    def test_none_locale(self):
        with pytest.raises(InvalidLocale):
            read({"en": "Name"}, None)

    def test_locale_checked_before_map(self):
        with pytest.raises(InvalidLocale):
            read(None, "fr")

    def test_missing_without_fallback(self):
        assert read({"es": "Nombre"}) is None
        assert read({"es": "Nombre"}, fallback=None) is None

    def test_primary_match_ignores_fallback(self):
        t = {"es": "Nombre", "en": "Name"}
        assert read(t, fallback=ANY) == "Name"
        assert read(t, fallback="es") == "Name"
        assert read(t, fallback=["es"]) == "Name"

    def test_blank_primary_reads_as_none_in_presence_mode(self):
        assert read({"es": "Nombre", "en": ""}) is None


class TestFallbackOnPresence:
    """Map without a usable "en" value, presence-based matching."""

    @pytest.mark.parametrize("translations", [
        {"es": "Nombre", "de": "Titel"},
        {"es": "Nombre", "en": None, "de": "Titel"},
        {"es": "Nombre", "en": "", "de": "Titel"},
    ])
    def test_fallbacks(self, translations):
        assert read(translations, fallback="es") == "Nombre"
        assert read(translations, fallback=["es"]) == "Nombre"
        assert read(translations, fallback="de") == "Titel"
        assert read(translations, fallback=["de"]) == "Titel"
        assert read(translations, fallback=ANY) == "Nombre"
        assert read(translations, fallback=True) == "Nombre"
        assert read(translations, fallback="any") == "Nombre"

    def test_any_uses_map_order(self):
        assert read({"de": "Titel", "es": "Nombre"}, fallback=ANY) == "Titel"

    def test_any_skips_blank_entries(self):
        assert read({"es": "", "de": None, "fr": "Nom"}, fallback=ANY) == "Nom"

    def test_any_without_candidates(self):
        assert read({"en": "", "es": ""}, fallback=ANY) is None

    def test_list_order_wins(self):
        t = {"es": "Nombre", "de": "Titel"}
        assert read(t, fallback=["de", "es"]) == "Titel"
        assert read(t, fallback=("es", "de")) == "Nombre"

    def test_list_skips_blank(self):
        assert read({"es": "", "de": "Titel"}, fallback=["es", "de"]) == "Titel"

    def test_list_without_match(self):
        assert read({"es": ""}, fallback=["es", "fr"]) is None

    def test_explicit_locale_skips_presence_check(self):
        assert read({"es": ""}, fallback="es") == ""
        assert read({"es": "Nombre"}, fallback="fr") is None


class TestFallbackOnExistence:
    def test_missing_key_falls_back(self):
        t = {"es": "Nombre", "de": "Titel"}
        kwargs = {"fallback_on_presence": False}
        assert read(t, fallback="de", **kwargs) == "Titel"
        assert read(t, fallback=["de"], **kwargs) == "Titel"
        assert read(t, fallback=ANY, **kwargs) == "Nombre"

    @pytest.mark.parametrize("stored", [None, ""])
    def test_existing_key_never_falls_back(self, stored):
        t = {"es": "Nombre", "en": stored, "de": "Titel"}
        kwargs = {"fallback_on_presence": False}
        assert read(t, **kwargs) == stored
        assert read(t, fallback="es", **kwargs) == stored
        assert read(t, fallback=["de"], **kwargs) == stored
        assert read(t, fallback=ANY, **kwargs) == stored
        assert read(t, fallback=True, **kwargs) == stored

    def test_any_accepts_blank_entries(self):
        t = {"es": "", "de": "Titel"}
        assert read(t, fallback=ANY, fallback_on_presence=False) == ""
        assert read(t, fallback=["es", "de"], fallback_on_presence=False) == ""


class TestFallbackCodes:
    AVAILABLE = ["en", "pt-BR", "es"]

    def read(self, translations, **kwargs):
        return read_translation(translations, "en", available_locales=self.AVAILABLE, **kwargs)

    def test_list_entries_match_available_locales(self):
        t = {"pt-BR": "Nome"}
        assert self.read(t, fallback=["pt-br"]) == "Nome"
        assert self.read(t, fallback=["fr", "PTBR"]) == "Nome"

    def test_explicit_code_matches_available_locale(self):
        assert self.read({"pt-BR": "Nome"}, fallback="pt_br") == "Nome"

    def test_unavailable_code_is_used_as_given(self):
        assert self.read({"fr": "Nom"}, fallback="fr") == "Nom"
        assert self.read({"fr": "Nom"}, fallback=["fr"]) == "Nom"

    def test_available_locales_may_be_a_generator(self):
        t = {"pt-BR": "Nome"}
        available = (code for code in self.AVAILABLE)
        assert read_translation(t, "en", available_locales=available, fallback=["ptbr"]) == "Nome"
