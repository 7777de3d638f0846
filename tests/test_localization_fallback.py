"""Tests for fallback chain computation and back-filling."""

from __future__ import annotations

import logging

import pytest

from msgengine import ConfigurationError, MessageEngine, UnknownLocaleError
from msgengine.localization import FallbackEntry, FallbackResolver


@pytest.fixture
def multi_engine(engine: MessageEngine) -> MessageEngine:
    """English default plus a partial French and a sparse Canadian French catalog."""
    engine.load("en", {"greeting": "Hello", "bye": "Bye", "thanks": "Thanks"})
    engine.load("fr", {"greeting": "Bonjour", "bye": "Au revoir", "thanks": "Merci"})
    engine.load("fr-CA", {"greeting": "Allô"})
    return engine


class TestChainFor:
    """Chain computation."""

    def test_default_only(self, engine: MessageEngine) -> None:
        engine.load("en", {})
        assert FallbackResolver(engine).chain_for("de") == ["en"]

    def test_base_language_when_loaded(self, multi_engine: MessageEngine) -> None:
        assert FallbackResolver(multi_engine).chain_for("fr-CA") == ["fr", "en"]

    def test_base_language_when_not_loaded(self, engine: MessageEngine) -> None:
        engine.load("en", {})
        assert FallbackResolver(engine).chain_for("pt-BR") == ["en"]

    def test_base_language_of_itself(self, multi_engine: MessageEngine) -> None:
        assert FallbackResolver(multi_engine).chain_for("fr") == ["en"]

    def test_explicit_chain(self, multi_engine: MessageEngine) -> None:
        chains = {"fr-CA": ["fr-BE", "fr"]}
        assert FallbackResolver(multi_engine).chain_for("fr-CA", chains) == ["fr-BE", "fr", "en"]

    def test_explicit_chains_disable_base_language(self, multi_engine: MessageEngine) -> None:
        """With explicit chains, locales not named there fall back to the default only."""
        assert FallbackResolver(multi_engine).chain_for("fr-CA", {"de": ["en"]}) == ["en"]

    def test_requires_default_locale(self) -> None:
        with pytest.raises(ConfigurationError, match="No default locale is set"):
            FallbackResolver(MessageEngine()).chain_for("fr")


class TestFallback:
    """Back-filling."""

    def test_missing_key_copied_from_default(self, engine: MessageEngine) -> None:
        engine.load("en", {"greeting": "Hello", "bye": "Bye"})
        engine.load("fr", {"bye": "Au revoir"})

        result = engine.fallback()

        assert result == {"en": [], "fr": [("greeting", "en")]}
        assert engine.t("fr", "greeting") == "Hello"
        assert engine.t("fr", "bye") == "Au revoir"

    def test_provenance_entries(self, engine: MessageEngine) -> None:
        engine.load("en", {"greeting": "Hello"})
        engine.load("fr", {})
        entry = engine.fallback()["fr"][0]
        assert isinstance(entry, FallbackEntry)
        assert entry.key == "greeting"
        assert entry.source_locale == "en"

    def test_base_language_is_preferred(self, multi_engine: MessageEngine) -> None:
        result = multi_engine.fallback()
        assert result["fr-CA"] == [("bye", "fr"), ("thanks", "fr")]
        assert multi_engine.t("fr-CA", "greeting") == "Allô"
        assert multi_engine.t("fr-CA", "bye") == "Au revoir"

    def test_records_are_shared(self, multi_engine: MessageEngine) -> None:
        multi_engine.fallback()
        fr, fr_ca = multi_engine.get_locale("fr"), multi_engine.get_locale("fr-CA")
        assert fr is not None and fr_ca is not None
        assert fr_ca["bye"] is fr["bye"]

    def test_existing_keys_are_kept(self, multi_engine: MessageEngine) -> None:
        multi_engine.fallback()
        assert multi_engine.t("fr", "greeting") == "Bonjour"

    def test_explicit_chain_creates_locale(self, engine: MessageEngine) -> None:
        engine.load("en", {"a": "A", "b": "B"})
        engine.load("de", {"a": "A-de"})

        result = engine.fallback({"lb": ["de"]})

        assert engine.has_locale("lb")
        assert result["de"] == [("b", "en")]
        # lb runs before de is back-filled, so "b" comes from en
        assert result["lb"] == [("a", "de"), ("b", "en")]
        assert engine.t("lb", "a") == "A-de"

    def test_explicit_chain_keys_run_before_loaded_locales(self, engine: MessageEngine) -> None:
        engine.load("en", {"a": "A", "b": "B"})
        engine.load("de", {"a": "A-de"})
        engine.load("de-AT", {})

        result = engine.fallback({"de-AT": ["de"]})

        assert list(result) == ["de-AT", "en", "de"]
        assert result["de-AT"] == [("a", "de"), ("b", "en")]
        assert result["de"] == [("b", "en")]

    def test_loaded_order_without_explicit_chains(self, engine: MessageEngine) -> None:
        engine.load("en", {"a": "A", "b": "B"})
        engine.load("de", {"a": "A-de"})
        engine.load("de-AT", {})

        result = engine.fallback()

        assert list(result) == ["en", "de", "de-AT"]
        # de was back-filled first, so de-AT finds both keys there
        assert result["de-AT"] == [("a", "de"), ("b", "de")]

    def test_unloaded_chain_entry_is_skipped(
        self, engine: MessageEngine, caplog: pytest.LogCaptureFixture
    ) -> None:
        engine.load("en", {"a": "A"})
        engine.load("fr", {})
        with caplog.at_level(logging.WARNING, logger="msgengine.localization.fallback"):
            result = engine.fallback({"fr": ["it"]})
        assert result["fr"] == [("a", "en")]
        assert "'it' is not loaded" in caplog.text

    def test_key_missing_everywhere_stays_missing(self, engine: MessageEngine) -> None:
        engine.load("en", {"a": "A"})
        engine.load("fr", {"only_fr": "F"})
        engine.fallback()
        fr = engine.get_locale("fr")
        assert fr is not None
        assert list(fr) == ["only_fr", "a"]

    def test_namespaced_keys_match_exactly(self, engine: MessageEngine) -> None:
        engine.load("en", {"title": "Home"}, namespace="home")
        engine.load("fr", {"title": "Accueil"})
        result = engine.fallback()
        assert result["fr"] == [("home:title", "en")]

    def test_plural_records_are_filled(self, engine: MessageEngine) -> None:
        engine.load("en", {"items#n": {"one": "{ n } item", "other": "{ n } items"}})
        engine.load("fr", {})
        engine.fallback()
        assert engine.t("fr", "items", {"n": 1}) == "1 item"

    def test_requires_default_locale(self) -> None:
        engine = MessageEngine()
        engine.load("en", {"a": "A"})
        with pytest.raises(ConfigurationError):
            engine.fallback()

    def test_default_locale_must_be_loaded(self, engine: MessageEngine) -> None:
        engine.load("fr", {"a": "A"})
        with pytest.raises(UnknownLocaleError, match='"en" does not exist'):
            engine.fallback()

    def test_fallback_logs_summary(
        self, multi_engine: MessageEngine, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.INFO, logger="msgengine.localization.fallback"):
            multi_engine.fallback()
        assert "Fallback for 'fr-CA' via fr -> en: 2 key(s) filled" in caplog.text
