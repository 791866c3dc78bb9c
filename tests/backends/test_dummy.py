"""Tests for the dummy translation backend."""

from abouttranslator.backends.dummy import DummyBackend


class TestDummyBackend:
    def test_translate_single(self):
        backend = DummyBackend()
        result = backend.translate("Hello", "JA")
        assert result == "[JA] Hello"

    def test_translate_batch(self):
        backend = DummyBackend()
        results = backend.translate_batch(["Hello", "World"], "fr")
        assert results == ["[FR] Hello", "[FR] World"]

    def test_translate_empty_batch(self):
        backend = DummyBackend()
        assert backend.translate_batch([], "fr") == []

    def test_language_tag_uppercase(self):
        backend = DummyBackend()
        assert backend.translate("Test", "zh-CN") == "[ZH-CN] Test"

    def test_context_manager(self):
        with DummyBackend() as backend:
            assert backend.translate("x", "de") == "[DE] x"
