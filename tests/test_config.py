"""Tests for ContextVar-based analyzer configuration.

Validates thread isolation, context manager behavior, and that registries
pick up the active config at construction.
"""

import re
from threading import Thread

import pytest

from lexicon import (
    AnalyzerConfig,
    Classification,
    ClassificationRegistry,
    LexicalAnalyzer,
    TableError,
    analyzer_config_context,
    get_analyzer_config,
    reset_analyzer_config,
    set_analyzer_config,
)

BROKEN = [Classification("KW", "if", 1), Classification("ID", "[a-z", 100)]


class TestAnalyzerConfigDataclass:
    """Test AnalyzerConfig frozen dataclass behavior."""

    def test_default_values(self) -> None:
        config = AnalyzerConfig()
        assert config.regex_flags == 0
        assert config.strict_patterns is False
        assert config.warn_invalid_patterns is True

    def test_immutability(self) -> None:
        config = AnalyzerConfig()
        with pytest.raises(AttributeError):
            config.strict_patterns = True  # type: ignore[misc]


class TestAnalyzerConfigFromDict:
    """Test AnalyzerConfig.from_dict() factory method."""

    def test_from_dict_basic(self) -> None:
        config = AnalyzerConfig.from_dict({"strict_patterns": True})
        assert config.strict_patterns is True
        assert config.warn_invalid_patterns is True

    def test_from_dict_ignores_unknown_keys(self) -> None:
        config = AnalyzerConfig.from_dict({"regex_flags": re.IGNORECASE, "unknown_key": 1})
        assert config.regex_flags == re.IGNORECASE

    def test_from_dict_empty(self) -> None:
        assert AnalyzerConfig.from_dict({}) == AnalyzerConfig()


class TestContextVar:
    """get/set/reset and the context manager."""

    def test_default(self) -> None:
        assert get_analyzer_config() == AnalyzerConfig()

    def test_set_and_reset(self) -> None:
        set_analyzer_config(AnalyzerConfig(strict_patterns=True))
        assert get_analyzer_config().strict_patterns is True
        reset_analyzer_config()
        assert get_analyzer_config().strict_patterns is False

    def test_context_manager_restores(self) -> None:
        with analyzer_config_context(AnalyzerConfig(strict_patterns=True)):
            assert get_analyzer_config().strict_patterns is True
        assert get_analyzer_config().strict_patterns is False

    def test_context_manager_restores_on_error(self) -> None:
        with pytest.raises(RuntimeError):
            with analyzer_config_context(AnalyzerConfig(strict_patterns=True)):
                raise RuntimeError("boom")
        assert get_analyzer_config().strict_patterns is False

    def test_registry_reads_active_config(self) -> None:
        with analyzer_config_context(AnalyzerConfig(strict_patterns=True)):
            with pytest.raises(TableError):
                ClassificationRegistry(BROKEN)
        # Outside the context the broken entry is only skipped
        ClassificationRegistry(BROKEN)

    def test_explicit_config_wins(self) -> None:
        with analyzer_config_context(AnalyzerConfig(strict_patterns=True)):
            registry = ClassificationRegistry(BROKEN, config=AnalyzerConfig())
        assert registry.invalid_patterns

    def test_analyzer_passes_config(self, accept_all) -> None:
        with pytest.raises(TableError):
            LexicalAnalyzer(accept_all, BROKEN, config=AnalyzerConfig(strict_patterns=True))

    def test_thread_isolation(self) -> None:
        """Config set in a worker thread does not leak into the caller."""
        seen: list[bool] = []

        def worker() -> None:
            set_analyzer_config(AnalyzerConfig(strict_patterns=True))
            seen.append(get_analyzer_config().strict_patterns)

        thread = Thread(target=worker)
        thread.start()
        thread.join()
        assert seen == [True]
        assert get_analyzer_config().strict_patterns is False
