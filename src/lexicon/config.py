"""ContextVar-based analyzer configuration for Lexicon.

Provides thread-local configuration using Python's ContextVars (PEP 567).
A ClassificationRegistry built without an explicit config reads the active
one at construction time.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed and race conditions are impossible.

Usage:
    # Explicit config
    registry = ClassificationRegistry(table, config=AnalyzerConfig(strict_patterns=True))

    # Or use the context manager
    with analyzer_config_context(AnalyzerConfig(regex_flags=re.IGNORECASE)):
        analyzer = LexicalAnalyzer(automaton, table)

"""

from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True, slots=True)
class AnalyzerConfig:
    """Immutable analyzer configuration.

    Frozen dataclass ensures thread-safety (immutable after creation).

    Attributes:
        regex_flags: Flags passed to re.compile for every table pattern
        strict_patterns: Raise TableError at construction when a pattern
            does not compile, instead of skipping it during classification
        warn_invalid_patterns: Log a warning each time classification
            skips an uncompilable pattern

    """

    regex_flags: int = 0
    strict_patterns: bool = False
    warn_invalid_patterns: bool = True

    @classmethod
    def from_dict(cls, config_dict: dict) -> "AnalyzerConfig":
        """Create AnalyzerConfig from dictionary.

        Only includes keys that are valid AnalyzerConfig fields; unknown keys
        are silently ignored.

        Args:
            config_dict: Dictionary with config values. Keys should match
                AnalyzerConfig attribute names.

        Returns:
            New AnalyzerConfig instance with values from dict.

        Example:
            >>> config = AnalyzerConfig.from_dict({
            ...     "strict_patterns": True,
            ...     "unknown_key": "ignored",
            ... })
            >>> config.strict_patterns
            True

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: AnalyzerConfig = AnalyzerConfig()

_analyzer_config: ContextVar[AnalyzerConfig] = ContextVar(
    "analyzer_config",
    default=_DEFAULT_CONFIG,
)


def get_analyzer_config() -> AnalyzerConfig:
    """Get current analyzer configuration (thread-local)."""
    return _analyzer_config.get()


def set_analyzer_config(config: AnalyzerConfig) -> None:
    """Set analyzer configuration for current context.

    Args:
        config: AnalyzerConfig instance to use for this context.

    """
    _analyzer_config.set(config)


def reset_analyzer_config() -> None:
    """Reset to default configuration."""
    _analyzer_config.set(_DEFAULT_CONFIG)


@contextmanager
def analyzer_config_context(config: AnalyzerConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Args:
        config: AnalyzerConfig to use within the context.

    Yields:
        None

    Thread Safety:
        Only affects the current thread's context. Properly restores previous
        config even if an exception is raised.

    """
    previous = _analyzer_config.get()
    _analyzer_config.set(config)
    try:
        yield
    finally:
        _analyzer_config.set(previous)


__all__ = [
    "AnalyzerConfig",
    "get_analyzer_config",
    "set_analyzer_config",
    "reset_analyzer_config",
    "analyzer_config_context",
]
