"""Classification registry: priority ordering and lexeme classification.

The registry owns the ordered classification table supplied by the caller
and the priority sequence derived from it (distinct labels in first
occurrence order).

Precondition (not verified): the table's first entries are the reserved
word category and the identifier category is the last distinct label.
Priority 0 is therefore reserved words and the last priority is identifiers.

Thread Safety:
ClassificationRegistry is immutable after creation. Safe to share.

Example:
    >>> registry = ClassificationRegistry([
    ...     Classification("RESERVED", "if|then|else", 1),
    ...     Classification("SYMBOL", r"[+\\-*/]", 50),
    ...     Classification("ID", "[A-Za-z]+", 100),
    ... ])
    >>> registry.priority_label(-1)
    'ID'
    >>> registry.classify("then").base_attribute
    1
"""

from __future__ import annotations

import re
from collections.abc import Iterable

from lexicon.classification import UNCLASSIFIED, Classification
from lexicon.config import AnalyzerConfig, get_analyzer_config
from lexicon.errors import TableError
from lexicon.utils.logger import get_logger

logger = get_logger(__name__)


class ClassificationRegistry:
    """Immutable registry over an ordered classification table.

    Matching is first-match-wins in table order against the whole lexeme,
    which is how priority is enforced: a keyword entry listed before the
    generic identifier entry wins when both could match.
    """

    __slots__ = (
        "_table",
        "_compiled",
        "_invalid",
        "_priorities",
        "_reserved_words",
        "_identifier_label",
        "_warn_invalid",
    )

    def __init__(
        self,
        table: Iterable[Classification],
        *,
        config: AnalyzerConfig | None = None,
    ) -> None:
        """Build the priority sequence and reserved word sub-table.

        Args:
            table: Classifications ordered by priority
            config: Analyzer configuration (uses the active context config if None)

        Raises:
            TableError: If the table is empty, or a pattern does not compile
                while strict_patterns is enabled
        """
        config = config or get_analyzer_config()
        self._table: tuple[Classification, ...] = tuple(table)
        if not self._table:
            raise TableError("classification table is empty")

        self._warn_invalid = config.warn_invalid_patterns

        # Ordered dedup: list keeps order, set answers membership
        priorities: list[str] = []
        seen: set[str] = set()
        for classification in self._table:
            if classification.label not in seen:
                seen.add(classification.label)
                priorities.append(classification.label)
        self._priorities: tuple[str, ...] = tuple(priorities)
        self._identifier_label = priorities[-1]

        self._reserved_words: tuple[Classification, ...] = tuple(
            c for c in self._table if c.label == priorities[0]
        )

        # None marks a pattern that failed to compile
        compiled: list[re.Pattern[str] | None] = []
        invalid: dict[str, str] = {}
        for classification in self._table:
            try:
                compiled.append(re.compile(classification.pattern, config.regex_flags))
            except re.error as e:
                if config.strict_patterns:
                    raise TableError(
                        f"invalid regular expression: {e}",
                        pattern=classification.pattern,
                    ) from e
                invalid[classification.pattern] = str(e)
                compiled.append(None)
        self._compiled: tuple[re.Pattern[str] | None, ...] = tuple(compiled)
        self._invalid = invalid

    def priority_label(self, level: int) -> str:
        """Get the category label at a priority level.

        Args:
            level: Zero-based priority, 0 being the most important

        Returns:
            The label at that level. Out-of-range levels (negative, or past
            the end) return the last label, the identifier category; -1 is
            the conventional way to ask for it.
        """
        if level < 0 or level >= len(self._priorities):
            return self._priorities[-1]
        return self._priorities[level]

    def classify(self, lexeme: str) -> Classification:
        """Find the classification of a lexeme.

        Scans the table in its original order and returns the first entry
        whose pattern matches the entire lexeme. Entries with uncompilable
        patterns are skipped with a warning.

        Args:
            lexeme: Non-empty lexeme text

        Returns:
            The matching Classification, or UNCLASSIFIED if none matches
        """
        for classification, pattern in zip(self._table, self._compiled):
            if pattern is None:
                if self._warn_invalid:
                    logger.warning(
                        "cannot evaluate regular expression %r (%s); fix it to classify with it",
                        classification.pattern,
                        self._invalid[classification.pattern],
                    )
                continue
            if pattern.fullmatch(lexeme):
                return classification

        return UNCLASSIFIED

    def is_identifier(self, classification: Classification) -> bool:
        """Check whether a classification belongs to the identifier category."""
        return classification.label == self._identifier_label

    @property
    def identifier_label(self) -> str:
        """Label of the identifier category (last priority)."""
        return self._identifier_label

    @property
    def reserved_label(self) -> str:
        """Label of the reserved word category (priority 0)."""
        return self._priorities[0]

    @property
    def priorities(self) -> tuple[str, ...]:
        """Distinct labels in priority order."""
        return self._priorities

    @property
    def reserved_words(self) -> tuple[Classification, ...]:
        """Every entry of the reserved word category, in table order."""
        return self._reserved_words

    @property
    def table(self) -> tuple[Classification, ...]:
        """The full classification table, in its original order."""
        return self._table

    @property
    def invalid_patterns(self) -> dict[str, str]:
        """Uncompilable patterns mapped to their compile error message."""
        return dict(self._invalid)

    def __len__(self) -> int:
        """Number of table entries."""
        return len(self._table)

    def __repr__(self) -> str:
        return f"ClassificationRegistry(entries={len(self._table)}, priorities={self._priorities!r})"


__all__ = ["ClassificationRegistry"]
