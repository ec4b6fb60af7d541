"""Lexical analyzer composing registry, token factory and symbol table.

Usage:
    >>> from lexicon import Classification, LexicalAnalyzer, RegexAutomaton
    >>> table = [
    ...     Classification("RESERVED", "if|then|else", 1),
    ...     Classification("SYMBOL", r"[+\\-*/]", 50),
    ...     Classification("ID", "[A-Za-z]+", 100),
    ... ]
    >>> analyzer = LexicalAnalyzer(RegexAutomaton(r"[A-Za-z]+|[+\\-*/]"), table)
    >>> analyzer.create_token("x", 5)
    Token(lexeme='x', attribute=100)
    >>> analyzer.create_token("x", 7)
    Token(lexeme='x', attribute=101)

Thread Safety:
    An analyzer owns a mutable identifier counter and symbol table. Create
    one per lexing session; do not share an instance across threads without
    external locking.

"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING

from lexicon.factory import TokenFactory
from lexicon.registry import ClassificationRegistry
from lexicon.symbols import SymbolTable
from lexicon.tokens import ErrorToken, Token
from lexicon.utils.logger import get_logger

if TYPE_CHECKING:
    from lexicon.automaton import Automaton
    from lexicon.classification import Classification
    from lexicon.config import AnalyzerConfig

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class AnalysisResult:
    """Outcome of analyzing a whole text.

    Attributes:
        tokens: Every token produced, in source order (error tokens included)
        errors: Just the error tokens, in source order

    """

    tokens: tuple[Token, ...]
    errors: tuple[ErrorToken, ...]

    @property
    def ok(self) -> bool:
        """True when no lexeme was rejected."""
        return not self.errors


def scan_lines(lines: Iterable[str]) -> Iterator[tuple[str, int]]:
    """Split lines into whitespace-separated lexemes.

    Args:
        lines: Source lines

    Yields:
        (lexeme, line_number) pairs, line numbers starting at 1
    """
    for line_number, line in enumerate(lines, start=1):
        for lexeme in line.split():
            yield lexeme, line_number


class LexicalAnalyzer:
    """One lexing session over a classification table and an automaton.

    The registry is read-only; the factory counter and the symbol table
    grow as tokens are created and stored.
    """

    __slots__ = ("_registry", "_factory", "_symbols")

    def __init__(
        self,
        automaton: Automaton,
        table: Iterable[Classification] | ClassificationRegistry,
        *,
        config: AnalyzerConfig | None = None,
    ) -> None:
        """Initialize analyzer.

        Args:
            automaton: Acceptor consulted before classification
            table: Classifications ordered by priority (reserved words first,
                identifiers last), or a prebuilt registry
            config: Analyzer configuration (uses the active context config if None)

        Raises:
            TableError: If the table is empty, or invalid under strict patterns
        """
        if isinstance(table, ClassificationRegistry):
            self._registry = table
        else:
            self._registry = ClassificationRegistry(table, config=config)
        self._factory = TokenFactory(automaton, self._registry)
        self._symbols = SymbolTable(self._registry)

    # =========================================================================
    # Core operations
    # =========================================================================

    def create_token(self, lexeme: str, line_number: int) -> Token:
        """Create a token (see TokenFactory.create_token)."""
        return self._factory.create_token(lexeme, line_number)

    def store_symbol(self, token: Token) -> bool:
        """Store a token in the symbol table if it is a new identifier."""
        return self._symbols.store(token)

    def classify(self, lexeme: str) -> Classification:
        return self._registry.classify(lexeme)

    def priority_label(self, level: int) -> str:
        return self._registry.priority_label(level)

    def analyze(self, lines: Iterable[str]) -> AnalysisResult:
        """Tokenize whitespace-separated lexemes of a text.

        Each token is also offered to the symbol table.

        Args:
            lines: Source lines (e.g. ``text.splitlines()`` or an open file)

        Returns:
            AnalysisResult with every token and the error tokens
        """
        tokens: list[Token] = []
        errors: list[ErrorToken] = []
        for lexeme, line_number in scan_lines(lines):
            token = self.create_token(lexeme, line_number)
            tokens.append(token)
            if isinstance(token, ErrorToken):
                errors.append(token)
            self.store_symbol(token)

        logger.debug(
            "analyzed %d lexemes: %d errors, %d symbols",
            len(tokens),
            len(errors),
            len(self._symbols),
        )
        return AnalysisResult(tuple(tokens), tuple(errors))

    # =========================================================================
    # Views
    # =========================================================================

    @property
    def registry(self) -> ClassificationRegistry:
        return self._registry

    @property
    def symbol_table(self) -> SymbolTable:
        return self._symbols

    @property
    def reserved_words(self) -> tuple[Classification, ...]:
        return self._registry.reserved_words

    @property
    def identifier_count(self) -> int:
        return self._factory.identifier_count

    def __str__(self) -> str:
        from lexicon.report import render_report

        return render_report(self)


__all__ = ["AnalysisResult", "LexicalAnalyzer", "scan_lines"]
