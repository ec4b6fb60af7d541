"""Token factory: automaton validation and attribute assignment.

Identifier attributes are numbered per occurrence: every call that resolves
to the identifier category advances the counter, including repeats of a
lexeme already seen. ``x`` followed by ``x`` yields two different
attributes even though the symbol table keeps one ``x``.

Thread Safety:
TokenFactory instances hold a mutable counter. Use one per lexing session,
or serialize access externally; token order depends on call order.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from lexicon.tokens import ErrorToken, Token
from lexicon.utils.logger import get_logger

if TYPE_CHECKING:
    from lexicon.automaton import Automaton
    from lexicon.registry import ClassificationRegistry

logger = get_logger(__name__)


class TokenFactory:
    """Creates tokens from lexemes.

    Never raises for bad input: rejected lexemes come back as ErrorToken and
    unclassifiable ones as a Token carrying the sentinel attribute (-1).
    """

    __slots__ = ("_automaton", "_registry", "_identifier_count")

    def __init__(self, automaton: Automaton, registry: ClassificationRegistry) -> None:
        self._automaton = automaton
        self._registry = registry
        self._identifier_count = -1

    def create_token(self, lexeme: str, line_number: int) -> Token:
        """Create a token for a lexeme.

        Args:
            lexeme: Non-empty lexeme text
            line_number: Line the lexeme was read from

        Returns:
            ErrorToken if the automaton rejects the lexeme, otherwise a Token
            whose attribute is the classification's base attribute, plus the
            identifier counter for the identifier category.
        """
        if not self._automaton.accepts(lexeme):
            logger.debug("line %d: automaton rejected %r", line_number, lexeme)
            return ErrorToken(lexeme, line_number=line_number)

        classification = self._registry.classify(lexeme)

        if self._registry.is_identifier(classification):
            self._identifier_count += 1
            return Token(lexeme, classification.base_attribute + self._identifier_count)

        return Token(lexeme, classification.base_attribute)

    @property
    def identifier_count(self) -> int:
        """Current counter value; -1 until the first identifier is created."""
        return self._identifier_count

    @property
    def registry(self) -> ClassificationRegistry:
        return self._registry

    @property
    def automaton(self) -> Automaton:
        return self._automaton


__all__ = ["TokenFactory"]
