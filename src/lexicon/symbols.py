"""Symbol table of identifier tokens.

Append-only and deduplicated by lexeme text: the first token stored for a
lexeme is kept, later ones are ignored. Iteration follows first insertion.

Thread Safety:
SymbolTable is mutable and not thread-safe. Use one per lexing session.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from lexicon.registry import ClassificationRegistry
    from lexicon.tokens import Token


class SymbolTable:
    """Insertion-ordered identifier tokens, at most one per lexeme."""

    __slots__ = ("_registry", "_entries")

    def __init__(self, registry: ClassificationRegistry) -> None:
        self._registry = registry
        # dict preserves insertion order and gives O(1) lexeme lookup
        self._entries: dict[str, Token] = {}

    def store(self, token: Token) -> bool:
        """Store a token if it is a new identifier.

        The token's lexeme is classified through the registry; anything that
        is not the identifier category is ignored.

        Args:
            token: Token to store

        Returns:
            True if the table grew, False if the call was a no-op
        """
        if not self._registry.is_identifier(self._registry.classify(token.lexeme)):
            return False
        if token.lexeme in self._entries:
            return False
        self._entries[token.lexeme] = token
        return True

    def entries(self) -> tuple[Token, ...]:
        """Stored tokens in insertion order."""
        return tuple(self._entries.values())

    def get(self, lexeme: str) -> Token | None:
        return self._entries.get(lexeme)

    def __contains__(self, item: object) -> bool:
        """Support both ``"x" in table`` and ``token in table``."""
        lexeme = item if isinstance(item, str) else getattr(item, "lexeme", None)
        return lexeme in self._entries

    def __iter__(self) -> Iterator[Token]:
        return iter(tuple(self._entries.values()))

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"SymbolTable({list(self._entries)!r})"


__all__ = ["SymbolTable"]
