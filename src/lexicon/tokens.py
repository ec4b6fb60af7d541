"""Token and ErrorToken definitions for Lexicon.

The token factory produces a flat sequence of these values. A Token pairs a
lexeme with a numeric attribute; an ErrorToken marks a lexeme the automaton
rejected and remembers the line it came from.

Identity is lexical: two tokens with the same lexeme compare equal and hash
alike whatever their attributes, which is what the symbol table relies on
for deduplication.

Thread Safety:
Token and ErrorToken are frozen (immutable) and safe to share across threads.

"""

from dataclasses import dataclass, field

from lexicon.classification import ERROR_ATTRIBUTE


@dataclass(frozen=True, slots=True, eq=False)
class Token:
    """A classified lexeme.

    Attributes:
        lexeme: The raw text of the lexeme
        attribute: Category-derived code (excluded from equality and hash)

    """

    lexeme: str
    attribute: int

    def __eq__(self, other: object) -> bool:
        # Any Token variant, ErrorToken included, is the same symbol per lexeme
        if not isinstance(other, Token):
            return NotImplemented
        return self.lexeme == other.lexeme

    def __hash__(self) -> int:
        return hash(self.lexeme)

    @property
    def is_error(self) -> bool:
        return False

    def __str__(self) -> str:
        return f"<{self.lexeme}, {self.attribute}>"


@dataclass(frozen=True, slots=True, eq=False)
class ErrorToken(Token):
    """A lexeme rejected by the automaton.

    Attributes:
        lexeme: The rejected text
        attribute: Always ERROR_ATTRIBUTE unless given explicitly
        line_number: Source line the lexeme was read from

    Example:
        >>> ErrorToken("!", line_number=3)
        ErrorToken(lexeme='!', attribute=-1, line_number=3)

    """

    attribute: int = ERROR_ATTRIBUTE
    line_number: int = field(kw_only=True)

    @property
    def is_error(self) -> bool:
        return True

    def __str__(self) -> str:
        return f"<{self.lexeme}, ERROR at line {self.line_number}>"


__all__ = ["ErrorToken", "Token"]
