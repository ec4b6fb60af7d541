"""Classification descriptors for the Lexicon registry.

A Classification names a lexical category, the regular expression that
recognises its lexemes, and the base attribute code given to its tokens.
Several entries may share one label (for example one entry per reserved
word, each with its own pattern and attribute).

Thread Safety:
Classification is frozen (immutable) and safe to share across threads.

"""

from dataclasses import dataclass

#: Label carried by the sentinel returned when no pattern matches.
UNCLASSIFIED_LABEL = "LEXER ERROR"

#: Attribute carried by the sentinel and by error tokens.
ERROR_ATTRIBUTE = -1


@dataclass(frozen=True, slots=True)
class Classification:
    """A lexical category descriptor.

    Attributes:
        label: Category name (e.g. "RESERVED", "IDENTIFIER")
        pattern: Regular expression a lexeme must match in its entirety
        base_attribute: Attribute code given to tokens of this entry. For the
            identifier category this is the starting point of per-occurrence
            numbering.

    """

    label: str
    pattern: str
    base_attribute: int

    @property
    def is_error(self) -> bool:
        """True only for the UNCLASSIFIED sentinel."""
        return self == UNCLASSIFIED

    def __str__(self) -> str:
        return f"{self.label:<20}{self.pattern:<40}{self.base_attribute}"


UNCLASSIFIED = Classification(UNCLASSIFIED_LABEL, "", ERROR_ATTRIBUTE)
"""Sentinel classification for lexemes that no table pattern matches."""


__all__ = [
    "Classification",
    "ERROR_ATTRIBUTE",
    "UNCLASSIFIED",
    "UNCLASSIFIED_LABEL",
]
