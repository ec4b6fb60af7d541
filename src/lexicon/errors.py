"""Exception classes for Lexicon.

Lexing itself never raises: rejected lexemes become ErrorToken values and
unmatched lexemes classify as UNCLASSIFIED. Exceptions are reserved for
configuration defects found before analysis starts.
"""

from __future__ import annotations


class LexiconError(Exception):
    """Base exception for all Lexicon errors.
    
    Subclass this for specific error categories.
    """

    pass


class TableError(LexiconError):
    """Error in a classification table.

    Raised for an empty table, malformed table data, an unsupported table
    file format, or an uncompilable pattern when strict patterns are enabled.
    """

    def __init__(
        self,
        message: str,
        pattern: str | None = None,
        source_file: str | None = None,
    ) -> None:
        """Initialize table error with optional context.
        
        Args:
            message: Error description
            pattern: Offending regular expression (optional)
            source_file: Path of the table file being loaded (optional)
        """
        self.message = message
        self.pattern = pattern
        self.source_file = source_file

        prefix = f"{source_file}: " if source_file else ""
        suffix = f" (pattern {pattern!r})" if pattern is not None else ""
        super().__init__(f"{prefix}{message}{suffix}")
