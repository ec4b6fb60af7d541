"""Human-readable report of an analyzer's tables.

Diagnostic output only; the layout is not a stable format. Use
lexicon.serialization for machine-readable output.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from lexicon.analyzer import LexicalAnalyzer

_WIDTH = 70


def _banner(title: str, fill: str) -> str:
    return f" {title} ".center(_WIDTH, fill)


def render_report(analyzer: LexicalAnalyzer) -> str:
    """Render the reserved word table followed by the symbol table.

    Args:
        analyzer: Analyzer to report on

    Returns:
        Multi-line report, one entry per line
    """
    lines = ["", _banner("LEXICAL ANALYZER", "="), ""]

    lines.append(_banner("RESERVED WORDS", "-"))
    lines.extend(str(classification) for classification in analyzer.reserved_words)

    lines.append("")
    lines.append(_banner("SYMBOL TABLE", "-"))
    lines.extend(str(token) for token in analyzer.symbol_table)

    return "\n".join(lines) + "\n"


__all__ = ["render_report"]
