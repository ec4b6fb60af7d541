"""
Lexicon: lexeme classification and tokenization engine

Classifies lexemes against a priority-ordered classification table,
validates them with a finite automaton, produces tokens carrying
category-derived attribute codes, and keeps a deduplicated symbol table of
identifiers. Zero runtime dependencies.

Quick Start:
    >>> from lexicon import Classification, LexicalAnalyzer, RegexAutomaton
    >>> table = [
    ...     Classification("RESERVED", "if|then|else", 1),
    ...     Classification("SYMBOL", r"[+\\-*/]", 50),
    ...     Classification("ID", "[A-Za-z]+", 100),
    ... ]
    >>> analyzer = LexicalAnalyzer(RegexAutomaton.union(c.pattern for c in table), table)
    >>> token = analyzer.create_token("if", 3)
    >>> token.attribute
    1
    >>> analyzer.store_symbol(analyzer.create_token("x", 5))
    True

Table order is priority order: reserved words first, identifiers last.
"""

from lexicon.analyzer import AnalysisResult, LexicalAnalyzer, scan_lines
from lexicon.automaton import NFA, Automaton, RegexAutomaton
from lexicon.classification import (
    ERROR_ATTRIBUTE,
    UNCLASSIFIED,
    UNCLASSIFIED_LABEL,
    Classification,
)
from lexicon.config import (
    AnalyzerConfig,
    analyzer_config_context,
    get_analyzer_config,
    reset_analyzer_config,
    set_analyzer_config,
)
from lexicon.errors import LexiconError, TableError
from lexicon.factory import TokenFactory
from lexicon.registry import ClassificationRegistry
from lexicon.report import render_report
from lexicon.serialization import load_table, table_from_dict, table_from_rows
from lexicon.symbols import SymbolTable
from lexicon.tokens import ErrorToken, Token

__version__ = "0.1.0"

__all__ = [
    # Analyzer
    "AnalysisResult",
    "LexicalAnalyzer",
    "scan_lines",
    # Components
    "ClassificationRegistry",
    "SymbolTable",
    "TokenFactory",
    # Data
    "Classification",
    "ERROR_ATTRIBUTE",
    "ErrorToken",
    "Token",
    "UNCLASSIFIED",
    "UNCLASSIFIED_LABEL",
    # Automata
    "Automaton",
    "NFA",
    "RegexAutomaton",
    # Configuration
    "AnalyzerConfig",
    "analyzer_config_context",
    "get_analyzer_config",
    "reset_analyzer_config",
    "set_analyzer_config",
    # Errors
    "LexiconError",
    "TableError",
    # Tables and output
    "load_table",
    "render_report",
    "table_from_dict",
    "table_from_rows",
    "__version__",
]
