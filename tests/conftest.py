"""Shared fixtures for Lexicon tests."""

import pytest

from lexicon import Classification, LexicalAnalyzer, RegexAutomaton
from lexicon.config import reset_analyzer_config


@pytest.fixture
def table() -> list[Classification]:
    """Reserved words first, identifiers last."""
    return [
        Classification("RESERVED", "if|then|else", 1),
        Classification("SYMBOL", r"[+\-*/]", 50),
        Classification("ID", "[A-Za-z]+", 100),
    ]


@pytest.fixture
def accept_all() -> RegexAutomaton:
    return RegexAutomaton(r"[A-Za-z]+|[+\-*/]")


@pytest.fixture
def analyzer(table, accept_all) -> LexicalAnalyzer:
    return LexicalAnalyzer(accept_all, table)


@pytest.fixture(autouse=True)
def _default_config():
    """Keep context config from leaking between tests."""
    reset_analyzer_config()
    yield
    reset_analyzer_config()
