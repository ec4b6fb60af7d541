"""Tests for TokenFactory: automaton validation and attribute assignment."""

from __future__ import annotations

from lexicon import (
    Classification,
    ClassificationRegistry,
    ErrorToken,
    RegexAutomaton,
    Token,
    TokenFactory,
)


class RecordingAutomaton:
    """Accepts everything but "!" and remembers what it was asked."""

    def __init__(self) -> None:
        self.seen: list[str] = []

    def accepts(self, lexeme: str) -> bool:
        self.seen.append(lexeme)
        return lexeme != "!"


def make_factory(table, automaton=None) -> TokenFactory:
    return TokenFactory(automaton or RecordingAutomaton(), ClassificationRegistry(table))


class TestCreateToken:
    """Attributes by category."""

    def test_reserved_word(self, table) -> None:
        factory = make_factory(table)
        token = factory.create_token("if", 3)
        assert token == Token("if", 1)
        assert token.attribute == 1
        assert not token.is_error

    def test_symbol(self, table) -> None:
        factory = make_factory(table)
        assert factory.create_token("+", 1).attribute == 50

    def test_first_identifier_gets_base_attribute(self, table) -> None:
        factory = make_factory(table)
        token = factory.create_token("x", 5)
        assert token.lexeme == "x"
        assert token.attribute == 100
        assert factory.identifier_count == 0

    def test_repeated_identifier_gets_new_attribute(self, table) -> None:
        """Numbering is per occurrence, not per distinct lexeme."""
        factory = make_factory(table)
        first = factory.create_token("x", 5)
        second = factory.create_token("x", 7)
        assert first.attribute == 100
        assert second.attribute == 101
        assert factory.identifier_count == 1
        # Same symbol even though attributes differ
        assert first == second

    def test_counter_ignores_other_categories(self, table) -> None:
        factory = make_factory(table)
        factory.create_token("a", 1)
        factory.create_token("if", 1)
        factory.create_token("*", 1)
        assert factory.create_token("b", 2).attribute == 101

    def test_counter_starts_at_minus_one(self, table) -> None:
        assert make_factory(table).identifier_count == -1

    def test_unclassified_but_accepted(self, table) -> None:
        factory = make_factory(table)
        token = factory.create_token("42", 9)
        assert not isinstance(token, ErrorToken)
        assert token.attribute == -1
        assert factory.identifier_count == -1


class TestRejection:
    """Automaton rejection produces an ErrorToken value."""

    def test_error_token(self, table) -> None:
        factory = make_factory(table)
        token = factory.create_token("!", 1)
        assert isinstance(token, ErrorToken)
        assert token.lexeme == "!"
        assert token.line_number == 1
        assert token.is_error

    def test_rejection_does_not_advance_counter(self, table) -> None:
        automaton = RegexAutomaton("if|then|else|[+*/-]")
        factory = make_factory(table, automaton)
        assert isinstance(factory.create_token("x", 1), ErrorToken)
        assert factory.identifier_count == -1

    def test_automaton_consulted_first(self, table) -> None:
        automaton = RecordingAutomaton()
        factory = make_factory(table, automaton)
        factory.create_token("if", 1)
        factory.create_token("!", 2)
        assert automaton.seen == ["if", "!"]

    def test_rejected_identifier_shaped_lexeme(self, table) -> None:
        """The automaton has the last word even for classifiable lexemes."""
        factory = make_factory(table, RegexAutomaton("[a-z]"))
        token = factory.create_token("abc", 4)
        assert isinstance(token, ErrorToken)
        assert token.line_number == 4


class TestSharedLabels:
    """Several entries per label keep their own attributes."""

    def test_reserved_words_with_distinct_attributes(self) -> None:
        table = [
            Classification("KW", "if", 1),
            Classification("KW", "while", 2),
            Classification("ID", "[a-z]+", 10),
        ]
        factory = make_factory(table)
        assert factory.create_token("if", 1).attribute == 1
        assert factory.create_token("while", 1).attribute == 2
        assert factory.create_token("whilst", 1).attribute == 10

    def test_identifier_label_split_across_patterns(self) -> None:
        table = [
            Classification("KW", "if", 1),
            Classification("ID", "[a-z]+", 10),
            Classification("ID", "_[a-z]+", 500),
        ]
        factory = make_factory(table)
        assert factory.create_token("a", 1).attribute == 10
        assert factory.create_token("_b", 1).attribute == 501
