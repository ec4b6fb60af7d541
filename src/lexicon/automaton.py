"""Automaton protocol and reference acceptors.

The token factory needs exactly one capability from an automaton: whether a
lexeme belongs to the language it accepts. Any object with an
``accepts(lexeme) -> bool`` method qualifies.

Two reference implementations are provided for tests and the command line:

- RegexAutomaton: accepts lexemes fully matching a regular expression
- NFA: a nondeterministic finite automaton with epsilon moves

Thread Safety:
Both implementations are immutable after creation and hold no per-call state.
"""

from __future__ import annotations

import re
from collections.abc import Hashable, Iterable, Mapping
from typing import Protocol, runtime_checkable

from lexicon.utils.logger import get_logger

logger = get_logger(__name__)

State = Hashable

#: Transition symbol for epsilon moves in an NFA.
EPSILON = None


@runtime_checkable
class Automaton(Protocol):
    """Protocol for lexeme acceptors."""

    def accepts(self, lexeme: str) -> bool:
        """Return True if the lexeme belongs to the accepted language."""
        ...


class RegexAutomaton:
    """Acceptor backed by one or more regular expressions (full match).

    A lexeme is accepted when any of the patterns matches it in its
    entirety. Patterns are kept compiled separately, so inline global flags
    and group names never interact across patterns.

    Example:
        >>> RegexAutomaton("[a-z]+").accepts("abc")
        True
        >>> RegexAutomaton("[a-z]+").accepts("abc1")
        False
    """

    __slots__ = ("_patterns",)

    def __init__(self, *patterns: str | re.Pattern[str], flags: int = 0) -> None:
        self._patterns: tuple[re.Pattern[str], ...] = tuple(
            p if isinstance(p, re.Pattern) else re.compile(p, flags) for p in patterns
        )

    @classmethod
    def union(cls, patterns: Iterable[str], flags: int = 0) -> RegexAutomaton:
        """Build an acceptor for the union of several patterns.

        Patterns that do not compile are left out of the union.

        Args:
            patterns: Regular expressions, typically a table's patterns
            flags: re flags for every pattern

        Returns:
            RegexAutomaton accepting any lexeme one of the patterns accepts.
            An empty union accepts nothing.
        """
        compiled: list[re.Pattern[str]] = []
        for pattern in patterns:
            try:
                compiled.append(re.compile(pattern, flags))
            except re.error:
                logger.debug("leaving %r out of the automaton union", pattern)
        return cls(*compiled)

    @property
    def patterns(self) -> tuple[str, ...]:
        return tuple(p.pattern for p in self._patterns)

    def accepts(self, lexeme: str) -> bool:
        return any(p.fullmatch(lexeme) is not None for p in self._patterns)

    def __repr__(self) -> str:
        return f"RegexAutomaton({', '.join(map(repr, self.patterns))})"


class NFA:
    """Nondeterministic finite automaton over characters.

    Transitions map ``(state, symbol)`` to a set of next states, where
    symbol is a single character or EPSILON (None) for an epsilon move.

    Example:
        >>> # a(b|c)*
        >>> nfa = NFA(
        ...     {(0, "a"): {1}, (1, "b"): {1}, (1, "c"): {1}},
        ...     start=0,
        ...     accepting={1},
        ... )
        >>> nfa.accepts("abcb")
        True
        >>> nfa.accepts("b")
        False
    """

    __slots__ = ("_transitions", "_start", "_accepting")

    def __init__(
        self,
        transitions: Mapping[tuple[State, str | None], Iterable[State]],
        start: State,
        accepting: Iterable[State],
    ) -> None:
        self._transitions: dict[tuple[State, str | None], frozenset[State]] = {
            key: frozenset(targets) for key, targets in transitions.items()
        }
        self._start = start
        self._accepting = frozenset(accepting)

    def _closure(self, states: Iterable[State]) -> frozenset[State]:
        """Epsilon closure of a set of states."""
        stack = list(states)
        closure = set(stack)
        while stack:
            state = stack.pop()
            for target in self._transitions.get((state, EPSILON), ()):
                if target not in closure:
                    closure.add(target)
                    stack.append(target)
        return frozenset(closure)

    def accepts(self, lexeme: str) -> bool:
        current = self._closure((self._start,))
        for char in lexeme:
            following: set[State] = set()
            for state in current:
                following.update(self._transitions.get((state, char), ()))
            if not following:
                return False
            current = self._closure(following)
        return not current.isdisjoint(self._accepting)

    @property
    def states(self) -> frozenset[State]:
        """Every state mentioned by the automaton."""
        states: set[State] = {self._start, *self._accepting}
        for (source, _symbol), targets in self._transitions.items():
            states.add(source)
            states.update(targets)
        return frozenset(states)

    def __repr__(self) -> str:
        return (
            f"NFA(states={len(self.states)}, start={self._start!r}, "
            f"accepting={sorted(map(repr, self._accepting))})"
        )


__all__ = ["EPSILON", "NFA", "Automaton", "RegexAutomaton"]
