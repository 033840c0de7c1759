"""Suffix automaton recognising every substring of a growing text."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

_BEFORE_ROOT = -1


@dataclass
class _State:
    length: int
    link: int
    transitions: dict[str, int] = field(default_factory=dict)


class SuffixAutomaton:
    """Minimal automaton over all substrings, built one symbol at a time."""

    def __init__(self, text: Iterable[str] = "") -> None:
        self._states: list[_State] = [_State(0, _BEFORE_ROOT)]
        self._last = 0
        self._cursor = 0
        self.extend(text)

    def _make_state(self, length: int, link: int) -> int:
        self._states.append(_State(length, link))
        return len(self._states) - 1

    def add_char(self, symbol: str) -> None:
        """Append ``symbol`` to the text and update the automaton."""
        states = self._states
        current = self._make_state(states[self._last].length + 1, 0)
        p = self._last
        while p != _BEFORE_ROOT and symbol not in states[p].transitions:
            states[p].transitions[symbol] = current
            p = states[p].link
        if p != _BEFORE_ROOT:
            q = states[p].transitions[symbol]
            if states[p].length + 1 == states[q].length:
                states[current].link = q
            else:
                clone = self._make_state(states[p].length + 1, states[q].link)
                states[clone].transitions = dict(states[q].transitions)
                while p != _BEFORE_ROOT and states[p].transitions.get(symbol) == q:
                    states[p].transitions[symbol] = clone
                    p = states[p].link
                states[q].link = clone
                states[current].link = clone
        self._last = current

    def extend(self, text: Iterable[str]) -> None:
        """Append every symbol of ``text``."""
        for symbol in text:
            self.add_char(symbol)

    def reset(self) -> None:
        """Move the walking cursor back to the start state."""
        self._cursor = 0

    def step(self, symbol: str) -> bool:
        """Advance the cursor by ``symbol``; on failure it stays put."""
        target = self._states[self._cursor].transitions.get(symbol)
        if target is None:
            return False
        self._cursor = target
        return True

    def matched_prefix_length(self, pattern: Iterable[str]) -> int:
        """Length of the longest prefix of ``pattern`` occurring in the text."""
        state = 0
        matched = 0
        for symbol in pattern:
            target = self._states[state].transitions.get(symbol)
            if target is None:
                break
            state = target
            matched += 1
        return matched

    def __contains__(self, substring: str) -> bool:
        return self.matched_prefix_length(substring) == len(substring)

    def __len__(self) -> int:
        return len(self._states)