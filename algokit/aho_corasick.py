"""Multi-pattern string search with the Aho-Corasick automaton."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass, field

_ROOT = 0


@dataclass
class _TrieNode:
    parent: int = -1
    symbol: str = ""
    children: dict[str, int] = field(default_factory=dict)
    is_terminal: bool = False


class Trie:
    """Prefix tree whose nodes are numbered in creation order; the root is 0."""

    def __init__(self) -> None:
        self._nodes: list[_TrieNode] = [_TrieNode()]

    def add(self, key: str) -> int:
        """Insert ``key`` and return the index of the node where it ends."""
        current = _ROOT
        for symbol in key:
            node = self._nodes[current]
            child = node.children.get(symbol)
            if child is None:
                self._nodes.append(_TrieNode(parent=current, symbol=symbol))
                child = len(self._nodes) - 1
                node.children[symbol] = child
            current = child
        self._nodes[current].is_terminal = True
        return current

    def __len__(self) -> int:
        return len(self._nodes)


class AhoCorasickAutomaton:
    """Streaming matcher: feed symbols one by one and get patterns ending there."""

    def __init__(self, patterns: Iterable[str]) -> None:
        self._trie = Trie()
        self._pattern_at: dict[int, str] = {}
        for pattern in patterns:
            self._pattern_at[self._trie.add(pattern)] = pattern
        nodes = self._trie._nodes
        self._suffix_links = [_ROOT] * len(nodes)
        self._terminal_links = [_ROOT] * len(nodes)
        self._build_links()
        self._state = _ROOT

    def _transition(self, node: int, symbol: str) -> int:
        nodes = self._trie._nodes
        while True:
            child = nodes[node].children.get(symbol)
            if child is not None:
                return child
            if node == _ROOT:
                return _ROOT
            node = self._suffix_links[node]

    def _build_links(self) -> None:
        nodes = self._trie._nodes
        queue = deque(nodes[_ROOT].children.values())
        while queue:
            current = queue.popleft()
            node = nodes[current]
            if node.parent != _ROOT:
                link = self._transition(self._suffix_links[node.parent], node.symbol)
                self._suffix_links[current] = link
                if link != _ROOT and nodes[link].is_terminal:
                    self._terminal_links[current] = link
                else:
                    self._terminal_links[current] = self._terminal_links[link]
            queue.extend(node.children.values())

    def step(self, symbol: str) -> list[str]:
        """Consume ``symbol``; return the patterns ending here, longest first."""
        self._state = self._transition(self._state, symbol)
        nodes = self._trie._nodes
        matches: list[str] = []
        current = self._state
        while current != _ROOT:
            if nodes[current].is_terminal:
                matches.append(self._pattern_at[current])
            current = self._terminal_links[current]
        return matches

    def reset(self) -> None:
        """Return to the start state."""
        self._state = _ROOT


class Matcher:
    """Finds every occurrence of a fixed set of patterns in a text."""

    def __init__(self, patterns: Iterable[str]) -> None:
        self._automaton = AhoCorasickAutomaton(patterns)

    def find_matches(self, text: str) -> list[tuple[int, str]]:
        """Return ``(start, pattern)`` pairs ordered by end position."""
        self._automaton.reset()
        matches: list[tuple[int, str]] = []
        for index, symbol in enumerate(text):
            for pattern in self._automaton.step(symbol):
                matches.append((index - len(pattern) + 1, pattern))
        return matches