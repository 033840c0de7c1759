"""Classic data structures and algorithms in pure Python: balanced trees, treaps, skip lists, heaps, range queries, selection, string matching and graph algorithms."""

__version__ = "0.1.0"