# algokit

Classic data structures and algorithms in pure Python, with no third-party
dependencies. Everything is a library: import the module you need.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

Ordered containers
- `algokit.avl`: `AVLTree`, an ordered map with `insert`, `erase`, `get`,
  `items`, `clear`, `height`, `len()`, `in` and key-ordered iteration; and
  `AVLMultiset`, which keeps duplicates (`add`, `discard` removes one
  occurrence).
- `algokit.treap`: `TreapSet`, an ordered set of unique keys (`add`,
  `discard`, `clear`), and `ImplicitTreap`, a sequence with `insert(pos,
  value)`, indexing, item assignment and `del`, all logarithmic; negative
  indices count from the end.
- `algokit.skip_list`: `SkipListMap`, an ordered map with `insert`, `get`,
  `in`, `len()`, `levels` and `clear`. Constructors that use randomness take
  an optional `seed`.

Priority queues
- `algokit.heap`: `BinaryHeap`, a min-heap ordered by an optional `key`
  function (`push`, `peek`, `pop`; empty-heap access raises `IndexError`);
  `merge_sorted(arrays)` merges sorted sequences; `k_smallest(values, k)`
  returns the `k` smallest values, largest of them first.

Range queries
- `algokit.fenwick`: `FenwickTree` with inclusive range `sum(left, right)`
  and point `add(pos, delta)`; `FenwickTree.zeros(size)` builds an all-zero
  tree.
- `algokit.sparse_table`: `SparseTable(data, op)` answers `query(left,
  right)` over the half-open range `[left, right)` for an associative,
  idempotent `op` such as `min`, `max` or bitwise and/or.

Sorting and selection
- `algokit.selection`: `quick_sort(values)` returns a sorted list,
  `kth_smallest(values, k)` returns the element at zero-based sorted index
  `k`, and `median_of_medians(values, start, end)` gives the pivot both use.

Strings
- `algokit.aho_corasick`: `Trie`, `AhoCorasickAutomaton` (feed symbols with
  `step`, restart with `reset`) and `Matcher`, whose `find_matches(text)`
  returns `(start, pattern)` pairs ordered by end position.
- `algokit.suffix_array`: `suffix_array(text)` returns suffix start indices
  in sorted order, for strings, bytes or any sequence of comparable symbols.
- `algokit.suffix_automaton`: `SuffixAutomaton`, built from a text and
  extensible with `add_char` / `extend`; answers `substring in automaton`
  and `matched_prefix_length(pattern)`, and can be walked with `step` /
  `reset`.

Graphs
- `algokit.kosaraju`: `DirectedGraph` (with `DirectedGraph.parse` for text
  of the form `n m` followed by `m` edge pairs), `topological_order` and
  `strongly_connected_components`.
- `algokit.mst`: `DisjointSet`, the frozen dataclass `Edge(source, target,
  weight)`, `kruskal(vertex_count, edges)` for a minimum spanning forest and
  `total_weight(edges)`.
- `algokit.bridges`: `find_bridges(vertex_count, edges)` returns the indices
  of the bridge edges; parallel edges are never bridges and self-loops are
  ignored.
- `algokit.dijkstra`: `EdgeMetric`, a symmetric table of edge lengths;
  `shortest_path(graph, metric, source, target)` returns the path as a list
  of `(from, to)` edges and raises `ValueError` if the target is
  unreachable; `path_length(path, metric)`.
- `algokit.flow`: `FlowNetwork` with `add_edge`, `dinic`, `ford_fulkerson`
  and `reset`. Flow accumulates on the network between calls; `reset` sets
  it back to zero.
- `algokit.graph`: `ListGraph` and `UndirectedListGraph` over any hashable
  vertices, with `neighbours(vertex, predicate)` yielding edges lazily, and
  `count_components(graph)`.

## Examples

```python
from algokit.sparse_table import SparseTable

table = SparseTable([0, 10, 5, 3, 4, 5], min)
table.query(2, 6)   # minimum over [2, 6) -> 3
```

```python
from algokit.fenwick import FenwickTree

tree = FenwickTree([0, 1, 2, 3, 4, 5, 6, 7])
tree.sum(1, 3)      # inclusive range -> 6
tree.add(5, 100)
tree.sum(0, 7)      # -> 128
```

```python
from algokit.aho_corasick import Matcher

matcher = Matcher(["a", "aa", "fef", "ef"])
matcher.find_matches("abaa")   # list of (start, pattern) pairs
```

```python
from algokit.flow import FlowNetwork

network = FlowNetwork(4)
network.add_edge(0, 1, 1)
network.add_edge(0, 2, 3)
network.add_edge(2, 1, 2)
network.add_edge(2, 3, 1)
network.add_edge(1, 3, 2)
network.dinic(0, 3)            # -> 3
```

## What it does not do

- There is no command-line program; the package is used by importing it.
- All containers live in memory only; nothing is saved to disk.
- `SkipListMap` has no removal of keys.