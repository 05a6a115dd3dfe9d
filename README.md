# graphorder

Vertex reordering for graphs stored as edge lists. Renumbering vertices so that
neighbours receive nearby ids improves memory locality in graph analytics.
The package provides:

- **Gorder** (`graphorder.gorder.GorderGraph.gorder_greedy`): a greedy
  sliding-window ordering driven by a unit-increment priority queue
  (`graphorder.unitheap.UnitHeap`).
- **Reverse Cuthill–McKee** (`GorderGraph.rcm_order`), also used by
  `GorderGraph.transform` to relabel a loaded graph before ordering.
- **Rabbit Order** (`graphorder.rabbit.aggregate` and `compute_perm`):
  incremental community aggregation followed by a dendrogram-based
  permutation. Community detection and modularity are available through
  `graphorder.rabbit_cli.detect_community` and `compute_modularity`.
- Supporting tools:
  - `graphorder.csr.CsrGraph`: a CSR graph with degree counting, a
    block-counting BFS (`bfs`, returning `BfsStats`) and per-vertex attributes
    from random-start BFS distances (`init_attribute`) or from a
    comma-separated file (`init_attribute_file`);
  - `graphorder.edge_list`: an edge-list reader (`parse_edges`, `read_edges`);
  - `graphorder.counting_sort.count_sort`, `graphorder.quicksort.quick_sort`;
  - `graphorder.sequence`: blocked `reduce`, `scan`, `pack`, `pack_index`,
    `filter_values`;
  - `graphorder.vertex_subset.VertexSubset`: a vertex set with sparse and
    dense forms;
  - `graphorder.timer.Timer`: a wall-clock timer with weighted totals.

## Installation

```
pip install .
```

## Command line

Gorder on an edge list (one `u v` pair per line, the two ids separated by a
single character; self loops are dropped):

```
graphorder-gorder -w 5 -o out.gorder graph.txt
```

The graph is first relabelled in reverse Cuthill–McKee order, then ordered
greedily. The output file (default `out.gorder`) holds the vertex count, the
edge count, and then one `old<TAB>new` line for each vertex. `-w` sets the
window size (default 5, must be positive).

Rabbit Order:

```
graphorder-rabbit graph.txt > perm.txt
graphorder-rabbit -c graph.txt > communities.txt
```

Both forms first print the vertex count and the number of (symmetrised)
edges. Without `-c` they are followed by `vertex newid` lines. With `-c` a
community id is printed for each vertex, and the modularity of the result
goes to standard error. Edge lists for this command may separate ids with
tabs, commas or spaces and may contain blank lines and `#` comment lines.

## Library use

```python
from graphorder.gorder import GorderGraph

g = GorderGraph()
g.read_graph("graph.txt")
g.transform()
order = g.gorder_greedy(5)          # order[old_id] == new_id
g.print_reordered_nodes(order, "out.gorder", g.edgenum)
```

```python
from graphorder.rabbit import aggregate, compute_perm

adjacency = [[(1, 1.0)], [(0, 1.0), (2, 1.0)], [(1, 1.0)]]
graph = aggregate(adjacency)
perm = compute_perm(graph)          # perm[v] is the new id of v
```

## What the package does not do

- It has no compressed edge storage; graphs are held as plain Python lists.
- `graphorder.csr.Algo` only names reordering algorithms by number; the
  package implements none of them for `CsrGraph`, and there is no command that
  reads a graph into `CsrGraph`, reorders it or writes it back.
- All work runs in a single thread.

## Tests

```
pip install .[test]
pytest
```