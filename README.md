# cnettools

A set of small command-line tools, usable also as a Python library, for
analysing and modelling complex networks. Every tool reads or writes graphs
as plain edge lists and needs nothing beyond the Python standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Input format

Graphs are given as edge lists with one edge per line:

```
I_1 J_1
I_2 J_2
...
```

Weighted tools expect a third column holding the weight:

```
I_1 J_1 W_1
I_2 J_2 W_2
...
```

Nodes are labelled by non-negative integers starting at 0; the number of
nodes is one more than the largest label. Lines starting with `#` and blank
lines are skipped. Graphs are read as undirected. Where a tool reads
`graph_in` (all except `cnet-kruskal`), passing `-` (a dash) reads the edge
list from standard input.

## Commands

Run without arguments, each command prints a short description and its usage.

### Basic properties

| Command | Usage | Output |
|---|---|---|
| `cnet-deg-seq` | `cnet-deg-seq <graph_in>` | the degree of each node, one per line |
| `cnet-deg-seq-w` | `cnet-deg-seq-w <graph_in>` | `k_i s_i` per node: degree and strength |
| `cnet-graph-info` | `cnet-graph-info <graph_in>` | `N K avg_k avg_k2` on one line |

### Degree correlations

```
cnet-knn <graph_in> [NO|LIN|EXP <bin_param>]
cnet-knn-w <graph_in> [NO|LIN|EXP <bin_param>]
```

Print the average nearest-neighbour degree `knn(k)` for each degree `k`
(unweighted and weighted version), one `k value` line per degree. With `LIN`
the values are grouped into `bin_param` bins of equal width; with `EXP` the
bin widths grow by a factor `bin_param` (which must be larger than 1). In
binned output the first column is the upper bound of each bin, and empty
bins are left out.

### Spanning trees

```
cnet-kruskal <graph_in> [MAX]
```

Weighted edge list of the minimum spanning tree (a forest, if the graph is
not connected), or of the maximum one when `MAX` is given. Edges without a
weight count as weight 1. This command reads from a file only.

### Random graph models

```
cnet-er-b <N> <p> [<file_out>]
```

Erdős–Rényi graph with `N` nodes where each edge exists with probability `p`.
The edge list goes to `file_out` if given, otherwise to standard output.

```
cnet-dms <N> <m> <n0> <a>
```

Dorogovtsev–Mendes–Samukhin growth model: starting from a clique of `n0`
nodes, each new node attaches `m` distinct edges with probability
proportional to `k_j + a` (with `a >= -m`), giving a degree exponent
`gamma = 3 + a/m`. The edge list of the final graph is printed.

```
cnet-hv-net <graph_in> [SHOW]
```

Hidden-variable random graph with the same joint degree distribution as
`graph_in`. With `SHOW` the hidden variable and the sampled degree of each
node are written to standard error.

### Power-law fitting

```
cnet-fitmle <data_in> [<tol> [TEST [<num_test>]]]
```

Maximum-likelihood power-law fit of a list of values (one per line, `-`
for standard input). The discrete or continuous estimator is chosen from the
data, and the choice is reported on standard error. `tol` defaults to 0.1.
The output is `gamma x_min ks`; with `TEST`, a p-value estimated from
`num_test` bootstrapped samples (100 by default) is appended.

## Library use

The same functionality is available from Python:

```python
from cnettools.graph import read_graph, degree_sequence, graph_info
from cnettools.knn import knn_by_degree, knn_nobin
from cnettools.kruskal import WeightedEdge, kruskal

graph = read_graph("network.txt")
print(degree_sequence(graph))
print(graph_info(graph))
print(knn_nobin(knn_by_degree(graph)))

tree = kruskal([WeightedEdge(0, 1, 2.0), WeightedEdge(1, 2, 1.0), WeightedEdge(0, 2, 3.0)])
```

The random models take a `random.Random` instance, so results can be made
reproducible:

```python
import random
from cnettools.er import sample_er
from cnettools.dms import dms

edges = list(sample_er(100, 0.05, random.Random(42)))
grown = dms(1000, 3, 4, 0.0, random.Random(7))
```

## What is not included

The package does not compute shortest paths or distances, does not
enumerate cycles, and does not detect communities; for those tasks another
tool is needed.