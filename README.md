# dsatoolbox

A small command-line toolbox for experimenting with classic algorithms:
quicksort (Lomuto partition), merge sort, and depth-first search on
undirected graphs. Each one can also be used as a library.

## Installation

```
pip install .
```

## Command line

Installing the package provides the `dsa-toolbox` command. The same tool
can also be started with `python -m dsatoolbox.cli`. Every command exits
with status 0 on success and 1 on a usage error, an unknown algorithm or
unreadable input; messages about errors go to standard error.

### Sorting

Sort the whitespace-separated integers in a file:

```
dsa-toolbox sort --algo quicksort --input numbers.txt
dsa-toolbox sort --algo mergesort --input numbers.txt
```

The output shows the numbers before and after sorting:

```
Before sorting: 5 3 9 1 
After sorting: 1 3 5 9 
```

Reading stops at the first item that is not a 32-bit integer, so a file
holding `1 2 x 3` is read as `1 2`. A file that is missing or holds no
leading integers is reported as an error.

### Sorting benchmark

Time both sorting algorithms on copies of the same data:

```
dsa-toolbox benchmark-sort --input numbers.txt
```

```
QuickSort took: 12 microseconds
MergeSort took: 20 microseconds
```

### Graph traversal

Run a depth-first traversal from node 0 and print the adjacency list:

```
dsa-toolbox graph --algo dfs --input graph.txt
```

```
DFS traversal: 0 1 2 3 
Node 0: 1 
Node 1: 0 2 
Node 2: 1 3 
Node 3: 2 
```

`dfs` is the only graph algorithm offered.

### Graph benchmark

Print the depth-first order from node 0 and how long the traversal took:

```
dsa-toolbox benchmark-graph --input graph.txt
```

### Graph file format

The first two integers are the node count and the edge count. The given
number of edges follows, each as a pair of integers. Every edge is
undirected. The node count is read but not otherwise used; a file with
fewer edges than it announces is reported as an error.

```
4 3
0 1
1 2
2 3
```

## Library use

```python
from dsatoolbox.sorting import quick_sort, merge_sort, partition
from dsatoolbox.input_parser import parse_ints, read_int_file
from dsatoolbox.graph import Graph

numbers = parse_ints("5 3 9 1")
quick_sort(numbers)        # sorts the list in place
merge_sort(numbers)        # also in place; both return None

graph = Graph()
graph.add_edge(0, 1)
graph.load_from_text("3 2\n1 2\n2 0\n")   # adds edges to the graph
print(graph.dfs(0))        # list of nodes in the order visited
for line in graph.adjacency_lines():
    print(line)
graph.print_adjacency()    # writes the same lines to standard output
```

- `read_int_file(path)` reads the leading integers of a file and raises
  `OSError` if it cannot be opened.
- `partition(items, low, high)` partitions `items[low:high + 1]` around its
  last element and returns the pivot's final index.
- `Graph.load_from_file(path)` and `Graph.load_from_text(text)` raise
  `ValueError` when the counts or edges are missing.
- `Graph.print_adjacency(stream)` writes to any text stream, standard output
  when none is given.

## Running the tests

```
pip install .[test]
pytest
```