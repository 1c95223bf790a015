# marytree

A complete m-ary tree whose nodes can be locked by users (identified by an
integer uid), with three operations:

- **lock** — succeeds when the node is not locked, none of its descendants is
  locked and none of its ancestors is locked.
- **unlock** — succeeds when the node is locked by the same user.
- **upgrade** — requires the node to be unlocked and to have at least one
  locked descendant. The descendants are then walked in pre-order; the walk
  fails if it meets a lock held by another user, or if it finishes a subtree
  before any lock has been found so far. When the walk succeeds, the
  descendant locks it gathered are released and the node is locked by the
  user.

Each operation returns `True` or `False`. Every operation holds the target
node's own mutex while it runs, so the methods can be called from several
threads.

## Library use

```python
from marytree.tree import LockingTree

tree = LockingTree(["World", "Asia", "Africa", "China", "India"], 2)

tree.lock("China", 9)      # True
tree.lock("Asia", 9)       # False: a descendant is locked
tree.upgrade("Asia", 9)    # True: China is released, Asia is locked
tree.unlock("Asia", 9)     # True
```

The tree is filled level by level: node `i` (for `i >= 1`) is a child of node
`(i - 1) // arity`. `len(tree)` gives the node count, `name in tree` checks
membership, and `tree[name]` returns the `Node`, which has `name`, `parent`,
`children`, `locked_by` (a uid or `None`), `is_locked`,
`locked_descendants` and `ancestors()`, which yields the parent up to the root.

`LockingTree` raises `ValueError` for an arity below 1 or a repeated node
name, and every operation raises `KeyError` for a name that is not in the tree.

## Command line

Install the package, then run:

```
marytree queries.txt
marytree < queries.txt
marytree --concurrent queries.txt
```

The input file is optional; without it, or with `-`, standard input is read.
The input is whitespace separated: first `N m Q`, then `N` node names, then
`Q` queries of the form `type name uid`, where type `1` is lock, `2` is unlock
and anything else is upgrade. For each query one line with `true` or `false`
is printed, in the order of the queries.

```
7 2 3
World Asia Africa China India SouthAfrica Egypt
1 China 9
1 India 9
3 Asia 9
```

prints

```
true
true
true
```

With `--concurrent`, each query runs on its own thread; the outcomes may then
depend on how the threads interleave, but they are still printed in query
order. Malformed input, an unreadable file or an unknown node name prints an
`error:` line to standard error and exits with status 1.

From Python, `marytree.cli` offers `parse_input` (returning a `Problem` with
`names`, `arity`, `queries` and `build_tree()`), `apply_query`, `run_queries`
and `run_queries_concurrently`; queries are `Query` objects holding an
`Operation`, a node name and a uid.

## Limits

Lock state lives only in memory: nothing is saved between runs, and every
command-line run starts from a tree with all nodes unlocked. The tree shape is
always the complete m-ary layout described above; nodes cannot be added or
removed after construction.

## Tests

```
pip install -e .[test]
pytest
```