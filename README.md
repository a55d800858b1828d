# nbtrees

A small library for non-binary (general) trees that are kept in a fixed-size
array. Each node holds one character of data and the indices of its first
child, its next sibling and its parent. Index `0` means "no node". The root
is always at index `1`. A tree holds at most 20 slots.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install .[test]
pytest
```

## Command line

```
nbtrees
```

This builds a sample tree with ten nodes, `A` to `J`, and prints the
following:

- an ASCII drawing of the tree
- the level of each node
- the pre-order, in-order, post-order and level-order traversals
- the number of nodes and leaves, and the depth of the tree

The command takes no options apart from `--help`. The labels in its output
are in Indonesian, for example "Pohon yang ditampilkan" and "Jumlah node".

## Library use

```python
from nbtrees.tree import NonBinaryTree

tree = NonBinaryTree(4)
tree.set_node(1, "A", 2, 0, 0)   # root A, first child at index 2
tree.set_node(2, "B", 0, 3, 1)   # B, next sibling at index 3
tree.set_node(3, "C", 4, 0, 1)   # C, first child at index 4
tree.set_node(4, "D", 0, 0, 3)   # D

tree.preorder()        # ['A', 'B', 'C', 'D']
tree.postorder()
tree.inorder()
tree.level_order()
tree.count_nodes()     # 4
tree.count_leaves()    # 2
tree.depth()           # 2
tree.node_level("D")   # 2
tree.contains("Z")     # False
list(tree.children(1)) # [2, 3]
tree.child_count(1)    # 2
print("\n".join(tree.render()))  # ASCII drawing of the tree
```

`render()` returns the drawing as a list of lines; an empty tree gives an
empty list, and `level_order()` then gives an empty list too.

An unused slot holds a blank (`" "`) as its data. A tree counts as empty when
its root slot is blank. Slots can be read with `tree[index]`, which returns a
`TreeNode` with `data`, `first_child`, `next_sibling` and `parent`.

Errors are raised as exceptions:

- `NonBinaryTree(capacity)` raises `ValueError` unless the capacity is 1 to 20.
- `set_node` raises `ValueError` if the data is not a single character, and
  `IndexError` if the index or any link is outside the tree.
- `node_level` raises `KeyError` if no node holds the given data.

`max_value(first, second)` returns the greater of two characters.

`nbtrees.cli` provides `build_sample_tree()` and `report(tree)`, which return
the sample tree and its report text, so you can use them without the
command-line entry point.

## What it does not do

Trees are built only by filling slots with `set_node`. There is no way to
insert or remove nodes by value, to read a tree from a file or to save one,
and the command always reports on the built-in sample tree.