"""Command that builds the sample tree and prints its report."""

from __future__ import annotations

import argparse

from .tree import NonBinaryTree

_SAMPLE_NODES = (
    # index, data, first child, next sibling, parent
    (1, "A", 2, 0, 0),
    (2, "B", 4, 3, 1),
    (3, "C", 6, 0, 1),
    (4, "D", 0, 5, 2),
    (5, "E", 9, 0, 2),
    (6, "F", 0, 7, 3),
    (7, "G", 0, 8, 3),
    (8, "H", 0, 0, 3),
    (9, "I", 0, 10, 5),
    (10, "J", 0, 0, 5),
)

_EMPTY_MESSAGE = "Pohon kosong"


def build_sample_tree() -> NonBinaryTree:
    """The ten-node tree A..J with a depth of three."""
    tree = NonBinaryTree(len(_SAMPLE_NODES))
    for index, data, first_child, next_sibling, parent in _SAMPLE_NODES:
        tree.set_node(index, data, first_child, next_sibling, parent)
    return tree


def _traversal_line(items: list[str]) -> str:
    return "".join(f"{item} " for item in items)


def report(tree: NonBinaryTree) -> str:
    """The full text report: drawing, levels, traversals and counts."""
    lines = ["", "Pohon yang ditampilkan:"]
    lines.extend(tree.render() or [_EMPTY_MESSAGE])

    lines += ["", "Level dari setiap node:"]
    for node in tree:
        if not node.is_used:
            continue
        try:
            level = tree.node_level(node.data)
        except KeyError:
            level = -1
        lines.append(f"Node {node.data}: Level {level}")

    lines += [
        "",
        f"Traversal PreOrder: {_traversal_line(tree.preorder())}",
        f"Traversal InOrder: {_traversal_line(tree.inorder())}",
        f"Traversal PostOrder: {_traversal_line(tree.postorder())}",
    ]
    level_order = tree.level_order()
    lines.append(
        "Traversal Level Order: "
        + (_traversal_line(level_order) if level_order else _EMPTY_MESSAGE)
    )

    lines += [
        "",
        f"Jumlah node: {tree.count_nodes()}",
        f"Jumlah daun: {tree.count_leaves()}",
        f"Kedalaman pohon: {tree.depth()}",
    ]
    return "\n".join(lines) + "\n"


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="nbtrees", description="Print the report for the sample non-binary tree."
    )
    parser.parse_args(argv)
    print(report(build_sample_tree()), end="")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())