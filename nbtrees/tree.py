"""Non-binary trees stored in a fixed-size array with first-child/next-sibling links."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from itertools import islice
from typing import Iterator

MAX_NODES = 20
NIL_INDEX = 0
ROOT_INDEX = 1
EMPTY = " "


@dataclass
class TreeNode:
    """One slot of the tree; a slot whose data is a blank is unused."""

    data: str = EMPTY
    first_child: int = NIL_INDEX
    next_sibling: int = NIL_INDEX
    parent: int = NIL_INDEX

    @property
    def is_used(self) -> bool:
        return self.data != EMPTY


class NonBinaryTree:
    """A tree of single characters kept in slots 1..capacity, rooted at slot 1."""

    def __init__(self, capacity: int) -> None:
        if not 1 <= capacity <= MAX_NODES:
            raise ValueError(f"capacity must be between 1 and {MAX_NODES}, got {capacity}")
        self._nodes = [TreeNode() for _ in range(capacity)]

    @property
    def capacity(self) -> int:
        return len(self._nodes)

    def __len__(self) -> int:
        return len(self._nodes)

    def __getitem__(self, index: int) -> TreeNode:
        if not 1 <= index <= self.capacity:
            raise IndexError(f"node index {index} is outside 1..{self.capacity}")
        return self._nodes[index - 1]

    def __iter__(self) -> Iterator[TreeNode]:
        return iter(self._nodes)

    def _check_link(self, name: str, link: int) -> None:
        if not NIL_INDEX <= link <= self.capacity:
            raise IndexError(f"{name} {link} is outside 0..{self.capacity}")

    def set_node(
        self, index: int, data: str, first_child: int, next_sibling: int, parent: int
    ) -> TreeNode:
        """Fill slot ``index`` with a character and its links (0 means no link)."""
        if not isinstance(data, str) or len(data) != 1:
            raise ValueError(f"node data must be a single character, got {data!r}")
        for name, link in (
            ("first_child", first_child),
            ("next_sibling", next_sibling),
            ("parent", parent),
        ):
            self._check_link(name, link)
        node = self[index]
        node.data = data
        node.first_child = first_child
        node.next_sibling = next_sibling
        node.parent = parent
        return node

    def is_empty(self) -> bool:
        return not self[ROOT_INDEX].is_used

    def children(self, index: int) -> Iterator[int]:
        """Yield the slot indices of the children of ``index``, in sibling order."""
        if index == NIL_INDEX:
            return
        child = self[index].first_child
        while child != NIL_INDEX:
            yield child
            child = self[child].next_sibling

    def child_count(self, index: int) -> int:
        return sum(1 for _ in self.children(index))

    def _preorder(self, index: int) -> Iterator[str]:
        if index == NIL_INDEX:
            return
        node = self[index]
        yield node.data
        yield from self._preorder(node.first_child)
        yield from self._preorder(node.next_sibling)

    def preorder(self) -> list[str]:
        return list(self._preorder(ROOT_INDEX))

    def _inorder(self, index: int) -> Iterator[str]:
        if index == NIL_INDEX:
            return
        node = self[index]
        yield from self._inorder(node.first_child)
        yield node.data
        for sibling in islice(self.children(index), 1, None):
            yield from self._inorder(sibling)

    def inorder(self) -> list[str]:
        """First child's subtree, then the node, then the remaining children."""
        return list(self._inorder(ROOT_INDEX))

    def _postorder(self, index: int) -> Iterator[str]:
        if index == NIL_INDEX:
            return
        node = self[index]
        yield from self._postorder(node.first_child)
        yield from self._postorder(node.next_sibling)
        yield node.data

    def postorder(self) -> list[str]:
        """First child chain, then the sibling chain, then the node itself."""
        return list(self._postorder(ROOT_INDEX))

    def level_order(self) -> list[str]:
        if self.is_empty():
            return []
        result = []
        queue = deque([ROOT_INDEX])
        while queue:
            index = queue.popleft()
            result.append(self[index].data)
            queue.extend(self.children(index))
        return result

    def render(self) -> list[str]:
        """Draw the tree as text lines; an empty tree gives no lines."""
        if self.is_empty():
            return []

        depth = self.depth()
        cols = (1 << (depth + 1)) * 2
        rows = (depth + 1) * 2
        grid = [[EMPTY] * cols for _ in range(rows)]

        queue: deque[tuple[int, int, int | None, int]] = deque(
            [(ROOT_INDEX, cols // 2, None, 0)]
        )
        while queue:
            index, pos, parent_pos, level = queue.popleft()
            grid[level * 2][pos] = self[index].data

            if parent_pos is not None:
                connector = grid[level * 2 - 1]
                if pos < parent_pos:
                    connector[pos + 1 : parent_pos] = "-" * (parent_pos - pos - 1)
                    connector[pos] = "/"
                elif pos > parent_pos:
                    connector[parent_pos + 1 : pos] = "-" * (pos - parent_pos - 1)
                    connector[pos] = "\\"
                else:
                    connector[pos] = "|"

            children = list(self.children(index))
            if not children:
                continue
            spacing = max(cols // (1 << (level + 2)) + 1, 1)
            start = pos - (len(children) - 1) * spacing // 2
            for order, child in enumerate(children):
                child_pos = min(max(start + order * spacing, 0), cols - 1)
                queue.append((child, child_pos, pos, level + 1))

        return ["".join(row) for row in grid if any(cell != EMPTY for cell in row)]

    def contains(self, data: str) -> bool:
        return any(node.is_used and node.data == data for node in self._nodes)

    def count_nodes(self) -> int:
        return sum(1 for node in self._nodes if node.is_used)

    def count_leaves(self) -> int:
        return sum(
            1 for node in self._nodes if node.is_used and node.first_child == NIL_INDEX
        )

    def _node_level(self, index: int, data: str, level: int) -> int | None:
        if index == NIL_INDEX:
            return None
        node = self[index]
        if node.data == data:
            return level
        found = self._node_level(node.first_child, data, level + 1)
        if found is not None:
            return found
        return self._node_level(node.next_sibling, data, level)

    def node_level(self, data: str) -> int:
        """Level of the first node holding ``data``, the root being level 0."""
        level = self._node_level(ROOT_INDEX, data, 0)
        if level is None:
            raise KeyError(data)
        return level

    def _depth(self, index: int) -> int:
        if index == NIL_INDEX:
            return -1
        return max((self._depth(child) for child in self.children(index)), default=-1) + 1

    def depth(self) -> int:
        return self._depth(ROOT_INDEX)


def max_value(first: str, second: str) -> str:
    return first if first > second else second