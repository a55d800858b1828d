import pytest

from nbtrees.tree import MAX_NODES, NonBinaryTree, TreeNode, max_value

SAMPLE = [
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
]


@pytest.fixture
def sample():
    tree = NonBinaryTree(10)
    for index, data, first_child, next_sibling, parent in SAMPLE:
        tree.set_node(index, data, first_child, next_sibling, parent)
    return tree


@pytest.fixture
def small():
    tree = NonBinaryTree(3)
    tree.set_node(1, "X", 2, 0, 0)
    tree.set_node(2, "Y", 0, 3, 1)
    tree.set_node(3, "Z", 0, 0, 1)
    return tree


def test_new_tree_is_empty():
    tree = NonBinaryTree(5)
    assert tree.is_empty() is True
    assert tree.count_nodes() == 0
    assert tree[1] == TreeNode()


def test_capacity_limits():
    with pytest.raises(ValueError):
        NonBinaryTree(0)
    with pytest.raises(ValueError):
        NonBinaryTree(MAX_NODES + 1)
    assert len(NonBinaryTree(MAX_NODES)) == MAX_NODES


def test_set_node_validation():
    tree = NonBinaryTree(3)
    with pytest.raises(IndexError):
        tree.set_node(4, "A", 0, 0, 0)
    with pytest.raises(IndexError):
        tree.set_node(1, "A", 5, 0, 0)
    with pytest.raises(ValueError):
        tree.set_node(1, "AB", 0, 0, 0)


def test_set_node_stores_links(sample):
    node = sample[2]
    assert (node.data, node.first_child, node.next_sibling, node.parent) == ("B", 4, 3, 1)
    assert sample.is_empty() is False


def test_children_and_count(sample):
    assert list(sample.children(1)) == [2, 3]
    assert list(sample.children(3)) == [6, 7, 8]
    assert sample.child_count(3) == 3
    assert sample.child_count(0) == 0
    assert sample.child_count(4) == 0


def test_small_traversals(small):
    assert small.preorder() == ["X", "Y", "Z"]
    assert small.inorder() == ["Y", "X", "Z"]
    assert small.postorder() == ["Z", "Y", "X"]
    assert small.level_order() == ["X", "Y", "Z"]


def test_sample_preorder(sample):
    assert "".join(sample.preorder()) == "ABDEIJCFGH"


def test_sample_level_order(sample):
    order = sample.level_order()
    assert "".join(order) == "ABCDEFGHIJ"
    levels = [sample.node_level(data) for data in order]
    assert levels == sorted(levels)


def test_traversals_visit_every_node(sample):
    expected = sorted(data for _, data, *_ in SAMPLE)
    for order in (sample.preorder(), sample.inorder(), sample.postorder()):
        assert sorted(order) == expected


def test_postorder_ends_with_root(sample):
    assert sample.postorder()[-1] == "A"


def test_inorder_starts_with_leftmost(sample):
    assert sample.inorder()[0] == "D"


def test_levels_follow_parents(sample):
    assert sample.node_level("A") == 0
    for index, data, _, _, parent in SAMPLE[1:]:
        assert sample.node_level(data) == sample.node_level(sample[parent].data) + 1


def test_node_level_missing(sample):
    with pytest.raises(KeyError):
        sample.node_level("Q")


def test_depth(sample, small):
    assert sample.depth() == 3
    assert small.depth() == 1
    assert NonBinaryTree(4).depth() == 0


def test_counts(sample):
    assert sample.count_nodes() == len(SAMPLE)
    leaves = [i for i, *_ in SAMPLE if sample.child_count(i) == 0]
    assert sample.count_leaves() == len(leaves)


def test_contains(sample):
    assert sample.contains("E") is True
    assert sample.contains("Z") is False
    assert sample.contains(" ") is False


def test_empty_tree_outputs():
    tree = NonBinaryTree(4)
    assert tree.level_order() == []
    assert tree.render() == []
    assert tree.count_leaves() == 0


def test_render_shape(sample):
    lines = sample.render()
    width = (1 << (sample.depth() + 1)) * 2
    assert all(len(line) == width for line in lines)
    assert len(lines) == 2 * sample.depth() + 1
    drawn = "".join(lines)
    for _, data, *_ in SAMPLE:
        assert data in drawn
    assert lines[0].strip() == "A"


def test_max_value():
    assert max_value("a", "b") == "b"
    assert max_value("z", "b") == "z"
    assert max_value("c", "c") == "c"