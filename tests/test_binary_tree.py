import pytest

from dsakit.binary_tree import (
    TreeNode,
    build_tree,
    count_nodes,
    diameter,
    diameter_naive,
    height,
    inorder,
    is_identical,
    is_subtree,
    leaf_depths,
    level_order,
    postorder,
    preorder,
    sum_nodes,
    top_view,
)

SAMPLE = [1, 2, 3, -1, -1, 4, -1, 2, -1, -1, 10, 30, -1, -1, 40, -1, -1]
SMALL = [1, 2, -1, -1, 3, -1, 4, -1, -1]


@pytest.fixture
def sample():
    return build_tree(SAMPLE)


@pytest.fixture
def small():
    return build_tree(SMALL)


def test_preorder_matches_input_values(sample):
    assert preorder(sample) == [v for v in SAMPLE if v != -1]


def test_traversals_are_permutations(sample):
    expected = sorted(preorder(sample))
    assert sorted(inorder(sample)) == expected
    assert sorted(postorder(sample)) == expected


def test_postorder_ends_with_root_and_inorder_structure(sample):
    assert postorder(sample)[-1] == sample.data
    values = inorder(sample)
    split = len(inorder(sample.left))
    assert values[split] == sample.data
    assert values[:split] == inorder(sample.left)


def test_empty_tree():
    root = build_tree([-1])
    assert root is None
    assert preorder(root) == []
    assert level_order(root) == []
    assert count_nodes(root) == 0
    assert height(root) == 0
    assert leaf_depths(root) == [0]
    assert top_view(root) == []


def test_truncated_sequence_raises():
    with pytest.raises(ValueError):
        build_tree([1, 2, -1])


def test_level_order(sample):
    assert level_order(sample) == [[1], [2, 10], [3, 4, 30, 40], [2]]


def test_level_order_counts_and_height(sample):
    levels = level_order(sample)
    assert len(levels) == height(sample)
    assert sum(len(level) for level in levels) == count_nodes(sample)


def test_count_and_sum(small):
    assert count_nodes(small) == len([v for v in SMALL if v != -1])
    assert sum_nodes(small) == sum(v for v in SMALL if v != -1)


def test_height_is_max_leaf_depth(sample):
    assert height(sample) == max(leaf_depths(sample))


def test_leaf_depths(small):
    assert leaf_depths(small) == [2, 2, 2, 3, 3]


def test_leaf_depths_one_per_missing_child(sample):
    assert len(leaf_depths(sample)) == count_nodes(sample) + 1


def test_diameter_small(small):
    assert diameter(small) == 4


@pytest.mark.parametrize("values", [SAMPLE, SMALL, [-1], [5, -1, -1]])
def test_diameter_versions_agree(values):
    root = build_tree(values)
    assert diameter(root) == diameter_naive(root)
    assert diameter(root) >= height(root)


def test_identical_trees():
    assert is_identical(build_tree(SAMPLE), build_tree(SAMPLE))
    assert not is_identical(build_tree(SAMPLE), build_tree(SMALL))
    assert is_identical(None, None)
    assert not is_identical(TreeNode(1), None)


def test_subtree_found(sample):
    sub = TreeNode(4, right=TreeNode(2))
    assert is_subtree(sample, sub)
    assert is_subtree(sample, sample)


def test_subtree_missing(sample):
    sub = TreeNode(4, TreeNode(3), TreeNode(2))
    assert not is_subtree(sample, sub)
    assert not is_subtree(sample, None)
    assert is_subtree(None, None)


def test_top_view(sample):
    assert top_view(sample) == [3, 2, 1, 10, 40]


def test_top_view_contains_root(small):
    view = top_view(small)
    assert small.data in view
    assert view[0] == small.left.data