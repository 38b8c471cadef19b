import pytest

from arenatree import Tree


@pytest.fixture
def small_bst():
    """root=10, left=5, right=22"""
    tree = Tree.with_root(10)
    tree.add_node(0, 5, True)   # 1
    tree.add_node(0, 22, False) # 2
    return tree


@pytest.fixture
def grown_bst(small_bst):
    """small_bst plus 7 right of 5 and 20 left of 22"""
    small_bst.add_node(1, 7, False) # 3
    small_bst.add_node(2, 20, True) # 4
    return small_bst


@pytest.fixture
def negative_left_tree():
    """root=3, left=4, right=5, left.left=-10, left.right=4"""
    tree = Tree.with_root(3)
    tree.add_node(0, 4, True)    # 1
    tree.add_node(0, 5, False)   # 2
    tree.add_node(1, -10, True)  # 3
    tree.add_node(1, 4, False)   # 4
    return tree


@pytest.fixture
def deep_mixed_tree():
    tree = Tree.with_root(-15, kind="isize")
    tree.add_node(0, 5, True)    # 1
    tree.add_node(0, 6, False)   # 2
    tree.add_node(1, -8, True)   # 3
    tree.add_node(1, 1, False)   # 4
    tree.add_node(3, 2, True)    # 5
    tree.add_node(3, -3, False)  # 6
    tree.add_node(2, 3, True)    # 7
    tree.add_node(2, 9, False)   # 8
    tree.add_node(8, 0, False)   # 9
    tree.add_node(9, 4, True)    # 10
    tree.add_node(9, -1, False)  # 11
    tree.add_node(11, 10, True)  # 12
    return tree
