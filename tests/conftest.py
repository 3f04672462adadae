import pytest

from circletree import TreeNode, sample_tree


@pytest.fixture
def sample():
    return sample_tree()


@pytest.fixture
def left_only():
    root = TreeNode("a")
    root.add_left("b")
    return root


@pytest.fixture
def right_only():
    root = TreeNode("a")
    root.add_right("b")
    return root
