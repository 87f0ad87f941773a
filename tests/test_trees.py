from algobox.trees import TreeNode, binary_tree_paths


def _leaves(node):
    if node is None:
        return 0
    if node.left is None and node.right is None:
        return 1
    return _leaves(node.left) + _leaves(node.right)


def test_paths_known():
    root = TreeNode(1, TreeNode(2, None, TreeNode(5)), TreeNode(3))
    assert binary_tree_paths(root) == ["1->2->5", "1->3"]


def test_paths_empty_tree():
    assert binary_tree_paths(None) == []


def test_paths_single_node():
    assert binary_tree_paths(TreeNode(42)) == [str(42)]


def test_paths_default_node_value():
    assert binary_tree_paths(TreeNode()) == [str(TreeNode().val)]


def test_paths_one_per_leaf_and_start_at_root():
    root = TreeNode(
        -4,
        TreeNode(7, TreeNode(8), TreeNode(9, TreeNode(10))),
        TreeNode(6, None, TreeNode(11, TreeNode(12), TreeNode(13))),
    )
    paths = binary_tree_paths(root)
    assert len(paths) == _leaves(root)
    assert all(path.split("->")[0] == str(root.val) for path in paths)


def test_paths_left_before_right():
    root = TreeNode(1, TreeNode(2), TreeNode(3))
    paths = binary_tree_paths(root)
    assert [p.split("->")[-1] for p in paths] == [str(root.left.val), str(root.right.val)]