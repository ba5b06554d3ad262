from algopatterns.bfs import TreeNode, level_order_traversal


def test_level_order_traversal():
    root = TreeNode(12)
    root.left = TreeNode(7)
    root.right = TreeNode(1)
    root.left.left = TreeNode(9)
    root.right.left = TreeNode(10)
    root.right.right = TreeNode(5)

    assert level_order_traversal(root) == [[12], [7, 1], [9, 10, 5]]


def test_empty_tree():
    assert level_order_traversal(None) == []


def test_single_node():
    assert level_order_traversal(TreeNode(3)) == [[3]]