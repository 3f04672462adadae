from circletree.ascii_tree import LayoutConfig, TreeNode, TreeRenderer
from rich import print


def insert(root, value):
    if root is None:
        return TreeNode(value)
    node = root
    while True:
        if int(value) < int(node.value):
            if node.left is None:
                node.left = TreeNode(value)
                return root
            node = node.left
        else:
            if node.right is None:
                node.right = TreeNode(value)
                return root
            node = node.right


def main() -> None:
    root = None
    for value in (50, 30, 70, 20, 40, 60, 80, 35, 65):
        root = insert(root, value)

    renderer = TreeRenderer(
        LayoutConfig(horizontal_gap=1, depth_gap=6),
        connector_style="cyan",
        node_style="bold magenta",
    )
    print(renderer.render_markup(root), end="")


if __name__ == "__main__":
    main()
