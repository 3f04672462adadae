from circletree.ascii_tree import TreeNode, TreeRenderer as BaseRenderer
from rich import print


class TreeRenderer(BaseRenderer):
    def __init__(self, *args, **kwargs):
        kwargs.setdefault("connector_style", "[#0a7e89]")
        super().__init__(*args, **kwargs)


def main() -> None:
    root = TreeNode("root")
    left = root.add_left("L")
    left.add_right("LR")
    root.add_right("R").add_right("RR")
    print(TreeRenderer().render_markup(root), end="")


if __name__ == "__main__":
    main()
