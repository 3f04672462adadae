from circletree.ascii_tree import render_tree, sample_tree


def main() -> None:
    print(render_tree(sample_tree()), end="")


if __name__ == "__main__":
    main()
