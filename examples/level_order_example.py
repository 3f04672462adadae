from circletree.ascii_tree import render_tree, tree_from_level_order

# "longlabel" is cut to the circle's three inner cells
values = ["A", "B", "C", None, "D", "longlabel", None, None, None, "E"]

print(render_tree(tree_from_level_order(values)), end="")
