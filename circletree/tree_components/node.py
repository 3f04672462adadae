from typing import Any, Iterator, List, Optional, Tuple


class TreeNode:
    """A binary tree node owned by the caller.

    Nodes hash by identity, so two nodes holding the same value stay
    distinct keys in a layout.
    """

    def __init__(
        self,
        value: Any,
        left: Optional["TreeNode"] = None,
        right: Optional["TreeNode"] = None,
    ) -> None:
        self.value = value if isinstance(value, str) else str(value)
        self.left = left
        self.right = right

    def add_left(self, value: Any) -> "TreeNode":
        child = TreeNode(value)
        self.left = child
        return child

    def add_right(self, value: Any) -> "TreeNode":
        child = TreeNode(value)
        self.right = child
        return child

    def children(self) -> Iterator["TreeNode"]:
        if self.left is not None:
            yield self.left
        if self.right is not None:
            yield self.right

    def size(self) -> int:
        count = 0
        stack: List[TreeNode] = [self]
        while stack:
            node = stack.pop()
            count += 1
            stack.extend(node.children())
        return count

    def height(self) -> int:
        deepest = 0
        stack: List[Tuple[TreeNode, int]] = [(self, 0)]
        while stack:
            node, depth = stack.pop()
            deepest = max(deepest, depth)
            for child in node.children():
                stack.append((child, depth + 1))
        return deepest

    def __repr__(self) -> str:
        return f"TreeNode({self.value!r})"
