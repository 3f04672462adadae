import json
import logging
from pathlib import Path
from typing import Any, List, Mapping, Optional, Sequence, Tuple, Union

from .errors import TreeFormatError
from .tree_components.node import TreeNode

logger = logging.getLogger(__name__)

_VALUE_KEYS = ("value", "val")


def _value_of(payload: Mapping[str, Any]) -> Any:
    for key in _VALUE_KEYS:
        if key in payload and payload[key] is not None:
            return payload[key]
    raise TreeFormatError("Tree node must include a 'value'.")


def _node_from(payload: Any) -> TreeNode:
    if not isinstance(payload, Mapping):
        raise TreeFormatError(
            f"Tree node must be an object or null, got {type(payload).__name__}."
        )
    return TreeNode(_value_of(payload))


def tree_from_dict(payload: Optional[Mapping[str, Any]]) -> Optional[TreeNode]:
    if payload is None:
        return None

    root = _node_from(payload)
    stack: List[Tuple[TreeNode, Mapping[str, Any]]] = [(root, payload)]
    while stack:
        node, current = stack.pop()
        for side in ("left", "right"):
            child_payload = current.get(side)
            if child_payload is None:
                continue
            child = _node_from(child_payload)
            setattr(node, side, child)
            stack.append((child, child_payload))
    return root


def tree_from_level_order(values: Sequence[Any]) -> Optional[TreeNode]:
    """Build a tree from a heap-ordered list where ``None`` marks a gap.

    The children of entry ``i`` sit at ``2i + 1`` and ``2i + 2``.
    """
    if isinstance(values, (str, bytes)) or not isinstance(values, Sequence):
        raise TreeFormatError("Level-order tree must be a list of values.")

    nodes: List[Optional[TreeNode]] = []
    for index, value in enumerate(values):
        if value is None:
            nodes.append(None)
            continue
        if index > 0 and nodes[(index - 1) // 2] is None:
            raise TreeFormatError(
                f"Level-order entry {index} ({value!r}) has no parent node."
            )
        node = TreeNode(value)
        nodes.append(node)
        if index > 0:
            parent = nodes[(index - 1) // 2]
            if index % 2 == 1:
                parent.left = node
            else:
                parent.right = node

    return nodes[0] if nodes else None


def tree_from_document(document: Any) -> Optional[TreeNode]:
    if document is None or isinstance(document, Mapping):
        return tree_from_dict(document)
    if isinstance(document, list):
        return tree_from_level_order(document)
    raise TreeFormatError(
        f"Tree document must be an object, a list or null, got {type(document).__name__}."
    )


def load_tree(path: Union[str, Path]) -> Optional[TreeNode]:
    source = Path(path)
    logger.debug("Loading tree from %s", source)
    try:
        content = source.read_text(encoding="utf-8")
    except OSError as exc:
        raise TreeFormatError(f"Cannot read tree file {source}: {exc}") from exc
    return parse_tree(content, source=str(source))


def parse_tree(content: str, source: str = "<string>") -> Optional[TreeNode]:
    try:
        document = json.loads(content)
    except json.JSONDecodeError as exc:
        raise TreeFormatError(f"{source} is not valid JSON: {exc}") from exc
    except RecursionError as exc:
        raise TreeFormatError(f"{source} is nested too deeply to parse.") from exc

    try:
        return tree_from_document(document)
    except TreeFormatError as exc:
        raise TreeFormatError(f"{source}: {exc}") from exc


def sample_tree() -> TreeNode:
    root = TreeNode("1")
    left = root.add_left("2")
    left.add_left("10")
    left.add_right("2")
    right = root.add_right("3")
    right.add_left("2")
    right.add_right("1")
    return root
