import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from .core import LayoutConfig
from .glyph import Glyph, make_glyph
from .node import TreeNode

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Position:
    x: int
    y: int
    width: int
    glyph: Glyph

    @property
    def center_x(self) -> int:
        return self.x + self.width // 2


@dataclass
class LayoutResult:
    positions: Dict[TreeNode, Position] = field(default_factory=dict)
    max_x: int = 0
    max_y: int = 0
    slots: int = 0


class LayoutContext:
    """Per-call state for one inorder placement pass."""

    def __init__(self, config: LayoutConfig) -> None:
        self.config = config
        self.next_slot = 0
        self.result = LayoutResult()

    def place(self, node: TreeNode, depth: int) -> Position:
        config = self.config
        glyph = make_glyph(node.value, config.template)
        x = self.next_slot * config.unit
        y = depth * config.depth_gap

        position = Position(x=x, y=y, width=glyph.width, glyph=glyph)
        result = self.result
        result.positions[node] = position
        if x > result.max_x:
            result.max_x = x
        if y > result.max_y:
            result.max_y = y

        self.next_slot += 1
        result.slots = self.next_slot
        return position


def lay_out(root: Optional[TreeNode], config: Optional[LayoutConfig] = None) -> LayoutResult:
    context = LayoutContext(config or LayoutConfig())

    stack: List[Tuple[TreeNode, int]] = []
    node, depth = root, 0
    while stack or node is not None:
        while node is not None:
            stack.append((node, depth))
            node, depth = node.left, depth + 1
        node, depth = stack.pop()
        context.place(node, depth)
        node, depth = node.right, depth + 1

    result = context.result
    logger.debug(
        "Laid out %d nodes, extent x=%d y=%d", result.slots, result.max_x, result.max_y
    )
    return result
