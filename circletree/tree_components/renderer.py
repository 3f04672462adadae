import logging
from typing import List, Optional, Tuple

from rich.errors import MarkupError
from rich.text import Text

from ..errors import ConfigurationError
from .canvas import Canvas
from .core import LayoutConfig
from .layout import LayoutResult, Position, lay_out
from .node import TreeNode

logger = logging.getLogger(__name__)

StyleTags = Tuple[str, str]


class TreeRenderer:
    """Draws a binary tree of circle glyphs joined by slanted connectors.

    A renderer only holds configuration. Every call to :meth:`render` lays the
    tree out again on a fresh canvas, so one instance can be reused for any
    number of trees.
    """

    def __init__(
        self,
        config: Optional[LayoutConfig] = None,
        connector_style: Optional[str] = None,
        node_style: Optional[str] = None,
    ):
        if config is not None and not isinstance(config, LayoutConfig):
            raise ConfigurationError("config must be a LayoutConfig instance.")

        self.config = config or LayoutConfig()
        self.connector_style = connector_style
        self.node_style = node_style
        self._connector_tags = self._style_tags("connector_style", connector_style)
        self._node_tags = self._style_tags("node_style", node_style)

    @staticmethod
    def _style_tags(name: str, style: Optional[str]) -> Optional[StyleTags]:
        """Turn a style such as ``"cyan"`` or ``"[bold]"`` into open/close tags.

        The tags must wrap a single character without leaking text of their own.
        """
        if style is None:
            return None
        if not isinstance(style, str):
            raise ConfigurationError(f"{name} must be a string when provided.")
        tag = style.strip()
        if not tag:
            return None

        open_tag = tag if tag.startswith("[") else f"[{tag}]"
        try:
            wrapped = Text.from_markup(f"{open_tag}x[/]", emoji=False)
        except MarkupError as exc:
            raise ConfigurationError(f"{name} {style!r} is not valid rich markup: {exc}") from exc
        if wrapped.plain != "x":
            raise ConfigurationError(f"{name} {style!r} must be a single markup tag.")
        return open_tag, "[/]"

    @staticmethod
    def _mark(canvas: Canvas, x: int, y: int, tags: Optional[StyleTags]) -> None:
        if tags is None:
            return
        canvas.insert_markup(x, y, tags[0], position="prefix")
        canvas.insert_markup(x, y, tags[1], position="suffix")

    def _set_connector_char(self, canvas: Canvas, x: int, y: int, char: str) -> None:
        if canvas.set(x, y, char):
            self._mark(canvas, x, y, self._connector_tags)

    def _draw_glyph(self, canvas: Canvas, position: Position) -> None:
        for index, row in enumerate(position.glyph.rows):
            y = position.y + index
            written = canvas.write_text(position.x, y, row)
            for x in written:
                if canvas.grid[y][x] != " ":
                    self._mark(canvas, x, y, self._node_tags)

    def _draw_connector(
        self,
        canvas: Canvas,
        parent: Position,
        child: Position,
        default_sign: int,
    ) -> None:
        parent_center = parent.center_x
        bottom_y = parent.y + self.config.glyph_height
        child_center = child.center_x
        dy = child.y - bottom_y

        if dy <= 0:
            for y in range(bottom_y, child.y + 1):
                self._set_connector_char(canvas, parent_center, y, "|")
            return

        sign = default_sign
        if default_sign < 0 and child_center > parent_center:
            sign = 1
        elif default_sign > 0 and child_center < parent_center:
            sign = -1

        char = "/" if sign < 0 else "\\"
        for step in range(1, dy + 1):
            self._set_connector_char(canvas, parent_center + step * sign, bottom_y + step - 1, char)

    def _draw_all_nodes(self, canvas: Canvas, root: Optional[TreeNode], layout: LayoutResult) -> None:
        positions = layout.positions
        stack: List[TreeNode] = [root] if root is not None else []
        while stack:
            node = stack.pop()
            position = positions[node]
            self._draw_glyph(canvas, position)

            if node.left is not None:
                self._draw_connector(canvas, position, positions[node.left], -1)
            if node.right is not None:
                self._draw_connector(canvas, position, positions[node.right], 1)

            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)

    def render(self, root: Optional[TreeNode], include_markup: bool = False) -> str:
        config = self.config
        layout = lay_out(root, config)

        width = layout.max_x + config.unit + config.margin_x
        height = layout.max_y + config.depth_gap + config.margin_y
        logger.debug("Rendering %d nodes on a %dx%d canvas", layout.slots, width, height)

        canvas = Canvas(width=width, height=height)
        self._draw_all_nodes(canvas, root, layout)
        return canvas.render(include_markup=include_markup)

    def render_markup(self, root: Optional[TreeNode]) -> str:
        return self.render(root, include_markup=True)


def render_tree(
    root: Optional[TreeNode],
    config: Optional[LayoutConfig] = None,
    **kwargs,
) -> str:
    include_markup = kwargs.pop("include_markup", False)
    return TreeRenderer(config, **kwargs).render(root, include_markup=include_markup)
