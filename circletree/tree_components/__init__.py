from .core import GlyphTemplate, LayoutConfig
from .node import TreeNode
from .glyph import Glyph, make_glyph
from .layout import LayoutContext, LayoutResult, Position, lay_out
from .canvas import Canvas
from .renderer import TreeRenderer, render_tree

__all__ = [
    "GlyphTemplate",
    "LayoutConfig",
    "TreeNode",
    "Glyph",
    "make_glyph",
    "LayoutContext",
    "LayoutResult",
    "Position",
    "lay_out",
    "Canvas",
    "TreeRenderer",
    "render_tree",
]
