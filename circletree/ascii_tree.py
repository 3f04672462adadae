from .loader import load_tree, sample_tree, tree_from_dict, tree_from_level_order
from .tree_components import (
    Canvas,
    Glyph,
    GlyphTemplate,
    LayoutConfig,
    Position,
    TreeNode,
    TreeRenderer,
    lay_out,
    make_glyph,
    render_tree,
)

__all__ = [
    "TreeNode",
    "TreeRenderer",
    "render_tree",
    "lay_out",
    "make_glyph",
    "Glyph",
    "GlyphTemplate",
    "LayoutConfig",
    "Position",
    "Canvas",
    "load_tree",
    "sample_tree",
    "tree_from_dict",
    "tree_from_level_order",
]
