from .ascii_tree import *
from .errors import *

__version__ = "0.1.0"
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
    "CircleTreeError",
    "ConfigurationError",
    "TreeFormatError",
]
