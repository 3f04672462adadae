from dataclasses import dataclass, field
from typing import Tuple

from wcwidth import wcswidth

from ..errors import ConfigurationError


def _display_width(text: str) -> int:
    width = wcswidth(text)
    return width if width >= 0 else len(text)


@dataclass(frozen=True)
class GlyphTemplate:

    top: str = "  ___  "
    side: str = " /   \\ "
    label_left: str = "| "
    label_right: str = " |"
    bottom: str = " \\___/ "

    def __post_init__(self) -> None:
        for name in ("top", "side", "label_left", "label_right", "bottom"):
            if not isinstance(getattr(self, name), str):
                raise ConfigurationError(f"GlyphTemplate.{name} must be a string.")

        width = _display_width(self.top)
        if width < 1:
            raise ConfigurationError("GlyphTemplate rows must not be empty.")
        if self.inner_width < 0:
            raise ConfigurationError("GlyphTemplate label brackets are wider than the glyph.")

        for name in ("side", "bottom"):
            row_width = _display_width(getattr(self, name))
            if row_width != width:
                raise ConfigurationError(
                    f"GlyphTemplate.{name} is {row_width} cells wide, expected {width} "
                    "to match the top row."
                )

    @property
    def width(self) -> int:
        return _display_width(self.top)

    @property
    def height(self) -> int:
        return 4

    @property
    def inner_width(self) -> int:
        return (
            _display_width(self.top)
            - _display_width(self.label_left)
            - _display_width(self.label_right)
        )

    def rows(self, label_cell: str) -> Tuple[str, str, str, str]:
        return (
            self.top,
            self.side,
            f"{self.label_left}{label_cell}{self.label_right}",
            self.bottom,
        )


@dataclass(frozen=True)
class LayoutConfig:
    """Layout constants shared by the layout engine and the renderer.

    ``glyph_width`` and ``glyph_height`` come from the template so the two
    can never drift apart. ``unit`` is the horizontal distance between
    consecutive inorder slots.
    """

    template: GlyphTemplate = field(default_factory=GlyphTemplate)
    horizontal_gap: int = 3
    depth_gap: int = 6
    margin_x: int = 20
    margin_y: int = 10

    def __post_init__(self) -> None:
        if not isinstance(self.template, GlyphTemplate):
            raise ConfigurationError("template must be a GlyphTemplate instance.")

        for name in ("horizontal_gap", "depth_gap", "margin_x", "margin_y"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ConfigurationError(f"{name} must be an integer.")

        if self.horizontal_gap < 0:
            raise ConfigurationError("horizontal_gap must not be negative.")
        if self.depth_gap < 1:
            raise ConfigurationError("depth_gap must be at least 1.")
        if self.margin_x < 0 or self.margin_y < 0:
            raise ConfigurationError("Canvas margins must not be negative.")

    @property
    def glyph_width(self) -> int:
        return self.template.width

    @property
    def glyph_height(self) -> int:
        return self.template.height

    @property
    def unit(self) -> int:
        return self.glyph_width + self.horizontal_gap
