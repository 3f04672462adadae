from dataclasses import dataclass
from typing import List, Tuple

from wcwidth import wcwidth

from .core import GlyphTemplate


@dataclass(frozen=True)
class Glyph:
    rows: Tuple[str, ...]

    @property
    def width(self) -> int:
        if not self.rows:
            return 0
        return sum(_cell_width(char) for char in self.rows[0])

    @property
    def height(self) -> int:
        return len(self.rows)


def _cell_width(char: str) -> int:
    return max(wcwidth(char), 1)


def _fit_label(value: str, limit: int) -> Tuple[str, int]:
    chars: List[str] = []
    used = 0
    for char in value:
        if wcwidth(char) < 0:
            char = " "
        width = _cell_width(char)
        if used + width > limit:
            break
        chars.append(char)
        used += width
    return "".join(chars), used


def make_glyph(value: str, template: GlyphTemplate) -> Glyph:
    """Build the circle glyph for ``value``.

    The label is cut to the template's inner width (counted in terminal
    cells) and centered, with any odd padding cell placed on the right.
    """
    inner_width = template.inner_width
    label, used = _fit_label(value, inner_width)
    left_pad = (inner_width - used) // 2
    right_pad = inner_width - used - left_pad
    label_cell = " " * left_pad + label + " " * right_pad
    return Glyph(rows=template.rows(label_cell))
