import re
from typing import Dict, List, Tuple

from rich.markup import escape
from wcwidth import wcwidth

# A "\" directly before a "[" that does not open a tag; rich drops one of these.
_BARE_BRACKET_ESCAPE = re.compile(r"\\(?=\[(?![a-z#/@][^[]*?\]))")


class Canvas:

    def __init__(self, width: int, height: int):
        self.width = max(width, 0)
        self.height = max(height, 0)
        self.grid = [[" " for _ in range(self.width)] for _ in range(self.height)]
        self.cell_widths = [[1 for _ in range(self.width)] for _ in range(self.height)]
        self.markup: Dict[Tuple[int, int], Dict[str, List[str]]] = {}

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= y < self.height and 0 <= x < self.width

    def _clear_markup(self, x: int, y: int) -> None:
        self.markup.pop((x, y), None)

    def _clear_glyph_at(self, x: int, y: int) -> None:
        width = self.cell_widths[y][x]
        if width == 0:
            base_x = x - 1
            while base_x >= 0 and self.cell_widths[y][base_x] == 0:
                base_x -= 1
            if base_x < 0:
                return
            width = self.cell_widths[y][base_x]
            x = base_x
        if width <= 1:
            return
        for i in range(width):
            xi = x + i
            if 0 <= xi < self.width:
                self.grid[y][xi] = " "
                self.cell_widths[y][xi] = 1
                self._clear_markup(xi, y)

    def set(self, x: int, y: int, char: str, width: int = 1) -> bool:
        """Write ``char`` at ``(x, y)``; writes falling off the grid are dropped."""
        if width < 1:
            width = 1
        if not (self.in_bounds(x, y) and self.in_bounds(x + width - 1, y)):
            return False

        for i in range(width):
            self._clear_glyph_at(x + i, y)
            self._clear_markup(x + i, y)

        self.grid[y][x] = char
        self.cell_widths[y][x] = width
        for i in range(1, width):
            self.grid[y][x + i] = " "
            self.cell_widths[y][x + i] = 0
        return True

    def write_text(self, x: int, y: int, text: str) -> List[int]:
        written: List[int] = []
        cursor = x
        for char in text:
            width = max(wcwidth(char), 1)
            if self.set(cursor, y, char, width=width):
                written.append(cursor)
            cursor += width
        return written

    def get(self, x: int, y: int) -> str:
        if self.in_bounds(x, y):
            if self.cell_widths[y][x] == 0:
                return " "
            return self.grid[y][x]
        return " "

    def insert_markup(self, x: int, y: int, markup: str, *, position: str = "prefix") -> None:
        if not markup or not self.in_bounds(x, y):
            return
        if position not in {"prefix", "suffix"}:
            position = "prefix"
        cell = self.markup.setdefault((x, y), {"prefix": [], "suffix": []})
        cell[position].append(markup)

    def _render_row(self, y: int, include_markup: bool) -> str:
        last = self.width - 1
        while last >= 0 and self.cell_widths[y][last] == 1 and self.grid[y][last] == " ":
            last -= 1

        if not include_markup:
            return "".join(
                self.grid[y][x] for x in range(last + 1) if self.cell_widths[y][x] != 0
            )

        # Plain runs are escaped whole so a trailing "\" cannot swallow the next tag.
        parts: List[str] = []
        run: List[str] = []

        def flush(before_tag: bool = True) -> None:
            if not run:
                return
            text = _BARE_BRACKET_ESCAPE.sub(r"\\\\", "".join(run))
            text = escape(text + " ")[:-1]
            if before_tag:
                text += "\\" * (len(text) - len(text.rstrip("\\")))
            parts.append(text)
            run.clear()

        for x in range(last + 1):
            if self.cell_widths[y][x] == 0:
                continue
            markup_cell = self.markup.get((x, y))
            if markup_cell and markup_cell.get("prefix"):
                flush()
                parts.extend(markup_cell["prefix"])
            run.append(self.grid[y][x])
            if markup_cell and markup_cell.get("suffix"):
                flush()
                parts.extend(markup_cell["suffix"])
        flush(before_tag=False)
        return "".join(parts)

    def render(self, include_markup: bool = False) -> str:
        return "".join(
            self._render_row(y, include_markup) + "\n" for y in range(self.height)
        )
