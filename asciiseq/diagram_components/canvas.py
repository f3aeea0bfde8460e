import html
from typing import Dict, List, Optional, Tuple

from rich.markup import escape

from ..errors import LayoutOverflowError

Cell = Optional[str]


class Canvas:

    def __init__(self, width: int, height: int):
        if width < 0 or height < 0:
            raise ValueError("Canvas dimensions must not be negative.")
        self.width = width
        self.height = height
        self.grid: List[List[Cell]] = [[None for _ in range(width)] for _ in range(height)]
        self.cell_widths = [[1 for _ in range(width)] for _ in range(height)]
        self.markup: Dict[Tuple[int, int], Dict[str, List[str]]] = {}

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
            self._clear_markup(x, y)
            return
        for i in range(width):
            xi = x + i
            if 0 <= xi < self.width:
                self.grid[y][xi] = None
                self.cell_widths[y][xi] = 1
                self._clear_markup(xi, y)

    def _check_bounds(self, x: int, y: int) -> None:
        if not (0 <= y < self.height and 0 <= x < self.width):
            raise LayoutOverflowError(
                f"Glyph at ({x}, {y}) falls outside the {self.width}x{self.height} canvas."
            )

    def set(self, x: int, y: int, char: str, width: int = 1) -> None:
        self._check_bounds(x, y)
        if width < 1:
            width = 1
        self._check_bounds(x + width - 1, y)

        self._clear_glyph_at(x, y)
        self._clear_markup(x, y)

        self.grid[y][x] = char
        self.cell_widths[y][x] = width
        for i in range(1, width):
            xi = x + i
            self._clear_glyph_at(xi, y)
            self.grid[y][xi] = None
            self.cell_widths[y][xi] = 0

    def get(self, x: int, y: int) -> Cell:
        if 0 <= y < self.height and 0 <= x < self.width:
            if self.cell_widths[y][x] == 0:
                return None
            return self.grid[y][x]
        return None

    def insert_markup(self, x: int, y: int, markup: str, *, position: str = "prefix") -> None:
        if not markup:
            return
        if position not in {"prefix", "suffix"}:
            position = "prefix"
        cell = self.markup.setdefault((x, y), {"prefix": [], "suffix": []})
        cell[position].append(markup)

    def row_text(self, y: int, include_markup: bool = False) -> str:
        parts: List[str] = []
        pending: List[str] = []

        def flush() -> None:
            if pending:
                text = "".join(pending)
                parts.append(escape(text) if include_markup else text)
                pending.clear()

        for x in range(self.width):
            if self.cell_widths[y][x] == 0:
                continue
            markup_cell = self.markup.get((x, y)) if include_markup else None
            if markup_cell:
                flush()
                parts.extend(markup_cell.get("prefix", []))
            pending.append(self.grid[y][x] or " ")
            if markup_cell:
                flush()
                parts.extend(markup_cell.get("suffix", []))
        flush()
        return "".join(parts)

    def render(self, include_markup: bool = False, line_separator: str = "\n") -> str:
        return line_separator.join(self.row_text(y, include_markup) for y in range(self.height))

    def to_html(self, element_id: str = "diagram") -> str:
        rows = "".join(html.escape(self.row_text(y)) + "\n" for y in range(self.height))
        return f'<pre id="{html.escape(element_id, quote=True)}">{rows}</pre>'

    def __str__(self) -> str:
        return self.render()
