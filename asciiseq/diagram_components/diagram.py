import shutil
from typing import List, Optional, Union

from ..errors import ConfigurationError, LayoutOverflowError
from ..language.ast import Program
from ..language.lexer import tokenize
from ..language.parser import Parser
from .canvas import Canvas
from .core import BoxChars
from .layout import Layout, compute_layout
from .renderer import SequenceRenderer

MAX_CANVAS_CELLS = 4_000_000


class SequenceDiagram:

    def __init__(
        self,
        source: str,
        *,
        box_style: Optional[Union[str, BoxChars]] = None,
        connector_style: Optional[str] = None,
        note_style: Optional[str] = None,
        comment_newlines: bool = True,
        max_width: Optional[int] = None,
        max_height: Optional[int] = None,
    ):
        if not isinstance(source, str):
            raise ConfigurationError("source must be a string.")

        for name, value in (("max_width", max_width), ("max_height", max_height)):
            if value is None:
                continue
            if isinstance(value, bool) or not isinstance(value, int):
                raise ConfigurationError(f"{name} must be an integer.")
            if value < 1:
                raise ConfigurationError(f"{name} must be positive when specified.")

        for name, value in (("connector_style", connector_style), ("note_style", note_style)):
            if value is not None and not isinstance(value, str):
                raise ConfigurationError(f"{name} must be a string when provided.")

        if not isinstance(comment_newlines, bool):
            raise ConfigurationError("comment_newlines must be a boolean value.")

        if isinstance(box_style, BoxChars):
            self.chars = box_style
        else:
            style_key = box_style or "ascii"
            if not isinstance(style_key, str):
                raise ConfigurationError("box_style must be a string or BoxChars instance.")
            try:
                self.chars = BoxChars.for_style(style_key)
            except ValueError as exc:
                raise ConfigurationError(str(exc)) from exc

        self.source = source
        self.connector_style = connector_style
        self.note_style = note_style
        self.comment_newlines = comment_newlines
        self.max_width = max_width
        self.max_height = max_height
        self._program: Optional[Program] = None
        self._layout: Optional[Layout] = None

    @property
    def program(self) -> Program:
        if self._program is None:
            tokens = tokenize(self.source, comment_newlines=self.comment_newlines)
            self._program = Parser(tokens).parse()
        return self._program

    def layout(self) -> Layout:
        if self._layout is None:
            layout = compute_layout(self.program)
            self._validate_bounds(layout)
            self._layout = layout
        return self._layout

    def _validate_bounds(self, layout: Layout) -> None:
        cells = max(layout.width, 1) * layout.height
        if cells > MAX_CANVAS_CELLS:
            raise LayoutOverflowError(
                f"Diagram needs {cells} cells, more than the {MAX_CANVAS_CELLS} a canvas may hold."
            )
        if self.max_width is not None and layout.width > self.max_width:
            raise LayoutOverflowError(
                f"Diagram width {layout.width} exceeds max_width {self.max_width}."
            )
        if self.max_height is not None and layout.height > self.max_height:
            raise LayoutOverflowError(
                f"Diagram height {layout.height} exceeds max_height {self.max_height}."
            )

    def canvas(self) -> Canvas:
        renderer = SequenceRenderer(
            self.chars,
            connector_style=self.connector_style,
            note_style=self.note_style,
        )
        return renderer.render(self.layout())

    def render(self, include_markup: bool = False) -> str:
        return self.canvas().render(include_markup=include_markup)

    def render_html(self) -> str:
        return self.canvas().to_html()

    def render_paginated(
        self,
        *,
        include_markup: bool = False,
        page_height: Optional[int] = None,
        overlap: int = 0,
    ) -> List[str]:
        text = self.render(include_markup=include_markup)
        lines = text.split("\n") if text else [""]

        if page_height is None or page_height <= 0:
            terminal_lines = shutil.get_terminal_size(fallback=(80, 24)).lines
            if terminal_lines <= 0:
                terminal_lines = 24
            page_height = max(1, terminal_lines - 2)

        if overlap < 0:
            overlap = 0
        if overlap >= page_height:
            overlap = page_height - 1

        step = max(1, page_height - overlap)

        pages: List[str] = []
        index = 0
        total_lines = len(lines)
        while index < total_lines:
            end = min(total_lines, index + page_height)
            pages.append("\n".join(lines[index:end]))
            if end == total_lines:
                break
            index += step

        return pages

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"SequenceDiagram({self.source!r})"
