from typing import Optional, Tuple

from ..language.ast import MessageStatement, NoteStatement, Side
from .canvas import Canvas
from .core import BoxChars
from .layout import HEADER_HEIGHT, Layout, Participant, StatementGeometry
from .measure import char_width, display_width, text_lines


class SequenceRenderer:

    def __init__(
        self,
        chars: Optional[BoxChars] = None,
        *,
        connector_style: Optional[str] = None,
        note_style: Optional[str] = None,
    ):
        self.chars = chars or BoxChars()
        self.connector_style = connector_style
        self.note_style = note_style

    def render(self, layout: Layout) -> Canvas:
        canvas = Canvas(width=layout.width, height=layout.height)
        for participant in layout.participants:
            self._draw_box(canvas, participant, layout.min_x)
        for participant in layout.participants:
            self._draw_lifeline(canvas, participant, layout.min_x)
        for geometry in layout.statements:
            statement = geometry.statement
            if isinstance(statement, MessageStatement):
                if statement.is_self_message:
                    self._draw_self_message(canvas, geometry, layout.min_x)
                else:
                    self._draw_message(canvas, geometry, layout.min_x)
            elif isinstance(statement, NoteStatement):
                self._draw_note(canvas, geometry, layout.min_x)
        return canvas

    def _style_tokens(self, style: Optional[str]) -> Optional[Tuple[str, str]]:
        if not style:
            return None
        tag = style.strip()
        if not tag:
            return None
        open_tag = tag if tag.startswith("[") else f"[{tag}]"
        close_tag = "[/]"
        return open_tag, close_tag

    def _apply_style(self, canvas: Canvas, x: int, y: int, style: Optional[str]) -> None:
        tokens = self._style_tokens(style)
        if not tokens:
            return
        open_tag, close_tag = tokens
        canvas.insert_markup(x, y, open_tag, position="prefix")
        canvas.insert_markup(x, y, close_tag, position="suffix")

    def _set_styled(self, canvas: Canvas, x: int, y: int, char: str, style: Optional[str]) -> None:
        canvas.set(x, y, char)
        if style:
            self._apply_style(canvas, x, y, style)

    def _draw_text(self, canvas: Canvas, x: int, y: int, text: str) -> None:
        cursor = x
        for char in text:
            width = char_width(char)
            canvas.set(cursor, y, char, width=width)
            cursor += width

    def _draw_box(self, canvas: Canvas, participant: Participant, min_x: int) -> None:
        x = participant.x1 - min_x
        w = participant.box_width

        canvas.set(x, 0, self.chars.top_left)
        canvas.set(x + w - 1, 0, self.chars.top_right)
        canvas.set(x, 2, self.chars.bottom_left)
        canvas.set(x + w - 1, 2, self.chars.bottom_right)
        for i in range(1, w - 1):
            canvas.set(x + i, 0, self.chars.horizontal)
            canvas.set(x + i, 2, self.chars.horizontal)

        canvas.set(x, 1, self.chars.vertical)
        canvas.set(x + w - 1, 1, self.chars.vertical)
        self._draw_text(canvas, x + 2, 1, participant.name)

    def _draw_lifeline(self, canvas: Canvas, participant: Participant, min_x: int) -> None:
        x = participant.lifeline - min_x
        for y in range(HEADER_HEIGHT, canvas.height):
            self._set_styled(canvas, x, y, self.chars.vertical, self.connector_style)

    def _draw_message(self, canvas: Canvas, geometry: StatementGeometry, min_x: int) -> None:
        x = geometry.x - min_x
        length = geometry.length
        lines = text_lines(geometry.statement.text)
        arrow_y = geometry.y1 + 1 + len(lines)
        style = self.connector_style

        if geometry.left_to_right:
            for idx, line in enumerate(lines):
                self._draw_text(canvas, x + 1, geometry.y1 + 1 + idx, line)
            for i in range(length - 1):
                self._set_styled(canvas, x + i, arrow_y, self.chars.horizontal, style)
            self._set_styled(canvas, x + length - 1, arrow_y, self.chars.arrow_right, style)
        else:
            for idx, line in enumerate(lines):
                start = x + length - 1 - display_width(line)
                self._draw_text(canvas, start, geometry.y1 + 1 + idx, line)
            self._set_styled(canvas, x, arrow_y, self.chars.arrow_left, style)
            for i in range(1, length):
                self._set_styled(canvas, x + i, arrow_y, self.chars.horizontal, style)

    def _draw_self_message(self, canvas: Canvas, geometry: StatementGeometry, min_x: int) -> None:
        x = geometry.x - min_x
        width = geometry.length
        lines = text_lines(geometry.statement.text)
        base_y = geometry.y1 + 1 + len(lines)
        style = self.connector_style

        for idx, line in enumerate(lines):
            self._draw_text(canvas, x + 1, geometry.y1 + 1 + idx, line)

        for i in range(width + 1):
            self._set_styled(canvas, x + i, base_y, self.chars.horizontal, style)
        self._set_styled(canvas, x + width, base_y + 1, self.chars.vertical, style)
        self._set_styled(canvas, x, base_y + 2, self.chars.arrow_left, style)
        for i in range(1, width + 1):
            self._set_styled(canvas, x + i, base_y + 2, self.chars.horizontal, style)

    def _draw_note(self, canvas: Canvas, geometry: StatementGeometry, min_x: int) -> None:
        statement = geometry.statement
        x = geometry.x - min_x
        width = geometry.length
        lines = text_lines(statement.text)
        top = geometry.y1
        bottom = geometry.y1 + len(lines) + 1
        style = self.note_style

        if statement.side is Side.LEFT:
            frame_x = x
            self._set_styled(canvas, x + width, top + 1, self.chars.horizontal, style)
        else:
            frame_x = x + 1
            self._set_styled(canvas, x, top + 1, self.chars.horizontal, style)
        right = frame_x + width - 1

        self._set_styled(canvas, frame_x, top, self.chars.note_top_left, style)
        self._set_styled(canvas, right, top, self.chars.note_fold, style)
        self._set_styled(canvas, frame_x, bottom, self.chars.note_bottom_left, style)
        self._set_styled(canvas, right, bottom, self.chars.note_bottom_right, style)
        for i in range(frame_x + 1, right):
            self._set_styled(canvas, i, top, self.chars.horizontal, style)
            self._set_styled(canvas, i, bottom, self.chars.horizontal, style)
        for y in range(top + 1, bottom):
            self._set_styled(canvas, frame_x, y, self.chars.vertical, style)
            self._set_styled(canvas, right, y, self.chars.vertical, style)

        for idx, line in enumerate(lines):
            self._draw_text(canvas, frame_x + 2, top + 1 + idx, line)
