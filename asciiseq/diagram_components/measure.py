from typing import List

from wcwidth import wcwidth

LINE_BREAK = "\\n"

NOTE_MARGIN = 4
MESSAGE_MARGIN = 2


def char_width(char: str) -> int:
    return max(wcwidth(char), 1)


def display_width(text: str) -> int:
    return sum(char_width(char) for char in text)


def text_lines(text: str) -> List[str]:
    return [line.strip() for line in text.split(LINE_BREAK)]


def text_width(text: str) -> int:
    return max(display_width(line) for line in text_lines(text))


def line_count(text: str) -> int:
    return len(text.split(LINE_BREAK))


def note_width(text: str) -> int:
    return text_width(text) + NOTE_MARGIN


def message_width(text: str) -> int:
    return text_width(text) + MESSAGE_MARGIN


def box_width(name: str) -> int:
    # odd widths keep a single centre column for the lifeline
    length = display_width(name)
    return length + 4 if length % 2 else length + 5
