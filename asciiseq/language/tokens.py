from dataclasses import dataclass
from enum import Enum


class TokenKind(Enum):

    WORD = "word"
    ARROW = "arrow"
    COLON = "colon"
    SEMICOLON = "semicolon"
    NEWLINE = "newline"
    SPACE = "space"
    EOF = "eof"


TERMINATORS = frozenset({TokenKind.SEMICOLON, TokenKind.NEWLINE, TokenKind.EOF})


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    text: str = ""

    @property
    def is_terminator(self) -> bool:
        return self.kind in TERMINATORS

    def is_word(self, value: str) -> bool:
        return self.kind is TokenKind.WORD and self.text == value

    def __str__(self) -> str:
        if self.kind is TokenKind.WORD:
            return repr(self.text)
        if self.kind is TokenKind.EOF:
            return "end of input"
        return self.kind.value
