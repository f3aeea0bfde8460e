import logging
import string
from typing import List

from .tokens import Token, TokenKind

logger = logging.getLogger(__name__)

WORD_CHARS = frozenset(string.ascii_letters + string.digits + "_")
WHITESPACE = frozenset(" \t")
LINE_TERMINATORS = frozenset("\r\n")

# Appended to every source so the last statement always has a terminator.
SOURCE_TERMINATOR = ";"


class Lexer:

    def __init__(self, source: str, *, comment_newlines: bool = True):
        self.source = source
        self.comment_newlines = comment_newlines

    def _skip_comment(self, text: str, start: int, tokens: List[Token]) -> int:
        i = start
        length = len(text)
        while i < length and text[i] not in LINE_TERMINATORS:
            i += 1
        if i < length:
            if self.comment_newlines:
                tokens.append(Token(TokenKind.NEWLINE, text[i]))
            i += 1
        return i

    def _scan(self, text: str, tokens: List[Token]) -> None:
        i = 0
        length = len(text)
        while i < length:
            char = text[i]
            if char in WORD_CHARS:
                end = i + 1
                while end < length and text[end] in WORD_CHARS:
                    end += 1
                tokens.append(Token(TokenKind.WORD, text[i:end]))
                i = end
                continue
            if char == "-":
                if text.startswith(">", i + 1):
                    tokens.append(Token(TokenKind.ARROW, "->"))
                    i += 2
                else:
                    tokens.append(Token(TokenKind.WORD, char))
                    i += 1
                continue
            if char == "/" and text.startswith("/", i + 1):
                i = self._skip_comment(text, i + 2, tokens)
                continue

            if char == ":":
                tokens.append(Token(TokenKind.COLON, char))
            elif char == ";":
                tokens.append(Token(TokenKind.SEMICOLON, char))
            elif char in LINE_TERMINATORS:
                tokens.append(Token(TokenKind.NEWLINE, char))
            elif char in WHITESPACE:
                tokens.append(Token(TokenKind.SPACE, char))
            else:
                tokens.append(Token(TokenKind.WORD, char))
            i += 1

    def tokenize(self) -> List[Token]:
        tokens: List[Token] = []
        self._scan(self.source, tokens)
        self._scan(SOURCE_TERMINATOR, tokens)
        tokens.append(Token(TokenKind.EOF))
        logger.debug("Lexed %d characters into %d tokens", len(self.source), len(tokens))
        return tokens


def tokenize(source: str, *, comment_newlines: bool = True) -> List[Token]:
    return Lexer(source, comment_newlines=comment_newlines).tokenize()
