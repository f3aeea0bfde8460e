import logging
from typing import Callable, Dict, List, Sequence, Tuple

from ..errors import DiagramSyntaxError, UnsupportedConstructError
from .ast import (
    MessageStatement,
    NoteStatement,
    ObjectDeclaration,
    Program,
    Side,
    Span,
    SpaceStatement,
    Statement,
    StatementList,
)
from .lexer import WORD_CHARS, tokenize
from .tokens import Token, TokenKind

logger = logging.getLogger(__name__)

KEYWORDS = frozenset({"alt", "opt", "loop", "note", "space"})
BLOCK_KEYWORDS = frozenset({"alt", "opt", "loop"})
SIDES = {"left": Side.LEFT, "right": Side.RIGHT}


def is_identifier(token: Token) -> bool:
    return (
        token.kind is TokenKind.WORD
        and token.text not in KEYWORDS
        and all(char in WORD_CHARS for char in token.text)
    )


class _Cursor:

    def __init__(self, tokens: Sequence[Token], offset: int):
        self.tokens = tokens
        self.start = offset
        self.position = offset

    def advance(self) -> Token:
        if self.position >= len(self.tokens):
            return self.tokens[-1]
        token = self.tokens[self.position]
        self.position += 1
        return token

    def next_significant(self) -> Token:
        while self.position < len(self.tokens) and self.tokens[self.position].kind is TokenKind.SPACE:
            self.position += 1
        return self.advance()

    def peek_significant(self) -> Token:
        position = self.position
        while position < len(self.tokens) and self.tokens[position].kind is TokenKind.SPACE:
            position += 1
        return self.tokens[min(position, len(self.tokens) - 1)]

    @property
    def consumed(self) -> int:
        return self.position - self.start

    def span(self) -> Span:
        return Span(self.start, self.consumed)


class Parser:

    def __init__(self, tokens: Sequence[Token]):
        if not tokens or tokens[-1].kind is not TokenKind.EOF:
            raise ValueError("Token stream must end with an end-of-input token.")
        self.tokens = list(tokens)

    def parse(self) -> Program:
        body = self._parse_statement_list(0)
        logger.debug("Parsed %d statements", len(body.statements))
        return Program(body, Span(0, len(self.tokens)))

    def _parse_statement_list(self, offset: int) -> StatementList:
        statements: List[Statement] = []
        index = offset
        while index < len(self.tokens):
            if self.tokens[index].kind is not TokenKind.WORD:
                index += 1
                continue
            statement, consumed = self._parse_statement(index)
            statements.append(statement)
            index += consumed
        return StatementList(tuple(statements), Span(offset, index - offset))

    def _parse_statement(self, offset: int) -> Tuple[Statement, int]:
        cursor = _Cursor(self.tokens, offset)
        handler = self._select_handler(cursor)
        statement = handler(self, cursor)
        return statement, cursor.consumed

    def _select_handler(self, cursor: _Cursor) -> Callable[["Parser", _Cursor], Statement]:
        leading = self.tokens[cursor.start].text
        if leading in SIDES:
            lookahead = _Cursor(self.tokens, cursor.start + 1)
            if lookahead.peek_significant().is_word("of"):
                return Parser._parse_note
        return self._HANDLERS.get(leading, Parser._parse_message)

    # statement handlers

    def _expect_identifier(self, cursor: _Cursor, what: str) -> str:
        token = cursor.next_significant()
        if not is_identifier(token):
            raise DiagramSyntaxError(f"Expected {what}, found {token}.", token)
        return token.text

    def _expect(self, cursor: _Cursor, kind: TokenKind, what: str) -> Token:
        token = cursor.next_significant()
        if token.kind is not kind:
            raise DiagramSyntaxError(f"Expected {what}, found {token}.", token)
        return token

    def _read_text(self, cursor: _Cursor) -> str:
        parts: List[str] = []
        while True:
            token = cursor.advance()
            if token.is_terminator:
                break
            if token.kind is TokenKind.SPACE and not parts:
                continue
            parts.append(token.text)
        return "".join(parts).rstrip()

    def _parse_object_declaration(self, cursor: _Cursor) -> ObjectDeclaration:
        cursor.next_significant()
        names: List[str] = []
        while True:
            token = cursor.next_significant()
            if token.is_terminator:
                break
            if not is_identifier(token):
                raise DiagramSyntaxError(f"Expected participant name, found {token}.", token)
            names.append(token.text)
        if not names:
            raise DiagramSyntaxError("Object declaration needs at least one participant name.")
        return ObjectDeclaration(tuple(names), cursor.span())

    def _parse_message(self, cursor: _Cursor) -> MessageStatement:
        sender = self._expect_identifier(cursor, "message sender")
        self._expect(cursor, TokenKind.ARROW, "'->'")
        receiver = self._expect_identifier(cursor, "message receiver")
        token = cursor.next_significant()
        if token.is_terminator:
            return MessageStatement(sender, receiver, "", cursor.span())
        if token.kind is not TokenKind.COLON:
            raise DiagramSyntaxError(f"Expected ':' or end of statement, found {token}.", token)
        text = self._read_text(cursor)
        return MessageStatement(sender, receiver, text, cursor.span())

    def _parse_note(self, cursor: _Cursor) -> NoteStatement:
        token = cursor.next_significant()
        if token.is_word("note"):
            token = cursor.next_significant()
        side = SIDES.get(token.text) if token.kind is TokenKind.WORD else None
        if side is None:
            raise DiagramSyntaxError(f"Expected 'left' or 'right', found {token}.", token)
        token = cursor.next_significant()
        if not token.is_word("of"):
            raise DiagramSyntaxError(f"Expected 'of', found {token}.", token)
        participant = self._expect_identifier(cursor, "participant name")
        self._expect(cursor, TokenKind.COLON, "':'")
        text = self._read_text(cursor)
        return NoteStatement(participant, side, text, cursor.span())

    def _parse_space(self, cursor: _Cursor) -> SpaceStatement:
        cursor.next_significant()
        token = cursor.next_significant()
        if token.kind is not TokenKind.WORD or not token.text.isdecimal():
            raise DiagramSyntaxError(f"Expected gap size, found {token}.", token)
        return SpaceStatement(int(token.text), cursor.span())

    def _reject_block(self, cursor: _Cursor) -> Statement:
        token = cursor.next_significant()
        raise UnsupportedConstructError(token.text, token)

    _HANDLERS: Dict[str, Callable[["Parser", _Cursor], Statement]] = {
        "object": _parse_object_declaration,
        "note": _parse_note,
        "space": _parse_space,
        "alt": _reject_block,
        "opt": _reject_block,
        "loop": _reject_block,
    }


def parse(source: str, *, comment_newlines: bool = True) -> Program:
    return Parser(tokenize(source, comment_newlines=comment_newlines)).parse()
