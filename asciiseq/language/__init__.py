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
from .lexer import Lexer, tokenize
from .parser import KEYWORDS, Parser, parse
from .tokens import Token, TokenKind

__all__ = [
    "Lexer",
    "tokenize",
    "Token",
    "TokenKind",
    "Parser",
    "parse",
    "KEYWORDS",
    "Program",
    "StatementList",
    "Statement",
    "ObjectDeclaration",
    "MessageStatement",
    "NoteStatement",
    "SpaceStatement",
    "Side",
    "Span",
]
