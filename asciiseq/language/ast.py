from dataclasses import dataclass
from enum import Enum
from typing import Tuple, Union


class Side(Enum):

    LEFT = "left"
    RIGHT = "right"


@dataclass(frozen=True)
class Span:
    start: int = 0
    length: int = 0

    @property
    def end(self) -> int:
        return self.start + self.length


@dataclass(frozen=True)
class ObjectDeclaration:
    names: Tuple[str, ...]
    span: Span = Span()


@dataclass(frozen=True)
class MessageStatement:
    sender: str
    receiver: str
    text: str = ""
    span: Span = Span()

    @property
    def is_self_message(self) -> bool:
        return self.sender == self.receiver


@dataclass(frozen=True)
class NoteStatement:
    participant: str
    side: Side
    text: str = ""
    span: Span = Span()


@dataclass(frozen=True)
class SpaceStatement:
    gap: int
    span: Span = Span()


Statement = Union[ObjectDeclaration, MessageStatement, NoteStatement, SpaceStatement]


@dataclass(frozen=True)
class StatementList:
    statements: Tuple[Statement, ...] = ()
    span: Span = Span()

    @property
    def children(self) -> Tuple[Statement, ...]:
        return self.statements


@dataclass(frozen=True)
class Program:
    body: StatementList = StatementList()
    span: Span = Span()

    @property
    def children(self) -> Tuple[StatementList, ...]:
        return (self.body,)

    @property
    def statements(self) -> Tuple[Statement, ...]:
        return self.body.statements
