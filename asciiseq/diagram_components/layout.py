import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Tuple, Union

from ..language.ast import (
    MessageStatement,
    NoteStatement,
    ObjectDeclaration,
    Program,
    Side,
    SpaceStatement,
    Statement,
    StatementList,
)
from .measure import box_width, line_count, message_width, note_width, text_width

logger = logging.getLogger(__name__)

HEADER_HEIGHT = 3
TRAILER_HEIGHT = 1

MESSAGE_PADDING = 2
SELF_MESSAGE_PADDING = 4
NOTE_PADDING = 2


@dataclass(frozen=True)
class Participant:
    name: str
    index: int
    x1: int
    x2: int
    lifeline: int
    span_x1: int
    span_x2: int
    notes: Tuple[NoteStatement, ...] = ()
    messages: Tuple[MessageStatement, ...] = ()

    @property
    def box_width(self) -> int:
        return self.x2 - self.x1


@dataclass(frozen=True)
class StatementGeometry:
    statement: Statement
    y1: int
    y2: int
    x: Optional[int] = None
    length: int = 0
    left_to_right: bool = True

    @property
    def height(self) -> int:
        return self.y2 - self.y1


@dataclass(frozen=True)
class Layout:
    participants: Tuple[Participant, ...]
    statements: Tuple[StatementGeometry, ...]
    min_x: int
    max_x: int
    height: int
    by_name: Mapping[str, Participant] = field(
        default_factory=lambda: MappingProxyType({}), compare=False, repr=False
    )

    @property
    def width(self) -> int:
        return self.max_x - self.min_x

    def participant(self, name: str) -> Participant:
        return self.by_name[name]


@dataclass
class _Entry:
    name: str
    index: int
    notes: List[NoteStatement] = field(default_factory=list)
    messages: List[MessageStatement] = field(default_factory=list)


@dataclass
class LayoutContext:
    entries: Dict[str, _Entry] = field(default_factory=dict)
    order: List[str] = field(default_factory=list)
    statements: List[Statement] = field(default_factory=list)
    placed: Dict[str, Participant] = field(default_factory=dict)
    y_offset: int = HEADER_HEIGHT
    min_x: int = 0
    max_x: int = 0

    def register(self, name: str) -> _Entry:
        entry = self.entries.get(name)
        if entry is None:
            entry = _Entry(name, len(self.order))
            self.entries[name] = entry
            self.order.append(name)
        return entry

    def index_of(self, name: str) -> int:
        assert name in self.entries, f"participant {name!r} was never registered"
        return self.entries[name].index

    def endpoints(self, message: MessageStatement) -> Tuple[str, str]:
        if self.index_of(message.sender) <= self.index_of(message.receiver):
            return message.sender, message.receiver
        return message.receiver, message.sender


Node = Union[Program, StatementList, Statement]


def statement_height(statement: Statement) -> int:
    if isinstance(statement, ObjectDeclaration):
        return 0
    if isinstance(statement, MessageStatement):
        padding = SELF_MESSAGE_PADDING if statement.is_self_message else MESSAGE_PADDING
        return padding + line_count(statement.text)
    if isinstance(statement, NoteStatement):
        return NOTE_PADDING + line_count(statement.text)
    if isinstance(statement, SpaceStatement):
        return statement.gap
    raise TypeError(f"Unknown statement type: {type(statement).__name__}")


def _collect(node: Node, ctx: LayoutContext) -> None:
    if isinstance(node, (Program, StatementList)):
        for child in node.children:
            _collect(child, ctx)
        return

    ctx.statements.append(node)
    if isinstance(node, ObjectDeclaration):
        for name in node.names:
            ctx.register(name)
    elif isinstance(node, MessageStatement):
        ctx.register(node.sender)
        ctx.register(node.receiver)
        left, _ = ctx.endpoints(node)
        ctx.entries[left].messages.append(node)
    elif isinstance(node, NoteStatement):
        ctx.register(node.participant).notes.append(node)


def _left_edge(entry: _Entry, half_width: int, ctx: LayoutContext) -> int:
    previous = ctx.placed[ctx.order[entry.index - 1]] if entry.index > 0 else None
    x1 = previous.x2 + 1 if previous else 0
    previous_lifeline = previous.lifeline if previous else -1

    for note in entry.notes:
        if note.side is Side.LEFT:
            x1 = max(x1, previous_lifeline + 1 + note_width(note.text) + 1 - half_width)

    if previous:
        for note in previous.notes:
            if note.side is Side.RIGHT:
                x1 = max(x1, previous.lifeline + 1 + note_width(note.text))
        for message in previous.messages:
            if message.is_self_message:
                x1 = max(x1, previous.lifeline + 1 + message_width(message.text))

    for name in ctx.order[: entry.index]:
        earlier = ctx.placed[name]
        for message in earlier.messages:
            if not message.is_self_message and ctx.endpoints(message)[1] == entry.name:
                x1 = max(x1, earlier.lifeline + 1 + message_width(message.text))

    return x1


def _place_participants(ctx: LayoutContext) -> None:
    for name in ctx.order:
        entry = ctx.entries[name]
        width = box_width(name)
        half_width = (width - 1) // 2

        x1 = _left_edge(entry, half_width, ctx)
        x2 = x1 + width
        lifeline = x1 + half_width

        span_x2 = x2
        for note in entry.notes:
            if note.side is Side.RIGHT:
                span_x2 = max(span_x2, lifeline + 2 + note_width(note.text))
        for message in entry.messages:
            if message.is_self_message:
                span_x2 = max(span_x2, lifeline + message_width(message.text))

        ctx.placed[name] = Participant(
            name=name,
            index=entry.index,
            x1=x1,
            x2=x2,
            lifeline=lifeline,
            span_x1=x1,
            span_x2=span_x2,
            notes=tuple(entry.notes),
            messages=tuple(entry.messages),
        )
        ctx.min_x = min(ctx.min_x, x1)
        ctx.max_x = max(ctx.max_x, span_x2)


def _place_statement(statement: Statement, ctx: LayoutContext) -> StatementGeometry:
    y1 = ctx.y_offset
    y2 = y1 + statement_height(statement)
    ctx.y_offset = y2

    if isinstance(statement, MessageStatement):
        left_name, right_name = ctx.endpoints(statement)
        left = ctx.placed[left_name]
        if statement.is_self_message:
            return StatementGeometry(statement, y1, y2, x=left.lifeline + 1, length=text_width(statement.text))
        right = ctx.placed[right_name]
        return StatementGeometry(
            statement,
            y1,
            y2,
            x=left.lifeline + 1,
            length=right.lifeline - left.lifeline - 1,
            left_to_right=statement.sender == left_name,
        )

    if isinstance(statement, NoteStatement):
        owner = ctx.placed[statement.participant]
        if statement.side is Side.RIGHT:
            x = owner.lifeline + 1
        else:
            x = owner.lifeline - 1 - note_width(statement.text)
        return StatementGeometry(statement, y1, y2, x=x, length=note_width(statement.text))

    return StatementGeometry(statement, y1, y2)


def compute_layout(program: Program) -> Layout:
    ctx = LayoutContext()
    _collect(program, ctx)
    _place_participants(ctx)
    geometries = tuple(_place_statement(statement, ctx) for statement in ctx.statements)

    participants = tuple(ctx.placed[name] for name in ctx.order)
    height = ctx.y_offset + TRAILER_HEIGHT
    layout = Layout(
        participants=participants,
        statements=geometries,
        min_x=ctx.min_x,
        max_x=ctx.max_x,
        height=height,
        by_name=MappingProxyType(dict(ctx.placed)),
    )
    logger.debug(
        "Laid out %d participants and %d statements on a %dx%d canvas",
        len(participants),
        len(geometries),
        layout.width,
        layout.height,
    )
    return layout
