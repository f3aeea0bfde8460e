import pytest

from asciiseq.errors import DiagramError, DiagramSyntaxError, UnsupportedConstructError
from asciiseq.language import (
    MessageStatement,
    NoteStatement,
    ObjectDeclaration,
    Parser,
    Side,
    Span,
    SpaceStatement,
    parse,
    tokenize,
)


def statements(source, **kwargs):
    return list(parse(source, **kwargs).statements)


def test_empty_program():
    program = parse("")

    assert program.statements == ()
    assert program.span == Span(0, 2)


def test_object_declaration():
    (decl,) = statements("object A B  C;")

    assert isinstance(decl, ObjectDeclaration)
    assert decl.names == ("A", "B", "C")


def test_object_declaration_requires_a_name():
    with pytest.raises(DiagramSyntaxError):
        parse("object ;")


def test_object_declaration_rejects_keywords():
    with pytest.raises(DiagramSyntaxError) as excinfo:
        parse("object A space")

    assert not isinstance(excinfo.value, UnsupportedConstructError)


def test_message_without_text():
    (message,) = statements("A->B")

    assert message == MessageStatement("A", "B", "", Span(0, 4))
    assert not message.is_self_message


def test_message_text_skips_leading_and_trailing_spaces():
    (message,) = statements("A -> B :   hello   world  ")

    assert message.sender == "A"
    assert message.receiver == "B"
    assert message.text == "hello   world"


def test_message_text_keeps_punctuation_verbatim():
    (message,) = statements("A->B: x: y -> z")

    assert message.text == "x: y -> z"


def test_message_text_keeps_line_break_marker():
    (message,) = statements("A->B: first\\nsecond")

    assert message.text == "first\\nsecond"


def test_self_message():
    (message,) = statements("A->A: ping")

    assert message.is_self_message


def test_statement_separators_and_spans():
    first, second = statements("A->B; C->D")

    assert first.span == Span(0, 4)
    assert second.span == Span(5, 4)
    assert (second.sender, second.receiver) == ("C", "D")


def test_loose_punctuation_between_statements_is_skipped():
    result = statements("A->B;;\n\n : ; C->D\n")

    assert [(m.sender, m.receiver) for m in result] == [("A", "B"), ("C", "D")]


def test_statement_list_spans_whole_token_stream():
    tokens = tokenize("A->B: hi\n;; : \n")
    program = Parser(tokens).parse()

    assert len(program.statements) == 1
    assert program.body.span == Span(0, len(tokens))
    assert program.span.end == len(tokens)


@pytest.mark.parametrize("source", ["note left of A: hi", "left of A: hi", "  note   left  of A :hi"])
def test_left_note(source):
    (note,) = statements(source)

    assert note == NoteStatement("A", Side.LEFT, "hi", note.span)


def test_right_note():
    (note,) = statements("right of Server: cached\\nfor 5 min")

    assert note.side is Side.RIGHT
    assert note.participant == "Server"
    assert note.text == "cached\\nfor 5 min"


def test_side_word_without_of_is_a_message_sender():
    (message,) = statements("left->right: swap")

    assert message == MessageStatement("left", "right", "swap", message.span)


def test_note_requires_colon():
    with pytest.raises(DiagramSyntaxError):
        parse("right of A hi")


def test_note_requires_side():
    with pytest.raises(DiagramSyntaxError):
        parse("note above A: hi")


def test_space_statement():
    (gap,) = statements("space 3")

    assert gap == SpaceStatement(3, gap.span)


@pytest.mark.parametrize("source", ["space", "space x", "space -2"])
def test_space_statement_requires_integer(source):
    with pytest.raises(DiagramSyntaxError):
        parse(source)


@pytest.mark.parametrize("keyword", ["alt", "opt", "loop"])
def test_block_keywords_are_unsupported(keyword):
    with pytest.raises(UnsupportedConstructError) as excinfo:
        parse(f"A->B\n{keyword} retry\nB->A")

    assert excinfo.value.keyword == keyword
    assert isinstance(excinfo.value, DiagramError)


def test_missing_receiver_is_a_syntax_error():
    with pytest.raises(DiagramSyntaxError) as excinfo:
        parse("A-> ;")

    assert excinfo.value.token.text == ";"


def test_keyword_cannot_be_participant():
    with pytest.raises(DiagramSyntaxError):
        parse("A->space: hi")


def test_unexpected_token_after_receiver():
    with pytest.raises(DiagramSyntaxError):
        parse("A->B C")


def test_stray_character_is_not_an_identifier():
    with pytest.raises(DiagramSyntaxError):
        parse("# comment")


def test_comment_line_break_ends_statement():
    result = statements("A->B // first\nC->D")

    assert len(result) == 2


def test_legacy_comment_merges_lines():
    with pytest.raises(DiagramSyntaxError):
        parse("A->B // first\nC->D", comment_newlines=False)


def test_parser_requires_eof_token():
    with pytest.raises(ValueError):
        Parser(tokenize("A->B")[:-1])
