import logging

import pytest

from asciiseq import (
    BoxChars,
    Canvas,
    ConfigurationError,
    DiagramSyntaxError,
    LayoutOverflowError,
    SequenceDiagram,
    UnsupportedConstructError,
    sequence_diagram,
)

CHECKOUT = """
// checkout flow
object Browser Shop Bank
Browser->Shop: POST /order
Shop->Bank: charge\\ncard
right of Bank: takes a while
Bank->Shop: ok
Shop->Shop: persist
space 1
Shop->Browser: 201 Created
"""


def test_compile_returns_grid():
    canvas = sequence_diagram("A->B: hi")

    assert isinstance(canvas, Canvas)
    assert (canvas.width, canvas.height) == (12, 7)


def test_compile_is_deterministic():
    first = sequence_diagram(CHECKOUT)
    second = sequence_diagram(CHECKOUT)

    assert first.grid == second.grid
    assert first.render() == second.render()


@pytest.mark.parametrize("source", ["A-> ;", "loop A", "object", "left of : x"])
def test_compile_returns_none_for_invalid_source(source, caplog):
    with caplog.at_level(logging.WARNING, logger="asciiseq.compiler"):
        assert sequence_diagram(source) is None

    assert "No diagram produced" in caplog.text


def test_diagram_raises_typed_errors():
    with pytest.raises(UnsupportedConstructError):
        SequenceDiagram("opt\nA->B").render()
    with pytest.raises(DiagramSyntaxError):
        SequenceDiagram("A->").render()


def test_rows_are_rectangular():
    diagram = SequenceDiagram(CHECKOUT)
    layout = diagram.layout()
    lines = diagram.render().split("\n")

    assert len(lines) == layout.height
    assert {len(line) for line in lines} == {layout.width}
    assert [p.name for p in layout.participants] == ["Browser", "Shop", "Bank"]


def test_str_renders():
    diagram = SequenceDiagram("object A")

    assert str(diagram) == "+---+\n| A |\n+---+\n  |  "
    assert repr(diagram) == "SequenceDiagram('object A')"


def test_html_rendering():
    html = SequenceDiagram("object A").render_html()

    assert html == '<pre id="diagram">+---+\n| A |\n+---+\n  |  \n</pre>'


def test_paginated_rendering():
    pages = SequenceDiagram("object A").render_paginated(page_height=3, overlap=1)

    assert pages == ["+---+\n| A |\n+---+", "+---+\n  |  "]


def test_box_style_option():
    assert SequenceDiagram("object A", box_style="square").render().startswith("┌───┐")

    chars = BoxChars(top_left="*", top_right="*")
    assert SequenceDiagram("object A", box_style=chars).render().startswith("*---*")


def test_legacy_comment_option():
    source = "A->B // first\nC->D"

    assert len(SequenceDiagram(source).layout().participants) == 4
    with pytest.raises(DiagramSyntaxError):
        SequenceDiagram(source, comment_newlines=False).layout()


def test_size_limits():
    assert SequenceDiagram("object A", max_width=5, max_height=4).render()

    with pytest.raises(LayoutOverflowError):
        SequenceDiagram("object A", max_height=3).render()
    with pytest.raises(LayoutOverflowError):
        SequenceDiagram("A->B: hi", max_width=11).render()


@pytest.mark.parametrize("source", ["space 99999999999", "A->B: hi\nspace 99999999999"])
def test_oversized_canvas_is_rejected_before_allocation(source, caplog):
    with pytest.raises(LayoutOverflowError):
        SequenceDiagram(source).canvas()

    with caplog.at_level(logging.WARNING, logger="asciiseq.compiler"):
        assert sequence_diagram(source) is None

    assert "No diagram produced" in caplog.text


@pytest.mark.parametrize(
    "kwargs",
    [
        {"box_style": "fancy"},
        {"box_style": 3},
        {"max_width": "10"},
        {"max_width": True},
        {"max_height": 0},
        {"connector_style": 1},
        {"comment_newlines": "yes"},
    ],
)
def test_invalid_configuration(kwargs):
    with pytest.raises(ConfigurationError):
        SequenceDiagram("object A", **kwargs)


def test_source_must_be_text():
    with pytest.raises(ConfigurationError):
        SequenceDiagram(None)
