from .core import BoxChars
from .canvas import Canvas
from .layout import Layout, Participant, StatementGeometry, compute_layout, statement_height
from .renderer import SequenceRenderer
from .diagram import SequenceDiagram

__all__ = [
    "BoxChars",
    "Canvas",
    "Layout",
    "Participant",
    "StatementGeometry",
    "compute_layout",
    "statement_height",
    "SequenceRenderer",
    "SequenceDiagram",
]
