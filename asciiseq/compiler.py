import logging
from typing import Optional

from .diagram_components import BoxChars, Canvas, Layout, SequenceDiagram, compute_layout
from .errors import DiagramSyntaxError, LayoutOverflowError
from .language import parse, tokenize

logger = logging.getLogger(__name__)

__all__ = [
    "SequenceDiagram",
    "BoxChars",
    "Canvas",
    "Layout",
    "compute_layout",
    "parse",
    "tokenize",
    "sequence_diagram",
]


def sequence_diagram(source: str, **options) -> Optional[Canvas]:
    try:
        return SequenceDiagram(source, **options).canvas()
    except (DiagramSyntaxError, LayoutOverflowError) as exc:
        logger.warning("No diagram produced: %s", exc)
        return None
