from .compiler import *
from .errors import *

__version__ = "0.1.0"
__all__ = [
    "SequenceDiagram",
    "BoxChars",
    "Canvas",
    "Layout",
    "compute_layout",
    "parse",
    "tokenize",
    "sequence_diagram",
    "DiagramError",
    "ConfigurationError",
    "LayoutOverflowError",
    "LexicalAnomaly",
    "DiagramSyntaxError",
    "UnsupportedConstructError",
]
