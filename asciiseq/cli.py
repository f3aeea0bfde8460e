import argparse
import logging
import sys
from typing import List, Optional

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from .diagram_components import SequenceDiagram
from .errors import ConfigurationError, DiagramSyntaxError, LayoutOverflowError, UnsupportedConstructError


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="asciiseq",
        description="Render a text sequence diagram as ASCII art.",
    )
    parser.add_argument("file", nargs="?", help="diagram source file (reads stdin when omitted)")
    parser.add_argument("--html", action="store_true", help="emit a <pre> HTML fragment")
    parser.add_argument("--box-style", default="ascii", help="ascii, square or rounded")
    parser.add_argument("--connector-style", default=None, help="rich style for arrows and lifelines")
    parser.add_argument("--note-style", default=None, help="rich style for note frames")
    parser.add_argument(
        "--legacy-comments",
        action="store_true",
        help="let a // comment swallow the line break that ends it",
    )
    parser.add_argument("--markup", action="store_true", help="print with rich styles applied")
    parser.add_argument("-v", "--verbose", action="store_true", help="log compiler stages")
    return parser


def _read_source(path: Optional[str]) -> str:
    if path is None or path == "-":
        return sys.stdin.read()
    with open(path, encoding="utf-8") as handle:
        return handle.read()


def main(argv: Optional[List[str]] = None, console: Optional[Console] = None) -> int:
    args = build_parser().parse_args(argv)
    console = console or Console()
    error_console = Console(stderr=True) if console.file is sys.stdout else console

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=error_console, show_path=False)],
        force=True,
    )

    try:
        source = _read_source(args.file)
    except OSError as exc:
        error_console.print(f"[bold red]Cannot read {escape(str(args.file))}:[/bold red] {escape(str(exc))}")
        return 2

    try:
        diagram = SequenceDiagram(
            source,
            box_style=args.box_style,
            connector_style=args.connector_style,
            note_style=args.note_style,
            comment_newlines=not args.legacy_comments,
        )
        if args.html:
            console.print(diagram.render_html(), markup=False, highlight=False, soft_wrap=True)
        elif args.markup:
            console.print(diagram.render(include_markup=True), highlight=False, soft_wrap=True)
        else:
            console.print(diagram.render(), markup=False, highlight=False, soft_wrap=True)
    except UnsupportedConstructError as exc:
        error_console.print(f"[bold red]Unsupported construct:[/bold red] {escape(str(exc))}")
        return 1
    except DiagramSyntaxError as exc:
        error_console.print(f"[bold red]Syntax error:[/bold red] {escape(str(exc))}")
        return 1
    except (ConfigurationError, LayoutOverflowError) as exc:
        error_console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}")
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
