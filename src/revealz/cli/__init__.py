from logging import INFO, basicConfig

from cyclopts import App
from rich.logging import RichHandler

app = App(help="Assemble and render reveal.js decks.")


def main() -> None:
    basicConfig(
        level=INFO,
        format="%(message)s",
        datefmt="%H:%M:%S",
        handlers=[RichHandler(rich_tracebacks=True, tracebacks_show_locals=False)],
    )
    from . import print_settings, render, tree  # noqa: F401

    app()
