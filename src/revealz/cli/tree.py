from pathlib import Path

from . import app


@app.command()
def tree(*, only_errors: bool = False, workdir: Path = Path()) -> None:
    """Show the WORKDIR's deck tree.

    Args:
        only_errors: Only show the slides referencing missing files
        workdir: Path to move into before running the command
    """
    from rich import print as rich_print

    from ..configuring.settings import Settings
    from ..pipelines import load_deck
    from ..processing.rich_tree import RichTreeProcessor

    deck = load_deck(Settings.from_yaml(workdir))
    deck_tree = RichTreeProcessor(only_errors=only_errors).process(deck)
    if deck_tree is None:
        rich_print("[green]All file references are resolved[/]")
    else:
        rich_print(deck_tree)
