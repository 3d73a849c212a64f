from pathlib import Path

from . import app


@app.command()
def render(*, workdir: Path = Path()) -> None:
    """Assemble the deck in WORKDIR and render it to HTML.

    Args:
        workdir: Path to move into before running the command
    """
    from ..configuring.settings import Settings
    from ..pipelines import render as pipelines_render

    pipelines_render(Settings.from_yaml(workdir))
