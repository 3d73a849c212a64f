from logging import getLogger
from pathlib import Path

from .assembling import assemble
from .configuring.settings import Settings
from .exceptions import SettingsError
from .loading import load_source_files
from .models.definitions import DeckDefinition
from .models.slides import Deck
from .rendering import Renderer

_logger = getLogger(__name__)


def load_deck(settings: Settings) -> Deck:
    """Assemble the deck defined by the settings.

    Args:
        settings: Settings of the deck, giving the paths of its definition and of \
            its code directory.

    Raises:
        SettingsError: Raised if the deck definition cannot be found.

    Returns:
        The assembled deck.
    """
    definition_path = settings.paths.deck_definition
    if not definition_path.is_file():
        msg = (
            f"could not find the deck definition {definition_path}. Are you in a "
            "deck directory?"
        )
        raise SettingsError(msg)
    definition = DeckDefinition.from_yaml(definition_path)
    files = load_source_files(settings.paths.code_dir, settings.code_suffixes)
    _logger.info(
        "Assembling deck %s with %d source file(s)", definition.name, len(files)
    )
    return assemble(definition, files)


def render(settings: Settings) -> Path:
    """Assemble the deck defined by the settings and render it.

    Returns:
        Path of the rendered page.
    """
    deck = load_deck(settings)
    output_file = settings.paths.output_file
    Renderer(settings.paths.template).render_to_path(
        deck,
        output_file,
        title=settings.title,
        theme=settings.theme,
        reveal_version=settings.reveal_version,
    )
    return output_file
