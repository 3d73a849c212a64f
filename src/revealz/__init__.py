from typing import Any

app_name = "revealz"
__version__ = "0.1.0"


def __getattr__(name: str) -> Any:
    """Lazy-load attributes of the revealz package.

    The entry point (the main function of revealz.cli) configures logging before \
    anything else is imported. Exposing the attributes with top-level imports would \
    load the whole package as soon as revealz.cli is imported, hence this indirection.

    Args:
        name: Name of the attribute to load.

    Raises:
        AttributeError: Raised if the name doesn't match a lazy-loadable attribute.

    Returns:
        Lazy-loaded attribute.
    """
    match name:
        case "assemble":
            from .assembling import assemble

            return assemble
        case "Assembler":
            from .assembling import Assembler

            return Assembler
        case "DeckDefinition":
            from .models.definitions import DeckDefinition

            return DeckDefinition
        case _:
            msg = f"cannot find the attribute {name} in module {__name__}"
            raise AttributeError(msg)
