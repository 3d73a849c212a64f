"""Modules containing model classes for different parts of revealz.

The intent is that the classes defined in this package should not end up containing \
too much logic. Line slicing lives in [`slicing`][revealz.slicing] and the \
resolution of file references in [`assembling`][revealz.assembling].

- [`content`][revealz.models.content] contains the closed set of contents a slide \
    can hold
- [`definitions`][revealz.models.definitions] contains models that represent decks \
    definitions, loadable from yaml files
- [`scalars`][revealz.models.scalars] contains models for non-container types
- [`slides`][revealz.models.slides] contains fragments, slides and assembled decks, \
    which are fed to the rendering part of revealz
"""

from .content import (
    Code,
    CodeFromFile,
    Content,
    ContentKind,
    Paragraph,
    RawBlock,
    SourceFile,
    SubTitle,
    Title,
    from_payload,
    to_payload,
)
from .scalars import FileName, LineSlice
from .slides import (
    Deck,
    Fragment,
    SingleSlide,
    Slide,
    Transition,
    VerticalSlide,
    content_slide,
    fragment,
    fragments_slide,
    vertical_slide,
)

__all__ = [
    "Code",
    "CodeFromFile",
    "Content",
    "ContentKind",
    "Deck",
    "FileName",
    "Fragment",
    "LineSlice",
    "Paragraph",
    "RawBlock",
    "SingleSlide",
    "Slide",
    "SourceFile",
    "SubTitle",
    "Title",
    "Transition",
    "VerticalSlide",
    "content_slide",
    "fragment",
    "fragments_slide",
    "from_payload",
    "to_payload",
    "vertical_slide",
]
