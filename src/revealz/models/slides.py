"""Model classes for fragments, slides and assembled decks.

Slides are built with the functions of this module rather than with the class \
constructors: [`content_slide`][revealz.models.slides.content_slide], \
[`fragments_slide`][revealz.models.slides.fragments_slide] and \
[`vertical_slide`][revealz.models.slides.vertical_slide] copy the sequences they are \
given into tuples, so that every value stays immutable once built. Nothing here \
reorders anything: reveal order is declaration order.
"""

from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum

from .content import Content, Title
from .scalars import FileName


class Transition(Enum):
    """Closed set of fragment reveal styles understood by the renderer."""

    DEFAULT = ""
    FADE_OUT = "fade-out"
    FADE_UP = "fade-up"
    FADE_DOWN = "fade-down"
    FADE_LEFT = "fade-left"
    FADE_RIGHT = "fade-right"
    FADE_IN_THEN_OUT = "fade-in-then-out"
    CURRENT_VISIBLE = "current-visible"
    FADE_IN_THEN_SEMI_OUT = "fade-in-then-semi-out"
    GROW = "grow"
    SEMI_FADE_OUT = "semi-fade-out"
    SHRINK = "shrink"
    STRIKE = "strike"
    HIGHLIGHT_RED = "highlight-red"
    HIGHLIGHT_GREEN = "highlight-green"
    HIGHLIGHT_BLUE = "highlight-blue"
    HIGHLIGHT_CURRENT_RED = "highlight-current-red"
    HIGHLIGHT_CURRENT_GREEN = "highlight-current-green"
    HIGHLIGHT_CURRENT_BLUE = "highlight-current-blue"


@dataclass(frozen=True)
class Fragment:
    """Content revealed in one step of a slide."""

    content: Content
    transition: Transition = Transition.DEFAULT


@dataclass(frozen=True)
class SingleSlide:
    """Slide with an optional main content and optional fragments.

    A slide with neither is legal but renders empty.
    """

    content: Content | None = None
    """Content displayed as soon as the slide is shown."""

    fragments: tuple[Fragment, ...] | None = None
    """Fragments revealed one after the other, in order."""


@dataclass(frozen=True)
class VerticalSlide:
    """Stack of slides navigated vertically at one position of the deck."""

    slides: tuple[SingleSlide, ...]


Slide = SingleSlide | VerticalSlide
"""Unit of composition of a deck."""


@dataclass(frozen=True)
class Deck:
    """Result of an assembly, ready to be rendered."""

    name: str
    """Name of the deck. Used as the title of the rendered page."""

    slides: tuple[Slide, ...]
    """Slides in presentation order."""

    unresolved: tuple[FileName, ...] = ()
    """Names of the files that could not be found during assembly, in the order \
    they were encountered. Each of them was replaced by a placeholder title."""

    placeholders: tuple[Title, ...] = field(default=(), compare=False, repr=False)
    """Titles inserted in place of the missing files, one per reference. Authored \
    titles are never listed here even if their text matches, compare with `is`."""


def fragment(
    content: Content, transition: Transition | str = Transition.DEFAULT
) -> Fragment:
    """Build a fragment.

    Args:
        content: Content to reveal.
        transition: Reveal style. Strings are converted with the
            [`Transition`][revealz.models.slides.Transition] enum.

    Raises:
        ValueError: Raised if `transition` is a string outside of the transitions set.

    Returns:
        The fragment.
    """
    return Fragment(content, Transition(transition))


def content_slide(
    content: Content, fragments: Sequence[Fragment] | None = None
) -> SingleSlide:
    return SingleSlide(content, None if fragments is None else tuple(fragments))


def fragments_slide(content: Content, fragments: Sequence[Fragment]) -> SingleSlide:
    """Build a slide that exists to stage fragments.

    Unlike [`content_slide`][revealz.models.slides.content_slide], fragments are \
    mandatory. An empty sequence still produces a slide with zero fragments rather \
    than one without fragments.
    """
    return SingleSlide(content, tuple(fragments))


def vertical_slide(slides: Sequence[SingleSlide]) -> VerticalSlide:
    return VerticalSlide(tuple(slides))
