"""Model classes to define decks.

All classes in this module are using the Pydantic library and can be easily \
instantiated from yaml files. A definition only names the source files it needs: \
they are looked up during assembly, see [`Assembler`][revealz.assembling.Assembler].

Content can be written with an explicit `kind` or with the following shorthands:

- a string, for a paragraph

        Some prose

- a mapping with a single key among `title`, `subtitle`, `paragraph` and `raw`

        title: Functional Programming in C++20
        raw: <img src="logo.svg">

- a mapping with a `file` key, for code taken from a file

        file: oop/clidriver.h
        line_slice: [3, 20]
        focuses: [[5, 5], [7, 10]]

- a mapping with a `code` key, for literal code

        code: "int square(int x) { return x * x; }"
        title: Traditional return types

Fragments are either a content (shorthand or not) or a mapping with a `content` key \
and an optional `transition` key. Slides are either a mapping with optional \
`content` and `fragments` keys or a mapping with a single `vertical` key listing \
slides.
"""

from pathlib import Path
from typing import Annotated, Any, Literal, Self

from pydantic import BaseModel, BeforeValidator, ConfigDict, Discriminator

from ..utils import load_yaml
from .scalars import FileName, LineSlice
from .slides import Transition

_TEXT_KINDS = frozenset(("title", "subtitle", "paragraph"))


class _Definition(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")


class TitleDefinition(_Definition):
    kind: Literal["title"] = "title"
    text: str


class SubTitleDefinition(_Definition):
    kind: Literal["subtitle"] = "subtitle"
    text: str


class ParagraphDefinition(_Definition):
    kind: Literal["paragraph"] = "paragraph"
    text: str


class RawBlockDefinition(_Definition):
    kind: Literal["raw"] = "raw"
    markup: str


class CodeDefinition(_Definition):
    kind: Literal["code"] = "code"

    code: str
    """Literal code to display."""

    title: str = ""
    """Caption of the code."""

    line_slice: LineSlice | None = None
    """Lines of the code to display."""

    focuses: tuple[LineSlice, ...] | None = None
    """Ranges to highlight one after the other."""


class CodeFromFileDefinition(_Definition):
    kind: Literal["code_from_file"] = "code_from_file"

    file: FileName
    """Name of the file in the file table given to the assembler."""

    line_slice: LineSlice | None = None
    """Lines of the file to display."""

    focuses: tuple[LineSlice, ...] | None = None
    """Ranges to highlight one after the other, numbered like the file lines."""


def _normalize_content(v: Any) -> Any:
    if isinstance(v, str):
        return {"kind": "paragraph", "text": v}
    if not isinstance(v, dict) or "kind" in v:
        return v
    if len(v) == 1:
        key, value = next(iter(v.items()))
        if key in _TEXT_KINDS:
            return {"kind": key, "text": value}
        if key == "raw":
            return {"kind": "raw", "markup": value}
    if "file" in v:
        return {"kind": "code_from_file", **v}
    if "code" in v:
        return {"kind": "code", **v}
    return v


ContentDefinition = Annotated[
    Annotated[
        TitleDefinition
        | SubTitleDefinition
        | ParagraphDefinition
        | RawBlockDefinition
        | CodeDefinition
        | CodeFromFileDefinition,
        Discriminator("kind"),
    ],
    BeforeValidator(_normalize_content),
]
"""Any content definition, shorthands included."""


class FragmentDefinition(_Definition):
    content: ContentDefinition
    transition: Transition = Transition.DEFAULT


def _normalize_fragment(v: Any) -> Any:
    if isinstance(v, FragmentDefinition) or (isinstance(v, dict) and "content" in v):
        return v
    return {"content": v}


class SingleSlideDefinition(_Definition):
    content: ContentDefinition | None = None
    """Main content of the slide."""

    fragments: (
        tuple[Annotated[FragmentDefinition, BeforeValidator(_normalize_fragment)], ...]
        | None
    ) = None
    """Fragments of the slide, in reveal order."""


class VerticalSlideDefinition(_Definition):
    vertical: tuple[SingleSlideDefinition, ...]
    """Slides of the vertical stack, from top to bottom."""


SlideDefinition = SingleSlideDefinition | VerticalSlideDefinition


class DeckDefinition(_Definition):
    """Specify the different attributes of a deck."""

    name: str
    """The name of the deck. Used as the title of the rendered page."""

    slides: tuple[SlideDefinition, ...]
    """The definition of each slide of the deck, in order."""

    @classmethod
    def from_yaml(cls, path: Path) -> Self:
        return cls.model_validate(load_yaml(path))
