"""Model classes for the content a slide can hold.

[`Content`][revealz.models.content.Content] is a closed union of frozen dataclasses. \
Each member carries a [`ContentKind`][revealz.models.content.ContentKind] \
discriminant, so that renderers can either `match` on the classes or dispatch on the \
kind. Optional fields use `None` for absence: an empty tuple of focuses is a \
different value, meaning that the excerpt has zero highlight steps.
"""

from dataclasses import dataclass, fields
from enum import Enum
from typing import Any, ClassVar

from .scalars import FileName, LineSlice


class ContentKind(Enum):
    TITLE = "title"
    SUBTITLE = "subtitle"
    PARAGRAPH = "paragraph"
    RAW_BLOCK = "raw"
    CODE = "code"
    CODE_FROM_FILE = "code_from_file"


@dataclass(frozen=True)
class SourceFile:
    """Named text provided by the caller, typically the content of a code file."""

    name: FileName
    """Key of the file in the file table."""

    text: str
    """Raw content of the file."""


@dataclass(frozen=True)
class Title:
    kind: ClassVar[ContentKind] = ContentKind.TITLE

    text: str
    """Top-level heading."""


@dataclass(frozen=True)
class SubTitle:
    kind: ClassVar[ContentKind] = ContentKind.SUBTITLE

    text: str
    """Secondary heading."""


@dataclass(frozen=True)
class Paragraph:
    kind: ClassVar[ContentKind] = ContentKind.PARAGRAPH

    text: str
    """Plain prose."""


@dataclass(frozen=True)
class RawBlock:
    """Presentational markup passed untouched to the renderer."""

    kind: ClassVar[ContentKind] = ContentKind.RAW_BLOCK

    markup: str


@dataclass(frozen=True)
class Code:
    """Code excerpt given literally, not tied to a file."""

    kind: ClassVar[ContentKind] = ContentKind.CODE

    title: str
    """Caption displayed with the code. Can be empty."""

    code: str
    """Literal code."""

    line_slice: LineSlice | None = None
    """Lines of `code` to display. `None` displays everything."""

    focuses: tuple[LineSlice, ...] | None = None
    """Ranges highlighted one after the other, in the numbering of `code`."""


@dataclass(frozen=True)
class CodeFromFile:
    """Code excerpt taken from a source file.

    The source is resolved during assembly: building a `CodeFromFile` never looks \
    anything up.
    """

    kind: ClassVar[ContentKind] = ContentKind.CODE_FROM_FILE

    source: SourceFile
    """Snapshot of the referenced file."""

    line_slice: LineSlice | None = None
    """Lines of the file to display. `None` displays the whole file."""

    focuses: tuple[LineSlice, ...] | None = None
    """Ranges highlighted one after the other, in the numbering of the file (not \
    of the excerpt)."""


Content = Title | SubTitle | Paragraph | RawBlock | Code | CodeFromFile
"""Any content of a slide or of a fragment."""

_classes: dict[ContentKind, type[Content]] = {
    Title.kind: Title,
    SubTitle.kind: SubTitle,
    Paragraph.kind: Paragraph,
    RawBlock.kind: RawBlock,
    Code.kind: Code,
    CodeFromFile.kind: CodeFromFile,
}


def to_payload(content: Content) -> tuple[ContentKind, dict[str, Any]]:
    """Split a content value into its kind and its fields.

    Args:
        content: Value to split.

    Returns:
        The kind of the content and a dictionary mapping each field name to its \
        value. Values are not copied.
    """
    return content.kind, {f.name: getattr(content, f.name) for f in fields(content)}


def from_payload(kind: ContentKind, payload: dict[str, Any]) -> Content:
    """Build the content value of the given kind from its fields.

    Inverse of [`to_payload`][revealz.models.content.to_payload].

    Raises:
        TypeError: Raised if the payload doesn't match the fields of the kind.
    """
    return _classes[kind](**payload)
