from collections.abc import Mapping, Sequence
from logging import getLogger

from .models.content import (
    Code,
    CodeFromFile,
    Content,
    Paragraph,
    RawBlock,
    SourceFile,
    SubTitle,
    Title,
)
from .models.definitions import (
    CodeDefinition,
    CodeFromFileDefinition,
    ContentDefinition,
    DeckDefinition,
    FragmentDefinition,
    ParagraphDefinition,
    RawBlockDefinition,
    SingleSlideDefinition,
    SlideDefinition,
    SubTitleDefinition,
    TitleDefinition,
    VerticalSlideDefinition,
)
from .models.scalars import FileName, LineSlice
from .models.slides import (
    Deck,
    Fragment,
    SingleSlide,
    Slide,
    content_slide,
    fragment,
    fragments_slide,
    vertical_slide,
)
from .slicing import line_count, validate_line_slice

PLACEHOLDER_PREFIX = "ERROR loading: "
"""Start of the title replacing code taken from a file that could not be found."""


class Assembler:
    """Turn deck definitions into decks, resolving file references on the way.

    The file table is copied when the assembler is created: decks assembled later \
    are not affected by changes made to the mapping given as argument. An assembler \
    keeps no state between assemblies.
    """

    def __init__(self, file_table: Mapping[str, SourceFile]) -> None:
        self._files = dict(file_table)
        self._logger = getLogger(__name__)

    def assemble(self, definition: DeckDefinition) -> Deck:
        """Build the deck described by `definition`.

        Missing files don't stop the assembly: each reference to a missing file is \
        replaced by a title naming it and the file is listed in \
        [`Deck.unresolved`][revealz.models.slides.Deck.unresolved].

        Args:
            definition: Definition of the deck.

        Raises:
            InvalidLineSliceError: Raised if a slice or a focus doesn't fit in the \
                text it applies to.

        Returns:
            The assembled deck.
        """
        placeholders: list[tuple[FileName, Title]] = []
        slides = tuple(self._slide(slide, placeholders) for slide in definition.slides)
        if placeholders:
            self._logger.warning(
                "Deck %s assembled with %d unresolved file reference(s)",
                definition.name,
                len(placeholders),
            )
        return Deck(
            name=definition.name,
            slides=slides,
            unresolved=tuple(name for name, _ in placeholders),
            placeholders=tuple(title for _, title in placeholders),
        )

    def code_from_file(
        self,
        name: str,
        line_slice: LineSlice | None = None,
        focuses: Sequence[LineSlice] | None = None,
    ) -> Content:
        """Resolve a file reference into code content, or into a placeholder.

        Placeholders returned here are only logged. They are recorded in a deck \
        only when the reference is resolved by \
        [`assemble`][revealz.assembling.Assembler.assemble].

        Args:
            name: Name of the file in the file table.
            line_slice: Lines of the file to display. `None` displays everything.
            focuses: Ranges to highlight one after the other, numbered like the \
                lines of the file.

        Raises:
            InvalidLineSliceError: Raised if a slice or a focus doesn't fit in the \
                file.

        Returns:
            The code content if the file is found, a title naming the file otherwise.
        """
        return self._code_from_file(name, line_slice, focuses, [])

    def _code_from_file(
        self,
        name: str,
        line_slice: LineSlice | None,
        focuses: Sequence[LineSlice] | None,
        placeholders: list[tuple[FileName, Title]],
    ) -> Content:
        source = self._files.get(name)
        if source is None:
            self._logger.warning("Could not find file %s, using a placeholder", name)
            placeholder = Title(f"{PLACEHOLDER_PREFIX}{name}")
            placeholders.append((FileName(name), placeholder))
            return placeholder
        _validate_slices(source.text, line_slice, focuses, name)
        return CodeFromFile(
            source=source,
            line_slice=line_slice,
            focuses=None if focuses is None else tuple(focuses),
        )

    def _slide(
        self, definition: SlideDefinition, placeholders: list[tuple[FileName, Title]]
    ) -> Slide:
        match definition:
            case SingleSlideDefinition():
                return self._single_slide(definition, placeholders)
            case VerticalSlideDefinition(vertical=slides):
                return vertical_slide(
                    [self._single_slide(s, placeholders) for s in slides]
                )

    def _single_slide(
        self,
        definition: SingleSlideDefinition,
        placeholders: list[tuple[FileName, Title]],
    ) -> SingleSlide:
        content = (
            None
            if definition.content is None
            else self._content(definition.content, placeholders)
        )
        fragments = (
            None
            if definition.fragments is None
            else [self._fragment(f, placeholders) for f in definition.fragments]
        )
        if content is None:
            return SingleSlide(
                fragments=None if fragments is None else tuple(fragments)
            )
        if fragments is None:
            return content_slide(content)
        return fragments_slide(content, fragments)

    def _fragment(
        self,
        definition: FragmentDefinition,
        placeholders: list[tuple[FileName, Title]],
    ) -> Fragment:
        return fragment(
            self._content(definition.content, placeholders), definition.transition
        )

    def _content(
        self,
        definition: ContentDefinition,
        placeholders: list[tuple[FileName, Title]],
    ) -> Content:
        match definition:
            case TitleDefinition(text=text):
                return Title(text)
            case SubTitleDefinition(text=text):
                return SubTitle(text)
            case ParagraphDefinition(text=text):
                return Paragraph(text)
            case RawBlockDefinition(markup=markup):
                return RawBlock(markup)
            case CodeDefinition():
                _validate_slices(
                    definition.code, definition.line_slice, definition.focuses
                )
                return Code(
                    title=definition.title,
                    code=definition.code,
                    line_slice=definition.line_slice,
                    focuses=definition.focuses,
                )
            case CodeFromFileDefinition():
                return self._code_from_file(
                    definition.file,
                    definition.line_slice,
                    definition.focuses,
                    placeholders,
                )


def assemble(definition: DeckDefinition, file_table: Mapping[str, SourceFile]) -> Deck:
    return Assembler(file_table).assemble(definition)


def _validate_slices(
    text: str,
    line_slice: LineSlice | None,
    focuses: Sequence[LineSlice] | None,
    name: str | None = None,
) -> None:
    total = line_count(text)
    if line_slice is not None:
        validate_line_slice(line_slice, total, name)
    for focus in focuses or ():
        validate_line_slice(focus, total, name)
