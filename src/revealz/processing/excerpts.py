from dataclasses import dataclass

from ..models.content import Code, CodeFromFile
from ..slicing import focus_lines, format_line_numbers, line_count, slice_text


@dataclass(frozen=True)
class Excerpt:
    """Code as displayed on a slide."""

    text: str
    """Lines of the code kept by the bounding slice."""

    first_line: int
    """Number, in the original text, of the first line of `text`."""

    steps: tuple[tuple[int, ...], ...] | None
    """Lines of `text` (starting at 1) highlighted at each reveal step. `None` if \
    the code has no progressive highlight."""

    @property
    def line_numbers(self) -> str | None:
        """Steps in the format of the reveal.js `data-line-numbers` attribute."""
        return None if self.steps is None else format_line_numbers(self.steps)


def excerpt(content: Code | CodeFromFile) -> Excerpt:
    """Apply the bounding slice of a code content, then compute its focus steps.

    Raises:
        InvalidLineSliceError: Raised if a slice or a focus doesn't fit in the code.
    """
    match content:
        case Code(code=text):
            name = None
        case CodeFromFile(source=source):
            text, name = source.text, source.name
    return Excerpt(
        text=slice_text(text, content.line_slice, name),
        first_line=1 if content.line_slice is None else content.line_slice.start,
        steps=focus_lines(content.focuses, content.line_slice, line_count(text), name),
    )
