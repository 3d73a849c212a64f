"""Slice texts by line ranges and compute the lines highlighted at each reveal step.

All line numbers handled here are expressed in the numbering of the original text, \
including focus ranges of an excerpt that was already bounded by a slice. Only the \
output of [`focus_lines`][revealz.slicing.focus_lines] is relative to the excerpt.
"""

from collections.abc import Iterable, Sequence

from .exceptions import InvalidLineSliceError
from .models.scalars import LineSlice


def line_count(text: str) -> int:
    return len(_lines(text))


def validate_line_slice(
    line_slice: LineSlice, total: int, name: str | None = None
) -> None:
    """Check that a slice fits in a text of `total` lines.

    Args:
        line_slice: Slice to check.
        total: Number of lines of the text the slice applies to.
        name: Name of the text, only used to improve the error message.

    Raises:
        InvalidLineSliceError: Raised if the slice starts before line 1, ends before \
            it starts or ends after the last line.
    """
    start, end = line_slice
    if start < 1 or start > end or end > total:
        where = f" of {name}" if name is not None else ""
        msg = f"invalid line slice ({start}, {end}) for the {total} lines{where}"
        raise InvalidLineSliceError(msg)


def slice_text(
    text: str, line_slice: LineSlice | None, name: str | None = None
) -> str:
    """Extract the lines of `text` covered by `line_slice`.

    Args:
        text: Text to slice.
        line_slice: Inclusive range of lines to keep. `None` keeps the whole text.
        name: Name of the text, only used to improve error messages.

    Returns:
        The selected lines, with their original line endings.
    """
    if line_slice is None:
        return text
    lines = _lines(text)
    validate_line_slice(line_slice, len(lines), name)
    return "".join(lines[line_slice.start - 1 : line_slice.end])


def focus_lines(
    focuses: Sequence[LineSlice] | None,
    line_slice: LineSlice | None,
    total: int,
    name: str | None = None,
) -> tuple[tuple[int, ...], ...] | None:
    """Compute the excerpt lines emphasized at each reveal step.

    Focus ranges and the bounding slice are both expressed in the numbering of the \
    original text. The result is renumbered relative to the excerpt, whose first \
    line is 1. Lines of a focus that fall outside the bounding slice are dropped.

    Args:
        focuses: Focus ranges in reveal order. `None` means no progressive \
            highlight, an empty sequence means zero highlight steps.
        line_slice: Slice bounding the excerpt, `None` if the excerpt is the whole \
            text.
        total: Number of lines of the original text.
        name: Name of the text, only used to improve error messages.

    Raises:
        InvalidLineSliceError: Raised if a focus range doesn't fit in the text.

    Returns:
        One tuple of excerpt-relative line numbers per focus, or `None` if \
        `focuses` is `None`.
    """
    if focuses is None:
        return None
    bound = line_slice if line_slice is not None else LineSlice(1, total)
    steps = []
    for focus in focuses:
        validate_line_slice(focus, total, name)
        steps.append(
            tuple(
                line - bound.start + 1
                for line in focus.lines()
                if bound.start <= line <= bound.end
            )
        )
    return tuple(steps)


def format_line_numbers(steps: Iterable[Iterable[int]]) -> str:
    """Format highlight steps the way reveal.js expects in `data-line-numbers`.

    Contiguous lines are collapsed into ranges and steps are separated by pipes: \
    `((1,), (4, 5))` becomes `"1|4-5"`.
    """
    return "|".join(",".join(_ranges(step)) for step in steps)


def _ranges(lines: Iterable[int]) -> list[str]:
    bounds: list[list[int]] = []
    for line in lines:
        if bounds and bounds[-1][1] == line - 1:
            bounds[-1][1] = line
        else:
            bounds.append([line, line])
    return [str(start) if start == end else f"{start}-{end}" for start, end in bounds]


def _lines(text: str) -> list[str]:
    # Only "\n" ends a line, form feeds and the like stay inside it.
    lines = text.split("\n")
    last = lines.pop()
    return [f"{line}\n" for line in lines] + ([last] if last else [])
