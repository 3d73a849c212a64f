"""Model types for non-container values used across revealz."""

from typing import NamedTuple, NewType

FileName = NewType("FileName", str)
"""Derived from str to represent the key of a source file in a file table.

File names are matched exactly (case-sensitive) and are usually POSIX paths relative \
to the code directory, e.g. `oop/main.cpp`.
"""


class LineSlice(NamedTuple):
    """Inclusive range of 1-indexed line numbers in a text.

    Building a slice does not validate it: bounds are checked against the text they \
    apply to with [`validate_line_slice`][revealz.slicing.validate_line_slice], at \
    assembly time.
    """

    start: int
    """First line of the range, starting at 1."""

    end: int
    """Last line of the range, included."""

    def __str__(self) -> str:
        return f"{self.start}-{self.end}"

    def lines(self) -> range:
        """Line numbers covered by the slice, in order."""
        return range(self.start, self.end + 1)
