"""Provide protocols to better type-check deck processing code."""

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ..models.slides import Deck


class Processor[T](Protocol):
    def process(self, deck: "Deck") -> T:
        """Process a deck."""
        ...
