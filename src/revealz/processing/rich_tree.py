from rich.markup import escape
from rich.tree import Tree

from ..models.content import (
    Code,
    CodeFromFile,
    Content,
    Paragraph,
    RawBlock,
    SubTitle,
    Title,
)
from ..models.slides import Deck, SingleSlide, VerticalSlide
from . import Processor

_MAX_LABEL_LENGTH = 50


class RichTreeProcessor(Processor[Tree | None]):
    """Display the structure of a deck as a rich tree.

    Placeholders replacing missing files are shown in red. When `only_errors` is \
    set, only the slides containing placeholders are kept and `None` is returned if \
    there are none.
    """

    def __init__(self, only_errors: bool = True) -> None:
        self._only_errors = only_errors
        self._placeholders: frozenset[int] = frozenset()

    def process(self, deck: Deck) -> Tree | None:
        self._placeholders = frozenset(map(id, deck.placeholders))
        slide_trees = []
        for index, slide in enumerate(deck.slides, start=1):
            match slide:
                case SingleSlide():
                    slide_tree, error = self._process_single(str(index), slide)
                case VerticalSlide():
                    slide_tree, error = self._process_vertical(str(index), slide)
            if error or not self._only_errors:
                slide_trees.append(slide_tree)

        if slide_trees or not self._only_errors:
            tree = Tree(escape(deck.name))
            tree.children.extend(slide_trees)
            return tree
        return None

    def _process_vertical(self, label: str, slide: VerticalSlide) -> tuple[Tree, bool]:
        error = False
        tree = Tree(f"{label} [dim](vertical)[/]")
        for index, child in enumerate(slide.slides, start=1):
            child_tree, child_error = self._process_single(f"{label}.{index}", child)
            error = error or child_error
            if child_error or not self._only_errors:
                tree.children.append(child_tree)
        return tree, error

    def _process_single(self, label: str, slide: SingleSlide) -> tuple[Tree, bool]:
        if slide.content is None:
            tree, error = Tree(f"{label} [dim](empty)[/]"), False
        else:
            content_label, error = self._label(slide.content)
            tree = Tree(f"{label} {content_label}")
        for fragment in slide.fragments or ():
            content_label, fragment_error = self._label(fragment.content)
            error = error or fragment_error
            transition = fragment.transition.value or "default"
            tree.add(f"[dim]fragment {transition}[/] {content_label}")
        return tree, error

    def _label(self, content: Content) -> tuple[str, bool]:
        match content:
            case Title(text=text) if id(content) in self._placeholders:
                return f"[red]{escape(text)}[/]", True
            case Title(text=text) | SubTitle(text=text) | Paragraph(text=text):
                return f"{content.kind.value}: {escape(_shorten(text))}", False
            case RawBlock():
                return content.kind.value, False
            case Code(title=title):
                return f"{content.kind.value}: {escape(_shorten(title))}", False
            case CodeFromFile(source=source):
                return f"{content.kind.value}: {escape(source.name)}", False


def _shorten(text: str) -> str:
    text = " ".join(text.split())
    if len(text) <= _MAX_LABEL_LENGTH:
        return text
    return f"{text[: _MAX_LABEL_LENGTH - 1]}…"
