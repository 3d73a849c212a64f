from io import StringIO

from rich.console import Console
from rich.tree import Tree

from revealz.assembling import assemble
from revealz.models import FileName, SourceFile
from revealz.models.definitions import DeckDefinition
from revealz.processing.rich_tree import RichTreeProcessor

DEFINITION = DeckDefinition.model_validate(
    {
        "name": "functional-cpp",
        "slides": [
            {"content": {"title": "Functional Programming in C++20"}},
            {
                "vertical": [
                    {"content": {"subtitle": "In the OOP style"}},
                    {"content": {"file": "oop/main.cpp"}},
                    {"content": {"file": "oop/clidriver.h"}},
                ]
            },
            {
                "content": {"subtitle": "Pipes Again!"},
                "fragments": [{"content": "y = x |> f |> g", "transition": "grow"}],
            },
        ],
    }
)
FILES = {"oop/main.cpp": SourceFile(FileName("oop/main.cpp"), "int main() {}\n")}


def _render(tree: Tree) -> str:
    console = Console(file=StringIO(), width=120, color_system=None)
    console.print(tree)
    output = console.file.getvalue()  # type: ignore[attr-defined]
    assert isinstance(output, str)
    return output


def test_full_tree() -> None:
    tree = RichTreeProcessor(only_errors=False).process(assemble(DEFINITION, FILES))
    assert tree is not None
    output = _render(tree)
    assert "functional-cpp" in output
    assert "title: Functional Programming in C++20" in output
    assert "2 (vertical)" in output
    assert "2.2 code_from_file: oop/main.cpp" in output
    assert "2.3 ERROR loading: oop/clidriver.h" in output
    assert "fragment grow paragraph: y = x |> f |> g" in output


def test_only_errors_keeps_the_slides_with_placeholders() -> None:
    tree = RichTreeProcessor().process(assemble(DEFINITION, FILES))
    assert tree is not None
    output = _render(tree)
    assert "oop/clidriver.h" in output
    assert "oop/main.cpp" not in output
    assert "Pipes Again!" not in output


def test_only_errors_without_errors() -> None:
    files = {
        **FILES,
        "oop/clidriver.h": SourceFile(FileName("oop/clidriver.h"), "#pragma once\n"),
    }
    assert RichTreeProcessor().process(assemble(DEFINITION, files)) is None


def test_authored_titles_are_not_placeholders() -> None:
    definition = DeckDefinition.model_validate(
        {
            "name": "errors",
            "slides": [
                {"content": {"title": "ERROR loading: oop/clidriver.h"}},
                {"content": {"file": "oop/clidriver.h"}},
            ],
        }
    )
    tree = RichTreeProcessor().process(assemble(definition, FILES))
    assert tree is not None
    output = _render(tree)
    assert "2 ERROR loading: oop/clidriver.h" in output
    assert "title: ERROR loading" not in output
