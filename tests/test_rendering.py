from pathlib import Path

from pytest import fixture

from revealz.models import (
    Code,
    CodeFromFile,
    Deck,
    FileName,
    LineSlice,
    Paragraph,
    RawBlock,
    SourceFile,
    SubTitle,
    Title,
    Transition,
    content_slide,
    fragment,
    fragments_slide,
    vertical_slide,
)
from revealz.rendering import Renderer

MODEL = SourceFile(
    FileName("fp/model.h"), "".join(f"line {i}\n" for i in range(1, 11))
)


@fixture
def deck() -> Deck:
    return Deck(
        name="functional-cpp",
        slides=(
            content_slide(Title("Functional Programming in C++20")),
            vertical_slide(
                [
                    content_slide(SubTitle("std::variant / std::visit")),
                    content_slide(
                        CodeFromFile(
                            MODEL, LineSlice(3, 7), (LineSlice(3, 3), LineSlice(6, 7))
                        )
                    ),
                ]
            ),
            fragments_slide(
                SubTitle("Functional Programming Style"),
                [
                    fragment(Paragraph("Avoid mutation"), Transition.HIGHLIGHT_RED),
                    fragment(RawBlock("<strong>side effects</strong>")),
                ],
            ),
            content_slide(Code("Templates", "std::vector<int> ints;\n")),
        ),
    )


def test_render_to_str(deck: Deck) -> None:
    html = Renderer().render_to_str(deck, title=None, theme="white")
    assert "<title>functional-cpp</title>" in html
    assert "theme/white.css" in html
    assert html.count("<section>") == 6
    assert "<h2>Functional Programming in C++20</h2>" in html
    assert '<code class="language-h" data-line-numbers="1|4-5">' in html
    assert "line 3\nline 4\nline 5\nline 6\nline 7\n</code>" in html
    assert "line 8" not in html
    assert '<div class="fragment highlight-red"><p>Avoid mutation</p></div>' in html
    assert '<div class="fragment"><strong>side effects</strong></div>' in html
    assert '<p class="code-title">Templates</p>' in html
    assert "std::vector&lt;int&gt; ints;" in html


def test_texts_are_escaped() -> None:
    deck = Deck("<deck>", (content_slide(Paragraph("a < b")),))
    html = Renderer().render_to_str(deck)
    assert "<title>&lt;deck&gt;</title>" in html
    assert "<p>a &lt; b</p>" in html


def test_empty_focuses_render_line_numbers_without_steps() -> None:
    deck = Deck("deck", (content_slide(Code("", "a\n", focuses=())),))
    assert '<code data-line-numbers="">' in Renderer().render_to_str(deck)


def test_render_to_path(deck: Deck, tmp_path: Path) -> None:
    output_path = tmp_path / "dist" / "index.html"
    renderer = Renderer()
    renderer.render_to_path(deck, output_path, title="Talk")
    first = output_path.read_text(encoding="utf8")
    assert "<title>Talk</title>" in first
    renderer.render_to_path(deck, output_path, title="Talk")
    assert output_path.read_text(encoding="utf8") == first


def test_custom_template(deck: Deck, tmp_path: Path) -> None:
    template = tmp_path / "custom.html.j2"
    template.write_text(
        "{% for slide in deck.slides %}"
        "{% if slide is vertical %}V{% else %}S{% endif %}"
        "{% endfor %}",
        encoding="utf8",
    )
    assert Renderer(template).render_to_str(deck) == "SVSS"
