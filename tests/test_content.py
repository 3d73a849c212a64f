from dataclasses import FrozenInstanceError

from pytest import mark, raises

from revealz.models import (
    Code,
    CodeFromFile,
    Content,
    ContentKind,
    FileName,
    LineSlice,
    Paragraph,
    RawBlock,
    SourceFile,
    SubTitle,
    Title,
    from_payload,
    to_payload,
)
from revealz.processing.excerpts import excerpt

SOURCE = SourceFile(
    FileName("fp/model.h"), "".join(f"line {i}\n" for i in range(1, 11))
)

CONTENTS: list[Content] = [
    Title("Functional Programming in C++20"),
    SubTitle("Syntax Preliminaries"),
    Paragraph("Avoid mutation and side effects"),
    RawBlock('<img src="qr.png">'),
    Code("", "int square(int x) { return x * x; }\n"),
    Code("C++20 ranges", "a\nb\nc\n", LineSlice(1, 2), (LineSlice(2, 2),)),
    CodeFromFile(SOURCE),
    CodeFromFile(SOURCE, LineSlice(3, 7), (LineSlice(3, 3), LineSlice(6, 7))),
]


@mark.parametrize("content", CONTENTS)
def test_payload_round_trip(content: Content) -> None:
    assert from_payload(*to_payload(content)) == content


def test_kinds_are_unique_per_class() -> None:
    kinds = {type(content): content.kind for content in CONTENTS}
    assert len(set(kinds.values())) == len(kinds) == len(ContentKind)


def test_payload_holds_only_the_fields_of_the_kind() -> None:
    assert to_payload(Title("Undo!")) == (ContentKind.TITLE, {"text": "Undo!"})
    assert to_payload(RawBlock("<hr>")) == (ContentKind.RAW_BLOCK, {"markup": "<hr>"})
    kind, payload = to_payload(CodeFromFile(SOURCE))
    assert kind is ContentKind.CODE_FROM_FILE
    assert payload == {"source": SOURCE, "line_slice": None, "focuses": None}


def test_from_payload_rejects_foreign_fields() -> None:
    with raises(TypeError):
        from_payload(ContentKind.TITLE, {"markup": "<hr>"})


def test_contents_are_immutable() -> None:
    title = Title("Mutation")
    with raises(FrozenInstanceError):
        title.text = "Immutability"  # type: ignore[misc]


def test_code_without_slice_shows_the_full_text() -> None:
    text = "\n// Traditional return types\nint square(int x) { return x * x; }\n"
    code_excerpt = excerpt(Code("", text))
    assert code_excerpt.text == text
    assert code_excerpt.first_line == 1
    assert code_excerpt.steps is None
    assert code_excerpt.line_numbers is None


def test_empty_focuses_mean_zero_steps() -> None:
    code_excerpt = excerpt(Code("", "a\nb\n", focuses=()))
    assert code_excerpt.steps == ()
    assert code_excerpt.line_numbers == ""


def test_code_from_file_is_bounded_then_focused() -> None:
    code_excerpt = excerpt(CONTENTS[-1])  # type: ignore[arg-type]
    assert code_excerpt.text == "line 3\nline 4\nline 5\nline 6\nline 7\n"
    assert code_excerpt.first_line == 3
    assert code_excerpt.steps == ((1,), (4, 5))
    assert code_excerpt.line_numbers == "1|4-5"
