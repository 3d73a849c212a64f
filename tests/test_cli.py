from pathlib import Path
from shutil import copytree
from typing import Any
from unittest.mock import patch

import appdirs
from pytest import CaptureFixture, fixture, raises

from revealz.cli import main
from revealz.exceptions import SettingsError


@fixture
def working_dir(tmp_path: Path, monkeypatch: Any) -> Path:
    data_dir = Path(__file__).parent / "data" / "deck"
    working_dir = tmp_path / "deck"
    copytree(data_dir, working_dir)
    user_config_dir = tmp_path / "config"
    user_config_dir.mkdir()
    monkeypatch.chdir(working_dir)
    monkeypatch.setattr(appdirs, "user_config_dir", lambda _: str(user_config_dir))
    return working_dir


def run_revealz(*args: str) -> None:
    with patch("sys.argv", ["revealz", *args]):
        try:
            main()
        except SystemExit as e:
            if e.code != 0:
                raise e


def test_render(working_dir: Path) -> None:
    run_revealz("render")

    html = (working_dir / "dist" / "index.html").read_text(encoding="utf8")
    assert "<title>Functional Programming in C++20</title>" in html
    assert "theme/white.css" in html
    assert "TodoDriver driver;" in html
    assert 'data-line-numbers="1|4-5"' in html
    assert "ERROR loading: fp/missing.cpp" in html
    assert "We&#39;re not playing code golf!" in html


def test_tree(working_dir: Path, capsys: CaptureFixture[str]) -> None:
    run_revealz("tree", "--only-errors")

    output = capsys.readouterr().out
    assert "functional-cpp" in output
    assert "fp/missing.cpp" in output
    assert "oop/main.cpp" not in output


def test_render_outside_of_a_deck(working_dir: Path, tmp_path: Path) -> None:
    empty_dir = tmp_path / "empty"
    empty_dir.mkdir()
    with raises(SettingsError):
        run_revealz("render", "--workdir", str(empty_dir))
