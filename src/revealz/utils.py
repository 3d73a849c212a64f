"""Provide general utility functions that would not fit in other modules."""

from collections.abc import Iterable, Iterator
from contextlib import suppress
from pathlib import Path
from typing import Any


def load_yaml(path: Path) -> Any:
    from yaml import safe_load

    return safe_load(path.read_text(encoding="utf8"))


def load_all_yamls(paths: Iterable[Path]) -> Iterator[Any]:
    for path in paths:
        with suppress(FileNotFoundError):
            yield load_yaml(path)


def dirs_hierarchy(user_config_dir: Path, current_dir: Path) -> Iterator[Path]:
    """Yield the directories to look into for settings, the most generic first."""
    yield user_config_dir
    if current_dir.resolve() != user_config_dir.resolve():
        yield current_dir
