"""Build file tables from directories of source files."""

from collections.abc import Iterable
from logging import getLogger
from pathlib import Path

from .models.content import SourceFile
from .models.scalars import FileName

_logger = getLogger(__name__)


def load_source_files(
    code_dir: Path, suffixes: Iterable[str] | None = None
) -> dict[FileName, SourceFile]:
    """Read every file of `code_dir`, recursively.

    Hidden files and files that are not UTF-8 text are skipped.

    Args:
        code_dir: Directory to read. Files are named after their POSIX path \
            relative to it, e.g. `oop/main.cpp`.
        suffixes: Suffixes of the files to keep (e.g. `.cpp`). All files are kept \
            if `None`.

    Returns:
        The file table, sorted by name. Empty if `code_dir` doesn't exist.
    """
    if not code_dir.is_dir():
        _logger.warning("Code directory %s does not exist", code_dir)
        return {}
    kept_suffixes = None if suffixes is None else frozenset(suffixes)
    files = {}
    for path in sorted(code_dir.rglob("*")):
        relative_path = path.relative_to(code_dir)
        if not path.is_file() or any(
            part.startswith(".") for part in relative_path.parts
        ):
            continue
        if kept_suffixes is not None and path.suffix not in kept_suffixes:
            continue
        name = FileName(relative_path.as_posix())
        try:
            text = path.read_text(encoding="utf8")
        except UnicodeDecodeError:
            _logger.warning("Skipping %s, it is not UTF-8 text", name)
            continue
        files[name] = SourceFile(name=name, text=text)
        _logger.debug("Loaded %s", name)
    return files
