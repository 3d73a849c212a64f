from functools import reduce
from pathlib import Path
from typing import Annotated, Any, Self

from pydantic import (
    AfterValidator,
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    ValidationInfo,
)

from .. import app_name
from ..utils import dirs_hierarchy, load_all_yamls

settings_file_name = "revealz.yml"


def _user_config_dir() -> Path:
    from appdirs import user_config_dir

    return Path(user_config_dir(app_name))


def _convert(input_value: str | Path, info: ValidationInfo) -> Path:
    if isinstance(input_value, str):
        return Path(input_value.format(**info.data))
    return input_value


_Path = Annotated[Path, BeforeValidator(_convert), AfterValidator(Path.resolve)]


# mypy: ignore-errors
class Paths(BaseModel):
    model_config = ConfigDict(validate_default=True)
    current_dir: _Path
    user_config_dir: _Path = Field(default_factory=_user_config_dir)
    deck_definition: _Path = "{current_dir}/deck.yml"
    code_dir: _Path = "{current_dir}/code"
    output_dir: _Path = "{current_dir}/dist"
    output_file: _Path = "{output_dir}/index.html"
    template: _Path | None = None


class Settings(BaseModel):
    title: str | None = None
    theme: str = "black"
    reveal_version: str = "5.1.0"
    code_suffixes: tuple[str, ...] | None = None
    paths: Paths

    @classmethod
    def from_yaml(cls, path: Path) -> Self:
        """Load the settings applying to the directory `path`.

        Settings files are looked for in the user config directory, then in `path`. \
        Keys defined in `path` override the ones of the user config directory.

        Args:
            path: Directory of the deck.

        Returns:
            The validated settings.
        """
        resolved_path = path.resolve()
        user_config_dir = _user_config_dir()
        content: dict[str, Any] = reduce(
            lambda a, b: {**a, **(b or {})},
            load_all_yamls(
                d / settings_file_name
                for d in dirs_hierarchy(user_config_dir, resolved_path)
            ),
            {},
        )
        paths = content.setdefault("paths", {})
        paths.setdefault("current_dir", resolved_path)
        paths.setdefault("user_config_dir", user_config_dir)
        return cls.model_validate(content)
