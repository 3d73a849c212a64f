"""Render assembled decks into reveal.js HTML pages with Jinja2."""

from collections.abc import Callable
from functools import cached_property
from logging import getLogger
from pathlib import Path, PurePath
from typing import Any

from jinja2 import BaseLoader, Environment, TemplateNotFound
from markupsafe import Markup

from .models.content import (
    Code,
    CodeFromFile,
    Content,
    Paragraph,
    RawBlock,
    SubTitle,
    Title,
)
from .models.slides import Deck, Fragment, VerticalSlide
from .processing.excerpts import excerpt

default_template = Path(__file__).parent / "templates" / "deck.html.j2"


class _AbsoluteLoader(BaseLoader):
    def get_source(
        self, environment: Environment, template: str
    ) -> tuple[str, str, Callable[[], bool]]:
        template_path = Path(template)
        if not template_path.exists():
            raise TemplateNotFound(template)
        mtime = template_path.stat().st_mtime
        source = template_path.read_text(encoding="utf8")
        return (
            source,
            str(template_path),
            lambda: mtime == template_path.stat().st_mtime,
        )


class Renderer:
    """Render decks with a Jinja2 template.

    The template receives the deck as `deck` and any extra keyword argument given \
    to the render methods. Contents are rendered with the `content` filter, fragment \
    classes with the `fragment_class` filter and vertical slides can be told apart \
    with the `vertical` test.
    """

    def __init__(self, template_path: Path | None = None) -> None:
        self._template_path = (
            default_template if template_path is None else template_path.resolve()
        )
        self._logger = getLogger(__name__)

    def render_to_str(self, deck: Deck, /, **template_kwargs: Any) -> str:
        template = self._env.get_template(str(self._template_path))
        return template.render(deck=deck, **template_kwargs)

    def render_to_path(
        self, deck: Deck, output_path: Path, /, **template_kwargs: Any
    ) -> None:
        """Render `deck` into `output_path`.

        The file is only replaced if its content changes, to avoid triggering \
        reloads in tools watching it.
        """
        from contextlib import suppress
        from filecmp import cmp
        from shutil import move
        from tempfile import NamedTemporaryFile

        output_path.parent.mkdir(parents=True, exist_ok=True)
        try:
            with NamedTemporaryFile("w", encoding="utf8", delete=False) as fh:
                fh.write(self.render_to_str(deck, **template_kwargs))
                fh.write("\n")
            if not output_path.exists() or not cmp(fh.name, str(output_path)):
                move(fh.name, output_path)
                self._logger.info("Rendered %s", output_path)
            else:
                self._logger.info("%s is up to date", output_path)
        finally:
            with suppress(FileNotFoundError):
                Path(fh.name).unlink()

    @cached_property
    def _env(self) -> Environment:
        env = Environment(
            loader=_AbsoluteLoader(),
            trim_blocks=True,
            lstrip_blocks=True,
            autoescape=True,
        )
        env.filters["content"] = self._content
        env.filters["fragment_class"] = self._fragment_class
        env.tests["vertical"] = lambda slide: isinstance(slide, VerticalSlide)
        return env

    def _fragment_class(self, fragment: Fragment) -> str:
        return " ".join(filter(None, ("fragment", fragment.transition.value)))

    def _content(self, content: Content) -> Markup:
        match content:
            case Title(text=text):
                return Markup("<h2>{}</h2>").format(text)
            case SubTitle(text=text):
                return Markup("<h3>{}</h3>").format(text)
            case Paragraph(text=text):
                return Markup("<p>{}</p>").format(text)
            case RawBlock(markup=markup):
                return Markup(markup)
            case Code(title=title) if title:
                return Markup('<p class="code-title">{}</p>').format(
                    title
                ) + self._code(content)
            case Code() | CodeFromFile():
                return self._code(content)

    def _code(self, content: Code | CodeFromFile) -> Markup:
        code_excerpt = excerpt(content)
        attributes = []
        if isinstance(content, CodeFromFile) and (
            language := PurePath(content.source.name).suffix.removeprefix(".")
        ):
            attributes.append(Markup(' class="language-{}"').format(language))
        if code_excerpt.line_numbers is not None:
            attributes.append(
                Markup(' data-line-numbers="{}"').format(code_excerpt.line_numbers)
            )
        return Markup("<pre><code{}>{}</code></pre>").format(
            Markup("").join(attributes), code_excerpt.text
        )
