"""Template rendering shared by the site builders."""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any

import jinja2

logger = logging.getLogger(__name__)


class BuildError(Exception):
    """Raised when a page or asset of the site cannot be built."""


class HTML(str):
    """Text that already is HTML and goes into templates unescaped."""

    __slots__ = ()

    def __html__(self) -> str:
        return str(self)


def templates_dir(root: str | Path = ".") -> Path:
    """Directory holding the page templates of a site rooted at ``root``."""
    return Path(root, "backend", "ssg", "templates")


def public_dir(root: str | Path = ".") -> Path:
    """Directory the generated site is written to."""
    return Path(root, "public")


def _context_mapping(context: Any) -> dict[str, Any]:
    if context is None:
        return {}
    if dataclasses.is_dataclass(context) and not isinstance(context, type):
        return {f.name: getattr(context, f.name) for f in dataclasses.fields(context)}
    if isinstance(context, Mapping):
        return dict(context)
    raise TypeError(f"template context must be a mapping or a dataclass, not {type(context).__name__}")


def render_page(
    template_dir: str | Path,
    template_names: Iterable[str],
    output_path: str | Path,
    context: Any = None,
) -> Path:
    """Render the first of ``template_names`` into ``output_path``.

    The other templates are parsed too and are available for inclusion.
    Plain strings in the context are HTML-escaped; ``HTML`` values are not.
    """
    template_dir = Path(template_dir)
    names = list(template_names)
    if not names:
        raise BuildError("no templates given")
    for name in names:
        if not (template_dir / name).is_file():
            raise BuildError(f"template {name!r} not found in {template_dir}")

    env = jinja2.Environment(
        loader=jinja2.FileSystemLoader(str(template_dir)),
        autoescape=True,
        keep_trailing_newline=True,
    )
    try:
        for name in names:
            env.get_template(name)
        page = env.get_template(names[0]).render(_context_mapping(context))
    except jinja2.TemplateError as exc:
        raise BuildError(f"error rendering template {names[0]!r}: {exc}") from exc

    output = Path(output_path)
    try:
        output.write_text(page, encoding="utf-8")
    except OSError as exc:
        raise BuildError(f"error writing {output}: {exc}") from exc
    return output