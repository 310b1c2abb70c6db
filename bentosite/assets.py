"""Copying of static files into the generated site."""

from __future__ import annotations

import logging
import shutil
from pathlib import Path

from .rendering import BuildError, public_dir, templates_dir

logger = logging.getLogger(__name__)


def copy_file(src: str | Path, dst: str | Path) -> None:
    """Copy the contents of ``src`` to ``dst``, replacing ``dst``."""
    shutil.copyfile(src, dst)


def copy_dir(src: str | Path, dst: str | Path) -> None:
    """Copy the directory tree ``src`` into ``dst``, creating ``dst`` as needed."""
    src, dst = Path(src), Path(dst)
    dst.mkdir(parents=True, exist_ok=True)
    for entry in sorted(src.iterdir(), key=lambda p: p.name):
        target = dst / entry.name
        if entry.is_dir():
            copy_dir(entry, target)
        else:
            copy_file(entry, target)


def copy_assets(root: str | Path = ".") -> None:
    """Copy ``content/assets`` to ``public/assets``."""
    src = Path(root, "content", "assets")
    dst = public_dir(root) / "assets"
    try:
        copy_dir(src, dst)
    except OSError as exc:
        raise BuildError(f"Error copying assets: {exc}") from exc
    logger.info("Assets copied successfully!")


def add_style(root: str | Path = ".") -> None:
    """Copy the site stylesheet into the public directory."""
    src = templates_dir(root) / "styles.css"
    dst = public_dir(root) / "styles.css"
    try:
        copy_file(src, dst)
    except OSError as exc:
        raise BuildError(f"Error copying styles.css: {exc}") from exc
    logger.info("styles.css copied successfully!")