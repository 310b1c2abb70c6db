"""Building the whole static site."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from .assets import add_style, copy_assets
from .blog import build_blog, build_posts
from .pages import build_dev_tools, build_home, build_music_tools, build_portfolio
from .rendering import BuildError, public_dir

logger = logging.getLogger(__name__)


def build_all(root: str | Path = ".") -> Path:
    """Build every page and copy every static file; return the public directory."""
    out = public_dir(root)
    try:
        out.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise BuildError(f"Error creating public directory: {exc}") from exc

    build_home(root)
    build_portfolio(root)
    build_blog(root)
    build_posts(root)
    build_music_tools(root)
    build_dev_tools(root)
    add_style(root)
    copy_assets(root)
    return out


def main(argv: Sequence[str] | None = None) -> int:
    """Build the site from the command line; return the exit status."""
    parser = argparse.ArgumentParser(description="Build the static site into public/.")
    parser.add_argument("--root", default=".", help="site root directory (default: current directory)")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(message)s")
    try:
        build_all(args.root)
    except BuildError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())