"""The home, portfolio, music tools and dev tools pages."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from .rendering import HTML, BuildError, public_dir, render_page, templates_dir

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Tool:
    """A downloadable or linked tool shown on a tools page."""

    name: str
    link: str


MUSIC_TOOLS: tuple[Tool, ...] = (
    Tool("BeatMaker", "/assets/tools/beatmaker.zip"),
    Tool("Chord Generator", "/assets/tools/chordgen.zip"),
    Tool("Synth Pack", "/assets/tools/synthpack.zip"),
)

DEV_TOOLS: tuple[Tool, ...] = (
    Tool("Gorani Coding Agent", "https://git.example.com/gorani-coder"),
    Tool("Flow Workspace Manager", "https://git.example.com/flow-workspace"),
)

PLAYLIST_EMBED_URL = "https://video.example.com/embed/videoseries?list={}"
PLAYLISTS: tuple[str, str] = ("PLAYLIST-ONE", "PLAYLIST-TWO")

# Home page partials: context name, file in templates/partials, label for errors.
_PARTIALS = (
    ("portfolio", "portfolio.html", "portfolio partial"),
    ("blog", "blog.html", "blog partial"),
    ("music_tools", "music-tools.html", "music tools partial"),
    ("dev_tools", "dev-tools.html", "dev tools partial"),
)

_SUB_PAGE_TEMPLATES = ("nav.html", "contact.html")


def _playlist_html(playlist_id: str) -> HTML:
    src = PLAYLIST_EMBED_URL.format(playlist_id)
    return HTML(
        '<div class="playlist">\n'
        f'    <iframe width="560" height="315" src="{src}" frameborder="0" allowfullscreen></iframe>\n'
        "</div>"
    )


def build_home(root: str | Path = ".") -> Path:
    """Render ``public/index.html`` from the master template and the partials."""
    tdir = templates_dir(root)
    partials_dir = tdir / "partials"
    context: dict[str, HTML] = {}
    for key, filename, label in _PARTIALS:
        try:
            context[key] = HTML((partials_dir / filename).read_text(encoding="utf-8"))
        except OSError as exc:
            raise BuildError(f"Error reading {label}: {exc}") from exc

    page = render_page(tdir, ["master.html", "contact.html"], public_dir(root) / "index.html", context)
    logger.info("public/index.html built successfully!")
    return page


def build_portfolio(root: str | Path = ".") -> Path:
    """Render ``public/portfolio.html`` with the embedded playlists."""
    first, second = PLAYLISTS
    context = {"playlist1": _playlist_html(first), "playlist2": _playlist_html(second)}
    page = render_page(
        templates_dir(root),
        ["portfolio.html", *_SUB_PAGE_TEMPLATES],
        public_dir(root) / "portfolio.html",
        context,
    )
    logger.info("public/portfolio.html built successfully!")
    return page


def build_music_tools(root: str | Path = ".") -> Path:
    """Render ``public/music-tools.html`` listing the music tools."""
    page = render_page(
        templates_dir(root),
        ["music-tools.html", *_SUB_PAGE_TEMPLATES],
        public_dir(root) / "music-tools.html",
        {"tools": list(MUSIC_TOOLS)},
    )
    logger.info("public/music-tools.html built successfully!")
    return page


def build_dev_tools(root: str | Path = ".") -> Path:
    """Render ``public/dev-tools.html`` listing the dev tools.

    The tool names and links are inserted as they are, without escaping.
    """
    tools = [Tool(HTML(tool.name), HTML(tool.link)) for tool in DEV_TOOLS]
    page = render_page(
        templates_dir(root),
        ["dev-tools.html", *_SUB_PAGE_TEMPLATES],
        public_dir(root) / "dev-tools.html",
        {"tools": tools},
    )
    logger.info("public/dev-tools.html built successfully!")
    return page