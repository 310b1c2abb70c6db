"""Blog pages: individual posts and the blog overview."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from pathlib import Path

import markdown

from .rendering import HTML, BuildError, public_dir, render_page, templates_dir

logger = logging.getLogger(__name__)

_HASHTAG = re.compile(r"#(\w+)", re.ASCII)
_MARKDOWN_EXTENSIONS = ["tables", "fenced_code", "sane_lists", "toc", "nl2br"]


@dataclass
class PostData:
    """A rendered blog post."""

    title: str
    content: HTML
    hashtags: list[str] = field(default_factory=list)
    date: str = ""


@dataclass
class BlogPost:
    """A post as listed in the blog index."""

    slug: str
    title: str
    date: str = ""


@dataclass
class BlogPageData:
    """Everything the blog overview page is rendered from."""

    posts: list[BlogPost] = field(default_factory=list)
    post: PostData | None = None


@dataclass
class ParsedPost:
    """A Markdown post split into its metadata, hashtags and body."""

    slug: str
    title: str
    date: str
    hashtags: list[str]
    body: str


def render_markdown(text: str) -> HTML:
    """Render Markdown to XHTML with tables, heading ids and hard line breaks."""
    return HTML(markdown.markdown(text, extensions=_MARKDOWN_EXTENSIONS, output_format="xhtml"))


def extract_hashtags(content: str) -> list[str]:
    """Return every ``#word`` in ``content``, without the ``#``, in order."""
    return _HASHTAG.findall(content)


def extract_metadata(content: str) -> tuple[str, str]:
    """Return the ``Title:`` and ``Date:`` values found in ``content``."""
    title = date = ""
    for line in content.split("\n"):
        if line.startswith("Title:"):
            title = line[len("Title:"):].strip()
        elif line.startswith("Date:"):
            date = line[len("Date:"):].strip()
        if title and date:
            break
    return title, date


def parse_post(slug: str, text: str) -> ParsedPost:
    """Split a post into metadata, hashtags and the Markdown body.

    The first two lines hold the metadata and are dropped; trailing lines
    starting with ``#`` hold the hashtags and are dropped as well.
    """
    title, date = extract_metadata(text)
    lines = text.split("\n")
    if len(lines) > 2:
        text = "\n".join(lines[2:])
    hashtags = extract_hashtags(text)
    lines = text.split("\n")
    while lines and lines[-1].startswith("#"):
        lines.pop()
    return ParsedPost(
        slug=slug,
        title=title or slug,
        date=date,
        hashtags=hashtags,
        body="\n".join(lines),
    )


def _posts_dir(root: str | Path) -> Path:
    return Path(root, "content", "posts")


def _markdown_files(posts_dir: Path) -> list[Path]:
    try:
        entries = sorted(posts_dir.iterdir(), key=lambda p: p.name)
    except OSError as exc:
        raise BuildError(f"Error reading posts directory: {exc}") from exc
    return [p for p in entries if p.name.endswith(".md")]


def _read_post(path: Path) -> str | None:
    try:
        return path.read_text(encoding="utf-8", errors="replace")
    except OSError as exc:
        logger.error("Error reading markdown file %s: %s", path.name, exc)
        return None


def build_posts(root: str | Path = ".") -> list[Path]:
    """Render every post to ``public/blog/posts/<slug>.html``.

    Posts that cannot be read or rendered are logged and skipped.
    Returns the pages written.
    """
    tdir = templates_dir(root)
    if not (tdir / "posts.html").is_file():
        raise BuildError(f"Error parsing posts template: posts.html not found in {tdir}")

    out_dir = public_dir(root) / "blog" / "posts"
    try:
        out_dir.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise BuildError(f"Error creating posts output directory: {exc}") from exc

    written: list[Path] = []
    for path in _markdown_files(_posts_dir(root)):
        slug = path.name[:-3]
        text = _read_post(path)
        if text is None:
            continue
        parsed = parse_post(slug, text)
        data = PostData(
            title=parsed.title,
            content=render_markdown(parsed.body),
            hashtags=parsed.hashtags,
            date=parsed.date,
        )
        try:
            page = render_page(tdir, ["posts.html"], out_dir / f"{slug}.html", data)
        except BuildError as exc:
            logger.error("Error building post %s: %s", slug, exc)
            continue
        logger.info("Built post %s", slug)
        written.append(page)
    return written


def build_blog(root: str | Path = ".") -> BlogPageData:
    """Render ``public/blog.html``: all posts, newest first, and the newest in full."""
    entries: list[tuple[int, Path]] = []
    for path in _markdown_files(_posts_dir(root)):
        try:
            mtime = int(path.stat().st_mtime)
        except OSError as exc:
            logger.error("Error stating file %s: %s", path.name, exc)
            continue
        entries.append((mtime, path))
    entries.sort(key=lambda entry: entry[0], reverse=True)

    page = BlogPageData()
    for index, (_, path) in enumerate(entries):
        slug = path.name[:-3]
        text = _read_post(path)
        if text is None:
            continue
        parsed = parse_post(slug, text)
        page.posts.append(BlogPost(slug=slug, title=parsed.title, date=parsed.date))
        if index == 0:
            page.post = PostData(
                title=parsed.title,
                content=render_markdown(parsed.body),
                hashtags=parsed.hashtags,
                date=parsed.date,
            )

    render_page(
        templates_dir(root),
        ["blog.html", "nav.html", "contact.html"],
        public_dir(root) / "blog.html",
        page,
    )
    logger.info("public/blog.html built successfully!")
    return page