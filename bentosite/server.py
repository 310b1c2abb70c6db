"""A small HTTP server for the generated site."""

from __future__ import annotations

import argparse
import functools
import logging
import posixpath
import sys
from collections.abc import Sequence
from http import HTTPStatus
from http.server import SimpleHTTPRequestHandler, ThreadingHTTPServer
from pathlib import Path
from urllib.parse import unquote, urlsplit

from .build import build_all
from .rendering import BuildError, public_dir as site_public_dir

logger = logging.getLogger(__name__)

DEFAULT_PORT = 8080

# Pretty URLs served from single pages of the public directory.
_PAGE_ROUTES = {
    "/blog": "blog.html",
    "/blog-index": "blog-index.html",
    "/portfolio": "portfolio.html",
    "/music-tools": "music-tools.html",
    "/dev-tools": "dev-tools.html",
}
_POSTS_PREFIX = "/blog/posts/"
_NOT_FOUND_BODY = b"404 page not found\n"


def _is_routed(url_path: str) -> bool:
    return url_path in _PAGE_ROUTES or url_path.startswith(_POSTS_PREFIX)


def _post_slug(url_path: str) -> str | None:
    slug = posixpath.basename(url_path.rstrip("/"))
    if slug in ("", ".", "..", "posts"):
        return None
    return slug


def _existing_file(path: Path) -> Path | None:
    return path if path.is_file() else None


def resolve_path(public_dir: str | Path, url_path: str) -> Path | None:
    """Return the file or directory that the decoded ``url_path`` is served from.

    Returns ``None`` where the request is answered with "not found".
    Paths never resolve to anything outside ``public_dir``.
    """
    root = Path(public_dir)
    if url_path in _PAGE_ROUTES:
        return _existing_file(root / _PAGE_ROUTES[url_path])
    if url_path.startswith(_POSTS_PREFIX):
        slug = _post_slug(url_path)
        if slug is None:
            return None
        return _existing_file(root / "posts" / f"{slug}.html")

    parts = [part for part in posixpath.normpath("/" + url_path).split("/") if part]
    candidate = root.joinpath(*parts)
    if candidate.is_dir():
        index = candidate / "index.html"
        return index if index.is_file() else candidate
    return _existing_file(candidate)


class SiteRequestHandler(SimpleHTTPRequestHandler):
    """Serves the public directory, with pretty URLs for the main pages and posts."""

    def do_GET(self) -> None:
        url_path = unquote(urlsplit(self.path).path)
        if not _is_routed(url_path):
            super().do_GET()
            return
        target = resolve_path(self.directory, url_path)
        if target is None:
            self.send_error(HTTPStatus.NOT_FOUND)
            return
        self._send_file(target)

    def _send_file(self, path: Path) -> None:
        try:
            body = path.read_bytes()
            mtime = path.stat().st_mtime
        except OSError:
            self.send_error(HTTPStatus.NOT_FOUND)
            return
        self.send_response(HTTPStatus.OK)
        self.send_header("Content-Type", self.guess_type(str(path)))
        self.send_header("Content-Length", str(len(body)))
        self.send_header("Last-Modified", self.date_time_string(mtime))
        self.end_headers()
        self.wfile.write(body)

    def send_error(self, code: int, message: str | None = None, explain: str | None = None) -> None:
        if code != HTTPStatus.NOT_FOUND:
            super().send_error(code, message, explain)
            return
        self.log_error("code %d, message %s", code, message or "not found")
        self.send_response(code)
        self.send_header("Content-Type", "text/plain; charset=utf-8")
        self.send_header("X-Content-Type-Options", "nosniff")
        self.send_header("Content-Length", str(len(_NOT_FOUND_BODY)))
        self.end_headers()
        if self.command != "HEAD":
            self.wfile.write(_NOT_FOUND_BODY)

    def log_message(self, format: str, *args: object) -> None:
        logger.info("%s - %s", self.address_string(), format % args)


def make_server(
    public_dir: str | Path = "public",
    host: str = "",
    port: int = DEFAULT_PORT,
) -> ThreadingHTTPServer:
    """Create a server for ``public_dir`` bound to ``host`` and ``port``."""
    handler = functools.partial(SiteRequestHandler, directory=str(public_dir))
    return ThreadingHTTPServer((host, port), handler)


def run_server(
    public_dir: str | Path = "public",
    host: str = "",
    port: int = DEFAULT_PORT,
) -> None:
    """Serve ``public_dir`` until interrupted."""
    with make_server(public_dir, host, port) as server:
        logger.info("Server started on %s:%d", host, server.server_address[1])
        server.serve_forever()


def main(argv: Sequence[str] | None = None) -> int:
    """Build the site, then serve it; return the exit status."""
    parser = argparse.ArgumentParser(description="Build the static site and serve it.")
    parser.add_argument("--root", default=".", help="site root directory (default: current directory)")
    parser.add_argument("--host", default="", help="address to listen on (default: all interfaces)")
    parser.add_argument("--port", type=int, default=DEFAULT_PORT, help=f"port to listen on (default: {DEFAULT_PORT})")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(message)s")
    try:
        build_all(args.root)
    except BuildError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    try:
        run_server(site_public_dir(args.root), args.host, args.port)
    except KeyboardInterrupt:
        return 0
    except OSError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())