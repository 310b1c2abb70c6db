from pathlib import Path

import pytest

from bentosite.build import build_all, main
from bentosite.rendering import BuildError

TOOL_LIST = '{% for tool in tools %}<a href="{{ tool.link }}">{{ tool.name }}</a>{% endfor %}'
STYLE = "body { margin: 0; }\n"


def _make_site(root: Path) -> None:
    tdir = root / "backend" / "ssg" / "templates"
    (tdir / "partials").mkdir(parents=True)
    templates = {
        "master.html": '<main>{{ portfolio }}{{ blog }}{{ music_tools }}{{ dev_tools }}</main>{% include "contact.html" %}',
        "contact.html": "<footer>contact</footer>",
        "nav.html": "<nav>nav</nav>",
        "portfolio.html": '{% include "nav.html" %}{{ playlist1 }}{{ playlist2 }}',
        "music-tools.html": TOOL_LIST,
        "dev-tools.html": TOOL_LIST,
        "blog.html": "{% for p in posts %}<li>{{ p.title }}</li>{% endfor %}{% if post %}{{ post.content }}{% endif %}",
        "posts.html": "<h1>{{ title }}</h1>{{ content }}",
        "styles.css": STYLE,
    }
    for name, text in templates.items():
        (tdir / name).write_text(text)
    for name in ("portfolio.html", "blog.html", "music-tools.html", "dev-tools.html"):
        (tdir / "partials" / name).write_text(f"<p>{name}</p>")
    posts = root / "content" / "posts"
    posts.mkdir(parents=True)
    (posts / "hello.md").write_text("Title: Hello World\nDate: 2024-01-01\nSome body text\n#go #web")
    assets = root / "content" / "assets" / "img"
    assets.mkdir(parents=True)
    (assets / "logo.svg").write_text("<svg/>")


@pytest.fixture
def site(tmp_path):
    _make_site(tmp_path)
    return tmp_path


def test_build_all_writes_every_page(site):
    out = build_all(site)
    assert out == site / "public"
    for name in ("index.html", "portfolio.html", "blog.html", "music-tools.html", "dev-tools.html"):
        assert (out / name).is_file()
    assert (out / "styles.css").read_text() == STYLE
    assert (out / "assets" / "img" / "logo.svg").read_text() == "<svg/>"


def test_build_all_renders_posts(site):
    out = build_all(site)
    post = (out / "blog" / "posts" / "hello.html").read_text()
    assert "<h1>Hello World</h1>" in post
    assert "Some body text" in post
    assert "#go" not in post
    assert "<li>Hello World</li>" in (out / "blog.html").read_text()


def test_build_all_creates_public_directory(site):
    assert not (site / "public").exists()
    build_all(site)
    assert (site / "public").is_dir()


def test_build_all_missing_templates_raises(tmp_path):
    with pytest.raises(BuildError):
        build_all(tmp_path)


def test_main_builds_site(site):
    assert main(["--root", str(site)]) == 0
    assert (site / "public" / "index.html").is_file()


def test_main_reports_failure(tmp_path, capsys):
    assert main(["--root", str(tmp_path)]) == 1
    assert "Error:" in capsys.readouterr().err