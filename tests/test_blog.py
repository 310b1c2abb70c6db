import os

import pytest

from bentosite.blog import (
    BlogPageData,
    BlogPost,
    ParsedPost,
    PostData,
    build_blog,
    build_posts,
    extract_hashtags,
    extract_metadata,
    parse_post,
    render_markdown,
)
from bentosite.rendering import HTML, BuildError, public_dir, templates_dir


def write_post(root, name, title, date, body, mtime=None):
    posts = root / "content" / "posts"
    posts.mkdir(parents=True, exist_ok=True)
    path = posts / name
    path.write_text(f"Title: {title}\nDate: {date}\n{body}", encoding="utf-8")
    if mtime is not None:
        os.utime(path, (mtime, mtime))
    return path


@pytest.fixture
def site(tmp_path):
    tdir = templates_dir(tmp_path)
    tdir.mkdir(parents=True)
    (tdir / "posts.html").write_text(
        "<h1>{{ title }}</h1><time>{{ date }}</time>{{ content }}"
        "{% for tag in hashtags %}<span>{{ tag }}</span>{% endfor %}",
        encoding="utf-8",
    )
    (tdir / "blog.html").write_text(
        "{% include 'nav.html' %}<ul>{% for p in posts %}<li>{{ p.slug }}|{{ p.title }}|{{ p.date }}</li>"
        "{% endfor %}</ul>{% if post %}<main>{{ post.content }}</main>{% endif %}"
        "{% include 'contact.html' %}",
        encoding="utf-8",
    )
    (tdir / "nav.html").write_text("<nav></nav>", encoding="utf-8")
    (tdir / "contact.html").write_text("<footer></footer>", encoding="utf-8")
    public_dir(tmp_path).mkdir()
    return tmp_path


def test_extract_hashtags():
    assert extract_hashtags("hello #go and #python_3 here") == ["go", "python_3"]


def test_extract_hashtags_none():
    assert extract_hashtags("no tags at all") == []


def test_extract_metadata():
    assert extract_metadata("Title:  My Post \nDate: 2024-05-01\nbody") == ("My Post", "2024-05-01")


def test_extract_metadata_missing():
    assert extract_metadata("just text\nmore") == ("", "")


def test_parse_post_strips_metadata_and_tags():
    parsed = parse_post("slug", "Title: Hello\nDate: 2024-01-01\nBody text\n#go #web")
    assert parsed == ParsedPost(
        slug="slug", title="Hello", date="2024-01-01", hashtags=["go", "web"], body="Body text"
    )


def test_parse_post_trailing_newline_keeps_tag_line():
    parsed = parse_post("slug", "Title: Hello\nDate: 2024-01-01\nBody text\n#go\n")
    assert parsed.body == "Body text\n#go\n"
    assert parsed.hashtags == ["go"]


def test_parse_post_title_falls_back_to_slug():
    parsed = parse_post("my-slug", "Date: 2024-01-01\nline two\ncontent")
    assert parsed.title == "my-slug"
    assert parsed.body == "content"


def test_render_markdown_heading_id():
    html = render_markdown("# Hello World")
    assert isinstance(html, HTML)
    assert '<h1 id="hello-world">Hello World</h1>' in html


def test_render_markdown_hard_wraps():
    assert "<br />" in render_markdown("line one\nline two")


def test_render_markdown_table():
    html = render_markdown("| a | b |\n|---|---|\n| 1 | 2 |")
    assert "<table>" in html
    assert "<td>1</td>" in html


def test_build_posts(site):
    write_post(site, "first.md", "First", "2024-01-01", "Some **bold** text\n#news")
    (site / "content" / "posts" / "notes.txt").write_text("ignored", encoding="utf-8")
    written = build_posts(site)
    out = public_dir(site) / "blog" / "posts"
    assert written == [out / "first.html"]
    page = (out / "first.html").read_text(encoding="utf-8")
    assert "<h1>First</h1>" in page
    assert "<strong>bold</strong>" in page
    assert "<span>news</span>" in page
    assert not (out / "notes.html").exists()


def test_build_posts_missing_template(tmp_path):
    write_post(tmp_path, "a.md", "A", "d", "x")
    with pytest.raises(BuildError):
        build_posts(tmp_path)


def test_build_posts_missing_posts_dir(site):
    with pytest.raises(BuildError):
        build_posts(site)


def test_build_blog_orders_newest_first(site):
    write_post(site, "old.md", "Old", "2023-01-01", "old body", mtime=1_000_000)
    write_post(site, "new.md", "New", "2024-01-01", "new body\n#tag", mtime=2_000_000)
    data = build_blog(site)
    assert [p.slug for p in data.posts] == ["new", "old"]
    assert data.posts[0] == BlogPost(slug="new", title="New", date="2024-01-01")
    assert data.post.title == "New"
    assert data.post.hashtags == ["tag"]
    page = (public_dir(site) / "blog.html").read_text(encoding="utf-8")
    assert page.index("<li>new|New|2024-01-01</li>") < page.index("<li>old|Old|2023-01-01</li>")
    assert "<main><p>new body</p></main>" in page.replace("\n", "")


def test_build_blog_without_posts(site):
    (site / "content" / "posts").mkdir(parents=True)
    data = build_blog(site)
    assert data == BlogPageData(posts=[], post=None)
    assert "<main>" not in (public_dir(site) / "blog.html").read_text(encoding="utf-8")


def test_post_data_defaults():
    post = PostData(title="t", content=HTML("<p>x</p>"))
    assert post.hashtags == []
    assert post.date == ""