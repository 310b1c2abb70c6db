# bentosite

`bentosite` builds a small personal website from Markdown posts and Jinja2
templates. The site has a bento-style home page, a portfolio page, a blog
overview, one page per post, a music tools page and a dev tools page. The
package can also serve the built site for preview, and it can commit and push
the built site with git.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Site layout

Run the commands from the root of your site, or pass `--root`. The root contains:

- `content/posts/` holds one Markdown file per blog post. Only files ending in
  `.md` are read. The file name without `.md` becomes the post's slug.
- `content/assets/` holds static files. The whole tree is copied to
  `public/assets/`.
- `backend/ssg/templates/` holds the templates and `styles.css`. The stylesheet
  is copied to `public/styles.css`.

The generated site is written to `public/`.

### Templates

Templates are rendered with Jinja2 and autoescaping turned on. Rendered
Markdown, partials and playlist embeds are inserted without escaping. Each page
renders its first template. The other templates listed for the page must exist,
and that page can include them.

| Output                            | Templates                                   | Variables                                 |
|-----------------------------------|---------------------------------------------|-------------------------------------------|
| `public/index.html`               | `master.html`, `contact.html`               | `portfolio`, `blog`, `music_tools`, `dev_tools` |
| `public/portfolio.html`           | `portfolio.html`, `nav.html`, `contact.html` | `playlist1`, `playlist2`                  |
| `public/blog.html`                | `blog.html`, `nav.html`, `contact.html`      | `posts`, `post`                           |
| `public/blog/posts/<slug>.html`   | `posts.html`                                | `title`, `content`, `hashtags`, `date`    |
| `public/music-tools.html`         | `music-tools.html`, `nav.html`, `contact.html` | `tools`                                 |
| `public/dev-tools.html`           | `dev-tools.html`, `nav.html`, `contact.html`   | `tools`                                 |

The home page variables hold the contents of `partials/portfolio.html`,
`partials/blog.html`, `partials/music-tools.html` and `partials/dev-tools.html`
from the templates directory.

On the blog page, each item in `posts` has `slug`, `title` and `date`. The
variable `post` holds the newest post, with `title`, `content`, `hashtags` and
`date`, or it is `None` when there are no posts.

Each entry in `tools` has `name` and `link`. On the dev tools page, these values
are inserted without escaping.

### Writing a post

```
Title: My first post
Date: 2024-05-01
Some text in **Markdown**.

#music #tools
```

- The `Title:` and `Date:` values are taken from the first lines that start
  with them. A post without a title uses its slug as the title.
- The first two lines are always dropped from the body.
- Every `#word` left in the body is collected as a hashtag, in order.
- Any run of lines at the end of the body that start with `#` is removed.
- The body is rendered as XHTML. Tables, fenced code and heading ids are
  supported, and single newlines become `<br />`.

The blog page lists posts newest first by file modification time. It shows the
newest post in full.

## Commands

Build the whole site into `public/`:

```
bentosite-build [--root DIR]
```

Build the site, then serve `public/` on port 8080:

```
bentosite-serve [--root DIR] [--host HOST] [--port PORT]
```

Files in `public/` are served as they are. A directory is served through its
`index.html` when it has one. These routes map to single files:

- `/blog` → `blog.html`
- `/blog-index` → `blog-index.html`
- `/portfolio` → `portfolio.html`
- `/music-tools` → `music-tools.html`
- `/dev-tools` → `dev-tools.html`
- `/blog/posts/<slug>` → `posts/<slug>.html`

A missing file gets a plain `404 page not found`.

Build the site, then run `git add .`, `git commit -m <message>` and `git push`
inside `public/`. That directory must be a git working copy. Without
`-m`, you are asked for the message.

```
bentosite-publish [--root DIR] [-m MESSAGE]
```

## Using it from Python

```python
from bentosite.build import build_all
from bentosite.blog import extract_hashtags, extract_metadata, parse_post

build_all(".")

title, date = extract_metadata("Title: Hello\nDate: 2024-05-01\n")
tags = extract_hashtags("notes #go #web")  # ["go", "web"]
post = parse_post("hello", "Title: Hello\nDate: 2024-05-01\nBody\n#go")
```

The page builders live in `bentosite.pages` and `bentosite.blog`. The file
copying helpers live in `bentosite.assets`. The server, built with
`make_server` and `run_server`, lives in `bentosite.server`.

When a build step cannot read or write a file it needs, it raises
`bentosite.rendering.BuildError`. The one exception is a single post page that
fails to build: it is logged and skipped. A failed git step raises
`bentosite.publish.PublishError`.

## Limitations

- No page is generated for `blog-index.html`, so `/blog-index` answers "not
  found" unless you put that file in `public/` yourself.
- Post pages are written to `public/blog/posts/`. The `/blog/posts/<slug>` route
  looks in `public/posts/`, so the route cannot reach the built posts.
- The music tools, dev tools and portfolio playlists are fixed in
  `bentosite.pages`. They are not read from configuration.