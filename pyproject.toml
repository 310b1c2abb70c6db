[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bentosite"
version = "0.1.0"
description = "A small static site generator for a personal bento-style homepage, blog and tool pages, with a preview server and git publishing."
requires-python = ">=3.10"
dependencies = [
    "jinja2",
    "markdown",
]
keywords = ["static site generator", "blog", "markdown", "jinja2", "portfolio"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: Site Management",
    "Topic :: Text Processing :: Markup :: Markdown",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
bentosite-build = "bentosite.build:main"
bentosite-serve = "bentosite.server:main"
bentosite-publish = "bentosite.publish:main"

[tool.hatch.build.targets.wheel]
packages = ["bentosite"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
