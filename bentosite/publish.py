"""Building the site and publishing it with git."""

from __future__ import annotations

import argparse
import logging
import os
import subprocess
import sys
from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from pathlib import Path

from .build import build_all
from .rendering import BuildError, public_dir

_GIT_STEPS = (
    (("git", "add", "."), "git add ."),
    (("git", "commit", "-m"), "git commit"),
    (("git", "push"), "git push"),
)


class PublishError(Exception):
    """Raised when the site cannot be committed or pushed."""


def run_command(*args: str) -> None:
    """Run a command with the current standard streams; raise if it fails."""
    if not args:
        raise ValueError("no command given")
    subprocess.run(list(args), check=True)


@contextmanager
def _working_directory(folder: str | Path) -> Iterator[None]:
    previous = os.getcwd()
    try:
        os.chdir(folder)
    except OSError as exc:
        raise PublishError(f"failed to change directory to '{folder}': {exc}") from exc
    try:
        yield
    finally:
        os.chdir(previous)


def _prompt_message() -> str:
    try:
        return input("Enter commit message: ").strip()
    except EOFError as exc:
        raise PublishError("failed to read commit message: end of input") from exc


def git_commit_and_push(folder: str | Path, message: str | None = None) -> None:
    """Stage, commit and push everything in ``folder``.

    Without a ``message`` the commit message is asked for on standard input.
    """
    with _working_directory(folder):
        if message is None:
            message = _prompt_message()
        for command, label in _GIT_STEPS:
            args = (*command, message) if label == "git commit" else command
            try:
                run_command(*args)
            except (subprocess.CalledProcessError, OSError) as exc:
                raise PublishError(f"failed to run '{label}': {exc}") from exc
    print("Changes have been pushed successfully!")


def main(argv: Sequence[str] | None = None) -> int:
    """Build the site and publish the public directory; return the exit status."""
    parser = argparse.ArgumentParser(description="Build the static site and push it with git.")
    parser.add_argument("--root", default=".", help="site root directory (default: current directory)")
    parser.add_argument("-m", "--message", help="commit message (asked for when missing)")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(message)s")
    print("Building the static site...")
    try:
        build_all(args.root)
    except BuildError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    print("Build completed.")

    try:
        git_commit_and_push(public_dir(args.root), args.message)
    except PublishError as exc:
        print(f"Error: {exc}")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())