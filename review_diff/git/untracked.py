"""Patch synthesis for files git does not track yet."""

import asyncio
import os
from pathlib import Path

import click

from ..config import NEW_FILE_MODE
from .core import try_run


async def get_untracked_files(cwd=None):
    """Get list of untracked files (excluding ignored files)."""
    out = await try_run(["git", "ls-files", "--others", "--exclude-standard"], cwd=cwd)
    if not out:
        return []
    return [f for f in out.split("\n") if f.strip()]


def render_new_file_patch(path, content):
    """
    Render file contents as a git-style "new file" patch.

    Every line of ``content`` (split on newlines) becomes an added line, so a
    trailing newline in the file shows up as a final empty "+" line.
    """
    lines = content.split("\n")
    header = "\n".join(
        [
            f"diff --git a/{path} b/{path}",
            f"new file mode {NEW_FILE_MODE}",
            "--- /dev/null",
            f"+++ b/{path}",
            f"@@ -0,0 +1,{len(lines)} @@",
        ]
    )
    body = "\n".join(f"+{line}" for line in lines)
    return header + "\n" + body


async def generate_new_file_patch(path, cwd=None):
    """
    Generate a diff-style patch for an untracked file.

    Returns an empty string if the file cannot be read as UTF-8 text.
    """
    full_path = Path(cwd or os.getcwd()) / path
    try:
        raw = await asyncio.to_thread(full_path.read_bytes)
        content = raw.decode("utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        click.secho(f"Error reading untracked file {path}: {exc}", fg="yellow", err=True)
        return ""
    return render_new_file_patch(path, content)


async def get_untracked_file_patches(cwd=None):
    """Get patches for all untracked files, joined with newlines."""
    untracked_files = await get_untracked_files(cwd)
    if not untracked_files:
        return ""

    patches = await asyncio.gather(
        *(generate_new_file_patch(f, cwd=cwd) for f in untracked_files)
    )
    return "\n".join(p for p in patches if p)
