"""Display utilities and UI helpers."""

import click

from .config import SEPARATOR_ID


def format_diff_options(options):
    """Format diff options as a numbered menu; separators become dividers."""
    lines = []
    idx = 0
    for opt in options:
        if opt.get("id") == SEPARATOR_ID:
            lines.append(click.style("  " + "─" * 24, fg="blue"))
            continue
        idx += 1
        lines.append(f"{idx}. {opt.get('label', '').strip()} [{opt.get('id')}]")
    return "\n".join(lines)


def format_diff_summary(result):
    """One-line summary of a diff result: label plus file count."""
    label = result.get("label", "")
    patch = result.get("patch") or ""
    if not patch.strip():
        return f"{label} (no changes)"
    files = sum(1 for line in patch.split("\n") if line.startswith("diff --git "))
    noun = "file" if files == 1 else "files"
    return f"{label} ({files} {noun})"
