"""Diff collection for each review target."""

import asyncio
import enum
import subprocess

import click

from ..config import DIFF_LABELS, LABEL_UNKNOWN
from .branches import get_default_branch
from .core import run
from .untracked import get_untracked_file_patches


class DiffType(str, enum.Enum):
    UNCOMMITTED = "uncommitted"
    STAGED = "staged"
    UNSTAGED = "unstaged"
    LAST_COMMIT = "last-commit"
    BRANCH = "branch"


# Diff types that also pick up files git does not track yet.
WITH_UNTRACKED = {DiffType.UNCOMMITTED, DiffType.UNSTAGED, DiffType.BRANCH}


def parse_diff_type(value):
    """Return the DiffType for ``value``, or None if it is not one."""
    try:
        return DiffType(value)
    except ValueError:
        return None


def branch_label(default_branch):
    return f"Changes vs {default_branch}"


def diff_command(diff_type, default_branch):
    """Return the git argv producing the tracked diff for ``diff_type``."""
    if diff_type is DiffType.UNCOMMITTED:
        return ["git", "diff", "HEAD"]
    if diff_type is DiffType.STAGED:
        return ["git", "diff", "--staged"]
    if diff_type is DiffType.UNSTAGED:
        return ["git", "diff"]
    if diff_type is DiffType.LAST_COMMIT:
        return ["git", "diff", "HEAD~1..HEAD"]
    if default_branch.startswith("-"):
        raise ValueError(f"Invalid base branch: {default_branch}")
    return ["git", "diff", f"{default_branch}..HEAD"]


def combine_patches(tracked, untracked):
    """Append untracked patches to a tracked diff, separated by one newline."""
    return tracked + ("\n" + untracked if untracked else "")


async def _collect(diff_type, default_branch, cwd):
    cmd = diff_command(diff_type, default_branch)
    if diff_type not in WITH_UNTRACKED:
        return await run(cmd, cwd=cwd, strip=False)

    # Let both finish before surfacing a failure so no task outlives the call.
    tracked, untracked = await asyncio.gather(
        run(cmd, cwd=cwd, strip=False),
        get_untracked_file_patches(cwd),
        return_exceptions=True,
    )
    for outcome in (tracked, untracked):
        if isinstance(outcome, BaseException):
            raise outcome
    return combine_patches(tracked, untracked)


async def run_git_diff(diff_type, default_branch=None, cwd=None):
    """
    Run git diff for the given review target.

    Args:
        diff_type: A DiffType or its string value
        default_branch: Base for the "branch" diff; detected when omitted
        cwd: Repository working directory (defaults to the process cwd)

    Returns:
        Dict with "patch" and "label". Failures yield an empty patch and an
        "Error: <diff type>" label instead of raising.
    """
    key = getattr(diff_type, "value", diff_type)
    parsed = parse_diff_type(key)
    if parsed is None:
        return {"patch": "", "label": LABEL_UNKNOWN}

    try:
        if parsed is DiffType.BRANCH:
            if not default_branch:
                default_branch = await get_default_branch(cwd)
            label = branch_label(default_branch)
        else:
            label = DIFF_LABELS[parsed.value]
        patch = await _collect(parsed, default_branch, cwd)
    except (subprocess.CalledProcessError, OSError, ValueError) as exc:
        # e.g. no commits yet, HEAD~1 missing, unknown or malformed base branch
        detail = exc.stderr.strip() if getattr(exc, "stderr", None) else str(exc)
        click.secho(f"Git diff error for {key}: {detail}", fg="red", err=True)
        return {"patch": "", "label": f"Error: {key}"}

    return {"patch": patch, "label": label}
