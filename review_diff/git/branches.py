"""Current and default branch detection."""

import asyncio
from typing import NamedTuple

from ..config import (
    CURRENT_BRANCH_FALLBACK,
    DEFAULT_BRANCH_FALLBACK,
    LOCAL_MAIN_BRANCH,
    REMOTE_HEAD_REF,
    REMOTE_REF_PREFIX,
)
from .core import try_run

FALLBACK = "fallback"


class BranchLookup(NamedTuple):
    """A resolved branch name and the source that produced it."""

    name: str
    source: str

    @property
    def is_fallback(self):
        return self.source == FALLBACK


def fallback_branch(kind):
    """
    Return the fixed branch name used when git cannot answer.

    ``kind`` is either "current" or "default".
    """
    if kind == "current":
        return BranchLookup(CURRENT_BRANCH_FALLBACK, FALLBACK)
    if kind == "default":
        return BranchLookup(DEFAULT_BRANCH_FALLBACK, FALLBACK)
    raise ValueError(f"Unknown branch kind: {kind}")


async def resolve_current_branch(cwd=None):
    """Resolve HEAD's abbreviated ref name."""
    name = await try_run(["git", "rev-parse", "--abbrev-ref", "HEAD"], cwd=cwd)
    if not name:
        return fallback_branch("current")
    return BranchLookup(name, "git")


async def _origin_head(cwd):
    ref = await try_run(["git", "symbolic-ref", REMOTE_HEAD_REF], cwd=cwd)
    if not ref:
        return None
    if ref.startswith(REMOTE_REF_PREFIX):
        ref = ref[len(REMOTE_REF_PREFIX):]
    return ref or None


async def _local_main_exists(cwd):
    out = await try_run(
        ["git", "show-ref", "--verify", "--quiet", f"refs/heads/{LOCAL_MAIN_BRANCH}"],
        cwd=cwd,
    )
    return out is not None


async def resolve_default_branch(cwd=None):
    """
    Detect the default branch (main, master, etc.)

    Strategy:
    1. origin's HEAD reference
    2. a local branch named 'main', if it exists
    3. 'master', unverified
    """
    name = await _origin_head(cwd)
    if name:
        return BranchLookup(name, "origin-head")

    if await _local_main_exists(cwd):
        return BranchLookup(LOCAL_MAIN_BRANCH, "local-main")

    return fallback_branch("default")


async def get_current_branch(cwd=None):
    """Get the current git branch name, or "HEAD" when it cannot be resolved."""
    return (await resolve_current_branch(cwd)).name


async def get_default_branch(cwd=None):
    """Get the repository's default branch name."""
    return (await resolve_default_branch(cwd)).name


async def get_branches(cwd=None):
    """Fetch (current_branch, default_branch) concurrently."""
    current, default = await asyncio.gather(
        get_current_branch(cwd),
        get_default_branch(cwd),
    )
    return current, default
