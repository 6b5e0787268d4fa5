"""Git utilities package."""

from .branches import (
    BranchLookup,
    fallback_branch,
    get_branches,
    get_current_branch,
    get_default_branch,
    resolve_current_branch,
    resolve_default_branch,
)
from .core import run, try_run
from .diff import (
    DIFF_LABELS,
    DiffType,
    combine_patches,
    parse_diff_type,
    run_git_diff,
)
from .untracked import (
    generate_new_file_patch,
    get_untracked_file_patches,
    get_untracked_files,
    render_new_file_patch,
)

__all__ = [
    "run",
    "try_run",
    "BranchLookup",
    "fallback_branch",
    "resolve_current_branch",
    "resolve_default_branch",
    "get_current_branch",
    "get_default_branch",
    "get_branches",
    "get_untracked_files",
    "render_new_file_patch",
    "generate_new_file_patch",
    "get_untracked_file_patches",
    "DiffType",
    "DIFF_LABELS",
    "parse_diff_type",
    "combine_patches",
    "run_git_diff",
]
