"""Review-diff: git diff collection for code review."""

# Re-export the public API for library-style usage (and tests).
from .cli import cli, main
from .config import __version__
from .context import build_diff_options, get_git_context
from .git import (  # noqa: F401
    DIFF_LABELS,
    BranchLookup,
    DiffType,
    generate_new_file_patch,
    get_current_branch,
    get_default_branch,
    get_untracked_file_patches,
    get_untracked_files,
    render_new_file_patch,
    resolve_current_branch,
    resolve_default_branch,
    run,
    run_git_diff,
)
from .ui import format_diff_options, format_diff_summary  # noqa: F401

__all__ = [
    "__version__",
    # CLI
    "cli",
    "main",
    # Git
    "run",
    "BranchLookup",
    "resolve_current_branch",
    "resolve_default_branch",
    "get_current_branch",
    "get_default_branch",
    "get_untracked_files",
    "render_new_file_patch",
    "generate_new_file_patch",
    "get_untracked_file_patches",
    "DiffType",
    "DIFF_LABELS",
    "run_git_diff",
    # Context
    "build_diff_options",
    "get_git_context",
    # UI
    "format_diff_options",
    "format_diff_summary",
]
