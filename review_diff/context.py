"""Branch context and the menu of diff options offered to reviewers."""

from .git import DIFF_LABELS, DiffType, get_branches


def build_diff_options(current_branch, default_branch):
    """
    Build the ordered diff options for the given branches.

    The branch comparison is only offered off the default branch.
    """
    options = [
        {"id": DiffType.UNCOMMITTED.value, "label": DIFF_LABELS[DiffType.UNCOMMITTED.value]},
        {"id": DiffType.LAST_COMMIT.value, "label": DIFF_LABELS[DiffType.LAST_COMMIT.value]},
    ]
    if current_branch != default_branch:
        options.append({"id": DiffType.BRANCH.value, "label": f"vs {default_branch}"})
    return options


async def get_git_context(cwd=None):
    """Get branch info and the available diff options."""
    current_branch, default_branch = await get_branches(cwd)
    return {
        "current_branch": current_branch,
        "default_branch": default_branch,
        "diff_options": build_diff_options(current_branch, default_branch),
    }
