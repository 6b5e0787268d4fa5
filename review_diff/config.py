"""Configuration constants and settings for review-diff."""

__version__ = "0.1.0"

# Fallbacks when git cannot answer.
CURRENT_BRANCH_FALLBACK = "HEAD"
DEFAULT_BRANCH_FALLBACK = "master"
LOCAL_MAIN_BRANCH = "main"

REMOTE_HEAD_REF = "refs/remotes/origin/HEAD"
REMOTE_REF_PREFIX = "refs/remotes/origin/"

NEW_FILE_MODE = "100644"

LABEL_UNKNOWN = "Unknown diff type"
SEPARATOR_ID = "separator"

# Fixed labels per diff type; the branch label names its base.
DIFF_LABELS = {
    "uncommitted": "Uncommitted changes",
    "staged": "Staged changes",
    "unstaged": "Unstaged changes",
    "last-commit": "Last commit",
}
