"""Shared constants for the git-activity-export application.

For environment-based configuration (author identity, log level), use the env module:
    from common.env import env
    author = env.git_author_name()
"""

# Directory created under the working directory by the git export
EXPORT_DIRECTORY_NAME = "git-contributions-export"

# Identity used for exported commits when GIT_AUTHOR_NAME / GIT_AUTHOR_EMAIL are unset
DEFAULT_AUTHOR_NAME = "Git Activity Tracer"
DEFAULT_AUTHOR_EMAIL = "noreply@example.com"

# Print a progress line every N commits during large exports
PROGRESS_INTERVAL = 100

# Conventional commit types whose prefix survives anonymization
CONVENTIONAL_COMMIT_TYPES: tuple[str, ...] = (
    "feat",
    "fix",
    "docs",
    "style",
    "refactor",
    "perf",
    "test",
    "chore",
    "build",
    "ci",
    "revert",
)
