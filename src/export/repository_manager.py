"""Git repository operations for exporting contributions as commits."""

import os
import subprocess
from datetime import datetime, timezone
from pathlib import Path

from common.logger import get_logger

from .errors import CommitError, RepositoryInitError
from .models import CommitRequest

logger = get_logger(__name__)

GIT_EXECUTABLE = "git"

# Set by git while running hooks; each points git at some other repository
REPOSITORY_LOCATING_VARIABLES = frozenset(
    {
        "GIT_DIR",
        "GIT_WORK_TREE",
        "GIT_INDEX_FILE",
        "GIT_OBJECT_DIRECTORY",
        "GIT_ALTERNATE_OBJECT_DIRECTORIES",
        "GIT_COMMON_DIR",
        "GIT_NAMESPACE",
        "GIT_PREFIX",
    }
)


def git_environment(overrides: dict[str, str] | None = None) -> dict[str, str]:
    """
    Build the environment for one git subprocess.

    Starts from the current environment without the repository-locating
    variables, then applies ``overrides``. The current process environment
    is not modified.
    """
    environment = {
        key: value
        for key, value in os.environ.items()
        if key not in REPOSITORY_LOCATING_VARIABLES
    }
    environment.update(overrides or {})
    return environment


def format_git_date(date: datetime) -> str:
    """
    Format a datetime for GIT_AUTHOR_DATE / GIT_COMMITTER_DATE.

    Naive datetimes are taken as UTC. Output is ISO 8601 with a numeric
    offset, e.g. ``2026-01-01T10:00:00+0000``.
    """
    if date.tzinfo is None:
        date = date.replace(tzinfo=timezone.utc)
    return date.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S%z")


class RepositoryManager:
    """Owns one on-disk git repository used as an export target.

    The repository is only ever appended to: commits are created, never
    rewritten or deleted.
    """

    def __init__(self, repository_path: Path | str):
        """
        Args:
            repository_path: Directory where the git repository lives
        """
        self._repository_path = Path(repository_path)

    def get_repository_path(self) -> Path:
        """Get the path to the repository."""
        return self._repository_path

    def _git(
        self,
        *args: str,
        env_overrides: dict[str, str] | None = None,
    ) -> subprocess.CompletedProcess:
        logger.debug(f"git {' '.join(args)} (in {self._repository_path})")
        return subprocess.run(
            [GIT_EXECUTABLE, *args],
            cwd=self._repository_path,
            capture_output=True,
            encoding="utf-8",
            errors="replace",
            check=True,
            env=git_environment(env_overrides),
        )

    def initialize_repository(self) -> bool:
        """
        Initialize the repository, or open it if it already exists.

        Existence is decided by ``<path>/.git`` alone. ``git rev-parse`` would
        also report true when an ancestor directory is a repository.

        Returns:
            True if a new repository was created, False if it already existed

        Raises:
            RepositoryInitError: If the directory or repository cannot be created
        """
        try:
            self._repository_path.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise RepositoryInitError(
                f"Cannot create directory {self._repository_path}: {e}"
            ) from e

        if (self._repository_path / ".git").exists():
            logger.debug(f"Using existing repository at {self._repository_path}")
            return False

        try:
            self._git("init")
            # Never block on signing setup for synthetic commits
            self._git("config", "commit.gpgsign", "false")
        except subprocess.CalledProcessError as e:
            raise RepositoryInitError(
                f"git {' '.join(e.cmd[1:])} failed: {(e.stderr or '').strip()}"
            ) from e
        except OSError as e:
            raise RepositoryInitError(f"Cannot run git: {e}") from e

        logger.info(f"Created new repository at {self._repository_path}")
        return True

    def create_commit(self, request: CommitRequest) -> None:
        """
        Create an empty commit with a custom author, committer and date.

        Both author and committer dates are set so contribution graphs show
        the requested day. Dates and committer identity are handed to git
        through an environment scoped to this one subprocess; the current
        process environment is left untouched.

        Args:
            request: Message, identity and date for the commit

        Raises:
            CommitError: If git fails to create the commit
        """
        date_string = format_git_date(request.date)
        commit_env = {
            "GIT_AUTHOR_DATE": date_string,
            "GIT_COMMITTER_DATE": date_string,
            "GIT_COMMITTER_NAME": request.author_name,
            "GIT_COMMITTER_EMAIL": request.author_email,
        }

        try:
            self._git(
                "commit",
                "--allow-empty",
                "--message",
                request.message,
                "--author",
                request.author,
                env_overrides=commit_env,
            )
        except subprocess.CalledProcessError as e:
            raise CommitError((e.stderr or e.stdout or str(e)).strip()) from e
        except OSError as e:
            raise CommitError(f"Cannot run git: {e}") from e

    def get_commit_count(self) -> int:
        """
        Get the total number of commits reachable from HEAD.

        Returns:
            Number of commits, or 0 if the history is empty or cannot be read
        """
        try:
            result = self._git("rev-list", "--count", "HEAD")
            return int(result.stdout.strip())
        except (subprocess.CalledProcessError, OSError, ValueError) as e:
            logger.debug(f"Commit count unavailable for {self._repository_path}: {e}")
            return 0

    @staticmethod
    def is_git_available() -> bool:
        """Check whether git is installed and runnable."""
        try:
            subprocess.run(
                [GIT_EXECUTABLE, "--version"],
                capture_output=True,
                encoding="utf-8",
                errors="replace",
                check=True,
            )
        except (subprocess.CalledProcessError, OSError):
            return False
        return True
