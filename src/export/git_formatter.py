"""Export contributions as backdated commits in a local git repository.

The resulting repository can be pushed to GitHub to populate the
contribution graph with activity from GitLab and other platforms.
"""

from pathlib import Path

from common.constants import EXPORT_DIRECTORY_NAME, PROGRESS_INTERVAL
from common.env import env
from common.logger import get_logger, progress

from .anonymizer import anonymize_message, anonymize_repository
from .errors import CommitError, GitUnavailableError
from .models import (
    CommitRequest,
    Contribution,
    ExportSummary,
    FormatterOptions,
    FormatterResult,
    SkippedContribution,
)
from .repository_manager import RepositoryManager

logger = get_logger(__name__)


def build_commit_message(contribution: Contribution, anonymize: bool = False) -> str:
    """
    Build a commit message from a contribution.

    Format: ``[type]: repository: (target): {project_id}: text``, with absent
    fields left out.

    Examples:
        [commit]: owner/repo: feat: add feature
        [pr]: repo_1a2b3c4d: (main): hash_5e6f7a8b
    """
    parts = [f"[{contribution.type}]"]

    if contribution.repository:
        parts.append(
            anonymize_repository(contribution.repository) if anonymize else contribution.repository
        )

    if contribution.target:
        parts.append(f"({contribution.target})")

    if contribution.project_id:
        parts.append(f"{{{contribution.project_id}}}")

    if contribution.text:
        parts.append(anonymize_message(contribution.text) if anonymize else contribution.text)

    return ": ".join(parts)


def sort_contributions(contributions: list[Contribution]) -> list[Contribution]:
    """Sort oldest first. Equal timestamps keep their input order."""
    return sorted(contributions, key=lambda contribution: contribution.instant)


class GitFormatter:
    """Create one empty commit per contribution in a local repository."""

    def __init__(self, directory_name: str = EXPORT_DIRECTORY_NAME):
        """
        Args:
            directory_name: Repository directory, relative to the working directory
        """
        self.directory_name = directory_name

    def repository_path(self) -> Path:
        return Path.cwd() / self.directory_name

    def format(
        self,
        contributions: list[Contribution],
        options: FormatterOptions | None = None,
    ) -> FormatterResult:
        """
        Export contributions as commits.

        Args:
            contributions: Contributions to export, in any order
            options: Formatter options (anonymization)

        Returns:
            Result with the export summary

        Raises:
            GitUnavailableError: If git is not installed
            RepositoryInitError: If the repository cannot be initialized
        """
        options = options or FormatterOptions()

        if not RepositoryManager.is_git_available():
            raise GitUnavailableError(
                "Git is not installed or not available in PATH. "
                "Please install git to use the git export format."
            )

        if not contributions:
            return FormatterResult(
                content=(
                    "No contributions to export. The repository was not created "
                    "because there are no contributions in this range."
                )
            )

        author_name = env.git_author_name()
        author_email = env.git_author_email()

        manager = RepositoryManager(self.repository_path())
        manager.initialize_repository()
        baseline = manager.get_commit_count()

        ordered = sort_contributions(contributions)
        successful, skipped = self._create_commits(
            manager, ordered, author_name, author_email, options.anonymize
        )

        # Recount rather than trust the success counter
        total_commits = manager.get_commit_count()

        summary = ExportSummary(
            repository_path=manager.get_repository_path(),
            total_commits=total_commits,
            new_commits=total_commits - baseline,
            contributions_processed=len(contributions),
            successful_commits=successful,
            author_name=author_name,
            author_email=author_email,
            anonymized=options.anonymize,
            skipped=skipped,
        )
        return FormatterResult(content=summary.render(self.directory_name), summary=summary)

    def _create_commits(
        self,
        manager: RepositoryManager,
        ordered: list[Contribution],
        author_name: str,
        author_email: str,
        anonymize: bool,
    ) -> tuple[int, list[SkippedContribution]]:
        successful = 0
        skipped: list[SkippedContribution] = []

        for contribution in ordered:
            request = CommitRequest(
                message=build_commit_message(contribution, anonymize),
                author_name=author_name,
                author_email=author_email,
                date=contribution.instant,
            )
            reason = self._try_commit(manager, request)

            if reason is not None:
                logger.warning(
                    f"Failed to create commit for {contribution.type} "
                    f"at {contribution.timestamp}: {reason}"
                )
                skipped.append(SkippedContribution(contribution=contribution, reason=reason))
                continue

            successful += 1
            if successful % PROGRESS_INTERVAL == 0:
                progress(f"  Progress: {successful}/{len(ordered)} commits created...")

        return successful, skipped

    @staticmethod
    def _try_commit(manager: RepositoryManager, request: CommitRequest) -> str | None:
        """Create the commit; return the failure reason instead of raising."""
        try:
            manager.create_commit(request)
        except CommitError as e:
            return str(e)
        return None
