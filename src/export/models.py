"""Data models for contribution export."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Any


def parse_timestamp(value: str) -> datetime:
    """
    Parse an ISO 8601 timestamp to an aware UTC datetime.

    Naive timestamps are taken as UTC. A trailing 'Z' is accepted.

    Raises:
        ValueError: If the value is not a parseable timestamp
    """
    if not isinstance(value, str) or not value.strip():
        raise ValueError(f"Invalid timestamp: {value!r}")

    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"

    try:
        parsed = datetime.fromisoformat(text)
    except ValueError as e:
        raise ValueError(f"Invalid timestamp: {value!r}") from e

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


OPTIONAL_TEXT_FIELDS = ("repository", "project_id", "target", "text", "url")


@dataclass(frozen=True)
class Contribution:
    """One record of developer activity (commit, pull request, review, ...)."""

    type: str
    timestamp: str
    repository: str | None = None
    project_id: str | None = None
    target: str | None = None
    text: str | None = None
    url: str | None = None

    def __post_init__(self):
        if not self.type:
            raise ValueError("Contribution is missing 'type'")
        if not isinstance(self.type, str):
            raise ValueError(f"Contribution 'type' must be a string, got {self.type!r}")
        for name in OPTIONAL_TEXT_FIELDS:
            value = getattr(self, name)
            if value is not None and not isinstance(value, str):
                raise ValueError(f"Contribution '{name}' must be a string, got {value!r}")
        if not self.timestamp:
            raise ValueError("Contribution is missing 'timestamp'")
        # Fail early on unparseable timestamps, before any export side effects
        parse_timestamp(self.timestamp)

    @property
    def instant(self) -> datetime:
        """The timestamp as an aware UTC datetime."""
        return parse_timestamp(self.timestamp)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Contribution":
        """
        Build a contribution from a wire-format dictionary.

        Accepts both ``projectId`` and ``project_id``. Numeric project
        IDs (as GitLab returns them) are converted to strings. Unknown keys are
        ignored.

        Raises:
            ValueError: If 'type' or 'timestamp' is missing or invalid, or an
                optional field is not a string
        """
        if not isinstance(data, dict):
            raise ValueError(f"Contribution must be an object, got {type(data).__name__}")

        project_id = data.get("projectId", data.get("project_id"))
        if isinstance(project_id, int) and not isinstance(project_id, bool):
            project_id = str(project_id)

        return cls(
            type=data.get("type") or "",
            timestamp=data.get("timestamp") or "",
            repository=data.get("repository"),
            project_id=project_id,
            target=data.get("target"),
            text=data.get("text"),
            url=data.get("url"),
        )


@dataclass(frozen=True)
class FormatterOptions:
    """Options shared by all formatters."""

    anonymize: bool = False
    with_links: bool = False


@dataclass(frozen=True)
class CommitRequest:
    """A single synthetic commit to create."""

    message: str
    author_name: str
    author_email: str
    date: datetime

    @property
    def author(self) -> str:
        """Identity string in git's 'Name <email>' form."""
        return f"{self.author_name} <{self.author_email}>"


@dataclass(frozen=True)
class SkippedContribution:
    """A contribution whose commit could not be created."""

    contribution: Contribution
    reason: str


@dataclass
class ExportSummary:
    """Outcome of a git export run.

    Attributes:
        repository_path: Location of the export repository
        total_commits: Commit count after the run
        new_commits: total_commits minus the count measured before the run
        contributions_processed: Number of contributions in the batch
        successful_commits: Commits this run reported as created
        author_name: Author stamped on the commits
        author_email: Author email stamped on the commits
        anonymized: Whether repository and text were anonymized
        skipped: Contributions whose commit failed
    """

    repository_path: Path
    total_commits: int
    new_commits: int
    contributions_processed: int
    successful_commits: int
    author_name: str
    author_email: str
    anonymized: bool = False
    skipped: list[SkippedContribution] = field(default_factory=list)

    def render(self, directory_name: str) -> str:
        """Render the human-readable summary, including push instructions."""
        lines = [
            "",
            "✅ Git export completed successfully!",
            "",
            f"Repository location: {self.repository_path}",
            f"Total commits: {self.total_commits}",
            f"New commits created: {self.new_commits}",
            f"Contributions exported: {self.contributions_processed}",
            f"Author: {self.author_name} <{self.author_email}>",
        ]

        if self.anonymized:
            lines.append("Anonymization: enabled")

        if self.skipped:
            lines.append(f"Skipped (commit failed): {len(self.skipped)}")

        lines.extend(
            [
                "",
                "To push to GitHub:",
                f"  cd {directory_name}",
                "  git remote add origin git@github.com:username/activity-showcase.git",
                "  git branch -M main",
                "  git push -u origin main --force",
            ]
        )
        return "\n".join(lines)


@dataclass
class FormatterResult:
    """What a formatter hands back to the caller."""

    content: str
    summary: ExportSummary | None = None
