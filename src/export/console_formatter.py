"""Plain-text daily report of contributions."""

from itertools import groupby

from .anonymizer import anonymize_message, anonymize_repository
from .git_formatter import sort_contributions
from .models import Contribution, FormatterOptions, FormatterResult


def format_line(contribution: Contribution, options: FormatterOptions) -> str:
    """Render one contribution as ``type: HH:MM:SS: [repo]: {project}: (target): text``."""
    parts = [contribution.type, contribution.instant.strftime("%H:%M:%S")]

    if contribution.repository:
        repository = (
            anonymize_repository(contribution.repository)
            if options.anonymize
            else contribution.repository
        )
        parts.append(f"[{repository}]")

    if contribution.project_id:
        parts.append(f"{{{contribution.project_id}}}")

    if contribution.target:
        parts.append(f"({contribution.target})")

    if contribution.text:
        parts.append(anonymize_message(contribution.text) if options.anonymize else contribution.text)

    if options.with_links and contribution.url:
        parts.append(f"({contribution.url})")

    return ": ".join(parts)


class ConsoleFormatter:
    """Group contributions by UTC day, oldest first."""

    def format(
        self,
        contributions: list[Contribution],
        options: FormatterOptions | None = None,
    ) -> FormatterResult:
        options = options or FormatterOptions()

        if not contributions:
            return FormatterResult(content="No contributions found in this range")

        lines: list[str] = []
        ordered = sort_contributions(contributions)
        for day, group in groupby(ordered, key=lambda c: c.instant.strftime("%Y-%m-%d")):
            lines.append(f"\n## {day}")
            lines.extend(format_line(contribution, options) for contribution in group)

        return FormatterResult(content="\n".join(lines))
