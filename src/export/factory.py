"""Formatter factory."""

from typing import Protocol

from .console_formatter import ConsoleFormatter
from .git_formatter import GitFormatter
from .models import Contribution, FormatterOptions, FormatterResult


class Formatter(Protocol):
    """Anything that turns contributions into a FormatterResult."""

    def format(
        self,
        contributions: list[Contribution],
        options: FormatterOptions | None = None,
    ) -> FormatterResult: ...


FORMATTERS: dict[str, type] = {
    "console": ConsoleFormatter,
    "git": GitFormatter,
}


def get_formatter(name: str) -> Formatter:
    """
    Create a formatter by name.

    Args:
        name: 'console' or 'git' (case-insensitive)

    Returns:
        Formatter instance

    Raises:
        ValueError: If the name is not a supported format
    """
    try:
        formatter_class = FORMATTERS[name.lower()]
    except KeyError as e:
        raise ValueError(
            f"Unsupported format: {name}. Must be one of: {', '.join(FORMATTERS)}"
        ) from e
    return formatter_class()
