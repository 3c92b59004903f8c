"""Export contributions as reports or as synthetic git history."""

from .anonymizer import anonymize_message, anonymize_repository, anonymize_text
from .console_formatter import ConsoleFormatter
from .errors import CommitError, ExportError, GitUnavailableError, RepositoryInitError
from .factory import get_formatter
from .git_formatter import GitFormatter
from .loader import load_contributions
from .models import Contribution, FormatterOptions, FormatterResult
from .repository_manager import RepositoryManager

__all__ = [
    "anonymize_message",
    "anonymize_repository",
    "anonymize_text",
    "ConsoleFormatter",
    "GitFormatter",
    "get_formatter",
    "load_contributions",
    "RepositoryManager",
    "Contribution",
    "FormatterOptions",
    "FormatterResult",
    "ExportError",
    "GitUnavailableError",
    "RepositoryInitError",
    "CommitError",
]
