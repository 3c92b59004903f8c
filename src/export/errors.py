"""Exceptions raised by the export engine."""


class ExportError(Exception):
    """Base exception for export errors."""

    pass


class GitUnavailableError(ExportError):
    """git is not installed or not on PATH."""

    pass


class RepositoryInitError(ExportError):
    """The export repository could not be initialized."""

    pass


class CommitError(ExportError):
    """A single commit could not be created."""

    pass
