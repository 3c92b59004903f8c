"""Environment configuration interface for git-activity-export.

This module provides a clean interface for accessing environment variables,
centralizing all environment variable access in one place.
"""

import os

from dotenv import load_dotenv

from .constants import DEFAULT_AUTHOR_EMAIL, DEFAULT_AUTHOR_NAME

# Load environment variables from .env file if it exists
load_dotenv()


class Environment:
    """Interface for accessing environment configuration."""

    @staticmethod
    def git_author_name() -> str:
        """Get the author name stamped on exported commits.

        Returns:
            Author name, defaults to 'Git Activity Tracer'
        """
        return os.getenv("GIT_AUTHOR_NAME") or DEFAULT_AUTHOR_NAME

    @staticmethod
    def git_author_email() -> str:
        """Get the author email stamped on exported commits.

        Returns:
            Author email, defaults to 'noreply@example.com'
        """
        return os.getenv("GIT_AUTHOR_EMAIL") or DEFAULT_AUTHOR_EMAIL

    @staticmethod
    def log_level() -> str:
        """Get the logging level.

        Returns:
            Upper-cased level name, defaults to 'INFO'
        """
        return os.getenv("LOG_LEVEL", "INFO").upper()


# Singleton instance for convenient access
env = Environment()
