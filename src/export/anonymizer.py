"""Deterministic, structure-preserving anonymization of contribution text.

Hashes are unsalted SHA-256 prefixes: the same input always yields the same
token, across runs and machines. Short or common inputs can therefore be
recovered by dictionary lookup.
"""

import hashlib
import re
from typing import Literal

from common.constants import CONVENTIONAL_COMMIT_TYPES

TextKind = Literal["commit", "pr", "review"]

# type keyword, optional (scope), colon, optional whitespace
CONVENTIONAL_PREFIX_PATTERN = re.compile(
    r"^(?:" + "|".join(CONVENTIONAL_COMMIT_TYPES) + r")(?:\([\w-]+\))?:\s*",
    re.IGNORECASE,
)


def consistent_hash(value: str, length: int = 8) -> str:
    """
    Hash a string to a short hex token.

    Args:
        value: String to hash
        length: Number of hex characters to keep (default: 8)

    Returns:
        First ``length`` characters of the SHA-256 hex digest
    """
    return hashlib.sha256(value.encode("utf-8")).hexdigest()[:length]


def split_conventional_prefix(message: str) -> tuple[str | None, str]:
    """
    Split a conventional commit prefix from the rest of a message.

    Args:
        message: Commit message

    Returns:
        (prefix, remainder) when a prefix such as ``fix(auth): `` is present,
        otherwise (None, message). The prefix keeps its original case and scope.
    """
    match = CONVENTIONAL_PREFIX_PATTERN.match(message)
    if match is None:
        return None, message
    return match.group(0), message[match.end() :]


def anonymize_message(message: str | None) -> str:
    """
    Anonymize a commit message, keeping any conventional commit prefix.

    Examples:
        >>> anonymize_message("fix(auth): resolve login issue")  # doctest: +SKIP
        'fix(auth): hash_...'
        >>> anonymize_message("fix the login bug")  # doctest: +SKIP
        'hash_...'
    """
    if not message:
        return "hash_" + consistent_hash("empty")

    prefix, remainder = split_conventional_prefix(message)
    if prefix is None:
        return "hash_" + consistent_hash(message)
    return prefix + "hash_" + consistent_hash(remainder)


def anonymize_repository(repository: str | None) -> str:
    """Anonymize a repository name such as 'owner/repo' to 'repo_<hash>'."""
    if not repository:
        return "repo_" + consistent_hash("unknown")
    return "repo_" + consistent_hash(repository)


def anonymize_text(text: str | None, kind: TextKind) -> str:
    """
    Anonymize contribution text with a kind-specific token.

    Commit text goes through ``anonymize_message`` so its prefix survives;
    pull request and review text is hashed whole.

    Args:
        text: Text to anonymize
        kind: One of 'commit', 'pr', 'review'

    Returns:
        Anonymized text
    """
    if not text:
        return f"{kind}_hash_" + consistent_hash(f"{kind}_empty")

    if kind == "commit":
        return anonymize_message(text)

    return f"{kind}_hash_" + consistent_hash(text)
