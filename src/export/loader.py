"""Load contribution records from JSON files."""

import json
from pathlib import Path

from common.logger import get_logger

from .models import Contribution

logger = get_logger(__name__)


def load_contributions(file_path: Path) -> list[Contribution]:
    """
    Read contributions from a JSON file.

    The file holds either a list of contribution objects or an object with a
    ``contributions`` list.

    Args:
        file_path: Path to the JSON file

    Returns:
        Contributions in file order

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the file is not valid JSON or has the wrong shape
    """
    file_path = Path(file_path)
    if not file_path.exists():
        raise FileNotFoundError(f"Contributions file not found: {file_path}")

    with open(file_path, encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in {file_path}: {e}") from e

    if isinstance(data, dict):
        data = data.get("contributions")

    if not isinstance(data, list):
        raise ValueError(
            f"{file_path} must contain a list of contributions "
            "or an object with a 'contributions' list"
        )

    contributions = []
    for index, record in enumerate(data):
        try:
            contributions.append(Contribution.from_dict(record))
        except ValueError as e:
            raise ValueError(f"Contribution #{index} in {file_path}: {e}") from e

    logger.debug(f"Loaded {len(contributions)} contributions from {file_path}")
    return contributions
