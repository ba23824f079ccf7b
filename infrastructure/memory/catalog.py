"""
Exercise catalog loader.

The seed catalog ships as JSON under ``shared/catalog/`` with the same
camelCase keys the API serves.
"""
import json
import logging
import pathlib
from typing import List, Optional, Union

from domain.models import ExerciseCreate

logger = logging.getLogger(__name__)

# Root path for loading the bundled catalog file
ROOT = pathlib.Path(__file__).resolve().parents[2]

DEFAULT_CATALOG_PATH = ROOT / "shared/catalog/exercises.json"


def load_exercise_catalog(
    path: Optional[Union[str, pathlib.Path]] = None,
) -> List[ExerciseCreate]:
    """
    Load and validate the exercise catalog.

    Args:
        path: Catalog file; defaults to the bundled catalog

    Returns:
        Validated exercise payloads, in file order

    Raises:
        FileNotFoundError: If the catalog file does not exist
        pydantic.ValidationError: If an entry does not match the exercise schema
    """
    catalog_path = pathlib.Path(path) if path else DEFAULT_CATALOG_PATH
    with open(catalog_path, "r", encoding="utf-8") as f:
        records = json.load(f)

    exercises = [ExerciseCreate.model_validate(record) for record in records]
    logger.info("Loaded %d exercises from %s", len(exercises), catalog_path)
    return exercises
