"""Starter data loading: recipe catalog, starter pantry and expense history.

The files are read once at startup; nothing is ever written back.
"""
import json
import logging
from pathlib import Path
from typing import Any, Dict, List

from pydantic import ValidationError

from mealbudget.domain.Pantry import PantryInventory
from mealbudget.domain.Recipe import RecipeCatalog
from mealbudget.domain.errors import InvalidInputError
from mealbudget.infra.paths import EXPENSE_HISTORY_FILE, PANTRY_FILE, RECIPES_FILE
from mealbudget.utilities.validators import ExpenseHistoryRecord

logger = logging.getLogger(__name__)


def _load_json(path: Path):
    try:
        with open(path, 'r', encoding='utf-8') as f:
            return json.load(f)
    except FileNotFoundError:
        logger.warning(f"Data file not found: {path}. Using empty data.")
        return []
    except json.JSONDecodeError as e:
        logger.error(f"Invalid JSON in {path}: {e}")
        raise InvalidInputError(f"Invalid JSON in {path}: {e}") from e


def load_catalog(path: Path = RECIPES_FILE) -> RecipeCatalog:
    """Read and validate the starter recipe catalog."""
    catalog = RecipeCatalog.from_dict(_load_json(path))
    logger.info(f"Loaded {len(catalog)} recipes from {path.name}")
    return catalog


def load_pantry(path: Path = PANTRY_FILE) -> PantryInventory:
    """Read the starter pantry (list of ingredient names); blank entries are skipped."""
    data = _load_json(path)
    if not isinstance(data, list):
        raise InvalidInputError(f"Pantry file {path} must contain a list of strings")
    items = [i for i in data if isinstance(i, str) and i.strip()]
    if len(items) != len(data):
        logger.warning(f"Skipped {len(data) - len(items)} invalid pantry entries in {path.name}")
    return PantryInventory(items)


def load_expense_history(path: Path = EXPENSE_HISTORY_FILE) -> List[Dict[str, Any]]:
    """Read the static weekly expense history, ordered by week."""
    try:
        records = [ExpenseHistoryRecord.model_validate(e) for e in _load_json(path)]
    except ValidationError as e:
        raise InvalidInputError(f"Invalid expense history in {path}: {e}") from e
    records.sort(key=lambda r: r.week)
    return [r.model_dump() for r in records]


__all__ = ['load_catalog', 'load_pantry', 'load_expense_history']
