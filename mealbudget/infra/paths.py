from pathlib import Path

# Centralized paths for starter data files (single source of truth)
DATA_DIR = (Path(__file__).parent.parent / 'data').resolve()
RECIPES_FILE = DATA_DIR / 'recipes.json'
PANTRY_FILE = DATA_DIR / 'pantry.json'
EXPENSE_HISTORY_FILE = DATA_DIR / 'expense_history.json'

__all__ = ['DATA_DIR', 'RECIPES_FILE', 'PANTRY_FILE', 'EXPENSE_HISTORY_FILE']
