"""Configuration management for the Meal Planner & Budget Tracker."""
import os
from pathlib import Path
from typing import Final

from dotenv import load_dotenv

# Load environment variables from .env file if it exists
env_path = Path(__file__).parent.parent / '.env'
if env_path.exists():
    load_dotenv(env_path)

# Application Settings
APP_HOST: Final[str] = os.getenv('APP_HOST', '0.0.0.0')
APP_PORT: Final[int] = int(os.getenv('APP_PORT', '8000'))
DEBUG: Final[bool] = os.getenv('DEBUG', 'False').lower() == 'true'
LOG_LEVEL: Final[str] = os.getenv('LOG_LEVEL', 'INFO').upper()

# Budget Tracker
DEFAULT_BUDGET: Final[float] = float(os.getenv('DEFAULT_BUDGET', '400'))
EXPENSE_CHART_CEILING: Final[float] = float(os.getenv('EXPENSE_CHART_CEILING', '120'))

# Web observers
MAX_EVENTS: Final[int] = int(os.getenv('MAX_EVENTS', '300'))

# File Paths
BASE_DIR: Final[Path] = Path(__file__).parent.parent
DATA_DIR: Final[Path] = BASE_DIR / 'data'
