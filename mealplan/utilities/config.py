"""Configuration management for the meal plan core."""
import logging
import os
from typing import Final
from pathlib import Path

# Load environment variables from .env file if it exists
try:
    from dotenv import load_dotenv
    env_path = Path(__file__).parent.parent.parent / '.env'
    if env_path.exists():
        load_dotenv(env_path)
except ImportError:
    pass  # dotenv not installed, using defaults

# Application Settings
DEBUG: Final[bool] = os.getenv('DEBUG', 'False').lower() == 'true'
LOG_LEVEL: Final[str] = os.getenv('MEALPLAN_LOG_LEVEL', 'DEBUG' if DEBUG else 'INFO').upper()

# Kids menu only controls what read views expose; kids data is always stored
KIDS_MENU_ENABLED: Final[bool] = os.getenv('MEALPLAN_KIDS_MENU_ENABLED', 'False').lower() == 'true'

# File Paths
BASE_DIR: Final[Path] = Path(__file__).parent.parent
DATA_DIR: Final[Path] = Path(os.getenv('MEALPLAN_DATA_DIR', str(BASE_DIR / 'data')))
STORAGE_FILE: Final[Path] = Path(os.getenv('MEALPLAN_STORAGE_FILE', str(DATA_DIR / 'widget_data.json')))
RECIPES_FILE: Final[Path] = Path(os.getenv('MEALPLAN_RECIPES_FILE', str(DATA_DIR / 'recipes.json')))


def configure_logging(level: str = LOG_LEVEL) -> None:
    """Attach a basic handler to the root logger using the configured level."""
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
