"""Configuration management for the SimpleMeal core."""
import os
from typing import Final, Optional
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables from .env file if it exists
env_path = Path(__file__).parent.parent / '.env'
if env_path.exists():
    load_dotenv(env_path)

# Application Settings
APP_HOST: Final[str] = os.getenv('APP_HOST', '0.0.0.0')
APP_PORT: Final[int] = int(os.getenv('APP_PORT', '8000'))
DEBUG: Final[bool] = os.getenv('DEBUG', 'False').lower() == 'true'
LOG_LEVEL: Final[str] = os.getenv('LOG_LEVEL', 'DEBUG' if DEBUG else 'INFO').upper()

# Deep links
URL_SCHEME: Final[str] = os.getenv('SIMPLEMEAL_URL_SCHEME', 'simplemeal')

# Category given to ingredients materialized from an imported link
DEFAULT_INGREDIENT_CATEGORY: Final[str] = os.getenv('DEFAULT_INGREDIENT_CATEGORY', 'Pantry')

# Subscription (RevenueCat REST API)
REVENUECAT_API_URL: Final[str] = os.getenv('REVENUECAT_API_URL', 'https://api.revenuecat.com/v1')
REVENUECAT_API_KEY: Final[Optional[str]] = os.getenv('REVENUECAT_API_KEY')
REVENUECAT_APP_USER_ID: Final[Optional[str]] = os.getenv('REVENUECAT_APP_USER_ID')

# File Paths
BASE_DIR: Final[Path] = Path(__file__).parent.parent
DATA_DIR: Final[Path] = Path(os.getenv('SIMPLEMEAL_DATA_DIR', str(BASE_DIR / 'data')))
