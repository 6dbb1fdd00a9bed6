"""Environment configuration setup utilities.

This module provides functions for loading environment variables from .env files
and configuring the SDK for local development.
"""

import logging
import os
from pathlib import Path

from dotenv import load_dotenv

from binance_trader.errors import MissingCredentialsError
from binance_trader.helpers import DEFAULT_API_URL, MAINNET_API_URL

log = logging.getLogger(__name__)

DEFAULT_ENVIRONMENT = "testnet"

_DEFAULT_API_URLS = {
    "testnet": DEFAULT_API_URL,
    "production": MAINNET_API_URL,
}


def setup_environment() -> tuple[str, str, str]:
    """Load and return environment variables for Binance API configuration.

    Loads environment variables from a .env file if present, otherwise falls
    back to system environment variables. Reads environment-specific variables
    based on the ENVIRONMENT variable (defaults to 'testnet').

    Returns:
        Tuple:
            - api_url: The futures API base URL
            - api_key: The API key
            - api_secret: The API secret

    Raises:
        MissingCredentialsError: If the API key or secret is not configured

    """
    env_file_path = Path(".env")
    if env_file_path.exists():
        log.info("Loading environment variables from .env file")
        load_dotenv(env_file_path)
    else:
        log.info(".env file not found. Falling back to Bash Environment variables.")

    environment = os.getenv("ENVIRONMENT", DEFAULT_ENVIRONMENT).lower()

    log.info("Using %s environment", environment)

    suffix = environment.upper()
    api_url = os.environ.get(
        f"BINANCE_API_URL_{suffix}",
        _DEFAULT_API_URLS.get(environment, DEFAULT_API_URL),
    )
    api_key = os.environ.get(f"BINANCE_API_KEY_{suffix}")
    if not api_key:
        raise MissingCredentialsError(f"BINANCE_API_KEY_{suffix}")
    api_secret = os.environ.get(f"BINANCE_API_SECRET_{suffix}")
    if not api_secret:
        raise MissingCredentialsError(f"BINANCE_API_SECRET_{suffix}")

    return api_url, api_key, api_secret
