"""
Configuration management for Recipe Finder.

This module centralizes environment variable loading from the .env file at the project root.
It should be imported early by the Streamlit entry point (streamlit_app/app.py) so that
.env is loaded before any other code accesses environment variables.

In production, .env will not exist, but load_dotenv() is safe to call and will no-op.
Environment variables from the hosting platform will be used instead.

Environment Variables:
- EDAMAM_APP_ID: Edamam application identifier, sent verbatim as app_id on every request
- EDAMAM_APP_KEY: Edamam application key, sent verbatim as app_key on every request
- EDAMAM_BASE_URL: Optional, defaults to "https://api.edamam.com/api/recipes/v2"
- EDAMAM_TIMEOUT: Optional request timeout in seconds (unset means no timeout)
"""

import logging
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.edamam.com/api/recipes/v2"


def load_env_file() -> None:
    """
    Load environment variables from .env file at project root.

    The project root is found by going up from this file's location
    (recipe_search/config.py -> recipe_search/ -> project root).

    Safe to call multiple times. Existing environment variables take precedence
    over values in .env (override=False).
    """
    this_file = Path(__file__).resolve()
    project_root = this_file.parent.parent
    env_path = project_root / ".env"
    load_dotenv(env_path, override=False)


# Load .env file on module import
load_env_file()


class EdamamConfig:
    """Configuration for the Edamam recipe search connector."""

    @staticmethod
    def get_app_id() -> str:
        """
        Get the Edamam application identifier.

        Returns:
            App ID string, or "" if not set. Connectors send it as-is.
        """
        return os.getenv("EDAMAM_APP_ID", "")

    @staticmethod
    def get_app_key() -> str:
        """
        Get the Edamam application key.

        Returns:
            App key string, or "" if not set.
        """
        return os.getenv("EDAMAM_APP_KEY", "")

    @staticmethod
    def get_base_url() -> str:
        """
        Get the recipe search endpoint.

        Returns:
            Base URL with any trailing slash removed
            (default: "https://api.edamam.com/api/recipes/v2")
        """
        url = os.getenv("EDAMAM_BASE_URL") or DEFAULT_BASE_URL
        return url.rstrip("/")

    @staticmethod
    def get_timeout() -> Optional[float]:
        """
        Get the request timeout in seconds.

        Returns:
            Timeout as float, or None to leave it to the network stack.
            Unparseable values are ignored with a warning.
        """
        raw = os.getenv("EDAMAM_TIMEOUT")
        if not raw:
            return None
        try:
            timeout = float(raw)
        except ValueError:
            logger.warning("Ignoring invalid EDAMAM_TIMEOUT value: %r", raw)
            return None
        return timeout if timeout > 0 else None


def get_required_env_vars() -> dict:
    """
    Get a dictionary of all required environment variables and their status.

    Returns:
        Dictionary with keys:
        - edamam_app_id: bool (True if set)
        - edamam_app_key: bool (True if set)
    """
    return {
        "edamam_app_id": bool(EdamamConfig.get_app_id()),
        "edamam_app_key": bool(EdamamConfig.get_app_key()),
    }


def validate_required_config() -> None:
    """
    Validate that all required environment variables are set.

    Raises:
        RuntimeError: If any required configuration is missing

    Note:
        The connector itself does not call this; missing credentials are sent
        as empty strings and the API rejects the request.
    """
    missing = []

    if not EdamamConfig.get_app_id():
        missing.append("EDAMAM_APP_ID")

    if not EdamamConfig.get_app_key():
        missing.append("EDAMAM_APP_KEY")

    if missing:
        raise RuntimeError(
            "Missing required environment variables:\n"
            + "\n".join(f"  - {var}" for var in missing)
            + "\n\nPlease create a .env file at the project root with these variables."
        )
