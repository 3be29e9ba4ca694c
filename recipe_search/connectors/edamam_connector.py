"""
Edamam connector using the Recipe Search API v2.

This connector sends one GET request per search to Edamam's public recipe
search endpoint and normalizes the hits into RecipeRecords.

The connector:
- Reads EDAMAM_APP_ID / EDAMAM_APP_KEY from the environment (via recipe_search.config)
- Builds the query with recipe_search.query.build_search_request
- Uses requests.get with the ordered parameter pairs so repeated health/diet keys survive
- Wraps network, HTTP, JSON and shape errors into RecipeSearchError

Missing credentials are not fatal at construction time: they are sent as empty
strings and the API answers with an error, which surfaces as RecipeSearchError.
"""

import logging
from typing import Optional

import requests
from pydantic import ValidationError

from recipe_search.config import EdamamConfig
from recipe_search.filters import FilterSelection
from recipe_search.models import parse_search_response
from recipe_search.query import SearchRequest, build_search_request

from .base import BaseConnector, RecipeSearchError, RecipeSearchResult

logger = logging.getLogger(__name__)


class EdamamConnector(BaseConnector):
    """
    Connector for the Edamam recipe search API.

    Credentials and endpoint default to the values from EdamamConfig and can be
    overridden per instance (useful for tests).
    """
    provider = "edamam"

    def __init__(
        self,
        app_id: Optional[str] = None,
        app_key: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
    ) -> None:
        """
        Initialize the Edamam connector.

        Args:
            app_id: Edamam app ID (optional, reads from EDAMAM_APP_ID if not provided)
            app_key: Edamam app key (optional, reads from EDAMAM_APP_KEY if not provided)
            base_url: Endpoint (optional, reads from EDAMAM_BASE_URL or uses the v2 default)
            timeout: Request timeout in seconds (optional, reads from EDAMAM_TIMEOUT; None means no timeout)
        """
        self.app_id = app_id if app_id is not None else EdamamConfig.get_app_id()
        self.app_key = app_key if app_key is not None else EdamamConfig.get_app_key()
        self.base_url = base_url or EdamamConfig.get_base_url()
        self.timeout = timeout if timeout is not None else EdamamConfig.get_timeout()

        if not self.app_id or not self.app_key:
            logger.warning(
                "EDAMAM_APP_ID or EDAMAM_APP_KEY is not set; requests will be sent with empty credentials"
            )

    def build_request(self, selection: FilterSelection) -> SearchRequest:
        return build_search_request(
            selection,
            app_id=self.app_id,
            app_key=self.app_key,
            base_url=self.base_url,
        )

    def search_recipes(self, request: SearchRequest) -> RecipeSearchResult:
        """
        Run a recipe search against Edamam.

        Args:
            request: Descriptor from build_request

        Returns:
            RecipeSearchResult with:
            - records: one RecipeRecord per hit (empty when hits is empty)
            - raw: the decoded JSON body, for inspection in the UI

        Raises:
            RecipeSearchError: If the request fails, the API returns an error
                status, or the body is not JSON shaped like {"hits": [...]}.
        """
        logger.debug(
            "Edamam search: mealType=%s health=%s diet=%s time=%r",
            request.get_all("mealType"),
            request.get_all("health"),
            request.get_all("diet"),
            request.get_all("time"),
        )

        try:
            response = requests.get(
                request.base_url,
                params=list(request.params),
                timeout=self.timeout,
            )
            response.raise_for_status()
            payload = response.json()
        except requests.exceptions.RequestException as e:
            logger.warning("Edamam request failed: %s", e)
            raise RecipeSearchError(f"Error fetching recipes from Edamam: {e}") from e
        except ValueError as e:
            # Body is not valid JSON
            logger.warning("Edamam returned a non-JSON body: %s", e)
            raise RecipeSearchError(f"Unexpected response from Edamam: {e}") from e

        try:
            records = parse_search_response(payload)
        except ValidationError as e:
            logger.warning("Edamam response has an unexpected shape: %s", e)
            raise RecipeSearchError(
                "Unexpected response format from Edamam: expected {'hits': [{'recipe': {...}}]}"
            ) from e

        logger.debug("Edamam search returned %d recipes", len(records))
        return RecipeSearchResult(records=records, raw=payload)
