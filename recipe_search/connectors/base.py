"""
Base connector abstract class for recipe search integrations.

A connector owns the credentials for one recipe API, turns a FilterSelection
into that API's SearchRequest and performs the single HTTP call per search.
Everything above the connector (state machine, UI) is I/O-free.

All connectors must:
- Implement the provider attribute (e.g., "edamam")
- Provide build_request to turn a FilterSelection into a SearchRequest
- Provide search_recipes that returns parsed RecipeRecords plus the raw body,
  raising RecipeSearchError for every failure
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, List

from recipe_search.filters import FilterSelection
from recipe_search.models import RecipeRecord
from recipe_search.query import SearchRequest


class RecipeSearchError(RuntimeError):
    """
    Exception raised when a recipe search cannot produce a result set.

    Covers both failure kinds:
    - transport failures (connection error, timeout, HTTP error status)
    - response failures (body is not JSON or lacks the expected shape)

    The original exception is chained as __cause__.
    """
    pass


@dataclass(frozen=True)
class RecipeSearchResult:
    """Parsed records and the raw decoded response they came from."""
    records: List[RecipeRecord] = field(default_factory=list)
    raw: Dict[str, Any] = field(default_factory=dict)


class BaseConnector(ABC):
    """
    Abstract base class for all recipe search connectors.

    Attributes:
        provider: String identifier for the recipe API (e.g., "edamam")
    """
    provider: str

    @abstractmethod
    def build_request(self, selection: FilterSelection) -> SearchRequest:
        """
        Build the HTTP request descriptor for a filter selection.

        Args:
            selection: User-selected filters

        Returns:
            SearchRequest including this connector's credentials.
        """
        pass

    @abstractmethod
    def search_recipes(self, request: SearchRequest) -> RecipeSearchResult:
        """
        Execute a search request.

        Args:
            request: Descriptor from build_request

        Returns:
            RecipeSearchResult with one record per hit, in response order.

        Raises:
            RecipeSearchError: On any transport or parsing failure.
        """
        pass
