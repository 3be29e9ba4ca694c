"""
Search request construction for the Edamam recipe search API.

build_search_request() is pure: it turns a FilterSelection and the API
credentials into a SearchRequest without any I/O. Tags are not checked against
the vocabularies here; unknown tags are passed through as opaque strings.

Parameter layout (repeated keys keep selection order):
    type=public, app_id, app_key, mealType, time, random=true,
    health=<tag> per allergy, diet=<tag> per diet
"""

from dataclasses import dataclass
from typing import List, Optional, Tuple
from urllib.parse import urlencode

from recipe_search.config import DEFAULT_BASE_URL
from recipe_search.filters import FilterSelection

Param = Tuple[str, str]


@dataclass(frozen=True)
class SearchRequest:
    """
    Read-only HTTP GET descriptor.

    params is an ordered sequence of (key, value) pairs so that repeated keys
    ("health", "diet") survive; it can be passed straight to requests.get.
    """
    base_url: str
    params: Tuple[Param, ...]

    @property
    def query_string(self) -> str:
        return urlencode(self.params)

    @property
    def url(self) -> str:
        return f"{self.base_url}?{self.query_string}"

    def get_all(self, key: str) -> List[str]:
        """Return every value sent under key, in order."""
        return [value for k, value in self.params if k == key]


def build_search_request(
    selection: FilterSelection,
    app_id: str,
    app_key: str,
    base_url: Optional[str] = None,
) -> SearchRequest:
    """
    Build the search request for a filter selection.

    Args:
        selection: Meal type, allergy/diet tags and cook time
        app_id: Edamam application identifier (sent verbatim)
        app_key: Edamam application key (sent verbatim)
        base_url: Endpoint override (default: Edamam recipes v2)

    Returns:
        SearchRequest with fixed parameters once each, then one "health" entry
        per allergy tag and one "diet" entry per diet tag. Empty tag sets add
        no entry at all. cook_time is sent as-is, even when empty.
    """
    params: List[Param] = [
        ("type", "public"),
        ("app_id", app_id),
        ("app_key", app_key),
        ("mealType", selection.meal_type.value),
        ("time", selection.cook_time),
        ("random", "true"),
    ]
    params.extend(("health", tag) for tag in selection.allergies)
    params.extend(("diet", tag) for tag in selection.diets)

    return SearchRequest(base_url=base_url or DEFAULT_BASE_URL, params=tuple(params))
