"""
Fetch/render cycle for recipe searches.

The view state is an immutable SearchState moved through a reducer:

    Idle --SearchStarted--> Loading --SearchSucceeded--> Idle (new result set)
                                    --SearchFailed-----> Idle (old result set + error notice)

reduce() is pure. run_search() is the one place that talks to a connector:
it validates the submitted form, enters Loading, performs exactly one request
and reduces the outcome. There is no retry, no cancellation and no guard
against overlapping submissions; whichever completion is reduced last
determines the displayed results.

Search flow: Streamlit form -> validate_form() -> connector.build_request()
-> connector.search_recipes() -> RecipeRecord list -> SearchState
"""

import logging
from dataclasses import dataclass, field, replace
from typing import Any, Callable, Dict, Mapping, Optional, Tuple, Union

from recipe_search.connectors.base import BaseConnector, RecipeSearchError
from recipe_search.filters import DEFAULT_MEAL_TYPE, MealType, validate_form
from recipe_search.models import RecipeRecord
from recipe_search.query import SearchRequest

logger = logging.getLogger(__name__)

NOTICE_SUCCESS = "success"
NOTICE_ERROR = "error"

SUCCESS_TITLE = "Fetched Recipes:"
ERROR_TITLE = "Error"
ERROR_MESSAGE = "Failed to fetch recipes. Please try again later."


@dataclass(frozen=True)
class Notice:
    """
    Transient notification produced by a completed search.

    Attributes:
        kind: "success" or "error"
        title: Short heading (e.g., "Fetched Recipes:")
        message: Human-readable text
        payload: Raw response body for success notices, None otherwise
    """
    kind: str
    title: str
    message: str = ""
    payload: Optional[Dict[str, Any]] = None


@dataclass(frozen=True)
class SearchState:
    """
    View state of the results area.

    Attributes:
        loading: True between SearchStarted and its completion
        results: Result set from the most recently completed successful search
        notice: Notification from the most recent completion, if any
        last_request: Request issued by the most recent submission
    """
    loading: bool = False
    results: Tuple[RecipeRecord, ...] = field(default_factory=tuple)
    notice: Optional[Notice] = None
    last_request: Optional[SearchRequest] = None


@dataclass(frozen=True)
class SearchStarted:
    request: SearchRequest


@dataclass(frozen=True)
class SearchSucceeded:
    records: Tuple[RecipeRecord, ...]
    raw: Dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class SearchFailed:
    error: str = ""


SearchEvent = Union[SearchStarted, SearchSucceeded, SearchFailed]


def reduce(state: SearchState, event: SearchEvent) -> SearchState:
    """
    Apply one event to the search state.

    SearchStarted only flips the loading flag; results are never touched while
    a request is in flight. SearchSucceeded replaces the results wholesale.
    SearchFailed keeps the previous results.

    Raises:
        TypeError: For an unknown event type.
    """
    if isinstance(event, SearchStarted):
        return replace(state, loading=True, notice=None, last_request=event.request)

    if isinstance(event, SearchSucceeded):
        return replace(
            state,
            loading=False,
            results=tuple(event.records),
            notice=Notice(
                kind=NOTICE_SUCCESS,
                title=SUCCESS_TITLE,
                message=f"{len(event.records)} recipes",
                payload=event.raw,
            ),
        )

    if isinstance(event, SearchFailed):
        return replace(
            state,
            loading=False,
            notice=Notice(kind=NOTICE_ERROR, title=ERROR_TITLE, message=ERROR_MESSAGE),
        )

    raise TypeError(f"Unknown search event: {event!r}")


def run_search(
    state: SearchState,
    form_data: Mapping[str, Any],
    connector: BaseConnector,
    meal_type: MealType = DEFAULT_MEAL_TYPE,
    on_loading: Optional[Callable[[SearchState], None]] = None,
) -> Tuple[SearchState, Dict[str, str]]:
    """
    Validate a form submission and run one recipe search.

    Args:
        state: Current search state
        form_data: Submitted form values ("items", "diets", "cook_time")
        connector: Connector that performs the request
        meal_type: Meal type from the dropdown
        on_loading: Optional callback invoked with the Loading state before
            the request is sent

    Returns:
        Tuple of (next state, form errors). When the form is invalid the
        state is returned unchanged with per-field errors and no request is
        made; otherwise errors is empty.
    """
    validation = validate_form(form_data, meal_type=meal_type)
    if not validation.ok:
        logger.debug("Search form rejected: %s", validation.errors)
        return state, validation.errors

    request = connector.build_request(validation.selection)
    state = reduce(state, SearchStarted(request=request))
    if on_loading is not None:
        on_loading(state)

    try:
        result = connector.search_recipes(request)
    except RecipeSearchError as e:
        logger.error("Error fetching recipes: %s", e)
        return reduce(state, SearchFailed(error=str(e))), {}

    return reduce(state, SearchSucceeded(records=tuple(result.records), raw=result.raw)), {}
