"""
Filter selection model, UI transitions and form schema.

A FilterSelection is the user's current search constraints: meal type, allergy
tags, diet tags and the maximum cook time. It is immutable; every UI event
(dropdown pick, checkbox toggle, text edit) is a plain function taking the
current selection and returning the next one, so the logic is testable without
Streamlit.

Submission goes through FilterForm, a statically declared pydantic schema. It
only checks field *types* (lists of strings, a string cook time). Vocabulary
membership and numeric range are deliberately left to the recipe API.
"""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, ValidationError


class MealType(str, Enum):
    """Meal types offered by the meal dropdown."""
    BREAKFAST = "Breakfast"
    LUNCH = "Lunch"
    DINNER = "Dinner"
    SNACK = "Snack"


DEFAULT_MEAL_TYPE = MealType.BREAKFAST
DEFAULT_COOK_TIME = "1000"

# Allergy tags (sent as "health" parameters), in display order
ALLERGY_TAGS = [
    "dairy-free",
    "gluten-free",
    "crustacean-free",
    "red-meat-free",
    "vegetarian",
    "shellfish-free",
]

# Diet tags (sent as "diet" parameters)
DIET_TAGS = [
    "high-protein",
    "low-sodium",
    "balanced",
]


@dataclass(frozen=True)
class FilterSelection:
    """
    User-selected search constraints.

    Attributes:
        meal_type: One of the four MealType values
        allergies: Allergy tags in the order they were selected
        diets: Diet tags in the order they were selected
        cook_time: Max cook time in minutes as typed; "" means no preference
    """
    meal_type: MealType = DEFAULT_MEAL_TYPE
    allergies: Tuple[str, ...] = field(default_factory=tuple)
    diets: Tuple[str, ...] = field(default_factory=tuple)
    cook_time: str = DEFAULT_COOK_TIME


def _toggle(tags: Tuple[str, ...], tag: str, checked: bool) -> Tuple[str, ...]:
    if checked:
        return tags if tag in tags else tags + (tag,)
    return tuple(t for t in tags if t != tag)


def select_meal(selection: FilterSelection, meal: str) -> FilterSelection:
    """
    Return a new selection with the given meal type.

    Raises:
        ValueError: If meal is not one of Breakfast, Lunch, Dinner, Snack.
    """
    return replace(selection, meal_type=MealType(meal))


def toggle_allergy(selection: FilterSelection, tag: str, checked: bool) -> FilterSelection:
    """Check (append) or uncheck (remove) an allergy tag."""
    return replace(selection, allergies=_toggle(selection.allergies, tag, checked))


def toggle_diet(selection: FilterSelection, tag: str, checked: bool) -> FilterSelection:
    """Check (append) or uncheck (remove) a diet tag."""
    return replace(selection, diets=_toggle(selection.diets, tag, checked))


def set_cook_time(selection: FilterSelection, value: str) -> FilterSelection:
    """Store the cook time text verbatim (no numeric parsing)."""
    return replace(selection, cook_time=value)


class FilterForm(BaseModel):
    """
    Submitted form payload.

    Field names match the form controls: "items" holds the allergy checkboxes,
    "diets" the diet checkboxes and "cook_time" the free-text field.
    Strict mode means a tuple, a bare string or a number is rejected where a
    list or a string is declared.
    """
    items: List[str] = Field(default_factory=list, description="Checked allergy tags")
    diets: List[str] = Field(default_factory=list, description="Checked diet tags")
    cook_time: str = Field(default=DEFAULT_COOK_TIME, description="Max cook time in minutes, free text")

    model_config = ConfigDict(strict=True, extra="ignore")


@dataclass(frozen=True)
class FormValidation:
    """
    Tagged result of validate_form.

    Exactly one of selection (ok=True) or errors (ok=False) is meaningful.
    errors maps a field name to its first error message.
    """
    ok: bool
    selection: Optional[FilterSelection] = None
    errors: Dict[str, str] = field(default_factory=dict)


def validate_form(
    data: Mapping[str, Any],
    meal_type: MealType = DEFAULT_MEAL_TYPE,
) -> FormValidation:
    """
    Validate submitted form data and build a FilterSelection from it.

    The meal type comes from the separate dropdown, not from the form.

    Args:
        data: Mapping with "items", "diets" and "cook_time" keys
        meal_type: Currently selected meal type

    Returns:
        FormValidation with ok=True and the selection, or ok=False and
        per-field error messages.
    """
    try:
        form = FilterForm.model_validate(data)
    except ValidationError as e:
        errors: Dict[str, str] = {}
        for error in e.errors():
            loc = error.get("loc") or ()
            name = str(loc[0]) if loc else "__root__"
            errors.setdefault(name, error.get("msg", "Invalid value"))
        return FormValidation(ok=False, errors=errors)

    selection = FilterSelection(
        meal_type=MealType(meal_type),
        allergies=tuple(form.items),
        diets=tuple(form.diets),
        cook_time=form.cook_time,
    )
    return FormValidation(ok=True, selection=selection)
