"""
Tests for filter selection transitions and form validation.

These tests verify that:
- Every UI event returns a new selection and leaves the old one untouched
- Checkbox toggles keep selection order and never duplicate tags
- The form schema only rejects wrong field types
"""

from dataclasses import FrozenInstanceError

import pytest

from recipe_search.filters import (
    ALLERGY_TAGS,
    DEFAULT_COOK_TIME,
    DIET_TAGS,
    FilterSelection,
    MealType,
    select_meal,
    set_cook_time,
    toggle_allergy,
    toggle_diet,
    validate_form,
)


class TestVocabularies:
    """Test the fixed tag vocabularies."""

    def test_allergy_vocabulary(self):
        assert ALLERGY_TAGS == [
            "dairy-free",
            "gluten-free",
            "crustacean-free",
            "red-meat-free",
            "vegetarian",
            "shellfish-free",
        ]

    def test_diet_vocabulary(self):
        assert DIET_TAGS == ["high-protein", "low-sodium", "balanced"]

    def test_meal_types(self):
        assert [meal.value for meal in MealType] == ["Breakfast", "Lunch", "Dinner", "Snack"]


class TestTransitions:
    """Test the selection transition functions."""

    def test_defaults(self):
        """Test a fresh selection matches the initial form state."""
        selection = FilterSelection()
        assert selection.meal_type == MealType.BREAKFAST
        assert selection.allergies == ()
        assert selection.diets == ()
        assert selection.cook_time == DEFAULT_COOK_TIME == "1000"

    def test_select_meal(self):
        """Test picking a meal returns a new selection."""
        original = FilterSelection()
        updated = select_meal(original, "Dinner")
        assert updated.meal_type == MealType.DINNER
        assert original.meal_type == MealType.BREAKFAST

    def test_select_unknown_meal_raises(self):
        """Test an unknown meal type is rejected."""
        with pytest.raises(ValueError):
            select_meal(FilterSelection(), "Brunch")

    def test_toggle_allergy_keeps_selection_order(self):
        """Test checked tags are appended in click order."""
        selection = FilterSelection()
        selection = toggle_allergy(selection, "vegetarian", True)
        selection = toggle_allergy(selection, "dairy-free", True)
        selection = toggle_allergy(selection, "gluten-free", True)
        assert selection.allergies == ("vegetarian", "dairy-free", "gluten-free")

    def test_toggle_allergy_uncheck_removes(self):
        """Test unchecking removes the tag and keeps the others in order."""
        selection = FilterSelection(allergies=("vegetarian", "dairy-free", "gluten-free"))
        selection = toggle_allergy(selection, "dairy-free", False)
        assert selection.allergies == ("vegetarian", "gluten-free")

    def test_toggle_allergy_no_duplicates(self):
        """Test checking an already checked tag is a no-op."""
        selection = FilterSelection(allergies=("vegetarian",))
        assert toggle_allergy(selection, "vegetarian", True).allergies == ("vegetarian",)

    def test_uncheck_absent_tag(self):
        """Test unchecking a tag that is not selected changes nothing."""
        selection = FilterSelection(diets=("balanced",))
        assert toggle_diet(selection, "low-sodium", False).diets == ("balanced",)

    def test_toggle_diet(self):
        """Test diet toggles are independent of allergy toggles."""
        selection = FilterSelection(allergies=("vegetarian",))
        selection = toggle_diet(selection, "high-protein", True)
        selection = toggle_diet(selection, "balanced", True)
        assert selection.diets == ("high-protein", "balanced")
        assert selection.allergies == ("vegetarian",)

    def test_set_cook_time_verbatim(self):
        """Test cook time is stored as typed, including empty and non-numeric text."""
        selection = FilterSelection()
        assert set_cook_time(selection, "30").cook_time == "30"
        assert set_cook_time(selection, "").cook_time == ""
        assert set_cook_time(selection, "abc").cook_time == "abc"

    def test_selection_is_immutable(self):
        """Test selections cannot be mutated in place."""
        selection = FilterSelection()
        with pytest.raises(FrozenInstanceError):
            selection.cook_time = "5"


class TestValidateForm:
    """Test the structural form validator."""

    def test_valid_form(self):
        """Test a well-typed form produces a selection."""
        result = validate_form(
            {"items": ["dairy-free"], "diets": [], "cook_time": "30"},
            meal_type=MealType.LUNCH,
        )
        assert result.ok
        assert result.errors == {}
        assert result.selection == FilterSelection(
            meal_type=MealType.LUNCH, allergies=("dairy-free",), diets=(), cook_time="30"
        )

    def test_vocabulary_not_enforced(self):
        """Test out-of-vocabulary tags and non-numeric cook time are accepted."""
        result = validate_form({"items": ["peanut-free"], "diets": ["keto"], "cook_time": "soon"})
        assert result.ok
        assert result.selection.allergies == ("peanut-free",)
        assert result.selection.cook_time == "soon"

    def test_empty_cook_time_accepted(self):
        """Test a blank cook time is valid."""
        result = validate_form({"items": [], "diets": [], "cook_time": ""})
        assert result.ok
        assert result.selection.cook_time == ""

    def test_missing_fields_use_defaults(self):
        """Test omitted fields fall back to the form defaults."""
        result = validate_form({})
        assert result.ok
        assert result.selection == FilterSelection()

    def test_non_list_items_rejected(self):
        """Test a string where a list is expected is rejected."""
        result = validate_form({"items": "dairy-free", "diets": [], "cook_time": "30"})
        assert not result.ok
        assert result.selection is None
        assert "items" in result.errors

    def test_non_string_tag_rejected(self):
        """Test a list containing a non-string is rejected."""
        result = validate_form({"items": [], "diets": [1], "cook_time": "30"})
        assert not result.ok
        assert "diets" in result.errors

    def test_numeric_cook_time_rejected(self):
        """Test a number where a string is expected is rejected."""
        result = validate_form({"items": [], "diets": [], "cook_time": 30})
        assert not result.ok
        assert list(result.errors) == ["cook_time"]

    def test_multiple_errors_reported_per_field(self):
        """Test every invalid field gets its own message."""
        result = validate_form({"items": None, "diets": "balanced", "cook_time": 5})
        assert not result.ok
        assert set(result.errors) == {"items", "diets", "cook_time"}
