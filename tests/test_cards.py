"""
Tests for the recipe card grid using a mocked streamlit module.

These tests patch streamlit inside ui.cards so nothing is rendered. They verify that:
- An empty result set renders no cards and no layout containers
- One card is rendered per record, in response order
- A card shows the formatted calories and the outbound link
"""

from unittest.mock import MagicMock, call, patch

from recipe_search.models import RecipeRecord
from ui.cards import render_recipe_card, render_recipe_grid


def make_record(title: str, calories: float = 250.0) -> RecipeRecord:
    return RecipeRecord(
        title=title,
        image_url=f"https://img.example.com/{title}.jpg",
        source_name="Test Kitchen",
        ingredient_lines=("1 egg", "salt"),
        detail_url=f"https://recipes.example.com/{title}",
        calories=calories,
    )


def _mock_streamlit() -> MagicMock:
    mock_st = MagicMock()
    mock_st.columns.side_effect = lambda count, **kwargs: [MagicMock() for _ in range(count)]
    return mock_st


class TestRenderRecipeGrid:
    """Test render_recipe_grid layout."""

    @patch("ui.cards.render_recipe_card")
    @patch("ui.cards.st")
    def test_empty_results_render_nothing(self, mock_st, mock_render_card):
        """Test an empty result set renders zero cards and no containers."""
        render_recipe_grid(())

        mock_render_card.assert_not_called()
        mock_st.columns.assert_not_called()
        mock_st.container.assert_not_called()

    @patch("ui.cards.render_recipe_card")
    def test_one_card_per_record_in_order(self, mock_render_card):
        """Test every record gets one card, in response order."""
        records = tuple(make_record(f"Recipe {i}") for i in range(5))
        mock_st = _mock_streamlit()

        with patch("ui.cards.st", mock_st):
            render_recipe_grid(records)

        assert mock_render_card.call_args_list == [call(record) for record in records]
        # 5 cards in rows of 3
        assert mock_st.columns.call_count == 2

    @patch("ui.cards.render_recipe_card")
    def test_custom_column_count(self, mock_render_card):
        """Test rows follow the requested column count."""
        records = tuple(make_record(f"Recipe {i}") for i in range(4))
        mock_st = _mock_streamlit()

        with patch("ui.cards.st", mock_st):
            render_recipe_grid(records, columns=2)

        assert mock_render_card.call_count == 4
        assert mock_st.columns.call_count == 2


class TestRenderRecipeCard:
    """Test the contents of a single card."""

    def test_card_contents(self):
        """Test title, calories, ingredients and link are rendered."""
        mock_st = _mock_streamlit()
        record = make_record("Pancakes", calories=1234.25)

        with patch("ui.cards.st", mock_st):
            render_recipe_card(record)

        mock_st.container.assert_called_once_with(border=True)
        markdown_texts = [c.args[0] for c in mock_st.markdown.call_args_list]
        assert "### Pancakes" in markdown_texts
        assert "**Calories:** 1234.3" in markdown_texts
        assert "- 1 egg\n- salt" in markdown_texts
        mock_st.image.assert_called_once()
        mock_st.link_button.assert_called_once()
        assert mock_st.link_button.call_args.kwargs["url"] == "https://recipes.example.com/Pancakes"
