import pytest
from unittest.mock import Mock

from fields.formatting import CustomFormat
from fields.types import Number
from models.record import DictRecord


@pytest.mark.unit
class TestCustomFormat:

    def test_extra_args_follow_data(self):
        """Test extra arguments are passed after the render data."""
        callback = Mock(return_value="12.50 EUR")

        result = CustomFormat(callback, ("EUR",))(12.5, None)

        assert result == "12.50 EUR"
        callback.assert_called_once_with(12.5, None, "EUR")

    def test_format_attaches_strategy(self):
        """Test format() stores a formatter with its arguments."""
        field = Number.make("price").format(lambda value, model, currency: f"{value:.2f} {currency}", "EUR")

        assert field.has_custom_format()
        assert field.set_value(12.5).render("index") == "12.50 EUR"

    def test_display_using_alias(self):
        """Test display_using() behaves like format()."""
        field = Number.make("age").display_using(lambda value, model: value * 2)

        assert field.set_model(DictRecord(age=21)).render("view") == 42

    def test_format_accepts_strategy_object(self):
        """Test an existing CustomFormat can be attached as is."""
        strategy = CustomFormat(lambda value, model: "x")

        field = Number.make("age").format(strategy)

        assert field.call_formatter((1, None)) == "x"

    def test_clear_format(self):
        """Test clearing the formatter restores template rendering."""
        field = Number.make("age").format(Mock()).clear_format()

        assert field.has_custom_format() is False
