import pytest
from unittest.mock import patch
from typer.testing import CliRunner

from cli import app

runner = CliRunner()


@pytest.mark.unit
class TestCli:

    @pytest.fixture(autouse=True)
    def mock_setup_logging(self):
        """Keep the CLI from reconfiguring the root logger during tests."""
        with patch('cli.setup_logging') as mock_setup:
            yield mock_setup

    def test_log_level_option(self, mock_setup_logging):
        """Test the global log level option configures logging."""
        result = runner.invoke(app, ["--log-level", "debug", "field-types"])

        assert result.exit_code == 0
        mock_setup_logging.assert_called_once_with(log_level="DEBUG")

    def test_field_types(self):
        """Test listing registered field types."""
        result = runner.invoke(app, ["field-types"])

        assert result.exit_code == 0
        assert "text" in result.output
        assert "maxlength" in result.output

    def test_render(self):
        """Test previewing a field render."""
        result = runner.invoke(app, ["render", "text", "first_name", "--page", "edit", "--value", "Ada"])

        assert result.exit_code == 0
        assert 'name="first_name"' in result.output
        assert 'value="Ada"' in result.output

    def test_render_by_class_name_with_fallback(self):
        """Test previewing a type without its own partial."""
        result = runner.invoke(app, ["render", "Number", "Age", "--value", "36"])

        assert result.exit_code == 0
        assert result.output.strip() == "36"

    def test_render_unknown_type(self):
        """Test unknown field types exit with an error."""
        result = runner.invoke(app, ["render", "missing", "Name"])

        assert result.exit_code == 1
