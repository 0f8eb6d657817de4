import json
import logging

import pytest

from core.logging_config import ColoredFormatter, LogContext, StructuredFormatter, get_logger


@pytest.mark.unit
class TestLoggingConfig:

    def test_structured_formatter_includes_render_context(self):
        """Test JSON logs carry the page and field stamped by LogContext."""
        with LogContext(page="edit", field_id="first_name", field_type="text"):
            record = logging.getLogger("tests").makeRecord(
                "tests", logging.INFO, __file__, 1, "rendered", None, None
            )

        payload = json.loads(StructuredFormatter().format(record))

        assert payload["message"] == "rendered"
        assert payload["page"] == "edit"
        assert payload["field_id"] == "first_name"
        assert payload["field_type"] == "text"

    def test_log_context_restores_factory(self):
        """Test the record factory is restored after the block."""
        factory = logging.getLogRecordFactory()

        with LogContext(page="index"):
            assert logging.getLogRecordFactory() is not factory

        assert logging.getLogRecordFactory() is factory

    def test_get_logger_context_helpers(self, caplog):
        """Test *_ctx helpers attach extra fields."""
        logger = get_logger("tests.ctx")

        with caplog.at_level(logging.INFO, logger="tests.ctx"):
            logger.info_ctx("loaded", count=3)

        assert caplog.records[0].extra_fields == {"count": 3}

    def test_colored_formatter_appends_extra_fields(self):
        """Test context fields are appended to human-readable logs."""
        record = logging.getLogger("tests").makeRecord(
            "tests", logging.INFO, __file__, 1, "Column marked sortable", None, None,
            extra={"extra_fields": {"field_id": "first_name"}},
        )

        output = ColoredFormatter(fmt="%(message)s").format(record)

        assert output == "Column marked sortable field_id=first_name"
