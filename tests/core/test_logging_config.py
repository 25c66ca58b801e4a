"""
Tests for gridkit.core.logging_config module
"""

import json
import logging

from gridkit.core.logging_config import ContextFormatter, JSONFormatter, get_logger, log_with_context, setup_logging


def make_record(message="Breakpoint not defined", **extra_fields):
    record = logging.LogRecord(
        name="gridkit.framework.resolver",
        level=logging.WARNING,
        pathname=__file__,
        lineno=10,
        msg=message,
        args=(),
        exc_info=None,
    )
    if extra_fields:
        record.extra_fields = extra_fields
    return record


class TestJSONFormatter:
    """Test structured JSON output"""

    def test_standard_fields(self):
        """Test timestamp, level, logger and message are present"""
        data = json.loads(JSONFormatter().format(make_record()))
        assert data["level"] == "WARNING"
        assert data["logger"] == "gridkit.framework.resolver"
        assert data["message"] == "Breakpoint not defined"
        assert data["timestamp"].endswith("Z")

    def test_extra_fields_merged(self):
        """Test extra_fields are added to the JSON object"""
        data = json.loads(JSONFormatter().format(make_record(rule="unknown-breakpoint", name="tablet")))
        assert data["rule"] == "unknown-breakpoint"
        assert data["name"] == "tablet"


class TestContextFormatter:
    """Test human-readable output"""

    def test_plain_message(self):
        """Test records without context are formatted unchanged"""
        output = ContextFormatter(fmt="%(levelname)s | %(message)s").format(make_record())
        assert output == "WARNING | Breakpoint not defined"

    def test_context_appended(self):
        """Test diagnostic payload is flattened into key=value pairs"""
        record = make_record(rule="unknown-breakpoint", context={"name": "tablet"})
        output = ContextFormatter(fmt="%(message)s").format(record)
        assert output == "Breakpoint not defined [rule=unknown-breakpoint name=tablet]"


class TestSetupLogging:
    """Test logging setup"""

    def test_configures_package_logger(self, restore_gridkit_logger):
        """Test level and a single console handler"""
        setup_logging(level="DEBUG")
        assert restore_gridkit_logger.level == logging.DEBUG
        assert len(restore_gridkit_logger.handlers) == 1
        assert isinstance(restore_gridkit_logger.handlers[0].formatter, ContextFormatter)

    def test_json_output(self, restore_gridkit_logger):
        """Test JSON formatter selection"""
        setup_logging(level="WARNING", json_output=True)
        assert isinstance(restore_gridkit_logger.handlers[0].formatter, JSONFormatter)

    def test_log_file(self, restore_gridkit_logger, tmp_path):
        """Test file handler writes JSON"""
        log_file = tmp_path / "logs" / "gridkit.log"
        setup_logging(level="INFO", log_file=log_file)
        get_logger("gridkit.test").warning("written to file")
        for handler in restore_gridkit_logger.handlers:
            handler.flush()
            if isinstance(handler, logging.FileHandler):
                handler.close()
        data = json.loads(log_file.read_text(encoding="utf-8").strip())
        assert data["message"] == "written to file"

    def test_unknown_level_defaults_to_info(self, restore_gridkit_logger):
        """Test invalid level names fall back to INFO"""
        setup_logging(level="LOUD")
        assert restore_gridkit_logger.level == logging.INFO


class TestLogWithContext:
    """Test context logging helper"""

    def test_context_in_extra_fields(self, caplog):
        """Test context is attached as extra_fields"""
        logger = get_logger("gridkit.test")
        with caplog.at_level(logging.INFO, logger="gridkit"):
            log_with_context(logger, "info", "Generated blocks", count=3)
        record = caplog.records[-1]
        assert record.extra_fields == {"count": 3}
        assert record.getMessage() == "Generated blocks"
