"""Test logging configuration."""

import io
import logging
from pathlib import Path

import structlog
from structlog.testing import capture_logs

from tunnel_update.common.logging import get_logger, setup_logging


class TestLogging:
    """Test logging functionality."""

    def setup_method(self) -> None:
        """Setup before each test - reset logging configuration."""
        structlog.reset_defaults()
        root_logger = logging.getLogger()
        for handler in root_logger.handlers[:]:
            root_logger.removeHandler(handler)

    def teardown_method(self) -> None:
        """Leave structlog unconfigured so later tests can capture events."""
        structlog.reset_defaults()

    def test_setup_logging_default(self) -> None:
        """Test default logging setup."""
        setup_logging()
        logger = get_logger("test")
        assert logger is not None
        assert hasattr(logger, "info")
        assert hasattr(logger, "error")
        assert logging.getLogger().level == logging.INFO

    def test_setup_logging_with_level(self) -> None:
        """Test logging setup with custom level."""
        setup_logging(level="debug")
        assert logging.getLogger().level == logging.DEBUG

    def test_setup_logging_json_to_stream(self) -> None:
        """Test JSON rendering to a custom stream."""
        stream = io.StringIO()
        setup_logging(json_format=True, stream=stream)

        get_logger("json_test").info("tunnel event", tunnel_id=7)

        output = stream.getvalue()
        assert '"event": "tunnel event"' in output
        assert '"tunnel_id": 7' in output

    def test_capture_events(self) -> None:
        """Test event capture with structured keys."""
        setup_logging()
        logger = get_logger("capture_test")

        with capture_logs() as cap:
            logger.info("test message", key="value")

        assert len(cap) == 1
        assert cap[0]["event"] == "test message"
        assert cap[0]["key"] == "value"

    def test_setup_logging_with_file(self, tmp_path: Path) -> None:
        """Test logging setup with file output."""
        log_file = tmp_path / "test.log"
        setup_logging(log_file=str(log_file))

        python_logger = logging.getLogger("test_file")
        python_logger.info("test message")

        for handler in logging.getLogger().handlers:
            handler.flush()

        assert log_file.exists()
        assert "test message" in log_file.read_text()
