"""
Tests for configuration and structured logging
"""

import json
import logging

from ledger_service import config as config_module
from ledger_service.config import LedgerConfig, get_config, reload_config
from ledger_service.logging_config import JSONFormatter, setup_logging, log_action, get_logger


class TestConfig:
    """Test LedgerConfig defaults and environment overrides"""

    def test_defaults(self, monkeypatch):
        for key in ["LEDGER_API_PORT", "LEDGER_API_HOST", "LEDGER_LOG_LEVEL", "LEDGER_LOG_FORMAT",
                    "LEDGER_AMOUNT_PRECISION"]:
            monkeypatch.delenv(key, raising=False)
        config = LedgerConfig()

        assert config.api_host == "127.0.0.1"
        assert config.api_port == 3333
        assert config.log_level == "INFO"
        assert config.log_format == "json"
        assert config.amount_precision == 2

    def test_environment_override(self, monkeypatch):
        monkeypatch.setenv("LEDGER_API_PORT", "8080")
        monkeypatch.setenv("LEDGER_LOG_FORMAT", "text")

        config = LedgerConfig()
        assert config.api_port == 8080
        assert config.log_format == "text"

    def test_reload_config(self, monkeypatch):
        original = config_module.config
        try:
            monkeypatch.setenv("LEDGER_AMOUNT_PRECISION", "3")
            reloaded = reload_config()
            assert reloaded.amount_precision == 3
            assert get_config() is reloaded
        finally:
            config_module.config = original


class TestJSONFormatter:
    """Test structured log output"""

    def _record(self, **fields):
        record = logging.LogRecord("ledger.test", logging.INFO, __file__, 1, "hello", (), None)
        for key, value in fields.items():
            setattr(record, key, value)
        return record

    def test_basic_fields(self):
        entry = json.loads(JSONFormatter().format(self._record()))

        assert entry["level"] == "INFO"
        assert entry["message"] == "hello"
        assert "timestamp" in entry
        assert "action" not in entry

    def test_structured_fields(self):
        record = self._record(action="customer_created", resource="111",
                              customer_id="abc", extra={"amount": "1.00"})
        entry = json.loads(JSONFormatter().format(record))

        assert entry["action"] == "customer_created"
        assert entry["resource"] == "111"
        assert entry["customer_id"] == "abc"
        assert entry["extra"] == {"amount": "1.00"}


class TestSetupLogging:
    """Test logger configuration and log_action"""

    def test_setup_json(self):
        logger = setup_logging("DEBUG", logger_name="ledger.test.json")

        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0].formatter, JSONFormatter)
        assert not logger.propagate

    def test_setup_twice_does_not_duplicate_handlers(self):
        setup_logging(logger_name="ledger.test.twice")
        logger = setup_logging(logger_name="ledger.test.twice")
        assert len(logger.handlers) == 1

    def test_setup_text(self):
        logger = setup_logging("INFO", log_format="text", logger_name="ledger.test.text")
        assert not isinstance(logger.handlers[0].formatter, JSONFormatter)

    def test_setup_file(self, tmp_path):
        log_file = tmp_path / "ledger.log"
        logger = setup_logging("INFO", log_file=str(log_file), logger_name="ledger.test.file")

        log_action(logger, "info", "written", action="test_action")
        logger.handlers[0].flush()

        entry = json.loads(log_file.read_text().strip())
        assert entry["message"] == "written"
        assert entry["action"] == "test_action"
        assert entry["module"] == "test_config_logging"

    def test_log_action_attaches_fields(self, caplog):
        logger = get_logger("test.ledger.caplog")
        logger.propagate = True

        with caplog.at_level(logging.INFO, logger="test.ledger.caplog"):
            log_action(logger, "warning", "rejected", action="operation_rejected",
                       resource="111", extra={"amount": "5.00"})

        assert len(caplog.records) == 1
        record = caplog.records[0]
        assert record.levelname == "WARNING"
        assert record.action == "operation_rejected"
        assert record.resource == "111"
        assert record.extra == {"amount": "5.00"}
        assert record.module == "test_config_logging"
        assert record.funcName == "test_log_action_attaches_fields"

    def test_log_action_respects_level(self, caplog):
        logger = get_logger("test.ledger.quiet")
        logger.propagate = True

        with caplog.at_level(logging.WARNING, logger="test.ledger.quiet"):
            log_action(logger, "info", "ignored")

        assert caplog.records == []
