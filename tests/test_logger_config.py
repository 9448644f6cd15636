"""Unit tests for logger_config.py."""

import json
import logging
import sys

from logger_config import JSONFormatter, create_logger


def _record(**extra):
    record = logging.makeLogRecord({"name": "x", "levelno": logging.INFO, "levelname": "INFO", "msg": "count %s"})
    record.args = ("employees",)
    record.__dict__.update(extra)
    return record


class TestCreateLogger:
    def test_levels_resolved_from_table(self):
        assert create_logger("tests.log.warning", "warning", "text", "vacuum").level == logging.WARNING
        assert create_logger("tests.log.fatal", "fatal", "text", "vacuum").level == logging.CRITICAL
        assert create_logger("tests.log.trace", "trace", "text", "vacuum").level == logging.DEBUG

    def test_unknown_level_falls_back_to_debug(self):
        assert create_logger("tests.log.unknown", "loud", "text", "vacuum").level == logging.DEBUG

    def test_vacuum_discards(self):
        logger = create_logger("tests.log.vacuum", "info", "text", "vacuum")
        assert isinstance(logger.handlers[0], logging.NullHandler)

    def test_stderr_output(self):
        logger = create_logger("tests.log.stderr", "info", "text", "stderr")
        assert logger.handlers[0].stream is sys.stderr

    def test_json_formatter_selected(self):
        logger = create_logger("tests.log.json", "info", "json", "vacuum")
        assert isinstance(logger.handlers[0].formatter, JSONFormatter)

    def test_unknown_formatter_falls_back_to_text(self):
        logger = create_logger("tests.log.xml", "info", "xml", "vacuum")
        assert not isinstance(logger.handlers[0].formatter, JSONFormatter)

    def test_file_output(self, tmp_path):
        path = tmp_path / "service.log"
        logger = create_logger("tests.log.file", "info", "text", str(path))
        try:
            logger.info("hello")
            logger.handlers[0].flush()
            assert "hello" in path.read_text(encoding="utf-8")
        finally:
            logger.handlers[0].close()

    def test_unwritable_file_falls_back_to_stdout(self, tmp_path):
        logger = create_logger("tests.log.missing", "info", "text", str(tmp_path / "missing" / "x.log"))
        assert isinstance(logger.handlers[0], logging.StreamHandler)
        assert logger.handlers[0].stream is sys.stdout

    def test_no_duplicate_handlers(self):
        create_logger("tests.log.dup", "info", "text", "vacuum")
        logger = create_logger("tests.log.dup", "info", "text", "vacuum")
        assert len(logger.handlers) == 1


class TestJSONFormatter:
    def test_core_fields(self):
        entry = json.loads(JSONFormatter().format(_record()))
        assert entry["level"] == "info"
        assert entry["logger"] == "x"
        assert entry["msg"] == "count employees"
        assert "time" in entry

    def test_extra_fields_inlined(self):
        entry = json.loads(JSONFormatter().format(_record(query="SELECT 1", query_args={"p": 1})))
        assert entry["query"] == "SELECT 1"
        assert entry["query_args"] == {"p": 1}
        assert "args" not in entry
