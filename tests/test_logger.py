import json
import logging

from shared.config import WardenConfig
from shared.logger import WardenLogger


def read_json_lines(path):
    return [json.loads(line) for line in path.read_text(encoding="utf-8").splitlines() if line]


def test_json_file_records_carry_context(tmp_path):
    log_file = tmp_path / "logs" / "warden.log"
    log = WardenLogger(
        "test-json", log_level="DEBUG", log_file=log_file, json_logs=True, console_output=False
    )

    log.info("outside")
    with log.operation("analyze_password"):
        log.info("inside", length=12)

    first, second = read_json_lines(log_file)
    assert first["logger"] == "warden.test-json"
    assert first["component"] == "test-json"
    assert "operation" not in first
    assert second["operation"] == "analyze_password"
    assert second["fields"] == {"length": 12}


def test_exception_includes_traceback(tmp_path):
    log_file = tmp_path / "warden.log"
    log = WardenLogger("test-exc", log_file=log_file, json_logs=True, console_output=False)
    try:
        raise ValueError("boom")
    except ValueError:
        log.exception("failed")

    (record,) = read_json_lines(log_file)
    assert record["level"] == "ERROR"
    assert "ValueError: boom" in record["exception"]


def test_reinstantiation_does_not_stack_handlers():
    WardenLogger("test-handlers", console_output=True)
    log = WardenLogger("test-handlers", console_output=True)
    assert len(log.underlying.handlers) == 1


def test_level_filtering(tmp_path):
    log_file = tmp_path / "warden.log"
    log = WardenLogger(
        "test-level", log_level="WARNING", log_file=log_file, console_output=False
    )
    log.info("hidden")
    log.warning("shown")
    text = log_file.read_text(encoding="utf-8")
    assert "hidden" not in text
    assert "shown" in text


def test_from_config_debug_overrides_level():
    config = WardenConfig()
    config.global_settings.debug = True
    log = WardenLogger.from_config("test-config", config)
    assert log.underlying.level == logging.DEBUG
    assert log.component == "test-config"


def test_timed_measures_elapsed():
    log = WardenLogger("test-timed", console_output=False)
    with log.timed("work") as timer:
        pass
    assert timer.elapsed >= 0


def test_secret_named_fields_are_redacted(tmp_path):
    log_file = tmp_path / "warden.log"
    log = WardenLogger("test-redact", log_file=log_file, json_logs=True, console_output=False)
    log.info("checked", password="hunter2", length=7)

    (record,) = read_json_lines(log_file)
    assert record["fields"] == {"password": "[redacted]", "length": 7}
    assert "hunter2" not in log_file.read_text(encoding="utf-8")


def test_operations_nest(tmp_path):
    log_file = tmp_path / "warden.log"
    log = WardenLogger("test-nest", log_file=log_file, json_logs=True, console_output=False)
    with log.operation("outer"):
        with log.operation("inner"):
            log.info("a")
        log.info("b")

    inner, outer = read_json_lines(log_file)
    assert inner["operation"] == "inner"
    assert outer["operation"] == "outer"


def test_plain_text_file_format(tmp_path):
    log_file = tmp_path / "warden.log"
    log = WardenLogger("test-text", log_file=log_file, console_output=False)
    with log.operation("scan"):
        log.info("hello")
    line = log_file.read_text(encoding="utf-8").strip()
    assert "warden.test-text [scan] hello" in line
