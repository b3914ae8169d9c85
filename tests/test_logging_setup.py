import logging

import pytest

from cribbage_calc.logging_setup import configure_logging, log_file_path


@pytest.fixture
def clean_root_logger():
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield root
    for h in root.handlers[:]:
        if h not in handlers:
            root.removeHandler(h)
            h.close()
    root.setLevel(level)


def test_log_file_path_override(monkeypatch, tmp_path):
    monkeypatch.setenv("CRIB_CALC_LOG_FILE", str(tmp_path / "x.log"))
    assert log_file_path() == tmp_path / "x.log"
    monkeypatch.delenv("CRIB_CALC_LOG_FILE")
    assert log_file_path().parts[-2:] == ("text", "log_file.log")


def test_configure_logging_is_idempotent(monkeypatch, tmp_path, clean_root_logger):
    log_file = tmp_path / "nested" / "calc.log"
    monkeypatch.setenv("CRIB_CALC_LOG_FILE", str(log_file))
    monkeypatch.setenv("CRIB_CALC_LOG_LEVEL", "debug")
    configure_logging()
    count = len(clean_root_logger.handlers)
    configure_logging()
    assert len(clean_root_logger.handlers) == count
    assert clean_root_logger.level == logging.DEBUG

    logging.getLogger("cribbage_calc.test").debug("written to file")
    for h in clean_root_logger.handlers:
        h.flush()
    assert "written to file" in log_file.read_text(encoding="utf-8")
