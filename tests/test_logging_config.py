import logging

import pytest

from quantumscenarios.logging_config import resolve_level, setup_logging


@pytest.mark.parametrize(
    "level, expected",
    [("DEBUG", logging.DEBUG), ("warning", logging.WARNING), (logging.ERROR, logging.ERROR)],
)
def test_resolve_level(level, expected):
    assert resolve_level(level) == expected


def test_resolve_unknown_level():
    with pytest.raises(ValueError):
        resolve_level("LOUD")


def test_setup_replaces_handlers(tmp_path):
    log_file = tmp_path / "engine.log"
    setup_logging("INFO")
    logger = setup_logging("debug", log_file=str(log_file))

    assert logger.name == "quantumscenarios"
    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 2

    logging.getLogger("quantumscenarios.engine").info("orbital n = 2")
    for handler in logger.handlers:
        handler.flush()
    assert "orbital n = 2" in log_file.read_text(encoding="utf-8")
    logger.handlers[1].close()


def test_cli_accepts_lowercase_level():
    from quantumscenarios.main import main

    assert main(["--log-level", "warning", "well", "1"]) == 0
    assert logging.getLogger("quantumscenarios").level == logging.WARNING
