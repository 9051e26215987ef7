# tests/test_logging.py
from loguru import logger

from core.logging import configure_logging


def test_configure_logging_filters_by_level(capsys):
    configure_logging("WARNING")
    try:
        logger.info("hidden message")
        logger.warning("visible message")
        err = capsys.readouterr().err
    finally:
        logger.remove()
        logger.add(lambda message: None)

    assert "visible message" in err
    assert "hidden message" not in err
