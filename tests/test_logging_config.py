import logging

from rich.logging import RichHandler

from declsynth.logging_config import LOGGER_NAME, configure_logging, get_logger


def test_get_logger_nests_under_package():
    assert get_logger("declsynth.render.printer").name == "declsynth.render.printer"
    assert get_logger("pipeline").name == "declsynth.pipeline"
    assert get_logger(LOGGER_NAME).name == LOGGER_NAME


def test_configure_logging_installs_single_rich_handler():
    logger = configure_logging(logging.DEBUG)
    configure_logging("WARNING")

    rich_handlers = [h for h in logger.handlers if isinstance(h, RichHandler)]
    assert len(rich_handlers) == 1
    assert logger.level == logging.WARNING
