import logging

from dialectkit.utils import configure_logging, get_logger


def test_get_logger_is_namespaced():
    assert get_logger("registry").name == "dialectkit.registry"


def test_configure_logging_installs_single_handler():
    configure_logging()
    configure_logging(logging.DEBUG)
    assert len(logging.getLogger("dialectkit").handlers) == 1
