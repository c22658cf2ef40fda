import io
import logging

import pytest

from csvtoply.logging_config import LOGGER_NAME, setup_logging, verbosity_level


@pytest.fixture(autouse=True)
def _reset_logging():
    yield
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)


def test_verbosity_level():
    assert verbosity_level(True) == logging.DEBUG
    assert verbosity_level(False) == logging.INFO


def test_messages_reach_the_given_stream():
    stream = io.StringIO()
    setup_logging(level=logging.INFO, stream=stream)
    logging.getLogger("csvtoply.model.schema").warning("Input has multiple UV maps")
    assert "WARNING - Input has multiple UV maps" in stream.getvalue()


def test_debug_is_filtered_at_info():
    stream = io.StringIO()
    setup_logging(level=logging.INFO, stream=stream)
    logging.getLogger("csvtoply.model.io").debug("hidden")
    assert "hidden" not in stream.getvalue()


def test_repeated_setup_does_not_duplicate_handlers(tmp_path):
    setup_logging(stream=io.StringIO())
    logger = setup_logging(stream=io.StringIO(), log_file=str(tmp_path / "run.log"))
    assert len(logger.handlers) == 2
