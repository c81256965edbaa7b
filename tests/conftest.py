import logging

import pytest


@pytest.fixture(autouse=True)
def reset_menagerie_logger():
    yield
    logger = logging.getLogger("menagerie")
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
