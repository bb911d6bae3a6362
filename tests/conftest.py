import logging

import pytest


@pytest.fixture(autouse=True)
def enable_logging():
    """ The cli disables logging globally, restore it for the next test """
    yield
    logging.disable(logging.NOTSET)
