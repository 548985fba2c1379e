import logging

import pytest


@pytest.fixture
def reset_logging():
    yield
    log = logging.getLogger("dirlauncher")
    for h in list(log.handlers):
        log.removeHandler(h)
        h.close()
    log.propagate = True
    log.setLevel(logging.NOTSET)
