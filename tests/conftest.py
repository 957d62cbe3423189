import logging

import pytest


@pytest.fixture(autouse=True)
def restore_root_logging():
    """Put back root handlers replaced by `setup_logging` during a test."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)
