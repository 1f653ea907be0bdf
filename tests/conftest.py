import logging

import pytest


@pytest.fixture(autouse=True)
def restore_root_logger():
    """setup_logger replaces root handlers; put the originals back."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers = handlers
    root.setLevel(level)
