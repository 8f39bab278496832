from __future__ import annotations

import pytest


@pytest.fixture(autouse=True)
def _reset_logging():
    """Drop any loguru sinks a test installed via setup_logging()."""
    yield
    from hoi4loc.utils.logging_config import log_manager
    log_manager.reset()
