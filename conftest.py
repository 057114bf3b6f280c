# Ensure src/ is on sys.path for tests run from a checkout
import io, sys, pathlib
root = pathlib.Path(__file__).resolve().parent
src = root / "src"
if str(src) not in sys.path:
    sys.path.insert(0, str(src))

import pytest

from msglogger.core.engine import LoggerState


@pytest.fixture
def stream():
    return io.StringIO()


@pytest.fixture
def state(stream):
    """Isolated logger writing to an in-memory stream."""
    log = LoggerState(stream=stream, colors_enabled=True)
    yield log
    log.clean_up()


@pytest.fixture
def plain_state(stream):
    log = LoggerState(stream=stream, colors_enabled=False)
    yield log
    log.clean_up()
