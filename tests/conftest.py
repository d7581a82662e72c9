from datetime import datetime

import pytest

FIXED_TIME = datetime(2024, 1, 5, 9, 3, 7)


@pytest.fixture
def clock():
    """A settable clock: clock.now is returned by clock()."""

    class Clock:
        now = FIXED_TIME

        def __call__(self):
            return self.now

    return Clock()


@pytest.fixture
def log_path(tmp_path):
    return str(tmp_path / "app.log")
