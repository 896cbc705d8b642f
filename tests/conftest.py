from unittest.mock import MagicMock, patch

import pytest


@pytest.fixture()
def sleep() -> MagicMock:
    with patch('sleepbar.timer.sleep') as mocked_sleep:
        yield mocked_sleep
