import pytest

from helpers import RecordingDeliverer


@pytest.fixture
def deliverer() -> RecordingDeliverer:
    return RecordingDeliverer()
