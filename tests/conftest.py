import pytest

from tests.helpers import FakePipeline


@pytest.fixture
def pipeline() -> FakePipeline:
    return FakePipeline()
