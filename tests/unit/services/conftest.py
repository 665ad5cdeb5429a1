import pytest

from microurl.generators import CounterIdGenerator
from microurl.services import MicroUrlService


@pytest.fixture
def service() -> MicroUrlService:
    return MicroUrlService()


@pytest.fixture
def sequential_service() -> MicroUrlService:
    """Service whose first id is 0."""
    return MicroUrlService(generator=CounterIdGenerator(start=0))
