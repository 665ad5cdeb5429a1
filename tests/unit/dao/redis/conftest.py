from unittest.mock import MagicMock

import pytest
import redis


@pytest.fixture
def app_prefix() -> str:
    return 'testapp:test'


@pytest.fixture
def redis_client() -> redis.Redis:
    """Mock a reachable Redis client."""
    client = MagicMock(
        spec=redis.Redis,
        connection_pool=MagicMock(spec=redis.ConnectionPool, connection_kwargs={'host': 'redis.test', 'port': 6379, 'db': 0}),
    )
    client.ping.return_value = True
    client.get.return_value = None
    return client
