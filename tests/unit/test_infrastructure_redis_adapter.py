"""Unit tests for RedisAdapter.

Tests cover:
- Byte decoding and JSON handling
- TTL writes via SETEX
- RedisError mapping to CacheError for every operation
"""

from unittest.mock import AsyncMock

import pytest
from redis.exceptions import ConnectionError as RedisConnectionError

from src.core.result import Failure, Success
from src.infrastructure.cache.redis_adapter import RedisAdapter
from src.infrastructure.enums import InfrastructureErrorCode
from src.infrastructure.errors import CacheError


@pytest.fixture
def redis_client():
    return AsyncMock()


@pytest.fixture
def adapter(redis_client):
    return RedisAdapter(redis_client=redis_client)


@pytest.mark.unit
class TestRedisAdapterReads:
    """Test get, get_json, exists and ttl."""

    async def test_get_decodes_bytes(self, adapter, redis_client):
        redis_client.get.return_value = b"value"

        assert await adapter.get("k") == Success(value="value")

    async def test_get_miss_returns_none(self, adapter, redis_client):
        redis_client.get.return_value = None

        assert await adapter.get("k") == Success(value=None)

    async def test_get_json_parses_payload(self, adapter, redis_client):
        redis_client.get.return_value = b'["payment_read"]'

        assert await adapter.get_json("k") == Success(value=["payment_read"])

    async def test_get_json_invalid_payload_is_decode_error(self, adapter, redis_client):
        redis_client.get.return_value = b"{not json"

        result = await adapter.get_json("k")

        assert isinstance(result, Failure)
        assert result.error.infrastructure_code == InfrastructureErrorCode.CACHE_DECODE_ERROR

    async def test_exists_counts_keys(self, adapter, redis_client):
        redis_client.exists.return_value = 1

        assert await adapter.exists("k") == Success(value=True)

    @pytest.mark.parametrize("raw", [-1, -2])
    async def test_ttl_without_expiry_is_none(self, adapter, redis_client, raw):
        redis_client.ttl.return_value = raw

        assert await adapter.ttl("k") == Success(value=None)

    async def test_ttl_returns_seconds(self, adapter, redis_client):
        redis_client.ttl.return_value = 120

        assert await adapter.ttl("k") == Success(value=120)


@pytest.mark.unit
class TestRedisAdapterWrites:
    """Test set, set_json and delete."""

    async def test_set_with_ttl_uses_setex(self, adapter, redis_client):
        result = await adapter.set("k", "v", ttl=60)

        assert result == Success(value=None)
        redis_client.setex.assert_awaited_once_with("k", 60, "v")
        redis_client.set.assert_not_called()

    async def test_set_without_ttl_uses_set(self, adapter, redis_client):
        await adapter.set("k", "v")

        redis_client.set.assert_awaited_once_with("k", "v")

    async def test_set_json_serializes(self, adapter, redis_client):
        await adapter.set_json("k", ["a", "b"], ttl=10)

        redis_client.setex.assert_awaited_once_with("k", 10, '["a", "b"]')

    async def test_set_json_unserializable_fails(self, adapter, redis_client):
        result = await adapter.set_json("k", {object()})

        assert isinstance(result, Failure)
        assert result.error.infrastructure_code == InfrastructureErrorCode.CACHE_SET_ERROR
        redis_client.set.assert_not_called()

    async def test_delete_reports_removal(self, adapter, redis_client):
        redis_client.delete.return_value = 0

        assert await adapter.delete("k") == Success(value=False)


@pytest.mark.unit
class TestRedisAdapterFailures:
    """Test RedisError mapping."""

    @pytest.mark.parametrize(
        ("method", "args", "client_method", "expected_code"),
        [
            ("get", ("k",), "get", InfrastructureErrorCode.CACHE_GET_ERROR),
            ("set", ("k", "v", 5), "setex", InfrastructureErrorCode.CACHE_SET_ERROR),
            ("delete", ("k",), "delete", InfrastructureErrorCode.CACHE_DELETE_ERROR),
            ("exists", ("k",), "exists", InfrastructureErrorCode.CACHE_GET_ERROR),
            ("ttl", ("k",), "ttl", InfrastructureErrorCode.CACHE_GET_ERROR),
            ("ping", (), "ping", InfrastructureErrorCode.CACHE_CONNECTION_ERROR),
        ],
    )
    async def test_redis_error_becomes_cache_error(
        self, adapter, redis_client, method, args, client_method, expected_code
    ):
        getattr(redis_client, client_method).side_effect = RedisConnectionError("down")

        result = await getattr(adapter, method)(*args)

        assert isinstance(result, Failure)
        assert isinstance(result.error, CacheError)
        assert result.error.infrastructure_code == expected_code
        assert result.error.details["error"] == "down"
