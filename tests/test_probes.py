import asyncio
from unittest.mock import AsyncMock, MagicMock

import pytest

from healthboard.health import DatabaseProbe, ProbeStatus, RedisProbe
from healthboard.health.probes import parse_info_field


@pytest.mark.asyncio
async def test_database_probe_success_reports_record_counts(
    mock_session_factory: MagicMock,
    mock_db_session: AsyncMock,
) -> None:
    mock_db_session.scalar.side_effect = [3, 12, 480, 2]

    result = await DatabaseProbe(mock_session_factory).check()

    assert result.status == ProbeStatus.OK
    assert result.error is None
    assert result.response_time_ms >= 0
    assert result.metadata["record_counts"] == {
        "accounts": 3,
        "sessions": 12,
        "messages": 480,
        "machines": 2,
    }
    mock_db_session.execute.assert_awaited_once()
    assert mock_db_session.scalar.await_count == 4


@pytest.mark.asyncio
async def test_database_probe_connection_refused(
    mock_session_factory: MagicMock,
    mock_db_session: AsyncMock,
) -> None:
    mock_db_session.execute.side_effect = ConnectionRefusedError("Connection refused")

    result = await DatabaseProbe(mock_session_factory).check()

    assert result.status == ProbeStatus.ERROR
    assert result.error == "Connection refused"
    assert result.response_time_ms >= 0
    assert result.metadata == {}
    mock_db_session.scalar.assert_not_called()


@pytest.mark.asyncio
async def test_database_probe_count_failure_is_an_error(
    mock_session_factory: MagicMock,
    mock_db_session: AsyncMock,
) -> None:
    mock_db_session.scalar.side_effect = [3, RuntimeError('relation "sessions" does not exist')]

    result = await DatabaseProbe(mock_session_factory).check()

    assert result.status == ProbeStatus.ERROR
    assert result.error == 'relation "sessions" does not exist'
    assert "record_counts" not in result.metadata


@pytest.mark.asyncio
async def test_database_probe_error_without_message_uses_type_name(
    mock_session_factory: MagicMock,
    mock_db_session: AsyncMock,
) -> None:
    mock_db_session.execute.side_effect = TimeoutError()

    result = await DatabaseProbe(mock_session_factory).check()

    assert result.status == ProbeStatus.ERROR
    assert result.error == "TimeoutError"


@pytest.mark.asyncio
async def test_redis_probe_success(mock_redis: AsyncMock) -> None:
    result = await RedisProbe(mock_redis).check()

    assert result.status == ProbeStatus.OK
    assert result.metadata == {"connected_clients": 7, "used_memory": "1.05M"}
    mock_redis.ping.assert_awaited_once()


@pytest.mark.asyncio
async def test_redis_probe_missing_memory_field_is_omitted(mock_redis: AsyncMock) -> None:
    mock_redis.info.side_effect = lambda section: {
        "clients": {"connected_clients": 4},
        "memory": {"used_memory": 1024},
    }[section]

    result = await RedisProbe(mock_redis).check()

    assert result.status == ProbeStatus.OK
    assert result.metadata == {"connected_clients": 4}


@pytest.mark.asyncio
async def test_redis_probe_ping_timeout(mock_redis: AsyncMock) -> None:
    mock_redis.ping.side_effect = TimeoutError("Timeout reading from socket")

    result = await RedisProbe(mock_redis).check()

    assert result.status == ProbeStatus.ERROR
    assert result.error == "Timeout reading from socket"
    assert result.response_time_ms >= 0
    mock_redis.info.assert_not_called()


@pytest.mark.asyncio
async def test_redis_probe_info_failure(mock_redis: AsyncMock) -> None:
    mock_redis.info.side_effect = Exception("NOPERM this user has no permissions to run 'info'")

    result = await RedisProbe(mock_redis).check()

    assert result.status == ProbeStatus.ERROR
    assert "NOPERM" in (result.error or "")


@pytest.mark.asyncio
async def test_redis_probe_accepts_raw_info_text(mock_redis: AsyncMock) -> None:
    mock_redis.info.side_effect = lambda section: {
        "clients": "# Clients\r\nconnected_clients:12\r\nblocked_clients:0\r\n",
        "memory": "# Memory\r\nused_memory:2048\r\nused_memory_human:2.00K\r\n",
    }[section]

    result = await RedisProbe(mock_redis).check()

    assert result.metadata == {"connected_clients": 12, "used_memory": "2.00K"}


def test_parse_info_field_text_and_mapping() -> None:
    text = "used_memory:1024\r\nused_memory_human:1.00K\r\nused_memory_rss:4096\r\n"

    assert parse_info_field(text, "used_memory_human") == "1.00K"
    assert parse_info_field(text, "used_memory") == "1024"
    assert parse_info_field(text, "maxmemory_human") is None
    assert parse_info_field({"connected_clients": 3}, "connected_clients") == 3
    assert parse_info_field({}, "connected_clients") is None


@pytest.mark.asyncio
async def test_redis_probe_non_numeric_clients_is_omitted(mock_redis: AsyncMock) -> None:
    mock_redis.info.side_effect = lambda section: {
        "clients": {"connected_clients": "n/a"},
        "memory": {"used_memory_human": "900B"},
    }[section]

    result = await RedisProbe(mock_redis).check()

    assert result.status == ProbeStatus.OK
    assert result.metadata == {"used_memory": "900B"}


@pytest.mark.asyncio
async def test_database_latency_excludes_record_counts(
    mock_session_factory: MagicMock,
    mock_db_session: AsyncMock,
) -> None:
    async def slow_count(statement: object) -> int:
        await asyncio.sleep(0.1)
        return 1

    mock_db_session.scalar.side_effect = slow_count

    result = await DatabaseProbe(mock_session_factory).check()

    assert result.status == ProbeStatus.OK
    assert result.metadata["record_counts"]["machines"] == 1
    # Four counts took ~400ms, none of it reported as latency
    assert result.response_time_ms < 100


@pytest.mark.asyncio
async def test_database_latency_measured_on_failure(
    mock_session_factory: MagicMock,
    mock_db_session: AsyncMock,
) -> None:
    async def slow_refusal(statement: object) -> None:
        await asyncio.sleep(0.1)
        raise ConnectionRefusedError("Connection refused")

    mock_db_session.execute.side_effect = slow_refusal

    result = await DatabaseProbe(mock_session_factory).check()

    assert result.status == ProbeStatus.ERROR
    assert result.response_time_ms >= 90


@pytest.mark.asyncio
async def test_redis_latency_measured_on_failure(mock_redis: AsyncMock) -> None:
    async def slow_timeout() -> None:
        await asyncio.sleep(0.1)
        raise TimeoutError("Timeout reading from socket")

    mock_redis.ping.side_effect = slow_timeout

    result = await RedisProbe(mock_redis).check()

    assert result.status == ProbeStatus.ERROR
    assert result.error == "Timeout reading from socket"
    assert result.response_time_ms >= 90


@pytest.mark.asyncio
async def test_redis_latency_excludes_info_reads(mock_redis: AsyncMock) -> None:
    async def slow_info(section: str) -> dict[str, object]:
        await asyncio.sleep(0.1)
        return {"connected_clients": 1, "used_memory_human": "1.00K"}

    mock_redis.info.side_effect = slow_info

    result = await RedisProbe(mock_redis).check()

    assert result.status == ProbeStatus.OK
    assert result.response_time_ms < 100


@pytest.mark.asyncio
async def test_result_metadata_is_read_only(mock_redis: AsyncMock) -> None:
    result = await RedisProbe(mock_redis).check()

    with pytest.raises(TypeError):
        result.metadata["connected_clients"] = 0  # type: ignore[index]
