"""Tests for http_client module — shared client lifecycle."""

import blogfront.services.http_client as http_mod
from blogfront.services.http_client import (
    USER_AGENT,
    close_shared_client,
    get_shared_client,
)


class TestSharedClient:
    """Tests for get_shared_client() / close_shared_client()."""

    async def test_returns_same_instance(self):
        first = get_shared_client()
        assert get_shared_client() is first
        await close_shared_client()

    async def test_sets_timeout_and_user_agent(self):
        client = get_shared_client()
        assert client.timeout.read == 15.0
        assert client.headers["User-Agent"] == USER_AGENT
        await close_shared_client()

    async def test_close_resets_and_recreates(self):
        first = get_shared_client()
        await close_shared_client()

        assert first.is_closed
        assert http_mod._client is None
        second = get_shared_client()
        assert second is not first
        await close_shared_client()

    async def test_close_without_client_is_a_no_op(self):
        await close_shared_client()
        assert http_mod._client is None

