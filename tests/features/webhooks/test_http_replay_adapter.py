"""Tests for the aiohttp replay adapter."""

import asyncio
import json
import socket
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from unittest.mock import AsyncMock

import pytest
from aiohttp import test_utils, web
from yarl import URL

from hookstorm.features.webhooks.adapters import (
    HttpReplayAdapter,
    build_replay_headers,
    build_replay_url,
)
from hookstorm.features.webhooks.entities import WebhookEvent


@asynccontextmanager
async def replay_target(status=200, delay=0.0):
    """Run a local HTTP server that records every request it receives."""
    received = []
    
    async def handler(request: web.Request) -> web.Response:
        received.append({
            "method": request.method,
            "host": request.host,
            "path": request.path,
            "headers": request.headers.copy(),
            "query": request.query.copy(),
            "body": await request.read(),
        })
        if delay:
            await asyncio.sleep(delay)
        return web.Response(status=status, text="ok")
    
    app = web.Application()
    app.router.add_route("*", "/{tail:.*}", handler)
    
    async with test_utils.TestServer(app, host="127.0.0.1") as server:
        yield server, received


def closed_port() -> int:
    """Find a local port with nothing listening on it."""
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.bind(("127.0.0.1", 0))
        return sock.getsockname()[1]


@pytest.fixture
def captured_event(sample_headers, sample_query_params):
    """Event captured from a sender on another host."""
    return WebhookEvent(
        id="evt-1",
        endpoint_id="ep-1",
        received_at=datetime(2024, 1, 1, tzinfo=timezone.utc),
        method="POST",
        headers={**sample_headers, "content-length": ["17"]},
        query_params=sample_query_params,
        body={"action": "opened", "number": 12},
    )


class TestBuildReplayHeaders:
    """Test outbound header reconstruction."""
    
    def test_connection_headers_are_dropped(self):
        headers = build_replay_headers({
            "Host": ["original.example"],
            "Content-Length": ["42"],
            "Transfer-Encoding": ["chunked"],
            "X-Signature": ["abc"],
        })
        
        assert "Host" not in headers
        assert "Content-Length" not in headers
        assert "Transfer-Encoding" not in headers
        assert headers["X-Signature"] == "abc"
    
    def test_multi_values_are_kept_in_order(self):
        headers = build_replay_headers({"x-multi": ["first", "second"]})
        
        assert headers.getall("X-Multi") == ["first", "second"]
    
    def test_default_content_type(self):
        assert build_replay_headers({})["Content-Type"] == "application/json"
    
    def test_captured_content_type_is_kept(self):
        headers = build_replay_headers({"content-type": ["application/vnd.custom+json"]})
        
        assert headers.getall("Content-Type") == ["application/vnd.custom+json"]


class TestBuildReplayUrl:
    """Test query string merging."""
    
    def test_captured_params_are_appended(self):
        url = build_replay_url(
            URL("http://new.example/x?existing=1"),
            {"source": ["github"], "tag": ["a", "b"]},
        )
        
        assert url.query.getall("existing") == ["1"]
        assert url.query.getall("source") == ["github"]
        assert url.query.getall("tag") == ["a", "b"]
        assert url.path == "/x"
    
    def test_no_params_keeps_target(self):
        target = URL("http://new.example/x?existing=1")
        
        assert build_replay_url(target, {}) == target
    
    def test_duplicate_keys_keep_both_sources(self):
        url = build_replay_url(URL("http://new.example/?tag=z"), {"tag": ["a"]})
        
        assert url.query.getall("tag") == ["z", "a"]


class TestHttpReplayAdapter:
    """Test replay delivery against a live local target."""
    
    @pytest.mark.asyncio
    async def test_replay_reproduces_request(self, captured_event):
        async with replay_target() as (server, received):
            async with HttpReplayAdapter(timeout_seconds=5) as adapter:
                result = await adapter.replay_event(
                    captured_event, str(server.make_url("/hooks?existing=1"))
                )
        
        assert result.success is True
        assert result.response_code == 200
        assert result.error is None
        assert result.replayed_at.tzinfo is not None
        
        assert len(received) == 1
        request = received[0]
        assert request["method"] == "POST"
        assert request["path"] == "/hooks"
        assert request["headers"]["X-Signature"] == "abc123"
        assert request["headers"].getall("X-Multi") == ["first", "second"]
        assert request["headers"]["Content-Type"] == "application/json"
        assert request["query"].getall("existing") == ["1"]
        assert request["query"].getall("source") == ["github"]
        assert request["query"].getall("tag") == ["a", "b"]
        assert json.loads(request["body"]) == {"action": "opened", "number": 12}
    
    @pytest.mark.asyncio
    async def test_host_comes_from_target(self, captured_event):
        async with replay_target() as (server, received):
            async with HttpReplayAdapter(timeout_seconds=5) as adapter:
                await adapter.replay_event(captured_event, str(server.make_url("/")))
        
        assert received[0]["host"] == f"{server.host}:{server.port}"
        assert "original.example" not in received[0]["headers"].getall("Host")
    
    @pytest.mark.asyncio
    async def test_content_length_matches_replayed_body(self, captured_event):
        async with replay_target() as (server, received):
            async with HttpReplayAdapter(timeout_seconds=5) as adapter:
                await adapter.replay_event(captured_event, str(server.make_url("/")))
        
        body = received[0]["body"]
        assert received[0]["headers"]["Content-Length"] == str(len(body))
    
    @pytest.mark.asyncio
    @pytest.mark.parametrize("status", [201, 404, 500])
    async def test_any_status_is_success(self, captured_event, status):
        async with replay_target(status=status) as (server, _):
            async with HttpReplayAdapter(timeout_seconds=5) as adapter:
                result = await adapter.replay_event(captured_event, str(server.make_url("/")))
        
        assert result.success is True
        assert result.response_code == status
    
    @pytest.mark.asyncio
    async def test_method_is_preserved(self):
        async with replay_target() as (server, received):
            async with HttpReplayAdapter(timeout_seconds=5) as adapter:
                result = await adapter.replay(
                    method="PUT",
                    target_url=str(server.make_url("/")),
                    headers={},
                    query_params={},
                    body={},
                )
        
        assert result.success is True
        assert received[0]["method"] == "PUT"
        assert json.loads(received[0]["body"]) == {}
    
    @pytest.mark.asyncio
    async def test_unreachable_target(self, captured_event):
        target = f"http://127.0.0.1:{closed_port()}/"
        
        async with HttpReplayAdapter(timeout_seconds=5) as adapter:
            result = await adapter.replay_event(captured_event, target)
        
        assert result.success is False
        assert result.response_code is None
        assert result.error
    
    @pytest.mark.asyncio
    async def test_timeout(self, captured_event):
        async with replay_target(delay=1.0) as (server, _):
            async with HttpReplayAdapter(timeout_seconds=0.1) as adapter:
                result = await adapter.replay_event(captured_event, str(server.make_url("/")))
        
        assert result.success is False
        assert result.response_code is None
        assert "timed out" in result.error
    
    @pytest.mark.asyncio
    @pytest.mark.parametrize("target", [
        "",
        "not a url",
        "ftp://files.example/upload",
        "/relative",
    ])
    async def test_invalid_target_makes_no_request(self, captured_event, target):
        adapter = HttpReplayAdapter()
        adapter._send = AsyncMock()
        
        result = await adapter.replay_event(captured_event, target)
        
        assert result.success is False
        assert result.response_code is None
        assert result.error
        adapter._send.assert_not_awaited()
    
    @pytest.mark.asyncio
    async def test_session_is_reused_and_closed(self):
        adapter = HttpReplayAdapter(timeout_seconds=3)
        
        session = await adapter._ensure_session()
        assert await adapter._ensure_session() is session
        assert session.timeout.total == adapter.timeout_seconds
        
        await adapter.close()
        assert session.closed
        
        await adapter.close()
