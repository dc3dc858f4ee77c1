from __future__ import annotations

import asyncio
import socket

from osprobe.core import is_host_reachable


def test_listening_port_is_reachable():
    async def _run() -> bool:
        server = await asyncio.start_server(lambda _r, w: w.close(), "127.0.0.1", 0)
        port = server.sockets[0].getsockname()[1]
        try:
            return await is_host_reachable("127.0.0.1", port, timeout=1.0)
        finally:
            server.close()
            await server.wait_closed()

    assert asyncio.run(_run()) is True


def test_closed_port_is_unreachable():
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.bind(("127.0.0.1", 0))
        port = sock.getsockname()[1]

    assert asyncio.run(is_host_reachable("127.0.0.1", port, timeout=1.0)) is False


def test_timeout_is_unreachable(monkeypatch):
    async def _hang(*_args, **_kwargs):
        await asyncio.sleep(10)

    monkeypatch.setattr(asyncio, "open_connection", _hang)

    assert asyncio.run(is_host_reachable("10.255.255.1", 22, timeout=0.05)) is False


def test_unresolvable_host_is_unreachable():
    assert asyncio.run(is_host_reachable("host.invalid", 22, timeout=1.0)) is False
