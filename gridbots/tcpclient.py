"""A small line-free TCP client that exchanges UTF-8 text and JSON objects."""

from __future__ import annotations

import json
import select
import socket
from typing import Any, Dict, Optional

_MAX_CHUNK = 65507


class TcpClient:
    """Connects to a server, sends text and collects whatever it answers."""

    def __init__(self, timeout: Optional[float] = 1.0) -> None:
        self.timeout = timeout
        self._socket: Optional[socket.socket] = None

    @property
    def connected(self) -> bool:
        return self._socket is not None

    def connect(self, host: str, port: int) -> TcpClient:
        """Open a connection; raises :class:`ConnectionError` if it fails."""
        self.close()
        try:
            self._socket = socket.create_connection((host, port), timeout=self.timeout)
        except OSError as exc:
            raise ConnectionError(f"cannot connect to {host}:{port}") from exc
        return self

    def _require(self) -> socket.socket:
        if self._socket is None:
            raise ConnectionError("not connected")
        return self._socket

    def send(self, message: str) -> None:
        """Send ``message`` encoded as UTF-8."""
        self._require().sendall(message.encode("utf-8"))

    def receive(self) -> str:
        """Read the data the server has sent; empty if nothing arrives in time."""
        sock = self._require()
        chunks = []
        wait = self.timeout
        while True:
            readable, _, _ = select.select([sock], [], [], wait)
            if not readable:
                break
            chunk = sock.recv(_MAX_CHUNK)
            if not chunk:
                break
            chunks.append(chunk)
            wait = 0
        return b"".join(chunks).decode("utf-8", errors="replace")

    def send_json(self, payload: Dict[str, Any]) -> None:
        """Send ``payload`` serialised as a JSON object."""
        self.send(json.dumps(payload))

    def receive_json(self) -> Optional[Dict[str, Any]]:
        """The JSON object the server answered with, or None if there is none."""
        text = self.receive()
        if not text:
            return None
        try:
            value = json.loads(text)
        except ValueError:
            return None
        return value if isinstance(value, dict) else None

    def close(self) -> None:
        if self._socket is not None:
            self._socket.close()
            self._socket = None

    def __enter__(self) -> TcpClient:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()