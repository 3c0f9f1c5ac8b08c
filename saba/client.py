"""Fetching pages over plain HTTP and following redirects."""

from __future__ import annotations

import socket
from typing import Optional, Protocol

from saba.errors import BrowserError, NetworkError, UnexpectedInputError
from saba.http import HttpResponse
from saba.url import Url

_BUFFER_SIZE = 4096
_MAX_PORT = 0xFFFF
_REDIRECT = 302


class _Fetcher(Protocol):
    def get(self, host: str, port: int, path: str) -> HttpResponse: ...


class HttpClient:
    """Sends GET requests and reads the whole response until the server closes."""

    def __init__(self, timeout: Optional[float] = None) -> None:
        self.timeout = timeout

    def build_request(self, host: str, path: str) -> str:
        """The request text sent for ``path`` on ``host``."""
        return (
            f"GET /{path} HTTP/1.1\n"
            f"Host: {host}\n"
            "Accept: text/html\n"
            "Connection: close\n"
            "\n"
        )

    def get(self, host: str, port: int, path: str) -> HttpResponse:
        """Fetch ``path`` from ``host:port`` and parse the response."""
        if not 0 <= port <= _MAX_PORT:
            raise NetworkError(f"port number out of range: {port}")

        try:
            addresses = socket.getaddrinfo(host, port, type=socket.SOCK_STREAM)
        except (socket.gaierror, UnicodeError) as e:
            raise NetworkError(f"Failed to find IP addresses: {e}") from e
        if not addresses:
            raise NetworkError("Failed to find IP addresses")
        family, sock_type, proto, _, address = addresses[0]

        try:
            sock = socket.socket(family, sock_type, proto)
        except OSError as e:
            raise NetworkError("Failed to connect to TCP stream") from e

        with sock:
            sock.settimeout(self.timeout)
            try:
                sock.connect(address)
            except OSError as e:
                raise NetworkError("Failed to connect to TCP stream") from e

            try:
                sock.sendall(self.build_request(host, path).encode())
            except OSError as e:
                raise NetworkError("Failed to send a request to TCP stream") from e

            chunks = []
            while True:
                try:
                    chunk = sock.recv(_BUFFER_SIZE)
                except OSError as e:
                    raise NetworkError(
                        "Failed to receive a request from TCP stream"
                    ) from e
                if not chunk:
                    break
                chunks.append(chunk)

        try:
            text = b"".join(chunks).decode("utf-8")
        except UnicodeDecodeError as e:
            raise NetworkError(f"Invalid received response: {e}") from e
        return HttpResponse.parse(text)


def _parse_port(port: str) -> int:
    digits = port[1:] if port.startswith("+") else port
    if digits and digits.isascii() and digits.isdigit() and int(digits) <= _MAX_PORT:
        return int(digits)
    raise UnexpectedInputError(f"port number should be u16 but got {port}")


def handle_url(url: str, client: Optional[_Fetcher] = None) -> HttpResponse:
    """Fetch ``url``, following one 302 redirect to its ``Location``."""
    if client is None:
        client = HttpClient()

    try:
        parsed = Url.parse(url)
    except BrowserError as e:
        raise UnexpectedInputError(f"input html is not supported: {e}") from e

    port = _parse_port(parsed.port)
    try:
        response = client.get(parsed.host, port, parsed.path)
    except NetworkError as e:
        raise NetworkError(f"failed to get http response: {e}") from e

    if response.status_code != _REDIRECT:
        return response

    try:
        location = response.header_value("Location")
    except KeyError:
        return response

    try:
        redirect = Url.parse(location)
    except BrowserError as e:
        raise UnexpectedInputError(f"input html is not supported: {e}") from e

    redirect_port = _parse_port(redirect.port)
    try:
        return client.get(redirect.host, redirect_port, redirect.path)
    except NetworkError as e:
        raise NetworkError(str(e)) from e