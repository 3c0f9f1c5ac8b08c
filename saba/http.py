"""Parsing of raw HTTP responses."""

from __future__ import annotations

from dataclasses import dataclass, field

from saba.errors import NetworkError

_NOT_FOUND = 404
_U32_MAX = 0xFFFFFFFF


@dataclass(frozen=True)
class Header:
    """One response header."""

    name: str
    value: str


def _parse_status_code(text: str) -> int:
    digits = text[1:] if text.startswith("+") else text
    if digits and digits.isascii() and digits.isdigit():
        value = int(digits)
        if value <= _U32_MAX:
            return value
    return _NOT_FOUND


def _parse_headers(block: str) -> list[Header]:
    headers = []
    for line in block.split("\n"):
        name, colon, value = line.partition(":")
        if not colon:
            raise NetworkError(f"invalid http header: {line}")
        headers.append(Header(name.strip(), value.strip()))
    return headers


@dataclass
class HttpResponse:
    """A parsed HTTP response: status line, headers and body."""

    version: str
    status_code: int
    reason: str
    headers: list[Header] = field(default_factory=list)
    body: str = ""

    @classmethod
    def parse(cls, raw_response: str) -> HttpResponse:
        """Parse a response as received from the server."""
        text = raw_response.lstrip().replace("\r\n", "\n")

        status_line, newline, remaining = text.partition("\n")
        if not newline:
            raise NetworkError(f"invalid http response: {text}")

        header_block, separator, body = remaining.partition("\n\n")
        if separator:
            headers = _parse_headers(header_block)
        else:
            headers, body = [], remaining

        statuses = status_line.split(" ")
        if len(statuses) < 3:
            raise NetworkError(f"invalid status line: {status_line}")

        return cls(
            version=statuses[0],
            status_code=_parse_status_code(statuses[1]),
            reason=statuses[2],
            headers=headers,
            body=body,
        )

    def header_value(self, name: str) -> str:
        """Return the value of the first header called ``name``."""
        for header in self.headers:
            if header.name == name:
                return header.value
        raise KeyError(f"failed to find {name} in headers")