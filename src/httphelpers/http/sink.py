"""
=============================================================================
RESPONSE SINKS
=============================================================================

A sink is anywhere a response can be written: a live connection, a
framework's response object, or an in-memory record for tests. The
helpers only ever need two calls:

    ┌─────────────────────────────────────────────────────────────────────┐
    │                        SINK LIFECYCLE                               │
    ├─────────────────────────────────────────────────────────────────────┤
    │                                                                      │
    │   new ──► set_status(status, headers) ──► send(body) ──► done       │
    │                                                                      │
    │   send() before set_status()     → ResponseStateError               │
    │   set_status() or send() twice   → ResponseStateError               │
    │                                                                      │
    └─────────────────────────────────────────────────────────────────────┘

Sinks shipped here:

    ResponseCapture   Keeps the response as an HTTPResponse record and
                      optionally hands it to a callback on send().
    SocketSink        Serializes HTTP/1.1 and writes it with sendall().

To adapt another server, subclass ResponseSink and implement
_write_status() and _write_body(); the base class enforces ordering.

=============================================================================
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Callable, Mapping, Optional, Union

from ..errors import ResponseStateError
from .headers import HeaderValue, Headers
from .status_codes import reason_phrase

logger = logging.getLogger(__name__)

Body = Union[bytes, str, None]


class ResponseSink(ABC):
    """
    Abstract destination for one HTTP response.

    Subclasses implement the two _write_* hooks. The public methods check
    that the status is written first and that each step happens once.
    """

    def __init__(self):
        self._status_written = False
        self._sent = False

    @property
    def sent(self) -> bool:
        """True once send() has completed."""
        return self._sent

    def set_status(self, status: int, headers: Mapping[str, HeaderValue]) -> None:
        """
        Write the status code and headers.

        Raises:
            ResponseStateError: If the status was already written
        """
        if self._status_written:
            raise ResponseStateError("Status already written for this response")
        self._write_status(int(status), Headers(headers))
        self._status_written = True

    def send(self, body: Body = None) -> None:
        """
        Write the body and finish the response.

        Raises:
            ResponseStateError: If called before set_status() or twice
        """
        if not self._status_written:
            raise ResponseStateError("send() called before set_status()")
        if self._sent:
            raise ResponseStateError("Response already sent")
        if isinstance(body, str):
            body = body.encode("utf-8")
        self._write_body(body)
        self._sent = True

    @abstractmethod
    def _write_status(self, status: int, headers: Headers) -> None:
        """Deliver the status and headers."""
        pass

    @abstractmethod
    def _write_body(self, body: Optional[bytes]) -> None:
        """Deliver the body (None for a body-less response)."""
        pass


@dataclass
class HTTPResponse:
    """
    A finished response: status, headers and body bytes.

    Produced by ResponseCapture. to_bytes() gives the HTTP/1.1 wire form,
    which is also what SocketSink writes.
    """

    status: int = 200
    headers: Headers = field(default_factory=Headers)
    body: Optional[bytes] = None
    version: str = "HTTP/1.1"

    @property
    def status_line(self) -> str:
        """e.g. "HTTP/1.1 404 Not Found"."""
        return f"{self.version} {self.status} {reason_phrase(self.status)}"

    @property
    def text(self) -> str:
        """Body decoded as UTF-8 ("" when there is no body)."""
        return (self.body or b"").decode("utf-8")

    def to_bytes(self, server_name: Optional[str] = None) -> bytes:
        """
        Serialize to HTTP/1.1 bytes.

        Date is always added if missing; Server only when server_name is
        given. Content-Length is added when missing so the client knows
        where the message ends, except for 1xx, 204 and 304 responses,
        which never carry a body.
        """
        headers = self.headers.copy()
        if "Content-Length" not in headers and _may_have_body(self.status):
            headers["Content-Length"] = str(len(self.body or b""))
        if "Date" not in headers:
            headers["Date"] = format_http_date(datetime.now(timezone.utc))
        if server_name and "Server" not in headers:
            headers["Server"] = server_name

        lines = [self.status_line]
        lines.extend(f"{name}: {value}" for name, value in headers.lines())
        lines.append("")

        head = "\r\n".join(lines).encode("utf-8") + b"\r\n"
        return head + (self.body or b"")


class ResponseCapture(ResponseSink):
    """
    In-memory sink.

    Useful in tests, and for code that builds a response in one place and
    forwards it somewhere else:

        capture = ResponseCapture(lambda response: queue.put(response))
        not_found(capture)
        # queue now holds HTTPResponse(status=404, ...)
    """

    def __init__(self, on_send: Optional[Callable[[HTTPResponse], Any]] = None):
        super().__init__()
        self.response = HTTPResponse()
        self._on_send = on_send

    @property
    def status(self) -> int:
        return self.response.status

    @property
    def headers(self) -> Headers:
        return self.response.headers

    @property
    def body(self) -> Optional[bytes]:
        return self.response.body

    def _write_status(self, status: int, headers: Headers) -> None:
        self.response.status = status
        self.response.headers = headers

    def _write_body(self, body: Optional[bytes]) -> None:
        self.response.body = body
        if self._on_send is not None:
            self._on_send(self.response)


class SocketSink(ResponseSink):
    """
    Sink that writes a raw HTTP/1.1 response to a connected socket.

    Anything with ``sendall(bytes)`` works. Status and headers are held
    until send() so the whole response goes out in a single write.
    """

    def __init__(self, sock: Any, server_name: str = "http-helpers/1.0"):
        super().__init__()
        self._sock = sock
        self._server_name = server_name
        self._pending: Optional[HTTPResponse] = None

    def _write_status(self, status: int, headers: Headers) -> None:
        self._pending = HTTPResponse(status=status, headers=headers)

    def _write_body(self, body: Optional[bytes]) -> None:
        self._pending.body = body
        data = self._pending.to_bytes(self._server_name)
        try:
            self._sock.sendall(data)
        except OSError as e:
            logger.warning(f"Send failed ({self._pending.status}, {len(data)} bytes): {e}")
            raise


def format_http_date(dt: datetime) -> str:
    """
    Format a UTC datetime as an HTTP-date (RFC 7231).

    Example: "Thu, 15 Jan 2026 12:30:45 GMT"
    """
    days = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
    months = ("Jan", "Feb", "Mar", "Apr", "May", "Jun",
              "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")
    return (
        f"{days[dt.weekday()]}, {dt.day:02d} {months[dt.month - 1]} {dt.year} "
        f"{dt:%H:%M:%S} GMT"
    )


def _may_have_body(status: int) -> bool:
    """1xx, 204 No Content and 304 Not Modified never carry a body."""
    return not (100 <= status < 200 or status in (204, 304))
