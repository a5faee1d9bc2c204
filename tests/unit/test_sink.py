"""
Unit tests for response sinks.
"""

from datetime import datetime, timezone

import pytest

from httphelpers import ResponseStateError
from httphelpers.http.headers import Headers
from httphelpers.http.sink import (
    HTTPResponse,
    ResponseCapture,
    SocketSink,
    format_http_date,
)


class FakeSocket:
    """Collects everything passed to sendall()."""

    def __init__(self, fail: bool = False):
        self.data = b""
        self.calls = 0
        self.fail = fail

    def sendall(self, data: bytes) -> None:
        self.calls += 1
        if self.fail:
            raise BrokenPipeError("peer went away")
        self.data += data


class TestResponseCapture:
    """Tests for the in-memory sink."""

    def test_records_response(self):
        """Test that status, headers and body are captured."""
        capture = ResponseCapture()
        capture.set_status(404, {"Content-Type": "application/json"})
        capture.send('{"msg":"x"}')

        assert capture.status == 404
        assert capture.headers["content-type"] == "application/json"
        assert capture.body == b'{"msg":"x"}'
        assert capture.sent

    def test_callback_receives_response(self):
        """Test that the callback fires once with the finished response."""
        seen = []
        capture = ResponseCapture(seen.append)
        capture.set_status(201, {"Location": "/things/1"})
        capture.send(b"ok")

        assert len(seen) == 1
        assert seen[0].status == 201
        assert seen[0].headers["Location"] == "/things/1"
        assert seen[0].body == b"ok"

    def test_send_before_status(self):
        """Test that send() requires set_status() first."""
        with pytest.raises(ResponseStateError):
            ResponseCapture().send(b"x")

    def test_double_send(self):
        """Test that a second send() is refused."""
        capture = ResponseCapture()
        capture.set_status(200, {})
        capture.send(b"x")

        with pytest.raises(ResponseStateError):
            capture.send(b"y")

        assert capture.body == b"x"

    def test_double_status(self):
        """Test that the status can only be written once."""
        capture = ResponseCapture()
        capture.set_status(200, {})

        with pytest.raises(ResponseStateError):
            capture.set_status(500, {})

    def test_send_none(self):
        """Test a body-less response."""
        capture = ResponseCapture()
        capture.set_status(204, {})
        capture.send(None)

        assert capture.body is None
        assert capture.response.text == ""


class TestSocketSink:
    """Tests for the raw socket sink."""

    def test_writes_http_response(self):
        """Test the serialized wire format."""
        sock = FakeSocket()
        sink = SocketSink(sock, server_name="test/1.0")
        sink.set_status(404, {"Content-Type": "application/json", "Content-Length": "2"})
        sink.send(b"{}")

        assert sock.calls == 1
        assert sock.data.startswith(b"HTTP/1.1 404 Not Found\r\n")
        assert b"Content-Type: application/json\r\n" in sock.data
        assert b"Content-Length: 2\r\n" in sock.data
        assert b"Server: test/1.0\r\n" in sock.data
        assert b"Date: " in sock.data
        assert sock.data.endswith(b"\r\n\r\n{}")

    def test_responder_end_to_end(self):
        """Test a composed response written through a socket."""
        from httphelpers import HelperConfig, Responder

        sock = FakeSocket()
        responder = Responder(HelperConfig(
            internal_url_prefix="scheme://authority",
            server_name="orders/2.0",
        ))
        responder.created(responder.socket_sink(sock), {"id": "x"}, location="scheme://authority/o/1")

        assert sock.data.startswith(b"HTTP/1.1 201 Created\r\n")
        assert b"Location: /o/1\r\n" in sock.data
        assert b"Content-Length: 10\r\n" in sock.data
        assert b"Server: orders/2.0\r\n" in sock.data
        assert sock.data.endswith(b'\r\n\r\n{"id":"x"}')

    def test_unknown_status_phrase(self):
        """Test that unlisted codes still produce a status line."""
        sock = FakeSocket()
        sink = SocketSink(sock)
        sink.set_status(418, {})
        sink.send(None)

        assert sock.data.startswith(b"HTTP/1.1 418 Unknown\r\n")

    def test_bodyless_response_has_content_length(self):
        """Test that a 200 with no body still tells the client where it ends."""
        from httphelpers import Responder

        sock = FakeSocket()
        Responder().respond(SocketSink(sock), 200, {"Etag": "1"})

        assert b"Content-Length: 0\r\n" in sock.data
        assert sock.data.endswith(b"\r\n\r\n")

    @pytest.mark.parametrize("status", [101, 204, 304])
    def test_no_content_length_without_body(self, status):
        """Test that statuses which never carry a body get no Content-Length."""
        sock = FakeSocket()
        sink = SocketSink(sock)
        sink.set_status(status, {"Etag": "1"})
        sink.send(None)

        assert b"Content-Length" not in sock.data

    def test_send_failure_propagates(self):
        """Test that transport errors reach the caller."""
        sink = SocketSink(FakeSocket(fail=True))
        sink.set_status(200, {})

        with pytest.raises(OSError):
            sink.send(b"x")

        assert not sink.sent


class TestHTTPResponse:
    """Tests for the response record."""

    def test_status_line(self):
        """Test status line generation."""
        assert HTTPResponse(status=412).status_line == "HTTP/1.1 412 Precondition Failed"

    def test_list_header_values(self):
        """Test that list values become repeated header lines."""
        response = HTTPResponse(
            headers=Headers({"Set-Cookie": ["a=1", "b=2"], "Date": "fixed"}),
            body=b"",
        )
        data = response.to_bytes()

        assert b"Set-Cookie: a=1\r\nSet-Cookie: b=2\r\n" in data
        assert b"Date: fixed\r\n" in data
        assert b"Server:" not in data


class TestFormatHTTPDate:
    """Tests for HTTP date formatting."""

    def test_format(self):
        """Test HTTP date format."""
        dt = datetime(2026, 1, 15, 12, 30, 45, tzinfo=timezone.utc)
        assert format_http_date(dt) == "Thu, 15 Jan 2026 12:30:45 GMT"
