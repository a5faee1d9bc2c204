"""
=============================================================================
HTTP RESPONSE COMPONENTS
=============================================================================

    ┌─────────────────────────────────────────────────────────────────────┐
    │                                                                      │
    │  status_codes.py   HTTPStatus enum and reason phrases               │
    │  mime_types.py     Content-Type classification and negotiation      │
    │  headers.py        Case-insensitive Headers mapping                 │
    │  sink.py           ResponseSink, ResponseCapture, SocketSink        │
    │  response.py       Responder: respond(), found(), status helpers    │
    │                                                                      │
    └─────────────────────────────────────────────────────────────────────┘

Header names are case-insensitive everywhere in this package:
"Content-Type" set by a caller and "content-type" looked up by the
composer are the same header.

=============================================================================
"""

from .headers import Headers
from .mime_types import is_html_type, is_json_type, negotiate_content_type
from .response import (
    Responder,
    get_default_responder,
    set_default_config,
    externalize,
    respond,
    found,          # 200 OK
    ok,             # 200 OK (alias of found)
    created,        # 201 Created
    bad_request,    # 400 Bad Request
    unauthorized,   # 401 Unauthorized
    forbidden,      # 403 Forbidden
    not_found,      # 404 Not Found
    method_not_allowed,   # 405 Method Not Allowed
    duplicate,            # 409 Conflict
    precondition_failed,  # 412 Precondition Failed
    internal_error,       # 500 Internal Server Error
)
from .sink import HTTPResponse, ResponseCapture, ResponseSink, SocketSink
from .status_codes import HTTPStatus, reason_phrase

__all__ = [
    # Headers and media types
    "Headers",
    "is_html_type",
    "is_json_type",
    "negotiate_content_type",

    # Composer
    "Responder",
    "get_default_responder",
    "set_default_config",
    "externalize",
    "respond",
    "found",
    "ok",
    "created",

    # Status helpers
    "bad_request",
    "unauthorized",
    "forbidden",
    "not_found",
    "method_not_allowed",
    "duplicate",
    "precondition_failed",
    "internal_error",

    # Sinks
    "ResponseSink",
    "ResponseCapture",
    "SocketSink",
    "HTTPResponse",

    # Status codes
    "HTTPStatus",
    "reason_phrase",
]
