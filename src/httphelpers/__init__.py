"""
=============================================================================
HTTPHELPERS - Response Formatting Helpers for HTTP Services
=============================================================================

A small library that HTTP services use to write their responses:

    ┌─────────────────────────────────────────────────────────────────────┐
    │                                                                      │
    │   1. STATUS HELPERS                                                 │
    │      - One call per status: 200, 201, 400, 401, 403, 404, 405,     │
    │        409, 412, 500                                                │
    │      - JSON error bodies with sensible defaults                     │
    │                                                                      │
    │   2. CONTENT NEGOTIATION                                            │
    │      - JSON for API clients, browsable HTML for browsers           │
    │      - Content-Length measured in encoded bytes                     │
    │                                                                      │
    │   3. URL EXTERNALIZATION                                            │
    │      - Internal URL prefix stripped from every string in a body    │
    │                                                                      │
    │   4. IDENTIFIERS                                                    │
    │      - Random UUIDs and readable word-based ids                     │
    │                                                                      │
    └─────────────────────────────────────────────────────────────────────┘

=============================================================================
PACKAGE STRUCTURE
=============================================================================

    httphelpers/
    ├── __init__.py          # This file - package exports
    ├── config.py            # HelperConfig dataclass
    ├── errors.py            # Exception hierarchy
    ├── core/                # Value-level transforms
    │   ├── externalize.py   # Internal URL prefix stripping
    │   ├── html.py          # Body → HTML document
    │   ├── ids.py           # UUID / word id generation
    │   └── words.py         # Word dictionary loading
    └── http/                # HTTP response components
        ├── headers.py       # Case-insensitive headers
        ├── mime_types.py    # Content-Type negotiation
        ├── response.py      # Responder and status helpers
        ├── sink.py          # Response sinks
        └── status_codes.py  # HTTP status enum

=============================================================================
QUICK START
=============================================================================

    from httphelpers import HelperConfig, Responder, SocketSink

    responder = Responder(HelperConfig(
        component_name="orders",
        internal_url_prefix="scheme://authority",
    ))

    sink = SocketSink(client_socket)
    responder.created(
        sink,
        {"self": "scheme://authority/orders/1", "total": 12.5},
        accept=request_accept,
        location="scheme://authority/orders/1",
        etag="1",
    )
    # → 201, Location: /orders/1, body {"self":"/orders/1","total":12.5}

=============================================================================
"""

__version__ = "1.0.0"

from .config import HelperConfig
from .core import externalize_urls, generate_id, generate_word_id, render_html
from .errors import (
    HelperError,
    InvalidArgumentError,
    ResponseStateError,
    WordListError,
)
from .http import (
    Headers,
    HTTPResponse,
    HTTPStatus,
    Responder,
    ResponseCapture,
    ResponseSink,
    SocketSink,
    bad_request,
    created,
    duplicate,
    externalize,
    forbidden,
    found,
    internal_error,
    method_not_allowed,
    not_found,
    ok,
    precondition_failed,
    respond,
    set_default_config,
    unauthorized,
)

__all__ = [
    "__version__",
    "HelperConfig",
    "HelperError",
    "InvalidArgumentError",
    "ResponseStateError",
    "WordListError",
    "Headers",
    "HTTPResponse",
    "HTTPStatus",
    "Responder",
    "ResponseCapture",
    "ResponseSink",
    "SocketSink",
    "externalize",
    "externalize_urls",
    "render_html",
    "generate_id",
    "generate_word_id",
    "respond",
    "found",
    "ok",
    "created",
    "bad_request",
    "unauthorized",
    "forbidden",
    "not_found",
    "method_not_allowed",
    "duplicate",
    "precondition_failed",
    "internal_error",
    "set_default_config",
]
