"""
=============================================================================
RESPONSE COMPOSER AND STATUS HELPERS
=============================================================================

Writes complete HTTP responses to a ResponseSink.

=============================================================================
THE COMPOSE PIPELINE
=============================================================================

    respond(sink, status, headers, body, accept)

    ┌─────────────────────────────────────────────────────────────────────┐
    │                                                                      │
    │   body is None ───────────────────────────────► no Content-Length   │
    │        │                                                             │
    │   body is bytes ──────────────────────────────► sent verbatim       │
    │        │                                                             │
    │        ▼                                                             │
    │   Content-Type set by caller?                                       │
    │        │ no → text/html if Accept starts with text/html             │
    │        │      else application/json                                 │
    │        ▼                                                             │
    │   externalize_urls(body, prefix)          (pure, input untouched)   │
    │        │                                                             │
    │        ▼                                                             │
    │   text/html            → render_html()                              │
    │   application/(*+)json → compact JSON                               │
    │   anything else        → str(body)                                  │
    │        │                                                             │
    │        ▼                                                             │
    │   Content-Length = len(payload.encode("utf-8"))   (bytes, not chars)│
    │        │                                                             │
    │        ▼                                                             │
    │   sink.set_status(status, headers); sink.send(payload)              │
    │                                                                      │
    └─────────────────────────────────────────────────────────────────────┘

=============================================================================
STATUS HELPERS
=============================================================================

    ┌────────┬──────────────────────────┬─────────────────────────────────┐
    │ Status │ Helper                   │ Default body                    │
    ├────────┼──────────────────────────┼─────────────────────────────────┤
    │  200   │ found() / ok()           │ (caller's body, negotiated)     │
    │  201   │ created()                │ (caller's body, negotiated)     │
    │  400   │ bad_request()            │ {"msg": "bad request"}          │
    │  401   │ unauthorized()           │ {"msg": "Unauthorized"}         │
    │  403   │ forbidden()              │ {"msg": "Forbidden. component…"}│
    │  404   │ not_found()              │ {"msg": "Not Found. component…"}│
    │  405   │ method_not_allowed()     │ {"msg": "Method not allowed"}   │
    │  409   │ duplicate()              │ {"msg": "duplicate"}            │
    │  412   │ precondition_failed()    │ {"msg": "precondition failed"}  │
    │  500   │ internal_error()         │ {"msg": "internal error"}       │
    └────────┴──────────────────────────┴─────────────────────────────────┘

Error helpers always answer in JSON: an error page for a browser is not
worth the negotiation, and clients parse error bodies programmatically.

=============================================================================
"""

import json
import logging
from typing import Any, Mapping, Optional, Sequence

from ..config import HelperConfig
from ..core.externalize import externalize_urls
from ..core.html import render_html
from ..core.ids import generate_word_id
from ..core.words import get_words
from ..errors import InvalidArgumentError, WordListError
from .headers import HeaderValue, Headers
from .mime_types import JSON_TYPE, is_html_type, is_json_type, negotiate_content_type
from .sink import ResponseSink, SocketSink
from .status_codes import HTTPStatus

logger = logging.getLogger(__name__)

_BYTE_TYPES = (bytes, bytearray, memoryview)


def to_json(value: Any) -> str:
    """
    Serialize to compact JSON.

    No whitespace between tokens, keys in insertion order, non-ASCII
    characters kept as-is (Content-Length is measured after encoding).
    NaN and infinities have no JSON form and raise ValueError.
    """
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False, allow_nan=False)


class Responder:
    """
    Response helpers bound to one HelperConfig.

        responder = Responder(HelperConfig(component_name="orders"))

        responder.found(sink, order, accept=request_accept,
                        location=order["self"], etag=order_etag)
        responder.not_found(sink)

    The configuration is validated here, once, so a bad setting fails at
    startup. That includes the word dictionary: when words_path is set the
    file is loaded now and a missing or malformed file raises WordListError.
    """

    def __init__(self, config: Optional[HelperConfig] = None):
        self.config = config or HelperConfig()
        self.config.validate()
        self.words = get_words(self.config.words_path) if self.config.words_path else None

    def generate_word_id(self, total_bytes: int = 16, num_words: int = 2) -> str:
        """
        Generate a word id from the configured dictionary.

        Raises:
            WordListError: If num_words > 0 and no words_path is configured
            InvalidArgumentError: If the sizes are out of range
        """
        if self.words is None and num_words > 0:
            raise WordListError("No word list configured (set words_path)")
        return generate_word_id(total_bytes, num_words, self.words)

    # =========================================================================
    # COMPOSER
    # =========================================================================

    def socket_sink(self, sock: Any) -> SocketSink:
        """Wrap a connected socket, stamping responses with config.server_name."""
        return SocketSink(sock, self.config.server_name)

    def externalize(self, value: Any) -> Any:
        """Strip the configured internal URL prefix throughout ``value``."""
        return externalize_urls(value, self.config.internal_url_prefix)

    def respond(
        self,
        sink: ResponseSink,
        status: int,
        headers: Optional[Mapping[str, HeaderValue]] = None,
        body: Any = None,
        accept: Optional[str] = None,
    ) -> None:
        """
        Serialize ``body`` and write the response to ``sink``.

        Args:
            sink: Where to write the response
            status: HTTP status code
            headers: Extra headers; copied, never modified
            body: None, a byte buffer, or a JSON-compatible value
            accept: The request's Accept header

        Raises:
            TypeError: If the body can't be serialized as requested
            ValueError: If a JSON body contains NaN or an infinity
            ResponseStateError: If the sink was already written to
        """
        headers = Headers(headers)
        payload: Optional[bytes] = None

        if body is not None:
            if isinstance(body, _BYTE_TYPES):
                payload = bytes(body)
            else:
                content_type = headers.get("Content-Type")
                if not content_type:
                    content_type = negotiate_content_type(accept)
                    headers["Content-Type"] = content_type
                payload = self._serialize(self.externalize(body), content_type)
            headers["Content-Length"] = str(len(payload))

        logger.debug(
            f"Responding {int(status)} "
            f"({headers.get('Content-Type', 'no content-type')}, "
            f"{0 if payload is None else len(payload)} bytes)"
        )

        sink.set_status(status, headers)
        sink.send(payload)

    def _serialize(self, body: Any, content_type: str) -> bytes:
        if is_html_type(content_type):
            text = render_html(body, self.config.html_indent_step)
        elif is_json_type(content_type):
            text = to_json(body)
        else:
            text = str(body)
        return text.encode("utf-8")

    def found(
        self,
        sink: ResponseSink,
        body: Any,
        accept: Optional[str] = None,
        location: Optional[str] = None,
        etag: Optional[str] = None,
    ) -> None:
        """
        Respond 200 OK with the resource representation.

        ``location`` becomes Content-Location (externalized); ``etag``
        becomes Etag.
        """
        headers = Headers()
        if location is not None:
            headers["Content-Location"] = self.externalize(location)
        if etag is not None:
            headers["Etag"] = etag
        self.respond(sink, HTTPStatus.OK, headers, body, accept)

    ok = found

    def created(
        self,
        sink: ResponseSink,
        body: Any,
        accept: Optional[str] = None,
        location: Optional[str] = None,
        etag: Optional[str] = None,
    ) -> None:
        """
        Respond 201 Created.

        ``location`` becomes the Location header of the new resource
        (externalized); ``etag`` becomes Etag.
        """
        headers = Headers()
        if location is not None:
            headers["Location"] = self.externalize(location)
        if etag is not None:
            headers["Etag"] = etag
        self.respond(sink, HTTPStatus.CREATED, headers, body, accept)

    # =========================================================================
    # STATUS HELPERS
    # =========================================================================

    def _send_json(
        self,
        sink: ResponseSink,
        status: HTTPStatus,
        payload: Any,
        extra_headers: Optional[Mapping[str, HeaderValue]] = None,
    ) -> None:
        data = to_json(payload).encode("utf-8")
        headers = Headers({"Content-Type": JSON_TYPE, "Content-Length": str(len(data))})
        if extra_headers:
            headers.update(extra_headers)

        logger.debug(f"Responding {int(status)} {status.phrase} ({len(data)} bytes)")

        sink.set_status(status, headers)
        sink.send(data)

    def _component_message(self, text: str) -> dict:
        name = self.config.component_name
        return {"msg": f"{text}. component: {name}" if name else text}

    def method_not_allowed(
        self, sink: ResponseSink, allow: Sequence[str], body: Any = None
    ) -> None:
        """
        Respond 405 with an Allow header listing the permitted methods.

        Raises:
            InvalidArgumentError: If ``allow`` is empty
        """
        if not allow:
            raise InvalidArgumentError("method_not_allowed() needs at least one allowed method")
        if body is None:
            body = {"msg": "Method not allowed"}
        self._send_json(sink, HTTPStatus.METHOD_NOT_ALLOWED, body, {"Allow": ", ".join(allow)})

    def not_found(self, sink: ResponseSink, body: Any = None) -> None:
        """Respond 404; the default message names the component."""
        if body is None:
            body = self._component_message("Not Found")
        self._send_json(sink, HTTPStatus.NOT_FOUND, body)

    def forbidden(self, sink: ResponseSink, body: Any = None) -> None:
        """Respond 403; the default message names the component."""
        if body is None:
            body = self._component_message("Forbidden")
        self._send_json(sink, HTTPStatus.FORBIDDEN, body)

    def unauthorized(self, sink: ResponseSink, body: Any = None) -> None:
        self._send_json(sink, HTTPStatus.UNAUTHORIZED, body if body is not None else {"msg": "Unauthorized"})

    def bad_request(self, sink: ResponseSink, body: Any = None) -> None:
        self._send_json(sink, HTTPStatus.BAD_REQUEST, body if body is not None else {"msg": "bad request"})

    def precondition_failed(self, sink: ResponseSink, body: Any = None) -> None:
        self._send_json(
            sink,
            HTTPStatus.PRECONDITION_FAILED,
            body if body is not None else {"msg": "precondition failed"},
        )

    def duplicate(self, sink: ResponseSink, body: Any = None) -> None:
        """Respond 409 Conflict for a resource that already exists."""
        self._send_json(sink, HTTPStatus.CONFLICT, body if body is not None else {"msg": "duplicate"})

    def internal_error(self, sink: ResponseSink, body: Any = None) -> None:
        self._send_json(
            sink,
            HTTPStatus.INTERNAL_SERVER_ERROR,
            body if body is not None else {"msg": "internal error"},
        )


# =============================================================================
# MODULE-LEVEL FUNCTIONS
# =============================================================================
#
# For services that configure themselves from the environment, these
# delegate to a process-wide Responder built from HelperConfig.from_env()
# on first use:
#
#     from httphelpers.http.response import found, not_found
#     not_found(sink)
#
# Call set_default_config() at startup to use explicit settings instead.
#
# =============================================================================

_default_responder: Optional[Responder] = None


def set_default_config(config: Optional[HelperConfig]) -> None:
    """
    Replace the settings used by the module-level functions.

    None resets to reading the environment on next use.
    """
    global _default_responder
    _default_responder = Responder(config) if config is not None else None


def get_default_responder() -> Responder:
    """Get the process-wide Responder, creating it from the environment."""
    global _default_responder
    if _default_responder is None:
        _default_responder = Responder(HelperConfig.from_env())
    return _default_responder


def externalize(value: Any) -> Any:
    return get_default_responder().externalize(value)


def respond(sink, status, headers=None, body=None, accept=None) -> None:
    get_default_responder().respond(sink, status, headers, body, accept)


def found(sink, body, accept=None, location=None, etag=None) -> None:
    get_default_responder().found(sink, body, accept, location, etag)


ok = found


def created(sink, body, accept=None, location=None, etag=None) -> None:
    get_default_responder().created(sink, body, accept, location, etag)


def method_not_allowed(sink, allow, body=None) -> None:
    get_default_responder().method_not_allowed(sink, allow, body)


def not_found(sink, body=None) -> None:
    get_default_responder().not_found(sink, body)


def forbidden(sink, body=None) -> None:
    get_default_responder().forbidden(sink, body)


def unauthorized(sink, body=None) -> None:
    get_default_responder().unauthorized(sink, body)


def bad_request(sink, body=None) -> None:
    get_default_responder().bad_request(sink, body)


def precondition_failed(sink, body=None) -> None:
    get_default_responder().precondition_failed(sink, body)


def duplicate(sink, body=None) -> None:
    get_default_responder().duplicate(sink, body)


def internal_error(sink, body=None) -> None:
    get_default_responder().internal_error(sink, body)
