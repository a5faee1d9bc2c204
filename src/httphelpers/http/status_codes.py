"""
=============================================================================
HTTP STATUS CODES
=============================================================================

The status codes the helpers emit, plus the reason phrases SocketSink
needs to write a status line.

    ┌───────────┬──────────────────────────────────────────────────────────┐
    │   Code    │  Helper                                                  │
    ├───────────┼──────────────────────────────────────────────────────────┤
    │  200      │  found() / ok()                                          │
    │  201      │  created()                                               │
    │  400      │  bad_request()                                           │
    │  401      │  unauthorized()                                          │
    │  403      │  forbidden()                                             │
    │  404      │  not_found()                                             │
    │  405      │  method_not_allowed()                                    │
    │  409      │  duplicate()                                             │
    │  412      │  precondition_failed()                                   │
    │  500      │  internal_error()                                        │
    └───────────┴──────────────────────────────────────────────────────────┘

respond() accepts any integer; codes outside this enum get the reason
phrase "Unknown" from reason_phrase().

=============================================================================
"""

from enum import IntEnum


class HTTPStatus(IntEnum):
    """
    HTTP status codes used by the response helpers.

    IntEnum, so members compare equal to plain integers:

        >>> HTTPStatus.NOT_FOUND == 404
        True
        >>> HTTPStatus.NOT_FOUND.phrase
        'Not Found'
    """

    OK = 200
    CREATED = 201
    NO_CONTENT = 204

    BAD_REQUEST = 400
    UNAUTHORIZED = 401            # Not authenticated
    FORBIDDEN = 403               # Authenticated but not permitted
    NOT_FOUND = 404
    METHOD_NOT_ALLOWED = 405      # Requires an Allow header
    CONFLICT = 409                # Reported by duplicate()
    PRECONDITION_FAILED = 412     # If-Match / If-None-Match failed

    INTERNAL_SERVER_ERROR = 500

    @property
    def phrase(self) -> str:
        """Reason phrase for the status line, e.g. "Not Found"."""
        return _STATUS_PHRASES.get(self, "Unknown")

    @property
    def is_success(self) -> bool:
        """Check if this is a 2xx status code."""
        return 200 <= self < 300

    @property
    def is_error(self) -> bool:
        """
        Check if this is an error status code (4xx or 5xx).

        Used to pick the log level for a response.
        """
        return self >= 400


_STATUS_PHRASES = {
    HTTPStatus.OK: "OK",
    HTTPStatus.CREATED: "Created",
    HTTPStatus.NO_CONTENT: "No Content",
    HTTPStatus.BAD_REQUEST: "Bad Request",
    HTTPStatus.UNAUTHORIZED: "Unauthorized",
    HTTPStatus.FORBIDDEN: "Forbidden",
    HTTPStatus.NOT_FOUND: "Not Found",
    HTTPStatus.METHOD_NOT_ALLOWED: "Method Not Allowed",
    HTTPStatus.CONFLICT: "Conflict",
    HTTPStatus.PRECONDITION_FAILED: "Precondition Failed",
    HTTPStatus.INTERNAL_SERVER_ERROR: "Internal Server Error",
}


def reason_phrase(status: int) -> str:
    """
    Get the reason phrase for any integer status code.

    Args:
        status: Status code, HTTPStatus member or plain int

    Returns:
        The phrase, or "Unknown" for codes this module doesn't list
    """
    try:
        return HTTPStatus(status).phrase
    except ValueError:
        return "Unknown"
