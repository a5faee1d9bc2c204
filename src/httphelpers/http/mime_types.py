"""
=============================================================================
MEDIA TYPES AND CONTENT NEGOTIATION
=============================================================================

Decides how a response body gets serialized.

    ┌─────────────────────────────────────────────────────────────────────┐
    │                    SERIALIZATION BY CONTENT-TYPE                    │
    ├─────────────────────────────────────────────────────────────────────┤
    │                                                                      │
    │   Content-Type                     Serializer                       │
    │   ─────────────────────────        ───────────────────────────      │
    │   text/html                        render_html()                    │
    │   application/json                 compact JSON                     │
    │   application/*+json               compact JSON                     │
    │   (anything else)                  str(body)                        │
    │                                                                      │
    └─────────────────────────────────────────────────────────────────────┘

When the caller hasn't set a Content-Type, the Accept header picks one:
text/html if Accept starts with "text/html" (what browsers send first),
application/json otherwise.

Parameters are ignored when classifying, so
"application/json; charset=utf-8" is JSON.

=============================================================================
"""

from typing import Optional

HTML_TYPE = "text/html"
JSON_TYPE = "application/json"


def media_type(content_type: str) -> str:
    """
    Strip parameters from a Content-Type value and lowercase it.

    Examples:
        >>> media_type("Application/JSON; charset=utf-8")
        'application/json'
    """
    return content_type.split(";", 1)[0].strip().lower()


def is_html_type(content_type: str) -> bool:
    """Check if a Content-Type value is text/html."""
    return media_type(content_type) == HTML_TYPE


def is_json_type(content_type: str) -> bool:
    """
    Check if a Content-Type value is JSON.

    Matches application/json itself and structured-syntax suffixes such
    as application/problem+json or application/vnd.api+json.

    Examples:
        >>> is_json_type("application/json")
        True
        >>> is_json_type("application/ld+json")
        True
        >>> is_json_type("text/json")
        False
    """
    mime = media_type(content_type)
    if mime == JSON_TYPE:
        return True
    return mime.startswith("application/") and mime.endswith("+json")


def wants_html(accept: Optional[str]) -> bool:
    """
    Check if an Accept header asks for HTML first.

    Only the leading entry counts; browsers list text/html first, API
    clients don't.
    """
    return accept is not None and accept.startswith(HTML_TYPE)


def negotiate_content_type(accept: Optional[str]) -> str:
    """
    Pick the default Content-Type for a structured body.

    Args:
        accept: The request's Accept header, or None

    Returns:
        "text/html" or "application/json"
    """
    return HTML_TYPE if wants_html(accept) else JSON_TYPE
