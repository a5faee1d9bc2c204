"""
=============================================================================
URL EXTERNALIZATION
=============================================================================

Inside a deployment, resource URLs are passed around carrying an internal
prefix (a scheme+authority marker). That lets downstream services tell an
"already external" URL from one that still needs rewriting, with no extra
metadata travelling alongside the value.

Externalization is the boundary step: strip the prefix from every string
in a response body just before it leaves the service.

    ┌─────────────────────────────────────────────────────────────────────┐
    │                                                                      │
    │   prefix = "scheme://authority"                                     │
    │                                                                      │
    │   {                                     {                           │
    │     "self": "scheme://authority/o/1",     "self": "/o/1",           │
    │     "items": [                  ───►      "items": [                │
    │       "scheme://authority/i/7",             "/i/7",                 │
    │       "http://example.com"                  "http://example.com"    │
    │     ],                                    ],                        │
    │     "count": 2                            "count": 2                │
    │   }                                     }                           │
    │                                                                      │
    └─────────────────────────────────────────────────────────────────────┘

The transform is pure: it builds a new tree and never touches its input.
Body templates can therefore be shared between concurrent requests.

Only values are rewritten, never mapping keys. The prefix is stripped at
most once per string. Cyclic structures are not supported.

=============================================================================
"""

from typing import Any


def externalize_urls(value: Any, prefix: str) -> Any:
    """
    Return a copy of ``value`` with ``prefix`` stripped from every string.

    Args:
        value: A JSON-compatible tree (dict, list, tuple, str, number,
               bool, None) or any other object, which passes through.
        prefix: Internal URL prefix. Empty means nothing is stripped.

    Returns:
        The externalized tree. Lists and tuples come back as lists,
        dicts keep their key order.

    Examples:
        >>> externalize_urls("scheme://authority/things/1", "scheme://authority")
        '/things/1'
        >>> externalize_urls({"n": 1, "u": ["scheme://a/x"]}, "scheme://a")
        {'n': 1, 'u': ['/x']}
    """
    if isinstance(value, str):
        if prefix and value.startswith(prefix):
            return value[len(prefix):]
        return value

    if isinstance(value, dict):
        return {key: externalize_urls(item, prefix) for key, item in value.items()}

    if isinstance(value, (list, tuple)):
        return [externalize_urls(item, prefix) for item in value]

    return value
