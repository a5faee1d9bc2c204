"""
Case-insensitive response headers.

HTTP header names are case-insensitive (RFC 7230), so "Content-Type" and
"content-type" are the same header. Headers normalizes lookups to
lowercase while remembering the spelling used when a header was first
set, which is what gets written on the wire.
"""

from collections.abc import MutableMapping
from typing import Dict, Iterator, List, Mapping, Optional, Tuple, Union

from ..errors import InvalidArgumentError

HeaderValue = Union[str, List[str]]


class Headers(MutableMapping):
    """
    Mapping of header name → value with case-insensitive keys.

        >>> headers = Headers({"content-type": "text/html"})
        >>> headers["Content-Type"]
        'text/html'
        >>> headers["CONTENT-TYPE"] = "application/json"
        >>> list(headers)
        ['content-type']

    A value may be a list of strings for headers that are sent once per
    value (Set-Cookie, for example).

    Names and values containing CR or LF are refused with
    InvalidArgumentError, since they would end the header line early and
    let the rest be read as extra headers or a body.
    """

    def __init__(self, initial: Optional[Mapping[str, HeaderValue]] = None):
        # lowercase name → (display name, value)
        self._store: Dict[str, Tuple[str, HeaderValue]] = {}
        if initial:
            self.update(initial)

    def __setitem__(self, name: str, value: HeaderValue) -> None:
        _check_field(name, name)
        for item in (value if isinstance(value, list) else [value]):
            _check_field(name, str(item))

        key = name.lower()
        if key in self._store:
            name = self._store[key][0]
        self._store[key] = (name, value)

    def __getitem__(self, name: str) -> HeaderValue:
        return self._store[name.lower()][1]

    def __delitem__(self, name: str) -> None:
        del self._store[name.lower()]

    def __iter__(self) -> Iterator[str]:
        return (display for display, _ in self._store.values())

    def __len__(self) -> int:
        return len(self._store)

    def __repr__(self) -> str:
        return f"Headers({dict(self.items())!r})"

    def copy(self) -> "Headers":
        return Headers(self)

    def lines(self) -> List[Tuple[str, str]]:
        """
        Flatten into (name, value) pairs, one per wire line.

        List values expand to one line each, in order.
        """
        result = []
        for name, value in self._store.values():
            if isinstance(value, list):
                result.extend((name, item) for item in value)
            else:
                result.append((name, str(value)))
        return result


def _check_field(name: str, text: str) -> None:
    if "\r" in text or "\n" in text:
        raise InvalidArgumentError(f"Header {name!r} contains a CR or LF character")
