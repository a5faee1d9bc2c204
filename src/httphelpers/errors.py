"""
=============================================================================
EXCEPTIONS
=============================================================================

Every error raised on purpose by this library derives from HelperError, so
callers can catch the whole family in one place:

    ┌──────────────────────────┬───────────────────────────────────────────┐
    │  Exception               │  Raised when                              │
    ├──────────────────────────┼───────────────────────────────────────────┤
    │  InvalidArgumentError    │  Caller input can't be honoured           │
    │                          │  (word budget, empty Allow list, config)  │
    │  WordListError           │  Word dictionary missing or malformed     │
    │  ResponseStateError      │  A sink is written out of order or twice  │
    └──────────────────────────┴───────────────────────────────────────────┘

None of these are retried. Validation errors are reported synchronously and
never silently corrected.

=============================================================================
"""


class HelperError(Exception):
    """Base class for errors raised by httphelpers."""


class InvalidArgumentError(HelperError, ValueError):
    """
    Raised when an argument is outside what the operation accepts.

    Subclasses ValueError so existing ``except ValueError`` handlers keep
    working.
    """


class WordListError(HelperError):
    """
    Raised when the word dictionary can't be loaded.

    Carries the path that failed so the message in startup logs points
    straight at the offending file.
    """

    def __init__(self, message: str, path: str = ""):
        super().__init__(message)
        self.path = path


class ResponseStateError(HelperError, RuntimeError):
    """Raised when a response sink is used out of order (e.g. sent twice)."""
