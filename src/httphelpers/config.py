"""
=============================================================================
HELPER CONFIGURATION
=============================================================================

Centralized configuration for the response helpers.

Settings are collected once into a dataclass and handed to a Responder at
construction time, so tests and multi-tenant services can run with
different settings side by side.

=============================================================================
CONFIGURATION SOURCES
=============================================================================

    ┌─────────────────────────────────────────────────────────────────────┐
    │                    CONFIGURATION HIERARCHY                          │
    ├─────────────────────────────────────────────────────────────────────┤
    │                                                                      │
    │   Priority (highest to lowest):                                     │
    │                                                                      │
    │   1. Explicit arguments                                             │
    │      └── HelperConfig(component_name="orders")                     │
    │                                                                      │
    │   2. Environment variables                                          │
    │      └── COMPONENT_NAME=orders  (via HelperConfig.from_env())       │
    │                                                                      │
    │   3. Default values (in this dataclass)                            │
    │                                                                      │
    └─────────────────────────────────────────────────────────────────────┘

=============================================================================
"""

import os
from dataclasses import dataclass
from typing import Optional

from .errors import InvalidArgumentError


@dataclass(frozen=True)
class HelperConfig:
    """
    Configuration for response formatting and identifier generation.

    Frozen: a Responder may be shared between threads, so its settings
    must not change underneath it.

    Example:
        config = HelperConfig(
            component_name="orders",
            internal_url_prefix="scheme://authority",
        )
        responder = Responder(config)
    """

    # ─────────────────────────────────────────────────────────────────────
    # ERROR MESSAGES
    # ─────────────────────────────────────────────────────────────────────

    component_name: str = ""
    """
    Name of the service, interpolated into the default 404/403 messages:
        "Not Found. component: orders"
    Empty means the suffix is left off entirely.
    """

    # ─────────────────────────────────────────────────────────────────────
    # URL EXTERNALIZATION
    # ─────────────────────────────────────────────────────────────────────

    internal_url_prefix: str = ""
    """
    Marker carried by URLs while they're inside the trust boundary.
    Stripped from every string in a response body before it goes out.
    Empty disables externalization.
    """

    # ─────────────────────────────────────────────────────────────────────
    # IDENTIFIERS
    # ─────────────────────────────────────────────────────────────────────

    words_path: Optional[str] = None
    """
    Path to the 65536-line word dictionary used by Responder.generate_word_id().
    Loaded when the Responder is built. None means word ids are unavailable;
    no dictionary ships with the package.
    """

    # ─────────────────────────────────────────────────────────────────────
    # RENDERING
    # ─────────────────────────────────────────────────────────────────────

    html_indent_step: int = 25
    """Pixels of padding-left added per nested mapping in HTML output."""

    server_name: str = "http-helpers/1.0"
    """Value of the Server header written by SocketSink."""

    @classmethod
    def from_env(cls) -> "HelperConfig":
        """
        Create configuration from environment variables.

        =====================================================================
        ENVIRONMENT VARIABLES
        =====================================================================

        COMPONENT_NAME              Component name for default messages
        INTERNAL_URL_PREFIX         Prefix stripped during externalization
        HTTP_HELPERS_WORDS_FILE     Word dictionary path
        HTTP_HELPERS_HTML_INDENT    HTML indent step in pixels (default: 25)

        =====================================================================
        """
        indent = os.getenv("HTTP_HELPERS_HTML_INDENT", "25")
        try:
            html_indent_step = int(indent)
        except ValueError:
            raise InvalidArgumentError(
                f"HTTP_HELPERS_HTML_INDENT must be an integer, got {indent!r}"
            ) from None

        return cls(
            component_name=os.getenv("COMPONENT_NAME", ""),
            internal_url_prefix=os.getenv("INTERNAL_URL_PREFIX", ""),
            words_path=os.getenv("HTTP_HELPERS_WORDS_FILE") or None,
            html_indent_step=html_indent_step,
        )

    def validate(self) -> None:
        """
        Validate configuration values.

        Called by Responder at construction so a bad setting fails at
        startup rather than on the first request that happens to need it.
        """
        if self.html_indent_step <= 0:
            raise InvalidArgumentError(
                f"html_indent_step must be > 0, got {self.html_indent_step}"
            )

        if not self.server_name:
            raise InvalidArgumentError("server_name must not be empty")
