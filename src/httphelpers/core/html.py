"""
=============================================================================
HTML RENDERING
=============================================================================

Turns a JSON-style body into a browsable HTML page, so a human hitting an
API endpoint from a browser sees clickable links instead of raw JSON.

The markup carries RDFa-flavoured attributes (property, datatype,
resource) so the page stays machine-readable too.

=============================================================================
RENDERING RULES
=============================================================================

    ┌──────────────────┬──────────────────────────────────────────────────┐
    │  Value           │  Markup                                          │
    ├──────────────────┼──────────────────────────────────────────────────┤
    │  URL-like str    │  <a href="U" property="F">U</a>                  │
    │  other str       │  <span property="F" datatype="string">S</span>   │
    │  int / float     │  <span property="F" datatype="number">N</span>   │
    │  bool            │  <span property="F" datatype="boolean">B</span>  │
    │  None            │  <span property="F" datatype="null">null</span>  │
    │  list / tuple    │  <ol property="F"><li>…</li></ol>                │
    │  dict            │  <div resource="SELF" style="padding-left:Npx">  │
    │                  │    <p>field: …</p> …                             │
    │                  │  </div>                                          │
    └──────────────────┴──────────────────────────────────────────────────┘

    "URL-like" means the string starts with "http", "./" or "/".
    property="F" is only present when the value is a field of a dict.

Indentation: each dict adds one step (25px by default) of padding to its
parent's. List items stay at the list's own level. Rendering starts one
step below zero so the root dict sits at padding-left:0px.

=============================================================================
"""

import json
import logging
from enum import Enum
from html import escape
from typing import Any, Optional

logger = logging.getLogger(__name__)

DEFAULT_INDENT_STEP = 25

_URL_STARTS = ("http", "./", "/")


class ValueKind(Enum):
    """The kinds of node a body tree can contain."""

    NULL = "null"
    BOOLEAN = "boolean"
    NUMBER = "number"
    STRING = "string"
    SEQUENCE = "sequence"
    MAPPING = "mapping"


def classify(value: Any) -> ValueKind:
    """
    Map a Python value to its ValueKind.

    bool is checked before numbers because bool is a subclass of int.

    Raises:
        TypeError: For anything that isn't JSON-compatible
    """
    if value is None:
        return ValueKind.NULL
    if isinstance(value, bool):
        return ValueKind.BOOLEAN
    if isinstance(value, (int, float)):
        return ValueKind.NUMBER
    if isinstance(value, str):
        return ValueKind.STRING
    if isinstance(value, (list, tuple)):
        return ValueKind.SEQUENCE
    if isinstance(value, dict):
        return ValueKind.MAPPING
    raise TypeError(f"Cannot render value of type {type(value).__name__} as HTML")


def is_url_like(text: str) -> bool:
    """Check if a string should be rendered as a link."""
    return text.startswith(_URL_STARTS)


def _property(name: Optional[str]) -> str:
    return "" if name is None else f' property="{escape(str(name))}"'


def _span(text: str, datatype: str, name: Optional[str]) -> str:
    return f'<span{_property(name)} datatype="{datatype}">{escape(text)}</span>'


class _Renderer:
    """Recursive walk over a body tree, one instance per document."""

    def __init__(self, indent_step: int):
        self.indent_step = indent_step

    def value(self, value: Any, indent: int, name: Optional[str] = None) -> str:
        kind = classify(value)

        if kind is ValueKind.STRING:
            if is_url_like(value):
                url = escape(value)
                return f'<a href="{url}"{_property(name)}>{url}</a>'
            return _span(value, "string", name)

        if kind is ValueKind.NUMBER:
            return _span(str(value), "number", name)

        if kind is ValueKind.BOOLEAN:
            return _span("true" if value else "false", "boolean", name)

        if kind is ValueKind.NULL:
            return _span("null", "null", name)

        if kind is ValueKind.SEQUENCE:
            items = "".join(f"<li>{self.value(item, indent)}</li>" for item in value)
            return f"<ol{_property(name)}>{items}</ol>"

        # ValueKind.MAPPING
        child_indent = indent + self.indent_step
        fields = "".join(
            self.field(key, item, child_indent)
            for key, item in value.items()
            if key != "self"
        )
        resource = ""
        if "self" in value:
            resource = f' resource="{escape(str(value["self"]))}"'
        return f'<div{resource} style="padding-left:{child_indent}px">{fields}</div>'

    def field(self, name: str, value: Any, indent: int) -> str:
        return f"<p>{escape(str(name))}: {self.value(value, indent, name)}</p>"


def render_html(body: Any, indent_step: int = DEFAULT_INDENT_STEP) -> str:
    """
    Render a body tree as a complete HTML document.

    Args:
        body: JSON-compatible value (usually a dict)
        indent_step: Pixels of padding added per nested dict

    Returns:
        "<!DOCTYPE html><html><head></head><body>…</body></html>"

    Raises:
        TypeError: If the tree contains a value with no HTML rendering
    """
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(f"Rendering HTML for body:\n{json.dumps(body, indent=2, default=repr)}")

    renderer = _Renderer(indent_step)
    content = renderer.value(body, -indent_step)
    return f"<!DOCTYPE html><html><head></head><body>{content}</body></html>"
