"""
Value-level building blocks with no knowledge of HTTP:

    externalize.py   Strip the internal URL prefix from a body tree
    html.py          Render a body tree as an HTML document
    ids.py           Random UUIDs and word-based identifiers
    words.py         Word dictionary loading
"""

from .externalize import externalize_urls
from .html import ValueKind, classify, render_html
from .ids import generate_id, generate_word_id, words_for_bytes
from .words import WORD_COUNT, get_words, load_words

__all__ = [
    "externalize_urls",
    "ValueKind",
    "classify",
    "render_html",
    "generate_id",
    "generate_word_id",
    "words_for_bytes",
    "WORD_COUNT",
    "get_words",
    "load_words",
]
