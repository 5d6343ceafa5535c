"""Markup escaping for text embedded in tool tags."""

from __future__ import annotations

# "&" must go first so the entities produced below are not escaped again
_REPLACEMENTS: tuple[tuple[str, str], ...] = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
    ("'", "&#39;"),
)


def escape_xml(text: str) -> str:
    """Escape ``& < > " '`` for use as element content.

    Not idempotent: escaping twice double-escapes ``&``.

    >>> escape_xml('<x> & "y"')
    '&lt;x&gt; &amp; &quot;y&quot;'
    """
    for raw, entity in _REPLACEMENTS:
        text = text.replace(raw, entity)
    return text
