"""Escaping of label text into identifier-safe and string-literal-safe forms."""

from __future__ import annotations

import re

_NODE_NAME_UNSAFE_RE = re.compile(r"[^A-Za-z0-9_]")
_STRING_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}


def escape_node_name(raw: str) -> str:
    """Map ``raw`` onto ``[A-Za-z0-9_]+`` so it can serve as a node identifier.

    Every other character, including non-ASCII letters, becomes an underscore.
    An empty input yields ``"_"``.
    """
    if not raw:
        return "_"
    return _NODE_NAME_UNSAFE_RE.sub("_", raw)


def escape_string_value(raw: str) -> str:
    """Escape ``raw`` for embedding between double quotes."""
    out = []
    for ch in raw:
        replacement = _STRING_ESCAPES.get(ch)
        if replacement is not None:
            out.append(replacement)
        elif ord(ch) < 0x20 or ord(ch) == 0x7F:
            out.append("\\u{:04x}".format(ord(ch)))
        else:
            out.append(ch)
    return "".join(out)
