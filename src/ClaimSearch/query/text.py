"""Free-text preparation helpers.

Reserved characters follow the query-string syntax of the search engine:
``+ - = && || > < ! ( ) { } [ ] ^ " ~ * ? : /``. ``&`` and ``|`` are only
reserved when doubled.
"""

from __future__ import annotations

import re

from ClaimSearch.utils.log import log


_RE_RESERVED = re.compile(r'&&|\|\||[+\-=><!(){}\[\]^"~*?:/]')

# Go-style `$`: end of text only, never before a trailing newline.
EXACT_PHRASE_PATTERN = r'"([^"]*)"\Z'


def escape_reserved(text: str) -> str:
    """Prefix every reserved character of ``text`` with a backslash.

    ``&&`` and ``||`` are escaped as pairs (``\\&\\&``, ``\\|\\|``).

    Args:
        text: Raw user input.

    Returns:
        Escaped copy, safe to embed in pattern-style queries.
    """
    return _RE_RESERVED.sub(lambda m: "".join("\\" + ch for ch in m.group(0)), text)


def extract_exact_phrases(text: str, *, pattern: str = EXACT_PHRASE_PATTERN) -> tuple[str, ...]:
    """Return quoted phrases anchored at the end of ``text``.

    ``foo "bar baz"`` yields ``("bar baz",)``; ``"bar" foo`` yields nothing.

    Args:
        text: Raw user input.
        pattern: Phrase pattern with one capture group.

    Returns:
        Captured phrase contents, possibly empty.
    """
    try:
        regex = re.compile(pattern)
    except re.error as e:
        log.error("Exact phrase pattern failed to compile: pattern=%s error=%s", pattern, e)
        return ()
    return tuple(m.group(m.lastindex or 0) for m in regex.finditer(text))


def starts_with_at(text: str) -> bool:
    """Whether ``text`` is a channel-style query. Empty text never is."""
    return text[:1] == "@"


def compress_channel_name(text: str) -> str:
    """``"my channel"`` -> ``"@mychannel"``."""
    return "@" + text.replace(" ", "")
