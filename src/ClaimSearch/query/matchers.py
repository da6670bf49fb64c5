"""Text matchers for the minimum-match branch.

Each matcher targets one field with a fixed boost. Names are attached to the
clauses so that matched-query reporting from the engine identifies them.

Boost table
- name: phrase 2 (x10 for ``@`` queries), exact 10 (x100 for ``@`` queries),
  substring 5, compressed ``@`` channel name 15
- title / description: substring 1, exact 3, phrase prefix 2, phrase 2
"""

from __future__ import annotations

from ClaimSearch.core.nodes import MatchMode, MatchNode
from ClaimSearch.query.text import compress_channel_name, escape_reserved, starts_with_at


NAME_PHRASE_BOOST = 2.0
NAME_EXACT_BOOST = 10.0
NAME_CONTAINS_BOOST = 5.0
NAME_COMPRESSED_BOOST = 15.0
CHANNEL_QUERY_MULTIPLIER = 10.0

CONTAINS_BOOST = 1.0
EXACT_BOOST = 3.0
PHRASE_PREFIX_BOOST = 2.0
PHRASE_BOOST = 2.0


def _contains(field: str, escaped: str, boost: float) -> MatchNode:
    return MatchNode(field, f"*{escaped}*", MatchMode.SUBSTRING, boost=boost, name=f"{field}-contains")


def match_phrase_name(text: str) -> MatchNode:
    boost = NAME_PHRASE_BOOST
    if starts_with_at(text):
        boost *= CHANNEL_QUERY_MULTIPLIER
    return MatchNode("name", text, MatchMode.PHRASE, boost=boost, name="name-match-phrase")


def match_name(text: str) -> MatchNode:
    """Exact name match; channel-style queries get base x10 x10."""
    if starts_with_at(text):
        boost = NAME_EXACT_BOOST * CHANNEL_QUERY_MULTIPLIER * CHANNEL_QUERY_MULTIPLIER
        return MatchNode("name", text, MatchMode.EXACT, boost=boost, name="name-match-@boost")
    return MatchNode("name", text, MatchMode.EXACT, boost=NAME_EXACT_BOOST, name="name-match")


def name_contains(escaped: str) -> MatchNode:
    return _contains("name", escaped, NAME_CONTAINS_BOOST)


def match_compressed_channel_name(text: str) -> MatchNode:
    return MatchNode(
        "name",
        compress_channel_name(text),
        MatchMode.EXACT,
        boost=NAME_COMPRESSED_BOOST,
        name="name-match-@compressed",
    )


def field_matchers(field: str, text: str, escaped: str) -> list[MatchNode]:
    """Substring, exact, phrase-prefix and phrase matchers for a prose field."""
    return [
        _contains(field, escaped, CONTAINS_BOOST),
        MatchNode(field, text, MatchMode.EXACT, boost=EXACT_BOOST, name=f"{field}-match"),
        MatchNode(
            field,
            escaped,
            MatchMode.PHRASE_PREFIX,
            boost=PHRASE_PREFIX_BOOST,
            name=f"{field}-match-phrase-prefix",
        ),
        MatchNode(field, escaped, MatchMode.PHRASE, boost=PHRASE_BOOST, name=f"{field}-match-phrase"),
    ]


def text_matchers(text: str) -> list[MatchNode]:
    """Build the full matcher set for the raw query text.

    Args:
        text: Raw user input.

    Returns:
        Matchers in a stable order; at least one must hold for a document to
        be eligible.
    """
    escaped = escape_reserved(text)
    return [
        match_phrase_name(text),
        match_name(text),
        name_contains(escaped),
        *field_matchers("title", text, escaped),
        *field_matchers("description", text, escaped),
        match_compressed_channel_name(text),
    ]
