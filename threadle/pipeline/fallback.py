"""Hand-authored puzzle served whenever live content cannot be used."""

from typing import List, Tuple

from ..models.puzzles import Puzzle, RedactionRecord
from ..redaction import restore

FALLBACK_URL = "https://www.reddit.com/r/tifu/comments/mock123/example_post/"

_FALLBACK_COMMENTS: List[Tuple[str, List[str]]] = [
    (
        "I can't believe [___] [___] actually [___] [___] entire [___] in front of everyone.",
        ["the", "manager", "fired", "the", "team"],
    ),
    (
        "This is [___] most [___] thing I've [___] on [___] subreddit today.",
        ["the", "ridiculous", "seen", "this"],
    ),
    (
        "OP, you [___] to [___] this to [___] local [___] immediately.",
        ["need", "report", "the", "authorities"],
    ),
    (
        "I [___] this [___] [___] times and I'm still [___].",
        ["read", "story", "three", "confused"],
    ),
    (
        "My [___] did [___] exact [___] thing last [___] and [___] [___] [___] [___].",
        ["friend", "the", "same", "week", "got", "the", "same", "result"],
    ),
]


def fallback_puzzle() -> Puzzle:
    """Build the static fallback puzzle."""
    records = [
        RedactionRecord(
            masked_text=masked,
            removed_tokens=tokens,
            original_text=restore(masked, tokens),
        )
        for masked, tokens in _FALLBACK_COMMENTS
    ]
    return Puzzle(records=records, correct_url=FALLBACK_URL, source_category="tifu", is_fallback=True)
