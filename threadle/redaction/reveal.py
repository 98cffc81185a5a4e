"""Progressive reveal of redacted text."""

from typing import List, Sequence

from ..models.puzzles import RedactionRecord
from .rules import PLACEHOLDER


def reveal(record: RedactionRecord, reveal_count: int, placeholder: str = PLACEHOLDER) -> str:
    """Return the record's text with its first ``reveal_count`` tokens shown.

    Tokens are substituted by position, left to right. Any count at or beyond
    the number of removed tokens yields the original text verbatim; callers
    are responsible for rejecting counts that make no sense to them.
    """
    tokens = record.removed_tokens
    if reveal_count >= len(tokens):
        return record.original_text

    segments = record.masked_text.split(placeholder)
    parts = [segments[0]]
    for index, segment in enumerate(segments[1:]):
        parts.append(tokens[index] if index < reveal_count else placeholder)
        parts.append(segment)
    return "".join(parts)


def restore(masked_text: str, removed_tokens: Sequence[str], placeholder: str = PLACEHOLDER) -> str:
    """Substitute every placeholder in ``masked_text`` with its removed token.

    Raises:
        ValueError: If the number of placeholders and tokens differ.
    """
    segments = masked_text.split(placeholder)
    if len(segments) - 1 != len(removed_tokens):
        raise ValueError(
            f"Masked text has {len(segments) - 1} placeholders but {len(removed_tokens)} tokens were given"
        )

    parts: List[str] = [segments[0]]
    for token, segment in zip(removed_tokens, segments[1:]):
        parts.append(token)
        parts.append(segment)
    return "".join(parts)


def is_consistent(record: RedactionRecord, placeholder: str = PLACEHOLDER) -> bool:
    """Check that replaying the removed tokens reproduces the original text."""
    try:
        return restore(record.masked_text, record.removed_tokens, placeholder) == record.original_text
    except ValueError:
        return False
