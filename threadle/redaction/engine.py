"""Redaction of comment text into a masked form plus the removed tokens."""

from typing import List, Sequence, Tuple

from ..models.puzzles import RedactionRecord
from .rules import DEFAULT_RULES, PLACEHOLDER, RedactionRule


class RedactionEngine:
    """Applies an ordered list of redaction rules to comment text.

    Rules are applied in priority order. A span claimed by an earlier rule
    cannot be claimed, even partially, by a later one, so overlapping
    candidates are resolved by rule order rather than by length. Tokens are
    recorded in the order they occur in the original text, which is also the
    order in which they are revealed.
    """

    def __init__(self, rules: Sequence[RedactionRule] = None, placeholder: str = PLACEHOLDER):
        self.rules = list(DEFAULT_RULES if rules is None else rules)
        self.placeholder = placeholder

    def redact(self, text: str) -> RedactionRecord:
        """Mask every matched token in ``text`` and record what was removed."""
        spans = self._claim_spans(text)

        masked_parts: List[str] = []
        removed_tokens: List[str] = []
        cursor = 0
        for start, end in spans:
            masked_parts.append(text[cursor:start])
            masked_parts.append(self.placeholder)
            removed_tokens.append(text[start:end])
            cursor = end
        masked_parts.append(text[cursor:])

        return RedactionRecord(
            masked_text="".join(masked_parts),
            removed_tokens=removed_tokens,
            original_text=text,
        )

    def redact_all(self, texts: Sequence[str]) -> List[RedactionRecord]:
        return [self.redact(text) for text in texts]

    def _claim_spans(self, text: str) -> List[Tuple[int, int]]:
        claimed: List[Tuple[int, int]] = []
        for rule in self.rules:
            for start, end in rule.spans(text):
                if any(start < claimed_end and claimed_start < end for claimed_start, claimed_end in claimed):
                    continue
                claimed.append((start, end))
        claimed.sort()
        return claimed


_default_engine = RedactionEngine()


def redact(text: str) -> RedactionRecord:
    """Redact ``text`` with the default rule set."""
    return _default_engine.redact(text)
