"""Ordered word categories removed from comments when building a puzzle."""

import re
from dataclasses import dataclass
from typing import Iterator, List, Tuple

PLACEHOLDER = "[___]"


def _word_list(*words: str) -> str:
    return r"\b(?:" + "|".join(words) + r")\b"


@dataclass(frozen=True)
class RedactionRule:
    """A named category of text to redact, matched by a single pattern."""

    name: str
    pattern: str
    flags: int = re.IGNORECASE

    @property
    def regex(self) -> "re.Pattern[str]":
        return re.compile(self.pattern, self.flags)

    def spans(self, text: str) -> Iterator[Tuple[int, int]]:
        """Yield non-empty (start, end) spans of matches, left to right."""
        for match in self.regex.finditer(text):
            if match.end() > match.start():
                yield match.span()


DEFAULT_RULES: List[RedactionRule] = [
    # Placeholder text already present in a comment is masked like any word,
    # otherwise it would be indistinguishable from a real redaction.
    RedactionRule("placeholder", re.escape(PLACEHOLDER), 0),
    RedactionRule("function_words", _word_list(
        "the", "a", "an", "is", "was", "are", "were", "i", "you", "he", "she", "it", "we", "they",
        "my", "your", "his", "her", "its", "our", "their",
    )),
    RedactionRule("prepositions_conjunctions", _word_list(
        "in", "on", "at", "to", "for", "of", "with", "by", "from", "up", "about", "into", "through",
        "during", "before", "after", "above", "below", "between", "among", "under", "over", "around",
        "near", "far", "here", "there", "where", "when", "why", "how", "what", "who", "which", "that",
        "this", "these", "those",
    )),
    RedactionRule("auxiliary_verbs", _word_list(
        "am", "is", "are", "was", "were", "be", "been", "being", "have", "has", "had", "having", "do",
        "does", "did", "doing", "will", "would", "could", "should", "may", "might", "must", "can",
        "shall",
    )),
    RedactionRule("generic_nouns", _word_list(
        "thing", "stuff", "person", "people", "man", "woman", "guy", "girl", "boy", "child", "kid",
        "baby", "family", "friend", "work", "job", "home", "house", "car", "money", "time", "day",
        "night", "week", "month", "year",
    )),
    RedactionRule("cross_references", r"\b(?:r/\w+|u/\w+)\b"),
    RedactionRule("numbers", r"\b\d+\b", 0),
    RedactionRule("platform_jargon", _word_list(
        "OP", "upvote", "downvote", "karma", "mod", "moderator", "subreddit", "reddit", "post",
        "comment", "thread",
    )),
]
