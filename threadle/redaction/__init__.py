"""Redaction and reveal engines for puzzle comments."""

from .rules import PLACEHOLDER, DEFAULT_RULES, RedactionRule
from .engine import RedactionEngine, redact
from .reveal import reveal, restore, is_consistent

__all__ = [
    "PLACEHOLDER",
    "DEFAULT_RULES",
    "RedactionRule",
    "RedactionEngine",
    "redact",
    "reveal",
    "restore",
    "is_consistent",
]
