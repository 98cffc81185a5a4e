"""Puzzle construction and query-time services."""

from .puzzle_builder import PuzzleBuilder
from .reveal_service import RevealService, InvalidAttemptsError
from .fallback import fallback_puzzle, FALLBACK_URL
from .game import apply_guess, normalize_url, is_correct_guess, feedback_for

__all__ = [
    "PuzzleBuilder",
    "RevealService",
    "InvalidAttemptsError",
    "fallback_puzzle",
    "FALLBACK_URL",
    "apply_guess",
    "normalize_url",
    "is_correct_guess",
    "feedback_for",
]
