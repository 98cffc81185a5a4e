"""Data models for the Threadle puzzle service."""

from .puzzles import (
    RedactionRecord,
    Puzzle,
    PuzzleResponse,
    RevealResponse,
    GameState,
    GuessResponse,
)
from .sources import SourceItem, SourceReply

__all__ = [
    "RedactionRecord",
    "Puzzle",
    "PuzzleResponse",
    "RevealResponse",
    "GameState",
    "GuessResponse",
    "SourceItem",
    "SourceReply",
]
