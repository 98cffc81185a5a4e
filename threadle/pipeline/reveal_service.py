"""Answers reveal requests against an already-built puzzle."""

import math
from typing import List

from ..config import Settings, settings as default_settings
from ..models.puzzles import Puzzle
from ..redaction import reveal


class InvalidAttemptsError(ValueError):
    """Attempt count is not a finite number within the game's budget."""


class RevealService:
    """Maps a player's attempt count to how much of each comment is shown.

    Every wrong guess reveals ``words_per_attempt`` more tokens in each
    comment, up to ``max_revealed_words``. The pacing is the same for every
    comment in the puzzle.
    """

    def __init__(self, config: Settings = None):
        config = config or default_settings
        self.max_attempts = config.max_attempts
        self.words_per_attempt = config.words_per_attempt
        self.max_revealed_words = config.max_revealed_words

    def validate_attempts(self, attempts, allow_fraction: bool = True):
        """Check a client-supplied attempt count.

        Any finite number in ``[0, max_attempts]`` is accepted and integral
        floats come back as ``int``. With ``allow_fraction=False`` a
        non-integral number is rejected as well.
        """
        # bool is an int subclass but never a valid count
        if isinstance(attempts, bool) or not isinstance(attempts, (int, float)):
            raise InvalidAttemptsError("Invalid attempts number")
        if not math.isfinite(attempts) or attempts < 0 or attempts > self.max_attempts:
            raise InvalidAttemptsError("Invalid attempts number")
        if isinstance(attempts, float):
            if attempts.is_integer():
                return int(attempts)
            if not allow_fraction:
                raise InvalidAttemptsError("Invalid attempts number")
        return attempts

    def words_per_comment(self, attempts) -> int:
        # Fractional attempts reveal the whole words they cover
        return math.floor(min(attempts * self.words_per_attempt, self.max_revealed_words))

    def reveal_comments(self, puzzle: Puzzle, attempts: int) -> List[str]:
        """Return every comment of ``puzzle`` as revealed after ``attempts`` wrong guesses."""
        count = self.words_per_comment(self.validate_attempts(attempts))

        revealed = []
        for record in puzzle.records:
            if count >= record.token_count:
                revealed.append(record.original_text)
            else:
                revealed.append(reveal(record, count))
        return revealed
