"""Guess checking for a single player's game."""

import re

from ..models.puzzles import GameState

_URL_PREFIX = re.compile(r"^(https?://)?(www\.)?", re.IGNORECASE)


def normalize_url(url: str) -> str:
    """Strip the scheme, a leading ``www.`` and one trailing slash."""
    url = _URL_PREFIX.sub("", url.strip())
    if url.endswith("/"):
        url = url[:-1]
    return url


def is_correct_guess(guess: str, correct_url: str) -> bool:
    return normalize_url(guess) == normalize_url(correct_url)


def apply_guess(state: GameState, guess: str, correct_url: str) -> GameState:
    """Return the game state after ``guess``. A finished game does not change."""
    if state.game_over:
        return state

    if is_correct_guess(guess, correct_url):
        return state.model_copy(update={"game_won": True})

    return state.model_copy(update={"attempts": min(state.attempts + 1, state.max_attempts)})


def feedback_for(state: GameState, correct_url: str) -> str:
    if state.game_won:
        return "Correct! You got it!"
    if state.game_over:
        return f"Game Over! The correct answer was: {correct_url}"
    return f"That is not the correct post. Try again! ({state.attempts}/{state.max_attempts} attempts)"
