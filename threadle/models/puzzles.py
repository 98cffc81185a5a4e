"""Puzzle data models for the Threadle puzzle service."""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class RedactionRecord(BaseModel):
    """One comment with selected words masked out, and what was masked."""

    model_config = ConfigDict(frozen=True)

    masked_text: str = Field(..., description="Comment text with each redacted token replaced by a placeholder")
    removed_tokens: List[str] = Field(
        default_factory=list,
        description="Exact substrings removed, in the order they appear in the original text"
    )
    original_text: str = Field(..., description="The untouched source comment")

    @property
    def token_count(self) -> int:
        return len(self.removed_tokens)


class Puzzle(BaseModel):
    """A daily puzzle: a handful of redacted comments from a single thread."""

    records: List[RedactionRecord] = Field(..., min_length=1, description="Redacted comments, in display order")
    correct_url: str = Field(..., description="Permalink of the thread the comments came from")
    source_category: Optional[str] = Field(None, description="Subreddit the thread was drawn from")
    is_fallback: bool = Field(default=False, description="Whether this is the hand-authored fallback puzzle")

    @property
    def masked_comments(self) -> List[str]:
        return [record.masked_text for record in self.records]

    @property
    def original_comments(self) -> List[str]:
        return [record.original_text for record in self.records]

    @property
    def removed_tokens(self) -> List[List[str]]:
        return [list(record.removed_tokens) for record in self.records]

    def to_response(self) -> "PuzzleResponse":
        """Build the client-facing view of this puzzle."""
        return PuzzleResponse(
            comments=self.masked_comments,
            correctUrl=self.correct_url,
            originalComments=self.original_comments,
            revealedWords=self.removed_tokens,
        )


class PuzzleResponse(BaseModel):
    """Response model for the puzzle endpoint."""

    model_config = ConfigDict(populate_by_name=True)

    comments: List[str] = Field(..., description="Masked comment texts")
    correct_url: str = Field(..., alias="correctUrl")
    original_comments: List[str] = Field(..., alias="originalComments")
    revealed_words: List[List[str]] = Field(..., alias="revealedWords")


class RevealResponse(BaseModel):
    """Response model for the reveal endpoint."""

    comments: List[str] = Field(..., description="Comment texts revealed for the given attempt count")


class GameState(BaseModel):
    """Client-held progress through one day's puzzle. Never persisted server-side."""

    attempts: int = Field(default=0, ge=0, description="Wrong guesses made so far")
    game_won: bool = Field(default=False, description="Whether the thread has been guessed")
    max_attempts: int = Field(default=6, ge=1)

    @model_validator(mode="after")
    def _attempts_within_budget(self) -> "GameState":
        if self.attempts > self.max_attempts:
            raise ValueError(f"attempts must be between 0 and {self.max_attempts}")
        return self

    @property
    def game_over(self) -> bool:
        return self.game_won or self.attempts >= self.max_attempts


class GuessResponse(BaseModel):
    """Response model for the guess endpoint."""

    model_config = ConfigDict(populate_by_name=True)

    correct: bool
    attempts: int
    game_won: bool = Field(..., alias="gameWon")
    game_over: bool = Field(..., alias="gameOver")
    feedback: str
    comments: List[str]
