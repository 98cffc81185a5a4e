"""Tests for the attempt-driven reveal policy."""

import pytest

from threadle.config import Settings
from threadle.models import Puzzle, RedactionRecord
from threadle.pipeline import InvalidAttemptsError, RevealService
from threadle.redaction import PLACEHOLDER, restore


def make_record(token_count: int, label: str = "w") -> RedactionRecord:
    masked = " ".join(f"{label}{i} {PLACEHOLDER}" for i in range(token_count))
    tokens = [f"t{i}" for i in range(token_count)]
    return RedactionRecord(masked_text=masked, removed_tokens=tokens, original_text=restore(masked, tokens))


class TestRevealService:
    """Tests for RevealService."""

    @pytest.fixture
    def service(self):
        return RevealService(Settings())

    def test_words_per_comment_policy(self, service):
        assert [service.words_per_comment(a) for a in range(7)] == [0, 2, 4, 6, 8, 8, 8]

    @pytest.mark.parametrize("attempts", [0, 3, 6])
    def test_valid_attempts(self, service, attempts):
        assert service.validate_attempts(attempts) == attempts

    @pytest.mark.parametrize("attempts", [7, -1, 6.5, "3", None, True, [1], float("nan"), float("inf")])
    def test_invalid_attempts(self, service, attempts):
        with pytest.raises(InvalidAttemptsError):
            service.validate_attempts(attempts)

    def test_integral_float_attempts_become_int(self, service):
        attempts = service.validate_attempts(3.0)

        assert attempts == 3
        assert isinstance(attempts, int)

    def test_fractional_attempts_reveal_whole_words(self, service):
        assert service.validate_attempts(1.5) == 1.5
        assert service.words_per_comment(1.5) == 3
        assert service.words_per_comment(1.25) == 2
        assert service.words_per_comment(5.5) == 8

    def test_fractional_attempts_rejected_when_whole_required(self, service):
        with pytest.raises(InvalidAttemptsError):
            service.validate_attempts(1.5, allow_fraction=False)

        assert service.validate_attempts(2.0, allow_fraction=False) == 2

    def test_reveal_comments_rejects_invalid_attempts(self, service):
        puzzle = Puzzle(records=[make_record(3)], correct_url="https://example.com/t/1")

        with pytest.raises(InvalidAttemptsError):
            service.reveal_comments(puzzle, 7)

    def test_zero_attempts_shows_masked_comments(self, service):
        puzzle = Puzzle(records=[make_record(4), make_record(2)], correct_url="https://example.com/t/1")

        assert service.reveal_comments(puzzle, 0) == puzzle.masked_comments

    def test_full_game_loss_never_reveals_everything(self, service):
        puzzle = Puzzle(
            records=[make_record(10, label=f"c{n}w") for n in range(5)],
            correct_url="https://example.com/t/1",
        )

        revealed = service.reveal_comments(puzzle, 6)

        assert len(revealed) == 5
        for n, (text, record) in enumerate(zip(revealed, puzzle.records)):
            assert text != record.original_text
            assert text.count(PLACEHOLDER) == 2
            assert text.startswith(f"c{n}w0 t0 c{n}w1 t1")
            assert text.endswith(f"c{n}w7 t7 c{n}w8 {PLACEHOLDER} c{n}w9 {PLACEHOLDER}")

    def test_short_comment_fully_revealed_early(self, service):
        short, long = make_record(3), make_record(10)
        puzzle = Puzzle(records=[short, long], correct_url="https://example.com/t/1")

        revealed = service.reveal_comments(puzzle, 2)

        assert revealed[0] == short.original_text
        assert revealed[1].count(PLACEHOLDER) == 6

    def test_custom_pacing(self):
        service = RevealService(Settings(words_per_attempt=3, max_revealed_words=5))

        assert [service.words_per_comment(a) for a in range(4)] == [0, 3, 5, 5]
