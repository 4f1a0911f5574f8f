"""
Game Data Models

Contains all game-related data structures and enums.
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional, Tuple


class LetterStatus(Enum):
    """Letter evaluation status for one position of a guess."""
    CORRECT = "correct"
    PRESENT = "present"
    ABSENT = "absent"

    @property
    def priority(self) -> int:
        """Rank used when merging statuses for the keyboard: correct > present > absent."""
        return _STATUS_PRIORITY[self]


_STATUS_PRIORITY = {
    LetterStatus.CORRECT: 3,
    LetterStatus.PRESENT: 2,
    LetterStatus.ABSENT: 1,
}


class GameStatus(Enum):
    IN_PROGRESS = "in_progress"
    WON = "won"
    LOST = "lost"


class RejectionReason(Enum):
    """Expected, recoverable outcomes of a submission that leave the state untouched."""
    WRONG_LENGTH = "wrong_length"
    NOT_IN_CATALOG = "not_in_catalog"
    GAME_ALREADY_OVER = "game_already_over"

    @property
    def message(self) -> str:
        return _REJECTION_MESSAGES[self]


_REJECTION_MESSAGES = {
    RejectionReason.WRONG_LENGTH: "چار حروف درج کریں",
    RejectionReason.NOT_IN_CATALOG: "یہ لفظ فہرست میں نہیں ہے",
    RejectionReason.GAME_ALREADY_OVER: "Game is already over",
}


@dataclass(frozen=True)
class Attempt:
    """A submitted guess together with its evaluation."""
    guess: str
    evaluation: Tuple[LetterStatus, ...]

    @property
    def is_win(self) -> bool:
        return all(status is LetterStatus.CORRECT for status in self.evaluation)

    @property
    def match_count(self) -> int:
        """Number of letters in the right position (the badge beside a history row)."""
        return sum(1 for status in self.evaluation if status is LetterStatus.CORRECT)


@dataclass(frozen=True)
class GameState:
    """
    State of one daily puzzle.

    The state is a value: operations return a new GameState instead of
    modifying this one. game_over and won are derived from the attempts,
    so they can never disagree with the history.
    """
    day_key: str
    max_attempts: int
    attempts: Tuple[Attempt, ...] = ()
    answer: Optional[str] = None  # Only included when game is over

    @property
    def current_round(self) -> int:
        return len(self.attempts)

    @property
    def won(self) -> bool:
        return bool(self.attempts) and self.attempts[-1].is_win

    @property
    def game_over(self) -> bool:
        return self.won or len(self.attempts) >= self.max_attempts

    @property
    def status(self) -> GameStatus:
        if self.won:
            return GameStatus.WON
        if self.game_over:
            return GameStatus.LOST
        return GameStatus.IN_PROGRESS

    @property
    def guesses(self) -> Tuple[str, ...]:
        return tuple(attempt.guess for attempt in self.attempts)

    def with_attempt(self, attempt: Attempt) -> "GameState":
        """Return a copy with one more attempt appended."""
        return replace(self, attempts=self.attempts + (attempt,))

    def with_answer(self, answer: str) -> "GameState":
        return replace(self, answer=answer)


@dataclass(frozen=True)
class SubmitResult:
    """Outcome of one submission: either an accepted attempt or a rejection."""
    state: GameState
    attempt: Optional[Attempt] = None
    rejection: Optional[RejectionReason] = None

    @property
    def accepted(self) -> bool:
        return self.rejection is None

    @property
    def evaluation(self) -> Optional[Tuple[LetterStatus, ...]]:
        return self.attempt.evaluation if self.attempt else None


@dataclass(frozen=True)
class PuzzleSession:
    """Today's puzzle as handed to the UI layer at startup."""
    day_key: str
    state: GameState
    restored: bool = False
