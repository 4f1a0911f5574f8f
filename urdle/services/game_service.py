"""
Game Service

Contains the core game logic of the daily puzzle: guess evaluation, the
attempt state machine, restoration of a stored game, and the views the
UI derives from a game (keyboard hints, share text).

Everything except DailyPuzzleService is a pure function of its arguments.
"""

from collections import Counter
from datetime import datetime, timedelta
from typing import Callable, Dict, Iterable, Optional, Tuple

from ..config.game_settings import GAME_TITLE, MAX_ATTEMPTS, REFERENCE_TIMEZONE, SHARE_GLYPHS
from ..models.errors import InvalidArgument
from ..models.game import (
    Attempt, GameState, LetterStatus, PuzzleSession, RejectionReason, SubmitResult
)
from ..utils.game_logger import game_logger
from ..utils.letters import split_letters
from . import daily_service
from .catalog import WordCatalog
from .storage_service import StateStore


class StalePuzzleError(InvalidArgument):
    """A submitted state is out of date: from an earlier day, or behind the stored game."""


def evaluate(guess: str, secret: str) -> Tuple[LetterStatus, ...]:
    """
    Implements the Wordle letter evaluation algorithm.

    Exact matches are resolved for the whole word before any displaced
    letter is considered, so a letter is never reported more often than it
    occurs in the secret.

    Args:
        guess: Guessed word
        secret: Secret word

    Returns:
        One LetterStatus per letter of the guess

    Raises:
        InvalidArgument: If guess and secret have different letter counts
    """
    guess_letters = split_letters(guess)
    secret_letters = split_letters(secret)
    if len(guess_letters) != len(secret_letters):
        raise InvalidArgument(
            f"Guess has {len(guess_letters)} letters but the secret has {len(secret_letters)}"
        )

    remaining = Counter(secret_letters)
    result = [LetterStatus.ABSENT] * len(guess_letters)

    # First pass: mark all exact position matches
    for i, (g, s) in enumerate(zip(guess_letters, secret_letters)):
        if g == s:
            result[i] = LetterStatus.CORRECT
            remaining[g] -= 1

    # Second pass: displaced letters consume whatever count is left
    for i, g in enumerate(guess_letters):
        if result[i] is LetterStatus.CORRECT:
            continue
        if remaining[g] > 0:
            result[i] = LetterStatus.PRESENT
            remaining[g] -= 1

    return tuple(result)


def new_game(day_key: str, max_attempts: int = MAX_ATTEMPTS) -> GameState:
    return GameState(day_key=day_key, max_attempts=max_attempts)


def check_guess(state: GameState, guess: str, catalog: WordCatalog) -> Optional[RejectionReason]:
    """
    Validates a guess for the given game.

    Returns:
        The rejection reason, or None if the guess may be played
    """
    if state.game_over:
        return RejectionReason.GAME_ALREADY_OVER

    if not isinstance(guess, str) or len(split_letters(guess)) != catalog.word_length:
        return RejectionReason.WRONG_LENGTH

    if not catalog.contains(guess):
        return RejectionReason.NOT_IN_CATALOG

    return None


def apply_guess(state: GameState, guess: str, secret: str, catalog: WordCatalog) -> SubmitResult:
    """
    Processes a guess and returns the resulting game state.

    A rejected guess returns the unchanged state together with the reason.
    When the guess ends the game, the answer is revealed on the new state.
    """
    rejection = check_guess(state, guess, catalog)
    if rejection is not None:
        return SubmitResult(state=state, rejection=rejection)

    attempt = Attempt(guess=guess, evaluation=evaluate(guess, secret))
    new_state = state.with_attempt(attempt)
    if new_state.game_over:
        new_state = new_state.with_answer(secret)

    return SubmitResult(state=new_state, attempt=attempt)


def replay(day_key: str,
           guesses: Iterable[str],
           secret: str,
           catalog: WordCatalog,
           max_attempts: int = MAX_ATTEMPTS) -> GameState:
    """
    Rebuild a game by playing stored guesses again.

    Evaluations are always recomputed, never read from storage. Guesses that
    would be rejected today (unknown word, wrong length, or played after the
    game ended) are dropped.
    """
    state = new_game(day_key, max_attempts)
    for guess in guesses:
        result = apply_guess(state, guess, secret, catalog)
        if not result.accepted:
            game_logger.log_warning(
                'replay', 'Dropping stored guess', day_key=day_key,
                guess=guess, reason=result.rejection.value
            )
            continue
        state = result.state
    return state


def keyboard_hint_states(state: GameState) -> Dict[str, LetterStatus]:
    """
    Best status seen so far for every guessed letter (correct > present > absent).
    """
    key_states: Dict[str, LetterStatus] = {}
    for attempt in state.attempts:
        for letter, status in zip(split_letters(attempt.guess), attempt.evaluation):
            current = key_states.get(letter)
            if current is None or status.priority > current.priority:
                key_states[letter] = status
    return key_states


def share_text(state: GameState, title: str = GAME_TITLE) -> Optional[str]:
    """
    Spoiler-free summary of the game for sharing.

    Format::

        <title> <day>
        <attempts or X>/<max attempts>

        <one row of glyphs per attempt>

    Returns:
        The text, or None if nothing has been played yet
    """
    if not state.attempts:
        return None

    score = str(state.current_round) if state.won else 'X'
    lines = [f"{title} {state.day_key}", f"{score}/{state.max_attempts}", ""]
    for attempt in state.attempts:
        lines.append(''.join(SHARE_GLYPHS[status.value] for status in attempt.evaluation))
    return '\n'.join(lines)


class DailyPuzzleService:
    """
    Boundary between the puzzle core and the UI layer.

    This class handles:
    - Deciding today's puzzle and restoring a stored game for it
    - Validating, evaluating and recording guesses
    - Persisting the game after every accepted guess

    It holds configuration only; the game itself is the GameState value the
    caller passes in and receives back.
    """

    def __init__(self,
                 catalog: WordCatalog,
                 store: StateStore,
                 tz: str = REFERENCE_TIMEZONE,
                 max_attempts: int = MAX_ATTEMPTS,
                 clock: Optional[Callable[[], datetime]] = None):
        self.catalog = catalog
        self.store = store
        self.tz = tz
        self.max_attempts = max_attempts
        self.clock = clock

    def _now(self) -> Optional[datetime]:
        return self.clock() if self.clock else None

    def today(self) -> str:
        return daily_service.today(self._now(), self.tz)

    def secret_for(self, day_key: str) -> str:
        return daily_service.secret_word(self.catalog, day_key)

    def initialize(self) -> PuzzleSession:
        """
        Start today's puzzle, restoring the stored game if it belongs to today.

        Returns:
            PuzzleSession with today's DayKey and the fresh or restored state
        """
        day_key = self.today()
        secret = self.secret_for(day_key)
        game_logger.log_user_action('initialize', day_key)

        record = self.store.load(day_key)
        if record is None:
            return PuzzleSession(day_key=day_key, state=new_game(day_key, self.max_attempts))

        state = replay(day_key, record["attempts"], secret, self.catalog, self.max_attempts)

        consistent = (
            len(state.attempts) == len(record["attempts"])
            and state.game_over == record["gameOver"]
            and state.won == record["won"]
        )
        if not consistent:
            game_logger.log_warning(
                'initialize', 'Stored game disagrees with replay; keeping replayed state',
                day_key=day_key,
                stored_attempts=len(record["attempts"]), replayed_attempts=len(state.attempts),
                stored_game_over=record["gameOver"], replayed_game_over=state.game_over,
                stored_won=record["won"], replayed_won=state.won
            )
            self.store.save(state)

        game_logger.log_game_event(
            day_key, 'state_restored',
            rounds_used=state.current_round, game_over=state.game_over, won=state.won
        )
        return PuzzleSession(day_key=day_key, state=state, restored=True)

    def submit(self, state: GameState, guess: str) -> SubmitResult:
        """
        Submit a guess for today's puzzle.

        Args:
            state: The latest state returned by initialize or submit
            guess: The guessed word

        Returns:
            SubmitResult with the new state, or the unchanged state and a rejection

        Raises:
            StalePuzzleError: If state belongs to another day or does not match the stored game
        """
        day_key = self.today()
        if state.day_key != day_key:
            raise StalePuzzleError(
                f"Puzzle for {state.day_key} is over; today is {day_key}. Initialize again."
            )

        game_logger.log_user_action(
            'submit_guess', day_key, guess=guess,
            guess_length=len(split_letters(guess)) if isinstance(guess, str) else None
        )

        secret = self.secret_for(day_key)

        # The stored game is authoritative: a finished day stays finished and
        # attempts are only ever appended to what is already stored
        record = self.store.load(day_key)
        if record is not None:
            stored = replay(day_key, record["attempts"], secret, self.catalog, self.max_attempts)
            if stored.game_over:
                game_logger.log_rejection(
                    day_key, RejectionReason.GAME_ALREADY_OVER.value, attempted_guess=guess
                )
                return SubmitResult(state=stored, rejection=RejectionReason.GAME_ALREADY_OVER)
            if stored.guesses != state.guesses:
                raise StalePuzzleError(
                    f"State has {state.current_round} attempts but the stored game has "
                    f"{stored.current_round}. Submit with the latest state or initialize again."
                )

        result = apply_guess(state, guess, secret, self.catalog)

        if not result.accepted:
            game_logger.log_rejection(day_key, result.rejection.value, attempted_guess=guess)
            return result

        new_state = result.state
        self.store.save(new_state)

        # Log special game events
        if new_state.game_over:
            event = 'game_won' if new_state.won else 'game_lost'
            game_logger.log_game_event(
                day_key, event, rounds_used=new_state.current_round,
                target_word=new_state.answer, final_guess=guess
            )

        return result

    def keyboard_hint_states(self, state: GameState) -> Dict[str, LetterStatus]:
        return keyboard_hint_states(state)

    def share_text(self, state: GameState) -> Optional[str]:
        text = share_text(state)
        game_logger.log_user_action('share', state.day_key, available=text is not None)
        return text

    def can_play_today(self) -> bool:
        """False once today's stored game is finished."""
        day_key = self.today()
        record = self.store.load(day_key)
        if record is None:
            return True
        state = replay(day_key, record["attempts"], self.secret_for(day_key), self.catalog, self.max_attempts)
        return not state.game_over

    def time_until_next_puzzle(self) -> timedelta:
        return daily_service.time_until_next_puzzle(self._now(), self.tz)

    def shutdown(self):
        """Close the state store's connection."""
        self.store.close_connection()
        game_logger.logger.info("Urdle puzzle service stopped")


# Global service instance
_puzzle_service = None


def get_puzzle_service() -> Optional[DailyPuzzleService]:
    """Get the global puzzle service instance."""
    return _puzzle_service


def initialize_puzzle_service(catalog: WordCatalog, store: StateStore, **kwargs) -> DailyPuzzleService:
    """Initialize the global puzzle service instance."""
    global _puzzle_service
    _puzzle_service = DailyPuzzleService(catalog, store, **kwargs)
    return _puzzle_service
