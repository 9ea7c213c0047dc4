"""
Number guessing game state.

The player has a fixed number of attempts to guess a number between 1 and 99.
A session is an immutable value; apply_guess returns the next session together
with the outcome of the guess.
"""

import logging
import random
from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional

logger = logging.getLogger(__name__)

MIN_NUMBER = 1
MAX_NUMBER = 100  # exclusive
MAX_ATTEMPTS = 5


class GameOverError(ValueError):
    """Raised when guessing in a session that is already finished."""

    pass


class Outcome(Enum):
    CORRECT = "correct"
    TOO_LOW = "too_low"
    TOO_HIGH = "too_high"


@dataclass(frozen=True)
class GameSession:
    target: int
    attempts: int = 0
    max_attempts: int = MAX_ATTEMPTS
    finished: bool = False

    @property
    def remaining(self) -> int:
        return self.max_attempts - self.attempts


@dataclass(frozen=True)
class GuessResult:
    guess: int
    outcome: Outcome
    attempts: int
    remaining: int
    out_of_attempts: bool = False


def get_random_number(
    min_value: int, max_value: int, rng: Optional[random.Random] = None
) -> int:
    """Random integer from min_value (inclusive) to max_value (exclusive)."""
    rng = rng or random.Random()
    return rng.randrange(min_value, max_value)


def new_game(
    rng: Optional[random.Random] = None, max_attempts: int = MAX_ATTEMPTS
) -> GameSession:
    if max_attempts < 1:
        raise ValueError("max_attempts must be at least 1")
    target = get_random_number(MIN_NUMBER, MAX_NUMBER, rng)
    logger.debug(f"target number: {target}")
    return GameSession(target=target, max_attempts=max_attempts)


def apply_guess(session: GameSession, guess: int) -> tuple[GameSession, GuessResult]:
    if session.finished:
        raise GameOverError("The game is over. Start a new game to keep playing.")

    attempts = session.attempts + 1
    if guess == session.target:
        outcome = Outcome.CORRECT
    elif guess < session.target:
        outcome = Outcome.TOO_LOW
    else:
        outcome = Outcome.TOO_HIGH

    out_of_attempts = outcome is not Outcome.CORRECT and attempts >= session.max_attempts
    finished = outcome is Outcome.CORRECT or attempts >= session.max_attempts

    next_session = replace(session, attempts=attempts, finished=finished)
    result = GuessResult(
        guess=guess,
        outcome=outcome,
        attempts=attempts,
        remaining=next_session.remaining,
        out_of_attempts=out_of_attempts,
    )
    return next_session, result


def feedback_message(result: GuessResult) -> str:
    if result.outcome is Outcome.CORRECT:
        return f"You made {result.attempts} guesses. Congratulations! You got it!"

    hint = "Too low!" if result.outcome is Outcome.TOO_LOW else "Too high!"
    message = (
        f"{hint} You guessed {result.guess}. {result.remaining} guesses remaining"
    )
    if result.out_of_attempts:
        message += ". You reached the max number of guesses"
    return message
