"""
State machine for one round of the word game.

The player repeatedly types letters and submits guesses until the solution is
found or the tries run out. This module only holds the rules; rendering the
board and showing messages for each SubmitResult is left to the caller.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Collection, Optional

from core.cell_state import CellState, CellTag
from core import evaluator


@dataclass
class GameParams:
    """
    Parameters for a round.

    Attributes:
        max_tries: Number of guesses allowed before the round is lost
    """
    max_tries: int = 6


class GameStatus(str, Enum):
    PLAYING = "playing"
    WON = "won"
    LOST = "lost"


class SubmitResult(str, Enum):
    """Outcome of submitting the current guess."""

    ACCEPTED = "accepted"
    WON = "won"
    LOST = "lost"
    # Rejected, the guess is left untouched
    TOO_SHORT = "tooShort"
    ALREADY_TRIED = "alreadyTried"
    NOT_IN_DICTIONARY = "notInDictionary"
    GAME_OVER = "gameOver"


class GameState:
    """
    One round against a fixed solution.

    The current guess always starts with the solution's first letter, which
    cannot be erased.

    Attributes:
        solution: Word to guess
        dictionary: Accepted words (None while not loaded, rejecting every guess)
        params: GameParams with configuration
        previous_guesses: Submitted guesses, in order
        current_guess: Letters typed for the next guess
        status: PLAYING until the round is won or lost
    """

    def __init__(
        self,
        solution: str,
        dictionary: Optional[Collection[str]] = None,
        params: Optional[GameParams] = None
    ):
        """
        Initialize a round.

        Args:
            solution: Word to guess
            dictionary: Accepted words, e.g. from decode_dictionary
            params: GameParams with configuration

        Raises:
            ValueError: If solution is empty or max_tries is not positive
        """
        if not solution:
            raise ValueError("Solution must not be empty")
        self.params = params if params is not None else GameParams()
        if self.params.max_tries < 1:
            raise ValueError(f"max_tries must be positive, got {self.params.max_tries}")

        self.solution = solution
        self.dictionary = dictionary
        self.previous_guesses: list[str] = []
        self.current_guess = solution[0]
        self.status = GameStatus.PLAYING

    @property
    def game_over(self) -> bool:
        return self.status != GameStatus.PLAYING

    def type_letter(self, key: str) -> bool:
        """
        Append a letter to the current guess.

        Returns:
            True if the letter was added (single character, room left, round
            still playing)
        """
        if self.game_over or len(key) != 1:
            return False
        if len(self.current_guess) >= len(self.solution):
            return False
        self.current_guess += key.lower()
        return True

    def backspace(self) -> bool:
        """Remove the last letter, never the first one. Returns True if removed."""
        if self.game_over or len(self.current_guess) <= 1:
            return False
        self.current_guess = self.current_guess[:-1]
        return True

    def submit(self) -> SubmitResult:
        """
        Submit the current guess.

        Returns:
            SubmitResult; rejected guesses leave the state unchanged
        """
        if self.game_over:
            return SubmitResult.GAME_OVER

        guess = self.current_guess
        if len(guess) < len(self.solution):
            return SubmitResult.TOO_SHORT
        if guess in self.previous_guesses:
            return SubmitResult.ALREADY_TRIED
        if self.dictionary is None or guess not in self.dictionary:
            return SubmitResult.NOT_IN_DICTIONARY

        self.previous_guesses.append(guess)

        if guess == self.solution:
            self.status = GameStatus.WON
            self.current_guess = ""
            return SubmitResult.WON

        if len(self.previous_guesses) >= self.params.max_tries:
            self.status = GameStatus.LOST
            self.current_guess = ""
            return SubmitResult.LOST

        self.current_guess = self.solution[0]
        return SubmitResult.ACCEPTED

    def board_content(self) -> list[str]:
        return evaluator.board_content(self.previous_guesses, self.current_guess, self.solution)

    def board_state(self) -> list[list[CellState]]:
        return evaluator.board_state(self.previous_guesses, self.current_guess, self.solution)

    def keyboard_state(self) -> dict[str, CellTag]:
        return evaluator.keyboard_state(self.previous_guesses, self.solution)
