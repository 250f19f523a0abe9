"""
Core game logic for the word game.

This module provides the pure scoring functions that turn a solution and the
player's guesses into board and keyboard states, plus the round state machine
that drives them.
"""

from core.cell_state import CellTag, CellState
from core.evaluator import (
    hint,
    score_completed_guess,
    score_in_progress_guess,
    board_content,
    board_state,
    keyboard_state
)
from core.game_state import GameParams, GameStatus, SubmitResult, GameState
from core.patterns import feedback_code, pattern_matrix

__all__ = [
    "CellTag",
    "CellState",
    "hint",
    "score_completed_guess",
    "score_in_progress_guess",
    "board_content",
    "board_state",
    "keyboard_state",
    "GameParams",
    "GameStatus",
    "SubmitResult",
    "GameState",
    "feedback_code",
    "pattern_matrix",
]
