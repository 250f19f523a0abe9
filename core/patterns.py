"""
Batched feedback codes for many guess/solution pairs.

Each completed-guess score is packed into one integer, digit i in base 3
being the state of position i (0=absent, 1=present, 2=correct). A matrix of
codes lets solvers and analysis scripts compare guesses without re-scoring.
"""

from __future__ import annotations

from typing import Sequence
import numpy as np

from core.cell_state import CellTag
from core.evaluator import score_completed_guess

_DIGITS = {CellTag.ABSENT: 0, CellTag.PRESENT: 1, CellTag.CORRECT: 2}


def feedback_code(guess: str, solution: str) -> int:
    """
    Encode the score of guess against solution as an integer.

    Returns:
        Code in [0, 3 ** len(guess)); all-correct is 3 ** len(guess) - 1
    """
    code = 0
    multiple = 1
    for state in score_completed_guess(guess, solution):
        code += _DIGITS[state.tag] * multiple
        multiple *= 3
    return code


def pattern_matrix(guesses: Sequence[str], solutions: Sequence[str]) -> np.ndarray:
    """
    Compute feedback codes for every guess against every solution.

    Args:
        guesses: G guess words
        solutions: S solution words, same length as the guesses

    Returns:
        [G, S] array where entry (i, j) is feedback_code(guesses[i], solutions[j]);
        uint8 up to length 5, uint32 up to length 20, uint64 up to length 40

    Raises:
        ValueError: If words have different lengths or codes overflow uint64
    """
    lengths = {len(word) for word in (*guesses, *solutions)}
    if len(lengths) > 1:
        raise ValueError(f"Expected words of a single length, got lengths {sorted(lengths)}")

    length = lengths.pop() if lengths else 0
    if 3 ** length <= 2 ** 8:
        dtype = np.uint8
    elif 3 ** length <= 2 ** 32:
        dtype = np.uint32
    elif 3 ** length <= 2 ** 64:
        dtype = np.uint64
    else:
        raise ValueError(f"Feedback codes for length {length} do not fit in 64 bits")

    matrix = np.zeros((len(guesses), len(solutions)), dtype=dtype)
    for i, guess in enumerate(guesses):
        matrix[i] = [feedback_code(guess, solution) for solution in solutions]
    return matrix
