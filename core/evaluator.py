"""
Scoring of guesses against the solution.

All functions are pure: they only read their arguments and can be called from
any thread. Guesses shorter than the solution are accepted everywhere; missing
positions never match.
"""

from __future__ import annotations

from collections import Counter
from typing import Sequence

from core.cell_state import (
    CellState,
    CellTag,
    CORRECT,
    PRESENT,
    ABSENT,
    BEFORE_CURSOR,
    AT_CURSOR,
    AFTER_CURSOR,
    best_tag,
)


def _found_at(guesses: Sequence[str], solution: str, i: int) -> bool:
    """Whether some guess has the solution's letter at position i."""
    return any(i < len(guess) and guess[i] == solution[i] for guess in guesses)


def hint(guesses: Sequence[str], solution: str) -> str:
    """
    Get the correct letters found so far.

    Args:
        guesses: Guesses to search
        solution: Solution word

    Returns:
        Solution letters found at their position, spaces elsewhere, with
        trailing spaces trimmed (e.g. "a b" for guesses ["aaaa", "bbbb"] and
        solution "a.b.")
    """
    return "".join(
        letter if _found_at(guesses, solution, j) else " "
        for j, letter in enumerate(solution)
    ).rstrip()


def score_completed_guess(guess: str, solution: str) -> list[CellState]:
    """
    Score a submitted guess.

    Exact matches are correct. The remaining solution letters form a budget
    that is spent left to right on the other guess letters, so a repeated
    letter is only marked present as many times as it is still unmatched in
    the solution.

    Args:
        guess: Guess to compare with the solution
        solution: Solution word

    Returns:
        One CellState per guess letter (correct, present or absent)
    """
    exact = [i < len(solution) and letter == solution[i] for i, letter in enumerate(guess)]

    budget = Counter(
        letter for i, letter in enumerate(solution)
        if not (i < len(guess) and exact[i])
    )

    states = []
    for i, letter in enumerate(guess):
        if exact[i]:
            states.append(CORRECT)
        elif budget[letter] > 0:
            budget[letter] -= 1
            states.append(PRESENT)
        else:
            states.append(ABSENT)
    return states


def score_in_progress_guess(
    previous_guesses: Sequence[str],
    current_guess: str,
    solution: str
) -> list[CellState]:
    """
    Get cursor-relative states for the guess being typed.

    Hints are only shown while the guess holds just its first letter: cells
    whose solution letter was already found at that position get hint=True.

    Args:
        previous_guesses: Submitted guesses
        current_guess: Letters typed so far
        solution: Solution word

    Returns:
        One CellState per solution position, or [] if nothing is typed
    """
    n = len(current_guess)
    if n == 0:
        return []

    states = []
    guesses = [*previous_guesses, current_guess]
    for i in range(len(solution)):
        if i < n:
            states.append(BEFORE_CURSOR)
        elif i == n:
            states.append(AT_CURSOR)
        else:
            states.append(AFTER_CURSOR)

        if n == 1 and i >= n and _found_at(guesses, solution, i):
            states[i] = CellState(states[i].tag, hint=True)
    return states


def board_content(
    previous_guesses: Sequence[str],
    current_guess: str,
    solution: str
) -> list[str]:
    """
    Get the text of each board row.

    The last row shows the current guess, or the hint when only the first
    letter has been typed.
    """
    if len(current_guess) == 1:
        last = hint([*previous_guesses, current_guess], solution)
    else:
        last = current_guess
    return [*previous_guesses, last]


def board_state(
    previous_guesses: Sequence[str],
    current_guess: str,
    solution: str
) -> list[list[CellState]]:
    """Get the state of each board row: submitted guesses, then the current one."""
    return [
        *(score_completed_guess(guess, solution) for guess in previous_guesses),
        score_in_progress_guess(previous_guesses, current_guess, solution),
    ]


def keyboard_state(previous_guesses: Sequence[str], solution: str) -> dict[str, CellTag]:
    """
    Get the best state seen for each guessed letter.

    Args:
        previous_guesses: Submitted guesses
        solution: Solution word

    Returns:
        Mapping of letter to correct, present or absent; letters that were
        never guessed are missing
    """
    keys: dict[str, CellTag] = {}
    for guess in previous_guesses:
        for letter, state in zip(guess, score_completed_guess(guess, solution)):
            seen = keys.get(letter)
            keys[letter] = state.tag if seen is None else best_tag(seen, state.tag)
    return keys
