"""
Tests for core.evaluator module.
"""

import itertools

import pytest

from core.cell_state import CellState, CellTag, best_tag
from core.evaluator import (
    hint,
    score_completed_guess,
    score_in_progress_guess,
    board_content,
    board_state,
    keyboard_state,
)


def tags(states):
    """Render states as the space-joined token strings."""
    return [str(state) for state in states]


def test_hint_from_guesses():
    """Test found letters are kept and trailing spaces trimmed."""
    assert hint(["aaaa", "bbbb"], "a.b.") == "a b"


def test_hint_ignores_short_guesses():
    """Test guesses shorter than the solution never match missing positions."""
    assert hint(["a"], "abc") == "a"
    assert hint([], "abc") == ""


def test_correct_letters_for_previous_guess():
    """Test surplus repeated letters are absent."""
    assert tags(score_completed_guess("aaa", "aa.")) == ["correct", "correct", "absent"]


def test_present_letters_for_previous_guess():
    """Test misplaced letters are present while the budget lasts."""
    assert tags(score_completed_guess("baa", "abb")) == ["present", "present", "absent"]


def test_correct_and_present_letters_for_previous_guess():
    """Test exact matches are removed from the present budget first."""
    assert tags(score_completed_guess("aaabbb", "a.ba.b")) == [
        "correct", "present", "absent", "present", "absent", "correct",
    ]


def test_solution_against_itself_is_all_correct():
    """Test a winning guess scores correct everywhere."""
    states = score_completed_guess("valeur", "valeur")

    assert all(state.tag == CellTag.CORRECT for state in states)
    assert len(states) == 6


def test_short_guess_is_scored_defensively():
    """Test a guess shorter than the solution yields one state per letter."""
    assert tags(score_completed_guess("ba", "abc")) == ["present", "present"]
    assert score_completed_guess("", "abc") == []


def test_letter_budget_never_exceeded():
    """Test correct + present never exceeds a letter's count in the solution."""
    alphabet = "ab."
    for solution in map("".join, itertools.product(alphabet, repeat=3)):
        for guess in map("".join, itertools.product(alphabet, repeat=3)):
            states = score_completed_guess(guess, solution)
            assert len(states) == len(solution)
            for letter in set(guess):
                marked = sum(
                    1 for g, s in zip(guess, states)
                    if g == letter and s.tag != CellTag.ABSENT
                )
                assert marked <= solution.count(letter)


def test_current_guess_with_hints():
    """Test hint markers when only the first letter is typed."""
    states = score_in_progress_guess(["adddd"], "a", "abcde")

    assert tags(states) == [
        "before-cursor", "at-cursor", "after-cursor", "after-cursor hint", "after-cursor",
    ]
    assert states[3] == CellState(CellTag.AFTER_CURSOR, hint=True)


def test_current_guess_hint_at_cursor():
    """Test the cell under the cursor can carry a hint."""
    assert tags(score_in_progress_guess(["abxx"], "a", "abcd")) == [
        "before-cursor", "at-cursor hint", "after-cursor", "after-cursor",
    ]


def test_current_guess_without_hints():
    """Test hints disappear once a second letter is typed."""
    assert tags(score_in_progress_guess(["adddd"], "ac", "abcde")) == [
        "before-cursor", "before-cursor", "at-cursor", "after-cursor", "after-cursor",
    ]


def test_current_guess_no_previous_guesses():
    """Test cursor states with no history."""
    assert tags(score_in_progress_guess([], "ab", "abc")) == [
        "before-cursor", "before-cursor", "at-cursor",
    ]
    assert tags(score_in_progress_guess([], "a", "abc")) == [
        "before-cursor", "at-cursor", "after-cursor",
    ]


def test_current_guess_full_or_empty():
    """Test a full guess has no cursor cell and an empty one has no cells."""
    assert tags(score_in_progress_guess([], "abc", "abc")) == ["before-cursor"] * 3
    assert score_in_progress_guess(["abc"], "", "abc") == []


def test_board_content_with_no_previous_guess():
    """Test the current guess is shown as typed."""
    assert board_content([], "ab", "abc") == ["ab"]


def test_board_content_with_hints():
    """Test the hint replaces a one-letter guess."""
    assert board_content(["accc"], "a", "abcd") == ["accc", "a c"]


def test_board_state():
    """Test completed rows followed by the cursor row."""
    state = board_state(["accc"], "ac", "abcd")

    assert [tags(row) for row in state] == [
        ["correct", "absent", "correct", "absent"],
        ["before-cursor", "before-cursor", "at-cursor", "after-cursor"],
    ]


def test_keyboard_state():
    """Test each guessed letter gets its best state."""
    assert keyboard_state(["abcd"], "abxc") == {
        "a": CellTag.CORRECT,
        "b": CellTag.CORRECT,
        "c": CellTag.PRESENT,
        "d": CellTag.ABSENT,
    }


def test_keyboard_state_never_downgrades():
    """Test later absent/present observations keep a correct key correct."""
    state = keyboard_state(["abcd", "bxxx", "xbbb"], "abxc")

    assert state["b"] == CellTag.CORRECT
    assert state["x"] == CellTag.CORRECT


def test_keyboard_state_upgrades_present_to_correct():
    """Test a later correct observation wins over present."""
    state = keyboard_state(["cxxx", "xxxc"], "abxc")

    assert state["c"] == CellTag.CORRECT


def test_keyboard_state_empty():
    """Test letters never guessed are missing."""
    assert keyboard_state([], "abc") == {}


@pytest.mark.parametrize("tag", [CellTag.BEFORE_CURSOR, CellTag.AT_CURSOR, CellTag.AFTER_CURSOR])
def test_cursor_tags_cannot_be_ranked(tag):
    """Test cursor tags are rejected by the key precedence."""
    with pytest.raises(ValueError):
        best_tag(CellTag.CORRECT, tag)
