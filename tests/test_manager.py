import logging

import pytest
from packages.datasets import load_dictionary
from packages.engine import (
    HangmanError, HangmanManager, InvalidArgumentError, NoCandidatesError,
    NoGuessesLeftError, filter_candidates,
)

# English letter order: plays long games on the bundled dictionary
LETTERS = "etaoinshrdlcumwfgypbvkjxqz"


def _snapshot(m: HangmanManager):
    return (m.candidate_pool(), m.guessed_letters(), m.guesses_left(), m.current_pattern())


# --- construction ---
def test_new_manager_state():
    m = HangmanManager(["aa", "bb", "cc", "abc", "bb"], 2, 3)
    assert m.candidate_pool() == frozenset({"aa", "bb", "cc"})
    assert m.current_pattern() == "- - "
    assert m.guessed_letters() == ()
    assert m.guesses_left() == 3
    assert m.length == 2 and m.max_wrong == 3

@pytest.mark.parametrize("length,max_wrong", [(0, 3), (-4, 3), (2, -1)])
def test_bad_constructor_arguments(length, max_wrong):
    with pytest.raises(InvalidArgumentError):
        HangmanManager(["aa"], length, max_wrong)

def test_invalid_argument_is_a_value_error():
    with pytest.raises(ValueError):
        HangmanManager(["aa"], 0, 3)

def test_zero_max_wrong_is_allowed():
    m = HangmanManager(["aa"], 2, 0)
    assert m.guesses_left() == 0

def test_dictionary_is_copied_not_retained():
    words = ["aa", "bb"]
    m = HangmanManager(words, 2, 3)
    words.append("cc")
    words.remove("aa")
    assert m.candidate_pool() == frozenset({"aa", "bb"})

def test_accepts_any_iterable():
    m = HangmanManager((w for w in ["ab", "cd", "efg"]), 2, 1)
    assert m.candidate_pool() == frozenset({"ab", "cd"})

# --- empty pool: accepted at construction, fails on use ---
def test_empty_pool_is_deferred_failure():
    m = HangmanManager(["abc", "de"], 4, 3)
    assert m.candidate_pool() == frozenset()
    assert m.guesses_left() == 3
    assert m.guessed_letters() == ()
    with pytest.raises(NoCandidatesError):
        m.current_pattern()
    with pytest.raises(NoCandidatesError):
        m.record_guess("a")

def test_empty_pool_checked_before_budget():
    m = HangmanManager([], 3, 0)
    with pytest.raises(NoCandidatesError):
        m.record_guess("a")

# --- scenarios ---
def test_scenario_a_adversary_dodges():
    m = HangmanManager(["aa", "bb", "cc"], 2, 3)
    assert m.record_guess("a") == 0
    assert m.candidate_pool() == frozenset({"bb", "cc"})
    assert m.current_pattern() == "- - "
    assert m.guesses_left() == 2
    assert m.guessed_letters() == ("a",)

def test_scenario_b_tie_keeps_smaller_pattern():
    m = HangmanManager(["bb", "cc"], 2, 2)
    assert m.record_guess("b") == 0
    assert m.candidate_pool() == frozenset({"cc"})
    assert m.current_pattern() == "- - "
    assert m.guesses_left() == 1

def test_scenario_c_forced_reveal():
    m = HangmanManager(["cc"], 2, 1)
    assert m.record_guess("c") == 2
    assert m.candidate_pool() == frozenset({"cc"})
    assert m.current_pattern() == "c c "
    assert m.guesses_left() == 1

def test_scenarios_chained():
    m = HangmanManager(["aa", "bb", "cc"], 2, 3)
    assert [m.record_guess(ch) for ch in "abc"] == [0, 0, 2]
    assert m.candidate_pool() == frozenset({"cc"})
    assert m.current_pattern() == "c c "
    assert m.guessed_letters() == ("a", "b", "c")
    assert m.guesses_left() == 1

def test_reveal_keeps_largest_family_with_letter():
    words = ["ally", "beta", "cool", "else", "flew", "ibex", "hope", "tiny", "deal", "meat"]
    m = HangmanManager(words, 4, 5)
    # families for 'e': "- e - - " has beta, deal, meat (3); no-'e' has ally, cool, tiny (3).
    # Tie: "- - - - " < "- e - - ", so the manager says no.
    assert m.record_guess("e") == 0
    assert m.candidate_pool() == frozenset({"ally", "cool", "tiny"})
    # 'l': "- l l - " (ally), "- - - l " (cool), none (tiny): all size 1 -> "- - - - "
    assert m.record_guess("l") == 0
    assert m.candidate_pool() == frozenset({"tiny"})
    assert m.record_guess("t") == 1
    assert m.current_pattern() == "t - - - "

def test_guessed_letters_are_sorted():
    m = HangmanManager(["abcd", "efgh"], 4, 10)
    for ch in "zqa":
        m.record_guess(ch)
    assert m.guessed_letters() == ("a", "q", "z")

# --- errors leave state untouched ---
def test_repeated_guess_rejected_without_change():
    m = HangmanManager(["aa", "bb", "cc"], 2, 3)
    m.record_guess("a")
    before = _snapshot(m)
    state = m.state
    with pytest.raises(InvalidArgumentError):
        m.record_guess("a")
    assert _snapshot(m) == before
    assert m.state is state

def test_no_guesses_left():
    m = HangmanManager(["aa", "bb", "cc"], 2, 1)
    m.record_guess("z")
    assert m.guesses_left() == 0
    before = _snapshot(m)
    with pytest.raises(NoGuessesLeftError):
        m.record_guess("a")
    # budget is checked before the repeated-letter rule
    with pytest.raises(NoGuessesLeftError):
        m.record_guess("z")
    assert _snapshot(m) == before

def test_all_errors_share_a_base():
    for exc in (InvalidArgumentError, NoCandidatesError, NoGuessesLeftError):
        assert issubclass(exc, HangmanError)

# --- queries ---
def test_queries_are_idempotent():
    m = HangmanManager(load_dictionary(), 5, 6)
    m.record_guess("e")
    first = _snapshot(m)
    assert _snapshot(m) == first
    assert _snapshot(m) == first

def test_views_are_immutable():
    m = HangmanManager(["aa", "bb"], 2, 3)
    assert isinstance(m.candidate_pool(), frozenset)
    assert isinstance(m.guessed_letters(), tuple)
    with pytest.raises(Exception):
        m.state.guesses_left = 99

# --- invariants over whole games ---
@pytest.mark.parametrize("length", [3, 4, 5, 6, 7])
def test_invariants_over_a_full_game(length):
    dictionary = load_dictionary()
    m = HangmanManager(dictionary, length, len(LETTERS))

    for ch in LETTERS:
        pool_before = m.candidate_pool()
        left_before = m.guesses_left()
        slots_before = m.pattern_slots

        n = m.record_guess(ch)

        pool = m.candidate_pool()
        # pool shrinks (or holds) and never empties
        assert 1 <= len(pool) <= len(pool_before)
        assert pool <= pool_before
        # budget drops by exactly one iff nothing was revealed
        assert m.guesses_left() == (left_before - 1 if n == 0 else left_before)
        assert n == m.current_pattern().count(ch)
        # revealed slots never revert
        for old, new in zip(slots_before, m.pattern_slots):
            if old is not None:
                assert new == old
        # every remaining word fits what has been shown
        assert set(filter_candidates(pool, m.pattern_slots, m.guessed_letters())) == pool

def test_single_word_pool_plays_truthfully():
    m = HangmanManager(["hello"], 5, 3)
    assert m.record_guess("l") == 2
    assert m.current_pattern() == "- - l l - "
    assert m.record_guess("z") == 0
    assert m.guesses_left() == 2
    assert m.record_guess("h") == 1
    assert m.current_pattern() == "h - l l - "

def test_record_guess_logs_partition(caplog):
    m = HangmanManager(["aa", "bb", "cc"], 2, 3)
    with caplog.at_level(logging.DEBUG, logger="packages.engine.manager"):
        m.record_guess("a")
    assert any("2 families" in rec.getMessage() for rec in caplog.records)


def test_guessing_the_blank_marker_keeps_one_family():
    m = HangmanManager(["a-", "ab", "cd"], 2, 3)
    assert m.record_guess("-") == 0
    assert m.candidate_pool() == frozenset({"a-", "ab", "cd"})
    assert m.current_pattern() == "- - "
    assert m.guesses_left() == 2
