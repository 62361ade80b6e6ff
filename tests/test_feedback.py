import pytest

from wordle_minimax.errors import MalformedFeedback
from wordle_minimax.feedback import Feedback, filter_candidates
from wordle_minimax.words import Word, letter_index, letter_mask

from conftest import words


def mask(letters):
    return letter_mask(letter_index(c) for c in letters)


def pairs(*items):
    return tuple((letter_index(ch), pos) for ch, pos in items)


def test_scenario_shared_prefix():
    guess, solution, other = words("abcde", "abcxy", "zzzzz")
    score = Feedback.simulate(solution, guess)

    assert score.correct_position == pairs(("a", 0), ("b", 1), ("c", 2))
    assert score.wrong_position == ()
    assert score.present == mask("abc")
    assert score.absent == mask("de")
    assert score.code == "ggg.."
    assert not score.matches(other)
    assert score.matches(solution)
    assert not score.matches(guess)


def test_simulate_wrong_positions():
    guess, solution = words("trace", "crate")
    score = Feedback.simulate(solution, guess)
    assert score.code == "yggyg"
    assert score.wrong_position == pairs(("t", 0), ("c", 3))


def test_repeated_guess_letter_reports_every_occurrence():
    # "abide" has a single e, yet both e's of "speed" come back yellow
    guess, solution = words("speed", "abide")
    score = Feedback.simulate(solution, guess)
    assert score.code == "..yyy"
    assert score.matches(solution)


@pytest.mark.parametrize("text", ["crane", "speed", "fuzzy", "mamma"])
def test_guess_equal_to_solution(text):
    w = Word.from_str(text)
    score = Feedback.simulate(w, w)
    assert len(score.correct_position) == 5
    assert score.wrong_position == ()
    assert score.absent == 0
    assert score.is_solved
    assert score.matches(w)
    assert score.matches(Word.from_str(text.upper()))


def test_anagram_does_not_match_solved_feedback():
    crate, caret = words("crate", "caret")
    assert not Feedback.simulate(crate, crate).matches(caret)


def test_parse_matches_simulated():
    guess, solution = words("abcde", "abcxy")
    assert Feedback.parse("ggg..", guess) == Feedback.simulate(solution, guess)
    assert hash(Feedback.parse("ggg..", "abcde")) == hash(Feedback.simulate(solution, guess))


def test_parse_trims_and_ignores_case():
    score = Feedback.parse("  G.Y..\n", "crane")
    assert score.code == "g.y.."
    assert score.correct_position == pairs(("c", 0))
    assert score.wrong_position == pairs(("a", 2))
    assert score.present == mask("ca")
    assert score.absent == mask("rne")


@pytest.mark.parametrize("code", ["ggg", "", "gggggg", "g y .."])
def test_parse_rejects_wrong_length(code):
    with pytest.raises(MalformedFeedback):
        Feedback.parse(code, "crane")


def test_parse_rejects_unknown_character():
    with pytest.raises(MalformedFeedback) as exc:
        Feedback.parse("gxg..", "crane")
    assert "x" in str(exc.value)


def test_parse_length_error_mentions_count():
    with pytest.raises(MalformedFeedback, match="got 3"):
        Feedback.parse("ggg", "crane")


def _fails_a_condition(score, w):
    return (
        not w.has_all(score.present)
        or not w.has_none(score.absent)
        or any(w.letters[pos] != ch for ch, pos in score.correct_position)
        or any(w.letters[pos] == ch for ch, pos in score.wrong_position)
    )


@pytest.mark.parametrize("guess", ["crane", "slate", "react", "speed"])
@pytest.mark.parametrize("solution", ["crate", "caret", "trace"])
def test_filtering_never_grows_pool(small_vocab, guess, solution):
    score = Feedback.simulate(Word.from_str(solution), Word.from_str(guess))
    kept = filter_candidates(small_vocab, score)

    assert len(kept) <= len(small_vocab)
    assert Word.from_str(solution) in kept
    assert kept == [w for w in small_vocab if w in kept]
    for w in small_vocab:
        if w not in kept:
            assert _fails_a_condition(score, w)


def test_filter_candidates_does_not_mutate_input(small_vocab):
    before = list(small_vocab)
    filter_candidates(small_vocab, Feedback.parse(".....", "zzzzz"))
    assert small_vocab == before
