import io

import pytest

from wordle_minimax.cli import main


@pytest.fixture
def three_words(word_file):
    return word_file("words.txt", ["crane", "slate", "trace"])


def run(monkeypatch, argv, stdin):
    monkeypatch.setattr("sys.stdin", io.StringIO(stdin))
    return main(argv)


def test_solves_after_one_round(monkeypatch, capsys, three_words):
    code = run(monkeypatch, ["--words", three_words, "--first-guess", "crane", "--no-progress"], "ggggg\n")
    out = capsys.readouterr().out
    assert code == 0
    assert "# crane to refine crane,slate,trace" in out
    assert "only solution remaining is crane" in out


def test_malformed_feedback_reprompts(monkeypatch, capsys, three_words):
    code = run(
        monkeypatch,
        ["--words", three_words, "--first-guess", "crane", "--no-progress"],
        "ggg\ngxg..\nggggg\n",
    )
    out = capsys.readouterr().out
    assert code == 0
    assert "expected 5 chars, got 3" in out
    assert out.count("# crane to refine") == 3
    assert "only solution remaining is crane" in out


def test_contradiction_exits_nonzero(monkeypatch, capsys, three_words):
    code = run(monkeypatch, ["--words", three_words, "--first-guess", "crane", "--no-progress"], ".....\n")
    captured = capsys.readouterr()
    assert code == 1
    assert "No candidates left" in captured.err
    assert "only solution" not in captured.out


@pytest.mark.parametrize("stdin", ["quit\n", ""])
def test_quit_or_eof(monkeypatch, capsys, three_words, stdin):
    code = run(monkeypatch, ["--words", three_words, "--no-progress"], stdin)
    assert code == 0
    assert "only solution" not in capsys.readouterr().out


def test_separate_answer_list(monkeypatch, capsys, word_file):
    words_path = word_file("guesses.txt", ["crane", "slate", "trace", "zzzzz"])
    answers_path = word_file("answers.txt", ["slate"])
    code = run(monkeypatch, ["--words", words_path, "--answers", answers_path], "")
    assert code == 0
    assert "only solution remaining is slate" in capsys.readouterr().out


def test_bad_vocabulary(monkeypatch, capsys, word_file):
    path = word_file("bad.txt", ["crane", "cr4ne"])
    code = run(monkeypatch, ["--words", path], "")
    assert code == 2
    assert f"{path}:2" in capsys.readouterr().err


def test_missing_file(monkeypatch, capsys, tmp_path):
    code = run(monkeypatch, ["--words", str(tmp_path / "nope.txt")], "")
    assert code == 2


def test_bad_first_guess(monkeypatch, capsys, three_words):
    code = run(monkeypatch, ["--words", three_words, "--first-guess", "xx"], "")
    assert code == 2
    assert "Bad --first-guess" in capsys.readouterr().err


def test_verbose_logs_to_stderr(monkeypatch, capsys, three_words):
    run(monkeypatch, ["--words", three_words, "--first-guess", "crane", "--no-progress", "--verbose"], "ggggg\n")
    err = capsys.readouterr().err
    assert "solver: loaded allowed=3 answers=3" in err
    assert "filtered candidates 3 -> 1" in err


def test_repeated_letter_rule_in_help_and_error(monkeypatch, capsys, word_file):
    path = word_file("words.txt", ["speed", "abide", "other"])
    code = run(monkeypatch, ["--words", path, "--first-guess", "speed", "--no-progress"], "..y.y\n")
    captured = capsys.readouterr()
    assert code == 1
    assert "Mark every occurrence of a present letter g or y" in captured.out
    assert "mark every occurrence of a present letter g or y" in captured.err


def test_help_mentions_repeated_letters(capsys):
    with pytest.raises(SystemExit):
        main(["--help"])
    out = " ".join(capsys.readouterr().out.split())
    assert "every occurrence of a present letter" in out
