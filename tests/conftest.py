import pytest

from wordle_minimax.words import Word


def words(*texts):
    return [Word.from_str(t) for t in texts]


@pytest.fixture
def small_vocab():
    return words("crane", "slate", "trace", "crate", "react", "caret")


@pytest.fixture
def word_file(tmp_path):
    def write(name, lines):
        path = tmp_path / name
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return str(path)

    return write
