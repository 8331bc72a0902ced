# tests/conftest.py
import matplotlib

matplotlib.use("Agg")

import pytest


BIGRAMS = (
    "1 аа 1\n"
    "2 аб 2\n"
    "3 ав 3\n"
    "4 аг 4"
)

WORDS = (
    "1 €блоко €блоко €блоко 0,5\n"
    "2 банан банан банан 0,3\n"
    "3 апельсин апельсин апельсин 0,2"
)


@pytest.fixture
def bigrams_file(tmp_path):
    path = tmp_path / "mock_bigrams.txt"
    path.write_text(BIGRAMS, encoding="utf-8")
    return path


@pytest.fixture
def words_file(tmp_path):
    path = tmp_path / "test_words.txt"
    path.write_text(WORDS, encoding="utf-8")
    return path


@pytest.fixture
def write_table(tmp_path):
    def _write(content, name="table.txt"):
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path
    return _write
