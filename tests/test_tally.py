# tests/test_tally.py
"""Tests for the generation loop, symbol tally and plot data files."""

import math
import random
from collections import Counter

import pytest

from sampler import BigramGenerator, WordGenerator
from tally import (
    generate_text,
    read_plot_data,
    relative_frequencies,
    shannon_entropy,
    split_bigrams,
    split_words,
    tally_symbols,
    write_plot_data,
)


def test_generate_bigram_text_length(bigrams_file):
    gen = BigramGenerator(bigrams_file)

    text = generate_text(gen, 1000)

    assert len(text) == 2000


def test_generate_word_text(words_file):
    gen = WordGenerator(words_file, rng=random.Random(3))

    words = split_words(generate_text(gen, 1000, " "))

    assert len(words) == 1000
    assert set(words) <= {"€блоко", "банан", "апельсин"}


def test_generate_text_minimum_length(bigrams_file):
    gen = BigramGenerator(bigrams_file)

    with pytest.raises(ValueError):
        generate_text(gen, 999)


def test_split_bigrams():
    assert split_bigrams("аабвг") == ["аа", "бв"]
    assert split_bigrams("") == []


def test_tally_roundtrip_of_generated_text(bigrams_file):
    gen = BigramGenerator(bigrams_file, rng=random.Random(11))

    counts = tally_symbols(split_bigrams(generate_text(gen, 1000)))

    assert sum(counts.values()) == 1000
    assert set(counts) <= {"аа", "аб", "ав", "аг"}


def test_relative_frequencies_sorted_and_normalized():
    freqs = relative_frequencies(Counter({"аб": 3, "аа": 1}))

    assert list(freqs) == ["аа", "аб"]
    assert freqs == {"аа": 0.25, "аб": 0.75}


def test_relative_frequencies_empty():
    assert relative_frequencies(Counter()) == {}


def test_write_plot_data_format(tmp_path):
    path = write_plot_data({"аа": 0.25, "аб": 0.75}, tmp_path / "out" / "plot.txt")

    assert path.read_text(encoding="utf-8") == "аа 0.250\nаб 0.750\n"


def test_read_plot_data_accepts_comma_and_tabs(tmp_path):
    path = tmp_path / "plot.txt"
    path.write_text("аа 0,102\nаб\t0.398\n\n", encoding="utf-8")

    assert read_plot_data(path) == [("аа", 0.102), ("аб", 0.398)]


def test_read_plot_data_rejects_short_line(tmp_path):
    path = tmp_path / "plot.txt"
    path.write_text("аа\n", encoding="utf-8")

    with pytest.raises(ValueError):
        read_plot_data(path)


def test_shannon_entropy():
    assert shannon_entropy([0.5, 0.5]) == 1.0
    assert shannon_entropy([1.0, 0.0]) == 0.0
    assert shannon_entropy([0.25] * 4) == pytest.approx(2.0)


def test_expected_entropy_of_word_table(words_file):
    gen = WordGenerator(words_file)
    probs = [0.5, 0.3, 0.2]

    expected = -sum(p * math.log2(p) for p in probs)

    assert shannon_entropy(gen.probabilities().values()) == pytest.approx(expected)
