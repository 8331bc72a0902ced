#!/usr/bin/env python3
"""
Text generation loop and observed-frequency bookkeeping.

Plot data files hold one line per symbol:
  <symbol> <relative_frequency>
with three decimals; the reader accepts ',' or '.' as decimal separator.
"""
from __future__ import annotations

import math
from collections import Counter
from pathlib import Path
from typing import Dict, Iterable, List, Tuple

from config import MIN_TEXT_LENGTH
from sampler import WeightedSampler


# ---------- generation ----------

def generate_text(sampler: WeightedSampler, count: int, separator: str = "") -> str:
    """Draw `count` symbols and join them with `separator`."""
    if count < MIN_TEXT_LENGTH:
        raise ValueError(f"Text length must be at least {MIN_TEXT_LENGTH} symbols (got {count}).")
    return separator.join(sampler.draw_symbol() for _ in range(count))


def split_bigrams(text: str) -> List[str]:
    # trailing odd character (if any) is not a bigram
    return [text[i:i + 2] for i in range(0, len(text) - 1, 2)]


def split_words(text: str) -> List[str]:
    return text.split()


# ---------- tally ----------

def tally_symbols(symbols: Iterable[str]) -> Counter:
    return Counter(symbols)


def relative_frequencies(counts: Counter) -> Dict[str, float]:
    """count / total per symbol, ordered by symbol code points."""
    total = sum(counts.values())
    if total == 0:
        return {}
    return {s: counts[s] / total for s in sorted(counts)}


def write_plot_data(freqs: Dict[str, float], path: Path) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8", newline="\n") as f:
        for symbol, p in freqs.items():
            f.write(f"{symbol} {p:.3f}\n")
    return path


def read_plot_data(path: Path) -> List[Tuple[str, float]]:
    rows: List[Tuple[str, float]] = []
    text = Path(path).read_text(encoding="utf-8")
    for line_no, line in enumerate(text.splitlines(), 1):
        parts = line.split()
        if not parts:
            continue
        if len(parts) < 2:
            raise ValueError(f"{path}:{line_no}: expected '<symbol> <frequency>', got {line!r}")
        rows.append((parts[0], float(parts[1].replace(",", "."))))
    return rows


# ---------- entropy ----------

def shannon_entropy(probs: Iterable[float]) -> float:
    """Shannon entropy in bits per symbol; zero-probability symbols contribute 0."""
    H = 0.0
    for p in probs:
        if p > 0.0:
            H -= p * math.log2(p)
    return H
