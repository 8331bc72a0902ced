#!/usr/bin/env python3
"""
Weighted symbol samplers backed by plain-text frequency tables.

Two table formats are supported:

  bigrams:  <index> <bigram> <integerWeight>
  words:    <index> <word> <word> <word> <decimalProbability>

Drawing walks the table in file order over integer cumulative weights, so each
entry is chosen with probability exactly weight / total_weight.
"""
from __future__ import annotations

import random
import re
from dataclasses import dataclass
from decimal import Decimal
from pathlib import Path
from typing import Dict, List, Optional, Tuple


# ---------- errors ----------

class SamplerError(Exception):
    """Base class for every table / sampler failure."""


class SourceNotFound(SamplerError, FileNotFoundError):
    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"frequency table not found: {path}")


class MalformedRecord(SamplerError, ValueError):
    def __init__(self, path: Path, line_no: int, line: str, reason: str):
        self.path = path
        self.line_no = line_no
        self.line = line
        super().__init__(f"{path}:{line_no}: {reason}: {line!r}")


class ZeroTotalWeight(SamplerError, ValueError):
    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"total weight of {path} is zero; nothing to sample")


class SymbolNotFound(SamplerError, KeyError):
    def __init__(self, symbol: str):
        self.symbol = symbol
        super().__init__(symbol)

    def __str__(self) -> str:
        return f"symbol not in table: {self.symbol!r}"


# ---------- data model ----------

@dataclass(frozen=True)
class Entry:
    symbol: str
    weight: int


# ---------- weight parsers ----------

_COUNT = re.compile(r"[+-]?[0-9]+")


def parse_count(field: str) -> int:
    """Base-10 integer count (ASCII digits only), as used by bigram tables."""
    if not _COUNT.fullmatch(field):
        raise ValueError(f"not a base-10 integer: {field}")
    return int(field)


def parse_scaled_probability(field: str) -> int:
    """
    Decimal probability ('0.5' or '0,5') scaled by 10 and truncated.
    Exact decimal arithmetic keeps 0.3 -> 3 instead of drifting through binary floats.
    """
    value = Decimal(field.replace(",", "."))
    if not value.is_finite():
        raise ValueError(f"not a finite number: {field}")
    if not (0 <= value <= 1):
        raise ValueError(f"probability outside [0, 1]: {field}")
    return int(value * 10)


# ---------- sampler ----------

class WeightedSampler:
    """
    Loads (symbol, weight) pairs from a whitespace-delimited table and draws
    symbols proportionally to their weight.

    Subclasses choose which column holds the weight and how it is parsed.
    """

    symbol_field = 1
    weight_field = 2

    def __init__(self, path, rng: Optional[random.Random] = None):
        self.path = Path(path)
        if not self.path.is_file():
            raise SourceNotFound(self.path)

        self._entries: Tuple[Entry, ...] = tuple(self._load(self.path))
        self._total_weight = sum(e.weight for e in self._entries)
        if self._total_weight == 0:
            raise ZeroTotalWeight(self.path)

        # first occurrence wins for lookups
        self._first: Dict[str, Entry] = {}
        for e in self._entries:
            self._first.setdefault(e.symbol, e)

        self._rng = rng if rng is not None else random.Random()

    # ---- parsing ----
    @staticmethod
    def parse_weight(field: str) -> int:
        return parse_count(field)

    @staticmethod
    def validate_symbol(symbol: str) -> Optional[str]:
        """Reason the symbol is unacceptable, or None."""
        return None

    def _load(self, path: Path) -> List[Entry]:
        try:
            text = path.read_text(encoding="utf-8-sig")
        except UnicodeDecodeError as e:
            raise MalformedRecord(path, 0, "", f"not valid UTF-8 ({e.reason} at byte {e.start})") from e
        needed = max(self.symbol_field, self.weight_field) + 1
        entries: List[Entry] = []
        for line_no, line in enumerate(text.splitlines(), 1):
            parts = line.split()
            if not parts:
                continue
            if len(parts) < needed:
                raise MalformedRecord(path, line_no, line,
                                      f"expected at least {needed} fields, got {len(parts)}")
            try:
                weight = self.parse_weight(parts[self.weight_field])
            except (ValueError, ArithmeticError):
                raise MalformedRecord(path, line_no, line,
                                      f"invalid weight {parts[self.weight_field]!r}") from None
            if weight < 0:
                raise MalformedRecord(path, line_no, line, "negative weight")
            symbol = parts[self.symbol_field]
            reason = self.validate_symbol(symbol)
            if reason:
                raise MalformedRecord(path, line_no, line, reason)
            entries.append(Entry(symbol, weight))
        return entries

    # ---- queries ----
    @property
    def entries(self) -> Tuple[Entry, ...]:
        return self._entries

    @property
    def total_weight(self) -> int:
        return self._total_weight

    @property
    def symbols(self) -> List[str]:
        return list(self._first)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, symbol) -> bool:
        return symbol in self._first

    def draw_symbol(self) -> str:
        target = self._rng.randrange(self._total_weight)
        cumulative = 0
        for entry in self._entries:
            cumulative += entry.weight
            if target < cumulative:
                return entry.symbol
        return ""

    def weight_of(self, symbol: str) -> float:
        """Normalized weight (probability) of the first entry with this symbol."""
        entry = self._first.get(symbol)
        if entry is None:
            raise SymbolNotFound(symbol)
        return entry.weight / self._total_weight

    def probabilities(self) -> Dict[str, float]:
        return {s: self.weight_of(s) for s in self._first}

    def __repr__(self) -> str:
        return (f"{type(self).__name__}(path={str(self.path)!r}, "
                f"entries={len(self._entries)}, total_weight={self._total_weight})")


class BigramGenerator(WeightedSampler):
    """Two-character symbols with integer counts in the third column."""

    symbol_field = 1
    weight_field = 2

    @staticmethod
    def validate_symbol(symbol: str) -> Optional[str]:
        if len(symbol) != 2:
            return f"bigram must be 2 characters, got {len(symbol)}"
        return None


class WordGenerator(WeightedSampler):
    """Whole words; the fifth column is a probability with one decimal place."""

    symbol_field = 1
    weight_field = 4

    @staticmethod
    def parse_weight(field: str) -> int:
        return parse_scaled_probability(field)
