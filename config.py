#!/usr/bin/env python3
from __future__ import annotations
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Any, Dict
import yaml

MIN_TEXT_LENGTH = 1000

@dataclass
class Paths:
    bigrams_file: str = "data/bigrams.txt"
    words_file: str = "data/words.txt"
    output_dir: str = "./results"

    def _ensure_dir(self) -> Path:
        outdir = Path(self.output_dir)
        outdir.mkdir(parents=True, exist_ok=True)
        return outdir

    def output_path_for(self, name: str) -> Path:
        return self._ensure_dir() / name

    def table_for(self, kind: str) -> Path:
        if kind == "bigram":
            return Path(self.bigrams_file)
        if kind == "word":
            return Path(self.words_file)
        raise ValueError(f"unknown generator kind: {kind}")

@dataclass
class GenerationCfg:
    bigram_count: int = 1000      # symbols drawn, >= MIN_TEXT_LENGTH
    word_count: int = 1000
    seed: Optional[int] = None    # None -> fresh entropy each run

    def count_for(self, kind: str) -> int:
        return self.bigram_count if kind == "bigram" else self.word_count

@dataclass
class PlotCfg:
    sample_size: int = 80
    width_px: int = 1800
    height_px: int = 700
    dpi: int = 100

@dataclass
class Config:
    paths: Paths = field(default_factory=Paths)
    generation: GenerationCfg = field(default_factory=GenerationCfg)
    plot: PlotCfg = field(default_factory=PlotCfg)

    # ---- loading & validation ----
    @staticmethod
    def load(path: str | Path) -> "Config":
        data = yaml.safe_load(Path(path).read_text(encoding="utf-8"))
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ValueError("Top-level YAML must be a mapping/object.")
        return Config.from_dict(data)

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> "Config":
        # apply defaults and coerce to dataclasses
        paths = Config._parse_paths(data.get("paths") or {})
        generation = Config._parse_generation(data.get("generation") or {})
        plot = Config._parse_plot(data.get("plot") or {})
        cfg = Config(paths=paths, generation=generation, plot=plot)
        cfg._validate()
        return cfg

    @staticmethod
    def _parse_paths(d: Dict[str, Any]) -> Paths:
        return Paths(
            bigrams_file=str(d.get("bigrams_file", "data/bigrams.txt")),
            words_file=str(d.get("words_file", "data/words.txt")),
            output_dir=str(d.get("output_dir", "./results")),
        )

    @staticmethod
    def _parse_generation(d: Dict[str, Any]) -> GenerationCfg:
        seed = d.get("seed", None)
        return GenerationCfg(
            bigram_count=int(d.get("bigram_count", 1000)),
            word_count=int(d.get("word_count", 1000)),
            seed=int(seed) if seed is not None else None,
        )

    @staticmethod
    def _parse_plot(d: Dict[str, Any]) -> PlotCfg:
        return PlotCfg(
            sample_size=int(d.get("sample_size", 80)),
            width_px=int(d.get("width_px", 1800)),
            height_px=int(d.get("height_px", 700)),
            dpi=int(d.get("dpi", 100)),
        )

    def _validate(self) -> None:
        if self.generation.bigram_count < MIN_TEXT_LENGTH:
            raise ValueError(f"generation.bigram_count must be >= {MIN_TEXT_LENGTH}.")
        if self.generation.word_count < MIN_TEXT_LENGTH:
            raise ValueError(f"generation.word_count must be >= {MIN_TEXT_LENGTH}.")
        if self.plot.sample_size < 1:
            raise ValueError("plot.sample_size must be >= 1.")
        if self.plot.width_px < 1 or self.plot.height_px < 1:
            raise ValueError("plot.width_px and plot.height_px must be >= 1.")
        if self.plot.dpi < 1:
            raise ValueError("plot.dpi must be >= 1.")
