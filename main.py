from __future__ import annotations

import argparse
import json
import platform
import random
import sys
import time
from pathlib import Path
from typing import Optional

import yaml

from config import Config
from plot import create_plot
from sampler import BigramGenerator, SamplerError, WeightedSampler, WordGenerator
from tally import (generate_text, relative_frequencies, shannon_entropy,
                   split_bigrams, split_words, tally_symbols, write_plot_data)

# kind -> (generator class, output stem, separator, splitter, chart title)
KINDS = {
    "bigram": (BigramGenerator, "gen-1", "", split_bigrams, "Observed vs expected bigram frequency"),
    "word": (WordGenerator, "gen-2", " ", split_words, "Observed vs expected word frequency"),
}


def write_meta(meta_path: Path, meta: dict) -> None:
    meta_path.parent.mkdir(parents=True, exist_ok=True)
    try:
        old = json.loads(meta_path.read_text(encoding="utf-8")) if meta_path.exists() else {}
    except json.JSONDecodeError:
        old = {}
    old.update(meta)
    meta_path.write_text(json.dumps(old, indent=2, ensure_ascii=False), encoding="utf-8")


def run_kind(kind: str, cfg: Config, count: int, rng: random.Random) -> dict:
    gen_cls, stem, separator, splitter, title = KINDS[kind]
    table = cfg.paths.table_for(kind)

    sampler: WeightedSampler = gen_cls(table, rng=rng)
    print(f"[{kind}] Loaded {len(sampler)} entries from {table} (total weight {sampler.total_weight})")

    start_time = time.time()
    text = generate_text(sampler, count, separator)
    out_txt = cfg.paths.output_path_for(f"{stem}.txt")
    out_txt.write_text(text, encoding="utf-8")

    freqs = relative_frequencies(tally_symbols(splitter(text)))
    plot_data = write_plot_data(freqs, cfg.paths.output_path_for(f"{stem}__plot_data.txt"))
    plot_png = create_plot(sampler, plot_data, cfg.paths.output_path_for(f"{stem}.png"),
                           cfg.plot, title=title, rng=rng)

    H_expected = shannon_entropy(sampler.probabilities().values())
    H_observed = shannon_entropy(freqs.values())
    elapsed = time.time() - start_time
    print(f"  Done in {elapsed:.1f}s | symbols={count} distinct={len(freqs)} "
          f"H_expected={H_expected:.3f} H_observed={H_observed:.3f} bits/symbol")
    print(f"  Text: {out_txt} | Plot: {plot_png}")

    return {
        "table": str(table),
        "entries": len(sampler),
        "total_weight": sampler.total_weight,
        "symbols_drawn": count,
        "distinct_observed": len(freqs),
        "entropy_expected_bits": H_expected,
        "entropy_observed_bits": H_observed,
        "text_file": str(out_txt),
        "plot_data_file": str(plot_data),
        "plot_file": str(plot_png),
    }


def main(argv: Optional[list[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Generate text from weighted bigram/word tables and plot observed vs expected frequencies")
    ap.add_argument("--config", default="conf/config.yaml", help="YAML config (default: conf/config.yaml)")
    ap.add_argument("--kind", choices=["bigram", "word", "both"], default="both")
    ap.add_argument("--count", type=int, default=None, help="Symbols to draw (overrides config)")
    ap.add_argument("--seed", type=int, default=None, help="RNG seed (overrides config)")
    args = ap.parse_args(argv)

    try:
        cfg = Config.load(args.config) if Path(args.config).exists() else Config()
    except (ValueError, OSError, yaml.YAMLError) as e:
        print(f"[config] ERROR in {args.config}: {e}")
        return 1

    seed = args.seed if args.seed is not None else cfg.generation.seed
    rng = random.Random(seed)
    kinds = ["bigram", "word"] if args.kind == "both" else [args.kind]

    results = {}
    errors = {}
    for kind in kinds:
        count = args.count if args.count is not None else cfg.generation.count_for(kind)
        try:
            results[kind] = run_kind(kind, cfg, count, rng)
        except (SamplerError, ValueError) as e:
            print(f"[{kind}] ERROR: {e}")
            errors[kind] = str(e)

    if not results:
        return 1

    meta_path = cfg.paths.output_path_for("Results.meta.json")
    write_meta(meta_path, {
        "timestamp": time.time(),
        "python_version": platform.python_version(),
        "platform": platform.platform(),
        "seed": seed,
        "errors": errors,
        **results,
    })
    print(f"Meta: {meta_path}")
    return 1 if errors else 0


if __name__ == "__main__":
    sys.exit(main())
