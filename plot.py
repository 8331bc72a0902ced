#!/usr/bin/env python3
from __future__ import annotations

import random
from pathlib import Path
from typing import Optional

import matplotlib.pyplot as plt
import numpy as np

from config import PlotCfg
from sampler import WeightedSampler
from tally import read_plot_data


# ---------- style ----------
OBSERVED_COLOR = "lightgreen"
EXPECTED_COLOR = "darkred"
BAR_SPACING = 3.0   # distance between symbol groups on the x axis
BAR_OFFSET = 0.4    # half-gap between the observed and expected bar


def create_plot(sampler: WeightedSampler,
                plot_data_file: Path,
                plot_file: Path,
                cfg: Optional[PlotCfg] = None,
                title: str = "Observed vs expected symbol frequency",
                rng: Optional[random.Random] = None) -> Path:
    """
    Bar chart of observed frequencies (from plot_data_file) next to the
    table's expected weight for a random sample of symbols.
    """
    cfg = cfg or PlotCfg()
    rng = rng or random.Random()

    rows = read_plot_data(plot_data_file)
    if not rows:
        raise ValueError(f"No plot data in {plot_data_file}")
    rows = rng.sample(rows, min(cfg.sample_size, len(rows)))

    labels = [s for s, _ in rows]
    actual = [f for _, f in rows]
    expected = [sampler.weight_of(s) for s in labels]
    positions = np.arange(len(labels)) * BAR_SPACING

    fig, ax = plt.subplots(figsize=(cfg.width_px / cfg.dpi, cfg.height_px / cfg.dpi))
    ax.bar(positions - BAR_OFFSET, actual, width=0.8,
           color=OBSERVED_COLOR, label="Observed")
    ax.bar(positions + BAR_OFFSET, expected, width=0.8,
           color=EXPECTED_COLOR, label="Expected")

    ax.set_xticks(positions)
    ax.set_xticklabels(labels, rotation=90 if len(labels) > 40 else 0)
    ax.set_ylabel("Frequency", fontsize=14)
    ax.set_title(f"{title} ({len(labels)} symbols shown)", fontsize=14)
    ax.set_ylim(bottom=0)
    ax.grid(True, axis="y", linestyle="--", alpha=0.3)
    ax.legend(loc="center right")

    plot_file = Path(plot_file)
    plot_file.parent.mkdir(parents=True, exist_ok=True)
    fig.tight_layout()
    fig.savefig(plot_file, dpi=cfg.dpi)
    plt.close(fig)
    return plot_file
