#!/usr/bin/env python3
from __future__ import annotations

import argparse
import logging
import math
import statistics as stats
import time
from dataclasses import dataclass
from pathlib import Path
from typing import List, Tuple

from ttt_duel.arena import run_selfplay
from ttt_duel.board import Board, Mark
from ttt_duel.policy import Difficulty
from ttt_duel.solver import SearchStats, best_move
from ttt_duel.tracking import log_metrics, log_params, maybe_mlflow_run


def ci95(values: List[float]) -> Tuple[float, float]:
    if not values:
        return (float("nan"), float("nan"))
    m = stats.fmean(values)
    s = stats.pstdev(values) if len(values) > 1 else 0.0
    z = 1.96
    half = z * (s / math.sqrt(len(values)))
    return m, half


@dataclass
class Config:
    seeds: int = 10
    tracking: str = "none"  # or "mlflow"
    log_dir: Path = Path("runs")


def main() -> int:
    ap = argparse.ArgumentParser(description="Time the search and hard-vs-hard self-play")
    ap.add_argument("--seeds", type=int, default=Config.seeds)
    ap.add_argument("--tracking", choices=["none", "mlflow"], default=Config.tracking)
    ap.add_argument("--log-dir", type=Path, default=Config.log_dir)
    ns = ap.parse_args()
    cfg = Config(seeds=ns.seeds, tracking=ns.tracking, log_dir=ns.log_dir)
    logging.basicConfig(level=logging.INFO, format="[%(levelname)s] %(message)s")

    with maybe_mlflow_run(cfg.tracking == "mlflow", run_name="benchmarks", log_dir=cfg.log_dir) as tracked:
        search_times: List[float] = []
        selfplay_times: List[float] = []
        nodes = 0
        for s in range(cfg.seeds):
            counter = SearchStats()
            t0 = time.perf_counter()
            best_move(Board(), Mark.X, Mark.O, counter)
            t1 = time.perf_counter()
            search_times.append(t1 - t0)
            nodes = counter.nodes
            t2 = time.perf_counter()
            run_selfplay(Difficulty.HARD, Difficulty.HARD, games=1, seed=s)
            t3 = time.perf_counter()
            selfplay_times.append(t3 - t2)
        m_search, h_search = ci95(search_times)
        m_play, h_play = ci95(selfplay_times)
        metrics = {
            "empty_board_search_mean_s": m_search,
            "empty_board_search_ci95_half_s": h_search,
            "empty_board_nodes": float(nodes),
            "hard_selfplay_mean_s": m_play,
            "hard_selfplay_ci95_half_s": h_play,
        }
        if tracked:
            log_params({"seeds": cfg.seeds})
            log_metrics(metrics)
    print(
        f"best_move(empty): mean={m_search:.4f}s ± {h_search:.4f}s (95% CI), nodes={nodes}\n"
        f"hard-vs-hard game: mean={m_play:.4f}s ± {h_play:.4f}s (95% CI)"
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
