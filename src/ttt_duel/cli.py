from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Optional

from .arena import run_selfplay
from .board import Board, Mark
from .config import GameConfig
from .console import run_interactive
from .outcome import round_outcome
from .policy import Difficulty, choose_move
from .tactics import find_line_completion, fork_moves, immediate_winning_moves
from .tracking import log_metrics, log_params, maybe_mlflow_run

TIERS = ["easy", "medium", "hard"]


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="ttt-duel", description="Tic-tac-toe against the computer")
    sub = p.add_subparsers(dest="cmd")
    p.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")
    p.add_argument("--version", action="store_true", help="Print version and exit")
    p.add_argument(
        "--info",
        action="store_true",
        help="Print environment and dependency info and exit",
    )
    p.add_argument("--seed", type=int, default=None, help="Global seed for reproducibility")
    p.add_argument(
        "--deterministic",
        action="store_true",
        help="Enable deterministic mode (sets PYTHONHASHSEED, seeds random)",
    )

    # play: interactive game
    p_play = sub.add_parser("play", help="Play against the computer in the terminal")
    p_play.add_argument("--mark", choices=["X", "O"], default=None, help="Your mark (asked if omitted)")
    p_play.add_argument("--difficulty", choices=TIERS, default=None, help="AI tier (asked if omitted)")
    p_play.add_argument("--first", choices=["human", "ai"], default=None, help="Who starts the first round")
    col = p_play.add_mutually_exclusive_group()
    col.add_argument("--color", dest="color", action="store_true", default=None,
                     help="Force ANSI colours")
    col.add_argument("--no-color", dest="color", action="store_false", help="Disable ANSI colours")

    # move: ask the engine for one move
    p_move = sub.add_parser("move", help="Pick the AI move for a board (9 digits, 0=empty,1=X,2=O)")
    p_move.add_argument("--board", required=True, help="Board string, e.g., 100020000")
    p_move.add_argument("--ai", choices=["X", "O"], required=True, help="Mark the AI plays")
    p_move.add_argument("--difficulty", choices=TIERS, default="hard")

    # outcome: classify a board
    p_out = sub.add_parser("outcome", help="Report whether a board is ongoing, won or drawn")
    p_out.add_argument("--board", required=True, help="Board string, e.g., 111220000")

    # tactics: single-ply motifs
    p_tac = sub.add_parser("tactics", help="List winning, blocking and fork cells for a mark")
    p_tac.add_argument("--board", required=True, help="Board string, e.g., 110220000")
    p_tac.add_argument("--mark", choices=["X", "O"], required=True)

    # selfplay: tier against tier
    p_sp = sub.add_parser("selfplay", help="Play AI tiers against each other and summarise")
    p_sp.add_argument("--x", dest="x_tier", choices=TIERS, default="hard", help="Tier playing X")
    p_sp.add_argument("--o", dest="o_tier", choices=TIERS, default="hard", help="Tier playing O")
    p_sp.add_argument("--games", type=int, default=100)
    p_sp.add_argument(
        "--tracking",
        choices=["none", "mlflow"],
        default="none",
        help="Experiment tracking backend",
    )
    p_sp.add_argument(
        "--log-dir",
        type=Path,
        default=Path("runs"),
        help="Directory for tracking logs/artifacts (for mlflow local backend)",
    )

    return p


def _set_global_seed(seed: Optional[int]) -> None:
    if seed is None:
        return
    import random

    random.seed(seed)


def _set_deterministic_env(seed: Optional[int]) -> None:
    import os

    if seed is not None:
        os.environ.setdefault("PYTHONHASHSEED", str(seed))
    _set_global_seed(seed)


def _print_info() -> None:
    import importlib.util
    import platform
    import sys

    print(f"python={sys.version.split()[0]} platform={platform.platform()}")
    for pkg in ["numpy", "mlflow"]:
        spec = importlib.util.find_spec(pkg)
        if spec is None:
            print(f"{pkg}=<not installed>")
        else:
            mod = __import__(pkg)
            ver = getattr(mod, "__version__", "?")
            print(f"{pkg}={ver}")


def _parse_board(raw: str) -> Optional[Board]:
    try:
        return Board.from_string(raw)
    except ValueError as exc:
        logging.error("%s", exc)
        return None


def _cmd_play(ns: argparse.Namespace) -> int:
    try:
        config = GameConfig.from_env()
    except ValueError as exc:
        logging.error("Invalid environment setting: %s", exc)
        return 2
    config = config.merged(
        human_mark=Mark.parse(ns.mark) if ns.mark else None,
        difficulty=Difficulty.parse(ns.difficulty) if ns.difficulty else None,
        human_starts=(ns.first == "human") if ns.first else None,
        color=ns.color,
        seed=ns.seed,
    )
    try:
        tally = run_interactive(config)
    except (EOFError, KeyboardInterrupt):
        print()
        logging.info("Input closed, leaving the game")
        return 0
    logging.debug("final tally=%s", tally)
    return 0


def _cmd_move(ns: argparse.Namespace) -> int:
    board = _parse_board(ns.board)
    if board is None:
        return 2
    outcome = round_outcome(board)
    if outcome.is_over:
        logging.error("Round is already over (%s); no move to make.", outcome)
        return 2
    ai = Mark.parse(ns.ai)
    move = choose_move(board, ai, ai.opponent(), Difficulty.parse(ns.difficulty))
    logging.info("move=%d row=%d col=%d", move, move // 3, move % 3)
    return 0


def _cmd_outcome(ns: argparse.Namespace) -> int:
    board = _parse_board(ns.board)
    if board is None:
        return 2
    outcome = round_outcome(board)
    logging.info(
        "status=%s winner=%s line=%s",
        outcome.status.value,
        outcome.winner.symbol if outcome.winner else "-",
        list(outcome.line) if outcome.line else "-",
    )
    return 0


def _cmd_tactics(ns: argparse.Namespace) -> int:
    board = _parse_board(ns.board)
    if board is None:
        return 2
    mark = Mark.parse(ns.mark)
    logging.info(
        "mark=%s wins=%s blocks=%s forks=%s first_completion=%s",
        mark.symbol,
        immediate_winning_moves(board, mark),
        immediate_winning_moves(board, mark.opponent()),
        fork_moves(board, mark),
        find_line_completion(board, mark),
    )
    return 0


def _cmd_selfplay(ns: argparse.Namespace) -> int:
    if ns.games < 1:
        logging.error("--games must be at least 1: %s", ns.games)
        return 2
    x_tier = Difficulty.parse(ns.x_tier)
    o_tier = Difficulty.parse(ns.o_tier)
    with maybe_mlflow_run(ns.tracking == "mlflow", run_name="selfplay", log_dir=ns.log_dir) as tracked:
        summary = run_selfplay(x_tier, o_tier, ns.games, seed=ns.seed)
        if tracked:
            log_params({"x_tier": summary.x_tier, "o_tier": summary.o_tier,
                        "games": summary.games, "seed": ns.seed})
            log_metrics(summary.as_metrics())
    print(
        f"x={summary.x_tier} o={summary.o_tier} games={summary.games} "
        f"x_wins={summary.x_wins} o_wins={summary.o_wins} draws={summary.draws} "
        f"mean_length={summary.mean_length:.2f}"
    )
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    ns = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if getattr(ns, "verbose", False) else logging.INFO,
                        format="[%(levelname)s] %(message)s")

    # Early exits
    if getattr(ns, "version", False):
        from importlib.metadata import PackageNotFoundError, version as _ver

        try:
            print(_ver("ttt-duel"))
        except PackageNotFoundError:
            print("unknown")
        return 0
    if getattr(ns, "info", False):
        _print_info()
        return 0

    if getattr(ns, "deterministic", False):
        _set_deterministic_env(getattr(ns, "seed", None))
    else:
        _set_global_seed(getattr(ns, "seed", None))

    handlers = {
        "play": _cmd_play,
        "move": _cmd_move,
        "outcome": _cmd_outcome,
        "tactics": _cmd_tactics,
        "selfplay": _cmd_selfplay,
    }
    handler = handlers.get(ns.cmd)
    if handler is None:
        parser.print_help()
        return 0
    return handler(ns)


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
