from __future__ import annotations

import argparse
import logging
from typing import Optional

from .config import MAX_SIZE, MIN_LINE_LENGTH, MIN_SIZE, GameConfig, Mark, resolve_config
from .console import ConsoleInput
from .errors import GameAborted, InvalidConfiguration
from .game import GameState, start_game
from .grid import Grid
from .players import AutomatedPlayer, HumanPlayer, Player
from .render import outcome_message, render_grid
from .strategies import STRATEGIES, make_strategy
from .wins import has_winning_line

EXIT_OK = 0
EXIT_USAGE = 2
EXIT_ABORTED = 130


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="ninarow", description="Generalized n-in-a-row grid game")
    sub = p.add_subparsers(dest="cmd")
    p.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")
    p.add_argument("--version", action="store_true", help="Print version and exit")
    p.add_argument(
        "--info",
        action="store_true",
        help="Print numpy version and the resolved game defaults, then exit",
    )
    p.add_argument(
        "--seed", type=int, default=None, help="Seed for --strategy random (the second seat uses seed+1)"
    )

    p_play = sub.add_parser("play", help="Play one game in the terminal")
    p_play.add_argument(
        "--size", type=int, default=None, help="Grid size, 3 -- 100 (default: $NINAROW_SIZE or 3)"
    )
    p_play.add_argument(
        "--line-length",
        type=int,
        default=None,
        help="Cells in a row needed to win, 3 -- size (default: $NINAROW_LINE_LENGTH or 3)",
    )
    p_play.add_argument(
        "--interactive-config", action="store_true", help="Ask for size and line length on the terminal"
    )
    p_play.add_argument("--first", choices=["human", "computer"], default="human")
    p_play.add_argument("--second", choices=["human", "computer"], default="computer")
    p_play.add_argument(
        "--ask-seats", action="store_true", help="Ask on the terminal whether each seat is human"
    )
    p_play.add_argument(
        "--strategy",
        choices=sorted(STRATEGIES),
        default="none",
        help="Strategy for computer seats (none: the computer never moves)",
    )

    p_chk = sub.add_parser(
        "check",
        help="Report the winner of a board (row-major digits, 0=empty,1=x,2=o)",
    )
    p_chk.add_argument("--board", help="Board string, e.g., 111020200 (omit with --stdin)")
    p_chk.add_argument("--line-length", type=int, default=3, help="Cells in a row needed to win")
    p_chk.add_argument(
        "--stdin", action="store_true", help="Read many boards from stdin and stream CSV output"
    )
    return p


def _print_info() -> None:
    import platform
    import sys

    import numpy as np

    print(f"python={sys.version.split()[0]} platform={platform.platform()} numpy={np.__version__}")
    print(f"size_range={MIN_SIZE}-{MAX_SIZE} min_line_length={MIN_LINE_LENGTH}")
    try:
        cfg = resolve_config()
    except InvalidConfiguration as e:
        print(f"defaults=<invalid: {e}>")
    else:
        print(f"default_size={cfg.size} default_line_length={cfg.line_length}")


def board_winner(grid: Grid, line_length: int) -> str:
    x = has_winning_line(grid, Mark.X, line_length)
    o = has_winning_line(grid, Mark.O, line_length)
    if x and o:
        return "both"
    if x:
        return Mark.X.symbol
    if o:
        return Mark.O.symbol
    return "none"


def _parse_board(raw: str, line_length: int) -> Grid:
    grid = Grid.deserialize(raw)
    # same bounds as a playable game
    GameConfig(size=grid.size, line_length=line_length)
    return grid


def _make_player(kind: str, console: ConsoleInput, strategy: str, seed: Optional[int]) -> Player:
    if kind == "human":
        return HumanPlayer(console.read_move, console.notify_rejected)
    return AutomatedPlayer(make_strategy(strategy, seed))


def _run_play(ns: argparse.Namespace) -> int:
    console = ConsoleInput()
    try:
        if ns.ask_seats:
            first = "human" if console.ask_yes_no("First is human?") else "computer"
            second = "human" if console.ask_yes_no("Second is human?") else "computer"
        else:
            first, second = ns.first, ns.second
        if ns.interactive_config:
            config = console.read_config()
        else:
            config = resolve_config(ns.size, ns.line_length)
    except InvalidConfiguration as e:
        logging.error("Invalid configuration: %s", e)
        return EXIT_USAGE
    except GameAborted:
        logging.error("Aborted before the game started")
        return EXIT_ABORTED

    # second seat gets its own seed so two random computers do not mirror
    second_seed = None if ns.seed is None else ns.seed + 1
    result = start_game(
        config,
        _make_player(first, console, ns.strategy, ns.seed),
        _make_player(second, console, ns.strategy, second_seed),
    )
    console.show(render_grid(result.grid))
    console.show(outcome_message(result.state))
    return EXIT_ABORTED if result.state is GameState.ABORTED else EXIT_OK


def _run_check(ns: argparse.Namespace) -> int:
    import sys as _sys

    if ns.line_length < MIN_LINE_LENGTH or ns.line_length > MAX_SIZE:
        logging.error("Invalid configuration: line length %d outside %d -- %d",
                      ns.line_length, MIN_LINE_LENGTH, MAX_SIZE)
        return EXIT_USAGE

    if ns.stdin:
        import csv as _csv

        w = _csv.writer(_sys.stdout)
        w.writerow(["board", "winner"])
        written = too_small = 0
        for line in _sys.stdin:
            raw = line.strip()
            if not raw:
                continue
            try:
                grid = Grid.deserialize(raw)
            except ValueError as e:
                logging.warning("Skipping malformed board %r: %s", raw, e)
                continue
            if grid.size < ns.line_length:
                logging.warning("Skipping %dx%d board %r: shorter than line length %d",
                                grid.size, grid.size, raw, ns.line_length)
                too_small += 1
                continue
            w.writerow([raw, board_winner(grid, ns.line_length)])
            written += 1
        if written == 0 and too_small:
            logging.error("Invalid configuration: line length %d exceeds every board size",
                          ns.line_length)
            return EXIT_USAGE
        return EXIT_OK

    raw = (ns.board or "").strip()
    try:
        grid = _parse_board(raw, ns.line_length)
    except InvalidConfiguration as e:
        logging.error("Invalid configuration: %s", e)
        return EXIT_USAGE
    except ValueError as e:
        logging.error("Invalid board string: %s", e)
        return EXIT_USAGE
    logging.info("size=%d line_length=%d winner=%s", grid.size, ns.line_length,
                 board_winner(grid, ns.line_length))
    return EXIT_OK


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    ns = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if getattr(ns, "verbose", False) else logging.INFO,
                        format="[%(levelname)s] %(message)s")

    if getattr(ns, "version", False):
        try:
            from importlib.metadata import version as _ver

            print(_ver("ninarow"))
        except Exception:
            print("unknown")
        return EXIT_OK
    if getattr(ns, "info", False):
        _print_info()
        return EXIT_OK

    if ns.cmd == "play":
        return _run_play(ns)
    if ns.cmd == "check":
        return _run_check(ns)

    parser.print_help()
    return EXIT_OK


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
