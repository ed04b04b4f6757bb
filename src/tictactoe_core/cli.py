from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from typing import List, Optional, TextIO

from .config import load_settings
from .controller import GameController
from .engine import Mode
from .errors import MoveError
from .game_basics import (
    current_player,
    deserialize_board,
    evaluate_result,
    is_valid_state,
    render_board,
    serialize_board,
    winning_line,
)
from .opponent import select_move
from .tactics import blocking_moves, fork_moves, immediate_winning_moves


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="ttt", description="Tic-tac-toe CLI")
    sub = p.add_subparsers(dest="cmd")
    p.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")
    p.add_argument("--version", action="store_true", help="Print version and exit")
    p.add_argument(
        "--info",
        action="store_true",
        help="Print environment and dependency info and exit",
    )
    p.add_argument("--seed", type=int, default=None, help="Seed for the scripted opponent (overrides TTT_SEED)")

    p_play = sub.add_parser("play", help="Play in the terminal (cells 1-9, r=restart, s=reset score, q=quit)")
    p_play.add_argument(
        "--mode",
        choices=[m.value for m in Mode],
        default=Mode.HUMAN_VS_SCRIPTED.value,
        help="hvh: two humans, hvc: human X against the scripted O (default)",
    )
    p_play.add_argument(
        "--delay-ms",
        type=int,
        default=None,
        help="Delay before the scripted move (overrides TTT_OPPONENT_DELAY_MS)",
    )

    p_eval = sub.add_parser("evaluate", help="Show result and winning line for a board (9 digits, 0=empty,1=X,2=O)")
    p_eval.add_argument("--board", required=True, help="Board string, e.g., 110020000")

    p_sug = sub.add_parser("suggest", help="Show the scripted opponent's move for side-to-move")
    p_sug.add_argument("--board", required=True, help="Board string, e.g., 110020000")

    return p


def _print_info() -> None:
    import importlib.util
    import platform

    print(f"python={sys.version.split()[0]} platform={platform.platform()}")
    for pkg in ["numpy"]:
        spec = importlib.util.find_spec(pkg)
        if spec is None:
            print(f"{pkg}=<not installed>")
        else:
            mod = __import__(pkg)
            ver = getattr(mod, "__version__", "?")
            print(f"{pkg}={ver}")


def _parse_board(raw: str) -> Optional[List[int]]:
    try:
        b = deserialize_board(raw)
    except ValueError:
        logging.error("Invalid board string. Must be 9 chars of 0/1/2.")
        return None
    if not is_valid_state(b):
        logging.error("Board is not a valid reachable state.")
        return None
    return b


def _show(ctl: GameController, out: TextIO) -> None:
    print(render_board(ctl.board, ctl.winning_line), file=out)
    r = ctl.result
    if r.is_terminal:
        print(f"Result: {r}", file=out)
    else:
        print(f"Turn: {ctl.to_move.symbol}", file=out)
    s = ctl.score
    print(f"Score X={s.wins_x} O={s.wins_o} ties={s.ties}", file=out)


def play(ctl: GameController, inp: TextIO = sys.stdin, out: TextIO = sys.stdout) -> int:
    _show(ctl, out)
    for line in inp:
        cmd = line.strip().lower()
        if not cmd:
            continue
        if cmd == "q":
            break
        if cmd == "r":
            ctl.restart_board()
        elif cmd == "s":
            ctl.reset_score()
        elif cmd.isdigit() and 1 <= int(cmd) <= 9:
            try:
                ctl.apply_move(int(cmd) - 1)
            except MoveError as e:
                logging.error("%s", e)
                continue
            if ctl.pending_move is not None:
                cell = ctl.run_pending()
                if cell is not None:
                    print(f"O plays {cell + 1}", file=out)
        else:
            logging.error("Unknown command %r. Use 1-9, r, s or q.", cmd)
            continue
        _show(ctl, out)
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    ns = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if getattr(ns, "verbose", False) else logging.INFO,
                        format="[%(levelname)s] %(message)s")

    # Early exits
    if getattr(ns, "version", False):
        try:
            from importlib.metadata import version as _ver

            print(_ver("tictactoe-core"))
        except Exception:
            print("unknown")
        return 0
    if getattr(ns, "info", False):
        _print_info()
        return 0

    if ns.cmd == "evaluate":
        b = _parse_board(ns.board)
        if b is None:
            return 2
        res = evaluate_result(b)
        line = winning_line(b)
        logging.info(
            "board=%s result=%s winner=%s line=%s to_move=%s",
            serialize_board(b),
            res.status,
            res.winner.symbol if res.winner else "-",
            list(line) if line else None,
            "-" if res.is_terminal else current_player(b).symbol,
        )
        return 0

    if ns.cmd == "suggest":
        b = _parse_board(ns.board)
        if b is None:
            return 2
        if evaluate_result(b).is_terminal:
            logging.error("Board is already finished.")
            return 2
        import numpy as np

        p = current_player(b)
        move = select_move(b, p, np.random.default_rng(ns.seed))
        logging.info(
            "board=%s to_move=%s move=%d wins=%s blocks=%s forks=%s",
            serialize_board(b),
            p.symbol,
            move,
            immediate_winning_moves(b, p),
            blocking_moves(b, p),
            fork_moves(b, p),
        )
        return 0

    if ns.cmd == "play":
        try:
            settings = load_settings()
        except ValueError as e:
            logging.error("%s", e)
            return 2
        if ns.seed is not None:
            settings = replace(settings, seed=ns.seed)
        if ns.delay_ms is not None:
            if ns.delay_ms < 0:
                logging.error("--delay-ms must be >= 0, got %d", ns.delay_ms)
                return 2
            settings = replace(settings, opponent_delay_ms=ns.delay_ms)
        ctl = GameController(mode=Mode(ns.mode), settings=settings)
        return play(ctl)

    parser.print_help()
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
