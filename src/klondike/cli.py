"""
Command-line interface for dealing and inspecting Klondike tableaus.

Usage examples:

    python -m klondike.cli deal --seed 7
    python -m klondike.cli deal --seed 7 --reveal
    python -m klondike.cli moves --seed 7
"""
from __future__ import annotations

import argparse
import random
from typing import Optional

from .cards import Deck
from .moves import legal_moves
from .piles import TableauPile
from .tableau import Tableau


def _add_seed_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for the shuffle (omit for a random deal).",
    )


def _add_deal_parser(subparsers: argparse._SubParsersAction) -> None:
    parser = subparsers.add_parser(
        "deal",
        help="Deal a tableau and print its seven piles.",
    )
    _add_seed_argument(parser)
    parser.add_argument(
        "--reveal",
        action="store_true",
        help="Show face-down cards instead of '##'.",
    )
    parser.set_defaults(func=_cmd_deal)


def _add_moves_parser(subparsers: argparse._SubParsersAction) -> None:
    parser = subparsers.add_parser(
        "moves",
        help="Deal a tableau and list the legal pile-to-pile moves.",
    )
    _add_seed_argument(parser)
    parser.set_defaults(func=_cmd_moves)


def _deal(seed: Optional[int]) -> Tableau:
    tableau = Tableau()
    tableau.initialize(Deck(rng=random.Random(seed)))
    return tableau


def _cmd_deal(args: argparse.Namespace) -> None:
    tableau = _deal(args.seed)
    if not args.reveal:
        print(tableau, flush=True)
        return
    for pile in TableauPile:
        cells = [
            str(card) if tableau.is_visible(card) else f"({card})"
            for card in tableau.get_stack(pile)
        ]
        print(f"{pile + 1}: " + " ".join(cells), flush=True)


def _cmd_moves(args: argparse.Namespace) -> None:
    tableau = _deal(args.seed)
    print(tableau, flush=True)
    moves = legal_moves(tableau)
    if not moves:
        print("No legal tableau moves.")
        return
    print(f"{len(moves)} legal move(s):")
    for move in moves:
        print(f"  {move}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="klondike", description="Klondike tableau CLI.")
    subparsers = parser.add_subparsers(dest="command", required=True)
    _add_deal_parser(subparsers)
    _add_moves_parser(subparsers)
    return parser


def main(argv: Optional[list[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    if hasattr(args, "func"):
        args.func(args)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
