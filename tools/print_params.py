#!/usr/bin/env python3
"""
Evaluation Parameter Inspector

Loads a profile, optionally applies a rating target, and prints the
tunable slots followed by a summary of the derived tables.

Usage:
    python tools/print_params.py [--profile default] [--elo 1400] [--tables] [--verbose]
"""

import sys
import argparse
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

import chess

from chess_params import EngineParams
from chess_params.profiles import PROFILES
from chess_params.utils import setup_logger


def print_pst(params: EngineParams, piece_type: chess.PieceType, endgame: bool):
    """Print White's piece-square table for one piece, rank 8 first."""
    tables = params.tables.eg_pst if endgame else params.tables.mg_pst
    table = tables[chess.WHITE]
    phase = "EG" if endgame else "MG"

    print(f"\n{chess.piece_name(piece_type).capitalize()} {phase}:")
    for rank in range(7, -1, -1):
        row = [table[piece_type, chess.square(file, rank)] for file in range(8)]
        print("  " + " ".join(f"{v:5d}" for v in row))


def print_tables(params: EngineParams):
    """Print a summary of every derived table."""
    tables = params.tables

    print("=" * 80)
    print("DERIVED TABLES")
    print("=" * 80)

    for piece_type in chess.PIECE_TYPES:
        print_pst(params, piece_type, endgame=False)
        print_pst(params, piece_type, endgame=True)

    print("\nMobility (MG / EG):")
    for piece_type, curve in tables.mobility_mg.items():
        name = chess.piece_name(piece_type)
        print(f"  {name:<7} {list(curve)}")
        print(f"  {'':<7} {list(tables.mobility_eg[piece_type])}")

    print(f"\nKnight pawn adjustment: {list(tables.knight_pawn_adj)}")
    print(f"Rook pawn adjustment:   {list(tables.rook_pawn_adj)}")

    print("\nImbalance:")
    for row in tables.imbalance:
        print("  " + " ".join(f"{v:5d}" for v in row))

    print(f"\nBackward pawn (a-h):    {list(tables.backward_mg)}")
    print(f"Passed pawn MG (white): {list(tables.passed_mg[chess.WHITE])}")
    print(f"Passed pawn EG (white): {list(tables.passed_eg[chess.WHITE])}")

    danger = tables.danger
    samples = ", ".join(f"{i}:{danger[i]}" for i in (10, 50, 100, 150, 200, 300, 510))
    print(f"King danger: {samples}")
    print("=" * 80)


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Inspect evaluation parameters and derived tables"
    )
    parser.add_argument(
        "--profile",
        choices=sorted(PROFILES),
        default="default",
        help="Parameter profile to load (default: default)",
    )
    parser.add_argument(
        "--elo",
        type=int,
        default=None,
        help="Enable weakening and apply this rating target",
    )
    parser.add_argument(
        "--tables",
        action="store_true",
        help="Also print the derived tables",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log at DEBUG level",
    )

    args = parser.parse_args()
    setup_logger(debug=args.verbose)

    params = EngineParams.from_profile(args.profile)

    if args.elo is not None:
        params.settings.weakening = True
        params.set_speed(args.elo)
        settings = params.settings
        print(f"Elo {args.elo}: nps_limit={settings.nps_limit}, "
              f"eval_blur={settings.eval_blur}, book_depth={settings.book_depth}")

    n_tunable = len(params.store.tunable_values())
    print(f"Profile '{args.profile}': {n_tunable} tunable parameters")
    params.print_tunable_values()

    if args.tables:
        print_tables(params)

    return 0


if __name__ == "__main__":
    sys.exit(main())
