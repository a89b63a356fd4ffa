"""
Homework EF game: two fixed 5-vertex graphs.

Searches for a Duplicator strategy in the k-round game and prints it.

Usage:
  python3 homework_game.py                      # k=2, JSON output
  python3 homework_game.py --k 3                # Spoiler wins: prints null
  python3 homework_game.py --k 1 --move 1 c     # start from a fixed move
  python3 homework_game.py --text --draw out.png
"""
import argparse
import json
import logging
import time

from eftools import (
    draw_position,
    find_duplicator_strategy,
    format_strategy,
    make_symmetric_graph,
    strategy_to_dict,
)

G1 = make_symmetric_graph({
    1: [2, 3],
    2: [3, 4, 5],
    3: [4, 5],
    4: [5],
})

G2 = make_symmetric_graph({
    "a": ["b", "c"],
    "b": ["c", "d", "e"],
    "c": [],
    "d": ["e"],
})


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument('--k', type=int, default=2,
                        help='Number of rounds (default 2)')
    parser.add_argument('--move', nargs=2, action='append', default=[],
                        metavar=('G1', 'G2'),
                        help='Fixed initial move; may be repeated')
    parser.add_argument('--text', action='store_true',
                        help='Print an indented tree instead of JSON')
    parser.add_argument('--draw', metavar='PATH', default=None,
                        help='Save a drawing of the starting position')
    parser.add_argument('-v', '--verbose', action='store_true')
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    t0 = time.time()
    strategy = find_duplicator_strategy(args.k, G1, G2, args.move)
    elapsed = time.time() - t0

    if args.text:
        print(format_strategy(strategy))
    else:
        print(json.dumps(strategy_to_dict(strategy), indent=2))
    print(f"# k={args.k}  duplicator wins: {strategy is not None}  ({elapsed:.2f}s)")

    if args.draw:
        draw_position(G1, G2, args.move, save_path=args.draw)


if __name__ == '__main__':
    main()
