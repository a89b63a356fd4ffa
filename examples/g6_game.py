"""
EF game on two graph6 strings.

Usage:
  python3 g6_game.py "EEj_" "EQjO" --max-k 3
"""
import argparse

from eftools import find_duplicator_strategy, g6_to_graph, strategy_depth


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument('g6A')
    parser.add_argument('g6B')
    parser.add_argument('--max-k', type=int, default=3)
    args = parser.parse_args()

    GA = g6_to_graph(args.g6A)
    GB = g6_to_graph(args.g6B)
    # graph6 labels both graphs 0..n-1; prefix B's so the vertex sets are disjoint
    GB = {f"b{v}": [f"b{w}" for w in sorted(ns)] for v, ns in GB.items()}

    for k in range(args.max_k + 1):
        strategy = find_duplicator_strategy(k, GA, GB)
        if strategy is None:
            print(f"k={k}: Spoiler wins")
            break
        print(f"k={k}: Duplicator wins (strategy depth {strategy_depth(strategy)}, "
              f"{len(strategy)} top-level entries)")
    else:
        print(f"Duplicator survives every game up to k={args.max_k}")


if __name__ == '__main__':
    main()
