"""
Performance Benchmark
=====================

Measures game throughput on random token sequences.

Usage:
    python -m tools.benchmark_speed [--games N] [--lengths L ...]
"""

from __future__ import annotations

import argparse
import sys
import time
from typing import List
import numpy as np

from tokenboxes.core.config_loader import load_config
from tokenboxes.core.game import CoreGame, play


def random_sequences(
    num_games: int,
    length: int,
    max_weight: int = 100,
    seed: int = 42
) -> List[List[int]]:
    """Random non-negative integer token sequences."""
    rng = np.random.default_rng(seed)
    return [
        rng.integers(0, max_weight, size=length, endpoint=True).tolist()
        for _ in range(num_games)
    ]


def benchmark_play(
    num_games: int = 200,
    length: int = 64,
    seed: int = 42
) -> dict:
    """
    Benchmark the play() entry point on fresh games.

    Args:
        num_games: Number of games.
        length: Tokens per game.
        seed: Random seed for the sequences.

    Returns:
        Dict with timing results.
    """
    config = load_config()
    sequences = random_sequences(num_games, length, seed=seed)

    # Warmup
    for weights in sequences[:10]:
        play(weights, config=config)

    start = time.perf_counter()
    for weights in sequences:
        play(weights, config=config)
    elapsed = time.perf_counter() - start

    total_turns = num_games * length
    return {
        "mode": "play",
        "length": length,
        "num_games": num_games,
        "elapsed_seconds": elapsed,
        "games_per_second": num_games / elapsed,
        "turns_per_second": total_turns / elapsed,
    }


def benchmark_core_game(
    num_games: int = 200,
    length: int = 64,
    seed: int = 42
) -> dict:
    """
    Benchmark step-by-step play on a single CoreGame that is reset between games.

    Args:
        num_games: Number of games.
        length: Tokens per game.
        seed: Random seed for the sequences.

    Returns:
        Dict with timing results.
    """
    game = CoreGame(load_config())
    sequences = random_sequences(num_games, length, seed=seed)

    start = time.perf_counter()
    for weights in sequences:
        game.reset()
        for weight in weights:
            game.step(weight)
    elapsed = time.perf_counter() - start

    total_turns = num_games * length
    return {
        "mode": "core_game",
        "length": length,
        "num_games": num_games,
        "elapsed_seconds": elapsed,
        "games_per_second": num_games / elapsed,
        "turns_per_second": total_turns / elapsed,
    }


def run_all_benchmarks(lengths: List[int], num_games: int) -> list:
    """Run benchmarks for every sequence length."""
    results = []

    print("=" * 60)
    print("TOKEN BOXES PERFORMANCE BENCHMARK")
    print("=" * 60)
    print()

    for length in lengths:
        for bench in (benchmark_play, benchmark_core_game):
            result = bench(num_games=num_games, length=length)
            results.append(result)
            print(f"{result['mode']} (length={length}): "
                  f"{result['games_per_second']:.1f} games/s, "
                  f"{result['turns_per_second']:.1f} turns/s")

    print()
    print("=" * 60)
    print("SUMMARY")
    print("=" * 60)
    print(f"{'Mode':<12} {'Length':>8} {'Games/s':>12} {'Turns/s':>12}")
    print("-" * 48)

    for r in results:
        print(f"{r['mode']:<12} {r['length']:>8} "
              f"{r['games_per_second']:>12.1f} {r['turns_per_second']:>12.1f}")

    return results


def main():
    parser = argparse.ArgumentParser(description="Benchmark Token Boxes game throughput")
    parser.add_argument("--games", type=int, default=200, help="Games per benchmark")
    parser.add_argument("--lengths", type=int, nargs="+", default=[8, 64, 512],
                        help="Sequence lengths to test")
    parser.add_argument("--quick", action="store_true", help="Quick benchmark (fewer games)")

    args = parser.parse_args()

    num_games = 20 if args.quick else args.games

    run_all_benchmarks(lengths=args.lengths, num_games=num_games)

    return 0


if __name__ == "__main__":
    sys.exit(main())
