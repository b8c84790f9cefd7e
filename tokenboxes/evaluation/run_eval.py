"""
Evaluation Harness
==================

Plays every sequence in a sequence bank and summarizes the results.

Usage:
    python -m tokenboxes.evaluation.run_eval
    python -m tokenboxes.evaluation.run_eval --weights 1 1 2 3
    python -m tokenboxes.evaluation.run_eval --bank my_bank.json --output results.json
"""

from __future__ import annotations

import argparse
import json
import os
import sys
import time
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence

import numpy as np

from tokenboxes.core.config_loader import GameConfig, get_config
from tokenboxes.core.game import CoreGame


@dataclass
class EvalResult:
    """Result for a single sequence."""
    name: str
    weights: List[int]
    score_a: float
    score_b: float
    winner: Optional[str]
    turns: int
    elapsed_time: float


@dataclass
class EvalSummary:
    """Summary of evaluation across all sequences."""
    mean_score_a: float
    mean_score_b: float
    std_score_a: float
    std_score_b: float
    mean_margin: float          # Mean of (A - B)
    wins_a: int
    wins_b: int
    ties: int
    total_time: float
    results: List[EvalResult]


def load_sequence_bank(path: Optional[str] = None) -> Dict[str, List[int]]:
    """
    Load a sequence bank.

    Args:
        path: Path to sequence_bank.json. Uses default if None.

    Returns:
        Mapping of sequence name to token weights.

    Raises:
        ValueError: If the file does not hold a valid bank.
    """
    if path is None:
        path = os.path.join(os.path.dirname(__file__), "sequence_bank.json")

    with open(path, "r") as f:
        data = json.load(f)

    if not isinstance(data, dict) or not isinstance(data.get("sequences"), dict):
        raise ValueError(f"Sequence bank must have a 'sequences' mapping: {path}")

    bank: Dict[str, List[int]] = {}
    for name, weights in data["sequences"].items():
        if not isinstance(weights, list):
            raise ValueError(f"Sequence '{name}' must be a list, got {type(weights).__name__}")
        for w in weights:
            if isinstance(w, bool) or not isinstance(w, (int, float)):
                raise ValueError(f"Sequence '{name}' contains a non-numeric weight: {w!r}")
        bank[name] = list(weights)

    return bank


def evaluate_sequence(
    name: str,
    weights: Sequence[int],
    config: Optional[GameConfig] = None,
    verbose: bool = False
) -> EvalResult:
    """
    Play one sequence on a fresh game.

    Args:
        name: Sequence name.
        weights: Token weights.
        config: Game configuration. Uses default if None.
        verbose: If True, print the outcome.

    Returns:
        EvalResult for this sequence.
    """
    game = CoreGame(config)

    start_time = time.perf_counter()
    outcome = game.run(weights)
    elapsed = time.perf_counter() - start_time

    result = EvalResult(
        name=name,
        weights=list(weights),
        score_a=outcome.score_a,
        score_b=outcome.score_b,
        winner=outcome.winner,
        turns=outcome.num_turns,
        elapsed_time=elapsed
    )

    if verbose:
        winner = result.winner if result.winner is not None else "tie"
        print(f"  {name}: A={result.score_a:g}, B={result.score_b:g}, "
              f"turns={result.turns}, winner={winner}")

    return result


def evaluate_bank(
    bank: Optional[Dict[str, List[int]]] = None,
    config: Optional[GameConfig] = None,
    verbose: bool = True
) -> EvalSummary:
    """
    Evaluate every sequence in a bank.

    Args:
        bank: Mapping of name to weights. Uses sequence_bank.json if None.
        config: Game configuration. Uses default if None.
        verbose: If True, print progress.

    Returns:
        EvalSummary with aggregate statistics.
    """
    if bank is None:
        bank = load_sequence_bank()

    if verbose:
        print(f"Evaluating {len(bank)} sequences...")

    results: List[EvalResult] = []
    total_start = time.perf_counter()

    for name, weights in bank.items():
        results.append(evaluate_sequence(name, weights, config=config, verbose=verbose))

    total_time = time.perf_counter() - total_start

    scores_a = np.array([r.score_a for r in results], dtype=np.float64)
    scores_b = np.array([r.score_b for r in results], dtype=np.float64)
    names = (config if config is not None else get_config()).players.names

    if len(results) > 0:
        mean_a, mean_b = float(np.mean(scores_a)), float(np.mean(scores_b))
        std_a, std_b = float(np.std(scores_a)), float(np.std(scores_b))
        mean_margin = float(np.mean(scores_a - scores_b))
    else:
        mean_a = mean_b = std_a = std_b = mean_margin = 0.0

    summary = EvalSummary(
        mean_score_a=mean_a,
        mean_score_b=mean_b,
        std_score_a=std_a,
        std_score_b=std_b,
        mean_margin=mean_margin,
        wins_a=sum(1 for r in results if r.winner == names[0]),
        wins_b=sum(1 for r in results if r.winner == names[1]),
        ties=sum(1 for r in results if r.winner is None),
        total_time=total_time,
        results=results
    )

    if verbose:
        print()
        print("=" * 50)
        print("EVALUATION SUMMARY")
        print("=" * 50)
        print(f"Sequences evaluated: {len(results)}")
        print(f"Mean score A:        {summary.mean_score_a:.2f} (std {summary.std_score_a:.2f})")
        print(f"Mean score B:        {summary.mean_score_b:.2f} (std {summary.std_score_b:.2f})")
        print(f"Mean margin (A-B):   {summary.mean_margin:.2f}")
        print(f"Wins A / B / ties:   {summary.wins_a} / {summary.wins_b} / {summary.ties}")
        print(f"Total time:          {total_time:.4f}s")
        print("=" * 50)

    return summary


def save_results(summary: EvalSummary, output_path: str) -> None:
    """Save evaluation results to JSON."""
    data = {
        "timestamp": time.strftime("%Y-%m-%d %H:%M:%S"),
        "mean_score_a": summary.mean_score_a,
        "mean_score_b": summary.mean_score_b,
        "std_score_a": summary.std_score_a,
        "std_score_b": summary.std_score_b,
        "mean_margin": summary.mean_margin,
        "wins_a": summary.wins_a,
        "wins_b": summary.wins_b,
        "ties": summary.ties,
        "total_time": summary.total_time,
        "results": [
            {
                "name": r.name,
                "weights": r.weights,
                "score_a": r.score_a,
                "score_b": r.score_b,
                "winner": r.winner,
                "turns": r.turns,
                "elapsed_time": r.elapsed_time
            }
            for r in summary.results
        ]
    }

    with open(output_path, "w") as f:
        json.dump(data, f, indent=2)

    print(f"Results saved to {output_path}")


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Play Token Boxes sequences")
    parser.add_argument(
        "--weights",
        type=int,
        nargs="*",
        default=None,
        help="Play a single sequence of token weights instead of a bank"
    )
    parser.add_argument(
        "--bank",
        type=str,
        default=None,
        help="Path to sequence bank JSON (uses default if not specified)"
    )
    parser.add_argument(
        "--output",
        type=str,
        default=None,
        help="Path to save results JSON"
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Reduce output verbosity"
    )

    args = parser.parse_args(argv)

    if args.weights is not None:
        bank = {"cli": list(args.weights)}
    else:
        try:
            bank = load_sequence_bank(args.bank)
        except (OSError, ValueError) as e:
            print(f"Error loading sequence bank: {e}")
            return 1

    summary = evaluate_bank(bank, verbose=not args.quiet)

    if args.output:
        save_results(summary, args.output)

    return 0


if __name__ == "__main__":
    sys.exit(main())
