"""
Game Rules
==========

Turn order and winner decision.
"""

from __future__ import annotations

from typing import Optional, Sequence


PLAYER_NAMES = ("A", "B")


def player_index_for_turn(turn_index: int, num_players: int = 2) -> int:
    """
    Index of the player who moves on a given turn.

    Players alternate strictly; player 0 (A) takes every even zero-based turn.
    """
    return turn_index % num_players


def decide_winner(
    score_a: float,
    score_b: float,
    names: Sequence[str] = PLAYER_NAMES
) -> Optional[str]:
    """
    Name of the player with the strictly higher score.

    Args:
        score_a: Final score of the first player.
        score_b: Final score of the second player.
        names: Player names in turn order.

    Returns:
        Winner's name, or None on a tie.
    """
    if score_a > score_b:
        return names[0]
    if score_b > score_a:
        return names[1]
    return None
