"""
Players
=======

A player owns a running score. On its turn it picks the lightest box and
lets it absorb the next token.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence

from tokenboxes.core.boxes import Box


@dataclass(frozen=True)
class TurnRecord:
    """Record of a single turn."""
    turn_index: int
    player: str
    box_index: int
    variant: str
    token_weight: float
    points: float
    player_score: float     # Player's running score after this turn

    def __repr__(self) -> str:
        return (
            f"TurnRecord(#{self.turn_index} {self.player} -> box {self.box_index} "
            f"({self.variant}), token={self.token_weight}, points={self.points})"
        )


def select_lightest_box(roster: Sequence[Box]) -> int:
    """
    Index of the box with the smallest current weight.

    Ties go to the leftmost box in roster order.

    Args:
        roster: Boxes in roster order.

    Returns:
        Index into roster.

    Raises:
        ValueError: If roster is empty.
    """
    if len(roster) == 0:
        raise ValueError("Cannot select a box from an empty roster")

    best = 0
    for i in range(1, len(roster)):
        # Strict comparison keeps the leftmost box on ties
        if roster[i] < roster[best]:
            best = i
    return best


class Player:
    """
    A game participant with a running score.

    The roster is not owned by the player; the game loop hands it over
    for the duration of a turn.
    """

    def __init__(self, name: str):
        """
        Initialize player.

        Args:
            name: Display name ("A" or "B" in the standard game).
        """
        self._name = name
        self._score: float = 0.0
        self._turns_taken: int = 0

    @property
    def name(self) -> str:
        return self._name

    @property
    def score(self) -> float:
        """Current total score."""
        return self._score

    @property
    def turns_taken(self) -> int:
        """Number of turns played so far."""
        return self._turns_taken

    def take_turn(
        self,
        weight: float,
        roster: List[Box],
        turn_index: int = 0
    ) -> TurnRecord:
        """
        Let the lightest box absorb a token and bank the resulting score.

        Args:
            weight: Token weight to absorb.
            roster: Shared box roster, mutated in place.
            turn_index: Global turn number, recorded for history.

        Returns:
            TurnRecord describing the move.
        """
        box_index = select_lightest_box(roster)
        box = roster[box_index]

        points = box.absorb(weight)
        self._score += points
        self._turns_taken += 1

        return TurnRecord(
            turn_index=turn_index,
            player=self._name,
            box_index=box_index,
            variant=box.variant.value,
            token_weight=weight,
            points=points,
            player_score=self._score
        )

    def reset(self) -> None:
        """Reset score to zero."""
        self._score = 0.0
        self._turns_taken = 0

    def __repr__(self) -> str:
        return f"Player({self._name}, score={self._score})"
