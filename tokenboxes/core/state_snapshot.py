"""
State Snapshot
==============

Packs the roster and player scores into numpy arrays for inspection,
reporting and tests.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Sequence, Tuple

import numpy as np

from tokenboxes.core.boxes import Box
from tokenboxes.core.player import Player, select_lightest_box


@dataclass
class GameSnapshot:
    """Game state between turns."""
    turn_index: int                   # Number of turns already played
    box_variants: Tuple[str, ...]
    box_weights: np.ndarray           # (num_boxes,) float64
    box_absorb_counts: np.ndarray     # (num_boxes,) int32
    scores: Tuple[float, ...]         # In player order
    lightest_box_index: int           # Box the next player would pick

    def to_dict(self) -> Dict[str, Any]:
        """Convert to plain Python types (JSON friendly)."""
        return {
            "turn_index": self.turn_index,
            "box_variants": list(self.box_variants),
            "box_weights": [float(w) for w in self.box_weights],
            "box_absorb_counts": [int(c) for c in self.box_absorb_counts],
            "scores": list(self.scores),
            "lightest_box_index": self.lightest_box_index,
        }


class SnapshotBuilder:
    """Builds GameSnapshot objects from live game objects."""

    def build(
        self,
        roster: Sequence[Box],
        players: Sequence[Player],
        turn_index: int
    ) -> GameSnapshot:
        """
        Build a snapshot.

        Args:
            roster: Boxes in roster order.
            players: Players in turn order.
            turn_index: Number of turns already played.

        Returns:
            GameSnapshot copy of the current state.
        """
        return GameSnapshot(
            turn_index=turn_index,
            box_variants=tuple(box.variant.value for box in roster),
            box_weights=np.array([box.weight for box in roster], dtype=np.float64),
            box_absorb_counts=np.array([box.absorb_count for box in roster], dtype=np.int32),
            scores=tuple(p.score for p in players),
            lightest_box_index=select_lightest_box(roster)
        )
