"""
Boxes
=====

Stateful scoring units. A box absorbs token weights, adds them to its own
total weight and reports a score after every absorption.

Both variants share one class; the variant tag selects the scoring rule.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from tokenboxes.core.config_loader import GameConfig, get_config
from tokenboxes.core.scoring import DEFAULT_GREEN_WINDOW, blue_score, green_score


class BoxVariant(Enum):
    """Box flavours, each with its own scoring rule."""
    GREEN = "green"
    BLUE = "blue"


@dataclass(eq=False)
class Box:
    """
    A box with a running weight and an append-only absorption history.

    Invariant: weight == initial_weight + sum(absorbed_weights).

    Boxes order by current weight (used for turn selection). Equality stays
    identity based, two boxes of equal weight are still different boxes.
    """
    variant: BoxVariant
    initial_weight: float
    green_window: int = DEFAULT_GREEN_WINDOW
    weight: float = field(init=False)
    absorbed_weights: List[float] = field(init=False, default_factory=list)

    def __post_init__(self) -> None:
        self.weight = self.initial_weight

    def __lt__(self, other: Box) -> bool:
        return self.weight < other.weight

    @property
    def absorb_count(self) -> int:
        """Number of tokens absorbed so far."""
        return len(self.absorbed_weights)

    def current_weight(self) -> float:
        return self.weight

    def absorb(self, weight: float) -> float:
        """
        Absorb a token and return the resulting score.

        Args:
            weight: Token weight.

        Returns:
            Score computed from the updated history.
        """
        self.absorbed_weights.append(weight)
        self.weight = self.weight + weight
        return self.calculate_score()

    def calculate_score(self) -> float:
        """Score of the current history according to the box variant."""
        match self.variant:
            case BoxVariant.GREEN:
                return green_score(self.absorbed_weights, self.green_window)
            case BoxVariant.BLUE:
                return blue_score(self.absorbed_weights)
        raise ValueError(f"Unknown box variant: {self.variant}")

    def reset(self) -> None:
        """Restore the initial weight and forget all absorbed tokens."""
        self.weight = self.initial_weight
        self.absorbed_weights.clear()

    def __repr__(self) -> str:
        return (
            f"Box({self.variant.value}, weight={self.weight}, "
            f"absorbed={len(self.absorbed_weights)})"
        )


def make_box(
    variant: BoxVariant | str,
    initial_weight: float,
    green_window: int = DEFAULT_GREEN_WINDOW
) -> Box:
    """
    Create a box of the given variant.

    Args:
        variant: BoxVariant or its string value ("green" / "blue").
        initial_weight: Starting weight.
        green_window: Averaging window for green boxes.

    Returns:
        New Box instance.
    """
    return Box(BoxVariant(variant), float(initial_weight), green_window)


def make_green_box(initial_weight: float) -> Box:
    """Create a green box (squared mean of the last 3 tokens)."""
    return make_box(BoxVariant.GREEN, initial_weight)


def make_blue_box(initial_weight: float) -> Box:
    """Create a blue box (Cantor pairing of smallest and largest token)."""
    return make_box(BoxVariant.BLUE, initial_weight)


def build_roster(config: Optional[GameConfig] = None) -> List[Box]:
    """
    Build a fresh roster of boxes in configuration order.

    Args:
        config: Game configuration. Uses default if None.

    Returns:
        List of new boxes.
    """
    if config is None:
        config = get_config()

    return [
        make_box(slot.variant, slot.initial_weight, config.scoring.green_window)
        for slot in config.roster
    ]
