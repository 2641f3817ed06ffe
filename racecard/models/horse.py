"""Horse record DTOs parsed from race card text.

This module provides immutable data transfer objects for a single runner
and its form figures.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class PriorResult:
    """Represents one past run taken from the form-figures line.

    Attributes:
        finish_position: Finishing position (0 when it could not be read).
        ground_code: Ground token of the run (e.g., "Gd", "Sft"), may be empty.
    """

    finish_position: int
    ground_code: str


@dataclass(frozen=True)
class HorseRecord:
    """Represents a single runner parsed from a race card.

    This is an immutable dataclass; a new parse pass produces new records.
    Fields set to None are unknown, which is not the same as an explicit 0.

    Attributes:
        name: Display name (may be empty for a malformed header line).
        age: The horse's age (0 when it could not be read).
        current_weight: Weight carried today (in kg).
        prior_weight: Weight carried last time (in kg).
        jockey_rating: Jockey rating (optional).
        trainer_rating: Trainer rating (optional).
        prior_results: Past runs in source order (most recent first).
        race_distance: Race distance (optional).
    """

    name: str
    age: int = 0
    current_weight: float = 0.0
    prior_weight: float = 0.0
    jockey_rating: float | None = None
    trainer_rating: float | None = None
    prior_results: tuple[PriorResult, ...] = ()
    race_distance: float | None = None
