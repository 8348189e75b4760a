"""
Fitness Selection Utilities

Helpers that rank chromosomes by a caller-supplied fitness function:
- fittest_index / most_fit: single best candidate (earliest wins ties)
- above_average: candidates strictly better than the mean
- summarize: best / mean / worst statistics for a pool

Author: chromosomes maintainers
License: MIT
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable, Sequence

from ..exceptions import EmptyCandidateSetError
from .encoding import Chromosome


FitnessFn = Callable[[Chromosome], float]


# =============================================================================
# Selection
# =============================================================================


def fittest_index(fitness: FitnessFn, candidates: Sequence[Chromosome]) -> tuple[int, float]:
    """
    Locate the fittest candidate.

    Args:
        fitness: Function scoring a chromosome (higher is better)
        candidates: Chromosomes to compare

    Returns:
        (index, score) of the candidate with the strictly greatest fitness;
        (0, -inf) when no score exceeds -inf

    Raises:
        EmptyCandidateSetError: If candidates is empty
    """
    if not candidates:
        raise EmptyCandidateSetError()

    # NaN scores never compare greater, so they can only win an all-NaN pool
    best_index, best_score = 0, -math.inf
    for index in range(len(candidates)):
        score = fitness(candidates[index])
        if score > best_score:
            best_index, best_score = index, score
    return best_index, best_score


def most_fit(fitness: FitnessFn, candidates: Sequence[Chromosome]) -> Chromosome:
    """Return the candidate with the greatest fitness (earliest on ties)."""
    index, _ = fittest_index(fitness, candidates)
    return candidates[index]


def above_average(fitness: FitnessFn, candidates: Sequence[Chromosome]) -> list[Chromosome]:
    """
    Keep the candidates whose fitness is strictly above the mean.

    Order is preserved. An empty input, or one where every candidate scores
    the same, yields an empty list.
    """
    if not candidates:
        return []

    scores = [fitness(c) for c in candidates]
    mean = sum(scores) / len(scores)
    return [c for c, score in zip(candidates, scores) if score > mean]


# =============================================================================
# Statistics
# =============================================================================


@dataclass(frozen=True)
class FitnessSummary:
    """Fitness statistics for a set of chromosomes."""

    size: int
    best: float
    mean: float
    worst: float

    def to_dict(self) -> dict:
        return {
            "size": self.size,
            "best": self.best,
            "mean": self.mean,
            "worst": self.worst,
        }


def summarize(fitness: FitnessFn, candidates: Sequence[Chromosome]) -> FitnessSummary:
    """
    Summarize fitness over candidates.

    Raises:
        EmptyCandidateSetError: If candidates is empty
    """
    if not candidates:
        raise EmptyCandidateSetError()

    scores = [fitness(c) for c in candidates]
    return FitnessSummary(
        size=len(scores),
        best=max(scores),
        mean=sum(scores) / len(scores),
        worst=min(scores),
    )


__all__ = [
    "FitnessFn",
    "fittest_index",
    "most_fit",
    "above_average",
    "FitnessSummary",
    "summarize",
]
