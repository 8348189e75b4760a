"""
Evolution History Tracking

In-memory record of how a pool optimizer run progressed:
- One GenerationRecord per generation (pool size, fitness statistics)
- Fitness progression helpers for inspection and tests

Nothing here is persisted; a history lives as long as its optimizer.

Author: chromosomes maintainers
License: MIT
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Iterator


# =============================================================================
# Generation Record
# =============================================================================


@dataclass(frozen=True)
class GenerationRecord:
    """Snapshot of a single generation, taken after breeding."""

    generation: int

    # Elite
    best_fitness: float

    # Pool
    mean_fitness: float
    pool_size: int

    # Breeding
    elite_size: int = 0
    offspring: int = 0
    truncated: bool = False

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return asdict(self)


# =============================================================================
# Evolution History
# =============================================================================


@dataclass
class EvolutionHistory:
    """Ordered generation records of one optimizer run."""

    records: list[GenerationRecord] = field(default_factory=list)

    def record(self, record: GenerationRecord) -> None:
        self.records.append(record)

    def clear(self) -> None:
        self.records.clear()

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self) -> Iterator[GenerationRecord]:
        return iter(self.records)

    @property
    def best_fitness(self) -> list[float]:
        """Elite fitness per generation."""
        return [r.best_fitness for r in self.records]

    @property
    def latest(self) -> GenerationRecord | None:
        return self.records[-1] if self.records else None

    def improvement(self) -> float:
        """Elite fitness gained between the first and last generation."""
        if not self.records:
            return 0.0
        return self.records[-1].best_fitness - self.records[0].best_fitness

    def to_dict(self) -> dict[str, Any]:
        return {
            "generations": len(self.records),
            "records": [r.to_dict() for r in self.records],
        }


__all__ = ["GenerationRecord", "EvolutionHistory"]
