"""
Chromosome Encoding

This module implements the genetic representation used by the engine:
- TraitSchema: ordered, immutable list of named 8-bit traits
- Chromosome: immutable mapping of trait name -> byte value
- ChromosomeBuilder: mutable factory owning the schema, mutation chance,
  crossover policy and random source

Chromosomes built by one builder share the same schema snapshot and breeding
policy. Children produced by crossover inherit the policy of the left parent.

Author: chromosomes maintainers
License: MIT
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Iterator, Mapping, Sequence

from loguru import logger

from ..exceptions import (
    ConfigurationError,
    DuplicateTraitError,
    IncompatibleChromosomeError,
    UnknownTraitError,
)
from .operators import (
    CrossoverPolicy,
    MutationOperator,
    UniformCrossover,
    validate_mutation_chance,
)


BITS_PER_TRAIT = 8
MAX_TRAIT_VALUE = 0xFF
DEFAULT_MUTATION_CHANCE = 1e-5


# =============================================================================
# Trait Schema
# =============================================================================


@dataclass(frozen=True)
class TraitSchema:
    """Ordered set of trait names shared by a builder and its chromosomes."""

    names: tuple[str, ...] = ()

    def __post_init__(self):
        if len(set(self.names)) != len(self.names):
            seen: set[str] = set()
            for name in self.names:
                if name in seen:
                    raise DuplicateTraitError(name)
                seen.add(name)

    def __len__(self) -> int:
        return len(self.names)

    def __iter__(self) -> Iterator[str]:
        return iter(self.names)

    def __contains__(self, trait: object) -> bool:
        return trait in self.names

    def index(self, trait: str) -> int:
        """Position of trait in the schema."""
        try:
            return self.names.index(trait)
        except ValueError:
            raise UnknownTraitError(trait, self.names) from None

    def compatible_with(self, other: TraitSchema) -> bool:
        """Schemas are compatible when they hold the same trait names, in any order."""
        if self.names == other.names:
            return True
        return frozenset(self.names) == frozenset(other.names)

    @property
    def bit_length(self) -> int:
        return BITS_PER_TRAIT * len(self.names)


# =============================================================================
# Chromosome
# =============================================================================


class Chromosome:
    """
    Immutable set of byte-valued traits.

    A chromosome remembers the crossover policy it was built with so that
    its offspring breed the same way. Use ChromosomeBuilder to create one.
    """

    __slots__ = ("_schema", "_genes", "_breeder")

    def __init__(
        self,
        schema: TraitSchema,
        genes: Sequence[int],
        breeder: CrossoverPolicy,
    ):
        if len(genes) != len(schema):
            raise ValueError(
                f"Expected {len(schema)} gene values, got {len(genes)}"
            )
        for name, value in zip(schema, genes):
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"Trait {name!r} value {value!r} is not an integer")
            if not 0 <= value <= MAX_TRAIT_VALUE:
                raise ValueError(f"Trait {name!r} value {value} is outside 0..255")

        self._schema = schema
        self._genes = tuple(genes)
        self._breeder = breeder

    # -------------------------------------------------------------------------
    # Lookup
    # -------------------------------------------------------------------------

    @property
    def traits(self) -> TraitSchema:
        return self._schema

    @property
    def breeder(self) -> CrossoverPolicy:
        return self._breeder

    def get(self, trait: str) -> int:
        """
        Get the byte value of a trait.

        Raises:
            UnknownTraitError: If the trait is not part of this chromosome
        """
        return self._genes[self._schema.index(trait)]

    def __getitem__(self, trait: str) -> int:
        return self.get(trait)

    def bit_length(self) -> int:
        """Total number of bits encoded (8 per trait)."""
        return self._schema.bit_length

    def to_dict(self) -> dict[str, int]:
        return dict(zip(self._schema.names, self._genes))

    # -------------------------------------------------------------------------
    # Comparison
    # -------------------------------------------------------------------------

    def compatible_with(self, other: Chromosome) -> bool:
        return self._schema.compatible_with(other._schema)

    def _require_compatible(self, other: Chromosome) -> None:
        if not self.compatible_with(other):
            raise IncompatibleChromosomeError(self._schema.names, other._schema.names)

    def difference(self, other: Chromosome) -> int:
        """
        Hamming distance between two chromosomes.

        Args:
            other: Chromosome with the same trait names

        Returns:
            Number of differing bits across all traits

        Raises:
            IncompatibleChromosomeError: If the trait sets differ
        """
        self._require_compatible(other)
        theirs = other.to_dict()
        return sum(
            (value ^ theirs[name]).bit_count()
            for name, value in zip(self._schema.names, self._genes)
        )

    # -------------------------------------------------------------------------
    # Breeding
    # -------------------------------------------------------------------------

    def crossover(self, other: Chromosome) -> Chromosome:
        """
        Produce a child from this chromosome and other.

        The work is delegated to the crossover policy this chromosome was
        built with, called as policy(self, other).

        Raises:
            IncompatibleChromosomeError: If the trait sets differ
        """
        self._require_compatible(other)
        return self._breeder(self, other)

    def clone(self) -> Chromosome:
        """Cross this chromosome with itself. Mutation may still apply."""
        return self.crossover(self)

    def derive(self, genes: Mapping[str, int]) -> Chromosome:
        """
        Build a sibling chromosome with the same schema and policy.

        Args:
            genes: Mapping of every trait name to its new value

        Raises:
            IncompatibleChromosomeError: If the keys differ from this schema
        """
        if set(genes) != set(self._schema.names):
            raise IncompatibleChromosomeError(self._schema.names, tuple(genes))
        return Chromosome(
            self._schema,
            [genes[name] for name in self._schema.names],
            self._breeder,
        )

    # -------------------------------------------------------------------------
    # Dunder
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Chromosome):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __hash__(self) -> int:
        return hash(frozenset(self.to_dict().items()))

    def __repr__(self) -> str:
        body = ", ".join(
            f"{name}=0x{value:02x}"
            for name, value in zip(self._schema.names, self._genes)
        )
        return f"Chromosome({body})"


# =============================================================================
# Chromosome Builder
# =============================================================================


class ChromosomeBuilder:
    """
    Factory for chromosomes sharing one schema and breeding policy.

    The builder owns the random source. Seeding it (via the constructor or
    seed()) makes every build, crossover and mutation reproducible.
    """

    def __init__(
        self,
        seed: int | None = None,
        rng: random.Random | None = None,
        mutation_chance: float = DEFAULT_MUTATION_CHANCE,
    ):
        """
        Initialize an empty builder.

        Args:
            seed: Seed for a private random source
            rng: Explicit random source (takes precedence over seed)
            mutation_chance: Per-trait mutation probability in [0, 1]
        """
        self.rng = rng if rng is not None else random.Random(seed)
        self._traits: list[str] = []
        self._schema: TraitSchema | None = None
        self._mutation_chance = validate_mutation_chance(mutation_chance)
        self._policy: CrossoverPolicy | None = None
        self._breeder: CrossoverPolicy | None = None

    # -------------------------------------------------------------------------
    # Schema
    # -------------------------------------------------------------------------

    def add_trait(self, trait: str) -> ChromosomeBuilder:
        """
        Register a new 8-bit trait.

        Raises:
            DuplicateTraitError: If the trait is already registered
            ConfigurationError: If the name is not a non-empty string
        """
        if not isinstance(trait, str) or not trait:
            raise ConfigurationError(f"Trait names must be non-empty strings, got {trait!r}")
        if trait in self._traits:
            raise DuplicateTraitError(trait)

        self._traits.append(trait)
        self._schema = None
        return self

    def add_traits(self, *traits: str) -> ChromosomeBuilder:
        for trait in traits:
            self.add_trait(trait)
        return self

    @property
    def schema(self) -> TraitSchema:
        if self._schema is None:
            self._schema = TraitSchema(tuple(self._traits))
        return self._schema

    # -------------------------------------------------------------------------
    # Breeding configuration
    # -------------------------------------------------------------------------

    @property
    def mutation_chance(self) -> float:
        return self._mutation_chance

    def set_mutation_chance(self, chance: float) -> ChromosomeBuilder:
        """
        Set the per-trait mutation probability.

        Raises:
            ConfigurationError: If chance is outside [0, 1]
        """
        self._mutation_chance = validate_mutation_chance(chance)
        self._breeder = None
        return self

    def set_crossover(self, policy: CrossoverPolicy | None) -> ChromosomeBuilder:
        """Install a custom crossover policy, or None to restore uniform crossover."""
        if policy is not None and not callable(policy):
            raise ConfigurationError(f"Crossover policy must be callable, got {policy!r}")
        self._policy = policy
        self._breeder = None
        return self

    def seed(self, value: int | None) -> ChromosomeBuilder:
        """Reseed the builder's random source."""
        self.rng.seed(value)
        return self

    def breeder(self) -> CrossoverPolicy:
        """The policy bound into chromosomes built from now on."""
        if self._breeder is None:
            if self._policy is not None:
                self._breeder = self._policy
            else:
                self._breeder = UniformCrossover(
                    MutationOperator(self._mutation_chance, self.rng),
                    self.rng,
                )
        return self._breeder

    # -------------------------------------------------------------------------
    # Building
    # -------------------------------------------------------------------------

    def build_random(self, seed: int | None = None) -> Chromosome:
        """
        Build a chromosome with uniformly random trait values.

        Args:
            seed: Optional seed for this single build; the builder's own
                random source is left untouched when given
        """
        rng = random.Random(seed) if seed is not None else self.rng
        schema = self.schema
        genes = [rng.randrange(MAX_TRAIT_VALUE + 1) for _ in schema]
        return Chromosome(schema, genes, self.breeder())

    def build(self, values: Mapping[str, int]) -> Chromosome:
        """
        Build a chromosome from explicit trait values.

        Raises:
            IncompatibleChromosomeError: If the keys differ from the schema
        """
        schema = self.schema
        if set(values) != set(schema.names):
            raise IncompatibleChromosomeError(schema.names, tuple(values))
        return Chromosome(schema, [values[name] for name in schema], self.breeder())

    def __repr__(self) -> str:
        return (
            f"ChromosomeBuilder(traits={list(self._traits)}, "
            f"mutation_chance={self._mutation_chance})"
        )


def builder_for(
    *traits: str,
    seed: int | None = None,
    mutation_chance: float = DEFAULT_MUTATION_CHANCE,
) -> ChromosomeBuilder:
    """Shorthand for a builder pre-loaded with traits."""
    builder = ChromosomeBuilder(seed=seed, mutation_chance=mutation_chance)
    builder.add_traits(*traits)
    logger.debug("Created chromosome builder", traits=list(traits), seed=seed)
    return builder


__all__ = [
    "BITS_PER_TRAIT",
    "DEFAULT_MUTATION_CHANCE",
    "TraitSchema",
    "Chromosome",
    "ChromosomeBuilder",
    "builder_for",
]
