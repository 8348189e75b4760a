"""
Chromosomes Configuration

Three sections (genome, evolution, logging) validated by pydantic v2 models.
A configuration can come from a YAML or JSON file, or from environment
variables such as ``CHROMOSOMES_EVOLUTION__GENERATIONS=100``.

Author: chromosomes maintainers
License: MIT
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import IO, Any, Callable, Literal

import yaml
from loguru import logger
from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from .exceptions import ConfigurationError
from .genome.encoding import DEFAULT_MUTATION_CHANCE, ChromosomeBuilder


# =============================================================================
# Genome Configuration
# =============================================================================


class GenomeConfig(BaseModel):
    """Configuration for chromosome building and breeding."""

    mutation_chance: float = Field(
        default=DEFAULT_MUTATION_CHANCE,
        ge=0.0,
        le=1.0,
        description="Probability of mutating each trait after crossover",
    )

    seed: int | None = Field(
        default=None,
        description="Seed for the builder's random source (None = nondeterministic)",
    )

    def create_builder(self, *traits: str) -> ChromosomeBuilder:
        """Create a builder configured from this section with the given traits."""
        builder = ChromosomeBuilder(seed=self.seed, mutation_chance=self.mutation_chance)
        builder.add_traits(*traits)
        return builder


# =============================================================================
# Evolution Configuration
# =============================================================================


class EvolutionConfig(BaseModel):
    """Configuration for the pool optimizer."""

    # Population
    population_size: int = Field(
        default=8,
        ge=0,
        le=10000,
        description="Size of the initial random pool and cap on the refined elite set",
    )

    # Generations
    generations: int = Field(
        default=40,
        ge=0,
        le=100000,
        description="Fixed number of generations to run",
    )

    # Pool bounds
    max_pool_size: int = Field(
        default=233,
        ge=1,
        le=1000000,
        description="Pool size above which the pool is truncated",
    )

    truncate_size: int | None = Field(
        default=None,
        ge=1,
        description="Size the pool is cut back to (None = max_pool_size // 2)",
    )

    # Diversity
    random_injections: int = Field(
        default=2,
        ge=0,
        le=10000,
        description="Fresh random chromosomes appended every generation",
    )

    min_crossover_distance: int = Field(
        default=1,
        ge=0,
        description="Elite pairs must differ by more than this many bits to breed",
    )

    @model_validator(mode="after")
    def resolve_truncate_size(self) -> EvolutionConfig:
        """Default truncate_size to half the pool bound and keep it within it."""
        if self.truncate_size is None:
            self.truncate_size = max(1, self.max_pool_size // 2)
        if self.truncate_size > self.max_pool_size:
            raise ValueError(
                f"truncate_size ({self.truncate_size}) must be <= max_pool_size ({self.max_pool_size})"
            )
        return self


# =============================================================================
# Logging Configuration
# =============================================================================


class LoggingConfig(BaseModel):
    """Configuration for loguru output."""

    level: Literal["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Minimum log level",
    )

    log_file: Path | None = Field(
        default=None,
        description="Optional log file path",
    )

    serialize: bool = Field(
        default=False,
        description="Emit JSON log records",
    )

    @field_validator("level", mode="before")
    @classmethod
    def upper_level(cls, v: Any) -> Any:
        return v.upper() if isinstance(v, str) else v


# =============================================================================
# Main Configuration
# =============================================================================


class ChromosomesConfig(BaseModel):
    """Complete engine configuration."""

    genome: GenomeConfig = Field(default_factory=GenomeConfig)
    evolution: EvolutionConfig = Field(default_factory=EvolutionConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> ChromosomesConfig:
        """
        Validate a plain dictionary (``None`` gives the defaults).

        Raises:
            ConfigurationError: If any section fails validation
        """
        try:
            return cls(**(data or {}))
        except ValidationError as e:
            raise ConfigurationError(f"Invalid configuration: {e}") from e

    @classmethod
    def from_yaml(cls, path: str | Path) -> ChromosomesConfig:
        """Load a YAML file. An empty file gives the defaults."""
        return cls.from_dict(_read_file(path, yaml.safe_load))

    @classmethod
    def from_json(cls, path: str | Path) -> ChromosomesConfig:
        """Load a JSON file."""
        return cls.from_dict(_read_file(path, json.load))

    @classmethod
    def from_env(cls, prefix: str = "CHROMOSOMES_") -> ChromosomesConfig:
        """
        Build a configuration from ``<prefix><SECTION>__<FIELD>`` variables.

        Values stay strings; pydantic coerces numbers and booleans.

        Args:
            prefix: Variable name prefix
        """
        sections: dict[str, Any] = {}
        for name, value in os.environ.items():
            if not name.startswith(prefix):
                continue
            *path, leaf = name[len(prefix):].lower().split("__")
            target = sections
            for part in path:
                target = target.setdefault(part, {})
            target[leaf] = value

        logger.debug(f"Read {len(sections)} config section(s) from environment", prefix=prefix)
        return cls.from_dict(sections)

    def to_yaml(self, path: str | Path) -> None:
        """Write the configuration as YAML, creating parent directories."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(self.dump_yaml())
        logger.info(f"Saved configuration to {path}")

    def dump_yaml(self) -> str:
        return yaml.safe_dump(self.model_dump(mode="json"), default_flow_style=False, sort_keys=False)


def _read_file(path: str | Path, parse: Callable[[IO[str]], Any]) -> Any:
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"Config file not found: {path}")
    with path.open("r") as f:
        data = parse(f)
    logger.info(f"Loaded configuration from {path}")
    return data


def load_config(path: str | Path | None = None) -> ChromosomesConfig:
    """
    Load configuration from a file, or from the environment when no path is given.

    The format is chosen by file suffix (.yaml/.yml or .json).

    Raises:
        FileNotFoundError: If the file does not exist
        ConfigurationError: If the suffix is unsupported or validation fails
    """
    if path is None:
        return ChromosomesConfig.from_env()

    path = Path(path)
    suffix = path.suffix.lower()
    if suffix in (".yaml", ".yml"):
        return ChromosomesConfig.from_yaml(path)
    if suffix == ".json":
        return ChromosomesConfig.from_json(path)
    raise ConfigurationError(f"Unsupported config format: {suffix or path.name}")


__all__ = [
    "GenomeConfig",
    "EvolutionConfig",
    "LoggingConfig",
    "ChromosomesConfig",
    "load_config",
]
