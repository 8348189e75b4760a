"""
CLI Commands for chromosomes.

Provides command-line interface using Click framework.

Author: chromosomes maintainers
License: MIT
"""

import math
from typing import Callable, Optional

import click
from loguru import logger

from ..config import ChromosomesConfig, load_config
from ..exceptions import ChromosomeError
from ..monitoring.logging_config import configure_from_settings
from ..optimize.bounded import AXES, bounded_maximize_nd


def _linear(*xs: float) -> float:
    return sum(xs)


def _neg_square(*xs: float) -> float:
    return -sum(x * x for x in xs)


def _neg_rastrigin(*xs: float) -> float:
    return -(10.0 * len(xs) + sum(x * x - 10.0 * math.cos(2.0 * math.pi * x) for x in xs))


BENCHMARKS: dict[str, Callable[..., float]] = {
    "linear": _linear,
    "neg-square": _neg_square,
    "neg-rastrigin": _neg_rastrigin,
}


def _fail(error: ChromosomeError) -> None:
    logger.error(f"Command failed: {error}")
    raise click.UsageError(str(error))


# Main CLI group
@click.group()
@click.version_option(version="0.1.0")
@click.option("--config", "-c", type=click.Path(exists=True, dir_okay=False), help="Config file path (YAML or JSON)")
@click.option("--verbose", "-v", is_flag=True, help="Verbose output")
@click.pass_context
def cli(ctx, config: Optional[str], verbose: bool):
    """
    chromosomes - genetic algorithm engine.

    Evolves byte-encoded chromosomes toward a fitness maximum.
    """
    ctx.ensure_object(dict)

    try:
        settings = load_config(config) if config else ChromosomesConfig.from_env()
    except ChromosomeError as e:
        _fail(e)

    ctx.obj["config"] = settings
    ctx.obj["verbose"] = verbose

    configure_from_settings(settings.logging, verbose=verbose)


# Maximize command
@cli.command()
@click.option("--function", "-f", "function_name", type=click.Choice(sorted(BENCHMARKS)), default="neg-square", help="Benchmark function to maximize")
@click.option("--dims", "-d", type=click.IntRange(1, len(AXES)), default=1, help="Number of variables")
@click.option("--min", "lower", type=int, default=-10, help="Lower bound of every axis")
@click.option("--max", "upper", type=int, default=10, help="Upper bound of every axis")
@click.option("--seed", "-s", type=int, default=None, help="Random seed (overrides config)")
@click.option("--generations", "-g", type=int, default=None, help="Generations to run (overrides config)")
@click.pass_context
def maximize(ctx, function_name: str, dims: int, lower: int, upper: int, seed: Optional[int], generations: Optional[int]):
    """Maximize a built-in benchmark function over a bounded box."""
    settings: ChromosomesConfig = ctx.obj["config"]

    evolution = settings.evolution
    if generations is not None:
        evolution = evolution.model_copy(update={"generations": generations})
    if seed is None:
        seed = settings.genome.seed

    f = BENCHMARKS[function_name]
    logger.info(f"Maximizing {function_name} in {dims}D over [{lower}, {upper}]")

    try:
        point = bounded_maximize_nd(
            f,
            lower,
            upper,
            dims,
            config=evolution,
            seed=seed,
            mutation_chance=settings.genome.mutation_chance,
        )
    except ChromosomeError as e:
        _fail(e)

    for axis, value in zip(AXES, point):
        click.echo(f"{axis} = {value:.6f}")
    click.echo(f"f = {f(*point):.6f}")


# Sample command
@cli.command()
@click.argument("traits", nargs=-1, required=True)
@click.option("--seed", "-s", type=int, default=None, help="Random seed")
@click.pass_context
def sample(ctx, traits: tuple, seed: Optional[int]):
    """Print one random chromosome with the given TRAITS."""
    settings: ChromosomesConfig = ctx.obj["config"]

    try:
        builder = settings.genome.create_builder(*traits)
        chromosome = builder.build_random(seed=seed)
    except ChromosomeError as e:
        _fail(e)

    for name, value in chromosome.to_dict().items():
        click.echo(f"{name} = 0x{value:02x} ({value})")


# Config command
@cli.command("show-config")
@click.pass_context
def show_config(ctx):
    """Print the effective configuration as YAML."""
    settings: ChromosomesConfig = ctx.obj["config"]
    click.echo(settings.dump_yaml(), nl=False)


def main():
    cli(obj={})


if __name__ == "__main__":
    main()
