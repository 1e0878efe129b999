"""CLI entry point for pageshim."""

from __future__ import annotations

import logging
from pathlib import Path

import click
from pydantic import ValidationError

from pageshim.analytics.metrics import compute_metrics, cycle_length
from pageshim.config.defaults import default_shim_config
from pageshim.config.schema import ShimConfig
from pageshim.core.rng import make_rng
from pageshim.core.snippet import render_shim
from pageshim.io.serialize import dump_sequence, load_config_file
from pageshim.utils.exceptions import ConfigError

_config_option = click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Path to a JSON or YAML shim config.",
)
_instant_option = click.option(
    "--instant",
    default=None,
    type=int,
    help="Reference instant in epoch milliseconds (overrides the config).",
)


def _resolve_config(config_path: Path | None, instant: int | None) -> ShimConfig:
    if config_path is not None:
        try:
            config = load_config_file(config_path)
        except ConfigError as exc:
            raise click.BadParameter(str(exc), param_hint="--config") from exc
        if instant is None:
            return config
        data = config.model_dump()
    elif instant is None:
        raise click.UsageError("Provide --instant or --config.")
    else:
        data = default_shim_config(0).model_dump()
    data["reference_instant"] = instant
    try:
        return ShimConfig.model_validate(data)
    except ValidationError as exc:
        raise click.BadParameter(str(exc), param_hint="--instant") from exc


@click.group()
@click.version_option(package_name="pageshim")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """pageshim — deterministic Date and Math.random for rendered pages."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@cli.command()
@_config_option
@_instant_option
@click.option(
    "--output",
    "output_path",
    type=click.Path(path_type=Path),
    default=None,
    help="Write the snippet here instead of stdout.",
)
def render(config_path: Path | None, instant: int | None, output_path: Path | None) -> None:
    """Render the injectable shim snippet."""
    config = _resolve_config(config_path, instant)
    source = render_shim(config)
    if output_path is None:
        click.echo(source, nl=False)
        return
    output_path.write_text(source)
    click.echo(f"Shim written to {output_path}")


@cli.command()
@_config_option
@_instant_option
@click.option("--count", default=10, show_default=True, type=click.IntRange(min=0))
@click.option(
    "--output",
    "output_path",
    type=click.Path(path_type=Path),
    default=None,
    help="Path to write the sequence JSON.",
)
def sample(
    config_path: Path | None,
    instant: int | None,
    count: int,
    output_path: Path | None,
) -> None:
    """Print the first values Math.random returns in a shimmed page."""
    config = _resolve_config(config_path, instant)
    values = make_rng(config.reference_instant, config.lcg).draws(count).tolist()
    for value in values:
        click.echo(repr(value))
    if output_path is not None:
        output_path.write_text(dump_sequence(config, values))
        click.echo(f"\nSequence written to {output_path}")


@cli.command()
@_config_option
@_instant_option
@click.option("--count", default=1000, show_default=True, type=click.IntRange(min=1))
def inspect(config_path: Path | None, instant: int | None, count: int) -> None:
    """Report period and summary statistics of the random stream."""
    config = _resolve_config(config_path, instant)
    cycle = cycle_length(config.lcg, config.reference_instant)
    metrics = compute_metrics(make_rng(config.reference_instant, config.lcg).draws(count))

    click.echo(f"Reference instant: {config.reference_instant}")
    click.echo(
        f"LCG: a={config.lcg.multiplier} c={config.lcg.increment} m={config.lcg.modulus}"
    )
    click.echo(f"Period: {cycle.period} (tail {cycle.tail})")
    click.echo(f"Draws: {metrics.count}")
    click.echo(f"  min:  {metrics.minimum:.6f}")
    click.echo(f"  max:  {metrics.maximum:.6f}")
    click.echo(f"  mean: {metrics.mean:.6f}")
    click.echo(f"All in [0, 1): {'yes' if metrics.in_unit_interval else 'no'}")


if __name__ == "__main__":
    cli()
