import logging
import sys
import time
from typing import Optional, Tuple

import click

from ..base import LineageError, ResultEmitter
from ..config import LineageConfig
from ..emitters.console import ConsoleEmitter
from ..emitters.json_emitter import JSONEmitter
from ..graph import LineageGraph, UPSTREAM, DOWNSTREAM
from ..readers.factory import get_reader
from ..utils.metrics import MetricsAggregator

logger = logging.getLogger(__name__)


def _fail(message: str) -> None:
    click.echo(f"Error: {message}", err=True)
    sys.exit(1)


def _load_graph(config: LineageConfig) -> LineageGraph:
    try:
        reader = get_reader(config)
        start = time.perf_counter()
        graph = LineageGraph.from_edges(reader)
    except (LineageError, ValueError, OSError) as e:
        _fail(str(e))
    logger.info("Loaded %s in %.1f ms", config.input_path, (time.perf_counter() - start) * 1000)
    return graph


def _get_emitter(config: LineageConfig) -> ResultEmitter:
    if config.output_format == "json":
        return JSONEmitter(config.output_dir)
    return ConsoleEmitter()


def _run_query(ctx: click.Context, direction: str, seeds: Tuple[str, ...],
               output: Optional[str], output_dir: Optional[str], timing: bool,
               repeat: int) -> None:
    config = ctx.obj["config"]
    if output:
        config.output_format = output
    if output_dir:
        config.output_dir = output_dir

    graph = _load_graph(config)
    metrics = MetricsAggregator()

    query = graph.upstream if direction == UPSTREAM else graph.downstream
    for _ in range(repeat):
        start = time.perf_counter()
        try:
            result = query(seeds)
        except LineageError as e:
            _fail(str(e))
        metrics.add_metrics({"latency_ms": (time.perf_counter() - start) * 1000})

    location = _get_emitter(config).emit_result(direction, seeds, result)
    if config.output_format == "json":
        click.echo(f"Wrote {len(result)} paths to {location}")

    if timing:
        stats = metrics.get_stats("latency_ms")
        click.echo("\nQuery Statistics:")
        click.echo(f"queries: {stats['count']}")
        for key in ("median", "min", "max"):
            click.echo(f"latency_ms {key}: {stats[key]:.3f}")


@click.group()
@click.option('--env-file', default=None, help='Path to .env file')
@click.option('--input', 'input_path', default=None, help='Edge file to load (CSV or parquet)')
@click.option('--format', 'input_format', default=None,
              type=click.Choice(["auto", "csv", "parquet"]), help='Input file format')
@click.option('--debug/--no-debug', default=False, help='Enable debug logging')
@click.pass_context
def cli(ctx: click.Context, env_file: Optional[str], input_path: Optional[str],
        input_format: Optional[str], debug: bool):
    """Lineage graph query CLI"""
    try:
        config = LineageConfig.from_env(env_file)

        # Override config with CLI parameters
        if input_path:
            config.input_path = input_path
        if input_format:
            config.input_format = input_format
        if debug:
            config.log_level = "DEBUG"

        config.validate()
    except ValueError as e:
        _fail(str(e))

    logging.basicConfig(level=config.get_log_level())
    ctx.ensure_object(dict)
    ctx.obj["config"] = config


@cli.command()
@click.argument('seeds', nargs=-1, required=True)
@click.option('--output', default=None, type=click.Choice(["console", "json"]), help='Result emitter')
@click.option('--output-dir', default=None, help='Directory for JSON results')
@click.option('--timing/--no-timing', default=False, help='Print query latency')
@click.option('--repeat', default=1, type=click.IntRange(min=1), help='Number of times to run the query')
@click.pass_context
def upstream(ctx: click.Context, seeds: Tuple[str, ...], output: Optional[str],
             output_dir: Optional[str], timing: bool, repeat: int):
    """Get every ancestor of the SEEDS paths"""
    _run_query(ctx, UPSTREAM, seeds, output, output_dir, timing, repeat)


@cli.command()
@click.argument('seeds', nargs=-1, required=True)
@click.option('--output', default=None, type=click.Choice(["console", "json"]), help='Result emitter')
@click.option('--output-dir', default=None, help='Directory for JSON results')
@click.option('--timing/--no-timing', default=False, help='Print query latency')
@click.option('--repeat', default=1, type=click.IntRange(min=1), help='Number of times to run the query')
@click.pass_context
def downstream(ctx: click.Context, seeds: Tuple[str, ...], output: Optional[str],
               output_dir: Optional[str], timing: bool, repeat: int):
    """Get every descendant of the SEEDS paths"""
    _run_query(ctx, DOWNSTREAM, seeds, output, output_dir, timing, repeat)


@cli.command()
@click.pass_context
def stats(ctx: click.Context):
    """Print node and edge counts of the loaded graph"""
    config = ctx.obj["config"]
    graph = _load_graph(config)
    location = _get_emitter(config).emit_stats(graph.stats())
    if config.output_format == "json":
        click.echo(f"Wrote graph statistics to {location}")


@cli.command()
@click.pass_context
def dump(ctx: click.Context):
    """Print every node with its relations"""
    graph = _load_graph(ctx.obj["config"])
    graph.print()


if __name__ == '__main__':
    cli()
