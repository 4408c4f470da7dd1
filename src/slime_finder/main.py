"""CLI entrypoint for slime-finder."""

from __future__ import annotations

import json

import typer
from rich import print
from rich.table import Table

from slime_finder.chunks import chunk_to_block, is_slime_chunk
from slime_finder.config import settings
from slime_finder.models import SearchReport
from slime_finder.search import SlimeChunkSearch
from slime_finder.seeds import format_seed, parse_numeric_seed, resolve_seed
from slime_finder.telemetry import NullProgress, RichSearchProgress, configure_logging

app = typer.Typer(help="Find the chunk whose despawn sphere holds the most slime chunks")


def _positive(value: int | None, name: str) -> int | None:
    if value is not None and value < 1:
        raise typer.BadParameter(f"{name} must be at least 1")
    return value


def _top_table(report: SearchReport, limit: int) -> Table:
    table = Table(title=f"Top {limit} slime chunks")
    table.add_column("Rank", justify="right")
    table.add_column("Chunk")
    table.add_column("Block")
    table.add_column("Slime chunks", justify="right")
    for rank, result in enumerate(report.top(limit), start=1):
        table.add_row(
            str(rank),
            f"({result.center.x}, {result.center.z})",
            str(chunk_to_block(result.center)),
            str(result.count),
        )
    return table


@app.callback()
def main(log_level: str = typer.Option(None, help="Logging level, e.g. INFO or DEBUG")) -> None:
    try:
        configure_logging(log_level or settings.log_level)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--log-level")


@app.command("show-config")
def show_config() -> None:
    """Show effective runtime settings."""
    print(settings.model_dump())


@app.command("seed")
def seed_command(seed: str = typer.Argument(..., help="Numeric seed or seed text")) -> None:
    """Show the numeric world seed the game derives from the given text."""
    value = resolve_seed(seed)
    print({"seed": value, "input": seed, "hashed": parse_numeric_seed(seed) is None})


@app.command()
def check(
    seed: str = typer.Option(..., "--seed", "-s", help="Numeric seed or seed text"),
    x: int = typer.Option(..., help="Chunk X"),
    z: int = typer.Option(..., help="Chunk Z"),
) -> None:
    """Tell whether a single chunk is a slime chunk."""
    world_seed = resolve_seed(seed)
    print({"seed": world_seed, "chunk": (x, z), "slime_chunk": is_slime_chunk(world_seed, x, z)})


@app.command()
def search(
    seed: str = typer.Option(..., "--seed", "-s", help="Seed to find slime chunks"),
    search_range: int = typer.Option(None, "--range", "-r", help="Width in chunks of the scanned square"),
    top: int = typer.Option(None, help="How many ranked candidates to show"),
    workers: int = typer.Option(None, help="Worker processes (defaults to CPU count)"),
    plot: str = typer.Option(None, help="Write a scatter plot of all candidates to this path"),
    as_json: bool = typer.Option(False, "--json", help="Print the report as JSON"),
) -> None:
    """Scan the area around the origin for the best AFK chunk."""
    search_range = _positive(search_range, "--range") or settings.search_range
    top = _positive(top, "--top") or settings.top_count
    workers = _positive(workers, "--workers") or settings.workers

    plot_candidates = None
    if plot:
        try:
            from slime_finder.plot import plot_candidates
        except ImportError:
            print({"error": "Plotting needs matplotlib. Install with: pip install 'slime-finder[plot]'"})
            raise typer.Exit(code=1)

    world_seed = resolve_seed(seed)
    finder = SlimeChunkSearch(world_seed, workers=workers, batch_size=settings.batch_size)

    if not as_json:
        print(f"Seed: {format_seed(world_seed, seed)}")
        print(f"Range: (-{search_range}, -{search_range}) ~ ({search_range}, {search_range})")

    progress = NullProgress() if as_json else RichSearchProgress()
    report = finder.run(search_range, progress=progress)

    plot_path = None
    if plot_candidates is not None:
        plot_path = plot_candidates(report.ranked, world_seed, plot)

    if as_json:
        payload = report.to_dict(limit=top)
        if plot_path is not None:
            payload["plot"] = str(plot_path)
        typer.echo(json.dumps(payload))
        return

    print(f"Time elapsed in generating spiral and offsets: {report.setup_seconds:.3f}s")
    print(f"Time elapsed in counting slime chunks: {report.count_seconds:.3f}s")
    print(_top_table(report, top))
    best = report.best
    print(f"Max slime chunk is ({best.center.x}, {best.center.z}) with count {best.count}")
    print({"slime_chunks": [tuple(pos) for pos in report.slime_chunks]})
    if plot_path is not None:
        print({"plot": str(plot_path)})


if __name__ == "__main__":
    app()
