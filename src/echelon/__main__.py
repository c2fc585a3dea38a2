"""Demo: random nested jobs with progress bars. Uses Click for argument parsing."""

from __future__ import annotations

import itertools
import random
import time
from collections.abc import Iterator

import click

from echelon.events import LogLevel
from echelon.logger import Logger
from echelon.renderers.interactive import InteractiveRenderer
from echelon.renderers.simple import SimpleRenderer


def generate_node(
    log: Logger,
    depth: int,
    job_ids: Iterator[int],
    rng: random.Random,
    step_seconds: float,
) -> None:
    """Open a job with *depth* steps, recursing into sub-jobs at random."""
    with log.scoped(f"Job {next(job_ids)}") as scoped:
        for _ in range(depth):
            if rng.randrange(100) < depth:
                generate_node(scoped, depth - 1, job_ids, rng, step_seconds)
                continue
            with scoped.bar(f"Job {next(job_ids)}") as child:
                steps = rng.randrange(depth) if depth > 0 else 0
                for done in range(1, steps + 1):
                    time.sleep(step_seconds)
                    progress = 100 * done // steps
                    child.info("Doing very important jobs! Completed %d/100...", progress)
                    child.set_percentage(progress)
        scoped.debug("Finished after %d iterations", depth)


@click.command()
@click.option("--simple", is_flag=True, help="Print one line per event instead of a live tree")
@click.option("--depth", default=5, show_default=True, help="Steps per job and recursion depth")
@click.option("--seed", type=int, default=None, help="Seed for the random job layout")
@click.option("--step", "step_seconds", default=0.5, show_default=True, help="Seconds per job step")
@click.option(
    "--level",
    type=click.Choice([level.name.lower() for level in LogLevel]),
    default="info",
    show_default=True,
)
def main(simple: bool, depth: int, seed: int | None, step_seconds: float, level: str) -> None:
    """Render a random tree of nested jobs."""
    rng = random.Random(seed)
    job_ids = itertools.count(1)
    log_level = LogLevel[level.upper()]

    if simple:
        log = Logger(log_level, SimpleRenderer())
        generate_node(log, depth, job_ids, rng, step_seconds)
        log.flush()
        return

    renderer = InteractiveRenderer()
    renderer.run_in_background()
    log = Logger(log_level, renderer)
    try:
        generate_node(log, depth, job_ids, rng, step_seconds)
        log.finish(True)
        log.flush()
    finally:
        renderer.stop_drawing()


if __name__ == "__main__":
    main()
