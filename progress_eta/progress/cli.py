"""Command line interface for computing ETA labels and inspecting configuration."""

import logging
from typing import Any, Dict, Optional

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .clock import Clock
from .counter import ProgressCounter
from .estimator import EstimatedTimeEstimator
from .models import OutOfBoundsFormat, ProgressOptions
from ..core.config import ConfigManager
from ..core.exceptions import ProgressEtaException
from ..core.logger import LoggerManager


console = Console()
logger = logging.getLogger(__name__)


class ReplayTime:
    """Time source that only moves when told to."""

    def __init__(self, now: float = 0.0):
        self.now = now

    def __call__(self) -> float:
        return self.now


class ProgressCLI:
    """Command line interface over the clock/counter/estimator triad."""

    def __init__(self, config_path: Optional[str] = None,
                 log_level: Optional[str] = None):
        """Initialize progress CLI.

        Args:
            config_path: Optional YAML configuration file
            log_level: Optional override for ``logging.level``
        """
        self.config_path = config_path
        self.log_level = log_level
        self.config_manager: Optional[ConfigManager] = None

    def _load_config(self) -> ConfigManager:
        if self.config_manager is None:
            self.config_manager = ConfigManager(self.config_path)
            if self.log_level:
                self.config_manager.set('logging.level', self.log_level.upper())
            LoggerManager(self.config_manager.to_dict())
        return self.config_manager

    def estimate(self, progress: int, elapsed: float,
                 overrides: Dict[str, Any]) -> int:
        """Replay ``progress`` evenly spaced increments over ``elapsed`` seconds and print the ETA.

        Returns:
            Process exit code
        """
        try:
            config_manager = self._load_config()
            options_data = config_manager.progress_options().to_dict()
            options_data.update({k: v for k, v in overrides.items() if v is not None})
            options = ProgressOptions.from_dict(options_data)

            estimator = self._replay(options, progress, elapsed)
        except ProgressEtaException as e:
            logger.error("Estimate failed: %s", e, extra={'error': e.to_dict()})
            console.print(f"[red]Failed to estimate: {escape(str(e))}[/red]", soft_wrap=True)
            for error in e.details.get('validation_errors', []):
                console.print(f"[red]  - {escape(error)}[/red]", soft_wrap=True)
            return 1

        console.print(str(estimator), markup=False, highlight=False, soft_wrap=True)
        return 0

    def _replay(self, options: ProgressOptions, progress: int,
                elapsed: float) -> EstimatedTimeEstimator:
        time_source = ReplayTime()
        clock = Clock(time_source)
        counter = ProgressCounter.from_options(options, time_source)
        estimator = EstimatedTimeEstimator.from_options(clock, counter, options)

        counter.start()
        clock.start()

        steps = int(progress - options.starting_at)
        for step in range(1, steps + 1):
            time_source.now = elapsed * step / steps
            counter.increment()
        time_source.now = elapsed

        logger.debug("Replayed %d increments over %.1fs", steps, elapsed)
        return estimator

    def show_config(self) -> int:
        """Print the effective configuration; non-zero exit code when invalid."""
        try:
            config_manager = self._load_config()
        except ProgressEtaException as e:
            console.print(f"[red]Failed to load configuration: {escape(str(e))}[/red]", soft_wrap=True)
            return 1

        table = Table(title="Configuration")
        table.add_column("Section", style="cyan", no_wrap=True)
        table.add_column("Key", style="green")
        table.add_column("Value", style="yellow")

        for section, values in config_manager.to_dict().items():
            if isinstance(values, dict):
                for key, value in values.items():
                    table.add_row(section, key, repr(value))
            else:
                table.add_row(section, "", repr(values))

        console.print(table)

        errors = config_manager.validate()
        if errors:
            console.print(f"[red]Configuration has {len(errors)} errors:[/red]")
            for error in errors:
                console.print(f"[red]  - {escape(error)}[/red]", soft_wrap=True)
            return 1

        console.print("[green]Configuration is valid[/green]")
        return 0


# Click CLI commands

@click.group()
@click.option('--config', 'config_path', type=click.Path(dir_okay=False),
              help='YAML configuration file')
@click.option('--log-level', help='Override the configured log level')
@click.pass_context
def progress(ctx, config_path, log_level):
    """Progress estimation commands."""
    ctx.ensure_object(dict)
    ctx.obj['cli'] = ProgressCLI(config_path, log_level)


@progress.command()
@click.option('--progress', '-p', 'current', type=int, required=True,
              help='Current progress value')
@click.option('--elapsed', '-e', type=float, required=True,
              help='Seconds taken to reach the current progress')
@click.option('--total', '-t', type=float, help='Total progress value')
@click.option('--smoothing', '-s', type=click.FloatRange(0.0, 1.0),
              help='Smoothing factor between 0 and 1')
@click.option('--starting-at', type=int, help='Progress value the task started from')
@click.option('--out-of-bounds', 'out_of_bounds',
              type=click.Choice([fmt.value for fmt in OutOfBoundsFormat]),
              help='Display for estimates of 100 hours or more')
@click.pass_context
def estimate(ctx, current, elapsed, total, smoothing, starting_at, out_of_bounds):
    """Print the ETA label for a task."""
    cli = ctx.obj['cli']
    overrides = {
        'total': total,
        'smoothing': smoothing,
        'starting_at': starting_at,
        'out_of_bounds_format': out_of_bounds,
    }
    ctx.exit(cli.estimate(current, elapsed, overrides))


@progress.command('config')
@click.pass_context
def show_config(ctx):
    """Show the effective configuration."""
    cli = ctx.obj['cli']
    ctx.exit(cli.show_config())


if __name__ == '__main__':
    progress()
