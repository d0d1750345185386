"""Command-line interface for Ripley.

Python justification: Click library for CLI parsing and subprocess orchestration.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click

from ripley import __version__
from ripley.adapters import AdapterConfig, AdapterError, ClaudeCodeAdapter
from ripley.config import DEFAULT_CONFIG_PATH, ConfigLoader, ConfigurationError, RipleyConfig
from ripley.daemon import MonitorDaemon, report_rolling_stats
from ripley.executor import ProbeExecutor
from ripley.probes import PROBES
from ripley.storage import OutcomeStore, PersistenceError

logger = logging.getLogger(__name__)

config_option = click.option(
    "--config",
    "-c",
    "config_path",
    default=DEFAULT_CONFIG_PATH,
    show_default=True,
    type=click.Path(path_type=Path, dir_okay=False),
    help="Path to YAML configuration file.",
)
verbose_option = click.option("--verbose", "-v", is_flag=True, help="Verbose output.")
quiet_option = click.option("--quiet", "-q", is_flag=True, help="Minimal output (warnings only).")


def _configure_logging(config: RipleyConfig, verbose: bool, quiet: bool) -> None:
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.WARNING
    else:
        level = getattr(logging, config.logging.level)
    logging.basicConfig(level=level, format=config.logging.format, force=True)


def _load_config(config_path: Path, verbose: bool = False, quiet: bool = False) -> RipleyConfig:
    if verbose and quiet:
        raise click.UsageError("Cannot use --verbose and --quiet together.")
    try:
        config, loaded = ConfigLoader().load_or_default(config_path)
    except ConfigurationError as e:
        click.echo(f"Error: Failed to load config: {e}", err=True)
        sys.exit(1)

    _configure_logging(config, verbose, quiet)
    if loaded:
        click.echo(f"Loaded configuration from {config_path}")
    else:
        click.echo(f"Using default configuration ({config_path} not found)")
    return config


def _open_store(config: RipleyConfig) -> OutcomeStore:
    try:
        return OutcomeStore(config.daemon.db_path)
    except PersistenceError as e:
        click.echo(f"Error: Failed to initialize database: {e}", err=True)
        sys.exit(1)


def _run_daemon(config: RipleyConfig, max_cycles: int | None) -> None:
    try:
        adapter = ClaudeCodeAdapter(
            AdapterConfig(
                model=config.claude.model,
                executable=config.claude.executable,
                env_vars=dict(config.claude.env),
                extra_args=list(config.claude.extra_args),
            )
        )
    except AdapterError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    with _open_store(config) as store:
        executor = ProbeExecutor(adapter, sink=store)
        daemon = MonitorDaemon(
            executor,
            store,
            interval_seconds=config.daemon.interval_seconds,
            rolling_window=config.monitoring.rolling_window,
            warning_threshold=config.monitoring.warning_threshold,
        )
        click.echo(f"Ripley daemon started with {config.claude.model}...")
        click.echo(f"Database: {config.daemon.db_path} | Interval: {config.daemon.interval}\n")
        try:
            daemon.run(max_cycles=max_cycles)
        except KeyboardInterrupt:
            click.echo("\nInterrupted, shutting down.")


@click.group()
@click.version_option(version=__version__, prog_name="ripley")
def cli() -> None:
    """Ripley - AI agent liveness and effort monitor.

    Runs deterministic probes against an AI agent CLI and tracks rolling
    statistics of its effort.
    """
    pass


@cli.command()
@config_option
@click.option("--once", is_flag=True, help="Run a single cycle and exit.")
@click.option(
    "--max-cycles",
    type=click.IntRange(min=1),
    default=None,
    help="Stop after N cycles (default: run forever).",
)
@verbose_option
@quiet_option
def run(
    config_path: Path,
    once: bool,
    max_cycles: int | None,
    verbose: bool,
    quiet: bool,
) -> None:
    """Run the monitoring daemon.

    Examples:

        ripley run

        ripley run --config config.yaml --max-cycles 3
    """
    if once and max_cycles is not None:
        raise click.UsageError("Cannot use --once and --max-cycles together.")
    config = _load_config(config_path, verbose, quiet)
    _run_daemon(config, 1 if once else max_cycles)


@cli.command()
@config_option
@verbose_option
@quiet_option
def check(config_path: Path, verbose: bool, quiet: bool) -> None:
    """Run every probe once and report."""
    config = _load_config(config_path, verbose, quiet)
    _run_daemon(config, 1)


@cli.command()
@config_option
@click.option(
    "--window",
    "-w",
    type=click.IntRange(min=1),
    default=None,
    help="Rolling window size (default: monitoring.rolling_window).",
)
def stats(config_path: Path, window: int | None) -> None:
    """Show rolling statistics without running probes."""
    config = _load_config(config_path)
    window = window or config.monitoring.rolling_window

    with _open_store(config) as store:
        report_rolling_stats(store, PROBES, window, config.monitoring.warning_threshold)


@cli.command()
def probes() -> None:
    """List the probe definitions and their budgets."""
    for probe in PROBES:
        click.echo(
            f"{probe.name} | Max Tokens: {probe.max_tokens} | "
            f"Max Duration: {probe.max_duration_seconds:g}s"
        )
        click.echo(f"  Prompt: {probe.prompt}")


if __name__ == "__main__":
    cli()
