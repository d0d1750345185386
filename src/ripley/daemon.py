"""Monitoring loop for Ripley.

Python justification: Required for subprocess orchestration and the fixed-interval loop.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field

import click

from ripley.core.results import Outcome
from ripley.executor.runner import ProbeExecutor
from ripley.metrics.rolling import OutcomeSource, RollingAggregate, rolling_stats
from ripley.probes.definitions import PROBES, ProbeDefinition, validate_probe_table
from ripley.reporting.console import format_outcomes, format_rolling, rolling_header
from ripley.storage.store import OutcomeStore, PersistenceError

logger = logging.getLogger(__name__)


@dataclass
class CycleReport:
    """Everything produced by one monitoring cycle."""

    outcomes: list[Outcome] = field(default_factory=list)
    aggregates: dict[str, RollingAggregate] = field(default_factory=dict)

    def degraded(self, warning_threshold: float) -> list[str]:
        """Names of probes whose rolling pass rate is below the threshold."""
        return [
            name for name, agg in self.aggregates.items() if agg.is_degraded(warning_threshold)
        ]


def report_rolling_stats(
    source: OutcomeSource,
    probes: Sequence[ProbeDefinition],
    window: int,
    warning_threshold: float,
    echo: Callable[[str], None] = click.echo,
) -> dict[str, RollingAggregate]:
    """Print and return rolling statistics for every probe.

    A failed query is logged and the probe is skipped.

    Args:
        source: Store holding recorded outcomes.
        probes: Probes to report on.
        window: Rolling window size.
        warning_threshold: Pass rate below which a probe is flagged.
        echo: Output function.

    Returns:
        Aggregates keyed by probe name.

    """
    echo(rolling_header(window))
    aggregates: dict[str, RollingAggregate] = {}
    for probe in probes:
        try:
            aggregate = rolling_stats(source, probe.name, window)
        except PersistenceError as e:
            logger.error(f"Error getting stats for {probe.name}: {e}")
            continue
        aggregates[probe.name] = aggregate
        echo(format_rolling(probe.name, aggregate, warning_threshold))
        if aggregate.is_degraded(warning_threshold):
            logger.warning(
                f"{probe.name} pass rate {aggregate.pass_rate:.0%} is below "
                f"{warning_threshold:.0%}"
            )
    return aggregates


class MonitorDaemon:
    """Runs every probe sequentially, then reports rolling statistics.

    Wires together:
    - ProbeExecutor: Runs probes and records outcomes
    - OutcomeStore: Serves the rolling window queries
    - Reporting: Formats cycle output

    Example:
        daemon = MonitorDaemon(executor, store, interval_seconds=1800)
        daemon.run()
    """

    def __init__(
        self,
        executor: ProbeExecutor,
        store: OutcomeStore,
        interval_seconds: float,
        rolling_window: int = 10,
        warning_threshold: float = 0.7,
        probes: Sequence[ProbeDefinition] = PROBES,
        echo: Callable[[str], None] = click.echo,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        """Initialize the daemon.

        Args:
            executor: Executor used to run probes.
            store: Store queried for rolling statistics.
            interval_seconds: Pause between cycles.
            rolling_window: Number of recent outcomes per probe to aggregate.
            warning_threshold: Pass rate below which a probe is flagged.
            probes: Probes to run each cycle.
            echo: Output function for reports.
            sleep: Sleep function between cycles.

        Raises:
            ValueError: If two probes share a name.
        """
        self.executor = executor
        self.store = store
        self.interval_seconds = interval_seconds
        self.rolling_window = rolling_window
        self.warning_threshold = warning_threshold
        self.probes = validate_probe_table(probes)
        self._echo = echo
        self._sleep = sleep

    def report_rolling(self) -> dict[str, RollingAggregate]:
        """Print and return rolling statistics for every probe."""
        return report_rolling_stats(
            self.store,
            self.probes,
            self.rolling_window,
            self.warning_threshold,
            echo=self._echo,
        )

    def run_cycle(self) -> CycleReport:
        """Run all probes once and report."""
        logger.info(f"Starting cycle with {len(self.probes)} probes")
        self._echo("=== Running Claude Code Liveness & Effort Check ===")
        outcomes = self.executor.run_all(self.probes)
        self._echo(format_outcomes(outcomes))
        self._echo("")
        aggregates = self.report_rolling()
        self._echo("")
        passed = sum(1 for o in outcomes if o.passed)
        logger.info(f"Cycle complete: {passed}/{len(outcomes)} probes passed")
        report = CycleReport(outcomes=outcomes, aggregates=aggregates)
        degraded = report.degraded(self.warning_threshold)
        if degraded:
            names = ", ".join(degraded)
            self._echo(f"{len(degraded)} probe(s) below pass rate threshold: {names}")
            self._echo("")
        return report

    def run(self, max_cycles: int | None = None) -> CycleReport | None:
        """Run cycles separated by the interval.

        Args:
            max_cycles: Stop after this many cycles; run forever if None.

        Returns:
            Report of the last completed cycle, or None if none ran.
        """
        last: CycleReport | None = None
        cycles = 0
        while max_cycles is None or cycles < max_cycles:
            last = self.run_cycle()
            cycles += 1
            if max_cycles is not None and cycles >= max_cycles:
                break
            logger.debug(f"Sleeping {self.interval_seconds:.0f}s until next cycle")
            self._sleep(self.interval_seconds)
        return last
