"""Probe execution engine.

This module provides the ProbeExecutor class, which runs one probe at a time
against an agent CLI in a bounded subprocess:

    1. Launch the agent with the prompt on stdin (stdout and stderr combined)
    2. Race process exit against the probe's duration budget
    3. Kill the process group if the budget expires first
    4. Count output words, check budgets, classify effort, record the outcome

Launch failures, timeouts and budget overruns are reported as failed
outcomes, never as exceptions.

Python Justification: Required for subprocess execution and the exit/timeout race.
"""

from __future__ import annotations

import contextlib
import logging
import os
import random
import signal
import subprocess
import time
from collections.abc import Callable, Iterable
from concurrent.futures import FIRST_COMPLETED, ThreadPoolExecutor, wait
from typing import TYPE_CHECKING

from ripley.core.results import TIMED_OUT_OUTPUT, ExecutionResult, Outcome
from ripley.metrics.effort import classify_effort
from ripley.quotes import random_quote
from ripley.storage.store import PersistenceError

if TYPE_CHECKING:
    from ripley.adapters.base import BaseAdapter
    from ripley.probes.definitions import ProbeDefinition
    from ripley.storage.store import OutcomeSink

logger = logging.getLogger(__name__)

# Upper bound on reaping a killed process
KILL_GRACE_SECONDS = 5.0


def count_tokens(output: str) -> int:
    """Approximate token usage as the number of whitespace-separated words."""
    return len(output.split())


def _kill(process: subprocess.Popen[str]) -> None:
    """Forcibly terminate a process and its process group.

    The process must have been started with start_new_session=True so that
    its pid is also its process group id. A no-op if the group is gone.
    """
    with contextlib.suppress(ProcessLookupError):
        os.killpg(process.pid, signal.SIGKILL)


class ProbeExecutor:
    """Runs probes sequentially against an agent CLI.

    Example:
        >>> adapter = ClaudeCodeAdapter(AdapterConfig(model="Sonnet"))
        >>> with OutcomeStore("ripley.db") as store:
        ...     executor = ProbeExecutor(adapter, sink=store)
        ...     outcomes = executor.run_all(PROBES)

    """

    def __init__(
        self,
        adapter: BaseAdapter,
        sink: OutcomeSink | None = None,
        rng: random.Random | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        """Initialize the executor.

        Args:
            adapter: Adapter that builds the agent command line.
            sink: Optional outcome recorder; failures are logged, not raised.
            rng: Random source for quote selection.
            clock: Monotonic clock returning fractional seconds.

        """
        self.adapter = adapter
        self.sink = sink
        self.rng = rng or random.Random()
        self._clock = clock

    def run_probe(self, probe: ProbeDefinition) -> ExecutionResult:
        """Run a probe's subprocess and measure it, without classification.

        Args:
            probe: Probe to run.

        Returns:
            ExecutionResult describing the run.

        """
        cmd = self.adapter.build_command(probe)
        env = self.adapter.prepare_env()

        start = self._clock()
        try:
            process = subprocess.Popen(
                cmd,
                stdin=subprocess.PIPE,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                text=True,
                encoding="utf-8",
                errors="replace",
                env=env,
                start_new_session=True,
            )
        except OSError as e:
            logger.warning(f"Failed to launch {cmd[0]} for probe {probe.name}: {e}")
            return ExecutionResult(
                probe_name=probe.name,
                passed=False,
                output=str(e),
                launch_error=True,
            )

        pool = ThreadPoolExecutor(max_workers=1, thread_name_prefix=f"probe-{probe.name}")
        waiter = pool.submit(process.communicate, probe.prompt)
        try:
            done, _ = wait([waiter], timeout=probe.max_duration_seconds, return_when=FIRST_COMPLETED)

            if waiter not in done:
                _kill(process)
                duration = self._clock() - start
                try:
                    process.wait(timeout=KILL_GRACE_SECONDS)
                except subprocess.TimeoutExpired:
                    logger.error(f"Process {process.pid} did not exit after kill")
                done, _ = wait([waiter], timeout=KILL_GRACE_SECONDS)
                if waiter not in done:
                    logger.error(f"Output pipe of {process.pid} still open after kill")
                logger.warning(
                    f"Probe {probe.name} timed out after {duration:.2f}s "
                    f"(budget {probe.max_duration_seconds}s)"
                )
                return ExecutionResult(
                    probe_name=probe.name,
                    passed=False,
                    duration_seconds=duration,
                    output=TIMED_OUT_OUTPUT,
                    timed_out=True,
                )

            try:
                stdout, _ = waiter.result()
            except OSError as e:
                duration = self._clock() - start
                _kill(process)
                logger.warning(f"Probe {probe.name} failed while running: {e}")
                return ExecutionResult(
                    probe_name=probe.name,
                    passed=False,
                    duration_seconds=duration,
                    output=str(e),
                )
            duration = self._clock() - start
        finally:
            # Only a helper that left the process group can still hold the pipe
            pool.shutdown(wait=waiter.done(), cancel_futures=True)

        output = stdout or ""
        tokens_used = count_tokens(output)
        exit_code = process.returncode
        passed = (
            tokens_used <= probe.max_tokens
            and duration <= probe.max_duration_seconds
            and exit_code == 0
        )
        if exit_code != 0:
            logger.warning(f"Probe {probe.name} exited with status {exit_code}")

        return ExecutionResult(
            probe_name=probe.name,
            passed=passed,
            tokens_used=tokens_used,
            duration_seconds=duration,
            output=output.strip(),
            exit_code=exit_code,
        )

    def execute(self, probe: ProbeDefinition) -> Outcome:
        """Execute a probe, classify its effort and record the outcome.

        Args:
            probe: Probe to execute.

        Returns:
            The classified Outcome.

        """
        result = self.run_probe(probe)
        effort = classify_effort(result, probe)
        outcome = Outcome(
            probe_name=result.probe_name,
            passed=result.passed,
            tokens_used=result.tokens_used,
            duration_seconds=result.duration_seconds,
            effort=effort,
            output=result.output,
            quote=random_quote(effort, self.rng),
        )
        self._record(outcome)
        return outcome

    def run_all(self, probes: Iterable[ProbeDefinition]) -> list[Outcome]:
        """Execute probes one at a time, in order."""
        return [self.execute(probe) for probe in probes]

    def _record(self, outcome: Outcome) -> None:
        if self.sink is None:
            return
        try:
            self.sink.insert(outcome)
        except PersistenceError as e:
            logger.error(f"Failed to record outcome for {outcome.probe_name}: {e}")
