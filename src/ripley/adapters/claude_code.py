"""Claude Code CLI adapter.

Python Justification: Required for subprocess command construction.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ripley.adapters.base import BaseAdapter

if TYPE_CHECKING:
    from ripley.probes.definitions import ProbeDefinition


class ClaudeCodeAdapter(BaseAdapter):
    """Adapter for the Claude Code CLI.

    Runs each probe in a fresh, non-interactive session with the probe's
    token budget as the generation limit.

    Example:
        >>> adapter = ClaudeCodeAdapter(AdapterConfig(model="Sonnet"))
        >>> adapter.build_command(probe)
        ['claude', '--model', 'Sonnet', '--fresh', '--max-tokens', '10']

    """

    CLI_EXECUTABLE = "claude"

    def build_command(self, probe: ProbeDefinition) -> list[str]:
        """Build the Claude Code CLI command for a probe.

        Args:
            probe: The probe to run.

        Returns:
            Command as list of strings.

        """
        cmd = [
            self.executable,
            "--model",
            self.config.model,
            "--fresh",
            "--max-tokens",
            str(probe.max_tokens),
        ]
        cmd.extend(self.config.extra_args)
        return cmd
