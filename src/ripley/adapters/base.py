"""Base adapter class for agent CLIs.

Adapters know how to turn a probe into a non-interactive command line for a
specific AI agent. Running the command and enforcing budgets is the
executor's job; adapters only describe the invocation.

Python Justification: Required for subprocess command construction.
"""

from __future__ import annotations

import os
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ripley.probes.definitions import ProbeDefinition


@dataclass
class AdapterConfig:
    """Configuration for agent invocation.

    Attributes:
        model: Model name passed to the agent CLI.
        executable: Agent executable; the adapter default is used when None.
        env_vars: Extra environment variables for the subprocess.
        extra_args: Extra command-line arguments appended to the command.

    """

    model: str
    executable: str | None = None
    env_vars: dict[str, str] = field(default_factory=dict)
    extra_args: list[str] = field(default_factory=list)


class AdapterError(Exception):
    """Base exception for adapter errors."""

    pass


class AdapterValidationError(AdapterError):
    """Raised when adapter configuration is invalid."""

    pass


class BaseAdapter(ABC):
    """Abstract base class for agent CLI adapters.

    Subclasses must define CLI_EXECUTABLE and implement build_command().

    Example:
        >>> class EchoAdapter(BaseAdapter):
        ...     CLI_EXECUTABLE = "echo"
        ...
        ...     def build_command(self, probe):
        ...         return [self.executable, probe.name]

    """

    CLI_EXECUTABLE: str

    def __init__(self, config: AdapterConfig) -> None:
        """Initialize the adapter.

        Args:
            config: Adapter configuration.

        Raises:
            AdapterValidationError: If the configuration is invalid.

        """
        self.config = config
        self.validate_config(config)

    @property
    def executable(self) -> str:
        """Executable to launch, honouring the configured override."""
        return self.config.executable or self.CLI_EXECUTABLE

    def get_name(self) -> str:
        """Return adapter name for logging."""
        return self.__class__.__name__

    def validate_config(self, config: AdapterConfig) -> None:
        """Validate configuration before use.

        Args:
            config: Configuration to validate.

        Raises:
            AdapterValidationError: If configuration is invalid.

        """
        if not config.model or not config.model.strip():
            raise AdapterValidationError("Model must not be empty")
        if config.executable is not None and not config.executable.strip():
            raise AdapterValidationError("Executable must not be empty")

    @abstractmethod
    def build_command(self, probe: ProbeDefinition) -> list[str]:
        """Build the command line for running one probe.

        The prompt itself is delivered on standard input, not in argv.

        Args:
            probe: The probe to run.

        Returns:
            Command as list of strings.

        """
        ...

    def prepare_env(self) -> dict[str, str]:
        """Prepare environment variables for the subprocess."""
        env = os.environ.copy()
        env.update(self.config.env_vars)
        # A nested agent session refuses to start when this marker is inherited
        env.pop("CLAUDECODE", None)
        return env
