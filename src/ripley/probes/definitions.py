"""Probe definitions.

A probe is a single deterministic prompt with resource budgets. The default
table holds simple tasks whose correct answers are short, so the token and
duration budgets double as a liveness and effort signal.
"""

from __future__ import annotations

from collections.abc import Iterable

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ProbeDefinition(BaseModel):
    """An immutable probe specification.

    Attributes:
        name: Unique probe identifier.
        prompt: Prompt delivered to the agent on standard input.
        max_tokens: Maximum allowed response size in tokens.
        max_duration_seconds: Maximum allowed wall time in seconds.

    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Unique probe identifier")
    prompt: str = Field(..., description="Prompt sent to the agent")
    max_tokens: int = Field(..., gt=0, description="Token budget for the response")
    max_duration_seconds: float = Field(..., gt=0, description="Wall time budget in seconds")

    @field_validator("name", "prompt")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        """Reject empty or whitespace-only names and prompts."""
        if not v or not v.strip():
            raise ValueError("must not be empty")
        return v


def validate_probe_table(probes: Iterable[ProbeDefinition]) -> tuple[ProbeDefinition, ...]:
    """Check that probe names are unique.

    Args:
        probes: Probe definitions to check.

    Returns:
        The probes as a tuple, in their original order.

    Raises:
        ValueError: If two probes share a name.

    """
    table = tuple(probes)
    seen: set[str] = set()
    for probe in table:
        if probe.name in seen:
            raise ValueError(f"Duplicate probe name: {probe.name}")
        seen.add(probe.name)
    return table


PROBES: tuple[ProbeDefinition, ...] = validate_probe_table((
    ProbeDefinition(
        name="Sum1to100",
        prompt=(
            "Calculate the sum of integers from 1 to 100. "
            "Respond with only the number, no explanation."
        ),
        max_tokens=10,
        max_duration_seconds=5,
    ),
    ProbeDefinition(
        name="PalindromeCheck",
        prompt="Is 'racecar' a palindrome? Answer with only 'true' or 'false'.",
        max_tokens=5,
        max_duration_seconds=5,
    ),
    ProbeDefinition(
        name="SimpleArithmetic",
        prompt="What is 15 * 7? Respond with only the number.",
        max_tokens=5,
        max_duration_seconds=5,
    ),
    ProbeDefinition(
        name="ListReverse",
        prompt=(
            "Reverse this list: [1, 2, 3, 4, 5]. "
            "Respond with only the reversed list in the same format."
        ),
        max_tokens=15,
        max_duration_seconds=5,
    ),
))


def get_probe(name: str, probes: Iterable[ProbeDefinition] = PROBES) -> ProbeDefinition:
    """Look up a probe by name.

    Raises:
        KeyError: If no probe has the given name.

    """
    for probe in probes:
        if probe.name == name:
            return probe
    raise KeyError(name)
