"""Probe definition table."""

from ripley.probes.definitions import (
    PROBES,
    ProbeDefinition,
    get_probe,
    validate_probe_table,
)

__all__ = [
    "PROBES",
    "ProbeDefinition",
    "get_probe",
    "validate_probe_table",
]
