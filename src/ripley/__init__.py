"""Ripley - AI agent liveness and effort monitor.

Periodically runs fixed, deterministic prompts against an AI agent CLI,
classifies the effort of each response and tracks rolling statistics
per probe to surface degradation early.
"""

__version__ = "0.1.0"
