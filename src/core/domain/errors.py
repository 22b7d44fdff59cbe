"""Error taxonomy.

Why typed errors:
- Each step of the run fails with its own kind, so the CLI decides the exit
  status in one place instead of every step calling `sys.exit`.
- The underlying `httpx` error stays reachable through `__cause__`.
"""

from __future__ import annotations


class JobCtlError(Exception):
    """Base class for every failure the CLI knows how to report."""

    exit_code: int = 1


class ConfigurationError(JobCtlError):
    """Required configuration is missing or invalid. Raised before any HTTP call."""

    exit_code = 2


class SessionError(JobCtlError):
    """The login request failed (network error or non-success status)."""


class JobSubmissionError(JobCtlError):
    """The job-spec request failed or its response had no job id."""
