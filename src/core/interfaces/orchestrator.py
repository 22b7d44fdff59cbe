"""Job orchestrator contract.

Why Protocol:
- Defines a structural contract (duck typing) without rigid inheritance.
- The driver in `core.services.create_job` depends on it, so tests can swap the
  HTTP adapter for an in-memory fake.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.models import CreatedJob, Credentials, SessionContext


@runtime_checkable
class JobOrchestrator(Protocol):
    """Minimal contract for a job-orchestration service.

    Design rules:
    - Both methods are async because they do HTTP I/O.
    - `submit_job` receives the session explicitly; there is no hidden jar.
    """

    async def establish_session(self, credentials: Credentials) -> SessionContext:
        """Log in and return the session to reuse on the next call."""

        ...

    async def submit_job(self, session: SessionContext, *, endpoint: str, address: str) -> CreatedJob:
        """Build and submit the job spec, returning the created job."""

        ...
