"""Job creation flow.

Login then submit, strictly in that order, with the session handed over
explicitly. There is no retry: every error ends the run, and the CLI maps it
to an exit status.
"""

from __future__ import annotations

from dataclasses import dataclass

from core.config import AppSettings
from core.domain.models import CreatedJob, SessionContext
from core.interfaces.orchestrator import JobOrchestrator


@dataclass
class CreateJobResult:
    """Output of one run."""

    job: CreatedJob
    session: SessionContext


async def create_job(
    *,
    settings: AppSettings,
    orchestrator: JobOrchestrator,
    endpoint: str,
    address: str,
) -> CreateJobResult:
    session = await orchestrator.establish_session(settings.credentials())
    job = await orchestrator.submit_job(session, endpoint=endpoint, address=address)
    return CreateJobResult(job=job, session=session)
