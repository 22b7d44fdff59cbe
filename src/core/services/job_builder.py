"""Job specification builder.

The document always has one `external` initiator pointed at the mock client
and one `noop` task. `endpoint` and `address` are copied verbatim: the node
owns the schema, so nothing is trimmed or validated here.
"""

from __future__ import annotations

from core.domain.models import InitiatorBody, Initiator, InitiatorParams, JobSpec, Task

EXTERNAL_INITIATOR_NAME = "mock-client"
ACCOUNT_IDS: tuple[str, ...] = (
    "0x6ce96ae5c300096b09dbd4567b0574f6a1281ae0e5cfe4f6b0233d1821f6206b",
)


def build_job_spec(*, endpoint: str, address: str) -> JobSpec:
    """Build a fresh `JobSpec` for one run."""

    body = InitiatorBody(
        endpoint=endpoint,
        addresses=[address],
        account_ids=list(ACCOUNT_IDS),
    )
    initiator = Initiator(params=InitiatorParams(name=EXTERNAL_INITIATOR_NAME, body=body))
    return JobSpec(initiators=[initiator], tasks=[Task()])
