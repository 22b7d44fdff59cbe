"""Domain models (Pydantic v2).

Why Pydantic in the domain:
- Serializes the job specification with the exact field names the node expects
  (`accountIds`) while the Python side keeps snake_case.
- Documents every field in place (Field) without coupling the core to I/O.

Note:
- These models describe *what* is sent and received, not *how*.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class Credentials(BaseModel):
    """Login fields posted once per run to `/sessions`."""

    email: str = Field(..., min_length=1, description="Account email on the node.")
    password: str = Field(..., min_length=1, description="Account password on the node.")


class InitiatorBody(BaseModel):
    """Payload forwarded by the node to the External Initiator."""

    model_config = ConfigDict(populate_by_name=True)

    endpoint: str = Field(
        ...,
        description="Endpoint name registered on the External Initiator (taken verbatim).",
    )
    addresses: list[str] = Field(
        default_factory=list,
        description="Addresses the initiator should watch (taken verbatim).",
    )
    account_ids: list[str] = Field(
        default_factory=list,
        alias="accountIds",
        description="Account identifiers the initiator should watch.",
    )


class InitiatorParams(BaseModel):
    name: str = Field(..., min_length=1, description="External Initiator name.")
    body: InitiatorBody


class Initiator(BaseModel):
    """Trigger definition. Only `external` initiators are built here."""

    type: Literal["external"] = "external"
    params: InitiatorParams


class Task(BaseModel):
    type: Literal["noop"] = "noop"


class JobSpec(BaseModel):
    """Job specification submitted to `/v2/specs`.

    Why separate models per level:
    - Keeps the nested document shape explicit and easy to assert in tests.
    - `to_payload` is the only place that decides the wire field names.
    """

    initiators: list[Initiator] = Field(
        ...,
        min_length=1,
        max_length=1,
        description="Exactly one external initiator.",
    )
    tasks: list[Task] = Field(
        default_factory=lambda: [Task()],
        min_length=1,
        max_length=1,
        description="Exactly one no-op task.",
    )

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)


class SessionContext(BaseModel):
    """Authenticated session handed from the login step to the submit step.

    Holds the cookies the node set on `/sessions`; the submit step attaches them
    to its own request instead of relying on a process-wide cookie jar.
    """

    base_url: str = Field(..., min_length=1, description="Node base URL.")
    cookies: dict[str, str] = Field(
        default_factory=dict,
        description="Session cookies (name -> value) returned by the login call.",
    )


class CreatedJob(BaseModel):
    """Job created on the node (`response.data.id`)."""

    id: str = Field(..., min_length=1, description="Job identifier assigned by the node.")
    raw: dict[str, Any] = Field(
        default_factory=dict,
        description="Decoded response body, kept for `--json` output.",
    )
