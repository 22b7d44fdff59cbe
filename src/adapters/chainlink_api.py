"""Chainlink node adapter: login and job-spec submission.

Both paths are absolute, so they resolve against the host of `CHAINLINK_URL`
(`urljoin` semantics) and any path on the base URL is dropped.
"""

from __future__ import annotations

from urllib.parse import urljoin

import httpx

from adapters.http_client import build_async_client
from core.config import AppSettings
from core.domain.errors import JobSubmissionError, SessionError
from core.domain.models import CreatedJob, Credentials, SessionContext
from core.interfaces.orchestrator import JobOrchestrator
from core.services.job_builder import build_job_spec


class ChainlinkClient(JobOrchestrator):
    """Talks to a Chainlink node over its session-authenticated REST API."""

    _sessions_path = "/sessions"
    _specs_path = "/v2/specs"

    def __init__(
        self,
        settings: AppSettings,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._settings = settings
        self._transport = transport

    def sessions_url(self, base_url: str | None = None) -> str:
        return urljoin(base_url or self._settings.url, self._sessions_path)

    def specs_url(self, base_url: str | None = None) -> str:
        return urljoin(base_url or self._settings.url, self._specs_path)

    async def establish_session(self, credentials: Credentials | None = None) -> SessionContext:
        credentials = credentials or self._settings.credentials()
        url = self.sessions_url()

        try:
            async with build_async_client(self._settings, transport=self._transport) as client:
                resp = await client.post(url, json=credentials.model_dump())
                resp.raise_for_status()
                cookies = {cookie.name: cookie.value or "" for cookie in client.cookies.jar}
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise SessionError(f"Error establishing session at {url}: {exc}") from exc

        return SessionContext(base_url=self._settings.url, cookies=cookies)

    async def submit_job(self, session: SessionContext, *, endpoint: str, address: str) -> CreatedJob:
        spec = build_job_spec(endpoint=endpoint, address=address)
        url = self.specs_url(session.base_url)

        try:
            async with build_async_client(
                self._settings,
                cookies=session.cookies,
                transport=self._transport,
            ) as client:
                resp = await client.post(url, json=spec.to_payload())
            resp.raise_for_status()
            payload = resp.json()
        except (httpx.HTTPError, httpx.InvalidURL, ValueError) as exc:
            raise JobSubmissionError(f"Error creating Job {exc}") from exc

        data = payload.get("data") if isinstance(payload, dict) else None
        job_id = data.get("id") if isinstance(data, dict) else None
        if job_id is None or job_id == "":
            raise JobSubmissionError(f"Error creating Job: response has no data.id ({payload!r})")

        return CreatedJob(id=str(job_id), raw=payload)
