import asyncio

import httpx
import pytest

from adapters.chainlink_api import ChainlinkClient
from core.config import load_settings
from core.domain.errors import JobSubmissionError, SessionError
from core.domain.models import Credentials, SessionContext
from fake_node import NODE_URL, FakeNode


def test_establish_session_posts_credentials_and_keeps_cookie(settings, node):
    client = ChainlinkClient(settings, transport=node.transport)

    session = asyncio.run(client.establish_session(Credentials(email="a@node.test", password="pw")))

    assert node.paths == ["/sessions"]
    assert node.requests[0].method == "POST"
    assert node.body(0) == {"email": "a@node.test", "password": "pw"}
    assert session == SessionContext(base_url=NODE_URL, cookies={"clsession": "s3cr3t"})


def test_establish_session_defaults_to_configured_credentials(settings, node):
    client = ChainlinkClient(settings, transport=node.transport)

    asyncio.run(client.establish_session())

    assert node.body(0) == {"email": "notreal@fakeemail.ch", "password": "twochains"}


def test_paths_resolve_against_host_root():
    settings = load_settings(url="http://node.test:6688/some/prefix/")
    client = ChainlinkClient(settings)

    assert client.sessions_url() == "http://node.test:6688/sessions"
    assert client.specs_url() == "http://node.test:6688/v2/specs"


def test_session_failure_raises_session_error(settings):
    node = FakeNode(session_status=401)
    client = ChainlinkClient(settings, transport=node.transport)

    with pytest.raises(SessionError) as excinfo:
        asyncio.run(client.establish_session())

    assert isinstance(excinfo.value.__cause__, httpx.HTTPStatusError)
    assert node.paths == ["/sessions"]


def test_session_timeout_raises_session_error(settings):
    node = FakeNode(errors={"/sessions": httpx.ReadTimeout})
    client = ChainlinkClient(settings, transport=node.transport)

    with pytest.raises(SessionError, match="ReadTimeout") as excinfo:
        asyncio.run(client.establish_session())

    assert isinstance(excinfo.value.__cause__, httpx.TimeoutException)


def test_submit_job_sends_cookie_and_spec(settings, node):
    client = ChainlinkClient(settings, transport=node.transport)
    session = SessionContext(base_url=NODE_URL, cookies={"clsession": "s3cr3t"})

    job = asyncio.run(client.submit_job(session, endpoint="xtz", address="KT1abc"))

    assert job.id == "job-123"
    assert job.raw == {"data": {"id": "job-123"}}
    request = node.requests[0]
    assert request.method == "POST"
    assert request.url.path == "/v2/specs"
    assert request.headers["cookie"] == "clsession=s3cr3t"
    body = node.body(0)["initiators"][0]["params"]["body"]
    assert body["endpoint"] == "xtz"
    assert body["addresses"] == ["KT1abc"]


def test_numeric_job_id_is_reported_as_text(settings):
    node = FakeNode(spec_body={"data": {"id": 42}})
    client = ChainlinkClient(settings, transport=node.transport)

    job = asyncio.run(client.submit_job(SessionContext(base_url=NODE_URL), endpoint="e", address="a"))

    assert job.id == "42"


@pytest.mark.parametrize(
    "failing_node",
    [
        FakeNode(spec_status=500, spec_body={"errors": [{"detail": "boom"}]}),
        FakeNode(errors={"/v2/specs": httpx.ConnectError}),
        FakeNode(errors={"/v2/specs": httpx.ReadTimeout}),
    ],
    ids=["http-500", "connection-refused", "read-timeout"],
)
def test_submit_failure_wraps_error(settings, failing_node):
    client = ChainlinkClient(settings, transport=failing_node.transport)

    with pytest.raises(JobSubmissionError, match="Error creating Job") as excinfo:
        asyncio.run(client.submit_job(SessionContext(base_url=NODE_URL), endpoint="e", address="a"))

    assert isinstance(excinfo.value.__cause__, httpx.HTTPError)


@pytest.mark.parametrize("spec_body", [{"data": {}}, {"errors": []}, ["job-123"]])
def test_response_without_job_id_is_a_submission_error(settings, spec_body):
    node = FakeNode(spec_body=spec_body)
    client = ChainlinkClient(settings, transport=node.transport)

    with pytest.raises(JobSubmissionError, match="Error creating Job"):
        asyncio.run(client.submit_job(SessionContext(base_url=NODE_URL), endpoint="e", address="a"))
