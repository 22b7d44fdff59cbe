"""ei-jobctl command line.

`create` is the whole job-creation run: load config, log in, submit the spec,
print the id. Errors from any step are printed on stderr and mapped to the
exit status carried by the error type.
"""

from __future__ import annotations

import asyncio

import typer
from rich.console import Console

from adapters.chainlink_api import ChainlinkClient
from cli import doctor
from cli.ui_components import print_error, print_job_created
from core.config import load_settings
from core.domain.errors import JobCtlError, JobSubmissionError
from core.services.create_job import create_job
from core.services.job_builder import build_job_spec

app = typer.Typer(
    no_args_is_help=True,
    help="Create external-initiator jobs on a Chainlink node.",
)
app.add_typer(doctor.app, name="doctor")

_console = Console(soft_wrap=True)
_err_console = Console(stderr=True, soft_wrap=True)


@app.command()
def create(
    endpoint: str = typer.Argument(..., help="Endpoint name registered on the External Initiator."),
    address: str = typer.Argument(..., help="Address the initiator should watch."),
    dry_run: bool = typer.Option(False, "--dry-run", help="Print the job spec and exit without HTTP calls."),
    as_json: bool = typer.Option(False, "--json", help="Print the node's response as JSON."),
) -> None:
    """Log in to the node and create a job with a single external initiator."""

    try:
        settings = load_settings()
        if dry_run:
            _console.print_json(data=build_job_spec(endpoint=endpoint, address=address).to_payload())
            return

        result = asyncio.run(
            create_job(
                settings=settings,
                orchestrator=ChainlinkClient(settings),
                endpoint=endpoint,
                address=address,
            )
        )
    except JobSubmissionError as exc:
        if exc.__cause__ is not None:
            print_error(_err_console, exc.__cause__)
        print_error(_err_console, exc)
        raise typer.Exit(code=exc.exit_code)
    except JobCtlError as exc:
        print_error(_err_console, exc)
        raise typer.Exit(code=exc.exit_code)

    print_job_created(_console, result.job, as_json=as_json)


def run() -> None:
    app()


if __name__ == "__main__":
    run()
