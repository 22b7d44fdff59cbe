"""CLI UI components (Rich).

Why separate components:
- Keeps command logic apart from presentation details.
- Lets `create` and `doctor` share the same error and config rendering.
"""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from core.config import AppSettings, env_name
from core.domain.models import CreatedJob


def print_error(console: Console, error: BaseException | str) -> None:
    """Print one diagnostic line; server text is escaped so it is never read as markup."""

    console.print(f"[bold red]Error:[/bold red] {escape(str(error))}")


def print_job_created(console: Console, job: CreatedJob, *, as_json: bool = False) -> None:
    if as_json:
        console.print_json(data=job.raw)
        return
    console.print(f"Deployed Job at: {escape(job.id)}")


def mask_secret(value: str) -> str:
    if len(value) <= 2:
        return "*" * len(value)
    return value[0] + "*" * (len(value) - 2) + value[-1]


def build_config_table(settings: AppSettings) -> Table:
    """Table with the resolved configuration (password masked)."""

    table = Table(title="Configuration")
    table.add_column("Variable", style="cyan", no_wrap=True)
    table.add_column("Value", style="white")
    table.add_row(env_name("url"), settings.url)
    table.add_row(env_name("email"), settings.email)
    table.add_row(env_name("password"), mask_secret(settings.password))
    table.add_row(env_name("http_timeout_seconds"), f"{settings.http_timeout_seconds:g}")
    table.add_row(env_name("user_agent"), settings.user_agent)
    return table
