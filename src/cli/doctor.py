"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio

import httpx
import typer
from rich.console import Console
from rich.table import Table

from adapters.http_client import build_async_client
from cli.ui_components import build_config_table, print_error
from core.config import AppSettings, env_name, load_settings, write_user_env_vars
from core.domain.errors import ConfigurationError

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console(soft_wrap=True)
_err_console = Console(stderr=True, soft_wrap=True)


async def _check_http(settings: AppSettings) -> tuple[bool, str]:
    try:
        async with build_async_client(settings) as client:
            response = await client.get(settings.url)
        return True, f"HTTP {response.status_code}"
    except (httpx.HTTPError, httpx.InvalidURL) as exc:
        return False, str(exc)


@app.command()
def run() -> None:
    """Show the resolved configuration and check the node is reachable."""

    try:
        settings = load_settings()
    except ConfigurationError as exc:
        print_error(_err_console, exc)
        raise typer.Exit(code=exc.exit_code)

    _console.print(build_config_table(settings))

    ok_http, detail_http = asyncio.run(_check_http(settings))

    table = Table(title="ei-jobctl Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")
    table.add_row("Node reachable", "OK" if ok_http else "FAIL", detail_http)
    _console.print(table)

    if not ok_http:
        raise typer.Exit(code=1)


@app.command(name="setup")
def setup() -> None:
    """Interactive setup (stores node URL and credentials in the user config .env)."""

    url = typer.prompt("Chainlink node URL", default="http://localhost:6688", show_default=True).strip()
    email = typer.prompt("Login email", default="notreal@fakeemail.ch", show_default=True).strip()
    password = typer.prompt("Login password", hide_input=True, confirmation_prompt=False)

    if not url or not email or not password:
        raise typer.BadParameter("url, email and password are required")

    try:
        env_path = write_user_env_vars(
            {
                env_name("url"): url,
                env_name("email"): email,
                env_name("password"): password,
            }
        )
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc

    _console.print(f"[green]Saved node config to:[/green] {env_path}")
