"""Core configuration.

Why here:
- Centralizes environment variables (pydantic-settings) without leaking them into the CLI.
- Lets adapters (HTTP) read the node URL, credentials and timeouts consistently.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from dotenv import dotenv_values
from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from core.domain.errors import ConfigurationError
from core.domain.models import Credentials

ENV_PREFIX = "CHAINLINK_"


def get_user_config_dir() -> Path:
    """Per-user configuration directory (cross-platform, no extra dependencies)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "ei-jobctl"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "ei-jobctl"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "ei-jobctl"
    return Path.home() / ".config" / "ei-jobctl"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def _quote_env_value(value: str) -> str:
    """Double-quote a value so python-dotenv reads back exactly `value`."""

    escaped = (
        value.replace("\\", "\\\\")
        .replace('"', '\\"')
        .replace("\n", "\\n")
        .replace("\r", "\\r")
    )
    return f'"{escaped}"'


def write_user_env_vars(values: dict[str, str], env_path: Path | None = None) -> Path:
    """Write or update variables in the user's global .env."""

    env_path = env_path or get_user_env_file()
    for key, value in values.items():
        # python-dotenv expands ${NAME} on read and has no escape for it.
        if value is not None and "${" in value:
            raise ValueError(f"{key} cannot contain '${{': it would be expanded when the .env is read")
    env_path.parent.mkdir(parents=True, exist_ok=True)

    existing: dict[str, str] = {}
    if env_path.exists():
        saved = dotenv_values(env_path, encoding="utf-8", interpolate=False)
        existing = {k: v for k, v in saved.items() if v is not None}

    existing.update({k: v for k, v in values.items() if v is not None})

    lines = ["# ei-jobctl user config (.env)"]
    for key in sorted(existing.keys()):
        lines.append(f"{key}={_quote_env_value(existing[key])}")
    env_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return env_path


class AppSettings(BaseSettings):
    """Application configuration.

    Why pydantic-settings:
    - Typed and validated at the edge (env vars) so the rest of the code trusts it.
    - A single configuration contract for the CLI and the HTTP adapter.
    """

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        extra="ignore",
        case_sensitive=False,
        # Project .env first (dev), then the user's global config.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    url: str = Field(
        ...,
        min_length=1,
        description="Base URL of the Chainlink node (e.g. http://localhost:6688).",
    )
    email: str = Field(
        default="notreal@fakeemail.ch",
        min_length=1,
        description="Login email for the node's session endpoint.",
    )
    password: str = Field(
        default="twochains",
        min_length=1,
        description="Login password for the node's session endpoint.",
    )
    http_timeout_seconds: float = Field(
        default=20.0,
        gt=0,
        description="Timeout per request (seconds).",
    )
    user_agent: str = Field(
        default="ei-jobctl/0.1",
        min_length=1,
        description="User-Agent sent to the node.",
    )

    def credentials(self) -> Credentials:
        return Credentials(email=self.email, password=self.password)


def env_name(field_name: str) -> str:
    """Environment variable backing a settings field (`url` -> `CHAINLINK_URL`)."""

    return f"{ENV_PREFIX}{field_name}".upper()


def load_settings(**overrides: object) -> AppSettings:
    """Build `AppSettings`, turning validation failures into `ConfigurationError`.

    The message names the offending environment variable(s) so a missing
    `CHAINLINK_URL` is reported before any network activity.
    """

    try:
        return AppSettings(**overrides)
    except ValidationError as exc:
        problems: list[str] = []
        for err in exc.errors():
            loc = err.get("loc") or ()
            name = env_name(str(loc[0])) if loc else ENV_PREFIX.rstrip("_")
            if err.get("type") == "missing":
                problems.append(f"missing required configuration value {name}")
            else:
                problems.append(f"invalid configuration value {name}: {err.get('msg')}")
        raise ConfigurationError("; ".join(problems)) from exc
