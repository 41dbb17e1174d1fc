"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio

import typer
from rich.console import Console
from rich.table import Table

from quantum_rng.core.config import AppSettings, write_user_env_vars
from quantum_rng.core.domain.errors import QuantumRNGError
from quantum_rng.core.services.quantum_random import QuantumRandom

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


async def _check_api(settings: AppSettings) -> tuple[bool, str]:
    """Request a single integer to validate key and connectivity."""

    async with QuantumRandom.from_settings(settings) as client:
        try:
            numbers = await client.get_integers(1)
        except QuantumRNGError as exc:
            return False, f"{exc.kind.value}: {exc.message}"
    return True, f"received {numbers[0]}"


@app.command()
def run() -> None:
    """Run baseline diagnostics and show recommended fixes."""

    settings = AppSettings()

    table = Table(title="Quantum RNG Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    # Config
    has_key = bool(settings.api_key and settings.api_key.strip())
    table.add_row("API key", "OK" if has_key else "MISSING", "Configured" if has_key else "Run `quantum-rng doctor setup`")
    table.add_row("Base URL", "OK", settings.base_url)
    table.add_row("Timeout", "OK", f"{settings.http_timeout_seconds:g}s")
    table.add_row("User-Agent", "OK", settings.user_agent)

    # API (best-effort)
    if has_key:
        ok_api, detail_api = asyncio.run(_check_api(settings))
        table.add_row("API request", "OK" if ok_api else "FAIL", detail_api)
    else:
        table.add_row("API request", "SKIPPED", "No API key")

    _console.print(table)


@app.command()
def setup() -> None:
    """Interactive setup (stores the API key in the user config .env)."""

    settings = AppSettings()
    api_key = typer.prompt("API key", hide_input=True, confirmation_prompt=False).strip()
    base_url = typer.prompt("Base URL", default=settings.base_url, show_default=True).strip()

    if not api_key:
        raise typer.BadParameter("API key is required")

    env_path = write_user_env_vars(
        {
            "QUANTUM_RNG_API_KEY": api_key,
            "QUANTUM_RNG_BASE_URL": base_url,
        }
    )

    _console.print(f"[green]Saved API config to:[/green] {env_path}")
