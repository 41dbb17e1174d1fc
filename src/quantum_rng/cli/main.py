"""CLI de quantum-rng (Typer + Rich).

Por qué una CLI:
- Equivale a la escena de demo del SDK de Unity: permite probar la API key,
  pedir números y ver los ejemplos de juego desde la terminal.
- Los comandos solo orquestan; la lógica vive en `QuantumRandom`.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Awaitable, Callable, TypeVar

import typer
from rich.console import Console
from rich.logging import RichHandler

from quantum_rng.cli import doctor
from quantum_rng.cli.ui_components import (
    build_damage_panel,
    build_integers_table,
    build_loot_panel,
    print_banner,
)
from quantum_rng.core.config import AppSettings
from quantum_rng.core.domain.errors import QuantumRNGError
from quantum_rng.core.services.quantum_random import QuantumRandom

T = TypeVar("T")

app = typer.Typer(no_args_is_help=True, help="Quantum random numbers from the hosted QRNG API.")
app.add_typer(doctor.app, name="doctor")

_console = Console()

ApiKeyOption = typer.Option(
    None,
    "--api-key",
    envvar="QUANTUM_RNG_API_KEY",
    help="API key (defaults to QUANTUM_RNG_API_KEY / user config).",
    show_default=False,
)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _build_client(api_key: str | None) -> QuantumRandom:
    settings = AppSettings()
    client = QuantumRandom.from_settings(settings)
    if api_key:
        client.initialize(api_key)
    if not client.is_initialized:
        _console.print(
            "[red]No API key configured.[/red] Pass --api-key, set QUANTUM_RNG_API_KEY "
            "or run `quantum-rng doctor setup`."
        )
        raise typer.Exit(code=1)
    return client


def _run(api_key: str | None, action: Callable[[QuantumRandom], Awaitable[T]]) -> T:
    """Ejecuta `action` con un cliente listo y traduce errores del SDK a exit code 1."""

    async def _main(client: QuantumRandom) -> T:
        async with client:
            return await action(client)

    try:
        return asyncio.run(_main(_build_client(api_key)))
    except QuantumRNGError as exc:
        _console.print(f"[red]{exc.kind.value}:[/red] {exc.message}")
        raise typer.Exit(code=1) from exc


@app.callback()
def main_callback(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    _configure_logging(verbose)


@app.command()
def integers(
    count: int = typer.Option(10, "--count", "-n", help="How many integers (1-1000)."),
    api_key: str | None = ApiKeyOption,
) -> None:
    """Fetch raw signed 32-bit integers."""

    numbers = _run(api_key, lambda client: client.get_integers(count))
    _console.print(build_integers_table(numbers))


@app.command(name="range")
def range_(
    minimum: int = typer.Argument(..., help="Minimum value (inclusive)."),
    maximum: int = typer.Argument(..., help="Maximum value (inclusive)."),
    unbiased: bool = typer.Option(False, "--unbiased", help="Use rejection sampling (no modulo bias)."),
    api_key: str | None = ApiKeyOption,
) -> None:
    """Fetch one integer in [MINIMUM, MAXIMUM]."""

    value = _run(
        api_key,
        lambda client: client.get_integer_in_range(minimum, maximum, unbiased=unbiased),
    )
    _console.print(value)


@app.command(name="float")
def float_(api_key: str | None = ApiKeyOption) -> None:
    """Fetch one float in [0.0, 1.0]."""

    value = _run(api_key, lambda client: client.get_float())
    _console.print(f"{value:.10f}")


@app.command()
def demo(
    count: int = typer.Option(10, "--count", "-n", help="How many integers for the first example."),
    api_key: str | None = ApiKeyOption,
) -> None:
    """Run the game examples: raw numbers, loot rarity and damage multiplier."""

    print_banner(_console)

    async def _examples(client: QuantumRandom) -> tuple[list[int], int, float]:
        numbers = await client.get_integers(count)
        roll = await client.get_integer_in_range(1, 100)
        value = await client.get_float()
        return numbers, roll, value

    numbers, roll, value = _run(api_key, _examples)
    _console.print(build_integers_table(numbers))
    _console.print(build_loot_panel(roll))
    _console.print(build_damage_panel(value))


def run() -> None:
    app()
