"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar tablas/paneles en múltiples comandos (integers, demo).
"""

from __future__ import annotations

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

# (umbral mínimo inclusive, etiqueta, estilo) para tiradas 1..100.
LOOT_RARITIES: tuple[tuple[int, str, str], ...] = (
    (95, "LEGENDARY (5%)", "bold yellow"),
    (80, "EPIC (15%)", "magenta"),
    (60, "RARE (20%)", "blue"),
    (30, "UNCOMMON (30%)", "green"),
)
COMMON_RARITY = ("COMMON (30%)", "white")


def print_banner(console: Console) -> None:
    """Imprime el banner de bienvenida.

    Por qué aquí:
    - Evita dependencias circulares (main <-> doctor).
    - Permite desactivar banner en modos no interactivos (JSON/pipelines).
    """

    title = Text("Quantum RNG", style="bold cyan")
    subtitle = Text("Números aleatorios cuánticos • Rangos • Floats", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def loot_rarity(roll: int) -> tuple[str, str]:
    """Convierte una tirada 1..100 en (rareza, estilo Rich)."""

    for threshold, label, style in LOOT_RARITIES:
        if roll >= threshold:
            return label, style
    return COMMON_RARITY


def damage_multiplier(value: float) -> float:
    """Escala un float 0..1 al multiplicador 0.5x - 2.0x."""

    return 0.5 + value * 1.5


def build_integers_table(numbers: list[int]) -> Table:
    table = Table(title=f"{len(numbers)} quantum random integers")
    table.add_column("#", style="dim", justify="right")
    table.add_column("Value", style="cyan", justify="right")
    for index, number in enumerate(numbers):
        table.add_row(str(index), f"{number:,}")
    return table


def build_loot_panel(roll: int) -> Panel:
    label, style = loot_rarity(roll)
    body = Text.assemble("Loot drop: ", (f"{roll}/100", "bold"), " = ", (label, style))
    return Panel(body, title="Loot rarity", border_style="magenta")


def build_damage_panel(value: float, base_damage: int = 100) -> Panel:
    multiplier = damage_multiplier(value)
    final_damage = round(base_damage * multiplier)
    body = Text(f"Attack: {base_damage} base damage x {multiplier:.2f} = {final_damage} final damage")
    return Panel(body, title="Damage multiplier", border_style="red")
