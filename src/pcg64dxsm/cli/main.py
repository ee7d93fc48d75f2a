"""
PCG64-DXSM CLI

Command-line interface for the PCG64-DXSM engine.

Usage:
    pcg64dxsm draw --state 0x1 --increment 0x1 --count 5
    pcg64dxsm below 6 --count 10
    pcg64dxsm uuid --count 3
    pcg64dxsm state --position 1000 --jumps 1
    pcg64dxsm version

Without --state the seed comes from PCG64DXSM_SEED_STATE /
PCG64DXSM_SEED_INCREMENT, or from system entropy when those are unset.
--increment on its own is rejected.
"""

import json
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from pcg64dxsm import __version__
from pcg64dxsm.core.config import configure_logging, get_settings
from pcg64dxsm.core.errors import PcgError
from pcg64dxsm.engine.generator import Pcg64Dxsm
from pcg64dxsm.engine.seeding import PairSeed
from pcg64dxsm.toolkit import RandomToolkit

# Create the main app
app = typer.Typer(
    name="pcg64dxsm",
    help="PCG64-DXSM - deterministic 128-bit pseudo-random engine",
    add_completion=False,
)

# Console for rich output
console = Console()

STATE_HELP = "Seed state (hex with 0x prefix, or decimal)"
INCREMENT_HELP = "Seed increment / stream (forced odd)"


@app.callback()
def main(
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Override PCG64DXSM_LOG_LEVEL"),
) -> None:
    """PCG64-DXSM engine commands."""
    settings = get_settings()
    if log_level:
        settings = settings.model_copy(update={"log_level": log_level})
    configure_logging(settings)


def _build_generator(state: Optional[str], increment: Optional[str], position: int = 0) -> Pcg64Dxsm:
    """Seed from CLI options, falling back to settings, then entropy."""
    if state is None and increment is not None:
        console.print("[red]✗[/red] --increment requires --state")
        raise typer.Exit(code=1)
    try:
        if state is not None:
            rng = Pcg64Dxsm(PairSeed(state=state, increment=increment or "1"))
        else:
            rng = Pcg64Dxsm(get_settings().seed_input())
        if position:
            rng.seek(position)
    except PcgError as e:
        console.print(f"[red]✗[/red] {e}")
        raise typer.Exit(code=1)
    return rng


# =============================================================================
# Commands
# =============================================================================


@app.command()
def draw(
    count: int = typer.Option(1, "--count", "-n", min=0, help="Number of draws"),
    state: Optional[str] = typer.Option(None, "--state", "-s", help=STATE_HELP),
    increment: Optional[str] = typer.Option(None, "--increment", "-i", help=INCREMENT_HELP),
    position: int = typer.Option(0, "--position", "-p", help="Seek here before drawing"),
    as_hex: bool = typer.Option(False, "--hex", help="Print draws as hex"),
) -> None:
    """Print raw 64-bit draws, one per line."""
    rng = _build_generator(state, increment, position)
    for _ in range(count):
        value = rng.next_uint64()
        console.print(f"0x{value:016x}" if as_hex else str(value))


@app.command()
def below(
    bound: int = typer.Argument(..., help="Exclusive upper bound (1..2^64)"),
    count: int = typer.Option(1, "--count", "-n", min=0, help="Number of draws"),
    state: Optional[str] = typer.Option(None, "--state", "-s", help=STATE_HELP),
    increment: Optional[str] = typer.Option(None, "--increment", "-i", help=INCREMENT_HELP),
) -> None:
    """Print unbiased integers in [0, BOUND)."""
    rng = _build_generator(state, increment)
    try:
        values = [rng.int_below(bound) for _ in range(count)]
    except PcgError as e:
        console.print(f"[red]✗[/red] {e}")
        raise typer.Exit(code=1)
    for value in values:
        console.print(str(value))


@app.command()
def uuid(
    count: int = typer.Option(1, "--count", "-n", min=0, help="Number of UUIDs"),
    state: Optional[str] = typer.Option(None, "--state", "-s", help=STATE_HELP),
    increment: Optional[str] = typer.Option(None, "--increment", "-i", help=INCREMENT_HELP),
) -> None:
    """Print version 4 UUIDs."""
    rand = RandomToolkit(_build_generator(state, increment))
    for _ in range(count):
        console.print(rand.uuid4())


@app.command("state")
def show_state(
    state: Optional[str] = typer.Option(None, "--state", "-s", help=STATE_HELP),
    increment: Optional[str] = typer.Option(None, "--increment", "-i", help=INCREMENT_HELP),
    position: int = typer.Option(0, "--position", "-p", help="Seek here first"),
    jumps: int = typer.Option(0, "--jumps", "-j", help="Jump this many times after seeking"),
    as_table: bool = typer.Option(False, "--table", help="Render as a table instead of JSON"),
) -> None:
    """Print the exported generator state."""
    rng = _build_generator(state, increment, position)
    if jumps:
        rng = rng.jumped(jumps)
    record = rng.export_state()

    if not as_table:
        console.print_json(json.dumps(record.model_dump()))
        return

    table = Table(title="Generator State")
    table.add_column("Field", style="cyan")
    table.add_column("Value")
    table.add_row("state", record.state)
    table.add_row("increment", record.increment)
    table.add_row("position", record.position)
    console.print(table)


@app.command()
def version() -> None:
    """Show the package version."""
    console.print(f"pcg64dxsm {__version__}")


if __name__ == "__main__":
    app()
