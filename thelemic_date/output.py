"""Output helpers for presenting a computed Thelemic date."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .models import ThelemicDate, ZodiacPosition
from .zodiac import BODY_SYMBOLS, SIGN_SYMBOLS

if TYPE_CHECKING:
    from rich.console import Console


def format_thelemic_date(date: ThelemicDate) -> str:
    """The canonical one-line rendering."""

    return (
        f"☉ in {date.sun.degree}º {date.sun.sign} : "
        f"☽ in {date.moon.degree}º {date.moon.sign} : "
        f"dies {date.dies} : "
        f"Anno {date.anno} æræ legis"
    )


def _format_coord(value: float, positive_label: str, negative_label: str, precision: int = 4) -> str:
    """Return a signed coordinate with cardinal direction."""

    hemi = positive_label if value >= 0 else negative_label
    return f"{abs(value):.{precision}f}° {hemi}"


def _format_position(pos: ZodiacPosition) -> str:
    minutes = int((pos.longitude % 1.0) * 60)
    return f"{pos.degree:2d}°{minutes:02d}' {SIGN_SYMBOLS[pos.sign]} {pos.sign} ({pos.longitude:.4f}°)"


def print_details(date: ThelemicDate, console: Console | None = None) -> None:
    """Render the inputs and intermediate values behind a date as a Rich table."""

    from rich import box
    from rich.console import Console
    from rich.table import Table

    console = console or Console()
    loc = date.location

    table = Table(box=box.SIMPLE_HEAVY, show_header=False)
    table.add_column("Field", style="bold cyan")
    table.add_column("Value")
    table.add_row("Location", loc.address)
    table.add_row(
        "Coordinates",
        f"{_format_coord(loc.latitude, 'N', 'S')}, {_format_coord(loc.longitude, 'E', 'W')}",
    )
    table.add_row("Timezone", loc.timezone)
    table.add_row("Local", date.datetime_local.strftime("%Y-%m-%d %H:%M:%S %Z"))
    table.add_row("UTC", date.datetime_utc.strftime("%Y-%m-%d %H:%M:%S"))
    table.add_row("Julian day", f"{date.julian_day:.6f}")
    for pos in (date.sun, date.moon):
        table.add_row(f"{BODY_SYMBOLS[pos.body]} {pos.body}", _format_position(pos))
    table.add_row("Dies", date.dies)
    table.add_row("Anno", f"{date.anno} ({date.anno_years} years since 1904)")

    console.print(table)
    console.print(format_thelemic_date(date), markup=False, highlight=False)
