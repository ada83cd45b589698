"""Rich renderables for the listing table and the single-component record."""

from typing import Iterable

from rich import box
from rich.table import Table
from rich.text import Text

from .models import ComponentEntry, Registry
from .scanners.size import format_size

LISTING_COLUMNS = (
    ("Component", 25),
    ("Description", 45),
    ("Size", 15),
    ("Version", 15),
)


def listing_title(registry: Registry) -> Text:
    return Text(f"\n🔎 {registry.title}")


def build_listing_table(entries: Iterable[ComponentEntry]) -> Table:
    """Bordered table with one row per component."""
    table = Table(
        box=box.SQUARE,
        border_style="blue",
        header_style="cyan",
        style="cyan",
        expand=True,
    )
    for header, ratio in LISTING_COLUMNS:
        table.add_column(header, ratio=ratio, justify="center")

    for entry in entries:
        table.add_row(
            Text(entry.display_name),
            Text(entry.description),
            Text(format_size(entry.size)),
            Text(entry.version),
        )

    return table


def detail_rows(entry: ComponentEntry, registry: Registry):
    """Ordered (label, value) pairs shown for a single component."""
    return [
        ("Component", entry.name),
        ("Registry", registry.title),
        ("Version", entry.version),
        ("Size", format_size(entry.size)),
        ("Description", entry.description),
        ("Path", str(entry.path)),
        ("Homepage", entry.homepage),
    ]


def build_detail_table(entry: ComponentEntry, registry: Registry) -> Table:
    info_table = Table(show_header=False, box=None, padding=(0, 1))
    info_table.add_column("Key", style="bold")
    info_table.add_column("Value")

    for label, value in detail_rows(entry, registry):
        info_table.add_row(f"{label}:", Text(value))

    return info_table


def delete_hint(name: str) -> Text:
    return Text(f"\n🙋 Delete the component, please use the command [s clean --component {name}]")
