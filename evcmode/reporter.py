from __future__ import annotations

from typing import Optional, Sequence

from rich import box
from rich.console import Console
from rich.table import Table

from evcmode.comparator import HostCompatibility
from evcmode.domain.models import BaselineRecord


def print_baselines(
    baselines: Sequence[BaselineRecord],
    provider_ref: str,
    console: Optional[Console] = None,
) -> None:
    """
    Render a provider catalog as a rich table, grouped by vendor then tier.
    """
    console = console or Console()

    if not baselines:
        console.print(f"[yellow]Provider '{provider_ref}' reports no EVC modes.[/yellow]")
        return

    table = Table(
        title=f"EVC Modes ({provider_ref})",
        box=box.ROUNDED,
        caption="Higher tiers include every feature of lower tiers of the same vendor",
    )
    table.add_column("Key", style="cyan", no_wrap=True)
    table.add_column("Vendor", style="magenta")
    table.add_column("Tier", justify="right", style="green")
    table.add_column("Name")

    for record in sorted(baselines, key=lambda r: (r.vendor.value, r.tier)):
        table.add_row(record.key, str(record.vendor), str(record.tier), record.label)

    console.print(table)


def print_compatibility(
    rows: Sequence[HostCompatibility],
    target_key: str,
    console: Optional[Console] = None,
) -> None:
    """
    Render a compatibility report, one row per host in input order.
    """
    console = console or Console()

    if not rows:
        console.print("[yellow]No hosts to display.[/yellow]")
        return

    compatible_count = sum(1 for row in rows if row.compatible)
    table = Table(
        title=f"Compatibility with {target_key}",
        box=box.ROUNDED,
        caption=f"{compatible_count} of {len(rows)} host(s) compatible",
    )
    table.add_column("Host", style="cyan", no_wrap=True)
    table.add_column("Provider", style="blue")
    table.add_column("Max EVC Mode", style="magenta")
    table.add_column("Compatible", justify="center")

    for row in rows:
        if row.baseline is None:
            # unknown to the catalog (or not reported at all)
            mode = f"[dim]{row.host.max_baseline_key or 'N/A'} (unknown)[/dim]"
        else:
            mode = row.baseline.key
        verdict = "[green]yes[/green]" if row.compatible else "[red]no[/red]"
        table.add_row(row.host.name, row.host.provider_ref, mode, verdict)

    console.print(table)


__all__ = ["print_baselines", "print_compatibility"]
