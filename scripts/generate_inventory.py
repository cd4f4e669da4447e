"""
Sample inventory generator for the EVC mode toolkit.

Implements deterministic pseudo-random host generation over the built-in EVC
mode catalog and writes a JSON inventory document the CLI can read.
"""

from __future__ import annotations

import json
import random
import sys
from pathlib import Path
from typing import Any

import typer

from evcmode.domain.models import Vendor
from evcmode.providers.catalog import builtin_baselines

app = typer.Typer(help="Generate a synthetic EVC inventory document (JSON).")


def _generate_document(
    hosts: int,
    providers: int,
    seed: int,
    amd_ratio: float = 0.0,
    unknown_ratio: float = 0.0,
) -> dict[str, Any]:
    rng = random.Random(seed)
    catalog = builtin_baselines()
    by_vendor = {
        vendor: [record.key for record in catalog if record.vendor == vendor] for vendor in Vendor
    }
    provider_refs = [f"vc{index:02d}" for index in range(1, providers + 1)]

    host_entries: list[dict[str, Any]] = []
    for i in range(hosts):
        roll = rng.random()
        if roll < unknown_ratio:
            key: str | None = rng.choice([None, "unsupported-mode"])
        else:
            vendor = Vendor.AMD if rng.random() < amd_ratio else Vendor.INTEL
            key = rng.choice(by_vendor[vendor])
        host_entries.append(
            {
                "name": f"esx{i + 1:03d}",
                "max_baseline_key": key,
                "provider_ref": provider_refs[i % len(provider_refs)],
            }
        )

    return {
        "providers": {ref: {} for ref in provider_refs},
        "hosts": host_entries,
    }


def _write_document(path: Path, document: dict[str, Any]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as f:
        json.dump(document, f, indent=2)


@app.command()
def main(
    hosts: int = typer.Option(
        8,
        "--hosts",
        "-n",
        help="Number of hosts to generate.",
    ),
    providers: int = typer.Option(
        1,
        "--providers",
        "-p",
        help="Number of provider instances hosts are spread across.",
    ),
    amd_ratio: float = typer.Option(
        0.0,
        "--amd-ratio",
        help="Fraction of hosts with AMD CPUs.",
    ),
    unknown_ratio: float = typer.Option(
        0.0,
        "--unknown-ratio",
        help="Fraction of hosts reporting no or an unsupported EVC mode.",
    ),
    seed: int = typer.Option(
        42,
        "--seed",
        help="Deterministic RNG seed.",
    ),
    output: Path = typer.Option(
        Path("inventory.json"),
        "--output",
        "-o",
        help="Where to write the inventory document.",
    ),
) -> None:
    """
    Generate a synthetic inventory and write it as JSON.
    """
    if hosts < 1 or providers < 1:
        typer.echo("--hosts and --providers must be positive.", err=True)
        raise typer.Exit(code=2)

    document = _generate_document(
        hosts=hosts,
        providers=providers,
        seed=seed,
        amd_ratio=amd_ratio,
        unknown_ratio=unknown_ratio,
    )
    _write_document(output, document)
    typer.echo(f"Wrote {hosts} host(s) across {providers} provider(s) -> {output} (seed={seed})")


if __name__ == "__main__":
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)
