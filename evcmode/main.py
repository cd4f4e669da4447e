from __future__ import annotations

import sys
from pathlib import Path
from typing import List, NoReturn, Optional

import typer

from evcmode.comparator import EvcComparator, selection_mode
from evcmode.config import get_settings
from evcmode.domain.errors import EvcError, PreconditionError
from evcmode.domain.models import HostRecord
from evcmode.providers.static import StaticInventory
from evcmode.reporter import print_baselines, print_compatibility
from evcmode.utils.logging import configure_logging

app = typer.Typer(help="EVC mode compatibility CLI.")

_INVENTORY_HELP = "Inventory JSON document (default from EVC_INVENTORY_PATH)."
_HOSTS_HELP = "Host names to evaluate (default: every host in the inventory)."

# inventory load and lookup failures are user input errors at this layer
_INPUT_ERRORS = (EvcError, KeyError, ValueError, OSError)


def _load(inventory: Optional[Path]) -> StaticInventory:
    settings = get_settings()
    configure_logging(level=settings.log_level, json_logs=settings.log_json)
    return StaticInventory.from_file(inventory or settings.inventory_path)


def _select_hosts(inventory: StaticInventory, names: Optional[List[str]]) -> List[HostRecord]:
    if names:
        return inventory.find_hosts(names)
    return inventory.hosts


def _fail(exc: Exception) -> NoReturn:
    typer.secho(str(exc), fg=typer.colors.RED, err=True)
    raise typer.Exit(code=2)


@app.command()
def info() -> None:
    """
    Show effective configuration values.
    """
    settings = get_settings()
    typer.echo(
        f"inventory={settings.inventory_path} | env={settings.app_env} "
        f"log_level={settings.log_level} json_logs={settings.log_json}"
    )


@app.command()
def modes(
    inventory: Optional[Path] = typer.Option(None, "--inventory", "-i", help=_INVENTORY_HELP),
    provider: Optional[str] = typer.Option(
        None,
        "--provider",
        "-p",
        help="Provider instance to list (default: the first one in the inventory).",
    ),
    vendor: Optional[str] = typer.Option(
        None,
        "--vendor",
        help="Restrict the listing to one CPU vendor (intel, amd).",
    ),
) -> None:
    """
    List the EVC modes a provider instance supports.
    """
    try:
        source = _load(inventory)
        if provider is None:
            if not source.provider_refs:
                raise PreconditionError("Inventory declares no providers")
            provider = source.provider_refs[0]
        baselines = EvcComparator(source).list_baselines(provider, vendor=vendor)
    except _INPUT_ERRORS as exc:
        _fail(exc)
    print_baselines(baselines, provider)


@app.command("max-common")
def max_common(
    hosts: Optional[List[str]] = typer.Argument(None, help=_HOSTS_HELP),
    inventory: Optional[Path] = typer.Option(None, "--inventory", "-i", help=_INVENTORY_HELP),
) -> None:
    """
    Print the most capable EVC mode every selected host supports, or "none".
    """
    try:
        source = _load(inventory)
        key = EvcComparator(source).max_common_baseline(_select_hosts(source, hosts))
    except _INPUT_ERRORS as exc:
        _fail(exc)
    typer.echo(key or "none")


@app.command()
def check(
    mode: str = typer.Option(..., "--mode", "-m", help="EVC mode key to check against."),
    compatible: bool = typer.Option(False, "--compatible", help="List compatible hosts."),
    incompatible: bool = typer.Option(False, "--incompatible", help="List incompatible hosts."),
    table: bool = typer.Option(
        False,
        "--table",
        help="Render a report for every host; cannot be combined with a selection flag.",
    ),
    hosts: Optional[List[str]] = typer.Argument(None, help=_HOSTS_HELP),
    inventory: Optional[Path] = typer.Option(None, "--inventory", "-i", help=_INVENTORY_HELP),
) -> None:
    """
    Filter hosts by compatibility with an EVC mode.
    """
    try:
        if table:
            if compatible or incompatible:
                raise PreconditionError(
                    "--table reports every host; drop --compatible/--incompatible"
                )
            want_compatible = None
        else:
            want_compatible = selection_mode(compatible, incompatible)
        source = _load(inventory)
        selected = _select_hosts(source, hosts)
        comparator = EvcComparator(source)
        if table:
            print_compatibility(comparator.compatibility_report(selected, mode), mode)
            return
        matches = comparator.filter_by_compatibility(selected, mode, want_compatible)
    except _INPUT_ERRORS as exc:
        _fail(exc)
    for host in matches:
        typer.echo(host.name)


def main() -> None:
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)


if __name__ == "__main__":
    main()
