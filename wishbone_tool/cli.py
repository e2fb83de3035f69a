"""Typer CLI entrypoint."""

from __future__ import annotations

import logging
from dataclasses import fields
from enum import Enum
from pathlib import Path

import typer

from wishbone_tool.core.config import ArgumentLookup, LayeredArguments, MappingArguments, build_config
from wishbone_tool.core.errors import WishboneToolError
from wishbone_tool.core.model import Config, ServerKind
from wishbone_tool.core.profile_loader import load_profile

app = typer.Typer(help="Wishbone bridge configuration for USB and UART debug targets")

_HEX_FIELDS = {"usb_vid", "usb_pid", "memory_address", "memory_value", "random_address"}


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def _format_field(name: str, value: object) -> str:
    if value is None:
        return "-"
    if isinstance(value, Enum):
        return value.value
    if name in _HEX_FIELDS:
        width = 4 if name in {"usb_vid", "usb_pid"} else 8
        return f"0x{value:0{width}x}"
    return str(value)


def _render(config: Config) -> list[str]:
    return [f"{f.name}: {_format_field(f.name, getattr(config, f.name))}" for f in fields(config)]


@app.command("config")
def show_config(
    address: str | None = typer.Argument(None, help="Memory address to read or write"),
    value: str | None = typer.Argument(None, help="Value to write to ADDRESS"),
    vid: str | None = typer.Option(None, "--vid", help="USB vendor ID"),
    pid: str | None = typer.Option(None, "--pid", help="USB product ID"),
    serial: str | None = typer.Option(None, "-u", "--serial", help="Serial port; selects the UART bridge"),
    baud: str | None = typer.Option(None, "-b", "--baud", help="UART baud rate"),
    server: str | None = typer.Option(None, "-s", "--server", help="Server kind to start"),
    port: str | None = typer.Option(None, "-n", "--port", help="Port to listen on"),
    bind_addr: str | None = typer.Option(None, "--bind-addr", help="Address to listen on"),
    random_loops: str | None = typer.Option(None, "--random-loops", help="Iterations for random-test"),
    random_address: str | None = typer.Option(None, "--random-address", help="Address for random-test"),
    profile: Path | None = typer.Option(None, "--profile", help="YAML profile with default flag values"),
    no_profile: bool = typer.Option(False, "--no-profile", help="Ignore the default profile"),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Enable debug logging"),
) -> None:
    """Resolve the command line (over any profile) and print the configuration."""
    _configure_logging(verbose)
    flags = MappingArguments(
        {
            "address": address,
            "value": value,
            "vid": vid,
            "pid": pid,
            "serial": serial,
            "baud": baud,
            "server-kind": server,
            "port": port,
            "bind-addr": bind_addr,
            "random-loops": random_loops,
            "random-address": random_address,
        }
    )
    args: ArgumentLookup
    try:
        if no_profile:
            args = flags
        else:
            loaded = load_profile(profile)
            for warning in loaded.warnings:
                typer.echo(f"Warning: {warning}", err=True)
            args = LayeredArguments(flags, loaded)
        config = build_config(args)
    except WishboneToolError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1) from None

    for line in _render(config):
        typer.echo(line)


@app.command("servers")
def list_servers() -> None:
    """List server kinds accepted by --server."""
    for kind in ServerKind:
        if kind is ServerKind.NONE:
            continue
        typer.echo(kind.value)


def run() -> None:
    app()


if __name__ == "__main__":
    run()
