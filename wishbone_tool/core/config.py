"""Build a validated `Config` from raw command-line flag values."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Protocol

from wishbone_tool.core.errors import NoOperationSpecified
from wishbone_tool.core.model import (
    DEFAULT_BIND_ADDR,
    DEFAULT_BIND_PORT,
    BridgeKind,
    Config,
    ServerKind,
)
from wishbone_tool.core.numbers import parse_u16, parse_u32

LOGGER = logging.getLogger(__name__)


class ArgumentLookup(Protocol):
    def value_of(self, name: str) -> str | None:
        """Return the raw value given for flag `name`, or None when absent."""


class MappingArguments:
    """Flag lookup over a plain mapping; None values count as absent."""

    def __init__(self, values: Mapping[str, str | None]) -> None:
        self._values = dict(values)

    def value_of(self, name: str) -> str | None:
        return self._values.get(name)


class LayeredArguments:
    """Flag lookup across several sources, earliest layer wins."""

    def __init__(self, *layers: ArgumentLookup) -> None:
        self._layers = layers

    def value_of(self, name: str) -> str | None:
        for layer in self._layers:
            value = layer.value_of(name)
            if value is not None:
                return value
        return None


def _optional(args: ArgumentLookup, name: str, parse: Callable[[str], int]) -> int | None:
    raw = args.value_of(name)
    if raw is None:
        return None
    return parse(raw)


def derive_bridge(args: ArgumentLookup) -> tuple[BridgeKind, str | None]:
    """Pick the bridge from the `serial` flag alone; `baud` never switches it."""
    serial_port = args.value_of("serial")
    if serial_port is None:
        return BridgeKind.USB, None
    return BridgeKind.UART, serial_port


def build_config(args: ArgumentLookup) -> Config:
    usb_vid = _optional(args, "vid", parse_u16)
    usb_pid = _optional(args, "pid", parse_u16)
    bridge_kind, serial_port = derive_bridge(args)
    serial_baud = _optional(args, "baud", parse_u32)
    memory_address = _optional(args, "address", parse_u32)
    memory_value = _optional(args, "value", parse_u32)

    raw_port = args.value_of("port")
    bind_port = parse_u32(raw_port) if raw_port is not None else DEFAULT_BIND_PORT
    bind_addr = args.value_of("bind-addr")
    if bind_addr is None:
        bind_addr = DEFAULT_BIND_ADDR

    server_kind = ServerKind.from_string(args.value_of("server-kind"))
    random_loops = _optional(args, "random-loops", parse_u32)
    random_address = _optional(args, "random-address", parse_u32)

    if memory_address is None and server_kind is ServerKind.NONE:
        raise NoOperationSpecified()

    LOGGER.debug(
        "Resolved %s bridge, server %s, bind %s:%s",
        bridge_kind.value,
        server_kind.value,
        bind_addr,
        bind_port,
    )
    return Config(
        server_kind=server_kind,
        bridge_kind=bridge_kind,
        usb_vid=usb_vid,
        usb_pid=usb_pid,
        memory_address=memory_address,
        memory_value=memory_value,
        serial_port=serial_port,
        serial_baud=serial_baud,
        bind_addr=bind_addr,
        bind_port=bind_port,
        random_loops=random_loops,
        random_address=random_address,
    )
