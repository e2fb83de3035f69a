"""Core data models shared by the config builder, API, and CLI."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from wishbone_tool.core.errors import UnknownServerKind

DEFAULT_BIND_ADDR = "127.0.0.1"
DEFAULT_BIND_PORT = 3333


class BridgeKind(str, Enum):
    USB = "usb"
    UART = "uart"


class ServerKind(str, Enum):
    """Long-running server or operation started after configuration."""

    NONE = "none"
    GDB = "gdb"
    WISHBONE = "wishbone"
    RANDOM_TEST = "random-test"

    @classmethod
    def from_string(cls, value: str | None) -> ServerKind:
        if value is None:
            return cls.NONE
        for kind in cls:
            if kind.value == value:
                return kind
        raise UnknownServerKind(value)


@dataclass(frozen=True)
class Config:
    server_kind: ServerKind
    bridge_kind: BridgeKind = BridgeKind.USB
    usb_vid: int | None = None
    usb_pid: int | None = None
    memory_address: int | None = None
    memory_value: int | None = None
    serial_port: str | None = None
    serial_baud: int | None = None
    bind_addr: str = DEFAULT_BIND_ADDR
    bind_port: int = DEFAULT_BIND_PORT
    random_loops: int | None = None
    random_address: int | None = None
