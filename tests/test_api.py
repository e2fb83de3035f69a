from __future__ import annotations

from pathlib import Path

import pytest

from wishbone_tool.api import (
    BridgeKind,
    ConfigError,
    NoOperationSpecified,
    ServerKind,
    UnknownServerKind,
    WishboneToolError,
    resolve_config,
)


@pytest.fixture(autouse=True)
def _isolated_xdg(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "cfg"))


def _write_default_profile(tmp_path: Path, content: str) -> None:
    path = tmp_path / "cfg" / "wishbone-tool" / "profile.yaml"
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")


def test_resolve_config_from_flags() -> None:
    config = resolve_config({"address": "0x1000", "value": "7"})
    assert config.memory_address == 0x1000
    assert config.memory_value == 7
    assert config.bridge_kind is BridgeKind.USB


def test_profile_supplies_missing_flags(tmp_path: Path) -> None:
    _write_default_profile(tmp_path, "serial: /dev/ttyUSB1\nserver-kind: gdb\nport: '2331'\n")

    config = resolve_config({"port": "4000"})
    assert config.bridge_kind is BridgeKind.UART
    assert config.serial_port == "/dev/ttyUSB1"
    assert config.server_kind is ServerKind.GDB
    assert config.bind_port == 4000


def test_profile_can_be_skipped(tmp_path: Path) -> None:
    _write_default_profile(tmp_path, "server-kind: gdb\n")
    with pytest.raises(NoOperationSpecified):
        resolve_config({}, use_profile=False)


def test_errors_share_base_classes() -> None:
    with pytest.raises(UnknownServerKind) as excinfo:
        resolve_config({"server-kind": "jtag"})
    assert isinstance(excinfo.value, ConfigError)
    assert isinstance(excinfo.value, WishboneToolError)
