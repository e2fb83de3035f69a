from __future__ import annotations

from pathlib import Path

import pytest

from wishbone_tool.core.errors import ProfileLoadError, ProfileValidationError
from wishbone_tool.core.profile_loader import default_profile_path, load_profile


def _write_profile(path: Path, content: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


def test_default_profile_path_follows_xdg(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "cfg"))
    assert default_profile_path() == tmp_path / "cfg" / "wishbone-tool" / "profile.yaml"


def test_missing_default_profile_is_empty(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "cfg"))
    loaded = load_profile()
    assert loaded.values == {}
    assert loaded.source is None


def test_missing_explicit_profile_rejected(tmp_path: Path) -> None:
    with pytest.raises(ProfileLoadError):
        load_profile(tmp_path / "nope.yaml")


def test_scalars_stay_strings(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "cfg"))
    _write_profile(
        tmp_path / "cfg" / "wishbone-tool" / "profile.yaml",
        """
serial: /dev/ttyUSB0
baud: 115200
vid: 0x1209
address: 010
server-kind: wishbone
""",
    )

    loaded = load_profile()
    assert loaded.values == {
        "serial": "/dev/ttyUSB0",
        "baud": "115200",
        "vid": "0x1209",
        "address": "010",
        "server-kind": "wishbone",
    }
    assert loaded.value_of("baud") == "115200"
    assert loaded.value_of("pid") is None


def test_unknown_key_rejected(tmp_path: Path) -> None:
    path = _write_profile(tmp_path / "p.yaml", "speed: fast\n")
    with pytest.raises(ProfileValidationError, match="speed"):
        load_profile(path)


def test_non_string_value_rejected(tmp_path: Path) -> None:
    path = _write_profile(tmp_path / "p.yaml", "serial:\n  - /dev/ttyUSB0\n")
    with pytest.raises(ProfileValidationError):
        load_profile(path)


def test_duplicate_keys_rejected(tmp_path: Path) -> None:
    path = _write_profile(tmp_path / "p.yaml", "port: '1'\nport: '2'\n")
    with pytest.raises(ProfileValidationError, match="Duplicate key"):
        load_profile(path)


def test_root_must_be_mapping(tmp_path: Path) -> None:
    path = _write_profile(tmp_path / "p.yaml", "- gdb\n")
    with pytest.raises(ProfileValidationError):
        load_profile(path)


def test_invalid_yaml_rejected(tmp_path: Path) -> None:
    path = _write_profile(tmp_path / "p.yaml", "serial: [unclosed\n")
    with pytest.raises(ProfileValidationError):
        load_profile(path)


def test_empty_profile_warns(tmp_path: Path) -> None:
    path = _write_profile(tmp_path / "p.yaml", "")
    loaded = load_profile(path)
    assert loaded.values == {}
    assert loaded.source == path
    assert any("empty" in warning for warning in loaded.warnings)
