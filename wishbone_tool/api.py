"""Stable public API for building tooling on top of wishbone-tool.

Bridge and server front-ends should obtain their `Config` through this module
rather than importing from `wishbone_tool.core` directly.
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path

from wishbone_tool.core.config import (
    ArgumentLookup,
    LayeredArguments,
    MappingArguments,
    build_config,
    derive_bridge,
)
from wishbone_tool.core.errors import (
    ConfigError,
    NoOperationSpecified,
    NumberParseError,
    ParseFailure,
    ProfileLoadError,
    ProfileValidationError,
    UnknownServerKind,
    WishboneToolError,
)
from wishbone_tool.core.model import BridgeKind, Config, ServerKind
from wishbone_tool.core.numbers import detect_base, parse_u16, parse_u32
from wishbone_tool.core.profile_loader import LoadedProfile, load_profile

__all__ = [
    "WishboneToolError",
    "ConfigError",
    "NumberParseError",
    "ParseFailure",
    "UnknownServerKind",
    "NoOperationSpecified",
    "ProfileLoadError",
    "ProfileValidationError",
    "ArgumentLookup",
    "MappingArguments",
    "LayeredArguments",
    "BridgeKind",
    "ServerKind",
    "Config",
    "LoadedProfile",
    "detect_base",
    "parse_u16",
    "parse_u32",
    "build_config",
    "derive_bridge",
    "load_profile",
    "resolve_config",
]


def resolve_config(
    flags: Mapping[str, str | None],
    *,
    profile_path: Path | None = None,
    use_profile: bool = True,
) -> Config:
    """Build a `Config` from `flags`, falling back to profile defaults.

    Values in `flags` always take precedence over the profile.
    """
    layers: list[ArgumentLookup] = [MappingArguments(flags)]
    if use_profile:
        layers.append(load_profile(profile_path))
    return build_config(LayeredArguments(*layers))
