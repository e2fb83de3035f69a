"""Loading and validation of YAML profiles holding default flag values."""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from importlib import resources
from pathlib import Path
from typing import Any

import yaml
from jsonschema import ValidationError, validators

from wishbone_tool.core.errors import ProfileLoadError, ProfileValidationError

PROFILE_FILENAME = "profile.yaml"
LOGGER = logging.getLogger(__name__)

# Scalars stay strings so literals such as 0x10 or 010 reach the number parser untouched.
_STRING_ONLY_TAGS = {
    "tag:yaml.org,2002:bool",
    "tag:yaml.org,2002:int",
    "tag:yaml.org,2002:float",
    "tag:yaml.org,2002:timestamp",
}


class UniqueKeyLoader(yaml.SafeLoader):
    """YAML loader that rejects duplicate mapping keys."""


UniqueKeyLoader.yaml_implicit_resolvers = {
    first_char: [(tag, regexp) for tag, regexp in mappings if tag not in _STRING_ONLY_TAGS]
    for first_char, mappings in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


def _construct_mapping(loader: UniqueKeyLoader, node: yaml.Node, deep: bool = False) -> dict[str, Any]:
    mapping: dict[str, Any] = {}
    for key_node, value_node in node.value:
        key = loader.construct_object(key_node, deep=deep)
        if key in mapping:
            raise ProfileValidationError(f"Duplicate key '{key}' in YAML document")
        mapping[key] = loader.construct_object(value_node, deep=deep)
    return mapping


UniqueKeyLoader.add_constructor(
    yaml.resolver.BaseResolver.DEFAULT_MAPPING_TAG,
    _construct_mapping,
)


@dataclass(frozen=True)
class LoadedProfile:
    values: dict[str, str]
    source: Path | None
    warnings: tuple[str, ...]

    def value_of(self, name: str) -> str | None:
        return self.values.get(name)


def _load_schema_validator() -> Any:
    schema_text = resources.files("wishbone_tool.schemas").joinpath("profile.schema.json").read_text(
        encoding="utf-8"
    )
    schema = json.loads(schema_text)
    validator_cls = validators.validator_for(schema)
    validator_cls.check_schema(schema)
    return validator_cls(schema)


def default_profile_path() -> Path:
    xdg_config = Path(os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config"))
    return xdg_config / "wishbone-tool" / PROFILE_FILENAME


def _read_yaml(path: Path) -> Any:
    try:
        content = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ProfileLoadError(f"Could not read profile {path}: {exc}") from exc

    try:
        return yaml.load(content, Loader=UniqueKeyLoader)
    except yaml.YAMLError as exc:
        raise ProfileValidationError(f"Invalid YAML in {path}: {exc}") from exc


def _validate(doc: Any, source: Path) -> dict[str, str]:
    if not isinstance(doc, dict):
        raise ProfileValidationError(f"Profile {source} must contain a mapping at root")

    validator = _load_schema_validator()
    try:
        validator.validate(doc)
    except ValidationError as exc:
        path = ".".join(str(p) for p in exc.path)
        where = f" ({path})" if path else ""
        raise ProfileValidationError(f"Schema validation failed for {source}{where}: {exc.message}") from exc
    return dict(doc)


def load_profile(path: Path | None = None) -> LoadedProfile:
    """Load flag defaults from `path`, or from the XDG default location.

    A missing default profile is not an error; a missing explicit one is.
    """
    explicit = path is not None
    source = path if path is not None else default_profile_path()

    if not source.exists():
        if explicit:
            raise ProfileLoadError(f"Profile {source} does not exist")
        LOGGER.debug("No profile at %s", source)
        return LoadedProfile(values={}, source=None, warnings=())

    doc = _read_yaml(source)
    if doc is None:
        warning = f"Profile {source} is empty and was ignored"
        LOGGER.warning(warning)
        return LoadedProfile(values={}, source=source, warnings=(warning,))

    values = _validate(doc, source)
    LOGGER.debug("Loaded %d flag default(s) from %s", len(values), source)
    return LoadedProfile(values=values, source=source, warnings=())
