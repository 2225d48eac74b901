"""TOML-based provider configuration.

Loads ~/.dropletsync/defaults.toml (global) and dropletsync.toml (project),
merges them, and resolves named provider configs referenced by records::

    [providers.default]
    type = "digitalocean"
    token_env = "DIGITALOCEAN_TOKEN"

    [providers.team-b]
    type = "digitalocean"
    token = "dop_v1_..."
"""

from __future__ import annotations

import tomllib
from pathlib import Path
from typing import TYPE_CHECKING, Any

from dropletsync.core.exceptions import ConfigurationError

if TYPE_CHECKING:
    from dropletsync.providers.digitalocean.config import DigitalOcean

    type ProviderConfig = DigitalOcean

type RawConfig = dict[str, Any]

GLOBAL_CONFIG_PATH = Path.home() / ".dropletsync" / "defaults.toml"
PROJECT_CONFIG_NAME = "dropletsync.toml"


def _deep_merge(base: RawConfig, override: RawConfig) -> RawConfig:
    result = dict(base)
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def _read_toml(path: Path) -> RawConfig:
    if not path.is_file():
        return {}
    try:
        with path.open("rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigurationError(f"Invalid TOML in {path}: {e}") from e


def load_config(
    *,
    project_dir: Path | None = None,
    global_path: Path | None = None,
) -> RawConfig:
    global_cfg = _read_toml(global_path or GLOBAL_CONFIG_PATH)
    project_path = (project_dir or Path.cwd()) / PROJECT_CONFIG_NAME
    project_cfg = _read_toml(project_path)

    merged = _deep_merge(global_cfg, project_cfg)
    merged.setdefault("providers", {})
    return merged


def _get_provider_map() -> dict[str, type]:
    from dropletsync.providers.digitalocean.config import DigitalOcean

    return {
        "digitalocean": DigitalOcean,
    }


def _build_provider(name: str, raw: RawConfig) -> ProviderConfig:
    raw = dict(raw)
    provider_type = raw.pop("type", None)
    if provider_type is None:
        raise ConfigurationError(f"Provider '{name}' missing 'type' field")

    provider_map = _get_provider_map()
    cls = provider_map.get(provider_type)
    if cls is None:
        raise ConfigurationError(
            f"Unknown provider type '{provider_type}'. "
            f"Valid: {', '.join(provider_map)}"
        )
    try:
        return cls(**raw)
    except TypeError as e:
        raise ConfigurationError(f"Invalid settings for provider '{name}': {e}") from e


def resolve_provider(
    name: str,
    *,
    config: RawConfig | None = None,
    project_dir: Path | None = None,
    global_path: Path | None = None,
) -> ProviderConfig:
    if config is None:
        config = load_config(project_dir=project_dir, global_path=global_path)

    providers = config.get("providers", {})
    if name not in providers:
        raise ConfigurationError(
            f"Provider '{name}' not found. Available: {', '.join(providers) or 'none'}"
        )
    return _build_provider(name, providers[name])
