"""Credential resolvers for DigitalOcean API tokens.

A record names its provider config (``providerConfigRef``); a resolver
turns that name into a token.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from dropletsync.api.model import ProviderConfigRef
from dropletsync.config import RawConfig, load_config, resolve_provider
from dropletsync.core.exceptions import ConfigurationError, CredentialError

from .config import DigitalOcean


@dataclass(frozen=True, slots=True)
class EnvCredentials:
    """Ignore the reference and read the token from the environment."""

    token_env: str = "DIGITALOCEAN_TOKEN"

    async def resolve(self, ref: ProviderConfigRef) -> str:
        return DigitalOcean(token_env=self.token_env).resolve_token()


@dataclass(frozen=True, slots=True)
class ConfigCredentials:
    """Resolve the reference against ``[providers.<name>]`` TOML tables.

    The config files are read once, when the resolver is created.
    """

    project_dir: Path | None = None
    global_path: Path | None = None
    _config: RawConfig = field(default_factory=dict, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(
            self,
            "_config",
            load_config(project_dir=self.project_dir, global_path=self.global_path),
        )

    async def resolve(self, ref: ProviderConfigRef) -> str:
        try:
            provider = resolve_provider(ref.name, config=self._config)
        except ConfigurationError as e:
            raise CredentialError(f"cannot resolve provider config '{ref.name}': {e}") from e
        return provider.resolve_token()


__all__ = ["ConfigCredentials", "EnvCredentials"]
