"""
Vault: one JSON file holding many named secrets.

The vault file is a JSON array of {"alias", "key", "value"} objects. Each
`value` is itself an un-parsed document (JSON, YAML, XML or TOML); its format
is only chosen when the secret is looked up by alias.

Usage:
    config = VaultConfig.init("~/.config/app/vault.json", {"env": "prod"})
    secrets = config.secrets({"env": "prod"})
    db = secrets.alias("db", ContentFormat.YAML, {"env": "prod"}, model=DbCredentials)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Iterable, Iterator, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field

from configio.errors.errors import VaultSecretError
from configio.formats.json_manager import JsonManager
from configio.formats.registry import get_manager
from configio.types.formats import ContentFormat, Context

_LOGGER = logging.getLogger(__name__)


class VaultSecret(BaseModel):
    """A single named secret; `value` stays an un-parsed document until lookup."""

    model_config = ConfigDict(frozen=True)

    alias: str
    key: str
    value: str = Field(repr=False)


@dataclass(frozen=True)
class VaultSecrets:
    """Ordered, read-only collection of secrets with lookup by alias."""

    data: tuple[VaultSecret, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "data", tuple(self.data))

    def __len__(self) -> int:
        return len(self.data)

    def __iter__(self) -> Iterator[VaultSecret]:
        return iter(self.data)

    @classmethod
    def from_iterable(cls, secrets: Iterable[VaultSecret]) -> VaultSecrets:
        return cls(data=tuple(secrets))

    @property
    def aliases(self) -> Mapping[str, str]:
        # later entries overwrite earlier ones sharing an alias
        return MappingProxyType({item.alias: item.value for item in self.data})

    def alias(
        self,
        name: str,
        format: ContentFormat | str = ContentFormat.JSON,
        context: Optional[Context] = None,
        *,
        model: Any = Any,
    ) -> Any:
        """
        Resolve secret `name` and parse its value as `format` into `model`.

        Raises VaultSecretError when the alias is unknown, and the format
        backend's ConfigurationFileError when the value does not parse.
        """
        aliases = self.aliases
        if name not in aliases:
            _LOGGER.debug(
                "secret_alias_missing",
                extra={"event": "secret_alias_missing", "alias": name},
            )
            raise VaultSecretError(f"Invalid alias: {name}", details=context)

        fmt = ContentFormat.parse(format, context)
        value = get_manager(fmt, context).read_str(aliases[name], context, model=model)
        _LOGGER.debug(
            "secret_resolved",
            extra={
                "event": "secret_resolved",
                "alias": name,
                "format": fmt.value,
                "source": "vault",
            },
        )
        return value


class VaultConfig:
    """
    Holds the secrets loaded from a vault file.

    `VaultConfig.init` is the only loading path; a bare `VaultConfig()` is the
    absent state and refuses to hand out secrets.
    """

    def __init__(self, secrets: Optional[VaultSecrets] = None) -> None:
        self._secrets = secrets

    def __repr__(self) -> str:
        count = len(self._secrets) if self._secrets is not None else None
        return f"VaultConfig(secrets={count})"

    @property
    def loaded(self) -> bool:
        return self._secrets is not None

    @classmethod
    def init(cls, path: str, context: Optional[Context] = None) -> VaultConfig:
        # The envelope is always JSON, whatever format the secret values use.
        data = JsonManager(path).read_config(context, model=list[VaultSecret])
        secrets = VaultSecrets.from_iterable(data)
        _LOGGER.info(
            "vault_loaded",
            extra={"event": "vault_loaded", "path": str(path), "secrets_total": len(secrets)},
        )
        return cls(secrets=secrets)

    def secrets(self, context: Optional[Context] = None) -> VaultSecrets:
        if self._secrets is None:
            raise VaultSecretError("Failed to read vault data", details=context)
        return self._secrets
