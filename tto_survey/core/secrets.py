"""Secret lookup behind a small provider interface.

Request handlers ask a :class:`SecretProvider` for credentials instead of
reading ``os.environ`` directly, so tests can hand in a
:class:`StaticSecretProvider` without touching process state.
"""

from __future__ import annotations

import os
from typing import Mapping, Optional, Protocol

AI_GATEWAY_API_KEY = "AI_GATEWAY_API_KEY"

# Older deployments exported the gateway key under the vendor's name.
_LEGACY_ALIASES: dict[str, tuple[str, ...]] = {
    AI_GATEWAY_API_KEY: ("LOVABLE_API_KEY",),
}


class SecretProvider(Protocol):
    def get(self, name: str) -> Optional[str]:
        """Return the secret value, or ``None`` when it is not configured."""


class EnvSecretProvider:
    """Reads secrets from the process environment."""

    def __init__(self, environ: Optional[Mapping[str, str]] = None) -> None:
        self._environ = environ if environ is not None else os.environ

    def get(self, name: str) -> Optional[str]:
        for key in (name, *_LEGACY_ALIASES.get(name, ())):
            value = (self._environ.get(key) or "").strip()
            if value:
                return value
        return None


class StaticSecretProvider:
    """Fixed mapping of secrets, for tests and local tooling."""

    def __init__(self, secrets: Optional[Mapping[str, str]] = None) -> None:
        self._secrets = dict(secrets or {})

    def get(self, name: str) -> Optional[str]:
        return self._secrets.get(name) or None


__all__ = ["AI_GATEWAY_API_KEY", "EnvSecretProvider", "SecretProvider", "StaticSecretProvider"]
