from __future__ import annotations

import os
from pathlib import Path


def load_env(path: Path | None = None) -> list[str]:
    """
    Load key=value pairs from dotenv file(s) into os.environ.

    Loads in order:
    1. .env (shared defaults for a deployment)
    2. .env.local (developer overrides, never committed)

    Shell variables always win. ``.env.local`` may override ``.env`` but
    neither may override a variable that was exported before loading.

    Returns the keys that were written to the environment.
    """
    shell_keys = set(os.environ.keys())
    loaded: list[str] = []

    env_path = path or _default_env_path()
    if env_path.exists():
        loaded += _apply(_parse_env_file(env_path), protected=shell_keys, allow_override=False)

    if path is None:
        local_path = env_path.parent / ".env.local"
        if local_path.exists():
            loaded += _apply(_parse_env_file(local_path), protected=shell_keys, allow_override=True)

    return loaded


def _parse_env_file(env_path: Path) -> dict[str, str]:
    values: dict[str, str] = {}
    for raw_line in env_path.read_text(encoding="utf-8").splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if line.startswith("export "):
            line = line[len("export "):].lstrip()
        if "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        if not key:
            continue
        values[key] = _strip_quotes(value.strip())
    return values


def _apply(values: dict[str, str], *, protected: set[str], allow_override: bool) -> list[str]:
    written: list[str] = []
    for key, value in values.items():
        if key in protected:
            continue
        if not allow_override and key in os.environ:
            continue
        os.environ[key] = value
        written.append(key)
    return written


def _default_env_path() -> Path:
    return Path(__file__).resolve().parents[2] / ".env"


def _strip_quotes(value: str) -> str:
    if len(value) >= 2 and value[0] == value[-1] and value[0] in {'"', "'"}:
        return value[1:-1]
    return value


__all__ = ["load_env"]
