"""Application configuration and env loading."""

from __future__ import annotations

import os
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from seabattle.game.app.projection import DEFAULT_MESSAGE_LIMIT
from seabattle.game.core.models import PLACEMENT_ATTEMPT_LIMIT

DEFAULT_ENV_FILES: tuple[str, ...] = (
    "appdata/config/.env",
    "appdata/config/.env.local",
    ".env",
    ".env.local",
)


@dataclass(frozen=True, slots=True)
class GameConfig:
    """Immutable runtime configuration."""

    seed: int | None
    message_limit: int
    placement_attempts: int
    log_level: str


def load_env_file(path: str = ".env", *, override_existing: bool = True) -> list[str]:
    """Load KEY=VALUE pairs from an env file into process environment.

    Accepts shell-style ``export KEY=VALUE`` lines. By default, values from the
    env file overwrite existing environment variables. Returns the keys that
    were written.
    """
    env_path = _resolve_env_path(path)
    if not env_path.exists():
        return []

    written: list[str] = []
    for raw_line in env_path.read_text(encoding="utf-8").splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            continue

        key, value = line.split("=", 1)
        key = key.strip().removeprefix("export ").strip()
        value = value.strip()
        if not key:
            continue

        if len(value) >= 2 and value[0] == value[-1] and value[0] in {"'", '"'}:
            value = value[1:-1]

        if override_existing or key not in os.environ:
            os.environ[key] = value
            written.append(key)
    return written


def load_default_env_files(
    *, override_existing: bool = True, paths: Sequence[str] | None = None
) -> dict[str, list[str]]:
    """Load env files left to right; later files win.

    Returns the keys written per file, for files that exist.
    """
    loaded: dict[str, list[str]] = {}
    for path in tuple(paths) if paths is not None else DEFAULT_ENV_FILES:
        if _resolve_env_path(path).exists():
            loaded[path] = load_env_file(path, override_existing=override_existing)
    return loaded


def load_game_config() -> GameConfig:
    """Read game configuration from the environment."""
    return GameConfig(
        seed=_optional_int("SEABATTLE_SEED"),
        message_limit=max(1, _int("SEABATTLE_MESSAGE_LIMIT", DEFAULT_MESSAGE_LIMIT)),
        placement_attempts=max(1, _int("SEABATTLE_PLACEMENT_ATTEMPTS", PLACEMENT_ATTEMPT_LIMIT)),
        log_level=resolve_log_level_name(),
    )


def resolve_log_level_name(default: str = "INFO") -> str:
    """Resolve log level with app-prefixed override."""
    value = os.getenv("SEABATTLE_LOG_LEVEL")
    if value is None:
        value = os.getenv("LOG_LEVEL", default)
    return value.strip().upper()


def flag(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _int(name: str, default: int) -> int:
    value = _optional_int(name)
    return default if value is None else value


def _optional_int(name: str) -> int | None:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return None
    try:
        return int(raw)
    except ValueError:
        return None


def _resolve_env_path(path: str) -> Path:
    """Resolve env path from cwd, then project root."""
    candidate = Path(path)
    if candidate.exists():
        return candidate

    # Fallback for IDE run configs with different working directory.
    project_root = Path(__file__).resolve().parents[3]
    return project_root / path
