"""ConfigManager — environment profiles and scoring weight overrides."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any

from vastuscore.config import (
    CONFIG_DIR,
    WEIGHT_ENTRY,
    WEIGHT_OPEN_SPACE,
    WEIGHT_ROOM_PLACEMENT,
    WEIGHT_SLEEPING,
)
from vastuscore.scoring.weights import ScoringWeights

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

# Every key load_config understands, with its default
_DEFAULTS: dict[str, Any] = {
    "VASTU_ENV": "development",
    "VASTU_LOG_LEVEL": "INFO",
    "VASTU_ANALYSIS_DB": ":memory:",
    "VASTU_WEIGHT_ENTRY": WEIGHT_ENTRY,
    "VASTU_WEIGHT_ROOMS": WEIGHT_ROOM_PLACEMENT,
    "VASTU_WEIGHT_SLEEPING": WEIGHT_SLEEPING,
    "VASTU_WEIGHT_OPEN_SPACE": WEIGHT_OPEN_SPACE,
}

_PROFILES: dict[str, dict[str, str]] = {
    "development": {
        "VASTU_ENV": "development",
        "VASTU_LOG_LEVEL": "DEBUG",
    },
    "production": {
        "VASTU_ENV": "production",
        "VASTU_LOG_LEVEL": "WARNING",
        "VASTU_ANALYSIS_DB": "vastu.db",
    },
    "testing": {
        "VASTU_ENV": "testing",
        "VASTU_LOG_LEVEL": "DEBUG",
        "VASTU_ANALYSIS_DB": ":memory:",
    },
}

# Config key -> ScoringWeights field
_WEIGHT_KEYS = {
    "VASTU_WEIGHT_ENTRY": "entry",
    "VASTU_WEIGHT_ROOMS": "room_placement",
    "VASTU_WEIGHT_SLEEPING": "sleeping",
    "VASTU_WEIGHT_OPEN_SPACE": "open_space",
}


class ConfigError(ValueError):
    """Raised when a loaded configuration cannot be used."""

    def __init__(self, issues: list[str]) -> None:
        self.issues = issues
        super().__init__("Invalid vastuscore configuration: " + "; ".join(issues))


class ConfigManager:
    """Manage vastuscore configuration across environments."""

    def load_config(self, project_path: str | Path) -> dict[str, str]:
        """Load merged config: defaults -> profile -> config.json -> .env -> env vars.

        The profile is picked from ``VASTU_ENV`` in the environment, then in
        ``.env``.  Returns a flat dict of configuration values.
        """
        root = Path(project_path)
        config = {key: str(default) for key, default in _DEFAULTS.items()}
        dotenv = self._read_env_file(root / ".env")

        env_name = os.environ.get("VASTU_ENV") or dotenv.get("VASTU_ENV") or config["VASTU_ENV"]
        profile = _PROFILES.get(env_name)
        if profile is None:
            logger.warning("Unknown environment profile %r; using defaults", env_name)
            profile = {"VASTU_ENV": env_name}
        config.update(profile)

        config.update(self._read_config_json(root / CONFIG_DIR / "config.json"))
        config.update(dotenv)

        for key in _DEFAULTS:
            env_val = os.environ.get(key)
            if env_val is not None:
                config[key] = env_val

        return config

    def validate_config(self, config: dict[str, str]) -> list[str]:
        """Return a list of problems found in *config*; empty if valid."""
        issues: list[str] = []
        level = config.get("VASTU_LOG_LEVEL", "INFO").upper()
        if level not in LOG_LEVELS:
            issues.append(f"VASTU_LOG_LEVEL: unknown level {level!r}")
        try:
            weights_from_config(config)
        except ValueError as exc:
            issues.append(f"Scoring weights: {exc}")
        return issues

    def check_config(self, config: dict[str, str]) -> None:
        """Raise :class:`ConfigError` listing every problem in *config*."""
        issues = self.validate_config(config)
        if issues:
            raise ConfigError(issues)

    @staticmethod
    def _read_config_json(path: Path) -> dict[str, str]:
        """Known keys from a JSON object file; anything else is skipped with a warning."""
        if not path.is_file():
            return {}
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, OSError):
            logger.warning("Ignoring unreadable %s", path, exc_info=True)
            return {}
        if not isinstance(data, dict):
            logger.warning("Ignoring %s: expected a JSON object", path)
            return {}

        values: dict[str, str] = {}
        for key, value in data.items():
            if key not in _DEFAULTS:
                logger.warning("Ignoring unknown key %r in %s", key, path)
                continue
            values[key] = str(value)
        return values

    @staticmethod
    def _read_env_file(env_file: Path) -> dict[str, str]:
        values: dict[str, str] = {}
        if not env_file.is_file():
            return values
        try:
            for line in env_file.read_text(encoding="utf-8").splitlines():
                line = line.strip()
                if not line or line.startswith("#"):
                    continue
                if "=" in line:
                    k, v = line.split("=", 1)
                    values[k.strip()] = v.strip()
        except OSError:
            logger.debug("Could not read %s", env_file, exc_info=True)
        return values


def weights_from_config(config: dict[str, str]) -> ScoringWeights:
    """Build validated ``ScoringWeights`` from a flat config mapping.

    Missing keys fall back to the defaults.  Raises ``ValueError`` if a
    value is not a number or the weights do not sum to 1.
    """
    values: dict[str, float] = {}
    for key, field in _WEIGHT_KEYS.items():
        raw = config.get(key, _DEFAULTS[key])
        try:
            values[field] = float(raw)
        except (TypeError, ValueError):
            raise ValueError(f"{key} must be a number, got {raw!r}") from None
    return ScoringWeights(**values)
