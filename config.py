import json
import logging
import math
import os
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)

CONFIG_ENV = "COUNTDOWN_CONFIG"
DEFAULT_CONFIG_FILE = "countdown.json"

UNITS = ("days", "hours", "minutes", "seconds")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

# Keeps now + offset well inside datetime range
MAX_OFFSET_DAYS = 36500

DEFAULT_SLOT_IDS = {
    "days": "hari",
    "hours": "jam",
    "minutes": "menit",
    "seconds": "detik",
}

DEFAULT_LABELS = {
    "days": "Hari",
    "hours": "Jam",
    "minutes": "Menit",
    "seconds": "Detik",
}


class ConfigError(ValueError):
    pass


@dataclass
class CountdownConfig:
    offset_days: int = 6
    interval_seconds: float = 1.0
    expired_message: str = "EXPIRED"
    title: str = "Promo berakhir dalam"
    slot_ids: Dict[str, str] = field(default_factory=lambda: dict(DEFAULT_SLOT_IDS))
    message_slot: str = "demo"
    labels: Dict[str, str] = field(default_factory=lambda: dict(DEFAULT_LABELS))
    log_level: str = "INFO"

    def all_slots(self) -> list:
        return [self.slot_ids[unit] for unit in UNITS] + [self.message_slot]


def get_config_path(environ=None) -> Path:
    if environ is None:
        environ = os.environ
    env_path = environ.get(CONFIG_ENV)
    if env_path:
        return Path(env_path)
    return Path.cwd() / DEFAULT_CONFIG_FILE


def _read_file(path: Path) -> Dict[str, Any]:
    try:
        with path.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError:
        return {}
    except (OSError, json.JSONDecodeError) as e:
        logger.warning(f"Ignoring unreadable config file {path}: {e}")
        return {}
    if not isinstance(data, dict):
        logger.warning(f"Ignoring config file {path}: top level must be an object")
        return {}
    return data


def _unit_mapping(name: str, raw: Any, base: Dict[str, str]) -> Dict[str, str]:
    if not isinstance(raw, dict):
        raise ConfigError(f"'{name}' must be an object")
    merged = dict(base)
    for key, value in raw.items():
        if key not in UNITS:
            raise ConfigError(f"Unknown unit in '{name}': {key}")
        if not isinstance(value, str) or not value:
            raise ConfigError(f"'{name}.{key}' must be a non-empty string")
        merged[key] = value
    return merged


def _apply(config: CountdownConfig, raw: Dict[str, Any]) -> CountdownConfig:
    changes: Dict[str, Any] = {}

    if "offset_days" in raw:
        offset = raw["offset_days"]
        if isinstance(offset, bool) or not isinstance(offset, int):
            raise ConfigError(f"'offset_days' must be an integer between 0 and {MAX_OFFSET_DAYS}")
        if not 0 <= offset <= MAX_OFFSET_DAYS:
            raise ConfigError(f"'offset_days' must be an integer between 0 and {MAX_OFFSET_DAYS}")
        changes["offset_days"] = offset

    if "interval_seconds" in raw:
        interval = raw["interval_seconds"]
        if isinstance(interval, bool) or not isinstance(interval, (int, float)):
            raise ConfigError("'interval_seconds' must be a positive finite number")
        if not math.isfinite(interval) or interval <= 0:
            raise ConfigError("'interval_seconds' must be a positive finite number")
        changes["interval_seconds"] = float(interval)

    for key in ("expired_message", "title", "message_slot", "log_level"):
        if key in raw:
            if not isinstance(raw[key], str) or not raw[key]:
                raise ConfigError(f"'{key}' must be a non-empty string")
            changes[key] = raw[key]

    if "log_level" in changes:
        level = changes["log_level"].upper()
        if level not in LOG_LEVELS:
            raise ConfigError(f"Unknown log level: {changes['log_level']}")
        changes["log_level"] = level

    if "slot_ids" in raw:
        changes["slot_ids"] = _unit_mapping("slot_ids", raw["slot_ids"], config.slot_ids)
    if "labels" in raw:
        changes["labels"] = _unit_mapping("labels", raw["labels"], config.labels)

    updated = replace(config, **changes)
    if len(set(updated.all_slots())) != len(updated.all_slots()):
        raise ConfigError("Slot ids must be distinct")
    return updated


def _from_env(environ) -> Dict[str, Any]:
    raw: Dict[str, Any] = {}
    offset = environ.get("COUNTDOWN_OFFSET_DAYS")
    if offset is not None:
        try:
            raw["offset_days"] = int(offset)
        except ValueError:
            raise ConfigError(f"COUNTDOWN_OFFSET_DAYS is not an integer: {offset!r}")
    interval = environ.get("COUNTDOWN_INTERVAL")
    if interval is not None:
        try:
            raw["interval_seconds"] = float(interval)
        except ValueError:
            raise ConfigError(f"COUNTDOWN_INTERVAL is not a number: {interval!r}")
    level = environ.get("COUNTDOWN_LOG_LEVEL")
    if level:
        raw["log_level"] = level.upper()
    return raw


def load_config(path: Optional[Path] = None, environ=None) -> CountdownConfig:
    """
    Build the countdown configuration from defaults, the JSON config file
    and environment overrides, in that order.

    Raises
    ------
    ConfigError
        If a value has the wrong type or is out of range.
    """
    if environ is None:
        environ = os.environ
    if path is None:
        path = get_config_path(environ)

    config = _apply(CountdownConfig(), _read_file(path))
    config = _apply(config, _from_env(environ))
    logger.debug(f"Loaded config: {config}")
    return config
