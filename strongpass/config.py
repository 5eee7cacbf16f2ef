# strongpass/config.py
"""
Generation config record and user preference persistence for StrongPass.
Preferences are saved as JSON in %APPDATA%/StrongPass/config.json (Windows) or
~/.strongpass/config.json (fallback). STRONGPASS_CONFIG_DIR overrides both.
Only UI preferences live there, never generated passwords.
"""

import os
import json
import logging
from dataclasses import dataclass, asdict
from typing import Dict, Any, Mapping, Optional, Tuple

from .charsets import CharacterClass, CANONICAL_ORDER
from .exceptions import ConfigFileError, InvalidConfiguration

logger = logging.getLogger(__name__)

DEFAULT_LENGTH = 14
MIN_UI_LENGTH = 8
MAX_UI_LENGTH = 32
FLAG_NAMES = ("uppercase", "lowercase", "digits", "symbols")


@dataclass(frozen=True)
class GenerationConfig:
    length: int = DEFAULT_LENGTH
    uppercase: bool = True
    lowercase: bool = True
    digits: bool = True
    symbols: bool = True

    def is_enabled(self, cls: CharacterClass) -> bool:
        return bool(getattr(self, cls.value))

    def enabled_classes(self) -> Tuple[CharacterClass, ...]:
        return tuple(c for c in CANONICAL_ORDER if self.is_enabled(c))

    def has_any_class(self) -> bool:
        return bool(self.enabled_classes())

    def as_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> "GenerationConfig":
        """Build a config from a loose mapping; missing keys take the defaults."""
        data = data or {}
        base = cls()
        flags = {}
        for name in FLAG_NAMES:
            value = data.get(name, getattr(base, name))
            if not isinstance(value, bool):
                raise InvalidConfiguration(f"{name} must be true or false, got {value!r}")
            flags[name] = value
        return cls(length=data.get("length", base.length), **flags)


DEFAULTS: Dict[str, Any] = {
    "theme": "light",
    **GenerationConfig().as_dict(),
}

THEMES = ("light", "dark")


def _appdata_dir() -> str:
    override = os.getenv("STRONGPASS_CONFIG_DIR")
    if override:
        d = override
    else:
        appdata = os.getenv("APPDATA")
        if appdata:
            d = os.path.join(appdata, "StrongPass")
        else:
            d = os.path.join(os.path.expanduser("~"), ".strongpass")
    os.makedirs(d, exist_ok=True)
    return d


def config_path() -> str:
    return os.path.join(_appdata_dir(), "config.json")


def load_config() -> Dict[str, Any]:
    p = config_path()
    if not os.path.exists(p):
        return DEFAULTS.copy()
    try:
        with open(p, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.warning("Ignoring unreadable config %s: %s", p, e)
        return DEFAULTS.copy()
    if not isinstance(data, dict):
        logger.warning("Ignoring config %s: expected a JSON object", p)
        return DEFAULTS.copy()
    # merge defaults, unknown keys dropped
    out = DEFAULTS.copy()
    out.update({k: v for k, v in data.items() if k in DEFAULTS})
    for key, default in DEFAULTS.items():
        # bool is an int subclass, so compare exact types
        if type(out[key]) is not type(default):
            logger.warning("Ignoring %s=%r in %s: expected %s", key, out[key], p, type(default).__name__)
            out[key] = default
    if out["theme"] not in THEMES:
        out["theme"] = DEFAULTS["theme"]
    if not MIN_UI_LENGTH <= out["length"] <= MAX_UI_LENGTH:
        logger.warning("Ignoring length=%d in %s: outside %d..%d", out["length"], p, MIN_UI_LENGTH, MAX_UI_LENGTH)
        out["length"] = DEFAULTS["length"]
    return out


def save_config(cfg: Dict[str, Any]) -> None:
    p = config_path()
    try:
        with open(p, "w", encoding="utf-8") as f:
            json.dump(cfg, f, ensure_ascii=False, indent=2)
    except OSError as e:
        raise ConfigFileError(f"Could not write config {p}: {e}") from e
    logger.debug("Saved config to %s", p)


def generation_config_from(cfg: Mapping[str, Any]) -> GenerationConfig:
    """Default generator settings stored in the preferences."""
    return GenerationConfig.from_dict(cfg)


def parse_value(key: str, raw: str) -> Any:
    """Convert a CLI string to the type of DEFAULTS[key]."""
    if key not in DEFAULTS:
        raise KeyError(key)
    default = DEFAULTS[key]
    if isinstance(default, bool):
        lowered = raw.strip().lower()
        if lowered in ("1", "true", "yes", "on"):
            return True
        if lowered in ("0", "false", "no", "off"):
            return False
        raise ValueError(f"{key} expects true/false, got {raw!r}")
    if isinstance(default, int):
        return int(raw)
    if key == "theme" and raw not in THEMES:
        raise ValueError(f"theme must be one of {', '.join(THEMES)}")
    return raw
