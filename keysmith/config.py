# keysmith/config.py
"""
Settings persistence for Keysmith.
Default generation options saved as JSON in %APPDATA%/Keysmith/config.json (Windows)
or ~/.keysmith/config.json (fallback). KEYSMITH_CONFIG overrides the path.
"""

import os
import json
import logging
from typing import Dict, Any

from .generator import DEFAULT_LENGTH, MIN_LENGTH, GenerationOptions

logger = logging.getLogger(__name__)

DEFAULTS: Dict[str, Any] = {
    "length": DEFAULT_LENGTH,
    "include_lowercase": True,
    "include_uppercase": True,
    "include_numbers": True,
    "include_symbols": True,
    "copies": 1,
}

MIN_COPIES = 1

def _appdata_dir() -> str:
    appdata = os.getenv("APPDATA")
    if appdata:
        return os.path.join(appdata, "Keysmith")
    return os.path.join(os.path.expanduser("~"), ".keysmith")

def config_path() -> str:
    override = os.getenv("KEYSMITH_CONFIG")
    if override:
        return override
    return os.path.join(_appdata_dir(), "config.json")

def load_config() -> Dict[str, Any]:
    p = config_path()
    if not os.path.exists(p):
        return DEFAULTS.copy()
    try:
        with open(p, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.warning("ignoring unreadable config %s: %s", p, e)
        return DEFAULTS.copy()
    if not isinstance(data, dict):
        logger.warning("ignoring config %s: expected a JSON object", p)
        return DEFAULTS.copy()
    # merge defaults, drop keys we do not know and values of the wrong type
    out = DEFAULTS.copy()
    for key, value in data.items():
        if key not in DEFAULTS:
            continue
        if not _valid_value(key, value):
            logger.warning("ignoring invalid %s=%r in config %s, using %r", key, value, p, DEFAULTS[key])
            continue
        out[key] = value
    return out

def _valid_value(key: str, value: Any) -> bool:
    if isinstance(DEFAULTS[key], bool):
        return isinstance(value, bool)
    if not isinstance(value, int) or isinstance(value, bool):
        return False
    if key == "copies":
        return value >= MIN_COPIES
    return value >= MIN_LENGTH

def save_config(cfg: Dict[str, Any]) -> str:
    p = config_path()
    d = os.path.dirname(p)
    if d:
        os.makedirs(d, exist_ok=True)
    with open(p, "w", encoding="utf-8") as f:
        json.dump(cfg, f, ensure_ascii=False, indent=2)
    logger.info("saved config to %s", p)
    return p

def options_from_config(cfg: Dict[str, Any]) -> GenerationOptions:
    return GenerationOptions.from_mapping(cfg)
