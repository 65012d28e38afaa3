# blog_node/config.py
import copy
import logging
import os
from typing import Any, Dict, List, Optional

import yaml

log = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = "blog_config.yaml"

# -------- Defaults --------
_DEFAULT: Dict[str, Any] = {
    "server": {
        "host": "127.0.0.1",  # uvicorn bind address
        "port": 8080,  # uvicorn port
    },
    "logging": {"level": "INFO"},
    "cors": {"origins": ["*"]},
    "store": {
        # Seconds to wait for a store lock; negative waits forever.
        "lock_timeout_sec": -1.0,
    },
}


def _csv(raw: str) -> List[str]:
    return [x.strip() for x in raw.split(",") if x.strip()]


# -------- ENV overrides --------
_ENV_MAP = {
    ("server", "host"): ("BLOG_HOST", str),
    ("server", "port"): ("BLOG_PORT", int),
    ("logging", "level"): ("BLOG_LOG_LEVEL", str),
    ("store", "lock_timeout_sec"): ("BLOG_LOCK_TIMEOUT_SEC", float),
    ("cors", "origins"): ("BLOG_CORS_ORIGINS", _csv),
}


def _deep_merge(base: Dict[str, Any], overlay: Dict[str, Any]) -> Dict[str, Any]:
    out = dict(base)
    for k, v in (overlay or {}).items():
        if isinstance(v, dict) and isinstance(out.get(k), dict):
            out[k] = _deep_merge(out[k], v)
        else:
            out[k] = v
    return out


def _apply_env_overrides(cfg: Dict[str, Any]) -> Dict[str, Any]:
    for (section, key), (env_name, cast) in _ENV_MAP.items():
        val = os.getenv(env_name)
        if val is None:
            continue
        try:
            casted = cast(val)
        except ValueError:
            log.warning("Ignoring %s=%r: not a valid %s", env_name, val, getattr(cast, "__name__", cast))
            continue
        cfg.setdefault(section, {})
        cfg[section][key] = casted
    return cfg


def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    """
    Loads the YAML config from `path`, $BLOG_CONFIG, or ./blog_config.yaml.
    Returns defaults if the file doesn't exist or can't be parsed.
    Also applies BLOG_* ENV overrides.
    """
    path = path or os.getenv("BLOG_CONFIG") or DEFAULT_CONFIG_FILE
    cfg = copy.deepcopy(_DEFAULT)

    if os.path.exists(path):
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
            if not isinstance(data, dict):
                raise ValueError("top-level YAML value must be a mapping")
            cfg = _deep_merge(cfg, data)
        except (OSError, ValueError, yaml.YAMLError):
            log.warning("Failed to load config %s; using defaults", path, exc_info=True)

    cfg = _apply_env_overrides(cfg)

    # Normalize CORS origins to a list
    origins = cfg.get("cors", {}).get("origins")
    if isinstance(origins, str):
        cfg["cors"]["origins"] = _csv(origins)

    return cfg


# -------- Small helpers used by the app --------
def get_bind_host(cfg: Dict[str, Any]) -> str:
    return str(cfg.get("server", {}).get("host", "127.0.0.1"))


def get_bind_port(cfg: Dict[str, Any]) -> int:
    return int(cfg.get("server", {}).get("port", 8080))


def get_log_level(cfg: Dict[str, Any]) -> str:
    return str(cfg.get("logging", {}).get("level", "INFO")).upper()


def get_cors_origins(cfg: Dict[str, Any]) -> List[str]:
    return list(cfg.get("cors", {}).get("origins", []))


def get_lock_timeout(cfg: Dict[str, Any]) -> float:
    return float(cfg.get("store", {}).get("lock_timeout_sec", -1.0))
