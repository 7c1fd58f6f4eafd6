from __future__ import annotations
import logging
from pathlib import Path
from typing import Any, Dict, Optional
import yaml

DEFAULTS: Dict[str, Any] = {
    "max_steps": None,
    "output_format": "csv",
    "log_level": "WARNING",
}
OUTPUT_FORMATS = ("csv", "pretty", "json")

class DotDict(dict):
    __getattr__ = dict.get
    __setattr__ = dict.__setitem__
    __delattr__ = dict.__delitem__

def load_yaml(path: str | Path) -> DotDict:
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a mapping at the top level")
    return DotDict(data)

def merge_overrides(cfg: Dict[str, Any], **overrides) -> Dict[str, Any]:
    for k, v in overrides.items():
        if v is None:
            continue
        cfg[k] = v
    return cfg

def load_config(path: Optional[str | Path] = None, **overrides) -> DotDict:
    """Defaults, then the YAML file (if any), then non-None overrides."""
    cfg = DotDict(DEFAULTS)
    if path is not None:
        data = load_yaml(path)
        unknown = set(data) - set(DEFAULTS)
        if unknown:
            raise ValueError(f"{path}: unknown config keys {sorted(unknown)}")
        cfg.update(data)
    merge_overrides(cfg, **overrides)
    if cfg.output_format not in OUTPUT_FORMATS:
        raise ValueError(f"output_format must be one of {OUTPUT_FORMATS}, got {cfg.output_format!r}")
    steps = cfg.max_steps
    if steps is not None and (isinstance(steps, bool) or not isinstance(steps, int) or steps <= 0):
        raise ValueError(f"max_steps must be a positive integer or null, got {cfg.max_steps!r}")
    cfg.log_level = str(cfg.log_level).upper()
    if not isinstance(logging.getLevelName(cfg.log_level), int):
        raise ValueError(f"log_level must be a logging level name, got {cfg.log_level!r}")
    return cfg
