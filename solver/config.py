from __future__ import annotations
from pathlib import Path
from typing import Any, Dict
import yaml

DEFAULTS: Dict[str, Any] = {
    "runs": 1,           # >1 switches the CLI to benchmark mode
    "workers": None,     # benchmark pool size; None = os.cpu_count()
    "seed": None,        # base seed; benchmark run i uses seed + i
    "format": "grid",    # grid | rows | pretty | json
    "strict": False,     # reject short/missing/non-digit puzzle lines
    "timeout": None,     # seconds for a whole benchmark batch
    "max_steps": None,   # per-solve step budget; None = unbounded
    "quiet": False,
}


class DotDict(dict):
    __getattr__ = dict.get
    __setattr__ = dict.__setitem__
    __delattr__ = dict.__delitem__


def load_yaml(path: str | Path) -> DotDict:
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Config file not found: {p}")
    with open(p, "r", encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"{p}: {e}") from e
    if not isinstance(data, dict):
        raise ValueError(f"{p}: top level must be a mapping")
    unknown = sorted(set(data) - set(DEFAULTS))
    if unknown:
        raise ValueError(f"{p}: unknown key(s): {', '.join(unknown)}")
    return DotDict(data)


def merge_overrides(cfg: Dict[str, Any], **overrides) -> Dict[str, Any]:
    for k, v in overrides.items():
        if v is None:
            continue
        cfg[k] = v
    return cfg


def build_config(path: str | Path | None = None, **overrides) -> DotDict:
    """DEFAULTS, then the YAML file (if any), then non-None overrides."""
    cfg = DotDict(DEFAULTS)
    if path is not None:
        cfg.update(load_yaml(path))
    return DotDict(merge_overrides(cfg, **overrides))
