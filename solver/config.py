from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

from .solver_core import block_side_for


class DotDict(dict):
    __getattr__ = dict.get
    __setattr__ = dict.__setitem__
    __delattr__ = dict.__delitem__


def load_yaml(path: str | Path) -> DotDict:
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a mapping at top level, got {type(data).__name__}")
    return DotDict(data)


def merge_overrides(cfg: Dict[str, Any], **overrides) -> Dict[str, Any]:
    for k, v in overrides.items():
        if v is None:
            continue
        cfg[k] = v
    return cfg


@dataclass
class SolverConfig:
    side: Optional[int] = None  # None: infer from the puzzle text
    quiet: bool = False
    log_every: int = 0  # solver steps between progress lines; 0 disables

    def __post_init__(self) -> None:
        if self.side is not None:
            block_side_for(self.side)
        if self.log_every < 0:
            raise ValueError("log_every must be >= 0")

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "SolverConfig":
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValueError(f"Unknown config keys: {unknown}")
        return cls(**dict(data))

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def load_config(path: Optional[str | Path] = None, **overrides) -> SolverConfig:
    """Defaults, then the YAML file (if any), then non-None overrides."""
    cfg: Dict[str, Any] = SolverConfig().to_dict()
    if path:
        cfg.update(load_yaml(path))
    merge_overrides(cfg, **overrides)
    return SolverConfig.from_mapping(cfg)
