# config.py
from __future__ import annotations
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from truth_table import DEFAULT_MAX_VARIABLES

ENV_MAX_VARS = "BOOLTABLE_MAX_VARS"


@dataclass
class Config:
    max_variables: Optional[int] = DEFAULT_MAX_VARIABLES
    image_path: Optional[str] = None
    show_ast: bool = False
    prompt: str = "> "


def _limit(raw: int) -> Optional[int]:
    # 0 (or below) lifts the ceiling
    return raw if raw > 0 else None


def from_env(env: Optional[Mapping[str, str]] = None) -> Config:
    """Defaults, with BOOLTABLE_MAX_VARS applied when set to an integer."""
    env = os.environ if env is None else env
    cfg = Config()
    raw = env.get(ENV_MAX_VARS, "").strip()
    if raw:
        try:
            cfg.max_variables = _limit(int(raw))
        except ValueError:
            raise ValueError(f"{ENV_MAX_VARS} must be an integer, got {raw!r}") from None
    return cfg


def apply_args(cfg: Config, args) -> Config:
    """Override `cfg` with parsed command-line flags that were given."""
    if args.max_vars is not None:
        cfg.max_variables = _limit(args.max_vars)
    if args.image is not None:
        cfg.image_path = args.image
    if args.show_ast:
        cfg.show_ast = True
    return cfg


__all__ = ["Config", "ENV_MAX_VARS", "from_env", "apply_args"]
