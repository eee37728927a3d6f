from __future__ import annotations
import os
from pathlib import Path
from typing import Optional

PRELUDE_PATH_VAR = 'SIGMA_PRELUDE_PATH'
RECURSION_LIMIT_VAR = 'SIGMA_RECURSION_LIMIT'


def path_from_env(var: str) -> Optional[Path]:
    raw = os.environ.get(var)
    if not raw or not raw.strip():
        return None
    return Path(raw.strip()).expanduser()


def int_from_env(var: str) -> Optional[int]:
    raw = os.environ.get(var)
    if not raw or not raw.strip():
        return None
    try:
        return int(raw.strip())
    except ValueError:
        raise ValueError(f'{var} must be an integer, got {raw!r}') from None


def get_prelude_path() -> Optional[Path]:
    """Source file evaluated by Interpreter(prelude='auto'), if configured."""
    return path_from_env(PRELUDE_PATH_VAR)


def get_recursion_limit() -> Optional[int]:
    return int_from_env(RECURSION_LIMIT_VAR)
