from __future__ import annotations
import os
from pathlib import Path
from typing import Optional, Union

BASE_DIR = Path(__file__).parent.resolve()

def to_abs_path(p: Optional[Union[str, os.PathLike]]) -> Optional[Path]:
    """Convert p to an absolute path.
    Sequence:
      1) Absolute: expanduser+resolve
      2) Relative to CWD (config files must exist there to win)
      3) Relative to package folder (BASE_DIR)
    """
    if not p:
        return None
    pp = Path(p).expanduser()
    if pp.is_absolute():
        return pp.resolve()
    p1 = Path.cwd() / pp
    if p1.exists():
        return p1.resolve()
    return (BASE_DIR / pp).resolve()

def db_url_for(path: Union[str, os.PathLike]) -> str:
    """sqlite URL for a database file; creates the parent directory."""
    if str(path) == ":memory:":
        return "sqlite://"
    pp = Path(path).expanduser()
    if not pp.is_absolute():
        pp = Path.cwd() / pp
    pp.parent.mkdir(parents=True, exist_ok=True)
    return f"sqlite:///{pp.resolve()}"
