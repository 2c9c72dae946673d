from __future__ import annotations
import json
import logging
from typing import Any, Dict, Optional

import yaml

from .utils.path import to_abs_path

logger = logging.getLogger(__name__)

def load_settings(path: Optional[str]) -> Dict[str, Any]:
    """Read a YAML (.yaml/.yml) or JSON settings file into a dict.

    A missing file is not fatal: the defaults stay in effect.
    """
    if not path:
        return {}
    p = to_abs_path(path)
    if not p or not p.exists():
        logger.warning("config file not found: %s", p)
        return {}
    txt = p.read_text(encoding="utf-8")
    data = yaml.safe_load(txt) if p.suffix in (".yaml", ".yml") else json.loads(txt)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"{p}: top level must be a mapping, got {type(data).__name__}")
    return data
