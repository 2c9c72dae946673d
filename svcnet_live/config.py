from __future__ import annotations
import logging
from dataclasses import dataclass, field, fields
from typing import Any, Dict, Set, Tuple

from .settings import load_settings

logger = logging.getLogger(__name__)

# Loopback listeners are noise unless they sit on a typical dev-server port.
DEFAULT_DEV_PORTS = {3000, 3001, 4000, 4200, 5000, 5173, 8000, 8080, 8081, 8888, 9000}

SERVICES_CMD = ("launchctl", "list")
PROCESSES_CMD = ("ps", "-ej")
LISTENERS_CMD = ("lsof", "-iTCP", "-sTCP:LISTEN", "-n", "-P")
IFCONFIG_CMD = ("ifconfig",)

BACKENDS = ("shell", "psutil")

@dataclass
class CFG:
    host: str = "127.0.0.1"
    port: int = 8765
    backend: str = "shell"
    tool_timeout: float = 5.0
    manager_name: str = "launchd"
    dev_ports: Set[int] = field(default_factory=lambda: set(DEFAULT_DEV_PORTS))
    max_hops: int = 64
    db_path: str = "data/svcnet.db"
    log_level: str = "INFO"
    services_cmd: Tuple[str, ...] = SERVICES_CMD
    processes_cmd: Tuple[str, ...] = PROCESSES_CMD
    listeners_cmd: Tuple[str, ...] = LISTENERS_CMD
    ifconfig_cmd: Tuple[str, ...] = IFCONFIG_CMD
    ps_cmd_offset: int = 9  # COMMAND column of `ps -ej`

def parse_ports(spec) -> Set[int]:
    """'3000, 5173' or [3000, 5173] -> {3000, 5173}"""
    if isinstance(spec, str):
        items = [x.strip() for x in spec.split(",") if x.strip()]
    else:
        items = list(spec or [])
    ports = {int(x) for x in items}
    bad = sorted(p for p in ports if not 1 <= p <= 65535)
    if bad:
        raise ValueError(f"port out of range: {bad}")
    return ports

def apply_settings(cfg: CFG, data: Dict[str, Any]) -> CFG:
    known = {f.name for f in fields(CFG)}
    for key, value in (data or {}).items():
        key = key.replace("-", "_")
        if key not in known:
            logger.warning("ignoring unknown config key %r", key)
            continue
        if key == "dev_ports":
            value = parse_ports(value)
        elif key.endswith("_cmd"):
            value = tuple(value.split()) if isinstance(value, str) else tuple(value)
        setattr(cfg, key, value)
    return cfg

def init_cfg_from_args(args) -> CFG:
    cfg = CFG()
    if getattr(args, "config", None):
        apply_settings(cfg, load_settings(args.config))
    if getattr(args, "host", None):
        cfg.host = args.host
    if getattr(args, "port", None):
        cfg.port = int(args.port)
    if getattr(args, "backend", None):
        cfg.backend = args.backend
    if getattr(args, "timeout", None):
        cfg.tool_timeout = float(args.timeout)
    if getattr(args, "dev_ports", ""):
        cfg.dev_ports = parse_ports(args.dev_ports)
    if getattr(args, "db", None):
        cfg.db_path = args.db
    if getattr(args, "log_level", None):
        cfg.log_level = args.log_level
    if cfg.backend not in BACKENDS:
        raise ValueError(f"unknown backend {cfg.backend!r}, expected one of {BACKENDS}")
    return cfg
