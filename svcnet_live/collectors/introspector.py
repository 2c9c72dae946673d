from __future__ import annotations
from typing import Dict, List, Optional, Protocol

from ..config import CFG
from ..models import Listener, ProcInfo, ServiceRecord
from .netaddr import parse_machine_ip
from .processes import parse_process_table
from .services import parse_service_list
from .shell import run_tool
from .sockets import parse_listeners


class SystemIntrospector(Protocol):
    """Source of typed system tables. Every method may raise ToolInvocationError."""

    def list_services(self) -> List[ServiceRecord]: ...
    def list_listeners(self) -> List[Listener]: ...
    def snapshot_processes(self) -> Dict[str, ProcInfo]: ...
    def machine_ip(self) -> Optional[str]: ...

class ShellIntrospector:
    """Runs launchctl/ps/lsof/ifconfig and parses their text output."""

    def __init__(self, cfg: CFG):
        self.cfg = cfg

    def _run(self, cmd, **kw) -> str:
        return run_tool(cmd, timeout=self.cfg.tool_timeout, **kw)

    def list_services(self) -> List[ServiceRecord]:
        return parse_service_list(self._run(self.cfg.services_cmd))

    def list_listeners(self) -> List[Listener]:
        # lsof exits 1 when nothing matched
        out = self._run(self.cfg.listeners_cmd, ok_codes=(0, 1))
        return parse_listeners(out, self.cfg.dev_ports)

    def snapshot_processes(self) -> Dict[str, ProcInfo]:
        return parse_process_table(self._run(self.cfg.processes_cmd), self.cfg.ps_cmd_offset)

    def machine_ip(self) -> Optional[str]:
        return parse_machine_ip(self._run(self.cfg.ifconfig_cmd))

def make_introspector(cfg: CFG) -> SystemIntrospector:
    if cfg.backend == "psutil":
        from .generic import PsutilIntrospector
        return PsutilIntrospector(cfg)
    return ShellIntrospector(cfg)
