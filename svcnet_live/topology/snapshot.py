from __future__ import annotations
import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from ..config import CFG
from ..errors import FatalPipelineError, ToolInvocationError
from ..models import EnrichedService, Listener, ProcInfo
from .ancestry import manager_policy
from .correlate import correlate

logger = logging.getLogger(__name__)

@dataclass
class NetworkSnapshot:
    procs: Dict[str, ProcInfo] = field(default_factory=dict)
    listeners: List[Listener] = field(default_factory=list)
    machine_ip: Optional[str] = None

def collect_network(introspector) -> NetworkSnapshot:
    """Processes, listeners and machine IP, taken back to back.

    Each part degrades on its own: a failed tool leaves that part empty.
    """
    snap = NetworkSnapshot()
    try:
        snap.listeners = introspector.list_listeners()
    except ToolInvocationError as e:
        logger.warning("listeners unavailable: %s", e)
    try:
        snap.procs = introspector.snapshot_processes()
    except ToolInvocationError as e:
        logger.warning("process snapshot unavailable: %s", e)
    try:
        snap.machine_ip = introspector.machine_ip()
    except ToolInvocationError as e:
        logger.warning("machine ip unavailable: %s", e)
    return snap

def collect(introspector, cfg: CFG) -> List[EnrichedService]:
    """One correlation request: services and network half run concurrently."""
    with ThreadPoolExecutor(max_workers=2, thread_name_prefix="svcnet") as pool:
        f_services = pool.submit(introspector.list_services)
        f_network = pool.submit(collect_network, introspector)
        net = f_network.result()
        try:
            services = f_services.result()
        except ToolInvocationError as e:
            raise FatalPipelineError(f"service list unavailable: {e}") from e
    logger.debug("collected %d services, %d listeners, %d procs, ip=%s",
                 len(services), len(net.listeners), len(net.procs), net.machine_ip)
    return correlate(services, net.listeners, net.procs, net.machine_ip,
                     manager_policy(cfg.manager_name), cfg.max_hops)
