from __future__ import annotations
import logging
from typing import Callable, Dict, Iterable, List, Optional

from ..models import EnrichedService, Listener, ProcInfo, ServiceRecord
from ..utils.net import is_loopback
from .ancestry import MAX_HOPS, SENTINEL_PIDS, is_manager_process, resolve_owner

logger = logging.getLogger(__name__)

LOOPBACK_URL_HOST = "127.0.0.1"

def listener_url(lst: Listener, machine_ip: Optional[str]) -> Optional[str]:
    if is_loopback(lst.host):
        return f"http://{LOOPBACK_URL_HOST}:{lst.port}"
    if not machine_ip:
        return None
    return f"http://{machine_ip}:{lst.port}"

def build_network_map(listeners: Iterable[Listener], procs: Dict[str, ProcInfo],
                      machine_ip: Optional[str],
                      is_manager: Callable[[str], bool] = is_manager_process,
                      max_hops: int = MAX_HOPS) -> Dict[str, str]:
    """
    owning pid -> url. When several listeners resolve to the same owner the
    last one wins; listener order is whatever the tool printed.
    """
    mapping: Dict[str, str] = {}
    for lst in listeners:
        if lst.pid not in procs:
            logger.debug("unattributed listener pid=%s port=%s", lst.pid, lst.port)
            continue
        url = listener_url(lst, machine_ip)
        if url is None:
            continue
        owner = resolve_owner(lst.pid, procs, is_manager, max_hops)
        mapping[owner] = url
    return mapping

def ancestor_urls(mapping: Dict[str, str], procs: Dict[str, ProcInfo],
                  max_hops: int = MAX_HOPS) -> Dict[str, str]:
    """url per ancestor of every mapped owner, for services whose reported
    pid sits above the resolved boundary."""
    up: Dict[str, str] = {}
    for owner, url in mapping.items():
        seen = {owner}
        cur = procs.get(owner)
        for _ in range(max_hops):
            if cur is None or cur.ppid in SENTINEL_PIDS or cur.ppid in seen:
                break
            seen.add(cur.ppid)
            up[cur.ppid] = url
            cur = procs.get(cur.ppid)
    return up

def correlate(services: Iterable[ServiceRecord], listeners: Iterable[Listener],
              procs: Dict[str, ProcInfo], machine_ip: Optional[str],
              is_manager: Callable[[str], bool] = is_manager_process,
              max_hops: int = MAX_HOPS) -> List[EnrichedService]:
    mapping = build_network_map(listeners, procs, machine_ip, is_manager, max_hops)
    fallback = ancestor_urls(mapping, procs, max_hops)
    out: List[EnrichedService] = []
    for rec in services:
        url = None
        if rec.running:
            url = mapping.get(rec.pid) or fallback.get(rec.pid)
        out.append(EnrichedService.from_record(rec, url))
    return out
