from __future__ import annotations
from typing import Callable, Dict

from ..models import ProcInfo

INIT_PID = "1"
KERNEL_PID = "0"
SENTINEL_PIDS = (INIT_PID, KERNEL_PID)
DEFAULT_MANAGER = "launchd"
MAX_HOPS = 64

def is_manager_process(cmd: str, manager_name: str = DEFAULT_MANAGER) -> bool:
    return bool(cmd) and manager_name in cmd

def manager_policy(manager_name: str) -> Callable[[str], bool]:
    return lambda cmd: is_manager_process(cmd, manager_name)

def resolve_owner(leaf_pid: str, procs: Dict[str, ProcInfo],
                  is_manager: Callable[[str], bool] = is_manager_process,
                  max_hops: int = MAX_HOPS) -> str:
    """
    Walk up from the socket holder to the process the service manager
    supervises directly, i.e. the first ancestor whose parent is the manager.

    Unknown pids resolve to themselves, so a parent missing from the snapshot
    becomes the answer. A chain that ends at init/kernel without meeting the
    manager resolves to the last process reached. A walk longer than
    max_hops (cyclic ppid data) resolves to the leaf.
    """
    cur = leaf_pid
    for _ in range(max_hops):
        info = procs.get(cur)
        if info is None or info.ppid in SENTINEL_PIDS:
            return cur
        parent = procs.get(info.ppid)
        if parent is not None and is_manager(parent.cmd):
            return cur
        cur = info.ppid
    return leaf_pid
