from .ancestry import is_manager_process, resolve_owner
from .correlate import build_network_map, correlate
from .snapshot import NetworkSnapshot, collect, collect_network

__all__ = [
    "is_manager_process", "resolve_owner", "build_network_map", "correlate",
    "NetworkSnapshot", "collect", "collect_network",
]
