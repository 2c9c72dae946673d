from .introspector import ShellIntrospector, SystemIntrospector, make_introspector
from .netaddr import parse_machine_ip
from .processes import parse_process_table
from .services import parse_service_list
from .shell import run_tool
from .sockets import filter_listeners, parse_listeners

__all__ = [
    "ShellIntrospector", "SystemIntrospector", "make_introspector",
    "parse_machine_ip", "parse_process_table", "parse_service_list",
    "run_tool", "filter_listeners", "parse_listeners",
]
