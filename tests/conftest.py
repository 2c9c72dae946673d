import pytest

from svcnet_live.collectors import parse_listeners, parse_machine_ip, parse_process_table, parse_service_list
from svcnet_live.config import CFG
from svcnet_live.errors import ToolInvocationError
from svcnet_live.store import LabelStore
from svcnet_live.web import create_app

from tests.fixtures import IFCONFIG, LAUNCHCTL_LIST, LSOF_LISTEN, PS_EJ, PS_EJ_LATIN1, emit_cmd


class FixtureIntrospector:
    """Serves canned tool output; a None text means the tool failed."""

    def __init__(self, services=LAUNCHCTL_LIST, processes=PS_EJ, listeners=LSOF_LISTEN,
                 ifconfig=IFCONFIG, dev_ports=None):
        self.texts = {"services": services, "processes": processes,
                      "listeners": listeners, "ifconfig": ifconfig}
        self.dev_ports = dev_ports

    def _text(self, name):
        text = self.texts[name]
        if text is None:
            raise ToolInvocationError([name], "unavailable")
        return text

    def list_services(self):
        return parse_service_list(self._text("services"))

    def list_listeners(self):
        return parse_listeners(self._text("listeners"), self.dev_ports)

    def snapshot_processes(self):
        return parse_process_table(self._text("processes"))

    def machine_ip(self):
        return parse_machine_ip(self._text("ifconfig"))


@pytest.fixture
def cfg():
    return CFG()


@pytest.fixture
def store():
    s = LabelStore("sqlite://")
    yield s
    s.close()


@pytest.fixture
def make_client(cfg, store):
    def _make(introspector=None):
        app = create_app(cfg, store, introspector or FixtureIntrospector())
        app.config["TESTING"] = True
        return app.test_client()
    return _make


@pytest.fixture
def latin1_cfg():
    """Real subprocesses replaying captured output; ps carries non-UTF-8 bytes."""
    return CFG(
        services_cmd=emit_cmd(LAUNCHCTL_LIST),
        processes_cmd=emit_cmd(PS_EJ_LATIN1),
        listeners_cmd=emit_cmd(LSOF_LISTEN),
        ifconfig_cmd=emit_cmd(IFCONFIG),
        tool_timeout=30.0,
    )
