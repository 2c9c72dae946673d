from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

NOT_RUNNING = "Not Running"

@dataclass
class ServiceRecord:
    pid: str  # live pid or NOT_RUNNING
    status: str
    label: str

    @property
    def running(self) -> bool:
        return self.pid != NOT_RUNNING

@dataclass
class Listener:
    pid: str  # immediate holder, not necessarily the service
    host: str  # '*', '127.0.0.1', '::1', ...
    port: int

@dataclass
class ProcInfo:
    pid: str
    ppid: str
    cmd: str = ""

@dataclass
class EnrichedService:
    pid: str
    status: str
    label: str
    network_url: Optional[str] = None

    @classmethod
    def from_record(cls, rec: ServiceRecord, url: Optional[str] = None) -> "EnrichedService":
        return cls(pid=rec.pid, status=rec.status, label=rec.label, network_url=url)

    def to_dict(self) -> dict:
        d = {"pid": self.pid, "status": self.status, "label": self.label}
        if self.network_url:
            d["networkUrl"] = self.network_url
        return d
