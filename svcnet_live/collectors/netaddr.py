import re
from typing import Optional

from ..utils.net import is_ipv4, is_loopback

# macOS/BSD: "inet 192.168.1.50 netmask ..."; old net-tools: "inet addr:192.168.1.50"
INET_RE = re.compile(r"\binet\s+(?:addr:)?(?P<ip>\d{1,3}(?:\.\d{1,3}){3})\b")

def parse_machine_ip(text: str) -> Optional[str]:
    """First non-loopback IPv4 address in ifconfig output, or None."""
    for m in INET_RE.finditer(text or ""):
        ip = m.group("ip")
        if is_ipv4(ip) and not is_loopback(ip):
            return ip
    return None
