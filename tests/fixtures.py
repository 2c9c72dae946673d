"""Captured tool output used by the tests."""
import sys

LAUNCHCTL_LIST = """\
PID\tStatus\tLabel
501\t0\tcom.example.myapp
-\t0\tcom.apple.SafariHistoryServiceAgent
812\t-9\tcom.example.web server
-\t78\tcom.example.broken

77
"""

PS_EJ = """\
USER               PID  PPID  PGID   SESS JOBC STAT   TT       TIME COMMAND
root                 1     0     1      0    0 Ss     ??   12:01.15 /sbin/launchd
me                 501     1   501      0    0 S      ??    0:00.10 /usr/local/bin/myapp-launcher --config /etc/myapp.conf
me                 700   501   501      0    1 S      ??    0:03.42 /usr/local/bin/node server.js --port 8080
me                 812     1   812      0    0 S      ??    0:00.55 /usr/bin/python3 -m http.server 3000
me                 900   812   812      0    1 S
"""

LSOF_LISTEN = """\
COMMAND   PID USER   FD   TYPE             DEVICE SIZE/OFF NODE NAME
node      700   me   23u  IPv4 0x1a2b3c4d5e6f7a8b      0t0  TCP *:8080 (LISTEN)
python3   812   me    4u  IPv4 0x1a2b3c4d5e6f7a8c      0t0  TCP 127.0.0.1:3000 (LISTEN)
rapportd  344   me    8u  IPv4 0x1a2b3c4d5e6f7a8d      0t0  TCP 127.0.0.1:9999 (LISTEN)
ControlCe 420   me    9u  IPv6 0x1a2b3c4d5e6f7a8e      0t0  TCP [::1]:5173 (LISTEN)
weird     555   me    9u  IPv4 0x1a2b3c4d5e6f7a8f      0t0  TCP *:* (LISTEN)
short     556   me
"""

IFCONFIG = """\
lo0: flags=8049<UP,LOOPBACK,RUNNING,MULTICAST> mtu 16384
\tinet 127.0.0.1 netmask 0xff000000
\tinet6 ::1 prefixlen 128
en0: flags=8863<UP,BROADCAST,SMART,RUNNING,SIMPLEX,MULTICAST> mtu 1500
\tinet6 fe80::1c2b:3d4e:5f60:7182%en0 prefixlen 64 secured scopeid 0x6
\tinet 192.168.1.50 netmask 0xffffff00 broadcast 192.168.1.255
en1: flags=8863<UP,BROADCAST,SMART,RUNNING,SIMPLEX,MULTICAST> mtu 1500
\tinet 10.0.0.7 netmask 0xffffff00 broadcast 10.0.0.255
"""

IFCONFIG_LOOPBACK_ONLY = """\
lo0: flags=8049<UP,LOOPBACK,RUNNING,MULTICAST> mtu 16384
\tinet 127.0.0.1 netmask 0xff000000
"""

# ps output with a non-UTF-8 command line (Latin-1 path plus stray bytes)
PS_EJ_LATIN1 = PS_EJ.encode() + (
    b"me                 600     1   600      0    0 S      ??    0:00.01 /Applications/Caf\xe9 \xff\xfe\n"
)


def emit_cmd(data):
    """A command that writes data (str or bytes) verbatim to stdout."""
    if isinstance(data, str):
        data = data.encode()
    return (sys.executable, "-c", f"import sys; sys.stdout.buffer.write({data!r})")
