from __future__ import annotations
import argparse
import atexit

from .config import BACKENDS, init_cfg_from_args
from .logging_config import setup_logging
from .store import LabelStore
from .utils.path import db_url_for
from .web import create_app

def parse_args(argv=None):
    ap = argparse.ArgumentParser(description='launchd services with the network URLs they listen on')
    ap.add_argument('--host', type=str, default=None, help='bind address (default 127.0.0.1)')
    ap.add_argument('--port', type=int, default=None, help='HTTP port (default 8765)')
    ap.add_argument('--config', type=str, default=None, help='YAML or JSON settings file')
    ap.add_argument('--backend', choices=BACKENDS, default=None, help='how processes/listeners are read')
    ap.add_argument('--timeout', type=float, default=None, help='per-tool timeout in seconds')
    ap.add_argument('--dev-ports', type=str, default='', help='comma-separated loopback ports to keep (e.g. 3000,5173)')
    ap.add_argument('--db', type=str, default=None, help='label database file')
    ap.add_argument('--log-level', type=str, default=None, help='DEBUG, INFO, WARNING, ...')
    return ap.parse_args(argv)

def main(argv=None):
    args = parse_args(argv)
    cfg = init_cfg_from_args(args)
    setup_logging(cfg.log_level)

    store = LabelStore(db_url_for(cfg.db_path))
    atexit.register(store.close)

    app = create_app(cfg, store)
    print(f"[*] Serving on http://{cfg.host}:{cfg.port}")
    app.run(host=cfg.host, port=cfg.port, debug=False, use_reloader=False)

if __name__ == '__main__':
    main()
