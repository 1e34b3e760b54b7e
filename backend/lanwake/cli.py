"""Command-line entry point.

Usage:
    lanwake serve [--host HOST] [--port PORT] [--source-ip IP]
                  [--devices-file PATH] [--static-dir PATH] [--log-level LEVEL]
    lanwake wake MAC [--source-ip IP]
"""

from __future__ import annotations

import argparse
import logging
import os
from typing import Sequence

logger = logging.getLogger("lanwake")

# CLI option -> environment variable read by lanwake.config.Settings
_SERVE_OVERRIDES = {
    "host": "LANWAKE_HOST",
    "port": "LANWAKE_PORT",
    "source_ip": "LANWAKE_SOURCE_IP",
    "devices_file": "LANWAKE_DEVICES_FILE",
    "static_dir": "LANWAKE_STATIC_DIR",
    "log_level": "LANWAKE_LOG_LEVEL",
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lanwake",
        description="Send Wake-on-LAN magic packets, directly or through a small HTTP API.",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    serve = sub.add_parser("serve", help="Run the HTTP API")
    serve.add_argument("--host", help="Address to listen on")
    serve.add_argument("--port", type=int, help="Port to listen on")
    serve.add_argument("-s", "--source-ip", help="Local IPv4 address to broadcast from")
    serve.add_argument("-c", "--devices-file", help="Path of the JSON device list")
    serve.add_argument("-d", "--static-dir", help="Directory served under /static/")
    serve.add_argument("--log-level", help="Log level (DEBUG, INFO, WARNING, ...)")

    wake = sub.add_parser("wake", help="Send one magic packet and exit")
    wake.add_argument("mac", help="MAC address, for instance aa:bb:cc:dd:ee:ff")
    wake.add_argument("-s", "--source-ip", default="", help="Local IPv4 address to broadcast from")

    return parser


def _serve(args: argparse.Namespace) -> int:
    # Settings are read from the environment on first import of lanwake.config,
    # so overrides must be exported before lanwake.main is imported.
    for option, env_var in _SERVE_OVERRIDES.items():
        value = getattr(args, option)
        if value is not None:
            os.environ[env_var] = str(value)

    from lanwake.main import run

    run()
    return 0


def _wake(args: argparse.Namespace) -> int:
    from lanwake.exceptions import WakeError
    from lanwake.utils.wol import wake_string

    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")
    try:
        wake_string(args.mac, args.source_ip)
    except (WakeError, OSError) as e:
        logger.error("Failed to wake %s: %s", args.mac, e)
        return 1
    logger.info("Magic packet sent to %s", args.mac)
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    if args.command == "serve":
        return _serve(args)
    return _wake(args)


if __name__ == "__main__":
    raise SystemExit(main())
