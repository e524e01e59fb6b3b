# src/o365sub/cli.py
from __future__ import annotations
import argparse
import logging
import sys
from typing import Callable, List, Optional

from o365sub.app.logging_setup import setup_logging
from o365sub.app.menu import MenuController
from o365sub.app.state import Session
from o365sub.config.loader import DEFAULT_CONFIG_FILE, ConfigError, load_credentials
from o365sub.core.auth import AuthError, acquire_token
from o365sub.http.errors import ApiError

log = logging.getLogger("o365sub")

HELP = """\
Short Documentation :

 o365-subscription-check
 Manage Office 365 Management Activity API subscriptions for one tenant:
   - check the status of active subscriptions
   - start or stop the subscription for the configured content type
   - list available audit content blobs

 Usage:
   o365-subscription-check [--debug] [--log] [--config PATH] [--log-dir DIR] [--help]

 Options:
   --debug          Print API requests and raw responses.
   --log            Append timestamped entries to check_o365_subscription_<date>.log.
   --config PATH    Settings file (default: config.ini).
   --log-dir DIR    Directory for the log file (default: current directory).
   --help           Display this help message and exit.

 Config file keys (KEY=VALUE):
   CLIENT_ID=your_client_id
   TENANT_ID=your_tenant_id
   CLIENT_SECRET=your_client_secret
   PROXY_URL=your_proxy_url (or NONE if not using a proxy)
   CONTENT_TYPE=Audit.AzureActiveDirectory (optional)
   TIMEOUT_SECONDS=30 (optional)

 Exit Codes:
   0  - Success
   1  - Configuration file missing or invalid
   2  - Failed to obtain an access token
   3  - API request error
"""


class _Parser(argparse.ArgumentParser):
    """Usage errors exit 1 like a bad config file."""
    def error(self, message):
        raise ConfigError(f"Invalid arguments: {message}")


def build_parser() -> argparse.ArgumentParser:
    parser = _Parser("o365-subscription-check", add_help=False)
    parser.add_argument("--debug", action="store_true")
    parser.add_argument("--log", action="store_true")
    parser.add_argument("--help", "-h", action="store_true")
    parser.add_argument("--config", default=DEFAULT_CONFIG_FILE)
    parser.add_argument("--log-dir", default=".")
    return parser


def _fail(message: str, ex: Exception) -> int:
    print(f"❌ {message}")
    log.error(message)
    return ex.exit_code


def main(argv: Optional[List[str]] = None, read: Callable[[str], str] = input) -> int:
    try:
        # unknown flags are ignored
        ns, _ = build_parser().parse_known_args(argv)
    except ConfigError as ex:
        print(f"❌ Error: {ex}")
        return ex.exit_code
    if ns.help:
        print(HELP)
        return 0
    if ns.debug:
        print("🛠 Debug mode enabled")
    if ns.log:
        print("📝 Logging mode enabled")
    try:
        setup_logging(ns.log, ns.log_dir)
    except OSError as ex:
        print(f"❌ Error: cannot open log file in {ns.log_dir}: {ex}")
        return ConfigError.exit_code
    log.info("Script execution started")

    try:
        creds = load_credentials(ns.config)
    except ConfigError as ex:
        return _fail(f"Error: {ex}", ex)

    try:
        token = acquire_token(creds)
    except AuthError as ex:
        return _fail(f"Failed to retrieve access token. {ex} ({ex.hint})", ex)

    session = Session(creds, token, debug=ns.debug)
    try:
        return MenuController(session.activity(), read=read).run()
    except ApiError as ex:
        detail = f" {ex.body_snippet}" if ex.body_snippet else ""
        return _fail(f"API request failed ({ex.status}) {ex.url}: {ex}{detail}", ex)


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
