from __future__ import annotations
import pathlib
from dataclasses import dataclass
from typing import Dict

EXIT_CONFIG_ERROR = 1

DEFAULT_CONFIG_FILE = "config.ini"
DEFAULT_CONTENT_TYPE = "Audit.AzureActiveDirectory"
DEFAULT_TIMEOUT_SECONDS = 30.0

REQUIRED_KEYS = ("CLIENT_ID", "TENANT_ID", "CLIENT_SECRET")


class ConfigError(Exception):
    exit_code = EXIT_CONFIG_ERROR


@dataclass(frozen=True)
class Credentials:
    client_id: str
    tenant_id: str
    client_secret: str
    proxy_url: str = "NONE"
    content_type: str = DEFAULT_CONTENT_TYPE
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS

    @property
    def uses_proxy(self) -> bool:
        return self.proxy_url != "NONE"


def parse_settings(text: str) -> Dict[str, str]:
    """
    KEY=VALUE lines. Blank lines, '#'/';' comments and [section] headers are
    skipped. Spaces are stripped from values, so 'KEY = a b' reads as 'ab'.
    """
    out: Dict[str, str] = {}
    for raw in text.splitlines():
        line = raw.strip()
        if not line or line[0] in "#;" or (line.startswith("[") and line.endswith("]")):
            continue
        if "=" not in line:
            continue
        key, _, value = line.partition("=")
        out[key.strip().upper()] = value.replace(" ", "").strip()
    return out


def load_credentials(path: str | pathlib.Path = DEFAULT_CONFIG_FILE) -> Credentials:
    p = pathlib.Path(path)
    if not p.is_file():
        raise ConfigError(f"Config file {p} not found!")
    try:
        text = p.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as ex:
        raise ConfigError(f"Config file {p} unreadable: {ex}")

    settings = parse_settings(text)
    missing = [k for k in REQUIRED_KEYS if not settings.get(k)]
    if missing:
        raise ConfigError(f"Config file {p} is missing: {', '.join(missing)}")

    raw_timeout = settings.get("TIMEOUT_SECONDS") or str(DEFAULT_TIMEOUT_SECONDS)
    try:
        timeout = float(raw_timeout)
    except ValueError:
        raise ConfigError(f"TIMEOUT_SECONDS must be a number, got {raw_timeout!r}")

    return Credentials(
        client_id=settings["CLIENT_ID"],
        tenant_id=settings["TENANT_ID"],
        client_secret=settings["CLIENT_SECRET"],
        proxy_url=settings.get("PROXY_URL") or "NONE",
        content_type=settings.get("CONTENT_TYPE") or DEFAULT_CONTENT_TYPE,
        timeout_seconds=timeout,
    )
