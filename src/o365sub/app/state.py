from __future__ import annotations

from o365sub.config.loader import Credentials
from o365sub.core.activity_client import ActivityClient
from o365sub.http.client import HttpClient


class _Dbg:
    def debug(self, msg):
        print("[HTTP]", msg)


class Session:
    """Everything one run needs: credentials, token and run flags."""
    def __init__(self, credentials: Credentials, token: str, debug: bool = False, http: HttpClient | None = None):
        if not token or token == "null":
            raise ValueError("Session requires a usable access token")
        self.credentials = credentials
        self.token = token
        self.debug = debug
        self.http = http or HttpClient(
            proxy_url=credentials.proxy_url,
            timeout=credentials.timeout_seconds,
            logger=_Dbg() if debug else None,
        )

    def activity(self) -> ActivityClient:
        return ActivityClient(
            tenant_id=self.credentials.tenant_id,
            token_provider=lambda: self.token,
            http=self.http,
            content_type=self.credentials.content_type,
            echo=_Dbg() if self.debug else None,
        )
