from __future__ import annotations
import logging
from typing import Callable, Dict

from o365sub.http.client import HttpClient

MANAGE_BASE = "https://manage.office.com/api/v1.0"

log = logging.getLogger("o365sub")


def subscriptions_url(tenant_id: str) -> str:
    return f"{MANAGE_BASE}/{tenant_id}/activity/feed/subscriptions"


class ActivityClient:
    """
    Office 365 Management Activity API, subscription endpoints only.
    Every method issues exactly one request and returns the raw body text.
    """
    def __init__(
        self,
        tenant_id: str,
        token_provider: Callable[[], str],
        http: HttpClient,
        content_type: str,
        echo=None,
    ):
        self.base = subscriptions_url(tenant_id)
        self.content_type = content_type
        self._token_provider = token_provider
        self._http = http
        self._echo = echo  # optional, expects .debug()

    def _headers(self) -> Dict[str, str]:
        return {
            "Authorization": f"Bearer {self._token_provider()}",
            "Content-Type": "application/json",
        }

    def call(self, method: str, url: str, body: str | None = None) -> str:
        log.info("API Request: %s %s %s", method, url, body or "")
        if self._echo:
            self._echo.debug(f"API Request: {method} {url} {body or ''}")
        text = self._http.send_text(method, url, headers=self._headers(), body=body)
        if self._echo:
            self._echo.debug("🛠 Raw API response:")
            self._echo.debug(text)
        log.info("API Response: %s", text)
        return text

    def list_subscriptions(self) -> str:
        return self.call("GET", f"{self.base}/list")

    def stop_subscription(self) -> str:
        return self.call("POST", f"{self.base}/stop?contentType={self.content_type}", "{}")

    def start_subscription(self) -> str:
        return self.call("POST", f"{self.base}/start?contentType={self.content_type}", "{}")

    def list_content(self) -> str:
        return self.call("GET", f"{self.base}/content?contentType={self.content_type}")
