from __future__ import annotations
from typing import Dict, Optional
import requests

from o365sub.http.errors import (
    ApiError, UnauthorizedError, ForbiddenError, NotFoundError,
    ThrottleError, ServerError, NetworkError
)

NO_PROXY = "NONE"


def proxies_for(proxy_url: str | None) -> Optional[Dict[str, str]]:
    """requests-style proxy mapping, or None when proxying is disabled."""
    if not proxy_url or proxy_url == NO_PROXY:
        return None
    return {"http": proxy_url, "https": proxy_url}


class HttpClient:
    """
    Single-shot HTTP. One request per call, no retries; anything >= 400 is
    raised as a typed ApiError.
    """
    def __init__(self, proxy_url: str | None = None, timeout: float = 30.0, logger=None):
        self.timeout = timeout
        self.proxies = proxies_for(proxy_url)
        self._session = requests.Session()
        self._log = logger  # optional, expects .debug()

    def _log_debug(self, msg: str) -> None:
        if self._log:
            self._log.debug(msg)

    def request(
        self,
        method: str,
        url: str,
        *,
        headers: Optional[Dict[str, str]] = None,
        data: Optional[str | Dict[str, str]] = None,
    ) -> requests.Response:
        self._log_debug(f"{method.upper()} {url}")
        try:
            resp = self._session.request(
                method=method.upper(),
                url=url,
                headers=headers or {},
                data=data,
                proxies=self.proxies,
                timeout=self.timeout,
            )
        except requests.exceptions.RequestException as ex:
            raise NetworkError(-1, url, str(ex))

        self._log_debug(f"{resp.status_code} {url}")
        if resp.status_code < 400:
            return resp

        # Map to typed errors
        body_snip = _safe_snip(resp)
        if resp.status_code == 401:
            raise UnauthorizedError(401, url, "Unauthorized", body_snip)
        if resp.status_code == 403:
            raise ForbiddenError(403, url, "Forbidden", body_snip)
        if resp.status_code == 404:
            raise NotFoundError(404, url, "Not Found", body_snip)
        if resp.status_code == 429:
            raise ThrottleError(429, url, "Too Many Requests", body_snip)
        if 500 <= resp.status_code <= 599:
            raise ServerError(resp.status_code, url, "Server error", body_snip)
        raise ApiError(resp.status_code, url, "HTTP error", body_snip)

    def send_text(self, method: str, url: str, *, headers=None, body: str | None = None) -> str:
        r = self.request(method, url, headers=headers, data=body)
        return r.text or ""

    def post_form(self, url: str, form: Dict[str, str]) -> requests.Response:
        """POST url-encoded form data; the caller inspects status and body."""
        self._log_debug(f"POST {url} (form)")
        try:
            return self._session.post(
                url,
                data=form,
                headers={"Content-Type": "application/x-www-form-urlencoded"},
                proxies=self.proxies,
                timeout=self.timeout,
            )
        except requests.exceptions.RequestException as ex:
            raise NetworkError(-1, url, str(ex))


def _safe_snip(resp: requests.Response, max_len: int = 400) -> str:
    txt = resp.text or ""
    return txt[:max_len]
