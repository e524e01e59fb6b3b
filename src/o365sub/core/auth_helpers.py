from __future__ import annotations
import json
import logging
from typing import Any, Dict

from o365sub.config.loader import Credentials
from o365sub.http.client import HttpClient
from o365sub.http.errors import NetworkError
from o365sub.core.auth import (
    AuthError, InvalidTenantId, InvalidClientId, InvalidClientSecret,
    ConsentRequired, TokenUnavailable, AuthNetworkError
)

LOGIN = "https://login.microsoftonline.com"
RESOURCE = "https://manage.office.com"

log = logging.getLogger("o365sub")


def build_token_url(tenant_id: str) -> str:
    return f"{LOGIN}/{tenant_id}/oauth2/token"

def build_token_form(creds: Credentials) -> Dict[str, str]:
    return {
        "client_id": creds.client_id,
        "client_secret": creds.client_secret,
        "grant_type": "client_credentials",
        "resource": RESOURCE,
    }

def redact(payload: Dict[str, Any]) -> Dict[str, Any]:
    return {k: ("***" if k in ("access_token", "refresh_token") else v) for k, v in payload.items()}

def _map_aad_error(desc: str) -> AuthError:
    d = desc or ""
    if "AADSTS7000215" in d:  # invalid client secret
        return InvalidClientSecret("Invalid client secret.")
    if "AADSTS700016" in d:  # invalid client id
        return InvalidClientId("Invalid client ID or app not found.")
    if "invalid_tenant" in d or "AADSTS90002" in d:
        return InvalidTenantId("Invalid tenant ID or tenant not found.")
    if "AADSTS65001" in d or "consent_required" in d:
        return ConsentRequired("Admin consent required.")
    return TokenUnavailable(d or "Failed to retrieve access token.")

def extract_token(payload: Any) -> str | None:
    """Value of access_token, or None when absent, empty or the literal 'null'."""
    if not isinstance(payload, dict):
        return None
    token = payload.get("access_token")
    if not isinstance(token, str) or not token or token == "null":
        return None
    return token

def request_token(url: str, creds: Credentials, http: HttpClient | None = None) -> str:
    http = http or HttpClient(proxy_url=creds.proxy_url, timeout=creds.timeout_seconds)
    try:
        resp = http.post_form(url, build_token_form(creds))
    except NetworkError as ex:
        raise AuthNetworkError(str(ex))

    try:
        payload = json.loads(resp.text or "{}")
    except ValueError:
        payload = {}
    if isinstance(payload, dict):
        log.info("OAuth Response: %s", json.dumps(redact(payload)))
    else:
        log.info("OAuth Response: <unexpected payload>")

    token = extract_token(payload)
    if token is None:
        desc = payload.get("error_description", "") if isinstance(payload, dict) else ""
        raise _map_aad_error(desc)
    return token
