from __future__ import annotations
import logging

from o365sub.config.loader import Credentials

EXIT_AUTH_ERROR = 2

log = logging.getLogger("o365sub")


class AuthError(Exception):
    code = "auth_error"; hint = "Unknown error."
    exit_code = EXIT_AUTH_ERROR
    def __init__(self, message: str = "", *, hint: str | None = None):
        super().__init__(message or self.__class__.__name__)
        if hint: self.hint = hint

class InvalidTenantId(AuthError):
    code = "invalid_tenant_id"; hint = "Tenant ID invalid or unreachable."
class InvalidClientId(AuthError):
    code = "invalid_client_id"; hint = "Client ID invalid."
class InvalidClientSecret(AuthError):
    code = "invalid_client_secret"; hint = "Client Secret rejected."
class ConsentRequired(AuthError):
    code = "consent_required"; hint = "Admin consent required for the Office 365 Management API."
class TokenUnavailable(AuthError):
    code = "token_unavailable"; hint = "Token endpoint answered without an access_token."
class AuthNetworkError(AuthError):
    code = "network_error"; hint = "Network, proxy or timeout issue."


def acquire_token(creds: Credentials, http=None) -> str:
    """
    Exchange client credentials for a Management API bearer token.
    Raises an AuthError subclass; nothing is retried.
    """
    # helpers do the heavy lifting
    from o365sub.core.auth_helpers import build_token_url, request_token

    log.info("Obtaining access token")
    token = request_token(build_token_url(creds.tenant_id), creds, http=http)
    log.info("Access token retrieved successfully")
    return token
