"""
Service-account authorization for the Rules API.

The key is loaded through firebase_admin's `Certificate`, which carries the
Firebase OAuth scopes. The token exchange itself is blocking (google-auth
uses `requests`), so it runs in a worker thread.
"""

import asyncio
import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Mapping

from firebase_admin import credentials

from rulesim.config import settings
from rulesim.core.errors import AuthorizationError
from rulesim.schemas.dataset import Credential

logger = logging.getLogger(__name__)

# Refresh a little before the token actually expires.
TOKEN_EXPIRY_MARGIN = timedelta(seconds=60)


def load_credentials(credential: Credential | Mapping[str, Any]) -> credentials.Certificate:
    """Build a Certificate from a service-account key (model or raw mapping)."""
    if not isinstance(credential, Credential):
        credential = Credential.model_validate(credential)

    sa_info = credential.model_dump(exclude_none=True)
    sa_info.setdefault("type", "service_account")
    sa_info.setdefault("token_uri", settings.token_uri)

    try:
        return credentials.Certificate(sa_info)
    except (ValueError, KeyError) as e:
        logger.error(f"[AUTH] Invalid service account for {credential.client_email}: {e}")
        raise AuthorizationError(f"Invalid service account credential: {e}") from e


async def fetch_access_token(certificate: credentials.Certificate) -> credentials.AccessTokenInfo:
    """Exchange the signed JWT for an OAuth2 access token."""
    email = certificate.service_account_email
    try:
        token_info = await asyncio.to_thread(certificate.get_access_token)
    except Exception as e:
        logger.error(f"[AUTH] Token exchange failed for {email}: {e}")
        raise AuthorizationError(f"Could not authorize {email}: {e}") from e

    logger.info(f"[AUTH] Authorized {email}")
    return token_info


class AuthorizedClient:
    """Authenticated handle: a certificate plus its current access token."""

    def __init__(self, project_id: str, certificate: credentials.Certificate, token_info):
        self.project_id = project_id
        self.certificate = certificate
        self._token_info = token_info

    def _expired(self) -> bool:
        expiry = self._token_info.expiry
        # google-auth reports expiry as a naive UTC datetime.
        return expiry is not None and datetime.now(timezone.utc).replace(tzinfo=None) >= expiry - TOKEN_EXPIRY_MARGIN

    async def access_token(self) -> str:
        if self._expired():
            logger.info("[AUTH] Access token expired, refreshing")
            self._token_info = await fetch_access_token(self.certificate)
        return self._token_info.access_token


async def authorize(credential: Credential | Mapping[str, Any]) -> AuthorizedClient:
    if not isinstance(credential, Credential):
        credential = Credential.model_validate(credential)

    certificate = load_credentials(credential)
    token_info = await fetch_access_token(certificate)
    return AuthorizedClient(credential.project_id, certificate, token_info)
