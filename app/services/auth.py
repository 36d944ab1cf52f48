"""Bearer token verification against the platform auth service.

The service answers ``{"valid": true|false}`` for a token. Anything other
than an explicit ``true`` is treated as a rejection.
"""

import logging
from collections.abc import Callable
from typing import Protocol

import httpx

from app.config import AUTH_TIMEOUT, AUTH_VERIFY_URL, PlatformCredentials
from app.models.summary import TokenVerification

logger = logging.getLogger(__name__)


class Verifier(Protocol):
    async def verify(self, credential: str | None) -> TokenVerification: ...


VerifierFactory = Callable[[PlatformCredentials], Verifier]


class TokenVerifier:
    def __init__(
        self,
        credentials: PlatformCredentials,
        url: str = AUTH_VERIFY_URL,
        timeout: float = AUTH_TIMEOUT,
    ) -> None:
        self.credentials = credentials
        self.url = url
        self.timeout = timeout

    async def verify(self, credential: str | None) -> TokenVerification:
        if not self.url:
            raise RuntimeError("AUTH_VERIFY_URL not set")

        async with httpx.AsyncClient(timeout=self.timeout) as client:
            resp = await client.post(
                self.url,
                headers={
                    "X-Project-Id": self.credentials.project_id,
                    "Authorization": f"Bearer {self.credentials.secret_key}",
                    "Content-Type": "application/json",
                },
                json={"token": credential},
            )
            resp.raise_for_status()

        return TokenVerification.model_validate(resp.json())


async def verify_token(verifier: Verifier, credential: str | None) -> bool:
    """Return True only when the verifier positively accepts the credential."""
    try:
        result = await verifier.verify(credential)
        return result.valid is True
    except httpx.HTTPStatusError as e:
        logger.warning("Auth service returned %s, rejecting token", e.response.status_code)
    except Exception as e:
        logger.warning("Token verification failed, rejecting token: %s", e)
    return False


def get_token_verifier_factory() -> VerifierFactory:
    return TokenVerifier
