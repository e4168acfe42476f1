"""Cloudflare Turnstile verification service"""
import httpx
from typing import Optional
import logging

from formrelay.models.turnstile import VerificationFailure, VerificationResult

logger = logging.getLogger(__name__)

SITEVERIFY_URL = "https://challenges.cloudflare.com/turnstile/v0/siteverify"


async def verify_turnstile(
    client: httpx.AsyncClient,
    token: str,
    secret_key: str,
    remote_ip: Optional[str] = None,
    verify_url: str = SITEVERIFY_URL
) -> VerificationResult:
    """
    Verify a Turnstile challenge token

    Fails closed: transport errors, non-2xx responses and unreadable bodies
    all count as a failed verification.

    Args:
        client: Shared HTTP client for the request
        token: Value of the cf-turnstile-response form field
        secret_key: Turnstile secret key
        remote_ip: Submitter's IP address, if known
        verify_url: siteverify endpoint

    Returns:
        VerificationResult
    """
    if not token:
        return VerificationResult.failed(VerificationFailure.MISSING_TOKEN)

    try:
        response = await client.post(
            verify_url,
            headers={"Content-Type": "application/json"},
            json={
                "secret": secret_key,
                "response": token,
                "remoteip": remote_ip
            }
        )
    except httpx.HTTPError as e:
        logger.error(f"Exception during Turnstile request: {type(e).__name__}: {e}")
        return VerificationResult.failed(VerificationFailure.NETWORK_ERROR)

    if not response.is_success:
        logger.error(f"Turnstile API returned status: {response.status_code}")
        return VerificationResult.failed(VerificationFailure.HTTP_STATUS)

    try:
        data = response.json()
    except ValueError:
        logger.error(f"Turnstile API returned a non-JSON body: {response.text[:200]}")
        return VerificationResult.failed(VerificationFailure.MALFORMED_RESPONSE)

    if not isinstance(data, dict):
        logger.error(f"Turnstile API returned an unexpected body: {data!r}")
        return VerificationResult.failed(VerificationFailure.MALFORMED_RESPONSE)

    if data.get("success") is not True:
        codes = data.get("error-codes")
        error_codes = [str(code) for code in codes] if isinstance(codes, list) else []
        logger.warning(f"Turnstile rejected token: {error_codes}")
        return VerificationResult.failed(VerificationFailure.REJECTED, error_codes)

    return VerificationResult(success=True)
