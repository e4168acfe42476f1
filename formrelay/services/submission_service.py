"""Application submission pipeline"""
import httpx
from typing import Any, Mapping, Optional
import logging

from formrelay.config import Settings
from formrelay.exceptions import CaptchaError, ConfigurationError
from formrelay.models.submission import Submission
from formrelay.models.telegram import OutboundMessage
from formrelay.services.telegram_service import send_message
from formrelay.services.templates import SubmissionTemplate, get_template
from formrelay.services.turnstile_service import verify_turnstile

logger = logging.getLogger(__name__)

TURNSTILE_FIELD = "cf-turnstile-response"


def ensure_configured(settings: Settings) -> SubmissionTemplate:
    """
    Check the process configuration before any request data is read

    Returns:
        The configured submission template

    Raises:
        ConfigurationError: If a required secret is missing or the template is unknown
    """
    missing = settings.missing_settings()
    if missing:
        logger.error(f"CRITICAL: Environment variables are not set: {', '.join(missing)}")
        raise ConfigurationError()
    return get_template(settings.submission_template)


async def relay_submission(
    client: httpx.AsyncClient,
    form: Mapping[str, Any],
    settings: Settings,
    template: SubmissionTemplate,
    remote_ip: Optional[str] = None
) -> OutboundMessage:
    """
    Verify, validate, format and relay one submission

    Turnstile is always checked first and Telegram is called at most once,
    only after every check has passed.

    Args:
        client: HTTP client used for both outbound calls
        form: Inbound form fields
        settings: Process configuration
        template: Submission template from ensure_configured
        remote_ip: Submitter's IP address, if known

    Returns:
        The delivered message

    Raises:
        CaptchaError, ValidationError, RelayError
    """
    token = form.get(TURNSTILE_FIELD)
    verification = await verify_turnstile(
        client,
        str(token) if token else "",
        settings.turnstile_secret_key,
        remote_ip,
        verify_url=settings.turnstile_verify_url
    )
    if not verification.success:
        logger.warning(f"Rejected submission from {remote_ip}: {verification.reason.value}")
        raise CaptchaError()

    submission = Submission.from_form(form)
    template.validate(submission)

    message = OutboundMessage(
        chat_id=settings.telegram_chat_id,
        text=template.render(submission)
    )
    await send_message(client, settings.telegram_bot_token, message, api_url=settings.telegram_api_url)
    return message
