"""Telegram Bot API relay service"""
import httpx
from typing import Any, Dict
import logging

from formrelay.exceptions import RelayError
from formrelay.models.telegram import OutboundMessage

logger = logging.getLogger(__name__)

TELEGRAM_API_URL = "https://api.telegram.org"


async def send_message(
    client: httpx.AsyncClient,
    bot_token: str,
    message: OutboundMessage,
    api_url: str = TELEGRAM_API_URL
) -> Dict[str, Any]:
    """
    Deliver a message through the Bot API sendMessage method

    A single attempt is made. Telegram acknowledges with {"ok": true}; any
    other answer, including a 2xx with ok=false, is a delivery failure.

    Args:
        client: Shared HTTP client for the request
        bot_token: Bot credential (never logged)
        message: Message to deliver
        api_url: Bot API base URL

    Returns:
        Telegram's acknowledgement

    Raises:
        RelayError: If the message was not delivered
    """
    try:
        response = await client.post(
            f"{api_url}/bot{bot_token}/sendMessage",
            headers={"Content-Type": "application/json"},
            json=message.model_dump()
        )
    except httpx.HTTPError as e:
        # httpx puts the request URL, and with it the bot token, in some messages
        logger.error(f"Telegram request failed: {type(e).__name__}")
        raise RelayError() from e

    try:
        result = response.json()
    except ValueError as e:
        logger.error(f"Telegram API returned a non-JSON body (status {response.status_code})")
        raise RelayError() from e

    if not isinstance(result, dict) or not result.get("ok"):
        description = result.get("description") if isinstance(result, dict) else None
        logger.error(f"Telegram API Error: {description} (status {response.status_code})")
        raise RelayError()

    logger.info(f"Telegram message delivered to chat {message.chat_id}")
    return result
