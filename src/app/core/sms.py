"""
SMS Gateway Client

Posts text messages to the configured HTTP SMS gateway. Without a gateway
URL the message is logged instead of sent in development and dropped
elsewhere.
"""

import logging

import httpx

from app.core.config import settings

logger = logging.getLogger(__name__)

SMS_TIMEOUT_SECONDS = 10.0


async def send_sms(phone_number: str, message: str) -> bool:
    """
    Send a text message.

    Failures are logged and reported through the return value, never raised.

    Args:
        phone_number: Recipient number
        message: Message body

    Returns:
        True if the gateway accepted the message, or it was logged instead
        in development
    """
    if not settings.sms_api_url:
        if not settings.is_development:
            logger.error(f"SMS_API_URL not set, cannot send SMS to {phone_number}")
            return False
        logger.warning("SMS_API_URL not set - logging SMS instead of sending")
        logger.info(f"SMS TO: {phone_number} | MESSAGE: {message}")
        return True

    payload = {
        "to": phone_number,
        "from": settings.sms_sender_id,
        "message": message,
    }
    headers = {"Authorization": f"Bearer {settings.sms_api_key}"}

    try:
        async with httpx.AsyncClient(timeout=SMS_TIMEOUT_SECONDS) as client:
            response = await client.post(settings.sms_api_url, json=payload, headers=headers)
            response.raise_for_status()
        logger.info(f"SMS sent to {phone_number}")
        return True
    except httpx.HTTPError as e:
        logger.error(f"Failed to send SMS to {phone_number}: {e}")
        return False
