"""
Telegram notifier.
Posts plain chat messages through the Telegram Bot API.
"""

import logging
from typing import Optional

import httpx

from timekeeper.config import Settings, get_settings


logger = logging.getLogger(__name__)


class TelegramNotifier:
    """
    Best-effort delivery of chat messages.
    ``notify`` never raises: a missing configuration is logged as a
    warning and any transport or HTTP failure as an error.
    """

    def __init__(
        self,
        bot_token: Optional[str],
        chat_id: Optional[str],
        api_url: str = "https://api.telegram.org",
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.bot_token = bot_token
        self.chat_id = chat_id
        self.api_url = api_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "TelegramNotifier":
        settings = settings or get_settings()
        return cls(
            bot_token=settings.telegram_bot_token,
            chat_id=settings.telegram_chat_id,
            api_url=settings.telegram_api_url,
            timeout=settings.telegram_timeout_seconds,
        )

    @property
    def is_configured(self) -> bool:
        return bool(self.bot_token and self.chat_id)

    async def notify(self, text: str) -> bool:
        """Send ``text`` as an HTML message. Returns True when Telegram accepted it."""
        if not self.is_configured:
            logger.warning("Telegram bot token or chat ID not configured")
            return False

        url = f"{self.api_url}/bot{self.bot_token}/sendMessage"
        payload = {"chat_id": self.chat_id, "text": text, "parse_mode": "HTML"}

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                response = await client.post(url, json=payload)
                response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.error(f"Error sending Telegram notification: HTTP {e.response.status_code}")
            return False
        except httpx.HTTPError as e:
            logger.error(f"Error sending Telegram notification: {e.__class__.__name__}: {e}")
            return False

        logger.debug("Telegram notification sent")
        return True
