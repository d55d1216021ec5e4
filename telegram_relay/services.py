import logging
from typing import Any, Dict, Optional

import requests

from .constants import DEFAULT_TELEGRAM_API_BASE, DEFAULT_TELEGRAM_TIMEOUT_SECONDS

logger = logging.getLogger(__name__)


class TelegramNotifier:
    """Envia mensagens para um único chat via Bot API (sendMessage).

    Entrega fire-and-forget: qualquer falha é registrada em log e descartada,
    sem retry. ``send_message`` nunca propaga exceção.
    """

    def __init__(self, bot_token: str, chat_id: str, api_base: str = DEFAULT_TELEGRAM_API_BASE,
                 timeout: float = DEFAULT_TELEGRAM_TIMEOUT_SECONDS):
        self.chat_id = chat_id
        self.timeout = timeout
        self._url = f"{api_base.rstrip('/')}/bot{bot_token}/sendMessage"

    @classmethod
    def from_settings(cls, settings) -> "TelegramNotifier":
        return cls(
            settings.telegram_bot_token,
            settings.telegram_chat_id,
            api_base=settings.telegram_api_base,
            timeout=settings.telegram_timeout_seconds,
        )

    def build_payload(self, message: str, button_text: Optional[str] = None,
                      button_url: Optional[str] = None) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "chat_id": self.chat_id,
            "text": message,
            "parse_mode": "HTML",
            "disable_web_page_preview": True,
        }
        # Botão só é anexado quando texto e URL estão presentes
        if button_text and button_url:
            payload["reply_markup"] = {
                "inline_keyboard": [[{"text": button_text, "url": button_url}]],
            }
        return payload

    def send_message(self, message: str, button_text: Optional[str] = None,
                     button_url: Optional[str] = None) -> bool:
        payload = self.build_payload(message, button_text, button_url)
        try:
            resp = requests.post(self._url, json=payload, timeout=self.timeout)
        except requests.RequestException as exc:
            # Não loga a URL: contém o token do bot
            logger.error(f"Failed to send Telegram message: {exc.__class__.__name__}")
            return False

        try:
            body = resp.json()
        except ValueError:
            body = {}
        if not isinstance(body, dict):
            body = {}

        if not resp.ok or not body.get("ok", False):
            description = body.get("description") or resp.text[:200]
            logger.error(f"Failed to send Telegram message: HTTP {resp.status_code} - {description}")
            return False

        logger.info("Message sent successfully")
        return True
