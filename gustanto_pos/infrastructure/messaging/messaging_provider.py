"""
Messaging Provider - Abstraction Layer for WhatsApp Messaging
==============================================================

Provides a unified interface for sending WhatsApp messages.
Currently backed by the Twilio Messages REST API.

USAGE:
    provider = TwilioWhatsAppProvider(
        account_sid="ACxxxxxxxx",
        auth_token="secret",
        whatsapp_from="+14155238886",
    )
    sid = provider.send_message("+911234567890", "Hello!")

Addresses use the gateway's "channel:number" scheme, e.g.
"whatsapp:+911234567890". Callers pass bare numbers.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Optional

import requests

logger = logging.getLogger(__name__)

WHATSAPP_CHANNEL = "whatsapp"


class MessageDeliveryError(Exception):
    """Raised when the gateway does not accept a message."""
    pass


class MessagingProvider(ABC):
    """
    Abstract base class for WhatsApp messaging providers.
    Implement this interface to add new messaging backends.
    """

    @abstractmethod
    def send_message(self, phone: str, text: str) -> str:
        """
        Send a text message to a phone number.

        Returns:
            Gateway message id.

        Raises:
            MessageDeliveryError: the gateway rejected or never received it.
        """
        ...


def channel_address(phone: Any, channel: str = WHATSAPP_CHANNEL) -> str:
    """Prefix a number with its channel unless it already carries one."""
    phone = str(phone)
    if phone.startswith(f"{channel}:"):
        return phone
    return f"{channel}:{phone}"


class TwilioWhatsAppProvider(MessagingProvider):
    """
    Twilio WhatsApp sender.

    API:
        POST {api_url}/Accounts/{account_sid}/Messages.json
        Auth: HTTP basic (account_sid, auth_token)
        Form: From=whatsapp:<sender>, To=whatsapp:<phone>, Body=<text>
    """

    DEFAULT_API_URL = "https://api.twilio.com/2010-04-01"

    def __init__(
        self,
        account_sid: str = "",
        auth_token: str = "",
        whatsapp_from: str = "",
        api_url: str = "",
        timeout_seconds: int = 15,
        session: Optional[requests.Session] = None,
    ):
        self._account_sid = account_sid
        self._auth_token = auth_token
        self._whatsapp_from = whatsapp_from
        self._api_url = (api_url or self.DEFAULT_API_URL).rstrip("/")
        self._timeout = timeout_seconds
        self._session = session or requests.Session()

    @classmethod
    def from_settings(cls, settings) -> "TwilioWhatsAppProvider":
        """Build a provider from MessagingSettings."""
        return cls(
            account_sid=settings.account_sid,
            auth_token=settings.auth_token,
            whatsapp_from=settings.whatsapp_from,
            api_url=settings.api_url,
            timeout_seconds=settings.timeout_seconds,
        )

    @property
    def messages_url(self) -> str:
        return f"{self._api_url}/Accounts/{self._account_sid}/Messages.json"

    def send_message(self, phone: str, text: str) -> str:
        if not self._account_sid or not self._auth_token or not self._whatsapp_from:
            raise MessageDeliveryError(
                "Twilio credentials are not configured "
                "(TWILIO_ACCOUNT_SID, TWILIO_AUTH_TOKEN, TWILIO_WHATSAPP_FROM)"
            )

        payload = {
            "From": channel_address(self._whatsapp_from),
            "To": channel_address(phone),
            "Body": text,
        }

        try:
            response = self._session.post(
                self.messages_url,
                data=payload,
                auth=(self._account_sid, self._auth_token),
                timeout=self._timeout,
            )
        except requests.Timeout as e:
            raise MessageDeliveryError(f"Twilio request timed out after {self._timeout}s") from e
        except requests.RequestException as e:
            raise MessageDeliveryError(f"Twilio request failed: {e}") from e

        if not response.ok:
            raise MessageDeliveryError(self._extract_error(response))

        try:
            data = response.json()
        except ValueError as e:
            raise MessageDeliveryError("Twilio returned a non-JSON response") from e
        sid = data.get("sid", "") if isinstance(data, dict) else ""

        logger.info(f"WhatsApp message sent to {phone}: {sid}")
        return sid

    def _extract_error(self, response: requests.Response) -> str:
        """Best-effort reason text from a Twilio error response."""
        try:
            data = response.json()
        except ValueError:
            data = {}
        if isinstance(data, dict) and data.get("message"):
            return data["message"]
        return f"Twilio responded {response.status_code} {response.reason}"
