from .messaging_provider import (
    MessagingProvider,
    TwilioWhatsAppProvider,
    MessageDeliveryError,
    WHATSAPP_CHANNEL,
)

__all__ = ["MessagingProvider", "TwilioWhatsAppProvider", "MessageDeliveryError", "WHATSAPP_CHANNEL"]
