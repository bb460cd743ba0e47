from .settings import Settings, MessagingSettings, StorefrontSettings, get_settings

__all__ = ["Settings", "MessagingSettings", "StorefrontSettings", "get_settings"]
