# Infrastructure Layer
# ====================
# Contains all external resources:
# - catalog/: static menu codex (JSON file)
# - persistence/: flat-file order collection
# - messaging/: Twilio WhatsApp gateway
# - config/: Environment and settings management
