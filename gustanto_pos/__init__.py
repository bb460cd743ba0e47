# Gustanto POS Backend
# ====================
# Menu catalog, order intake and WhatsApp notifications for a small
# point-of-sale frontend, using a Layered Architecture:
#
# ARCHITECTURE LAYERS:
# - Presentation:   FastAPI routes (web/)
# - Domain:         Pure order formatting and reporting (no I/O)
# - Infrastructure: Catalog file, order file, messaging gateway, settings
#
# The order file can be swapped for a real database, and Twilio for another
# WhatsApp provider, without touching the domain layer.
