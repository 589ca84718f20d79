"""
Common modules shared by every Brevo action handler.
"""

__all__ = [
    "base_handler",
    "brevo_client",
    "exceptions",
    "mappers",
    "models",
    "pagination",
    "upsert",
    "validators",
]
