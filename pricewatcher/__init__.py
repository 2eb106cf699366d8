"""Gold price extraction, send scheduling, subscriber storage, bot commands and asyncio services."""

__version__ = "0.1.0"

__all__ = [
    "bank_service",
    "bot_service",
    "commands",
    "config",
    "extractor",
    "interruption",
    "models",
    "subscribers",
    "timing",
]