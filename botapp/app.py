#!/usr/bin/env python3
"""
Async telegram bot - entrypoint wrappers around the runtime application.
"""

import logging
import signal
import sys
from pathlib import Path

if __name__ == "__main__" and __package__ is None:
    sys.path.append(str(Path(__file__).resolve().parents[1]))
    __package__ = "botapp"

# Import logging configuration to initialize proper logging
from infrastructure import logging_config  # noqa: F401

from botapp.config import load_bot_config
from botapp.runtime import BotApplication


class HalisahaBot(BotApplication):
    """Entry-point façade over the runtime bot application."""

    def __init__(self, config=None):
        super().__init__(config=config)


def signal_handler(signum, frame):
    """Handle SIGINT/SIGTERM signals for graceful shutdown."""
    logger = logging.getLogger('Main')
    logger.info(f"🚨 Received signal {signum}, initiating graceful shutdown...")
    sys.exit(0)


def main() -> None:
    """Entry point used by both CLI script and module execution."""

    logger = logging.getLogger('Main')
    logger.info("=" * 50)
    logger.info("Halısaha Telegram Bot")
    logger.info("=" * 50)

    signal.signal(signal.SIGTERM, signal_handler)

    config = load_bot_config()
    if not config.telegram.token:
        logger.error("❌ TELEGRAM_BOT_TOKEN is not set; add it to the environment or .env")
        sys.exit(1)

    bot = HalisahaBot(config)

    try:
        logger.info("🚀 Starting bot...")
        bot.run()
    except KeyboardInterrupt:
        logger.info("✅ Stopped by user (Ctrl+C)")
    except Exception as exc:
        logger.error("❌ Error: %s", exc, exc_info=True)
        raise


if __name__ == '__main__':
    main()
