"""Reusable message handling components for bot workflows."""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Optional

from telegram import Message, Update
from telegram.constants import ParseMode
from telegram.error import BadRequest, RetryAfter


class MessageResponder:
    """Low-level helpers for replying/editing Telegram messages."""

    def __init__(self, *, logger: Optional[logging.Logger] = None, retry_padding: float = 0.5) -> None:
        self._logger = logger or logging.getLogger('MessageHandlers')
        self._retry_padding = retry_padding

    async def edit_or_reply(self, update: Update, text: str, **kwargs: Any) -> None:
        """
        Render ``text`` in place of the pressed inline keyboard, or reply to a typed message.

        The callback query has already been answered by the dispatcher, so an
        unchanged screen is left alone. A rate-limited edit is retried once;
        any other edit failure falls back to sending a fresh message.
        """
        if 'parse_mode' not in kwargs:
            kwargs['parse_mode'] = ParseMode.MARKDOWN

        query = update.callback_query
        if query is None:
            if update.message:
                await update.message.reply_text(text, **kwargs)
            return

        message = query.message
        if message is not None and message.text == text and message.reply_markup == kwargs.get('reply_markup'):
            return

        try:
            await self._edit_with_retry(query, text, **kwargs)
        except BadRequest as exc:
            if 'not modified' in str(exc).lower():
                return
            self._logger.debug("Edit failed, sending new message: %s", exc)
            await query.message.reply_text(text, **kwargs)

    async def _edit_with_retry(self, query, text: str, **kwargs: Any) -> None:
        try:
            await query.edit_message_text(text, **kwargs)
        except RetryAfter as exc:
            wait_time = float(getattr(exc, 'retry_after', 1)) + max(self._retry_padding, 0)
            self._logger.warning('Telegram rate limit triggered while editing message; retrying in %.1fs', wait_time)
            await asyncio.sleep(wait_time)
            await query.edit_message_text(text, **kwargs)


async def delete_message_safe(message: Optional[Message]) -> bool:
    """Delete a user's message (typed passwords and the like); already-gone messages are fine."""
    if message is None:
        return False
    try:
        await message.delete()
        return True
    except Exception as exc:
        logging.getLogger('MessageHandlers').debug("Failed to delete message: %s", exc)
        return False
