"""Transient toast messages and push notifications."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Awaitable, Callable, Dict, Optional, Sequence

from telegram import InlineKeyboardButton, InlineKeyboardMarkup

from api.models import Invitation
from botapp.i18n import get_translator
from botapp.ui.social import format_invitation_notice
from infrastructure.constants import TOAST_MAX_SECONDS, TOAST_MIN_SECONDS

TOAST_DISMISS_CALLBACK = 'toast_dismiss'


class ToastKind(str, Enum):
    SUCCESS = 'success'
    ERROR = 'error'
    INFO = 'info'
    WARNING = 'warning'

    @property
    def icon(self) -> str:
        return _TOAST_ICONS[self]


_TOAST_ICONS = {
    ToastKind.SUCCESS: '✅',
    ToastKind.ERROR: '❌',
    ToastKind.INFO: 'ℹ️',
    ToastKind.WARNING: '⚠️',
}


@dataclass
class _ActiveToast:
    message_id: int
    task: asyncio.Task


class Toast:
    """
    One transient message per chat.

    Showing a toast removes the one already on screen and cancels its timer.
    Each toast deletes itself after ``duration`` seconds unless the user
    dismisses it first, in which case the pending timer is cancelled.
    """

    def __init__(
        self,
        *,
        duration: float = TOAST_MIN_SECONDS,
        logger: Optional[logging.Logger] = None,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ) -> None:
        self.duration = self.clamp_duration(duration)
        self.logger = logger or logging.getLogger('Toast')
        self._sleep = sleep
        self._active: Dict[int, _ActiveToast] = {}

    @staticmethod
    def clamp_duration(value: Optional[float]) -> float:
        if value is None:
            return TOAST_MIN_SECONDS
        return min(max(float(value), TOAST_MIN_SECONDS), TOAST_MAX_SECONDS)

    def timer_for(self, chat_id: int) -> Optional[asyncio.Task]:
        active = self._active.get(chat_id)
        return active.task if active else None

    def message_id_for(self, chat_id: int) -> Optional[int]:
        active = self._active.get(chat_id)
        return active.message_id if active else None

    async def show(
        self,
        bot,
        chat_id: int,
        message: str,
        kind: ToastKind = ToastKind.INFO,
        *,
        duration: Optional[float] = None,
        language: Optional[str] = None,
    ) -> int:
        """
        Send ``message`` as the chat's toast.

        Returns:
            The Telegram message id of the new toast
        """
        await self.dismiss(bot, chat_id)

        tr = get_translator(language)
        keyboard = InlineKeyboardMarkup(
            [[InlineKeyboardButton(tr.t("toast.dismiss"), callback_data=TOAST_DISMISS_CALLBACK)]]
        )
        sent = await bot.send_message(
            chat_id=chat_id,
            text=f"{kind.icon} {message}",
            reply_markup=keyboard,
        )
        seconds = self.duration if duration is None else self.clamp_duration(duration)
        task = asyncio.create_task(self._expire(bot, chat_id, sent.message_id, seconds))
        self._active[chat_id] = _ActiveToast(message_id=sent.message_id, task=task)
        self.logger.debug("Toast %s shown in chat %s for %.1fs", sent.message_id, chat_id, seconds)
        return sent.message_id

    async def dismiss(self, bot, chat_id: int, message_id: Optional[int] = None) -> bool:
        """
        Remove a toast before its timer fires.

        ``message_id`` targets a specific toast message. When it is not the
        chat's current toast the message is deleted and the current one is
        left alone.
        """
        active = self._active.get(chat_id)
        if message_id is not None and (active is None or active.message_id != message_id):
            return await self._delete(bot, chat_id, message_id)
        if active is None:
            return False

        del self._active[chat_id]
        if active.task is not asyncio.current_task():
            active.task.cancel()
        return await self._delete(bot, chat_id, active.message_id)

    async def _expire(self, bot, chat_id: int, message_id: int, seconds: float) -> None:
        await self._sleep(seconds)
        active = self._active.get(chat_id)
        if active is None or active.message_id != message_id:
            return
        del self._active[chat_id]
        await self._delete(bot, chat_id, message_id)
        self.logger.debug("Toast %s in chat %s expired", message_id, chat_id)

    async def _delete(self, bot, chat_id: int, message_id: int) -> bool:
        try:
            await bot.delete_message(chat_id=chat_id, message_id=message_id)
            return True
        except Exception as exc:
            self.logger.debug("Failed to delete toast %s: %s", message_id, exc)
            return False

    async def shutdown(self) -> None:
        """Cancel every pending timer; used when the application stops."""
        tasks = [active.task for active in self._active.values()]
        self._active.clear()
        for task in tasks:
            task.cancel()
        for task in tasks:
            try:
                await task
            except asyncio.CancelledError:
                pass


async def deliver_invitation_notices(
    bot,
    user_id: int,
    invitations: Sequence[Invitation],
    *,
    logger: logging.Logger,
    language: Optional[str] = None,
) -> int:
    """Send one push message per new invitation, each linking to the inbox."""
    if not bot:
        logger.warning("No bot available for invitation notice to %s", user_id)
        return 0

    tr = get_translator(language)
    keyboard = InlineKeyboardMarkup(
        [[InlineKeyboardButton(tr.t("social.open_invitations"), callback_data='social_invitations')]]
    )
    sent = 0
    for invitation in invitations:
        await bot.send_message(
            chat_id=user_id,
            text=format_invitation_notice(invitation, language),
            parse_mode='Markdown',
            reply_markup=keyboard,
        )
        sent += 1
    if sent:
        logger.info("Sent %s invitation notice(s) to %s", sent, user_id)
    return sent


__all__ = [
    'TOAST_DISMISS_CALLBACK',
    'Toast',
    'ToastKind',
    'deliver_invitation_notices',
]
