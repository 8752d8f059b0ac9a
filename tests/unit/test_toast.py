import asyncio

import pytest

from botapp.notifications import TOAST_DISMISS_CALLBACK, Toast, ToastKind
from tests.helpers import DummyBot, DummyLogger


class ControlledSleep:
    """Records requested delays; blocks until released unless ``instant``."""

    def __init__(self, instant=False):
        self.instant = instant
        self.delays = []
        self.release = asyncio.Event()

    async def __call__(self, seconds):
        self.delays.append(seconds)
        if not self.instant:
            await self.release.wait()


def test_duration_is_clamped_between_three_and_four_seconds():
    assert Toast(duration=10).duration == 4.0
    assert Toast(duration=1).duration == 3.0
    assert Toast(duration=3.5).duration == 3.5
    assert Toast.clamp_duration(None) == 3.0


@pytest.mark.asyncio
async def test_toast_expires_on_its_own():
    bot = DummyBot()
    sleep = ControlledSleep(instant=True)
    toast = Toast(duration=3.5, sleep=sleep, logger=DummyLogger())

    message_id = await toast.show(bot, 1, "Saved", ToastKind.SUCCESS)
    await toast.timer_for(1)

    assert sleep.delays == [3.5]
    assert bot.sent[0]["text"] == "✅ Saved"
    keyboard = bot.sent[0]["reply_markup"]
    assert keyboard.inline_keyboard[0][0].callback_data == TOAST_DISMISS_CALLBACK
    assert bot.deleted == [(1, message_id)]
    assert toast.message_id_for(1) is None


@pytest.mark.asyncio
async def test_manual_dismiss_cancels_timer():
    bot = DummyBot()
    toast = Toast(sleep=ControlledSleep(), logger=DummyLogger())

    message_id = await toast.show(bot, 1, "Hello")
    timer = toast.timer_for(1)

    assert await toast.dismiss(bot, 1) is True
    with pytest.raises(asyncio.CancelledError):
        await timer

    assert bot.deleted == [(1, message_id)]
    assert toast.timer_for(1) is None
    assert await toast.dismiss(bot, 1) is False


@pytest.mark.asyncio
async def test_new_toast_replaces_previous_one():
    bot = DummyBot()
    toast = Toast(sleep=ControlledSleep(), logger=DummyLogger())

    first_id = await toast.show(bot, 1, "First")
    first_timer = toast.timer_for(1)
    second_id = await toast.show(bot, 1, "Second", ToastKind.WARNING)

    with pytest.raises(asyncio.CancelledError):
        await first_timer
    assert bot.deleted == [(1, first_id)]
    assert toast.message_id_for(1) == second_id
    assert bot.sent[-1]["text"] == "⚠️ Second"

    await toast.shutdown()


@pytest.mark.asyncio
async def test_dismissing_an_old_toast_leaves_current_one():
    bot = DummyBot()
    toast = Toast(sleep=ControlledSleep(), logger=DummyLogger())

    current_id = await toast.show(bot, 1, "Current")

    assert await toast.dismiss(bot, 1, message_id=5) is True
    assert bot.deleted == [(1, 5)]
    assert toast.message_id_for(1) == current_id

    await toast.shutdown()
    assert toast.timer_for(1) is None


@pytest.mark.asyncio
async def test_toasts_are_tracked_per_chat():
    bot = DummyBot()
    toast = Toast(sleep=ControlledSleep(), logger=DummyLogger())

    first = await toast.show(bot, 1, "One")
    second = await toast.show(bot, 2, "Two")

    assert toast.message_id_for(1) == first
    assert toast.message_id_for(2) == second
    assert bot.deleted == []

    await toast.shutdown()
