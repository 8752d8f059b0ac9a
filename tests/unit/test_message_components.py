import types

import pytest
from telegram.error import BadRequest

from botapp.messages.components import MessageResponder, delete_message_safe
from tests.helpers import DummyMessage, DummyUpdate


@pytest.mark.asyncio
async def test_edit_or_reply_edits_callback_message_with_markdown():
    update = DummyUpdate("menu_profile")

    await MessageResponder().edit_or_reply(update, "*Profil*")

    assert update.callback_query.edits == [("*Profil*", {"parse_mode": "Markdown"})]


@pytest.mark.asyncio
async def test_edit_or_reply_skips_unchanged_screen():
    update = DummyUpdate("menu_profile")
    update.callback_query.message.text = "same"

    await MessageResponder().edit_or_reply(update, "same", reply_markup=None)

    assert update.callback_query.edits == []
    assert update.callback_query.answered == 0


@pytest.mark.asyncio
async def test_edit_or_reply_falls_back_to_new_message():
    update = DummyUpdate("menu_profile")
    fallback = []

    async def broken_edit(text, **kwargs):
        raise BadRequest("Message to edit not found")

    async def reply_text(text, **kwargs):
        fallback.append(text)

    update.callback_query.edit_message_text = broken_edit
    update.callback_query.message.reply_text = reply_text

    await MessageResponder().edit_or_reply(update, "hello", parse_mode=None)

    assert fallback == ["hello"]


@pytest.mark.asyncio
async def test_edit_or_reply_replies_to_typed_message():
    update = DummyUpdate(text="ali@example.com")

    await MessageResponder().edit_or_reply(update, "ok", parse_mode=None)

    assert update.message.replies == [("ok", {"parse_mode": None})]


@pytest.mark.asyncio
async def test_delete_message_safe():
    assert await delete_message_safe(None) is False
    assert await delete_message_safe(DummyMessage("secret")) is True

    async def fail():
        raise BadRequest("Message can't be deleted")

    assert await delete_message_safe(types.SimpleNamespace(delete=fail)) is False
