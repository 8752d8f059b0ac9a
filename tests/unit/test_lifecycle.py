import types
from datetime import datetime

import pytest

from api.models import Invitation
from botapp.handlers.state import session_from_user_data
from botapp.runtime.lifecycle import LifecycleManager
from monitoring.invitation_poller import InvitationChange, PollSnapshot
from tests.helpers import DummyBot, DummyLogger

INVITE = Invitation(id="i-1", team_id="t-1", team_name="Kartallar", invited_by="Mehmet")


def _manager(snapshot, user_data):
    class Poller:
        async def poll(self):
            return snapshot

    deps = types.SimpleNamespace(invitation_poller=Poller())
    manager = LifecycleManager(deps, logger=DummyLogger())
    manager.application = types.SimpleNamespace(bot=DummyBot(), user_data=user_data)
    return manager


@pytest.mark.asyncio
async def test_poll_once_sends_notice_and_refreshes_badge():
    snapshot = PollSnapshot(
        timestamp=datetime(2025, 6, 1, 12, 0),
        results={1: {"i-1": INVITE}, 2: {"error": "down"}},
        changes={1: InvitationChange(added=[INVITE]), 2: InvitationChange(error="down")},
    )
    user_data = {1: {}}
    manager = _manager(snapshot, user_data)

    sent = await manager.poll_invitations_once()

    assert sent == 1
    bot = manager.application.bot
    assert [message["chat_id"] for message in bot.sent] == [1]
    assert session_from_user_data(user_data[1]).social.invitations == [INVITE]


@pytest.mark.asyncio
async def test_poll_once_without_application_sends_nothing():
    snapshot = PollSnapshot(timestamp=datetime(2025, 6, 1), results={}, changes={1: InvitationChange(added=[INVITE])})
    manager = _manager(snapshot, {})
    manager.application = None

    assert await manager.poll_invitations_once() == 0
