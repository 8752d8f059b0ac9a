import pytest

from api.errors import ApiError, UnauthorizedError
from api.models import Invitation
from monitoring.invitation_poller import InvitationPoller
from tests.helpers import DummyLogger


def invitation(invitation_id, status="pending"):
    return Invitation(id=invitation_id, team_id="t-1", team_name="Kartallar", status=status)


class ScriptedTeamService:
    def __init__(self, script):
        self.script = script
        self.rounds = {}

    async def get_my_invitations(self, user_id):
        index = self.rounds.get(user_id, 0)
        self.rounds[user_id] = index + 1
        outcome = self.script[user_id][min(index, len(self.script[user_id]) - 1)]
        if isinstance(outcome, Exception):
            raise outcome
        return outcome


class FakeStore:
    def __init__(self, user_ids):
        self._user_ids = list(user_ids)

    def user_ids(self):
        return list(self._user_ids)


@pytest.mark.asyncio
async def test_first_poll_seeds_baseline_then_reports_new_invitations():
    service = ScriptedTeamService({
        1: [[invitation("i-1")], [invitation("i-1"), invitation("i-2")]],
    })
    poller = InvitationPoller(service, FakeStore([1]), logger=DummyLogger())

    first = await poller.poll()
    assert first.changes == {}
    assert list(first.results[1]) == ["i-1"]

    second = await poller.poll()
    change = second.changes[1]
    assert [item.id for item in change.added] == ["i-2"]
    assert change.removed == []


@pytest.mark.asyncio
async def test_answered_invitations_are_reported_as_removed():
    service = ScriptedTeamService({
        1: [[invitation("i-1"), invitation("i-2")], [invitation("i-2"), invitation("i-1", status="accepted")]],
    })
    poller = InvitationPoller(service, FakeStore([1]), logger=DummyLogger())

    await poller.poll()
    snapshot = await poller.poll()

    assert snapshot.changes[1].added == []
    assert snapshot.changes[1].removed == ["i-1"]


@pytest.mark.asyncio
async def test_unchanged_invitations_produce_no_change():
    service = ScriptedTeamService({1: [[invitation("i-1")]]})
    poller = InvitationPoller(service, FakeStore([1]), logger=DummyLogger())

    await poller.poll()
    snapshot = await poller.poll()

    assert snapshot.changes == {}


@pytest.mark.asyncio
async def test_errors_and_recovery_are_reported():
    service = ScriptedTeamService({
        1: [ApiError("down"), [invitation("i-1")]],
        2: [[]],
    })
    poller = InvitationPoller(service, FakeStore([1, 2]), logger=DummyLogger())

    first = await poller.poll()
    assert first.changes[1].error == "down"

    second = await poller.poll()
    assert second.changes[1].error == "Recovered from error"


@pytest.mark.asyncio
async def test_expired_sessions_are_skipped():
    service = ScriptedTeamService({
        1: [UnauthorizedError("expired", status_code=401)],
        2: [[invitation("i-9")]],
    })
    poller = InvitationPoller(service, FakeStore([1, 2]), logger=DummyLogger())

    snapshot = await poller.poll()

    assert 1 not in snapshot.results
    assert list(snapshot.results[2]) == ["i-9"]


@pytest.mark.asyncio
async def test_poll_can_target_specific_users():
    service = ScriptedTeamService({5: [[invitation("i-5")]]})
    poller = InvitationPoller(service, FakeStore([1, 2, 3]), logger=DummyLogger())

    snapshot = await poller.poll(user_ids=[5])

    assert list(snapshot.results) == [5]
    assert service.rounds == {5: 1}
