"""Polls pending team invitations for every signed-in user and reports new ones."""

from __future__ import annotations

import copy
import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Iterable, List, Optional

from api.errors import ApiError, UnauthorizedError
from api.models import Invitation

# user id -> {invitation id: Invitation} or {"error": message}
InvitationData = Dict[int, Any]


@dataclass
class InvitationChange:
    """Represents differences between two invitation snapshots for one user."""

    added: List[Invitation] = field(default_factory=list)
    removed: List[str] = field(default_factory=list)
    error: Optional[str] = None

    def has_changes(self) -> bool:
        return bool(self.added or self.removed or self.error)


@dataclass
class PollSnapshot:
    timestamp: datetime
    results: InvitationData
    changes: Dict[int, InvitationChange]


class InvitationPoller:
    """Polls ``TeamService.get_my_invitations`` for each stored session and detects changes."""

    def __init__(self, team_service, session_store, *, logger: Optional[logging.Logger] = None) -> None:
        self.team_service = team_service
        self.session_store = session_store
        self._logger = logger or logging.getLogger('InvitationPoller')
        self._previous: InvitationData = {}

    @property
    def previous(self) -> InvitationData:
        return copy.deepcopy(self._previous)

    async def poll(self, user_ids: Optional[Iterable[int]] = None) -> PollSnapshot:
        targets = list(user_ids) if user_ids is not None else self.session_store.user_ids()
        results: InvitationData = {}

        for user_id in targets:
            try:
                invitations = await self.team_service.get_my_invitations(user_id)
            except UnauthorizedError:
                # Session already cleared by the client; forget this user
                self._logger.info("Session for user %s expired during invitation poll", user_id)
                continue
            except ApiError as exc:
                results[user_id] = {'error': exc.message}
                continue
            results[user_id] = {
                invitation.id: invitation
                for invitation in invitations
                if invitation.status == 'pending'
            }

        is_initial = not self._previous
        changes: Dict[int, InvitationChange] = {}
        for user_id, data in results.items():
            previous = self._previous.get(user_id)
            if is_initial or previous is None:
                # First sighting seeds the baseline without announcing old invitations
                if self._is_error(data):
                    changes[user_id] = InvitationChange(error=str(data['error']))
                continue
            change = self._detect_change(previous, data)
            if change is not None:
                changes[user_id] = change

        snapshot = PollSnapshot(timestamp=datetime.now(), results=copy.deepcopy(results), changes=changes)
        self._previous = results
        if changes:
            self._logger.debug("Invitation poll found changes for %s user(s)", len(changes))
        return snapshot

    @staticmethod
    def _is_error(data: Any) -> bool:
        return isinstance(data, dict) and 'error' in data

    def _detect_change(self, old: Any, new: Any) -> Optional[InvitationChange]:
        change = InvitationChange()

        if self._is_error(new):
            if self._is_error(old) and old['error'] == new['error']:
                return None
            change.error = str(new['error'])
            return change

        if self._is_error(old):
            # No baseline to diff against after a failure
            change.error = "Recovered from error"
            return change

        change.added = [new[key] for key in sorted(set(new) - set(old))]
        change.removed = sorted(set(old) - set(new))
        return change if change.has_changes() else None


__all__ = ['InvitationChange', 'InvitationPoller', 'PollSnapshot']
