"""Background polling of backend state."""

from .invitation_poller import InvitationChange, InvitationPoller, PollSnapshot

__all__ = ['InvitationChange', 'InvitationPoller', 'PollSnapshot']
