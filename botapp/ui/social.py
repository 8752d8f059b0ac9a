"""Team, invitation and match-proposal views."""

from __future__ import annotations

from typing import Optional, Sequence

from telegram import InlineKeyboardButton, InlineKeyboardMarkup

from api.models import Invitation, MatchProposal
from botapp.i18n import get_translator
from botapp.ui.constants import STATUS_BADGES
from botapp.ui.text_blocks import MarkdownBlockBuilder, escape_telegram_markdown


def create_social_menu_keyboard(pending_invitations: int = 0, language: Optional[str] = None) -> InlineKeyboardMarkup:
    tr = get_translator(language)
    invitations_text = tr.t("social.invitations")
    if pending_invitations:
        invitations_text = f"{invitations_text} ({pending_invitations})"
    return InlineKeyboardMarkup([
        [InlineKeyboardButton(invitations_text, callback_data='social_invitations')],
        [InlineKeyboardButton(tr.t("social.proposals"), callback_data='social_proposals')],
        [InlineKeyboardButton(tr.t("social.my_team"), callback_data='social_team')],
        [InlineKeyboardButton(tr.t("social.player_search"), callback_data='social_search')],
        [InlineKeyboardButton(tr.t("social.opponents"), callback_data='social_opponents')],
        [InlineKeyboardButton(tr.t("nav.back_to_menu"), callback_data='back_to_menu')],
    ])


def format_invitations_message(invitations: Sequence[Invitation], language: Optional[str] = None) -> str:
    tr = get_translator(language)
    builder = MarkdownBlockBuilder().heading(tr.t("social.invitations_title")).blank()
    if not invitations:
        return builder.line(tr.t("social.no_invitations")).build()
    for invitation in invitations:
        builder.bullet(
            tr.t(
                "social.invitation_line",
                team=escape_telegram_markdown(invitation.team_name),
                inviter=escape_telegram_markdown(invitation.invited_by or '-'),
            )
        )
        if invitation.message:
            builder.line(f"   _{escape_telegram_markdown(invitation.message)}_")
    return builder.build()


def create_invitations_keyboard(invitations: Sequence[Invitation], language: Optional[str] = None) -> InlineKeyboardMarkup:
    tr = get_translator(language)
    keyboard = [
        [
            InlineKeyboardButton(f"✅ {invitation.team_name}", callback_data=f'inv_accept_{invitation.id}'),
            InlineKeyboardButton(tr.t("action.reject"), callback_data=f'inv_reject_{invitation.id}'),
        ]
        for invitation in invitations
    ]
    keyboard.append([InlineKeyboardButton(tr.t("nav.back"), callback_data='menu_social')])
    return InlineKeyboardMarkup(keyboard)


def format_invitation_notice(invitation: Invitation, language: Optional[str] = None) -> str:
    """Push message sent when a new invitation shows up."""
    tr = get_translator(language)
    builder = MarkdownBlockBuilder().heading(tr.t("social.new_invitation_title")).blank()
    builder.line(
        tr.t(
            "social.invitation_line",
            team=escape_telegram_markdown(invitation.team_name),
            inviter=escape_telegram_markdown(invitation.invited_by or '-'),
        )
    )
    if invitation.message:
        builder.blank().line(f"_{escape_telegram_markdown(invitation.message)}_")
    return builder.build()


def format_proposals_message(
    received: Sequence[MatchProposal],
    sent: Sequence[MatchProposal],
    language: Optional[str] = None,
) -> str:
    tr = get_translator(language)
    builder = MarkdownBlockBuilder().heading(tr.t("social.proposals_title")).blank()

    builder.line(tr.t("social.received"))
    if not received:
        builder.line(tr.t("social.no_proposals"))
    for proposal in received:
        builder.bullet(_proposal_line(proposal, tr))

    builder.blank().line(tr.t("social.sent"))
    if not sent:
        builder.line(tr.t("social.no_proposals"))
    for proposal in sent:
        builder.bullet(_proposal_line(proposal, tr))
    return builder.build()


def _proposal_line(proposal: MatchProposal, tr) -> str:
    badge = STATUS_BADGES.get(proposal.status, '')
    when = f"{proposal.proposed_date} {proposal.proposed_time}".strip()
    venue = f" · {escape_telegram_markdown(proposal.venue_name)}" if proposal.venue_name else ""
    elo = f" (ELO {proposal.counterparty_elo})" if proposal.counterparty_elo else ""
    return f"{badge} {escape_telegram_markdown(proposal.counterparty_team)}{elo} · {when}{venue}"


def create_proposals_keyboard(received: Sequence[MatchProposal], language: Optional[str] = None) -> InlineKeyboardMarkup:
    """Accept/reject rows for received proposals that are still pending."""
    tr = get_translator(language)
    keyboard = [
        [
            InlineKeyboardButton(f"✅ {proposal.counterparty_team}", callback_data=f'prop_accept_{proposal.id}'),
            InlineKeyboardButton(tr.t("action.reject"), callback_data=f'prop_reject_{proposal.id}'),
        ]
        for proposal in received
        if proposal.is_pending
    ]
    keyboard.append([InlineKeyboardButton(tr.t("nav.back"), callback_data='menu_social')])
    return InlineKeyboardMarkup(keyboard)


__all__ = [
    'create_invitations_keyboard',
    'create_proposals_keyboard',
    'create_social_menu_keyboard',
    'format_invitation_notice',
    'format_invitations_message',
    'format_proposals_message',
]
