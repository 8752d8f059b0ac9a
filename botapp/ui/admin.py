"""Admin-specific Telegram UI helpers."""

from __future__ import annotations

from typing import Any, List, Mapping, Optional, Sequence

from telegram import InlineKeyboardButton, InlineKeyboardMarkup

from api.models import AdminUser, AdminVenue, Reservation, Team
from botapp.i18n import get_translator
from botapp.ui.constants import ROLE_BADGES, STATUS_BADGES
from botapp.ui.menus import create_pagination_row
from botapp.ui.text_blocks import MarkdownBlockBuilder, escape_telegram_markdown, format_price, format_time_range
from infrastructure.constants import RESERVATION_STATUSES, USER_TYPES
from listing.pagination import PageState


def create_admin_menu_keyboard(language: Optional[str] = None) -> InlineKeyboardMarkup:
    """Create the admin menu keyboard."""
    tr = get_translator(language)
    return InlineKeyboardMarkup([
        [
            InlineKeyboardButton(tr.t("admin.users"), callback_data='admin_users'),
            InlineKeyboardButton(tr.t("admin.reservations"), callback_data='admin_reservations'),
        ],
        [
            InlineKeyboardButton(tr.t("admin.teams"), callback_data='admin_teams'),
            InlineKeyboardButton(tr.t("admin.statistics"), callback_data='admin_statistics'),
        ],
        [InlineKeyboardButton(tr.t("admin.venues"), callback_data='admin_venues')],
        [InlineKeyboardButton(tr.t("nav.back_to_menu"), callback_data='back_to_menu')],
    ])


def format_admin_dashboard(stats: Mapping[str, Any], language: Optional[str] = None) -> str:
    tr = get_translator(language)
    return (
        MarkdownBlockBuilder()
        .heading(tr.t("admin.title"))
        .blank()
        .line(tr.t("admin.stat_users", total=stats.get('totalUsers', 0), active=stats.get('activeUsers', 0)))
        .line(tr.t("admin.stat_venues", total=stats.get('totalVenues', 0)))
        .line(
            tr.t(
                "admin.stat_reservations",
                total=stats.get('totalReservations', 0),
                pending=stats.get('pendingReservations', 0),
            )
        )
        .line(tr.t("admin.stat_revenue", amount=format_price(stats.get('totalRevenue') or 0)))
        .build()
    )


def format_detailed_statistics(stats: Mapping[str, Any], language: Optional[str] = None) -> str:
    tr = get_translator(language)
    builder = MarkdownBlockBuilder().heading(tr.t("admin.statistics_title"))

    distribution = stats.get('userTypeDistribution') or []
    if distribution:
        builder.blank().line(tr.t("admin.user_types"))
        for row in distribution:
            builder.bullet(f"{tr.t('role.' + str(row.get('user_type')))}: {row.get('count')}")

    venues = stats.get('popularVenues') or []
    if venues:
        builder.blank().line(tr.t("admin.popular_venues"))
        for row in venues[:5]:
            builder.bullet(
                f"{escape_telegram_markdown(row.get('name', ''))}: {row.get('reservation_count', 0)} · "
                f"{format_price(float(row.get('total_revenue') or 0))}"
            )

    revenue = stats.get('monthlyRevenue') or []
    if revenue:
        builder.blank().line(tr.t("admin.monthly_revenue"))
        for row in revenue[:6]:
            builder.bullet(f"{row.get('month')}: {format_price(float(row.get('revenue') or 0))}")

    daily = stats.get('dailyReservations') or []
    if daily:
        builder.blank().line(tr.t("admin.daily_reservations"))
        for row in daily[:7]:
            builder.bullet(f"{row.get('date')}: {row.get('count')}")

    if not (distribution or venues or revenue or daily):
        builder.blank().line(tr.t("admin.no_statistics"))
    return builder.build()


def _filter_summary(tr, filters: Mapping[str, Any]) -> List[str]:
    lines = []
    if filters.get('search'):
        lines.append(tr.t("admin.filter_search", value=escape_telegram_markdown(filters['search'])))
    if filters.get('user_type'):
        lines.append(tr.t("admin.filter_type", value=tr.t(f"role.{filters['user_type']}")))
    if filters.get('status'):
        lines.append(tr.t("admin.filter_status", value=tr.t(f"status.{filters['status']}")))
    return lines


def format_admin_list_message(
    title_key: str,
    state: PageState,
    filters: Mapping[str, Any],
    empty: bool,
    language: Optional[str] = None,
    *,
    error: Optional[str] = None,
) -> str:
    tr = get_translator(language)
    builder = MarkdownBlockBuilder().heading(tr.t(title_key))
    summary = _filter_summary(tr, filters)
    if summary:
        builder.blank().bullets(summary)
    builder.blank()
    if error:
        return builder.line(f"❌ {escape_telegram_markdown(error)}").build()
    if empty:
        return builder.line(tr.t("admin.list_empty")).build()
    return builder.line(tr.t("admin.list_total", total=state.total)).build()


def create_admin_users_keyboard(
    users: Sequence[AdminUser],
    state: PageState,
    filters: Mapping[str, Any],
    language: Optional[str] = None,
) -> InlineKeyboardMarkup:
    tr = get_translator(language)
    keyboard: List[List[InlineKeyboardButton]] = [
        [InlineKeyboardButton(
            f"{ROLE_BADGES.get(user.user_type, '')} {user.display_name}{'' if user.is_active else ' 🚫'}",
            callback_data=f'admin_uview_{user.id}',
        )]
        for user in users
    ]
    keyboard.append(create_pagination_row('admin_page_users', state, language))
    selected = filters.get('user_type') or ''
    keyboard.append([
        InlineKeyboardButton(
            f"{'✅ ' if selected == user_type else ''}{tr.t(f'role.{user_type}')}",
            callback_data=f'admin_ufilter_{user_type}',
        )
        for user_type in USER_TYPES
    ])
    keyboard.append([
        InlineKeyboardButton(tr.t("admin.filter_all"), callback_data='admin_ufilter_all'),
        InlineKeyboardButton(tr.t("admin.search_button"), callback_data='admin_usearch'),
    ])
    keyboard.append([InlineKeyboardButton(tr.t("nav.back"), callback_data='menu_admin')])
    return InlineKeyboardMarkup(keyboard)


def format_admin_user_detail(user: AdminUser, language: Optional[str] = None) -> str:
    tr = get_translator(language)
    return (
        MarkdownBlockBuilder()
        .heading(f"{ROLE_BADGES.get(user.user_type, '')} *{escape_telegram_markdown(user.display_name)}*")
        .blank()
        .field(tr.t("profile.email"), user.email)
        .field(tr.t("profile.role"), tr.t(f"role.{user.user_type}"))
        .field(tr.t("admin.account_status"), tr.t("admin.active") if user.is_active else tr.t("admin.inactive"))
        .field(tr.t("profile.elo"), user.elo_rating)
        .field(tr.t("profile.trust"), user.trust_score)
        .build()
    )


def create_admin_user_detail_keyboard(user: AdminUser, language: Optional[str] = None) -> InlineKeyboardMarkup:
    """Delete is replaced by an inert lock button for admin accounts."""
    tr = get_translator(language)
    toggle_text = tr.t("admin.deactivate") if user.is_active else tr.t("admin.activate")
    keyboard = [
        [InlineKeyboardButton(toggle_text, callback_data='admin_utoggle')],
        [
            InlineKeyboardButton(tr.t(f"role.{user_type}"), callback_data=f'admin_utype_{user_type}')
            for user_type in USER_TYPES
            if user_type != user.user_type
        ],
    ]
    if user.is_admin:
        keyboard.append([InlineKeyboardButton(tr.t("admin.delete_locked"), callback_data='noop')])
    else:
        keyboard.append([InlineKeyboardButton(tr.t("admin.delete"), callback_data='admin_udelete')])
    keyboard.append([InlineKeyboardButton(tr.t("nav.back"), callback_data='admin_users')])
    return InlineKeyboardMarkup(keyboard)


def create_admin_reservations_keyboard(
    reservations: Sequence[Reservation],
    state: PageState,
    filters: Mapping[str, Any],
    language: Optional[str] = None,
) -> InlineKeyboardMarkup:
    tr = get_translator(language)
    keyboard: List[List[InlineKeyboardButton]] = [
        [InlineKeyboardButton(
            f"{STATUS_BADGES.get(item.status, '')} {item.date} {format_time_range(item.start_time, item.end_time)} "
            f"{item.user_name or item.user_email or ''}".strip(),
            callback_data=f'admin_rview_{item.id}',
        )]
        for item in reservations
    ]
    keyboard.append(create_pagination_row('admin_page_reservations', state, language))
    selected = filters.get('status') or ''
    statuses = list(RESERVATION_STATUSES)
    for index in range(0, len(statuses), 3):
        keyboard.append([
            InlineKeyboardButton(
                f"{'✅ ' if selected == status else ''}{tr.t(f'status.{status}')}",
                callback_data=f'admin_rfilter_{status}',
            )
            for status in statuses[index:index + 3]
        ])
    keyboard.append([InlineKeyboardButton(tr.t("admin.filter_all"), callback_data='admin_rfilter_all')])
    keyboard.append([InlineKeyboardButton(tr.t("nav.back"), callback_data='menu_admin')])
    return InlineKeyboardMarkup(keyboard)


def format_admin_reservation_detail(reservation: Reservation, language: Optional[str] = None) -> str:
    tr = get_translator(language)
    return (
        MarkdownBlockBuilder()
        .heading(tr.t("reservations.detail_title"))
        .blank()
        .field(tr.t("admin.customer"), reservation.user_name or reservation.user_email)
        .field(tr.t("booking.venue"), reservation.venue_name)
        .field(tr.t("booking.field"), reservation.field_name)
        .field(tr.t("booking.date"), reservation.date)
        .field(tr.t("booking.time"), format_time_range(reservation.start_time, reservation.end_time))
        .line(f"{tr.t('booking.total')}: {format_price(reservation.total_price)}")
        .field(tr.t("reservations.status"), tr.t(f"status.{reservation.status}"))
        .build()
    )


def create_admin_reservation_detail_keyboard(reservation: Reservation, language: Optional[str] = None) -> InlineKeyboardMarkup:
    tr = get_translator(language)
    others = [status for status in RESERVATION_STATUSES if status != reservation.status]
    keyboard = [
        [
            InlineKeyboardButton(tr.t(f"status.{status}"), callback_data=f'admin_rstatus_{status}')
            for status in others[index:index + 2]
        ]
        for index in range(0, len(others), 2)
    ]
    keyboard.append([InlineKeyboardButton(tr.t("nav.back"), callback_data='admin_reservations')])
    return InlineKeyboardMarkup(keyboard)


def create_admin_teams_keyboard(
    teams: Sequence[Team],
    state: PageState,
    language: Optional[str] = None,
) -> InlineKeyboardMarkup:
    tr = get_translator(language)
    keyboard: List[List[InlineKeyboardButton]] = [
        [InlineKeyboardButton(
            f"⚽ {team.name} ({team.member_count})",
            callback_data=f'admin_tview_{team.id}',
        )]
        for team in teams
    ]
    keyboard.append(create_pagination_row('admin_page_teams', state, language))
    keyboard.append([
        InlineKeyboardButton(tr.t("admin.search_button"), callback_data='admin_tsearch'),
        InlineKeyboardButton(tr.t("admin.filter_all"), callback_data='admin_tclear'),
    ])
    keyboard.append([InlineKeyboardButton(tr.t("nav.back"), callback_data='menu_admin')])
    return InlineKeyboardMarkup(keyboard)


def format_admin_team_detail(team: Team, language: Optional[str] = None) -> str:
    tr = get_translator(language)
    builder = (
        MarkdownBlockBuilder()
        .heading(f"⚽ *{escape_telegram_markdown(team.name)}*")
        .blank()
        .field(tr.t("admin.captain"), team.captain_name)
        .field(tr.t("venues.address"), ", ".join(part for part in (team.district, team.city) if part))
        .field(tr.t("admin.account_status"), tr.t("admin.active") if team.is_active else tr.t("admin.inactive"))
    )
    if team.members:
        builder.blank().line(tr.t("social.members", count=len(team.members)))
        for member in team.members:
            name = " ".join(
                str(part) for part in (member.get('first_name') or member.get('firstName'), member.get('last_name') or member.get('lastName')) if part
            )
            elo = member.get('elo_rating') or member.get('eloRating')
            suffix = f" (ELO {elo})" if elo else ""
            builder.bullet(f"{escape_telegram_markdown(name or member.get('email', ''))}{suffix}")
    return builder.build()


def create_admin_team_detail_keyboard(language: Optional[str] = None) -> InlineKeyboardMarkup:
    tr = get_translator(language)
    return InlineKeyboardMarkup([
        [InlineKeyboardButton(tr.t("admin.delete"), callback_data='admin_tdelete')],
        [InlineKeyboardButton(tr.t("nav.back"), callback_data='admin_teams')],
    ])


def create_admin_venues_keyboard(
    venues: Sequence[AdminVenue],
    state: PageState,
    language: Optional[str] = None,
) -> InlineKeyboardMarkup:
    tr = get_translator(language)
    keyboard: List[List[InlineKeyboardButton]] = [
        [InlineKeyboardButton(
            f"🏟️ {venue.name}{'' if venue.is_active else ' 🚫'}",
            callback_data=f'admin_vview_{venue.id}',
        )]
        for venue in venues
    ]
    keyboard.append(create_pagination_row('admin_page_venues', state, language))
    keyboard.append([
        InlineKeyboardButton(tr.t("admin.search_button"), callback_data='admin_vsearch'),
        InlineKeyboardButton(tr.t("admin.filter_all"), callback_data='admin_vclear'),
    ])
    keyboard.append([InlineKeyboardButton(tr.t("admin.venue_create"), callback_data='admin_vcreate')])
    keyboard.append([InlineKeyboardButton(tr.t("nav.back"), callback_data='menu_admin')])
    return InlineKeyboardMarkup(keyboard)


def format_admin_venue_detail(venue: AdminVenue, language: Optional[str] = None) -> str:
    tr = get_translator(language)
    hours = format_time_range(venue.opening_time, venue.closing_time) if venue.opening_time else None
    return (
        MarkdownBlockBuilder()
        .heading(f"🏟️ *{escape_telegram_markdown(venue.name)}*")
        .blank()
        .field(tr.t("venues.address"), venue.location)
        .field(tr.t("venues.phone"), venue.phone)
        .field(tr.t("profile.email"), venue.email)
        .field(tr.t("venues.price"), format_price(venue.price_per_hour) if venue.price_per_hour is not None else None)
        .field(tr.t("admin.venue_hours"), hours)
        .field(tr.t("admin.account_status"), tr.t("admin.active") if venue.is_active else tr.t("admin.inactive"))
        .build()
    )


def create_admin_venue_detail_keyboard(venue: AdminVenue, language: Optional[str] = None) -> InlineKeyboardMarkup:
    tr = get_translator(language)
    toggle_text = tr.t("admin.deactivate") if venue.is_active else tr.t("admin.activate")
    return InlineKeyboardMarkup([
        [
            InlineKeyboardButton(toggle_text, callback_data='admin_vtoggle'),
            InlineKeyboardButton(tr.t("admin.venue_price"), callback_data='admin_vprice'),
        ],
        [InlineKeyboardButton(tr.t("admin.delete"), callback_data='admin_vdelete')],
        [InlineKeyboardButton(tr.t("nav.back"), callback_data='admin_venues')],
    ])


__all__ = [
    'create_admin_menu_keyboard',
    'create_admin_reservation_detail_keyboard',
    'create_admin_reservations_keyboard',
    'create_admin_team_detail_keyboard',
    'create_admin_teams_keyboard',
    'create_admin_user_detail_keyboard',
    'create_admin_users_keyboard',
    'create_admin_venue_detail_keyboard',
    'create_admin_venues_keyboard',
    'format_admin_dashboard',
    'format_admin_list_message',
    'format_admin_reservation_detail',
    'format_admin_team_detail',
    'format_admin_user_detail',
    'format_admin_venue_detail',
    'format_detailed_statistics',
]
