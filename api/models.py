"""Dataclasses for payloads returned by the Halısaha backend.

Public endpoints answer in camelCase while the admin endpoints return raw
snake_case rows, so every ``from_api`` constructor accepts both spellings.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional

from infrastructure.constants import (
    DEFAULT_RATING_SCORE,
    RATING_MAX,
    RATING_MIN,
    TERMINAL_RESERVATION_STATUSES,
)


def _pick(payload: Mapping[str, Any], *keys: str, default: Any = None) -> Any:
    for key in keys:
        value = payload.get(key)
        if value is not None:
            return value
    return default


def _to_float(value: Any, default: Optional[float] = None) -> Optional[float]:
    if value is None or value == '':
        return default
    try:
        return float(value)
    except (TypeError, ValueError):
        return default


def _to_int(value: Any, default: int = 0) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def _short_time(value: Any) -> str:
    """Reduce ``HH:MM:SS`` (or a timestamp's time part) to ``HH:MM``."""
    text = str(value or '')
    if 'T' in text:
        text = text.split('T', 1)[1]
    return text[:5]


def _iso_date(value: Any) -> str:
    return str(value or '')[:10]


@dataclass(frozen=True)
class Field:
    """A single bookable pitch inside a venue."""

    id: str
    venue_id: str
    name: str
    field_type: str = ''
    surface_type: Optional[str] = None
    has_lighting: bool = False
    has_roof: bool = False
    is_active: bool = True

    @classmethod
    def from_api(cls, payload: Mapping[str, Any], venue_id: str = '') -> 'Field':
        return cls(
            id=str(payload.get('id') or ''),
            venue_id=str(_pick(payload, 'venueId', 'venue_id', default=venue_id)),
            name=str(payload.get('name') or ''),
            field_type=str(_pick(payload, 'fieldType', 'field_type', 'type', default='')),
            surface_type=_pick(payload, 'surfaceType', 'surface_type'),
            has_lighting=bool(_pick(payload, 'hasLighting', 'has_lighting', default=False)),
            has_roof=bool(_pick(payload, 'hasRoof', 'has_roof', default=False)),
            is_active=bool(_pick(payload, 'isActive', 'is_active', default=True)),
        )


@dataclass(frozen=True)
class Venue:
    """A facility with one or more fields."""

    id: str
    name: str
    address: str = ''
    city: str = ''
    district: str = ''
    price_per_hour: Optional[float] = None
    average_rating: Optional[float] = None
    total_reviews: int = 0
    phone: Optional[str] = None
    description: Optional[str] = None
    fields: List[Field] = field(default_factory=list)

    @classmethod
    def from_api(cls, payload: Mapping[str, Any]) -> 'Venue':
        venue_id = str(payload.get('id') or '')
        raw_fields = payload.get('fields') or []
        return cls(
            id=venue_id,
            name=str(payload.get('name') or ''),
            address=str(payload.get('address') or ''),
            city=str(payload.get('city') or ''),
            district=str(payload.get('district') or ''),
            price_per_hour=_to_float(
                _pick(payload, 'basePricePerHour', 'base_price_per_hour', 'pricePerHour')
            ),
            average_rating=_to_float(_pick(payload, 'averageRating', 'average_rating')),
            total_reviews=_to_int(_pick(payload, 'totalReviews', 'total_reviews', default=0)),
            phone=payload.get('phone'),
            description=payload.get('description'),
            fields=[Field.from_api(item, venue_id) for item in raw_fields if isinstance(item, Mapping)],
        )

    def find_field(self, field_id: str) -> Optional[Field]:
        for item in self.fields:
            if item.id == field_id:
                return item
        return None


@dataclass(frozen=True)
class BookedSlot:
    """An interval already reserved on a field for a given date."""

    start_time: str
    end_time: str

    @classmethod
    def from_api(cls, payload: Mapping[str, Any]) -> 'BookedSlot':
        return cls(
            start_time=_short_time(_pick(payload, 'startTime', 'start_time')),
            end_time=_short_time(_pick(payload, 'endTime', 'end_time')),
        )


@dataclass(frozen=True)
class Reservation:
    """Server-owned reservation record."""

    id: str
    field_id: str = ''
    user_id: str = ''
    date: str = ''
    start_time: str = ''
    end_time: str = ''
    total_price: Optional[float] = None
    status: str = 'pending'
    payment_status: Optional[str] = None
    team_name: Optional[str] = None
    field_name: Optional[str] = None
    venue_name: Optional[str] = None
    user_name: Optional[str] = None
    user_email: Optional[str] = None

    @property
    def is_terminal(self) -> bool:
        return self.status in TERMINAL_RESERVATION_STATUSES

    @property
    def can_cancel(self) -> bool:
        return not self.is_terminal

    @classmethod
    def from_api(cls, payload: Mapping[str, Any]) -> 'Reservation':
        start_raw = _pick(payload, 'startTime', 'start_time', default='')
        date_raw = _pick(payload, 'reservationDate', 'reservation_date', default='')
        if not date_raw and 'T' in str(start_raw):
            date_raw = start_raw
        return cls(
            id=str(payload.get('id') or ''),
            field_id=str(_pick(payload, 'fieldId', 'field_id', default='')),
            user_id=str(_pick(payload, 'userId', 'user_id', default='')),
            date=_iso_date(date_raw),
            start_time=_short_time(start_raw),
            end_time=_short_time(_pick(payload, 'endTime', 'end_time', default='')),
            total_price=_to_float(_pick(payload, 'totalPrice', 'total_price')),
            status=str(payload.get('status') or 'pending'),
            payment_status=_pick(payload, 'paymentStatus', 'payment_status'),
            team_name=_pick(payload, 'teamName', 'team_name'),
            field_name=_pick(payload, 'fieldName', 'field_name'),
            venue_name=_pick(payload, 'venueName', 'venue_name'),
            user_name=_pick(payload, 'userName', 'user_name'),
            user_email=_pick(payload, 'userEmail', 'user_email'),
        )


@dataclass(frozen=True)
class Invitation:
    """A pending invitation to join a team."""

    id: str
    team_id: str
    team_name: str
    message: Optional[str] = None
    invited_by: str = ''
    created_at: Optional[str] = None
    status: str = 'pending'

    @classmethod
    def from_api(cls, payload: Mapping[str, Any]) -> 'Invitation':
        inviter = payload.get('invitedBy') or {}
        inviter_name = ''
        if isinstance(inviter, Mapping):
            inviter_name = ' '.join(
                part for part in (inviter.get('firstName'), inviter.get('lastName')) if part
            ) or str(inviter.get('username') or '')
        return cls(
            id=str(payload.get('id') or ''),
            team_id=str(_pick(payload, 'teamId', 'team_id', default='')),
            team_name=str(_pick(payload, 'teamName', 'team_name', default='')),
            message=payload.get('message'),
            invited_by=inviter_name,
            created_at=_pick(payload, 'createdAt', 'created_at'),
            status=str(payload.get('status') or 'pending'),
        )


@dataclass(frozen=True)
class MatchProposal:
    """A match proposal exchanged between two teams."""

    id: str
    counterparty_team: str
    proposed_date: str = ''
    proposed_time: str = ''
    venue_name: Optional[str] = None
    match_duration: Optional[int] = None
    message: Optional[str] = None
    status: str = 'pending'
    response_message: Optional[str] = None
    counterparty_elo: Optional[int] = None

    @property
    def is_pending(self) -> bool:
        return self.status == 'pending'

    @classmethod
    def from_api(cls, payload: Mapping[str, Any]) -> 'MatchProposal':
        counterparty = _pick(
            payload,
            'proposingTeamName',
            'targetTeamName',
            'counterpartyTeam',
            default='',
        )
        elo = _pick(payload, 'proposingTeamElo', 'targetTeamElo')
        duration = _pick(payload, 'matchDuration', 'match_duration')
        return cls(
            id=str(payload.get('id') or ''),
            counterparty_team=str(counterparty),
            proposed_date=_iso_date(_pick(payload, 'proposedDate', 'proposed_date')),
            proposed_time=_short_time(_pick(payload, 'proposedTime', 'proposed_time')),
            venue_name=_pick(payload, 'venueName', 'venue_name'),
            match_duration=_to_int(duration) if duration is not None else None,
            message=payload.get('message'),
            status=str(payload.get('status') or 'pending'),
            response_message=_pick(payload, 'responseMessage', 'response_message'),
            counterparty_elo=_to_int(elo) if elo is not None else None,
        )


def clamp_score(value: Any) -> int:
    """Clamp a rating score into the accepted 0-100 range."""
    score = _to_int(value, DEFAULT_RATING_SCORE)
    return max(RATING_MIN, min(RATING_MAX, score))


@dataclass
class PlayerRating:
    """Draft rating for one player, accumulated locally before submission."""

    rated_user_id: str
    speed: int = DEFAULT_RATING_SCORE
    technique: int = DEFAULT_RATING_SCORE
    passing: int = DEFAULT_RATING_SCORE
    physical: int = DEFAULT_RATING_SCORE
    showed_up: bool = True
    caused_trouble: bool = False
    was_late: bool = False
    comment: str = ''

    def __post_init__(self) -> None:
        for category in ('speed', 'technique', 'passing', 'physical'):
            setattr(self, category, clamp_score(getattr(self, category)))

    def set_score(self, category: str, value: Any) -> int:
        if category not in ('speed', 'technique', 'passing', 'physical'):
            raise ValueError(f"Unknown rating category: {category}")
        score = clamp_score(value)
        setattr(self, category, score)
        return score

    def to_payload(self, reservation_id: str) -> Dict[str, Any]:
        return {
            'reservationId': reservation_id,
            'ratedUserId': self.rated_user_id,
            'speedRating': self.speed,
            'techniqueRating': self.technique,
            'passingRating': self.passing,
            'physicalRating': self.physical,
            'showedUp': self.showed_up,
            'causedTrouble': self.caused_trouble,
            'wasLate': self.was_late,
            'comment': self.comment,
        }


@dataclass(frozen=True)
class RateablePlayer:
    """A player who took part in a reservation and can be rated."""

    user_id: str
    first_name: str = ''
    last_name: str = ''
    email: str = ''

    @property
    def display_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip() or self.email or self.user_id

    @classmethod
    def from_api(cls, payload: Mapping[str, Any]) -> 'RateablePlayer':
        return cls(
            user_id=str(_pick(payload, 'userId', 'user_id', 'id', default='')),
            first_name=str(_pick(payload, 'firstName', 'first_name', default='')),
            last_name=str(_pick(payload, 'lastName', 'last_name', default='')),
            email=str(payload.get('email') or ''),
        )


@dataclass(frozen=True)
class AdminUser:
    """Row of the admin user-management list."""

    id: str
    email: str
    first_name: str = ''
    last_name: str = ''
    user_type: str = 'player'
    is_active: bool = True
    elo_rating: Optional[int] = None
    trust_score: Optional[int] = None

    @property
    def display_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip() or self.email

    @property
    def is_admin(self) -> bool:
        return self.user_type == 'admin'

    @classmethod
    def from_api(cls, payload: Mapping[str, Any]) -> 'AdminUser':
        elo = _pick(payload, 'elo_rating', 'eloRating')
        trust = _pick(payload, 'trust_score', 'trustScore')
        return cls(
            id=str(payload.get('id') or ''),
            email=str(payload.get('email') or ''),
            first_name=str(_pick(payload, 'first_name', 'firstName', default='')),
            last_name=str(_pick(payload, 'last_name', 'lastName', default='')),
            user_type=str(_pick(payload, 'user_type', 'userType', default='player')),
            is_active=bool(_pick(payload, 'is_active', 'isActive', default=True)),
            elo_rating=_to_int(elo) if elo is not None else None,
            trust_score=_to_int(trust) if trust is not None else None,
        )


@dataclass(frozen=True)
class Team:
    """Team summary as returned by the admin team list."""

    id: str
    name: str
    city: str = ''
    district: str = ''
    captain_name: Optional[str] = None
    member_count: int = 0
    is_active: bool = True
    members: List[Dict[str, Any]] = field(default_factory=list)

    @classmethod
    def from_api(cls, payload: Mapping[str, Any]) -> 'Team':
        members = payload.get('members') or []
        return cls(
            id=str(payload.get('id') or ''),
            name=str(payload.get('name') or ''),
            city=str(payload.get('city') or ''),
            district=str(payload.get('district') or ''),
            captain_name=_pick(payload, 'captain_name', 'captainName'),
            member_count=_to_int(_pick(payload, 'member_count', 'memberCount', default=len(members))),
            is_active=bool(_pick(payload, 'is_active', 'isActive', default=True)),
            members=[dict(item) for item in members if isinstance(item, Mapping)],
        )


@dataclass(frozen=True)
class TeamMember:
    user_id: str
    first_name: str = ''
    last_name: str = ''
    email: str = ''
    role: str = 'player'
    elo_rating: Optional[int] = None

    @property
    def display_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip() or self.email

    @classmethod
    def from_api(cls, payload: Mapping[str, Any]) -> 'TeamMember':
        elo = _pick(payload, 'eloRating', 'elo_rating')
        return cls(
            user_id=str(_pick(payload, 'userId', 'user_id', 'id', default='')),
            first_name=str(_pick(payload, 'firstName', 'first_name', default='')),
            last_name=str(_pick(payload, 'lastName', 'last_name', default='')),
            email=str(payload.get('email') or ''),
            role=str(payload.get('role') or 'player'),
            elo_rating=_to_int(elo) if elo is not None else None,
        )


@dataclass(frozen=True)
class MyTeam:
    """The signed-in user's team with its roster and match record."""

    id: str
    name: str
    description: Optional[str] = None
    logo_url: Optional[str] = None
    captain_id: str = ''
    members: List[TeamMember] = field(default_factory=list)
    elo_rating: int = 1000
    total_matches: int = 0
    total_wins: int = 0
    win_rate: str = '0.0'

    def is_captain(self, subject_id: Optional[str]) -> bool:
        return bool(subject_id) and self.captain_id == subject_id

    @classmethod
    def from_api(cls, payload: Mapping[str, Any]) -> 'MyTeam':
        team = payload.get('team') if isinstance(payload.get('team'), Mapping) else payload
        stats = payload.get('stats') if isinstance(payload.get('stats'), Mapping) else {}
        members = payload.get('members') or []
        return cls(
            id=str(team.get('id') or ''),
            name=str(team.get('name') or ''),
            description=team.get('description'),
            logo_url=_pick(team, 'logoUrl', 'logo_url'),
            captain_id=str(_pick(team, 'captainId', 'captain_id', default='')),
            members=[TeamMember.from_api(item) for item in members if isinstance(item, Mapping)],
            elo_rating=_to_int(_pick(stats, 'eloRating', default=_pick(team, 'eloRating', 'elo_rating')), 1000),
            total_matches=_to_int(stats.get('totalMatches')),
            total_wins=_to_int(stats.get('totalWins')),
            win_rate=str(stats.get('winRate') or '0.0'),
        )


@dataclass(frozen=True)
class PlayerCandidate:
    """A player found by username when inviting someone to the team."""

    id: str
    username: str = ''
    first_name: str = ''
    last_name: str = ''
    elo_rating: Optional[int] = None
    has_team: bool = False

    @property
    def display_name(self) -> str:
        name = f"{self.first_name} {self.last_name}".strip()
        return f"{name} (@{self.username})" if name and self.username else name or self.username

    @classmethod
    def from_api(cls, payload: Mapping[str, Any]) -> 'PlayerCandidate':
        elo = _pick(payload, 'eloRating', 'elo_rating')
        return cls(
            id=str(payload.get('id') or ''),
            username=str(payload.get('username') or ''),
            first_name=str(_pick(payload, 'firstName', 'first_name', default='')),
            last_name=str(_pick(payload, 'lastName', 'last_name', default='')),
            elo_rating=_to_int(elo) if elo is not None else None,
            has_team=bool(_pick(payload, 'hasTeam', 'has_team', default=False)),
        )


@dataclass(frozen=True)
class TeamNotification:
    id: str
    type: str = ''
    title: str = ''
    message: str = ''
    is_read: bool = False
    created_at: Optional[str] = None

    @classmethod
    def from_api(cls, payload: Mapping[str, Any]) -> 'TeamNotification':
        return cls(
            id=str(payload.get('id') or ''),
            type=str(payload.get('type') or ''),
            title=str(payload.get('title') or ''),
            message=str(payload.get('message') or ''),
            is_read=bool(_pick(payload, 'isRead', 'is_read', default=False)),
            created_at=_pick(payload, 'createdAt', 'created_at'),
        )


@dataclass(frozen=True)
class OpponentListing:
    """A team's "looking for an opponent" listing."""

    id: str
    team_id: str = ''
    team_name: str = ''
    team_elo: Optional[int] = None
    title: str = ''
    description: Optional[str] = None
    date_start: str = ''
    date_end: str = ''
    city: str = ''
    district: str = ''
    match_type: str = 'friendly'
    field_size: Optional[str] = None
    match_duration: int = 60
    status: str = 'active'

    @classmethod
    def from_api(cls, payload: Mapping[str, Any]) -> 'OpponentListing':
        elo = _pick(payload, 'teamElo', 'team_elo')
        return cls(
            id=str(payload.get('id') or ''),
            team_id=str(_pick(payload, 'teamId', 'team_id', default='')),
            team_name=str(_pick(payload, 'teamName', 'team_name', default='')),
            team_elo=_to_int(elo) if elo is not None else None,
            title=str(payload.get('title') or ''),
            description=payload.get('description'),
            date_start=_iso_date(_pick(payload, 'preferredDateStart', 'preferred_date_start')),
            date_end=_iso_date(_pick(payload, 'preferredDateEnd', 'preferred_date_end')),
            city=str(payload.get('city') or ''),
            district=str(payload.get('district') or ''),
            match_type=str(_pick(payload, 'matchType', 'match_type', default='friendly')),
            field_size=_pick(payload, 'fieldSize', 'field_size'),
            match_duration=_to_int(_pick(payload, 'matchDuration', 'match_duration'), 60),
            status=str(payload.get('status') or 'active'),
        )


@dataclass(frozen=True)
class PlayerSearchListing:
    """A reservation owner's "players wanted" listing."""

    id: str
    organizer_id: str = ''
    match_date: str = ''
    match_time: str = ''
    players_needed: int = 0
    joined_count: int = 0
    description: Optional[str] = None
    status: str = 'open'
    organizer_name: Optional[str] = None
    skill_level: Optional[str] = None
    positions: List[str] = field(default_factory=list)
    venue_name: str = ''
    city: str = ''
    district: str = ''

    @property
    def spots_left(self) -> int:
        return max(0, self.players_needed - self.joined_count)

    @property
    def is_open(self) -> bool:
        return self.status in ('open', 'active')

    @classmethod
    def from_api(cls, payload: Mapping[str, Any]) -> 'PlayerSearchListing':
        venue = payload.get('venue') if isinstance(payload.get('venue'), Mapping) else {}
        positions = _pick(payload, 'preferredPositions', 'preferred_positions', default=[])
        return cls(
            id=str(payload.get('id') or ''),
            organizer_id=str(_pick(payload, 'userId', 'organizer_id', default='')),
            match_date=_iso_date(_pick(payload, 'matchDate', 'match_date')),
            match_time=_short_time(_pick(payload, 'matchTime', 'match_time')),
            players_needed=_to_int(_pick(payload, 'playersNeeded', 'players_needed')),
            joined_count=_to_int(_pick(payload, 'joinedCount', 'joined_count')),
            description=payload.get('description'),
            status=str(payload.get('status') or 'open'),
            organizer_name=_pick(payload, 'organizerName', 'organizer_name'),
            skill_level=_pick(payload, 'preferredSkillLevel', 'preferred_skill_level'),
            positions=[str(item) for item in positions] if isinstance(positions, list) else [],
            venue_name=str(venue.get('name') or ''),
            city=str(venue.get('city') or ''),
            district=str(venue.get('district') or ''),
        )


@dataclass(frozen=True)
class JoinRequest:
    """A player's request to join a players-wanted listing."""

    id: str
    user_id: str = ''
    status: str = 'pending'
    message: Optional[str] = None
    player_name: str = ''
    player_elo: Optional[int] = None

    @property
    def is_pending(self) -> bool:
        return self.status == 'pending'

    @classmethod
    def from_api(cls, payload: Mapping[str, Any]) -> 'JoinRequest':
        user = payload.get('user') if isinstance(payload.get('user'), Mapping) else {}
        elo = _pick(user, 'elo', 'eloRating')
        return cls(
            id=str(payload.get('id') or ''),
            user_id=str(_pick(payload, 'userId', 'user_id', default='')),
            status=str(payload.get('status') or 'pending'),
            message=payload.get('message'),
            player_name=str(_pick(user, 'name', default='') or user.get('email') or ''),
            player_elo=_to_int(elo) if elo is not None else None,
        )


@dataclass(frozen=True)
class AdminVenue:
    """Venue row as returned by the admin venue list (snake_case)."""

    id: str
    name: str
    location: str = ''
    description: str = ''
    phone: str = ''
    email: str = ''
    price_per_hour: Optional[float] = None
    field_type: str = ''
    field_size: str = ''
    has_parking: bool = False
    has_locker_room: bool = False
    has_lighting: bool = False
    opening_time: str = ''
    closing_time: str = ''
    is_active: bool = True
    owner_id: Optional[str] = None

    def to_payload(self) -> Dict[str, Any]:
        """Full update body; the admin update endpoint overwrites every column."""
        return {
            'name': self.name,
            'description': self.description,
            'location': self.location,
            'phone': self.phone,
            'email': self.email,
            'pricePerHour': self.price_per_hour,
            'fieldType': self.field_type,
            'fieldSize': self.field_size,
            'hasParking': self.has_parking,
            'hasLockerRoom': self.has_locker_room,
            'hasLighting': self.has_lighting,
            'openingTime': self.opening_time,
            'closingTime': self.closing_time,
            'isActive': self.is_active,
        }

    @classmethod
    def from_api(cls, payload: Mapping[str, Any]) -> 'AdminVenue':
        owner = _pick(payload, 'owner_id', 'ownerId')
        return cls(
            id=str(payload.get('id') or ''),
            name=str(payload.get('name') or ''),
            location=str(_pick(payload, 'location', 'address', default='')),
            description=str(payload.get('description') or ''),
            phone=str(payload.get('phone') or ''),
            email=str(payload.get('email') or ''),
            price_per_hour=_to_float(_pick(payload, 'price_per_hour', 'pricePerHour')),
            field_type=str(_pick(payload, 'field_type', 'fieldType', default='')),
            field_size=str(_pick(payload, 'field_size', 'fieldSize', default='')),
            has_parking=bool(_pick(payload, 'has_parking', 'hasParking', default=False)),
            has_locker_room=bool(_pick(payload, 'has_locker_room', 'hasLockerRoom', default=False)),
            has_lighting=bool(_pick(payload, 'has_lighting', 'hasLighting', default=False)),
            opening_time=_short_time(_pick(payload, 'opening_time', 'openingTime')),
            closing_time=_short_time(_pick(payload, 'closing_time', 'closingTime')),
            is_active=bool(_pick(payload, 'is_active', 'isActive', default=True)),
            owner_id=str(owner) if owner else None,
        )


@dataclass(frozen=True)
class Pagination:
    """Server pagination block: ``{total, page, limit, totalPages}``."""

    total: int
    page: int
    limit: int
    total_pages: int

    @classmethod
    def from_api(cls, payload: Any, *, page: int = 1, limit: int = 20) -> 'Pagination':
        if not isinstance(payload, Mapping):
            return cls(total=0, page=page, limit=limit, total_pages=1)
        return cls(
            total=_to_int(payload.get('total'), 0),
            page=_to_int(payload.get('page'), page),
            limit=_to_int(payload.get('limit'), limit),
            total_pages=max(1, _to_int(_pick(payload, 'totalPages', 'total_pages'), 1)),
        )


@dataclass(frozen=True)
class Page:
    """One page of a server-paginated collection."""

    items: List[Any]
    pagination: Pagination


__all__ = [
    'AdminUser',
    'AdminVenue',
    'BookedSlot',
    'Field',
    'Invitation',
    'JoinRequest',
    'MatchProposal',
    'MyTeam',
    'OpponentListing',
    'Page',
    'Pagination',
    'PlayerCandidate',
    'PlayerRating',
    'PlayerSearchListing',
    'RateablePlayer',
    'Reservation',
    'Team',
    'TeamMember',
    'TeamNotification',
    'Venue',
    'clamp_score',
]
