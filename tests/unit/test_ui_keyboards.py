from api.models import AdminVenue, PlayerSearchListing, Reservation
from availability.resolver import AvailabilityResult
from availability.slots import SlotCandidate
from botapp.ui.admin import create_admin_venue_detail_keyboard, create_admin_venues_keyboard
from botapp.ui.booking import create_duration_keyboard, create_slot_keyboard
from botapp.ui.menus import create_main_menu_keyboard, create_pagination_row
from botapp.ui.player_search import create_player_search_keyboard
from botapp.ui.reservations import create_reservations_keyboard
from listing.pagination import PageState


def _callbacks(markup):
    return [[button.callback_data for button in row] for row in markup.inline_keyboard]


def test_slot_keyboard_keeps_taken_slots_inert():
    starts = ["08:00", "09:00", "10:00", "11:00", "12:00"]
    result = AvailabilityResult(
        field_id="f-1",
        date="2025-06-02",
        slots=[SlotCandidate(start, start, start not in ("09:00", "10:00")) for start in starts],
    )

    rows = _callbacks(create_slot_keyboard(result, "en"))

    assert rows[0] == ["book_slot_08:00", "noop", "noop", "book_slot_11:00"]
    assert rows[1] == ["book_slot_12:00"]
    assert rows[-1] == ["book_dates"]


def test_duration_keyboard_prices_each_option():
    markup = create_duration_keyboard(2, 500.0, "en")

    labels = [row[0].text for row in markup.inline_keyboard]
    assert labels[:2] == ["1 h · 500 ₺", "2 h · 1000 ₺"]
    assert _callbacks(markup)[:2] == [["book_hours_1"], ["book_hours_2"]]


def test_pagination_row_disables_edges():
    first = create_pagination_row("venues", PageState(page=1, total=30, total_pages=2), "en")
    last = create_pagination_row("venues", PageState(page=2, total=30, total_pages=2), "en")

    assert [button.callback_data for button in first] == ["noop", "noop", "venues_next"]
    assert first[1].text == "Page 1/2"
    assert [button.callback_data for button in last] == ["venues_prev", "noop", "noop"]


def test_main_menu_shows_admin_and_pending_badge():
    player_menu = _callbacks(create_main_menu_keyboard(False, 0, "en"))
    admin_menu = create_main_menu_keyboard(True, 2, "en")

    assert ["menu_admin"] not in player_menu
    assert ["menu_admin"] in _callbacks(admin_menu)
    assert admin_menu.inline_keyboard[1][0].text == "👥 Teams & Matches (2 invites)"


def test_reservation_period_row_marks_current_and_counts():
    markup = create_reservations_keyboard(
        [Reservation(id="r1", date="2099-01-10", start_time="19:00", end_time="20:00")],
        "en",
        period="upcoming",
        counts={"all": 3, "upcoming": 1, "past": 2},
    )

    period_row = markup.inline_keyboard[0]
    assert [button.callback_data for button in period_row] == ["res_period_all", "res_period_upcoming", "res_period_past"]
    assert period_row[1].text.startswith("✅ ")
    assert period_row[2].text.endswith("(2)")
    assert _callbacks(markup)[1] == ["res_view_r1"]


def test_player_search_keyboard_hides_full_listings_and_offers_clear():
    listings = [
        PlayerSearchListing(id="open", players_needed=2, joined_count=1),
        PlayerSearchListing(id="full", players_needed=2, joined_count=2),
        PlayerSearchListing(id="mine", players_needed=2, joined_count=2),
    ]

    unfiltered = _callbacks(create_player_search_keyboard(listings, {"mine"}, {}, "en"))
    filtered = _callbacks(create_player_search_keyboard(listings, set(), {"city": "İstanbul"}, "en"))

    assert unfiltered[:2] == [["ps_join_open"], ["ps_leave_mine"]]
    assert ["ps_filter_city", "ps_filter_district", "ps_filter_playerPosition"] in unfiltered
    assert ["ps_filter_clear"] not in unfiltered
    assert ["ps_filter_clear"] in filtered


def test_admin_venue_keyboards_mark_inactive_and_toggle_label():
    active = AdminVenue(id="v1", name="Arena")
    inactive = AdminVenue(id="v2", name="Moda", is_active=False)

    listing = create_admin_venues_keyboard([active, inactive], PageState(page=1, total=2, total_pages=1), "en")
    detail = create_admin_venue_detail_keyboard(inactive, "en")

    assert [row[0].text for row in listing.inline_keyboard[:2]] == ["🏟️ Arena", "🏟️ Moda 🚫"]
    assert ["admin_vcreate"] in _callbacks(listing)
    assert detail.inline_keyboard[0][0].callback_data == "admin_vtoggle"
    assert detail.inline_keyboard[0][0].text != create_admin_venue_detail_keyboard(active, "en").inline_keyboard[0][0].text
