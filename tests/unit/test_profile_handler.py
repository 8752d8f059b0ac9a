import types

import pytest

from botapp.handlers.profile.handler import ProfileHandler
from botapp.handlers.state import get_session_state
from botapp.i18n import get_translator
from tests.helpers import DummyContext, DummyUpdate, PLAYER_PROFILE, envelope, make_handler_deps

EN = get_translator("en")
RATINGS = {
    "totalRatingsReceived": 3,
    "avgOverall": 72.5,
    "avgSpeed": 80,
    "avgTechnique": 70,
    "avgPassing": 65,
    "avgPhysical": 75,
}


def _telegram_file(content):
    async def download_as_bytearray():
        return bytearray(content)

    async def get_file():
        return types.SimpleNamespace(download_as_bytearray=download_as_bytearray)

    return get_file


@pytest.mark.asyncio
async def test_profile_shows_received_rating_averages(tmp_path):
    harness = make_handler_deps(tmp_path, {
        ("GET", "/auth/profile"): (200, envelope(PLAYER_PROFILE)),
        ("GET", "/ratings/user/u-1"): (200, envelope(RATINGS)),
    })
    handler = ProfileHandler(harness.deps)
    update = DummyUpdate("menu_profile")

    await handler.handle_profile_menu(update, DummyContext())
    await harness.client.aclose()

    text = update.callback_query.edits[-1][0]
    assert EN.t("profile.ratings_title") in text
    assert EN.t("profile.ratings_overall", overall=72.5, count=3) in text
    assert f"{EN.t('ratings.speed')}: 80" in text


@pytest.mark.asyncio
async def test_profile_without_received_ratings_says_so(tmp_path):
    harness = make_handler_deps(tmp_path, {
        ("GET", "/auth/profile"): (200, envelope(PLAYER_PROFILE)),
        ("GET", "/ratings/user/u-1"): (200, envelope({"totalRatingsReceived": 0})),
    })
    handler = ProfileHandler(harness.deps)
    update = DummyUpdate("menu_profile")

    await handler.handle_profile_menu(update, DummyContext())
    await harness.client.aclose()

    assert EN.t("profile.no_ratings") in update.callback_query.edits[-1][0]


@pytest.mark.asyncio
async def test_profile_still_renders_when_ratings_fail(tmp_path):
    harness = make_handler_deps(tmp_path, {
        ("GET", "/auth/profile"): (200, envelope(PLAYER_PROFILE)),
        ("GET", "/ratings/user/u-1"): (500, envelope(success=False, message="Server error")),
    })
    handler = ProfileHandler(harness.deps)
    update = DummyUpdate("menu_profile")

    await handler.handle_profile_menu(update, DummyContext())
    await harness.client.aclose()

    text = update.callback_query.edits[-1][0]
    assert "Server error" not in text
    assert EN.t("profile.ratings_title") not in text


@pytest.mark.asyncio
async def test_profile_ratings_with_expired_session_redirect_once(tmp_path):
    harness = make_handler_deps(tmp_path, {
        ("GET", "/auth/profile"): (200, envelope(PLAYER_PROFILE)),
        ("GET", "/ratings/user/u-1"): (401, envelope(success=False, message="Token expired")),
    })
    handler = ProfileHandler(harness.deps)
    update = DummyUpdate("menu_profile")

    await handler.handle_profile_menu(update, DummyContext())
    await harness.client.aclose()

    assert harness.redirects == [1]
    assert update.callback_query.edits == []


@pytest.mark.asyncio
async def test_non_image_document_is_rejected_before_download(tmp_path):
    harness = make_handler_deps(tmp_path, {})
    handler = ProfileHandler(harness.deps)
    context = DummyContext()
    get_session_state(context).pending_input = "profile_photo"
    update = DummyUpdate(text="")

    async def refuse_download():
        raise AssertionError("document should not be downloaded")

    update.message.document = types.SimpleNamespace(
        file_size=2048, mime_type="application/pdf", file_name="cv.pdf", file_unique_id="doc-1", get_file=refuse_download,
    )

    await handler.handle_photo_upload(update, context)
    await harness.client.aclose()

    assert harness.backend.requests == []
    assert get_session_state(context).pending_input == "profile_photo"
    assert EN.t("validation.upload_not_image") in update.message.replies[0][0]


@pytest.mark.asyncio
async def test_photo_upload_posts_largest_size_as_jpeg(tmp_path):
    harness = make_handler_deps(tmp_path, {
        ("POST", "/users/profile-picture"): (200, envelope({"profilePictureUrl": "/uploads/p.jpg"})),
        ("GET", "/auth/profile"): (200, envelope(PLAYER_PROFILE)),
        ("GET", "/ratings/user/u-1"): (200, envelope({"totalRatingsReceived": 0})),
    })
    handler = ProfileHandler(harness.deps)
    context = DummyContext()
    get_session_state(context).pending_input = "profile_photo"
    update = DummyUpdate(text="")
    update.message.photo = [
        types.SimpleNamespace(file_size=100, file_unique_id="small", get_file=_telegram_file(b"s")),
        types.SimpleNamespace(file_size=900, file_unique_id="large", get_file=_telegram_file(b"\xff\xd8large")),
    ]

    await handler.handle_photo_upload(update, context)
    await harness.client.aclose()

    body = harness.backend.calls("POST", "/users/profile-picture")[0].content
    assert b'name="profilePicture"; filename="large.jpg"' in body
    assert b"\xff\xd8large" in body
    assert get_session_state(context).pending_input is None
    assert harness.toast.messages == [EN.t("profile.picture_uploaded")]
